import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from ..config.settings import Settings, get_settings
from ..domain.exceptions import ValidationError
from ..domain.models import CodeDataMap, FluctuationRecord, RateMap, TimeSeriesMap
from ..domain.query import Query
from ..domain.validators import DateLike, validate_code, validate_date
from ..infrastructure import decoders
from ..infrastructure.context import RequestContext
from ..infrastructure.endpoints import (
	CONVERT,
	CRYPTOCURRENCIES,
	FLUCTUATION,
	LATEST,
	SOURCES,
	SYMBOLS,
	TIMESERIES,
)
from ..infrastructure.transport import ExchangeRateTransport, get_default_transport

logger = logging.getLogger(__name__)

Amount = Decimal | int | float


class Exchange:
	"""Entry point for rates, conversions and catalogues, relative to ``base``.

	Every method performs at most one request. Invalid input raises a
	ValidationError subclass before anything is sent. ``source`` selects the
	upstream data source (e.g. ``ecb``, ``crypto``) and ``places`` the number of
	decimal places the API rounds to; both are omitted unless given.
	"""

	def __init__(
		self,
		base: str | None = None,
		*,
		transport: ExchangeRateTransport | None = None,
		context: RequestContext | None = None,
		settings: Settings | None = None,
	):
		if transport is None and settings is not None:
			transport = ExchangeRateTransport(settings=settings)
			self._owns_transport = True
		else:
			self._owns_transport = False
		self._transport = transport
		self.base = base if base is not None else (settings or get_settings()).DEFAULT_BASE
		self.context = context

	@property
	def transport(self) -> ExchangeRateTransport:
		if self._transport is not None:
			return self._transport
		return get_default_transport()

	def set_base(self, base: str) -> None:
		self.base = validate_code(base)

	def set_context(self, context: RequestContext | None) -> None:
		self.context = context

	async def _get(self, endpoint: str, query: Query | None = None) -> dict[str, Any]:
		try:
			params = query.to_params() if query is not None else {}
		except ValidationError as e:
			logger.debug(f'Rejected {endpoint} request before dispatch: {e}')
			raise
		return await self.transport.get(endpoint, params, context=self.context)

	# Conversion

	async def convert_to(
		self, target: str, amount: Amount, *, source: str | None = None, places: int | None = None
	) -> Decimal:
		query = Query(from_=self.base, to=target, amount=amount, source=source, places=places)
		return decoders.decode_result(await self._get(CONVERT, query))

	async def convert_at(
		self,
		date: DateLike,
		target: str,
		amount: Amount,
		*,
		source: str | None = None,
		places: int | None = None,
	) -> Decimal:
		query = Query(from_=self.base, to=target, amount=amount, date=date, source=source, places=places)
		return decoders.decode_result(await self._get(CONVERT, query))

	# Latest rates

	async def _latest(self, symbols: Iterable[str], source: str | None, places: int | None) -> RateMap:
		query = Query(base=self.base, symbols=tuple(symbols), source=source, places=places)
		return decoders.decode_rates(await self._get(LATEST, query))

	async def latest_rates_single(
		self, code: str, *, source: str | None = None, places: int | None = None
	) -> Decimal:
		rates = await self._latest([code], source, places)
		return decoders.pick(rates, code, LATEST)

	async def latest_rates_multiple(
		self, codes: Iterable[str], *, source: str | None = None, places: int | None = None
	) -> RateMap:
		return await self._latest(codes, source, places)

	async def latest_rates_all(self, *, source: str | None = None, places: int | None = None) -> RateMap:
		return await self._latest((), source, places)

	# Historical rates

	async def _historical(
		self, date: DateLike, symbols: Iterable[str], source: str | None, places: int | None
	) -> RateMap:
		endpoint = validate_date(date)
		query = Query(base=self.base, symbols=tuple(symbols), source=source, places=places)
		return decoders.decode_rates(await self._get(endpoint, query), endpoint)

	async def historical_rates_single(
		self, date: DateLike, code: str, *, source: str | None = None, places: int | None = None
	) -> Decimal:
		rates = await self._historical(date, [code], source, places)
		return decoders.pick(rates, code, validate_date(date))

	async def historical_rates_multiple(
		self, date: DateLike, codes: Iterable[str], *, source: str | None = None, places: int | None = None
	) -> RateMap:
		return await self._historical(date, codes, source, places)

	async def historical_rates_all(
		self, date: DateLike, *, source: str | None = None, places: int | None = None
	) -> RateMap:
		return await self._historical(date, (), source, places)

	# Timeseries

	async def _timeseries(
		self, start: DateLike, end: DateLike, symbols: Iterable[str], source: str | None, places: int | None
	) -> TimeSeriesMap:
		query = Query(
			base=self.base, symbols=tuple(symbols), time_frame=(start, end), source=source, places=places
		)
		return decoders.decode_timeseries(await self._get(TIMESERIES, query))

	async def timeseries_single(
		self, start: DateLike, end: DateLike, code: str, *, source: str | None = None, places: int | None = None
	) -> dict[str, Decimal]:
		"""Return the rate of ``code`` for each day between ``start`` and ``end``."""
		series = await self._timeseries(start, end, [code], source, places)
		return {day: decoders.pick(rates, code, TIMESERIES) for day, rates in series.items()}

	async def timeseries_multiple(
		self,
		start: DateLike,
		end: DateLike,
		codes: Iterable[str],
		*,
		source: str | None = None,
		places: int | None = None,
	) -> TimeSeriesMap:
		return await self._timeseries(start, end, codes, source, places)

	async def timeseries_all(
		self, start: DateLike, end: DateLike, *, source: str | None = None, places: int | None = None
	) -> TimeSeriesMap:
		return await self._timeseries(start, end, (), source, places)

	# Fluctuation

	async def _fluctuation(
		self, start: DateLike, end: DateLike, symbols: Iterable[str], source: str | None, places: int | None
	) -> dict[str, FluctuationRecord]:
		query = Query(
			base=self.base, symbols=tuple(symbols), time_frame=(start, end), source=source, places=places
		)
		return decoders.decode_fluctuation(await self._get(FLUCTUATION, query))

	async def fluctuation_single(
		self, start: DateLike, end: DateLike, code: str, *, source: str | None = None, places: int | None = None
	) -> FluctuationRecord:
		records = await self._fluctuation(start, end, [code], source, places)
		return decoders.pick(records, code, FLUCTUATION)

	async def fluctuation_multiple(
		self,
		start: DateLike,
		end: DateLike,
		codes: Iterable[str],
		*,
		source: str | None = None,
		places: int | None = None,
	) -> dict[str, FluctuationRecord]:
		return await self._fluctuation(start, end, codes, source, places)

	async def fluctuation_all(
		self, start: DateLike, end: DateLike, *, source: str | None = None, places: int | None = None
	) -> dict[str, FluctuationRecord]:
		return await self._fluctuation(start, end, (), source, places)

	# Catalogues

	async def _catalog(self, key: str) -> CodeDataMap:
		return decoders.decode_catalog(await self._get(key), key)

	async def forex_data(self) -> CodeDataMap:
		return await self._catalog(SYMBOLS)

	async def forex_codes(self) -> list[str]:
		return sorted(await self.forex_data())

	async def crypto_data(self) -> CodeDataMap:
		return await self._catalog(CRYPTOCURRENCIES)

	async def crypto_codes(self) -> list[str]:
		return sorted(await self.crypto_data())

	async def sources_data(self) -> CodeDataMap:
		return await self._catalog(SOURCES)

	async def sources(self) -> list[str]:
		return sorted(await self.sources_data())

	async def close(self) -> None:
		if self._owns_transport and self._transport is not None:
			await self._transport.aclose()

	async def __aenter__(self) -> 'Exchange':
		return self

	async def __aexit__(self, *exc_info) -> None:
		await self.close()
