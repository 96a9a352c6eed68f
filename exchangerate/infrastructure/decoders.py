"""
Typed decoding of exchangerate.host payloads.

Every endpoint has its own schema; a payload that does not fit raises
MalformedResponseError and nothing is returned, so callers never see a
partially filled map.
"""

import logging
from decimal import Decimal
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict

from ..domain.exceptions import MalformedResponseError
from ..domain.models import CodeDataMap, Fluctuation, FluctuationRecord, RateMap, TimeSeriesMap

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class _Response(BaseModel):
	model_config = ConfigDict(extra="ignore")


class SymbolsResponse(_Response):
	symbols: CodeDataMap


class CryptocurrenciesResponse(_Response):
	cryptocurrencies: CodeDataMap


class SourcesResponse(_Response):
	sources: CodeDataMap


class RatesResponse(_Response):
	base: str | None = None
	date: str | None = None
	rates: RateMap


class ConvertResponse(_Response):
	date: str | None = None
	result: Decimal


class TimeseriesResponse(_Response):
	start_date: str | None = None
	end_date: str | None = None
	rates: TimeSeriesMap


class FluctuationResponse(_Response):
	start_date: str | None = None
	end_date: str | None = None
	rates: dict[str, Fluctuation]


CATALOG_SCHEMAS: dict[str, type[_Response]] = {
	"symbols": SymbolsResponse,
	"cryptocurrencies": CryptocurrenciesResponse,
	"sources": SourcesResponse,
}


def _describe(error: pydantic.ValidationError) -> str:
	first = error.errors()[0]
	location = ".".join(str(part) for part in first["loc"]) or "<root>"
	return f"{location}: {first['msg']}"


def _validate(schema: type[SchemaT], payload: dict[str, Any], endpoint: str) -> SchemaT:
	try:
		return schema.model_validate(payload)
	except pydantic.ValidationError as e:
		reason = _describe(e)
		logger.error(
			f"Unexpected {endpoint} payload shape: {reason}",
			extra={"extra_data": {"endpoint": endpoint, "error_count": e.error_count()}},
		)
		raise MalformedResponseError(endpoint, reason) from e


def decode_catalog(payload: dict[str, Any], key: str) -> CodeDataMap:
	"""Decode ``{"<key>": {"<code>": {<string fields>}}}``."""
	schema = CATALOG_SCHEMAS[key]
	return getattr(_validate(schema, payload, key), key)


def decode_rates(payload: dict[str, Any], endpoint: str = "latest") -> RateMap:
	return _validate(RatesResponse, payload, endpoint).rates


def decode_result(payload: dict[str, Any], endpoint: str = "convert") -> Decimal:
	return _validate(ConvertResponse, payload, endpoint).result


def decode_timeseries(payload: dict[str, Any], endpoint: str = "timeseries") -> TimeSeriesMap:
	return _validate(TimeseriesResponse, payload, endpoint).rates


def decode_fluctuation(
	payload: dict[str, Any], endpoint: str = "fluctuation"
) -> dict[str, FluctuationRecord]:
	rates = _validate(FluctuationResponse, payload, endpoint).rates
	return {code: fluctuation.as_record() for code, fluctuation in rates.items()}


def pick(values: dict[str, Any], key: str, endpoint: str) -> Any:
	"""Return ``values[key]``, treating a missing key as a malformed response."""
	try:
		return values[key]
	except KeyError as e:
		raise MalformedResponseError(endpoint, f"missing entry for {key}") from e
