import asyncio
import logging
import time
import weakref
from decimal import Decimal
from typing import Any

import httpx

from ..config.settings import Settings, get_settings
from ..domain.exceptions import InvalidAPIResponseError, MalformedResponseError
from .context import RequestContext

logger = logging.getLogger(__name__)


class ExchangeRateTransport:
	"""Issues one GET per call against the exchangerate.host API."""

	def __init__(self, settings: Settings | None = None, client: httpx.AsyncClient | None = None):
		self.settings = settings or get_settings()
		self.base_url = self.settings.BASE_URL.rstrip('/')
		self._owns_client = client is None
		self._client = client or httpx.AsyncClient(
			timeout=httpx.Timeout(self.settings.TIMEOUT),
			headers={'accept': 'application/json'},
		)

	def _build_url(self, endpoint: str) -> str:
		return f'{self.base_url}/{endpoint.lstrip("/")}'

	async def get(
		self,
		endpoint: str,
		params: dict[str, str] | None = None,
		context: RequestContext | None = None,
	) -> dict[str, Any]:
		"""Fetch ``endpoint`` and return the decoded JSON object.

		Raises InvalidAPIResponseError when ``success`` is missing or false and
		MalformedResponseError when the body is not a JSON object. httpx errors
		and JSON decode errors are not wrapped.
		"""
		query = dict(params or {})
		if self.settings.ACCESS_KEY:
			query['access_key'] = self.settings.ACCESS_KEY
		url = self._build_url(endpoint)

		start_time = time.monotonic()
		if context is None:
			response = await self._client.get(url, params=query)
		else:
			response = await context.run(lambda: self._client.get(url, params=query))
		response_time_ms = int((time.monotonic() - start_time) * 1000)

		logger.debug(
			f'GET {endpoint} -> HTTP {response.status_code} in {response_time_ms}ms',
			extra={
				'extra_data': {
					'endpoint': endpoint,
					'params': params or {},
					'http_status_code': response.status_code,
					'response_time_ms': response_time_ms,
				}
			},
		)

		try:
			data = response.json(parse_float=Decimal)
		except ValueError:
			response.raise_for_status()
			raise

		if not isinstance(data, dict):
			raise MalformedResponseError(endpoint, f'expected a JSON object, got {type(data).__name__}')

		if data.get('success') is not True:
			error = data.get('error')
			if not isinstance(error, dict):
				error = {}
			logger.warning(
				f'exchangerate.host reported failure on {endpoint}: {error.get("info", "no detail")}',
				extra={'extra_data': {'endpoint': endpoint, 'error': error}},
			)
			raise InvalidAPIResponseError(
				endpoint,
				code=error.get('code'),
				error_type=error.get('type'),
				info=error.get('info'),
			)

		return data

	async def aclose(self) -> None:
		"""Close the HTTP client if this transport created it."""
		if self._owns_client:
			await self._client.aclose()

	async def __aenter__(self) -> 'ExchangeRateTransport':
		return self

	async def __aexit__(self, *exc_info) -> None:
		await self.aclose()


# One shared transport per event loop; an httpx pool cannot outlive its loop.
_default_transports: 'weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, ExchangeRateTransport]' = (
	weakref.WeakKeyDictionary()
)


def get_default_transport() -> ExchangeRateTransport:
	"""Return the transport shared by every Exchange on the running loop."""
	loop = asyncio.get_running_loop()
	transport = _default_transports.get(loop)
	if transport is None:
		transport = ExchangeRateTransport()
		_default_transports[loop] = transport
	return transport


async def close_default_transport() -> None:
	transport = _default_transports.pop(asyncio.get_running_loop(), None)
	if transport is not None:
		await transport.aclose()
