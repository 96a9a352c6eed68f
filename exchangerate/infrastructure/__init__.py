from .context import RequestContext
from .transport import ExchangeRateTransport, close_default_transport, get_default_transport

__all__ = ['ExchangeRateTransport', 'RequestContext', 'close_default_transport', 'get_default_transport']
