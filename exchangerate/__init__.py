import logging

from .application import Exchange
from .config import Settings, get_settings
from .domain import (
	CodeDataMap,
	DeadlineExceededError,
	ExchangeError,
	FluctuationRecord,
	InvalidAmountError,
	InvalidAPIResponseError,
	InvalidCodeError,
	InvalidDateError,
	InvalidDateFormatError,
	InvalidTimeFrameError,
	MalformedResponseError,
	Query,
	RateMap,
	RequestCancelledError,
	TimeSeriesMap,
	TimeframeExceededError,
	ValidationError,
)
from .domain.validators import validate_code, validate_date, validate_symbols, validate_time_frame
from .infrastructure import ExchangeRateTransport, RequestContext, close_default_transport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
	'CodeDataMap',
	'DeadlineExceededError',
	'Exchange',
	'ExchangeError',
	'ExchangeRateTransport',
	'FluctuationRecord',
	'InvalidAmountError',
	'InvalidAPIResponseError',
	'InvalidCodeError',
	'InvalidDateError',
	'InvalidDateFormatError',
	'InvalidTimeFrameError',
	'MalformedResponseError',
	'Query',
	'RateMap',
	'RequestCancelledError',
	'RequestContext',
	'Settings',
	'TimeSeriesMap',
	'TimeframeExceededError',
	'ValidationError',
	'close_default_transport',
	'get_settings',
	'validate_code',
	'validate_date',
	'validate_symbols',
	'validate_time_frame',
]
