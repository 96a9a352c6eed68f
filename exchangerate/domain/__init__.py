from .exceptions import (
	DeadlineExceededError,
	ExchangeError,
	InvalidAmountError,
	InvalidAPIResponseError,
	InvalidCodeError,
	InvalidDateError,
	InvalidDateFormatError,
	InvalidTimeFrameError,
	MalformedResponseError,
	RequestCancelledError,
	TimeframeExceededError,
	ValidationError,
)
from .models import CodeDataMap, Fluctuation, FluctuationRecord, RateMap, TimeSeriesMap
from .query import Query

__all__ = [
	'CodeDataMap',
	'DeadlineExceededError',
	'ExchangeError',
	'Fluctuation',
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
	'TimeSeriesMap',
	'TimeframeExceededError',
	'ValidationError',
]
