import re
from datetime import date, datetime, timedelta
from typing import Iterable

from .exceptions import (
	InvalidCodeError,
	InvalidDateError,
	InvalidDateFormatError,
	InvalidTimeFrameError,
	TimeframeExceededError,
)

DATE_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])-[0-3][0-9]")
OLDEST_DATE = date(1999, 1, 3)
# Just under 365 days; a span of exactly 365 days is rejected.
MAX_TIMEFRAME = timedelta(hours=8759.992992006)

DateLike = str | date


def validate_code(code: str) -> str:
	if not isinstance(code, str) or len(code) != 3:
		raise InvalidCodeError(code)
	return code


def validate_symbols(codes: Iterable[str]) -> list[str]:
	return [validate_code(code) for code in codes]


def parse_date(value: DateLike) -> date:
	"""Parse a ``YYYY-MM-DD`` string (or pass through a ``date``) without range checks."""
	if isinstance(value, datetime):
		return value.date()
	if isinstance(value, date):
		return value
	if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
		raise InvalidDateFormatError(value)
	try:
		return date.fromisoformat(value)
	except ValueError as e:
		raise InvalidDateFormatError(value) from e


def validate_date(value: DateLike) -> str:
	"""Validate a single date and return it in ``YYYY-MM-DD`` form."""
	parsed = parse_date(value)
	if parsed < OLDEST_DATE:
		raise InvalidDateError(parsed.isoformat())
	return parsed.isoformat()


def validate_time_frame(start: DateLike, end: DateLike) -> tuple[str, str]:
	start_date = parse_date(start)
	end_date = parse_date(end)
	if end_date < start_date:
		raise InvalidTimeFrameError(start_date.isoformat(), end_date.isoformat())
	if end_date - start_date > MAX_TIMEFRAME:
		raise TimeframeExceededError(start_date.isoformat(), end_date.isoformat())
	return start_date.isoformat(), end_date.isoformat()
