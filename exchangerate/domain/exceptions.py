class ExchangeError(Exception):
	pass


class ValidationError(ExchangeError):
	pass


class InvalidCodeError(ValidationError):
	def __init__(self, code: str):
		self.code = code
		super().__init__(f"Invalid currency code: {code!r}")


class InvalidDateFormatError(ValidationError):
	def __init__(self, date: str):
		self.date = date
		super().__init__(f"Date format must be YYYY-MM-DD, got {date!r}")


class InvalidDateError(ValidationError):
	def __init__(self, date: str):
		self.date = date
		super().__init__(f"Oldest possible date is 1999-01-03, got {date}")


class InvalidTimeFrameError(ValidationError):
	def __init__(self, start: str, end: str):
		self.start = start
		self.end = end
		super().__init__(f"Start date {start} must not be after end date {end}")


class TimeframeExceededError(ValidationError):
	def __init__(self, start: str, end: str):
		self.start = start
		self.end = end
		super().__init__(f"Maximum allowed timeframe is 365 days ({start} -> {end})")


class InvalidAmountError(ValidationError):
	def __init__(self, amount):
		self.amount = amount
		super().__init__(f"Amount must be a positive number, got {amount!r}")


class InvalidAPIResponseError(ExchangeError):
	"""The upstream API answered with ``success`` missing or false."""

	def __init__(
		self,
		endpoint: str,
		code: int | None = None,
		error_type: str | None = None,
		info: str | None = None,
	):
		self.endpoint = endpoint
		self.code = code
		self.error_type = error_type
		self.info = info
		detail = info or error_type or "Unknown API error"
		if code is not None:
			detail = f"{detail} (code {code})"
		super().__init__(f"exchangerate.host API error on {endpoint}: {detail}")


class MalformedResponseError(ExchangeError):
	def __init__(self, endpoint: str, reason: str):
		self.endpoint = endpoint
		self.reason = reason
		super().__init__(f"Malformed response from {endpoint}: {reason}")


class RequestCancelledError(ExchangeError):
	pass


class DeadlineExceededError(RequestCancelledError):
	pass
