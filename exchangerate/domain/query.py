from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidAmountError
from .validators import (
	DateLike,
	validate_code,
	validate_date,
	validate_symbols,
	validate_time_frame,
)


def format_amount(amount: Decimal | int | float) -> str:
	"""Render an amount as plain decimal text, e.g. ``Decimal('2.50')`` -> ``'2.5'``."""
	if isinstance(amount, bool):
		raise InvalidAmountError(amount)
	try:
		value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
	except (InvalidOperation, ValueError) as e:
		raise InvalidAmountError(amount) from e
	if not value.is_finite() or value <= 0:
		raise InvalidAmountError(amount)
	return format(value.normalize(), "f")


@dataclass(frozen=True)
class Query:
	"""Parameters of a single API request.

	Fields are checked when the query is rendered, not when it is built, so a
	query may be assembled step by step with ``dataclasses.replace``.
	"""

	base: str | None = None
	from_: str | None = None
	to: str | None = None
	amount: Decimal | int | float | None = None
	symbols: tuple[str, ...] = ()
	date: DateLike | None = None
	time_frame: tuple[DateLike, DateLike] | None = None
	source: str | None = None
	places: int | None = None

	def to_params(self) -> dict[str, str]:
		params: dict[str, str] = {}

		if self.base:
			params["base"] = validate_code(self.base)
		if self.from_:
			params["from"] = validate_code(self.from_)
		if self.to:
			params["to"] = validate_code(self.to)

		if self.amount is not None:
			params["amount"] = format_amount(self.amount)

		if self.symbols:
			codes = validate_symbols(self.symbols)
			params["symbols"] = ",".join(dict.fromkeys(codes))

		if self.date:
			params["date"] = validate_date(self.date)

		if self.time_frame:
			start, end = self.time_frame
			validate_date(start)
			validate_date(end)
			params["start_date"], params["end_date"] = validate_time_frame(start, end)

		if self.source:
			params["source"] = self.source
		if self.places is not None:
			params["places"] = str(self.places)

		return params
