from decimal import Decimal

from pydantic import BaseModel, ConfigDict

RateMap = dict[str, Decimal]
TimeSeriesMap = dict[str, RateMap]
CodeDataMap = dict[str, dict[str, str]]
FluctuationRecord = dict[str, Decimal]


class Fluctuation(BaseModel):
	"""Change of one rate between the start and end of a time frame."""

	model_config = ConfigDict(frozen=True, extra="ignore")

	start_rate: Decimal
	end_rate: Decimal
	change: Decimal
	change_pct: Decimal

	def as_record(self) -> FluctuationRecord:
		return {
			"start_rate": self.start_rate,
			"end_rate": self.end_rate,
			"change": self.change,
			"change_pct": self.change_pct,
		}
