from dataclasses import dataclass, asdict
from datetime import date

from BackEnd.core.clock import parse_date
from BackEnd.core.duration import TIME_UNITS, to_minutes


@dataclass(frozen=True)
class StudySession:
	id: str
	subject: str
	duration: int
	time_unit: str
	date: date
	notes: str
	timestamp: str

	@property
	def minutes(self) -> int:
		return to_minutes(self.duration, self.time_unit)

	def to_dict(self) -> dict:
		"""Serialize using the key names of the stored browser data."""
		data = asdict(self)
		data["timeUnit"] = data.pop("time_unit")
		data["date"] = self.date.isoformat()
		return data

	@classmethod
	def from_dict(cls, data: dict) -> "StudySession":
		"""Inverse of to_dict; raises KeyError/ValueError/TypeError on bad records."""
		unit = data["timeUnit"]
		if unit not in TIME_UNITS:
			raise ValueError(f"unknown time unit: {unit!r}")
		duration = data["duration"]
		if isinstance(duration, bool) or not isinstance(duration, int):
			raise TypeError("duration must be an integer")
		if duration <= 0:
			raise ValueError(f"duration must be positive: {duration}")
		subject = str(data["subject"]).strip()
		if not subject:
			raise ValueError("subject must not be empty")
		return cls(
			id=str(data["id"]),
			subject=subject,
			duration=duration,
			time_unit=unit,
			date=parse_date(data["date"]),
			notes=str(data.get("notes") or ""),
			timestamp=str(data.get("timestamp") or ""),
		)
