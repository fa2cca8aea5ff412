MINUTES = "minutes"
HOURS = "hours"
TIME_UNITS = (MINUTES, HOURS)

def to_minutes(duration, unit):
	"""Normalize a (duration, unit) pair to whole minutes."""
	if unit == MINUTES:
		return int(duration)
	if unit == HOURS:
		return int(duration) * 60
	raise ValueError(f"unknown time unit: {unit!r}")

def format_minutes(minutes):
	"""Format minutes as '45 min', '2h' or '1h 30m'."""
	minutes = int(minutes)
	if minutes < 60:
		return f"{minutes} min"
	hours = minutes // 60
	remainder = minutes % 60
	if remainder:
		return f"{hours}h {remainder}m"
	return f"{hours}h"
