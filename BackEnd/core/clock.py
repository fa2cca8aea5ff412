import time
from datetime import date, datetime, timezone

_last_id = 0

def utc_now_iso():
	"""Return current UTC time as ISO8601 string with millisecond precision and a Z suffix."""
	now = datetime.now(timezone.utc)
	return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"

def local_today():
	"""Return the local calendar date."""
	return datetime.now().date()

def parse_date(value):
	"""Accept a date or a YYYY-MM-DD string and return a date."""
	if isinstance(value, datetime):
		return value.date()
	if isinstance(value, date):
		return value
	return date.fromisoformat(str(value).strip())

def new_session_id():
	"""Return a millisecond timestamp token, bumped so ids never repeat in-process."""
	global _last_id
	candidate = time.time_ns() // 1_000_000
	if candidate <= _last_id:
		candidate = _last_id + 1
	_last_id = candidate
	return str(candidate)
