import logging
from pathlib import Path
from BackEnd.core.errors import PersistenceError

logger = logging.getLogger(__name__)

HEADERS = ["Subject", "Duration", "Time Unit", "Date", "Notes", "Timestamp"]

def _quote(text, escape_quotes):
	text = text or ""
	if escape_quotes:
		text = text.replace('"', '""')
	return f'"{text}"'

def to_tabular(sessions, escape_quotes=False):
	"""
	CSV text: header row, then one row per session in collection order.
	Subject and notes are quoted. Embedded quotes are left as-is unless
	escape_quotes is set, which doubles them.
	"""
	lines = [",".join(HEADERS)]
	for s in sessions:
		lines.append(",".join([
			_quote(s.subject, escape_quotes),
			str(s.duration),
			s.time_unit,
			s.date.isoformat(),
			_quote(s.notes, escape_quotes),
			s.timestamp,
		]))
	return "\n".join(lines)

def export_filename(today):
	return f"study-tracker-{today.isoformat()}.csv"

def write_export(path, sessions, escape_quotes=False):
	"""Write the CSV to path. Raises PersistenceError on OS errors."""
	path = Path(path)
	try:
		path.write_text(to_tabular(sessions, escape_quotes), encoding="utf-8")
	except OSError as e:
		raise PersistenceError(f"could not write export to {path}: {e}") from e
	logger.info("Exported study sessions to %s", path)
	return path
