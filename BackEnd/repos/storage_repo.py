import sqlite3
from pathlib import Path
from BackEnd.core.paths import db_path, STORAGE_KEY
from BackEnd.core.clock import utc_now_iso
from BackEnd.core.errors import PersistenceError

SCHEMA_PATH = Path(__file__).parent.parent / "SQL" / "schema.sql"

def connect(dbfile=None):
	"""Open SQLite connection and ensure schema is applied."""
	conn = sqlite3.connect(dbfile or db_path())
	conn.row_factory = sqlite3.Row
	with open(SCHEMA_PATH, encoding="utf-8") as f:
		conn.executescript(f.read())
	return conn


class StorageSlot:
	"""A single key in the local key-value table, overwritten wholesale on write."""

	def __init__(self, key=STORAGE_KEY, dbfile=None):
		self.key = key
		self.dbfile = Path(dbfile) if dbfile else None

	def read(self):
		"""Return the stored text, or None when the key was never written."""
		try:
			conn = connect(self.dbfile)
			try:
				row = conn.execute("SELECT value FROM storage WHERE key=?", (self.key,)).fetchone()
			finally:
				conn.close()
		except (sqlite3.Error, OSError) as e:
			raise PersistenceError(f"could not read {self.key!r}: {e}") from e
		return row["value"] if row else None

	def write(self, value):
		try:
			conn = connect(self.dbfile)
			try:
				with conn:
					conn.execute(
						"""
						INSERT INTO storage (key, value, updated_at) VALUES (?, ?, ?)
						ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
						""",
						(self.key, value, utc_now_iso())
					)
			finally:
				conn.close()
		except (sqlite3.Error, OSError) as e:
			raise PersistenceError(f"could not write {self.key!r}: {e}") from e

