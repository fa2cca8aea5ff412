import logging
from BackEnd.core import clock
from BackEnd.core.duration import TIME_UNITS, MINUTES
from BackEnd.core.errors import ValidationError, PersistenceError
from BackEnd.models.study_session import StudySession
from BackEnd.repos import session_repo
from BackEnd.repos.storage_repo import StorageSlot

logger = logging.getLogger(__name__)


def _parse_duration(duration):
	# form fields arrive as text; bools are ints in Python but never valid here
	if isinstance(duration, bool):
		raise ValidationError("duration", "must be a whole number")
	if isinstance(duration, str):
		duration = duration.strip()
		# isdigit() also accepts superscripts and the like, which int() refuses
		try:
			duration = int(duration) if duration.lstrip("-").isdigit() else None
		except ValueError:
			duration = None
	if not isinstance(duration, int):
		raise ValidationError("duration", "must be a whole number")
	if duration <= 0:
		raise ValidationError("duration", "must be greater than zero")
	return duration


class SessionStore:
	"""
	Canonical newest-first list of study sessions.

	Every mutation writes the whole collection through to the storage slot.
	A failed write is logged and otherwise ignored: the in-memory list stays
	authoritative until the next successful write.
	"""

	def __init__(self, slot=None, id_factory=None, now_iso=None):
		self.slot = slot if slot is not None else StorageSlot()
		self._new_id = id_factory or clock.new_session_id
		self._now_iso = now_iso or clock.utc_now_iso
		self._sessions = []
		self.load()

	def __len__(self):
		return len(self._sessions)

	def __iter__(self):
		return iter(tuple(self._sessions))

	def all(self):
		"""Read-only snapshot of the collection, newest first."""
		return tuple(self._sessions)

	def get(self, session_id):
		for s in self._sessions:
			if s.id == session_id:
				return s
		return None

	def add(self, subject, duration, time_unit=MINUTES, date=None, notes=""):
		"""Validate, prepend and persist a new session. Raises ValidationError."""
		subject = (subject or "").strip()
		if not subject:
			raise ValidationError("subject", "must not be empty")
		duration = _parse_duration(duration)
		if time_unit not in TIME_UNITS:
			raise ValidationError("time_unit", f"must be one of {', '.join(TIME_UNITS)}")
		if date is None or date == "":
			study_date = clock.local_today()
		else:
			try:
				study_date = clock.parse_date(date)
			except (TypeError, ValueError):
				raise ValidationError("date", "must be a YYYY-MM-DD date")

		session_id = self._new_id()
		while self.get(session_id) is not None:
			session_id = self._new_id()
		session = StudySession(
			id=session_id,
			subject=subject,
			duration=duration,
			time_unit=time_unit,
			date=study_date,
			notes=(notes or "").strip(),
			timestamp=self._now_iso(),
		)
		self._sessions.insert(0, session)
		logger.info("Added study session %s (%s, %d %s)", session.id, subject, duration, time_unit)
		self.persist()
		return session

	def remove(self, session_id):
		"""Remove a session by id. Returns False if no such session exists."""
		remaining = [s for s in self._sessions if s.id != session_id]
		if len(remaining) == len(self._sessions):
			return False
		self._sessions = remaining
		logger.info("Removed study session %s", session_id)
		self.persist()
		return True

	def clear(self):
		"""Empty the collection. Returns whether the write succeeded."""
		self._sessions = []
		logger.info("Cleared all study sessions")
		return self.persist()

	def replace_all(self, sessions):
		"""Swap in a whole new collection (kept in the given order)."""
		sessions = list(sessions)
		ids = [s.id for s in sessions]
		if len(set(ids)) != len(ids):
			raise ValidationError("id", "session ids must be unique")
		self._sessions = sessions
		self.persist()

	def persist(self):
		"""Write the collection to the slot. Returns False if the write failed."""
		try:
			session_repo.save(self.slot, self._sessions)
		except PersistenceError as e:
			logger.error("Failed to save study sessions: %s", e)
			return False
		return True

	def load(self):
		"""Replace the in-memory collection with the stored one (empty if missing or corrupt)."""
		self._sessions = session_repo.load(self.slot)
		logger.debug("Loaded %d study sessions", len(self._sessions))
		return tuple(self._sessions)
