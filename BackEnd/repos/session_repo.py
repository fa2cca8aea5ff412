import json
import logging
from BackEnd.core.errors import PersistenceError
from BackEnd.models.study_session import StudySession

logger = logging.getLogger(__name__)

def dumps(sessions):
	"""Serialize the collection as a JSON array, newest first."""
	try:
		return json.dumps([s.to_dict() for s in sessions], ensure_ascii=False)
	except (TypeError, ValueError) as e:
		raise PersistenceError(f"could not serialize sessions: {e}") from e

def loads(text):
	"""Parse a JSON array back into sessions. Raises PersistenceError if malformed."""
	try:
		raw = json.loads(text)
		if not isinstance(raw, list):
			raise ValueError("stored data is not a list")
		return [StudySession.from_dict(item) for item in raw]
	except (KeyError, TypeError, ValueError) as e:
		raise PersistenceError(f"malformed session data: {e}") from e

def load(slot):
	"""
	Read the whole collection from the slot.
	Missing or corrupt data gives an empty list; the problem is only logged.
	"""
	try:
		text = slot.read()
	except PersistenceError as e:
		logger.error("Failed to load study sessions: %s", e)
		return []
	if not text:
		return []
	try:
		sessions = loads(text)
	except PersistenceError as e:
		logger.warning("Discarding stored study sessions: %s", e)
		return []
	ids = [s.id for s in sessions]
	if len(set(ids)) != len(ids):
		logger.warning("Discarding stored study sessions: duplicate ids")
		return []
	return sessions

def save(slot, sessions):
	"""Overwrite the slot with the given collection. Raises PersistenceError."""
	slot.write(dumps(sessions))
