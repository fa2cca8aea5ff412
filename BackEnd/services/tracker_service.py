import logging
from PySide6.QtCore import QObject, Signal
from BackEnd.core import clock
from BackEnd.core.duration import MINUTES
from BackEnd.core.errors import ValidationError, PersistenceError
from BackEnd.services import aggregator, export_formatter, filter_engine
from BackEnd.services.filter_engine import FilterCriteria
from BackEnd.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class TrackerService(QObject):
	changed = Signal()  # collection or filter changed; views should refresh
	notify = Signal(str, str)  # message, kind ('success', 'error', 'info')

	def __init__(self, store=None, today=None):
		super().__init__()
		self.store = store if store is not None else SessionStore()
		self.criteria = FilterCriteria()
		self._today = today or clock.local_today

	def today(self):
		return self._today()

	# commands

	def add_session(self, subject, duration, time_unit=MINUTES, date=None, notes=""):
		try:
			session = self.store.add(subject, duration, time_unit, date, notes)
		except ValidationError as e:
			logger.info("Rejected study session: %s", e)
			self.notify.emit("Please fill in all required fields correctly.", "error")
			return None
		self.changed.emit()
		self.notify.emit("Study session added successfully!", "success")
		return session

	def delete_session(self, session_id):
		removed = self.store.remove(session_id)
		if removed:
			self.changed.emit()
			self.notify.emit("Study session deleted successfully!", "success")
		return removed

	def set_filters(self, subject_substring="", exact_date=None):
		self.criteria = FilterCriteria((subject_substring or "").strip(), exact_date)
		self.changed.emit()

	def clear_filters(self):
		self.criteria = FilterCriteria()
		self.changed.emit()

	def clear_all(self):
		"""Drop every session. Asking the user first is the caller's job."""
		saved = self.store.clear()
		self.changed.emit()
		if saved:
			self.notify.emit("All study sessions cleared!", "success")
		else:
			self.notify.emit("Sessions cleared, but saving failed. See the log for details.", "error")
		return saved

	def export_csv(self, path, escape_quotes=False):
		sessions = self.store.all()
		if not sessions:
			self.notify.emit("No data to export.", "error")
			return None
		try:
			written = export_formatter.write_export(path, sessions, escape_quotes)
		except PersistenceError as e:
			logger.error("Export failed: %s", e)
			self.notify.emit("Export failed. See the log for details.", "error")
			return None
		self.notify.emit("Data exported successfully!", "success")
		return written

	# queries, recomputed from the current store snapshot on every call

	def filtered_sessions(self):
		return filter_engine.apply(self.store.all(), self.criteria)

	def subjects(self):
		return filter_engine.distinct_subjects(self.store.all())

	def summary(self, today=None):
		return aggregator.summary(self.store.all(), today or self.today())

	def per_subject_totals(self):
		return aggregator.per_subject_totals(self.store.all())

	def daily_series(self, today=None, days=aggregator.DEFAULT_DAYS):
		return aggregator.daily_series(self.store.all(), today or self.today(), days)

	def suggested_export_name(self, today=None):
		return export_formatter.export_filename(today or self.today())
