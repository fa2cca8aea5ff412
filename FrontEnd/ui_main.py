from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
	QLineEdit, QSpinBox, QComboBox, QDateEdit, QCheckBox, QGroupBox, QTableWidget,
	QTableWidgetItem, QHeaderView, QSizePolicy, QMessageBox, QFileDialog
)
from PySide6.QtCore import Qt, QDate
import datetime
from BackEnd.core.duration import TIME_UNITS, format_minutes
from FrontEnd.components.charts import SubjectChart, DailyChart
from FrontEnd.components.summary_card import SummaryCard
from FrontEnd.components.toast import Toast
from FrontEnd.styles.design_tokens import app_stylesheet


def _to_qdate(d):
	return QDate(d.year, d.month, d.day)

def _from_qdate(q):
	return datetime.date(q.year(), q.month(), q.day())

def _added_text(timestamp):
	# stored as UTC ISO; show in local time
	try:
		dt = datetime.datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
	except ValueError:
		return timestamp
	return dt.astimezone().strftime("%Y-%m-%d %H:%M")


class MainWindow(QMainWindow):
	def __init__(self, service):
		super().__init__()
		self.service = service
		self.setWindowTitle("Daily Study Tracker")
		self.resize(1100, 760)
		self.setStyleSheet(app_stylesheet())

		root = QWidget()
		root.setObjectName("Root")
		layout = QVBoxLayout()
		layout.setContentsMargins(24, 24, 24, 24)
		layout.setSpacing(16)

		# Summary cards
		cards = QHBoxLayout()
		self.today_card = SummaryCard("Today")
		self.week_card = SummaryCard("This Week")
		self.count_card = SummaryCard("Total Sessions", "0")
		for card in (self.today_card, self.week_card, self.count_card):
			cards.addWidget(card)
		layout.addLayout(cards)

		top = QHBoxLayout()
		top.addWidget(self._build_form(), 1)
		top.addWidget(self._build_logs(), 2)
		layout.addLayout(top, 3)

		charts = QHBoxLayout()
		self.subject_chart = SubjectChart()
		self.daily_chart = DailyChart()
		for chart in (self.subject_chart, self.daily_chart):
			chart.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
			charts.addWidget(chart)
		layout.addLayout(charts, 2)

		root.setLayout(layout)
		self.setCentralWidget(root)
		self.toast = Toast(root)

		self.service.changed.connect(self.refresh)
		self.service.notify.connect(self.toast.show_message)
		self.refresh()

	def _build_form(self):
		box = QGroupBox("Log a Study Session")
		grid = QGridLayout()
		self.subject_edit = QLineEdit()
		self.subject_edit.setPlaceholderText("e.g. Mathematics")
		self.duration_spin = QSpinBox()
		self.duration_spin.setRange(0, 100000)
		self.unit_combo = QComboBox()
		self.unit_combo.addItems(list(TIME_UNITS))
		self.date_edit = QDateEdit()
		self.date_edit.setCalendarPopup(True)
		self.date_edit.setDisplayFormat("yyyy-MM-dd")
		self.notes_edit = QLineEdit()
		self.notes_edit.setPlaceholderText("Optional")
		self.add_btn = QPushButton("Add Session")

		grid.addWidget(QLabel("Subject"), 0, 0)
		grid.addWidget(self.subject_edit, 0, 1, 1, 2)
		grid.addWidget(QLabel("Duration"), 1, 0)
		grid.addWidget(self.duration_spin, 1, 1)
		grid.addWidget(self.unit_combo, 1, 2)
		grid.addWidget(QLabel("Date"), 2, 0)
		grid.addWidget(self.date_edit, 2, 1, 1, 2)
		grid.addWidget(QLabel("Notes"), 3, 0)
		grid.addWidget(self.notes_edit, 3, 1, 1, 2)
		grid.addWidget(self.add_btn, 4, 0, 1, 3)
		grid.setRowStretch(5, 1)
		box.setLayout(grid)

		self._reset_form()
		self.add_btn.clicked.connect(self._on_add)
		self.subject_edit.returnPressed.connect(self._on_add)
		return box

	def _build_logs(self):
		box = QGroupBox("Study Sessions")
		layout = QVBoxLayout()

		filters = QHBoxLayout()
		self.filter_subject = QComboBox()
		self.filter_subject.setMinimumWidth(160)
		self.filter_date_check = QCheckBox("On date")
		self.filter_date = QDateEdit()
		self.filter_date.setCalendarPopup(True)
		self.filter_date.setDisplayFormat("yyyy-MM-dd")
		self.filter_date.setDate(_to_qdate(self.service.today()))
		self.filter_date.setEnabled(False)
		self.clear_filters_btn = QPushButton("Clear Filters")
		filters.addWidget(self.filter_subject)
		filters.addWidget(self.filter_date_check)
		filters.addWidget(self.filter_date)
		filters.addStretch()
		filters.addWidget(self.clear_filters_btn)
		layout.addLayout(filters)

		self.logs_table = QTableWidget()
		self.logs_table.setColumnCount(7)
		self.logs_table.setHorizontalHeaderLabels([
			"Date", "Subject", "Duration", "Minutes", "Notes", "Added", ""
		])
		self.logs_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.logs_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
		self.logs_table.horizontalHeader().setSectionResizeMode(4, QHeaderView.ResizeMode.Stretch)
		self.logs_table.verticalHeader().setVisible(False)
		layout.addWidget(self.logs_table)
		self.empty_label = QLabel("No study sessions yet. Log one to get started!")
		self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.empty_label)

		actions = QHBoxLayout()
		actions.addStretch()
		self.export_btn = QPushButton("Export CSV")
		self.clear_all_btn = QPushButton("Clear All")
		self.clear_all_btn.setObjectName("DangerBtn")
		actions.addWidget(self.export_btn)
		actions.addWidget(self.clear_all_btn)
		layout.addLayout(actions)
		box.setLayout(layout)

		self.filter_subject.currentIndexChanged.connect(self._on_filters_changed)
		self.filter_date_check.toggled.connect(self.filter_date.setEnabled)
		self.filter_date_check.toggled.connect(self._on_filters_changed)
		self.filter_date.dateChanged.connect(self._on_filters_changed)
		self.clear_filters_btn.clicked.connect(self._on_clear_filters)
		self.export_btn.clicked.connect(self._on_export)
		self.clear_all_btn.clicked.connect(self._on_clear_all)
		return box

	# --- command handlers ---

	def _on_add(self):
		session = self.service.add_session(
			self.subject_edit.text(),
			self.duration_spin.value(),
			self.unit_combo.currentText(),
			_from_qdate(self.date_edit.date()),
			self.notes_edit.text(),
		)
		if session is not None:
			self._reset_form()

	def _on_delete(self, session_id):
		self.service.delete_session(session_id)

	def _on_filters_changed(self, *_):
		exact = _from_qdate(self.filter_date.date()) if self.filter_date_check.isChecked() else None
		self.service.set_filters(self.filter_subject.currentData() or "", exact)

	def _on_clear_filters(self):
		for w in (self.filter_subject, self.filter_date_check):
			w.blockSignals(True)
		self.filter_subject.setCurrentIndex(0)
		self.filter_date_check.setChecked(False)
		self.filter_date.setEnabled(False)
		for w in (self.filter_subject, self.filter_date_check):
			w.blockSignals(False)
		self.service.clear_filters()

	def _on_export(self):
		if not self.service.store.all():
			# let the service report the empty case without opening a dialog
			self.service.export_csv(self.service.suggested_export_name())
			return
		path, _ = QFileDialog.getSaveFileName(
			self, "Export Study Sessions", self.service.suggested_export_name(), "CSV files (*.csv)")
		if path:
			self.service.export_csv(path)

	def _on_clear_all(self):
		answer = QMessageBox.question(
			self, "Clear All",
			"Are you sure you want to delete all study sessions? This action cannot be undone.",
			QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No, QMessageBox.StandardButton.No)
		if answer == QMessageBox.StandardButton.Yes:
			self.service.clear_all()

	# --- rendering ---

	def _reset_form(self):
		self.subject_edit.clear()
		self.duration_spin.setValue(0)
		self.unit_combo.setCurrentIndex(0)
		self.notes_edit.clear()
		self.date_edit.setDate(_to_qdate(self.service.today()))

	def refresh(self):
		summary = self.service.summary()
		self.today_card.set_value(format_minutes(summary["today_total"]))
		self.week_card.set_value(format_minutes(summary["week_total"]))
		self.count_card.set_value(str(summary["count"]))
		self._refresh_subject_filter()
		self._refresh_table()
		self.subject_chart.render(self.service.per_subject_totals())
		self.daily_chart.render(self.service.daily_series(), has_data=summary["count"] > 0)

	def _refresh_subject_filter(self):
		current = self.service.criteria.subject_substring
		self.filter_subject.blockSignals(True)
		self.filter_subject.clear()
		self.filter_subject.addItem("All Subjects", "")
		for subject in self.service.subjects():
			self.filter_subject.addItem(subject, subject)
		index = self.filter_subject.findData(current)
		self.filter_subject.setCurrentIndex(index if index >= 0 else 0)
		self.filter_subject.blockSignals(False)

	def _refresh_table(self):
		sessions = self.service.filtered_sessions()
		self.empty_label.setVisible(not sessions)
		self.logs_table.setRowCount(len(sessions))
		for row, sess in enumerate(sessions):
			self.logs_table.setItem(row, 0, QTableWidgetItem(sess.date.strftime("%A, %B %d, %Y")))
			self.logs_table.setItem(row, 1, QTableWidgetItem(sess.subject))
			self.logs_table.setItem(row, 2, QTableWidgetItem(f"{sess.duration} {sess.time_unit}"))
			self.logs_table.setItem(row, 3, QTableWidgetItem(str(sess.minutes)))
			self.logs_table.setItem(row, 4, QTableWidgetItem(sess.notes))
			self.logs_table.setItem(row, 5, QTableWidgetItem(_added_text(sess.timestamp)))
			delete_btn = QPushButton("Delete")
			delete_btn.setObjectName("DangerBtn")
			delete_btn.clicked.connect(lambda checked=False, sid=sess.id: self._on_delete(sid))
			self.logs_table.setCellWidget(row, 6, delete_btn)
