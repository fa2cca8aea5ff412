from PySide6.QtCore import QPropertyAnimation, QTimer
from PySide6.QtWidgets import QLabel, QGraphicsOpacityEffect
from FrontEnd.styles.design_tokens import NOTIFY_COLORS


class Toast(QLabel):
	"""Transient notification pinned to the top-right corner of its parent."""

	DURATION_MS = 3000

	def __init__(self, parent):
		super().__init__(parent)
		self.setWordWrap(True)
		self.setMaximumWidth(300)
		self.hide()
		self._opacity = QGraphicsOpacityEffect(self)
		self.setGraphicsEffect(self._opacity)
		self._fade = QPropertyAnimation(self._opacity, b"opacity")
		self._fade.setDuration(300)
		self._fade.finished.connect(self._on_fade_finished)
		self._hide_timer = QTimer(self)
		self._hide_timer.setSingleShot(True)
		self._hide_timer.timeout.connect(self._fade_out)

	def show_message(self, message, kind="info"):
		color = NOTIFY_COLORS.get(kind, NOTIFY_COLORS['info'])
		self.setStyleSheet(f"background: {color}; color: white; font-weight: 500; border-radius: 12px; padding: 12px 18px;")
		self.setText(message)
		self.adjustSize()
		parent = self.parentWidget()
		if parent is not None:
			self.move(parent.width() - self.width() - 20, 20)
		self._fade.stop()
		self._opacity.setOpacity(1.0)
		self.show()
		self.raise_()
		self._hide_timer.start(self.DURATION_MS)

	def _fade_out(self):
		self._fade.setStartValue(self._opacity.opacity())
		self._fade.setEndValue(0.0)
		self._fade.start()

	def _on_fade_finished(self):
		if self._opacity.opacity() == 0.0:
			self.hide()
