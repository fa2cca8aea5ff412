from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS, FONTS

class SummaryCard(QWidget):
    def __init__(self, title, value_text="0 min"):
        super().__init__()
        layout = QVBoxLayout()
        self.title_label = QLabel(title)
        self.value_label = QLabel(value_text)
        self.value_label.setObjectName("SummaryValue")
        layout.addWidget(self.title_label)
        layout.addWidget(self.value_label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['card_bg']}; border-radius: 16px; padding: 8px 24px; color: {COLORS['card_text']};")
        self.title_label.setStyleSheet(f"font-size: {FONTS['card_label_size']}px; font-weight: 500;")
        self.value_label.setStyleSheet(f"font-size: {FONTS['card_value_size']}px; font-weight: 700;")
    def set_value(self, text):
        self.value_label.setText(text)
