# Design tokens for Study Tracker UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#FFFFFF',
    'primary': '#667EEA',
    'primary_hover': '#5A6FD6',
    'danger': '#E53E3E',
    'text': '#2D3748',
    'text_muted': '#718096',
    'text_strong': '#133A62',
    'border': '#DCE3ED',
    'card_bg': '#E7F0FF',
    'card_text': '#133A62',
    'chart_bg': '#F7FAFC',
    'chart_grid': '#C9D8E2',
}

# bar colours cycle per subject
CHART_PALETTE = ['#667eea', '#764ba2', '#f093fb', '#f5576c', '#4facfe', '#00f2fe']

NOTIFY_COLORS = {
    'success': '#48BB78',
    'error': '#E53E3E',
    'info': '#667EEA',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'card_value_size': 28,
    'card_label_size': 13,
    'button_size': 15,
    'button_weight': 600,
    'text': 14,
}


def app_stylesheet():
    return f"""
    QMainWindow, QWidget#Root {{ background: {COLORS['background']}; font-family: {FONTS['family']}; font-size: {FONTS['text']}px; color: {COLORS['text']}; }}
    QGroupBox {{ background: {COLORS['surface']}; border: 1px solid {COLORS['border']}; border-radius: 12px; margin-top: 16px; padding: 12px; font-weight: 600; }}
    QGroupBox::title {{ subcontrol-origin: margin; left: 12px; color: {COLORS['text_strong']}; }}
    QPushButton {{ background: {COLORS['primary']}; color: white; border: none; border-radius: 8px; padding: 8px 16px; font-size: {FONTS['button_size']}px; font-weight: {FONTS['button_weight']}; }}
    QPushButton:hover {{ background: {COLORS['primary_hover']}; }}
    QPushButton#DangerBtn {{ background: {COLORS['danger']}; }}
    QTableWidget {{ background: {COLORS['surface']}; border: 1px solid {COLORS['border']}; border-radius: 8px; }}
    """
