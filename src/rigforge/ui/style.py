"""QSS dark theme for the viewer window."""

COLORS = {
    "bg": "#0a0b0e",
    "surface": "#12141a",
    "surface2": "#1a1d26",
    "border": "#252830",
    "text": "#e8e9ed",
    "text_dim": "#8b8e99",
    "accent": "#4fd1c5",
    "accent2": "#f6ad55",
    "accent_hover": "#38b2ac",
    "accent_pressed": "#319795",
}

DARK_THEME = """
QMainWindow, QWidget {
    background-color: %(bg)s;
    color: %(text)s;
    font-family: -apple-system, "Segoe UI", "Helvetica Neue", Arial, sans-serif;
    font-size: 12px;
}

QLabel {
    color: %(text)s;
    background: transparent;
}

QLabel#sectionLabel {
    color: %(accent)s;
    font-size: 10px;
    font-weight: 600;
    letter-spacing: 1px;
    padding: 4px 0px 2px 0px;
    border-bottom: 1px solid %(accent)s;
    margin-top: 8px;
    margin-bottom: 4px;
}

QLabel#folderTitle {
    color: %(text)s;
    font-size: 11px;
    font-weight: 600;
}

QLabel#valueLabel {
    font-family: "SF Mono", "Fira Code", "Consolas", monospace;
    font-size: 10px;
    color: %(accent2)s;
}

QLabel#readoutValue {
    font-family: "SF Mono", "Fira Code", "Consolas", monospace;
    font-size: 10px;
    color: %(text_dim)s;
}

QLabel#sliderLabel {
    font-size: 11px;
    color: %(text_dim)s;
}

QPushButton {
    background-color: %(surface2)s;
    color: %(text)s;
    border: 1px solid %(border)s;
    border-radius: 4px;
    padding: 5px 12px;
    font-size: 11px;
}

QPushButton:hover {
    border-color: %(accent)s;
}

QPushButton#colorButton {
    border-radius: 3px;
    padding: 0px;
}

QComboBox {
    background-color: %(surface2)s;
    border: 1px solid %(border)s;
    border-radius: 4px;
    padding: 3px 8px;
}

QSlider::groove:horizontal {
    height: 4px;
    background: %(surface2)s;
    border-radius: 2px;
    border: 1px solid %(border)s;
}

QSlider::handle:horizontal {
    background: %(accent)s;
    width: 12px;
    height: 12px;
    margin: -5px 0;
    border-radius: 6px;
}

QSlider::handle:horizontal:hover {
    background: %(accent_hover)s;
}

QSlider::sub-page:horizontal {
    background: %(accent)s;
    border-radius: 2px;
}

QTreeWidget {
    border: none;
    font-family: "SF Mono", "Fira Code", "Consolas", monospace;
    font-size: 11px;
}

QHeaderView::section {
    background-color: %(surface)s;
    color: %(text_dim)s;
    border: none;
    border-bottom: 1px solid %(border)s;
    padding: 3px 6px;
}

QScrollArea {
    background-color: %(surface)s;
    border: none;
}

QWidget#controlPanel {
    background-color: %(surface)s;
    border-left: 1px solid %(border)s;
}

QStatusBar {
    background-color: %(bg)s;
    border-top: 1px solid %(border)s;
    color: %(text_dim)s;
    font-size: 10px;
    font-family: "SF Mono", "Fira Code", "Consolas", monospace;
}
""" % COLORS


def apply_theme(app) -> None:
    """Apply the dark theme to a QApplication."""
    app.setStyleSheet(DARK_THEME)
