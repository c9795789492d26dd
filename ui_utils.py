from PySide6.QtWidgets import QWidget, QVBoxLayout, QPushButton, QHBoxLayout, QLabel
from PySide6.QtCore import Signal
from config import THEME

ARROW_DOWN = "▼"
ARROW_UP = "▲"


class CollapsibleSection(QWidget):
    toggled = Signal(bool)

    def __init__(self, title, parent=None, expanded=False):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(0)

        self.title_text = title
        self.btn_toggle = QPushButton()
        self.btn_toggle.setStyleSheet(f"""
            QPushButton {{
                background-color: {THEME['bg_panel']};
                color: {THEME['fg_text']};
                text-align: left;
                padding: 8px;
                border: none;
                font-weight: bold;
            }}
            QPushButton:hover {{ background-color: {THEME['bg_ui']}; }}
        """)
        self.btn_toggle.clicked.connect(self.toggle)
        self.layout.addWidget(self.btn_toggle)

        self.content_area = QWidget()
        self.content_layout = QVBoxLayout(self.content_area)
        self.content_layout.setContentsMargins(5, 5, 5, 10)
        self.layout.addWidget(self.content_area)

        self.set_expanded(expanded)

    def arrow(self):
        # Freccia in su quando il pannello è aperto
        return ARROW_UP if self.expanded else ARROW_DOWN

    def set_expanded(self, expanded):
        self.expanded = expanded
        self.btn_toggle.setText(f"{self.title_text} {self.arrow()}")
        self.content_area.setVisible(expanded)

    def toggle(self):
        self.set_expanded(not self.expanded)
        self.toggled.emit(self.expanded)

    def add_widget(self, widget):
        self.content_layout.addWidget(widget)


def labeled_row(label_text, widget, label_width=90):
    row = QWidget()
    layout = QHBoxLayout(row)
    layout.setContentsMargins(0, 2, 0, 2)

    lbl = QLabel(label_text)
    lbl.setStyleSheet(f"color: {THEME['fg_text']};")
    lbl.setFixedWidth(label_width)

    layout.addWidget(lbl)
    layout.addWidget(widget)
    return row
