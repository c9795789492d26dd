import logging

from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout,
                               QDoubleSpinBox, QPushButton, QLabel, QLineEdit, QSlider,
                               QScrollArea, QSizePolicy)
from PySide6.QtGui import QPainter, QPen, QColor
from PySide6.QtCore import Signal, Qt, QPointF

from config import THEME, WIDTH, HEIGHT, OX, OY, POINT_RADIUS, HIDDEN_DASH, HARD_MIN_LENGTH, HARD_MAX_LENGTH
from ui_utils import CollapsibleSection, labeled_row

logger = logging.getLogger(__name__)


# --- CLASSE DISEGNO VETTORI ---
class VectorCanvas(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(400, 400)
        self.bg_color = QColor(THEME["canvas_bg"])
        self.snapshot = None

    def set_snapshot(self, snapshot):
        self.snapshot = snapshot
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), self.bg_color)

        # Canvas logico 800x800 centrato e scalato nel widget
        scale = min(self.width() / WIDTH, self.height() / HEIGHT)
        dx = (self.width() - WIDTH * scale) / 2
        dy = (self.height() - HEIGHT * scale) / 2

        def to_s(p):
            return QPointF(p.x * scale + dx, p.y * scale + dy)

        try:
            self._draw_axes(painter, scale, dx, dy)
            if self.snapshot is None or not self.snapshot.tips: return
            self._draw_vectors(painter, to_s)
            if self.snapshot.box is not None:
                self._draw_box(painter, to_s)
            self._draw_points(painter, to_s, scale)
        except Exception:
            logger.exception("Canvas paint failed")
        finally:
            painter.end()

    def _draw_axes(self, painter, scale, dx, dy):
        painter.setPen(QPen(QColor(THEME["axis"]), 1))
        painter.drawLine(QPointF(dx, OY * scale + dy), QPointF(WIDTH * scale + dx, OY * scale + dy))
        painter.drawLine(QPointF(OX * scale + dx, dy), QPointF(OX * scale + dx, HEIGHT * scale + dy))

    def _draw_vectors(self, painter, to_s):
        painter.setPen(QPen(QColor(THEME["vector"]), 2))
        o = to_s(self.snapshot.origin)
        for k in sorted(self.snapshot.tips):
            painter.drawLine(o, to_s(self.snapshot.tips[k]))

    def _draw_box(self, painter, to_s):
        box = self.snapshot.box
        pen = QPen(QColor(THEME["box"]))
        pen.setWidthF(1.5)
        painter.setPen(pen)
        for p1, p2 in box.visible_edges: painter.drawLine(to_s(p1), to_s(p2))

        if not box.hidden_edges: return
        # Spigoli nascosti tratteggiati
        dash_pen = QPen(QColor(THEME["box"]))
        dash_pen.setWidthF(1.5)
        dash_pen.setStyle(Qt.CustomDashLine)
        dash_pen.setDashPattern([v / 1.5 for v in HIDDEN_DASH])
        painter.setPen(dash_pen)
        for p1, p2 in box.hidden_edges: painter.drawLine(to_s(p1), to_s(p2))

    def _draw_points(self, painter, to_s, scale):
        # Punti per ultimi, coprono le estremità delle linee
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(THEME["point"]))
        r = POINT_RADIUS * scale
        points = [self.snapshot.origin] + [self.snapshot.tips[k] for k in sorted(self.snapshot.tips)]
        for p in points:
            painter.drawEllipse(to_s(p), r, r)


# --- CLASSE PARAMETRI ---
class ControlPanel(QWidget):
    generate_requested = Signal()
    box_requested = Signal()
    bounds_changed = Signal(str, str)
    length_changed = Signal(str, int)
    convergence_changed = Signal(str, float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.sliders = {}
        self.readouts = {}
        self.conv_inputs = {}
        self.init_ui()

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setStyleSheet(f"background-color: {THEME['bg_ui']}; border: none;")

        container = QWidget()
        container.setStyleSheet(f"background-color: {THEME['bg_ui']}; color: {THEME['fg_text']};")
        vbox = QVBoxLayout(container)

        self.btn_generate = QPushButton("Genera Vettori")
        self.btn_generate.setStyleSheet(self._button_style())
        self.btn_generate.clicked.connect(lambda: self.generate_requested.emit())
        vbox.addWidget(self.btn_generate)

        # 1. Opzioni extra (min/max lunghezza), chiuse di default
        self.extra = CollapsibleSection("Opzioni Extra", container)
        self.inp_min = self._make_line_edit()
        self.inp_max = self._make_line_edit()
        self.extra.add_widget(labeled_row("Min:", self.inp_min))
        self.extra.add_widget(labeled_row("Max:", self.inp_max))
        vbox.addWidget(self.extra)

        # 2. Box: convergenza e lunghezze per asse
        gb_box = QGroupBox("Box")
        gb_box.setStyleSheet(self._group_style())
        form = QFormLayout()
        for k in 'ABC':
            self.conv_inputs[k] = self._make_spin(k)
            form.addRow(f"Convergenza {k}:", self.conv_inputs[k])
        for k in 'ABC':
            form.addRow(f"Lunghezza {k}:", self._make_slider(k))
        gb_box.setLayout(form)
        vbox.addWidget(gb_box)

        self.btn_box = QPushButton("Disegna Box")
        self.btn_box.setStyleSheet(self._button_style())
        self.btn_box.clicked.connect(lambda: self.box_requested.emit())
        vbox.addWidget(self.btn_box)

        vbox.addStretch()
        scroll.setWidget(container)
        layout.addWidget(scroll)

    def _group_style(self):
        return f"QGroupBox {{ font-weight: bold; border: 1px solid #555; border-radius: 5px; margin-top: 10px; color: {THEME['highlight']}; }} QGroupBox::title {{ subcontrol-origin: margin; left: 10px; padding: 0 3px; }}"

    def _button_style(self):
        return f"QPushButton {{ background-color: {THEME['bg_panel']}; color: {THEME['fg_text']}; padding: 8px; font-weight: bold; }} QPushButton:hover {{ background-color: {THEME['highlight']}; color: black; }}"

    def _make_line_edit(self):
        inp = QLineEdit()
        inp.setStyleSheet(f"background-color: {THEME['bg_input']}; color: white; border: none; padding: 3px;")
        # Come l'evento 'change': si valida solo a fine modifica
        inp.editingFinished.connect(self.emit_bounds)
        return inp

    def _make_spin(self, axis):
        sb = QDoubleSpinBox()
        sb.setRange(0.0, 2.0); sb.setSingleStep(0.05); sb.setDecimals(3); sb.setValue(0.0)
        sb.setStyleSheet(f"background-color: {THEME['bg_input']}; color: white; border: 1px solid #555;")
        sb.valueChanged.connect(lambda v, k=axis: self.convergence_changed.emit(k, v))
        return sb

    def _make_slider(self, axis):
        row = QWidget()
        hbox = QHBoxLayout(row)
        hbox.setContentsMargins(0, 0, 0, 0)

        slider = QSlider(Qt.Horizontal)
        slider.setRange(HARD_MIN_LENGTH, HARD_MAX_LENGTH)
        slider.valueChanged.connect(lambda v, k=axis: self.on_slider(k, v))

        readout = QLabel("0")
        readout.setFixedWidth(35)

        hbox.addWidget(slider)
        hbox.addWidget(readout)
        self.sliders[axis] = slider
        self.readouts[axis] = readout
        return row

    def on_slider(self, axis, value):
        self.readouts[axis].setText(str(value))
        self.length_changed.emit(axis, value)

    def emit_bounds(self):
        self.bounds_changed.emit(self.inp_min.text(), self.inp_max.text())

    def set_bounds(self, min_len, max_len):
        self.inp_min.setText(str(min_len))
        self.inp_max.setText(str(max_len))

    def set_lengths(self, lengths):
        """Aggiorna slider e letture senza riemettere length_changed."""
        for k, value in lengths.items():
            slider = self.sliders[k]
            slider.blockSignals(True)
            slider.setValue(value)
            slider.blockSignals(False)
            self.readouts[k].setText(str(value))
