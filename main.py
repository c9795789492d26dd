import sys
import random
import logging

from PySide6.QtWidgets import QApplication, QMainWindow, QWidget, QHBoxLayout

from config import THEME
from logger import init_logging
from sampling import InfeasibleConstraintError
from widgets_2d import VectorCanvas, ControlPanel
import scene

logger = logging.getLogger(__name__)


class VectorsApp(QMainWindow):
    def __init__(self, rng=None):
        super().__init__()
        self.setWindowTitle("Box Vectors")
        self.resize(1200, 850)
        self.setStyleSheet(f"QMainWindow {{ background-color: {THEME['bg_ui']}; }}")

        self.rng = rng or random.Random()
        # Unica fonte di verità: ogni evento sostituisce la config
        self.config = scene.VectorConfig()

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.panel = ControlPanel()
        self.panel.setFixedWidth(340)
        main_layout.addWidget(self.panel)

        self.canvas = VectorCanvas()
        main_layout.addWidget(self.canvas)

        self.panel.set_bounds(self.config.min_length, self.config.max_length)
        self.panel.generate_requested.connect(self.on_generate)
        self.panel.box_requested.connect(self.on_show_box)
        self.panel.bounds_changed.connect(self.on_bounds)
        self.panel.length_changed.connect(self.on_length)
        self.panel.convergence_changed.connect(self.on_convergence)

        self.on_generate()

    def refresh(self):
        self.canvas.set_snapshot(scene.snapshot(self.config))

    # --- HANDLER ---
    def on_bounds(self, raw_min, raw_max):
        self.config = scene.apply_bounds(self.config, raw_min, raw_max)
        self.panel.set_bounds(self.config.min_length, self.config.max_length)

    def on_generate(self):
        self.on_bounds(self.panel.inp_min.text(), self.panel.inp_max.text())
        try:
            self.config = scene.generate(self.config, self.rng)
        except InfeasibleConstraintError:
            logger.exception("Vector generation failed, keeping previous vectors")
            return
        self.panel.set_lengths({k: a.length for k, a in self.config.axes.items()})
        self.refresh()

    def on_length(self, axis, value):
        self.config = scene.set_length(self.config, axis, value)
        self.refresh()

    def on_convergence(self, axis, value):
        self.config = scene.set_convergence(self.config, axis, value)
        # Ridisegna solo se il box è visibile
        if self.config.box_visible: self.refresh()

    def on_show_box(self):
        self.config = scene.show_box(self.config)
        self.refresh()


def run():
    init_logging()
    app = QApplication(sys.argv)
    window = VectorsApp()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
