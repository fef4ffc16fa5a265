# gui/main_window.py

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from core.config import FormSettings, get_settings

from gui.travel_time_form import TravelTimeForm
from gui.widgets.travel_table import TravelTimeTable

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):

    def __init__(self, settings: Optional[FormSettings] = None) -> None:

        super().__init__()

        self.settings = settings or get_settings()
        self.setWindowTitle(self.settings.window_title)

        # ---- Central UI ----
        central_widget = QWidget()
        main_layout = QVBoxLayout(central_widget)
        self.setCentralWidget(central_widget)

        self.form = TravelTimeForm(self, settings=self.settings)
        main_layout.addWidget(self.form)

        self.table = TravelTimeTable(self)
        main_layout.addWidget(self.table)

        # ---- Connections ----
        self.form.state.requestChanged.connect(self.table.refresh)
        self.table.refresh(self.form.state.request())

        log.info(
            "Form ready (%s per %s, result in %s)",
            self.settings.distance_unit.value,
            self.settings.input_time_unit.value,
            self.settings.output_time_unit.value,
        )
