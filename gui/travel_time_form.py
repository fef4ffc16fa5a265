# gui/travel_time_form.py
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QLocale
from PySide6.QtGui import QDoubleValidator, QFont
from PySide6.QtWidgets import (
    QComboBox, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QVBoxLayout, QWidget
)

from core.config import FormSettings, get_settings
from core.conversion import ConversionRequest
from core.formatting import render
from core.units import DISTANCE, RESULT_TIME, TIME, UnitRegistry
from gui.form_state import TravelFormState

log = logging.getLogger(__name__)

_PLACEHOLDER_STYLE = "color: red;"


def _bold(text: str) -> QLabel:
    lab = QLabel(text)
    font = QFont(lab.font())
    font.setBold(True)
    lab.setFont(font)
    lab.setAlignment(Qt.AlignCenter)
    return lab


class TravelTimeForm(QWidget):
    """Speed entry, unit pickers and the formatted travel time."""

    def __init__(self, parent: Optional[QWidget] = None, *, settings: Optional[FormSettings] = None,
                 state: Optional[TravelFormState] = None):
        super().__init__(parent)
        self.settings = settings or get_settings()
        self.state = state or TravelFormState(self.settings, self)

        self._setup_ui()

        # ---- Connections ----
        self.speed_edit.textChanged.connect(self.state.set_speed_text)
        self.distance_combo.currentTextChanged.connect(self.state.set_distance_unit)
        self.time_combo.currentTextChanged.connect(self.state.set_input_time_unit)
        self.result_unit_combo.currentTextChanged.connect(self.state.set_output_time_unit)
        self.state.requestChanged.connect(self.refresh)

        self.refresh(self.state.request())

    # ---------------- UI ----------------

    def _setup_ui(self) -> None:
        self.group = QGroupBox()
        vbox = QVBoxLayout(self.group)

        self.speed_edit = QLineEdit(self.state.speed_text)
        self.speed_edit.setPlaceholderText(self.settings.speed_placeholder)
        validator = QDoubleValidator(self)
        validator.setBottom(0.0)
        validator.setLocale(QLocale.c())
        self.speed_edit.setValidator(validator)
        vbox.addWidget(self.speed_edit)

        vbox.addWidget(_bold("Select units of distance and time:"))
        self.distance_combo = self._picker(DISTANCE, self.state.distance_unit.value)
        vbox.addWidget(self.distance_combo)

        vbox.addWidget(_bold(" - per -"))
        self.time_combo = self._picker(TIME, self.state.input_time_unit.value)
        vbox.addWidget(self.time_combo)

        vbox.addStretch()

        vbox.addWidget(QLabel("Expected travel time:"))
        self.result_label = QLabel()
        self.result_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        vbox.addWidget(self.result_label)

        row = QHBoxLayout()
        self.result_unit_combo = self._picker(RESULT_TIME, self.state.output_time_unit.value)
        row.addWidget(self.result_unit_combo)
        vbox.addLayout(row)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

    @staticmethod
    def _picker(registry: UnitRegistry, current: str) -> QComboBox:
        combo = QComboBox()
        combo.addItems(list(registry.symbols()))
        combo.setCurrentText(current)
        return combo

    # ---------------- Rendering ----------------

    def refresh(self, request: ConversionRequest) -> None:
        text, result = render(request)
        if result is not None and not result.ok:
            log.debug("travel time unavailable for %r: %s", request.raw_speed_text, result.message)

        waiting = result is None or not result.ok
        self.result_label.setText(text)
        self.result_label.setStyleSheet(_PLACEHOLDER_STYLE if waiting else "")
        self.result_unit_combo.setVisible(not request.is_empty)

    # ---- public API ----
    def result_text(self) -> str:
        return self.result_label.text()
