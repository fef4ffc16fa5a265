# gui/form_state.py
from __future__ import annotations

import logging
from typing import Optional, Union

from PySide6.QtCore import QObject, Signal

from core.config import FormSettings, get_settings
from core.conversion import ConversionRequest
from core.units import DISTANCE, RESULT_TIME, TIME, DistanceUnit, ResultTimeUnit, TimeUnit

log = logging.getLogger(__name__)


class TravelFormState(QObject):
    """
    Mutable values behind the form; emits requestChanged(ConversionRequest)
    whenever one of the four inputs actually changes.
    """
    requestChanged = Signal(object)

    def __init__(self, settings: Optional[FormSettings] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        settings = settings or get_settings()
        self._speed_text = ""
        self._distance = settings.distance_unit
        self._time = settings.input_time_unit
        self._result_time = settings.output_time_unit

    # ---- properties ----
    @property
    def speed_text(self) -> str:
        return self._speed_text

    @property
    def distance_unit(self) -> DistanceUnit:
        return self._distance

    @property
    def input_time_unit(self) -> TimeUnit:
        return self._time

    @property
    def output_time_unit(self) -> ResultTimeUnit:
        return self._result_time

    def request(self) -> ConversionRequest:
        return ConversionRequest(self._speed_text, self._distance, self._time, self._result_time)

    # ---- setters emit ----
    def set_speed_text(self, text: Optional[str]) -> None:
        s = text or ""
        if s != self._speed_text:
            self._speed_text = s
            self._emit()

    def set_distance_unit(self, unit: Union[DistanceUnit, str]) -> None:
        u = DISTANCE.normalize(unit)
        if u != self._distance:
            log.debug("distance unit -> %s", u.value)
            self._distance = u
            self._emit()

    def set_input_time_unit(self, unit: Union[TimeUnit, str]) -> None:
        u = TIME.normalize(unit)
        if u != self._time:
            log.debug("input time unit -> %s", u.value)
            self._time = u
            self._emit()

    def set_output_time_unit(self, unit: Union[ResultTimeUnit, str]) -> None:
        u = RESULT_TIME.normalize(unit)
        if u != self._result_time:
            log.debug("output time unit -> %s", u.value)
            self._result_time = u
            self._emit()

    def _emit(self) -> None:
        self.requestChanged.emit(self.request())
