# core/conversion.py
"""
Travel-time arithmetic for the Alpha Centauri form.

Every function here is pure: no logging, no shared mutable state. Division
failures are returned as a ``ConversionResult`` carrying a ``DivisionError``
so callers branch on ``result.ok`` instead of catching.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from core.constants import ALPHA_CENTAURI_DISTANCE_M, DIVISION_BY_ZERO_MESSAGE
from core.units import (
    DISTANCE,
    RESULT_TIME,
    TIME,
    DistanceUnit,
    ResultTimeUnit,
    TimeUnit,
)

DIVISION_BY_ZERO = "DivisionByZero"

# unsigned decimal, optional fraction and exponent ("5", "5.5", ".5", "5.", "1e3")
_DECIMAL_RE = re.compile(r"^\+?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class DivisionError(ArithmeticError):
    """Raised when a denominator is exactly zero."""

    kind = DIVISION_BY_ZERO

    def __init__(self, message: str = DIVISION_BY_ZERO_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class ConversionResult:
    value: Optional[float] = None
    error: Optional[DivisionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    @staticmethod
    def success(value: float) -> "ConversionResult":
        return ConversionResult(value=value)

    @staticmethod
    def failure(error: DivisionError) -> "ConversionResult":
        return ConversionResult(error=error)


@dataclass(frozen=True)
class ConversionRequest:
    """One snapshot of the form inputs. Unit names are validated on construction."""
    raw_speed_text: str = ""
    distance_unit: Union[DistanceUnit, str] = DistanceUnit.METER
    input_time_unit: Union[TimeUnit, str] = TimeUnit.SECOND
    output_time_unit: Union[ResultTimeUnit, str] = ResultTimeUnit.SECONDS

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "raw_speed_text", self.raw_speed_text or "")
        object.__setattr__(self, "distance_unit", DISTANCE.normalize(self.distance_unit))
        object.__setattr__(self, "input_time_unit", TIME.normalize(self.input_time_unit))
        object.__setattr__(self, "output_time_unit", RESULT_TIME.normalize(self.output_time_unit))

    @property
    def is_empty(self) -> bool:
        return self.raw_speed_text == ""


def divide(x: float, y: float) -> float:
    if y == 0:
        raise DivisionError()
    return x / y


def compute_speed_in_meters_per_output_time_unit(
    distance_unit: Union[DistanceUnit, str],
    input_time_unit: Union[TimeUnit, str],
    output_time_unit: Union[ResultTimeUnit, str],
) -> ConversionResult:
    """
    Factor turning a speed in (distance_unit / input_time_unit) into
    meters per output_time_unit.
    """
    numerator = DISTANCE.scale(distance_unit) * RESULT_TIME.scale(output_time_unit)
    denominator = TIME.scale(input_time_unit)
    try:
        return ConversionResult.success(divide(numerator, denominator))
    except DivisionError as e:
        return ConversionResult.failure(e)


def parse_speed_magnitude(raw_speed_text: Optional[str]) -> float:
    """Lenient parse: empty or non-numeric text counts as a speed of 0."""
    text = (raw_speed_text or "").strip()
    if not _DECIMAL_RE.match(text):
        return 0.0
    value = float(text)
    return value if math.isfinite(value) else 0.0


def compute_travel_time(distance_meters: float, speed_value: float) -> ConversionResult:
    try:
        return ConversionResult.success(divide(distance_meters, speed_value))
    except DivisionError as e:
        return ConversionResult.failure(e)


def evaluate(request: ConversionRequest) -> ConversionResult:
    """Full pipeline: unit factor x parsed magnitude, then distance / speed."""
    factor = compute_speed_in_meters_per_output_time_unit(
        request.distance_unit, request.input_time_unit, request.output_time_unit
    )
    if not factor.ok:
        return factor
    speed_value = factor.value * parse_speed_magnitude(request.raw_speed_text)
    return compute_travel_time(ALPHA_CENTAURI_DISTANCE_M, speed_value)
