# core/formatting.py
from __future__ import annotations

import math
from typing import Optional, Tuple, Union

import pandas as pd

from core.constants import WAITING_FOR_INPUT
from core.conversion import ConversionRequest, ConversionResult, evaluate
from core.units import RESULT_TIME, DistanceUnit, TimeUnit

TABLE_COLUMNS = ["Unit", "Travel Time", "Display"]


def decimals_for(value: float) -> int:
    magnitude = abs(value)
    if magnitude < 1:
        return 8
    if magnitude < 100:
        return 2
    return 0


def format_travel_time(value: float) -> str:
    """8 decimals below 1, 2 decimals below 100, none otherwise."""
    return f"{value:.{decimals_for(value)}f}"


def render(request: ConversionRequest) -> Tuple[str, Optional[ConversionResult]]:
    """
    Text for the read-only result field plus the result it came from.

    Empty speed text shows the placeholder without computing anything (result is None).
    A division-by-zero result (e.g. "0" or "abc") shows the placeholder too.
    """
    if request.is_empty:
        return WAITING_FOR_INPUT, None
    result = evaluate(request)
    if not result.ok:
        return WAITING_FOR_INPUT, result
    return format_travel_time(result.value), result


def display_text(request: ConversionRequest) -> str:
    return render(request)[0]


def travel_time_table(
    raw_speed_text: str,
    distance_unit: Union[DistanceUnit, str] = DistanceUnit.METER,
    input_time_unit: Union[TimeUnit, str] = TimeUnit.SECOND,
) -> pd.DataFrame:
    """Travel time in every result unit, one row per unit in picker order."""
    rows = []
    for out_unit in RESULT_TIME.members():
        text, result = render(ConversionRequest(raw_speed_text, distance_unit, input_time_unit, out_unit))
        value = result.value if result is not None and result.ok else math.nan
        rows.append({"Unit": out_unit.value, "Travel Time": value, "Display": text})
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
