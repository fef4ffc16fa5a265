# tests/test_formatting.py

import math

import pytest

from core.constants import WAITING_FOR_INPUT
from core.conversion import ConversionRequest
from core.formatting import (
    TABLE_COLUMNS,
    decimals_for,
    display_text,
    format_travel_time,
    render,
    travel_time_table,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.5, "0.50000000"),
        (0.25, "0.25000000"),
        (1.0, "1.00"),
        (42.4242, "42.42"),
        (99.5, "99.50"),
        (100.0, "100"),
        (41_315_314_000_000.0, "41315314000000"),
    ],
)
def test_format_travel_time(value, expected):
    assert format_travel_time(value) == expected


def test_decimal_thresholds():
    assert decimals_for(0.0) == 8
    assert decimals_for(0.99) == 8
    assert decimals_for(1.0) == 2
    assert decimals_for(99.99) == 2
    assert decimals_for(100.0) == 0


def test_display_text_scenarios():
    assert display_text(ConversionRequest("1000", "meter", "second", "seconds")) == "41315314000000"
    assert display_text(ConversionRequest("100000", "kilometer", "hour", "hours")) == "413153140"
    assert display_text(ConversionRequest("", "meter", "second", "seconds")) == WAITING_FOR_INPUT


@pytest.mark.parametrize("text", ["0", "abc", "-3"])
def test_display_text_suppresses_division_error(text):
    assert display_text(ConversionRequest(text)) == WAITING_FOR_INPUT


def test_render_skips_computation_for_empty_text():
    text, result = render(ConversionRequest(""))
    assert text == WAITING_FOR_INPUT
    assert result is None

    text, result = render(ConversionRequest("0"))
    assert text == WAITING_FOR_INPUT
    assert result is not None and not result.ok


def test_travel_time_table_lists_every_result_unit():
    df = travel_time_table("300000000", "meter", "second")

    assert list(df.columns) == TABLE_COLUMNS
    assert list(df["Unit"]) == ["seconds", "hours", "days", "years"]
    assert df.loc[0, "Display"] == "137717713"
    assert df.loc[3, "Travel Time"] == pytest.approx(4.367, rel=1e-3)
    assert df.loc[3, "Display"] == "4.37"


def test_travel_time_table_without_speed():
    df = travel_time_table("")
    assert len(df) == 4
    assert df["Travel Time"].apply(math.isnan).all()
    assert (df["Display"] == WAITING_FOR_INPUT).all()
