# tests/test_travel_time_form.py

import pytest

from core.config import FormSettings
from core.constants import WAITING_FOR_INPUT
from gui import MainWindow
from gui.travel_time_form import TravelTimeForm


@pytest.fixture
def form(qapp):
    widget = TravelTimeForm(settings=FormSettings())
    yield widget
    widget.deleteLater()


def test_empty_speed_shows_red_placeholder(form):
    assert form.result_text() == WAITING_FOR_INPUT
    assert "red" in form.result_label.styleSheet()
    assert form.result_unit_combo.isHidden()
    assert form.speed_edit.placeholderText() == "Enter speed..."


def test_pickers_are_ordered_by_scale(form):
    items = [form.time_combo.itemText(i) for i in range(form.time_combo.count())]
    assert items == ["second", "hour", "day", "year"]
    items = [form.distance_combo.itemText(i) for i in range(form.distance_combo.count())]
    assert items == ["meter", "kilometer"]


def test_typing_a_speed_updates_the_result(form):
    form.speed_edit.setText("1000")
    assert form.result_text() == "41315314000000"
    assert form.result_label.styleSheet() == ""
    assert not form.result_unit_combo.isHidden()


def test_changing_units_recomputes(form):
    form.speed_edit.setText("100000")
    form.distance_combo.setCurrentText("kilometer")
    form.time_combo.setCurrentText("hour")
    form.result_unit_combo.setCurrentText("hours")
    assert form.result_text() == "413153140"


def test_zero_speed_falls_back_to_placeholder(form):
    form.speed_edit.setText("0")
    assert form.result_text() == WAITING_FOR_INPUT
    # the result unit stays selectable once something was typed
    assert not form.result_unit_combo.isHidden()


def test_clearing_the_speed_restores_placeholder(form):
    form.speed_edit.setText("5")
    form.speed_edit.setText("")
    assert form.result_text() == WAITING_FOR_INPUT
    assert form.result_unit_combo.isHidden()


def test_main_window_keeps_table_in_sync(qapp):
    window = MainWindow(FormSettings())
    try:
        assert window.windowTitle() == "Time to α Centauri?"
        assert window.table.cell_text(0, 1) == WAITING_FOR_INPUT

        window.form.speed_edit.setText("300000000")
        assert window.table.cell_text(0, 0) == "seconds"
        assert window.table.cell_text(0, 1) == "137717713"
        assert window.table.cell_text(3, 1) == "4.37"
    finally:
        window.deleteLater()
