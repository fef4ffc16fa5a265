# tests/conftest.py

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from core.config import reset_settings


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _default_settings():
    reset_settings()
    yield
    reset_settings()
