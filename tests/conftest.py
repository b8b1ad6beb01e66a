import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from core.interpreter import DrawingInterpreter
from core.surface import CanvasSurface


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def surface() -> CanvasSurface:
    return CanvasSurface(200, 150)


class RefreshCounter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def refresh() -> RefreshCounter:
    return RefreshCounter()


@pytest.fixture
def interpreter(surface: CanvasSurface, refresh: RefreshCounter) -> DrawingInterpreter:
    return DrawingInterpreter(surface, on_refresh=refresh)
