import pytest
from PySide6.QtGui import QImage, QPainter

from core.surface import CanvasSurface
from gui.canvas_view import CanvasView
from gui.editor import Editor


@pytest.fixture
def view() -> CanvasView:
    return CanvasView(CanvasSurface(120, 80))


class TestCanvasView:
    def test_size_hint_includes_border(self, view: CanvasView) -> None:
        assert (view.sizeHint().width(), view.sizeHint().height()) == (122, 82)

    def test_cursor_only_on_canvas(self, view: CanvasView) -> None:
        view.set_pen_position(10, 10)
        assert view.cursor_visible()
        view.set_pen_position(120, 10)
        assert not view.cursor_visible()
        view.set_pen_position(-1, 10)
        assert not view.cursor_visible()

    @pytest.mark.parametrize("x, y", [
        (2147483647, 0), (-2147483648, 2147483647), (0, -2147483648),
    ])
    def test_repaints_with_extreme_pen_position(self, view: CanvasView, x: int, y: int) -> None:
        view.set_pen_position(x, y)

        image = QImage(130, 90, QImage.Format.Format_ARGB32)
        painter = QPainter(image)
        try:
            view.draw_cursor(painter)
        finally:
            painter.end()

        assert not view.grab().isNull()

    def test_set_surface(self, view: CanvasView) -> None:
        view.set_surface(CanvasSurface(300, 200))
        assert (view.sizeHint().width(), view.sizeHint().height()) == (302, 202)


class TestEditor:
    PROGRAM = "pen red\nmoveto 10 10\ncircle\nfill on\npaint 1\n"

    def test_error_lines_move_cursor_to_first(self) -> None:
        editor = Editor()
        editor.setPlainText(self.PROGRAM)
        editor.highlight_error_lines([5, 3])

        assert editor.error_lines == {3, 5}
        assert editor.textCursor().blockNumber() == 2
        # Current line band plus one per error line
        assert len(editor.extraSelections()) == 3

    def test_clear_error_highlights(self) -> None:
        editor = Editor()
        editor.setPlainText(self.PROGRAM)
        editor.highlight_error_lines([3])
        editor.clear_error_highlights()

        assert editor.error_lines == set()
        assert len(editor.extraSelections()) == 1

    def test_goto_line_ignores_missing_lines(self) -> None:
        editor = Editor()
        editor.setPlainText(self.PROGRAM)
        editor.goto_line(4)
        editor.goto_line(99)
        editor.goto_line(0)
        assert editor.textCursor().blockNumber() == 3
