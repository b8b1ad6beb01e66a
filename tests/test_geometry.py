import pytest

from core.drawing_state import PenColor, Position
from core.geometry import (Rect, ShapeLog, ShapeType, circle_rect, half_toward_zero,
                           marker_rect, rectangle_rect, triangle_vertices)
from core.surface import CanvasSurface


class TestGeometry:
    @pytest.mark.parametrize("value, expected", [(40, 20), (41, 20), (-41, -20), (0, 0), (-1, 0)])
    def test_half_toward_zero(self, value: int, expected: int) -> None:
        assert half_toward_zero(value) == expected

    def test_rects(self) -> None:
        assert rectangle_rect(Position(3, 4), 10, 20) == Rect(3, 4, 10, 20)
        assert circle_rect(Position(50, 50), 10) == Rect(40, 40, 20, 20)
        assert marker_rect(Position(5, 5)) == Rect(4, 4, 2, 2)
        assert marker_rect(Position(5, 5), size=4) == Rect(3, 3, 4, 4)

    def test_triangle_vertices_do_not_depend_on_side2(self) -> None:
        start = Position(0, 0)
        assert triangle_vertices(start, 10, 5, 1) == triangle_vertices(start, 10, 5, 1000)


class TestShapeLog:
    def test_command_mapping_and_stats(self) -> None:
        log = ShapeLog()
        log.add_shape(1, ShapeType.MARKER, [Position(1, 1)], PenColor.BLACK,
                      filled=True, bounds=Rect(0, 0, 2, 2))
        log.add_shape(2, ShapeType.LINE, [Position(1, 1), Position(40, -5)], PenColor.RED)
        log.add_shape(2, ShapeType.LINE, [Position(40, -5), Position(0, 30)], PenColor.RED)

        assert [s.shape_id for s in log.get_shapes_for_command(2)] == [1, 2]
        assert log.get_shapes_for_command(7) == []
        assert log.get_bounding_box() == (Position(0, -5), Position(40, 30))

        stats = log.get_statistics()
        assert stats['total_shapes'] == 3
        assert stats['line_shapes'] == 2
        assert stats['marker_shapes'] == 1
        assert stats['filled_shapes'] == 1
        assert stats['commands_with_shapes'] == 2

    def test_points_are_copied(self) -> None:
        log = ShapeLog()
        point = Position(1, 2)
        shape = log.add_shape(1, ShapeType.LINE, [point, point], PenColor.BLUE)
        point.x = 99
        assert shape.points[0] == Position(1, 2)

    def test_clear(self) -> None:
        log = ShapeLog()
        log.add_shape(1, ShapeType.LINE, [Position(0, 0), Position(1, 1)], PenColor.BLUE)
        log.clear()
        assert log.get_all_shapes() == []
        assert log.get_bounding_box() == (Position(0, 0), Position(0, 0))


class TestSurface:
    def test_starts_with_background(self) -> None:
        surface = CanvasSurface(20, 10, background="#ffffff")
        assert (surface.width, surface.height) == (20, 10)
        assert surface.pixel_color(0, 0) == "#ffffff"
        assert surface.pixel_color(19, 9) == "#ffffff"

    def test_invalid_construction(self) -> None:
        with pytest.raises(ValueError):
            CanvasSurface(0, 10)
        with pytest.raises(ValueError):
            CanvasSurface(10, 10, background="not-a-color")

    def test_fill_and_clear(self) -> None:
        surface = CanvasSurface(40, 40)
        surface.draw_rectangle(Rect(5, 5, 20, 20), PenColor.GREEN, filled=True)
        assert surface.pixel_color(15, 15) == PenColor.GREEN.value

        surface.clear()
        assert surface.pixel_color(15, 15) == "#ffffff"

    def test_negative_size_extends_up_and_left(self) -> None:
        surface = CanvasSurface(40, 40)
        surface.draw_rectangle(Rect(30, 30, -20, -20), PenColor.RED, filled=True)
        assert surface.pixel_color(20, 20) == PenColor.RED.value

    def test_drawing_off_canvas_is_clipped(self) -> None:
        surface = CanvasSurface(40, 40)
        surface.draw_line(Position(-100, -100), Position(500, 500), PenColor.BLUE)
        surface.draw_polygon([Position(-10, -10), Position(100, -10), Position(0, 100)],
                             PenColor.BLUE, filled=True)
        assert surface.pixel_color(2, 2) == PenColor.BLUE.value

    def test_geometry_beyond_int32_is_clipped(self) -> None:
        surface = CanvasSurface(40, 40)
        surface.draw_rectangle(Rect(-4000000000, 10, 8000000000, 5), PenColor.RED, filled=True)
        surface.draw_ellipse(Rect(5000000000, 0, 10, 10), PenColor.BLUE)
        surface.draw_polygon([Position(0, 30), Position(4294967294, 30), Position(0, 4294967294)],
                             PenColor.GREEN)
        assert surface.pixel_color(20, 12) == PenColor.RED.value
        assert surface.pixel_color(20, 30) == PenColor.GREEN.value
