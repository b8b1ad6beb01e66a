import json
import os
import tempfile

import pytest

from command_processor import CommandProcessor
from config.canvas_config import CanvasConfig, ConfigManager
from core.drawing_state import PenColor
from core.geometry import ShapeType
from utils.errors import (ErrorCollector, ErrorSeverity, ErrorType,
                          InvalidArgumentsError, UnknownCommandError)


PROGRAM = """pen red
moveto 10 20

drawto 30 20
circle
fill on
paint 3 4
rectangle 5 5
"""


class TestProcessor:
    def test_single_commands(self) -> None:
        processor = CommandProcessor(ConfigManager.square())
        processor.execute_command("pen red")
        processor.execute_command("moveto 10 20")

        assert processor.current_pen_color == PenColor.RED
        assert processor.current_position == (10, 20)
        assert processor.fill_mode is False
        assert processor.get_state_summary() == {
            'pen_color': 'red', 'fill_mode': 'off', 'position': [10, 20],
        }

    def test_failed_commands_are_counted_not_recorded(self) -> None:
        processor = CommandProcessor()
        processor.execute_command("circle 10")
        with pytest.raises(UnknownCommandError):
            processor.execute_command("square 10")

        stats = processor.get_statistics()
        assert stats['processing']['executed'] == 1
        assert stats['processing']['failed'] == 1
        assert processor.get_history_text() == "circle 10"

    def test_check_syntax_does_not_record(self) -> None:
        processor = CommandProcessor()
        processor.check_syntax("triangle 40 30 99")
        with pytest.raises(InvalidArgumentsError):
            processor.check_syntax("triangle 40 30")
        assert processor.history == []

    def test_run_program_continues_after_errors(self) -> None:
        processor = CommandProcessor()
        assert processor.run_program(PROGRAM) is False

        errors = processor.get_all_errors()
        assert [e.line_number for e in errors] == [5, 7]
        assert errors[0].error_type == ErrorType.INVALID_ARGUMENTS
        assert errors[1].error_type == ErrorType.UNKNOWN_COMMAND
        assert str(errors[1]).startswith("Line 7: Unknown command")

        assert processor.current_position == (30, 20)
        assert processor.fill_mode is True
        assert len(processor.get_shapes_by_type(ShapeType.RECTANGLE)) == 1
        assert processor.get_shapes_by_type(ShapeType.RECTANGLE)[0].filled

    def test_check_program_draws_nothing(self) -> None:
        processor = CommandProcessor()
        before = processor.surface.snapshot()

        assert processor.check_program(PROGRAM) is False
        assert [e.line_number for e in processor.get_all_errors()] == [5, 7]
        assert processor.get_errors_for_line(5)[0].message.startswith("Invalid syntax for circle")
        assert processor.surface.snapshot() == before
        assert processor.current_position == (0, 0)

    def test_valid_program(self) -> None:
        processor = CommandProcessor()
        assert processor.check_program("moveto 1 1\ndrawto 5 5\n") is True
        assert processor.run_program("moveto 1 1\ndrawto 5 5\n") is True
        assert not processor.has_errors()

    def test_reset(self) -> None:
        processor = CommandProcessor()
        processor.run_program("pen blue\nmoveto 3 3\ncircle 2")
        processor.reset()

        assert processor.current_pen_color == PenColor.BLACK
        assert processor.current_position == (0, 0)
        assert processor.history == []
        assert processor.get_all_shapes() == []

    def test_resize_gives_blank_canvas(self) -> None:
        refreshes = []
        processor = CommandProcessor(on_refresh=lambda: refreshes.append(1))
        processor.run_program("fill on\nmoveto 10 10\ncircle 5")
        processor.resize(ConfigManager.hd())

        assert (processor.surface.width, processor.surface.height) == (1280, 720)
        assert processor.interpreter.surface is processor.surface
        assert processor.surface.pixel_color(10, 10) == "#ffffff"
        assert processor.fill_mode is True
        assert len(refreshes) == 3


class TestConfig:
    def test_presets(self) -> None:
        assert (ConfigManager.default().width, ConfigManager.default().height) == (1060, 489)
        assert ConfigManager.get_config("SQUARE").name == "Square"
        assert ConfigManager.get_config("nope").name == "Default"
        assert set(ConfigManager.preset_names()) == {"default", "square", "hd"}

    def test_save_and_load(self) -> None:
        config = CanvasConfig(name="Custom", width=320, height=200,
                              background="#eeeeee", marker_size=3)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "canvas.json")
            ConfigManager.save_config(config, path)
            assert ConfigManager.load_config(path) == config

    def test_load_falls_back_to_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "missing.json")
            assert ConfigManager.load_config(missing) == ConfigManager.default()

            broken = os.path.join(tmp, "broken.json")
            with open(broken, "w") as f:
                f.write("{not json")
            assert ConfigManager.load_config(broken) == ConfigManager.default()

            bad_size = os.path.join(tmp, "bad_size.json")
            with open(bad_size, "w") as f:
                json.dump({"name": "Bad", "width": 0, "height": 10}, f)
            assert ConfigManager.load_config(bad_size) == ConfigManager.default()


class TestErrorCollector:
    def test_sorted_and_filtered(self) -> None:
        collector = ErrorCollector()
        collector.add_error(3, 0, 4, "late", ErrorType.UNKNOWN_COMMAND)
        collector.add_error(1, 5, 6, "early", ErrorType.INVALID_ARGUMENTS)
        collector.add_error(1, 0, 2, "warn", ErrorType.INVALID_ARGUMENTS,
                            severity=ErrorSeverity.WARNING)

        assert [e.message for e in collector.get_all_errors()] == ["warn", "early", "late"]
        assert collector.get_first_error().message == "warn"
        assert len(collector.get_errors_for_line(1)) == 2
        assert collector.has_errors()

        collector.clear()
        assert not collector.has_errors()
        assert collector.get_first_error() is None

    def test_warnings_only(self) -> None:
        collector = ErrorCollector()
        collector.add_error(1, 0, 0, "note", ErrorType.INVALID_ARGUMENTS,
                            severity=ErrorSeverity.WARNING)
        assert not collector.has_errors()
