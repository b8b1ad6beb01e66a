"""
Main drawing interpreter that coordinates all components.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from core.drawing_state import DrawingState, PenColor, Position
from core.geometry import (ShapeLog, ShapeType, circle_rect, marker_rect,
                           rectangle_rect, triangle_vertices, MARKER_SIZE)
from core.lexer import CommandLexer
from core.parser import Command, CommandParser
from core.surface import CanvasSurface
from utils.errors import CommandError

logger = logging.getLogger(__name__)


@dataclass
class CommandOutcome:
    """Result of a successfully executed command."""
    command: Command
    state: DrawingState
    changes: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "; ".join(self.changes)


class DrawingInterpreter:
    """
    Interprets drawing commands against a canvas surface.

    execute_command() validates a line and then applies it. check_syntax()
    runs the same validation and stops there.
    """

    def __init__(self, surface: CanvasSurface,
                 on_refresh: Optional[Callable[[], None]] = None,
                 marker_size: int = MARKER_SIZE):
        self.surface = surface
        self.on_refresh = on_refresh
        self.marker_size = marker_size

        self.state = DrawingState()
        self.shape_log = ShapeLog()

        self.lexer = CommandLexer()
        self.parser = CommandParser(self.lexer)

        self.command_counter = 0

        # Verb handler mapping
        self.handlers: Dict[str, Callable[[Command], List[str]]] = {
            'moveto': self.handle_moveto,
            'drawto': self.handle_drawto,
            'rectangle': self.handle_rectangle,
            'circle': self.handle_circle,
            'triangle': self.handle_triangle,
            'pen': self.handle_pen,
            'fill': self.handle_fill,
            'clear': self.handle_clear,
            'reset': self.handle_reset,
        }

    # Public entry points

    def execute_command(self, line: str) -> CommandOutcome:
        """
        Validate and execute one command line.

        Raises:
            UnknownCommandError: the verb is not recognized
            InvalidArgumentsError: the arguments do not fit the verb

        The host refresh callback runs afterwards whether or not the command
        succeeded.
        """
        try:
            try:
                command = self.parser.parse(line)
            except CommandError as e:
                logger.warning("Rejected command %r: %s", line, e.message)
                raise

            self.command_counter += 1
            logger.debug("Executing command %d: %s", self.command_counter, command)
            changes = self.handlers[command.verb](command)
            return CommandOutcome(command=command, state=self.state.copy(),
                                  changes=changes)
        finally:
            self._refresh()

    def check_syntax(self, line: str) -> Command:
        """
        Validate a command line without executing it.

        Returns the validated command; raises CommandError like
        execute_command() would for the same line.
        """
        command = self.parser.parse(line)
        logger.debug("Syntax OK: %s", command)
        return command

    def is_valid(self, line: str) -> bool:
        try:
            self.check_syntax(line)
        except CommandError:
            return False
        return True

    # Command handlers. Each runs only after the whole command validated.

    def handle_moveto(self, command: Command) -> List[str]:
        """
        moveto x y
        Move the pen and paint a small dot at the new position.
        """
        x, y = command.values
        target = Position(x, y)

        rect = marker_rect(target, self.marker_size)
        self.surface.draw_ellipse(rect, self.state.pen_color, filled=True)
        self.state.move_to(target)
        self._record(ShapeType.MARKER, [target], filled=True, bounds=rect)

        logger.info("Pen moved to (%d, %d)", x, y)
        return [f"Pen moved to ({x}, {y})"]

    def handle_drawto(self, command: Command) -> List[str]:
        """
        drawto x y
        Draw a line from the current position and move the pen to its end.
        """
        x, y = command.values
        start = self.state.position.copy()
        end = Position(x, y)

        self.surface.draw_line(start, end, self.state.pen_color)
        self._record(ShapeType.LINE, [start, end])
        self.state.move_to(end)

        logger.info("Line drawn to (%d, %d)", x, y)
        return [f"Line drawn from ({start.x}, {start.y}) to ({x}, {y})"]

    def handle_rectangle(self, command: Command) -> List[str]:
        width, height = command.values
        rect = rectangle_rect(self.state.position, width, height)
        filled = self.state.fill_mode

        self.surface.draw_rectangle(rect, self.state.pen_color, filled)
        self._record(ShapeType.RECTANGLE, rect.corners(), filled=filled, bounds=rect)

        return [f"{self._style()} rectangle {width}x{height} drawn"]

    def handle_circle(self, command: Command) -> List[str]:
        radius, = command.values
        rect = circle_rect(self.state.position, radius)
        filled = self.state.fill_mode

        self.surface.draw_ellipse(rect, self.state.pen_color, filled)
        self._record(ShapeType.ELLIPSE, [self.state.position], filled=filled, bounds=rect)

        return [f"{self._style()} circle of radius {radius} drawn"]

    def handle_triangle(self, command: Command) -> List[str]:
        base, side1, side2 = command.values
        vertices = triangle_vertices(self.state.position, base, side1, side2)
        filled = self.state.fill_mode

        self.surface.draw_polygon(vertices, self.state.pen_color, filled)
        self._record(ShapeType.POLYGON, vertices, filled=filled)

        return [f"{self._style()} triangle with base {base} drawn"]

    def handle_pen(self, command: Command) -> List[str]:
        color: PenColor = command.values[0]
        self.state.pen_color = color
        logger.info("Pen color set to %s", color.label)
        return [f"Pen color is now {color.label}"]

    def handle_fill(self, command: Command) -> List[str]:
        self.state.fill_mode = command.values[0]
        mode = 'ON' if self.state.fill_mode else 'OFF'
        logger.info("Fill mode set to %s", mode)
        return [f"Fill mode is now {mode}"]

    def handle_clear(self, command: Command) -> List[str]:
        self.surface.clear()
        self.shape_log.clear()
        logger.info("Canvas cleared")
        return ["Drawing area cleared"]

    def handle_reset(self, command: Command) -> List[str]:
        self.state.reset_position()
        logger.info("Pen position reset")
        return ["Pen moved back to (0, 0)"]

    # Helpers

    def _style(self) -> str:
        return "Filled" if self.state.fill_mode else "Outlined"

    def _record(self, shape_type: ShapeType, points, filled=False, bounds=None):
        self.shape_log.add_shape(self.command_counter, shape_type, points,
                                 self.state.pen_color, filled=filled, bounds=bounds)

    def _refresh(self):
        if self.on_refresh is not None:
            self.on_refresh()

    def replace_surface(self, surface: CanvasSurface):
        """Start drawing on a new surface, e.g. after a canvas resize."""
        self.surface = surface
        self.shape_log.clear()

    def reset(self):
        """Reset interpreter to its initial state."""
        self.state = DrawingState()
        self.shape_log.clear()
        self.surface.clear()
        self.command_counter = 0
