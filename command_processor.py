"""
Main drawing command processor interface.
This is the primary entry point for the command interpreter.
"""
import logging
from typing import List, Dict, Any, Optional, Tuple, Callable

from config.canvas_config import CanvasConfig, ConfigManager
from core.drawing_state import PenColor
from core.geometry import Shape, ShapeType
from core.interpreter import DrawingInterpreter, CommandOutcome
from core.parser import Command
from core.surface import CanvasSurface
from utils.errors import CommandError, CommandErrorRecord, ErrorCollector

logger = logging.getLogger(__name__)


class CommandProcessor:
    """
    Main interface for drawing command processing.
    Provides a simple API for the GUI and for scripted use.
    """

    def __init__(self, config: Optional[CanvasConfig] = None,
                 on_refresh: Optional[Callable[[], None]] = None):
        self.config = config or ConfigManager.default()
        self.surface = CanvasSurface(self.config.width, self.config.height,
                                     self.config.background)
        self.interpreter = DrawingInterpreter(self.surface, on_refresh=on_refresh,
                                              marker_size=self.config.marker_size)
        self.error_collector = ErrorCollector()

        self.history: List[str] = []
        self.executed_count = 0
        self.failed_count = 0

    # Single commands

    def execute_command(self, line: str) -> CommandOutcome:
        """
        Execute one command line against the canvas.

        Raises:
            CommandError: when the line is rejected; nothing was changed
        """
        try:
            outcome = self.interpreter.execute_command(line)
        except CommandError:
            self.failed_count += 1
            raise

        self.executed_count += 1
        self.history.append(line.strip())
        return outcome

    def check_syntax(self, line: str) -> Command:
        """
        Validate one command line without drawing anything.

        Raises:
            CommandError: when the line is rejected
        """
        return self.interpreter.check_syntax(line)

    # Programs: one command per non-blank line

    def run_program(self, text: str) -> bool:
        """
        Execute every non-blank line of a program in order.
        Rejected lines are recorded and execution continues with the next one.

        Returns:
            True if every line executed
        """
        self.error_collector.clear()

        for line_number, line in self._program_lines(text):
            try:
                self.execute_command(line)
            except CommandError as e:
                self.error_collector.add_command_error(line_number, e)

        return not self.error_collector.has_errors()

    def check_program(self, text: str) -> bool:
        """Validate every non-blank line of a program without executing it."""
        self.error_collector.clear()

        for line_number, line in self._program_lines(text):
            try:
                self.check_syntax(line)
            except CommandError as e:
                self.error_collector.add_command_error(line_number, e)

        return not self.error_collector.has_errors()

    @staticmethod
    def _program_lines(text: str):
        for line_number, line in enumerate(text.split('\n'), 1):
            if line.strip():
                yield line_number, line

    def get_errors_for_line(self, line_number: int) -> List[CommandErrorRecord]:
        return self.error_collector.get_errors_for_line(line_number)

    def get_all_errors(self) -> List[CommandErrorRecord]:
        """Get all errors from the last program run or check."""
        return self.error_collector.get_all_errors()

    def has_errors(self) -> bool:
        return self.error_collector.has_errors()

    # Drawing state

    @property
    def current_pen_color(self) -> PenColor:
        return self.interpreter.state.pen_color

    @property
    def current_position(self) -> Tuple[int, int]:
        return self.interpreter.state.position.to_tuple()

    @property
    def fill_mode(self) -> bool:
        return self.interpreter.state.fill_mode

    def get_state_summary(self) -> Dict[str, Any]:
        """Get current drawing state summary."""
        return self.interpreter.state.get_state_summary()

    # Shapes

    def get_all_shapes(self) -> List[Shape]:
        return self.interpreter.shape_log.get_all_shapes()

    def get_shapes_by_type(self, shape_type: ShapeType) -> List[Shape]:
        return self.interpreter.shape_log.get_shapes_by_type(shape_type)

    def get_statistics(self) -> Dict[str, Any]:
        """Get processing and drawing statistics."""
        low, high = self.interpreter.shape_log.get_bounding_box()
        return {
            'processing': {
                'executed': self.executed_count,
                'failed': self.failed_count,
                'errors': len(self.error_collector.errors),
            },
            'shapes': self.interpreter.shape_log.get_statistics(),
            'bounding_box': {
                'min': [low.x, low.y],
                'max': [high.x, high.y],
            },
            'drawing_state': self.get_state_summary(),
        }

    def get_history_text(self) -> str:
        """Executed commands as a program, one per line."""
        return '\n'.join(self.history)

    # Utility methods

    def reset(self):
        """Reset processor to initial state with a blank canvas."""
        self.interpreter.reset()
        self.error_collector.clear()
        self.history.clear()
        self.executed_count = 0
        self.failed_count = 0

    def resize(self, config: CanvasConfig):
        """Switch to a new, blank canvas for the given configuration."""
        logger.info("Switching canvas to %s (%dx%d)", config.name, config.width, config.height)
        self.config = config
        self.surface = CanvasSurface(config.width, config.height, config.background)
        self.interpreter.replace_surface(self.surface)
        self.interpreter.marker_size = config.marker_size
