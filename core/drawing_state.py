"""
Drawing state management for the command interpreter.
Tracks the pen color, fill mode and current pen position.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Tuple
from enum import Enum


class PenColor(Enum):
    """Named pen colors. Values are the RGB hex codes painted on the canvas."""
    BLACK = "#000000"
    RED = "#ff0000"
    GREEN = "#008000"
    BLUE = "#0000ff"

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass
class Position:
    """Represents a pen position on the canvas."""
    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> 'Position':
        """Return a new position shifted by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def copy(self) -> 'Position':
        """Create a copy of this position."""
        return Position(x=self.x, y=self.y)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class DrawingState:
    """Pen color, fill mode and pen position threaded between commands."""
    pen_color: PenColor = PenColor.BLACK
    fill_mode: bool = False
    position: Position = field(default_factory=Position)

    def move_to(self, new_position: Position):
        """Update the current position."""
        self.position = new_position

    def reset_position(self):
        """Move the pen back to the origin."""
        self.position = Position()

    def copy(self) -> 'DrawingState':
        """Create an independent snapshot of this state."""
        return DrawingState(
            pen_color=self.pen_color,
            fill_mode=self.fill_mode,
            position=self.position.copy()
        )

    def get_state_summary(self) -> Dict[str, Any]:
        """Get a summary of the current drawing state for display."""
        return {
            'pen_color': self.pen_color.label,
            'fill_mode': 'on' if self.fill_mode else 'off',
            'position': [self.position.x, self.position.y],
        }
