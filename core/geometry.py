"""
Geometry management for the drawing interpreter.
Computes shape outlines from the pen state and keeps a log of everything
painted on the canvas, mapped back to the command that produced it.
"""
from dataclasses import dataclass
from typing import List, Optional, Dict, Tuple, Any
from enum import Enum

from core.drawing_state import PenColor, Position


# Side length of the square the pen position marker is drawn in
MARKER_SIZE = 2


class ShapeType(Enum):
    MARKER = "marker"
    LINE = "line"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box given by its top-left corner and size."""
    x: int
    y: int
    width: int
    height: int

    def corners(self) -> List[Position]:
        return [Position(self.x, self.y),
                Position(self.x + self.width, self.y + self.height)]


@dataclass
class Shape:
    """A single primitive painted on the canvas."""
    shape_id: int
    command_number: int
    shape_type: ShapeType
    points: List[Position]
    color: PenColor
    filled: bool = False
    bounds: Optional[Rect] = None

    def get_bounding_box(self) -> Tuple[Position, Position]:
        """Get the bounding box of this shape."""
        points = self.bounds.corners() if self.bounds else self.points
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return Position(min(xs), min(ys)), Position(max(xs), max(ys))


def half_toward_zero(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def marker_rect(position: Position, size: int = MARKER_SIZE) -> Rect:
    """Box of the small dot marking the pen position."""
    half = size // 2
    return Rect(position.x - half, position.y - half, size, size)


def rectangle_rect(position: Position, width: int, height: int) -> Rect:
    return Rect(position.x, position.y, width, height)


def circle_rect(center: Position, radius: int) -> Rect:
    """Bounding box of a circle around the given center."""
    return Rect(center.x - radius, center.y - radius, radius * 2, radius * 2)


def triangle_vertices(position: Position, base: int, side1: int,
                      side2: int) -> List[Position]:
    """
    Vertices of the triangle drawn by the triangle command.

    The base runs right from the pen position and the apex sits above its
    midpoint at height side1. side2 does not influence the vertices.
    """
    return [
        position.copy(),
        position.offset(base, 0),
        position.offset(half_toward_zero(base), -side1),
    ]


class ShapeLog:
    """Keeps every painted primitive and maps commands to their shapes."""

    def __init__(self):
        self.shapes: List[Shape] = []
        self.command_to_shapes: Dict[int, List[int]] = {}  # command_number -> shape_ids
        self.shape_counter = 0

    def add_shape(self, command_number: int, shape_type: ShapeType,
                  points: List[Position], color: PenColor,
                  filled: bool = False, bounds: Optional[Rect] = None) -> Shape:
        """Record a painted shape."""
        shape = Shape(
            shape_id=self.shape_counter,
            command_number=command_number,
            shape_type=shape_type,
            points=[p.copy() for p in points],
            color=color,
            filled=filled,
            bounds=bounds
        )

        self.shapes.append(shape)
        self.command_to_shapes.setdefault(command_number, []).append(shape.shape_id)

        self.shape_counter += 1
        return shape

    def get_shapes_for_command(self, command_number: int) -> List[Shape]:
        """Get all shapes painted by a specific command."""
        shape_ids = set(self.command_to_shapes.get(command_number, []))
        return [shape for shape in self.shapes if shape.shape_id in shape_ids]

    def get_all_shapes(self) -> List[Shape]:
        return self.shapes.copy()

    def get_shapes_by_type(self, shape_type: ShapeType) -> List[Shape]:
        """Get all shapes of a specific type."""
        return [shape for shape in self.shapes if shape.shape_type == shape_type]

    def get_last_shape(self) -> Optional[Shape]:
        return self.shapes[-1] if self.shapes else None

    def get_bounding_box(self) -> Tuple[Position, Position]:
        """Get the overall bounding box of all shapes."""
        if not self.shapes:
            return Position(0, 0), Position(0, 0)

        min_x = min_y = float('inf')
        max_x = max_y = float('-inf')

        for shape in self.shapes:
            low, high = shape.get_bounding_box()
            min_x = min(min_x, low.x)
            min_y = min(min_y, low.y)
            max_x = max(max_x, high.x)
            max_y = max(max_y, high.y)

        return Position(int(min_x), int(min_y)), Position(int(max_x), int(max_y))

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the painted shapes."""
        stats = {'total_shapes': len(self.shapes)}
        for shape_type in ShapeType:
            stats[f'{shape_type.value}_shapes'] = len(self.get_shapes_by_type(shape_type))
        stats['filled_shapes'] = len([s for s in self.shapes if s.filled])
        stats['commands_with_shapes'] = len(self.command_to_shapes)
        return stats

    def clear(self):
        """Forget all shapes, e.g. after the canvas was cleared."""
        self.shapes.clear()
        self.command_to_shapes.clear()
