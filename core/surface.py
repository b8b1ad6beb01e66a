"""
Raster canvas the interpreter paints on, backed by a PySide6 QImage.
"""
from contextlib import contextmanager
from typing import List, Optional, Tuple

from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QImage, QPainter, QPen, QPolygonF

from core.drawing_state import PenColor, Position
from core.geometry import Rect


DEFAULT_BACKGROUND = "#ffffff"

# Distance outside the raster that geometry is clipped to
CLIP_MARGIN = 16


class CanvasSurface:
    """Persistent raster with the primitive drawing operations."""

    def __init__(self, width: int, height: int, background: str = DEFAULT_BACKGROUND):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")

        self.background = QColor(background)
        if not self.background.isValid():
            raise ValueError(f"Invalid background color: {background}")

        self.image = QImage(width, height, QImage.Format.Format_ARGB32)
        self.image.fill(self.background)

    @property
    def width(self) -> int:
        return self.image.width()

    @property
    def height(self) -> int:
        return self.image.height()

    @contextmanager
    def _painter(self, color: PenColor, filled: bool):
        painter = QPainter(self.image)
        try:
            qcolor = QColor(color.value)
            painter.setPen(QPen(qcolor))
            if filled:
                painter.setBrush(QBrush(qcolor))
            else:
                painter.setBrush(Qt.BrushStyle.NoBrush)
            yield painter
        finally:
            painter.end()

    def draw_line(self, start: Position, end: Position, color: PenColor):
        segment = self._clip_segment(start, end)
        if segment is None:
            return
        with self._painter(color, False) as painter:
            painter.drawLine(QLineF(*segment))

    def draw_rectangle(self, rect: Rect, color: PenColor, filled: bool = False):
        box = _to_qrectf(rect)
        if not self._overlaps(box):
            return
        # Edges outside the margin are never visible, so trimming them is exact
        with self._painter(color, filled) as painter:
            painter.drawRect(box.intersected(self._clip_box()))

    def draw_ellipse(self, rect: Rect, color: PenColor, filled: bool = False):
        box = _to_qrectf(rect)
        if not self._overlaps(box):
            return
        with self._painter(color, filled) as painter:
            painter.drawEllipse(box)

    def draw_polygon(self, points: List[Position], color: PenColor, filled: bool = False):
        polygon = QPolygonF([QPointF(p.x, p.y) for p in points])
        if not self._overlaps(polygon.boundingRect()):
            return
        with self._painter(color, filled) as painter:
            painter.drawPolygon(polygon)

    def clear(self):
        """Repaint the whole surface with the background color."""
        self.image.fill(self.background)

    def pixel_color(self, x: int, y: int) -> str:
        """Hex name of the color at (x, y), e.g. '#ff0000'."""
        return self.image.pixelColor(x, y).name()

    def snapshot(self) -> QImage:
        return self.image.copy()

    # Clipping. Coordinates may be any 32-bit value, far beyond the raster.

    def _clip_box(self) -> QRectF:
        return QRectF(-CLIP_MARGIN, -CLIP_MARGIN,
                      self.width + 2 * CLIP_MARGIN, self.height + 2 * CLIP_MARGIN)

    def _overlaps(self, box: QRectF) -> bool:
        # Degenerate boxes have no area but may still paint an edge
        clip = self._clip_box()
        return (box.right() >= clip.left() and box.left() <= clip.right()
                and box.bottom() >= clip.top() and box.top() <= clip.bottom())

    def _clip_segment(self, start: Position, end: Position) -> Optional[Tuple[QPointF, QPointF]]:
        """Liang-Barsky clip of a segment against the clip box."""
        clip = self._clip_box()
        x0, y0 = float(start.x), float(start.y)
        dx, dy = float(end.x) - x0, float(end.y) - y0

        t0, t1 = 0.0, 1.0
        for p, q in ((-dx, x0 - clip.left()), (dx, clip.right() - x0),
                     (-dy, y0 - clip.top()), (dy, clip.bottom() - y0)):
            if p == 0:
                if q < 0:
                    return None
                continue
            t = q / p
            if p < 0:
                t0 = max(t0, t)
            else:
                t1 = min(t1, t)
            if t0 > t1:
                return None

        return (QPointF(x0 + t0 * dx, y0 + t0 * dy),
                QPointF(x0 + t1 * dx, y0 + t1 * dy))


def _to_qrectf(rect: Rect) -> QRectF:
    # Negative sizes extend the box left/up from its anchor
    return QRectF(rect.x, rect.y, rect.width, rect.height).normalized()
