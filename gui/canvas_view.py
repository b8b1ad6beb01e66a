"""
Canvas view widget displaying the drawing surface and the pen position.
"""
from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QColor, QPen
from PySide6.QtCore import Qt, QLineF, QPointF, QSize

from core.surface import CanvasSurface


CURSOR_SIZE = 6


class CanvasView(QWidget):
    """Shows the raster canvas the interpreter paints on."""

    def __init__(self, surface: CanvasSurface, parent=None):
        super().__init__(parent)
        self.surface = surface
        self.pen_position = (0, 0)

        # Display settings
        self.show_cursor = True
        self.border_color = QColor('#a0a0a0')
        self.cursor_color = QColor('#ff8c00')

        self.setMinimumSize(200, 150)

    def set_surface(self, surface: CanvasSurface):
        """Display a new surface, e.g. after the canvas was resized."""
        self.surface = surface
        self.updateGeometry()
        self.update()

    def set_pen_position(self, x: int, y: int):
        self.pen_position = (x, y)
        self.update()

    def sizeHint(self):
        return QSize(self.surface.width + 2, self.surface.height + 2)

    def paintEvent(self, event):
        """Draw the canvas image, its border and the pen cursor."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.palette().window())

        painter.drawImage(1, 1, self.surface.image)

        painter.setPen(QPen(self.border_color))
        painter.drawRect(0, 0, self.surface.width + 1, self.surface.height + 1)

        if self.show_cursor:
            self.draw_cursor(painter)

        painter.end()

    def cursor_visible(self) -> bool:
        """True when the pen lies on the canvas; off-canvas pens get no crosshair."""
        x, y = self.pen_position
        return 0 <= x < self.surface.width and 0 <= y < self.surface.height

    def draw_cursor(self, painter: QPainter):
        """Draw a small crosshair at the pen position."""
        if not self.cursor_visible():
            return
        x, y = self.pen_position
        center = QPointF(x + 1, y + 1)
        pen = QPen(self.cursor_color)
        pen.setStyle(Qt.PenStyle.DotLine)
        painter.setPen(pen)
        painter.drawLine(QLineF(center - QPointF(CURSOR_SIZE, 0), center + QPointF(CURSOR_SIZE, 0)))
        painter.drawLine(QLineF(center - QPointF(0, CURSOR_SIZE), center + QPointF(0, CURSOR_SIZE)))
