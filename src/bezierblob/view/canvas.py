"""
Blob Canvas
===========
The drawing surface. It owns the frame timer and forwards mouse and keyboard
input into the session.

Why is this file needed?
------------------------
1. Frame Loop: A `QTimer` calls `BlobSession.tick()` and schedules a repaint.
2. Rendering: `paintEvent` turns the shape's curves into a `QPainterPath`
   and draws the optional overlays.
3. Input: Pointer positions are converted to shape coordinates before the
   session sees them.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer, QPointF, Signal
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QPainterPath, QPen, QBrush
from PySide6.QtWidgets import QWidget, QSizePolicy

from bezierblob.model.math_utils import radians_to_degrees
from bezierblob.model.shape import BlobShape
from bezierblob.model.state import BlobSession
from bezierblob.view.keymap import action_for_key

logger = logging.getLogger(__name__)

OUTLINE_COLOR = QColor("#000000")
OUTLINE_WIDTH = 2.0
CONNECTOR_COLOR = QColor("#0000ff")
CONNECTOR_WIDTH = 5.0
CONTROL_MARKER_COLOR = QColor("#0000ff")
ANCHOR_MARKER_COLOR = QColor("#000000")
GRADIENT_START = QColor("#0000ff")
GRADIENT_END = QColor("pink")


def build_outline_path(shape: BlobShape) -> QPainterPath:
    """
    One continuous closed path: move to the first anchor, one cubic per
    curve in order, then close.
    """
    (sx, sy), segments = shape.path_segments()
    path = QPainterPath()
    path.moveTo(sx, sy)
    for (c1x, c1y), (c2x, c2y), (ex, ey) in segments:
        path.cubicTo(c1x, c1y, c2x, c2y, ex, ey)
    path.closeSubpath()
    return path


def build_fill_brush() -> QBrush:
    gradient = QLinearGradient(400.0, 400.0, -400.0, -400.0)
    gradient.setColorAt(0.0, GRADIENT_START)
    gradient.setColorAt(1.0, GRADIENT_END)
    return QBrush(gradient)


class BlobCanvas(QWidget):
    """Renders the session's shape and drives its frame loop."""
    # Emitted whenever a toggle, a drag or an animated frame changed the status bar
    state_changed = Signal()

    def __init__(self, session: BlobSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 200)

        self._fill_brush = build_fill_brush()

        # Animation Timer
        self.timer = QTimer(self)
        self.timer.setInterval(session.config.frame_interval_ms)
        self.timer.timeout.connect(self.advance_frame)
        self.timer.start()

    def advance_frame(self) -> None:
        self.session.tick()
        self.update()
        # the outline area in the status bar follows the oscillation
        if self.session.animating:
            self.state_changed.emit()

    # ---- painting ----

    def paintEvent(self, event) -> None:
        session = self.session
        shape = session.shape

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), Qt.GlobalColor.white)

        painter.translate(self.width() / 2.0, self.height() / 2.0)
        painter.rotate(radians_to_degrees(session.rotation))

        path = build_outline_path(shape)
        if session.fill:
            painter.fillPath(path, self._fill_brush)
        else:
            pen = QPen(OUTLINE_COLOR, OUTLINE_WIDTH)
            pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
            painter.strokePath(path, pen)

        if session.draw_connections:
            painter.setPen(QPen(CONNECTOR_COLOR, CONNECTOR_WIDTH))
            for (x0, y0), (x1, y1) in shape.connector_lines():
                painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))

        if session.draw_markers:
            r = session.config.marker_radius
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(CONTROL_MARKER_COLOR))
            for x, y in shape.control_positions():
                painter.drawEllipse(QPointF(float(x), float(y)), r, r)
            painter.setBrush(QBrush(ANCHOR_MARKER_COLOR))
            for x, y in shape.anchor_positions():
                painter.drawEllipse(QPointF(float(x), float(y)), r, r)

        painter.end()

    # ---- input ----

    def _to_shape(self, event) -> tuple[float, float]:
        pos = event.position()
        return self.session.surface_to_shape(pos.x(), pos.y(), self.width(), self.height())

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            x, y = self._to_shape(event)
            if self.session.pointer_down(x, y) is not None:
                self.state_changed.emit()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        x, y = self._to_shape(event)
        if self.session.pointer_move(x, y):
            self.update()
            self.state_changed.emit()
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self.session.captured is not None:
            self.session.pointer_up()
            self.state_changed.emit()
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event) -> None:
        action = action_for_key(event.key())
        if action is None:
            super().keyPressEvent(event)
            return
        logger.debug("Key %s -> %s", event.key(), action.name)
        self.session.apply(action)
        self.update()
        self.state_changed.emit()
