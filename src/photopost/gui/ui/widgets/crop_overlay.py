"""Image uploader crop overlay widget.

The widget is the host layer of :class:`CropBoxController`: it reports its
size on every layout pass, folds mouse and touch input into one pointer
abstraction and paints the crop box over the uploaded image.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPainterPath, QPen, QPixmap
from PySide6.QtWidgets import QWidget

from photopost import config
from photopost.settings import SettingsManager

from .crop_box import (
    AspectRatio,
    CropBoxController,
    DragMode,
    PointerPosition,
    Rectangle,
)

_LOGGER = logging.getLogger(__name__)

_TOUCH_PRESS = (QEvent.Type.TouchBegin,)
_TOUCH_MOVE = (QEvent.Type.TouchUpdate,)
_TOUCH_RELEASE = (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel)


class CropOverlay(QWidget):
    """Interactive crop box drawn on top of the uploaded photo."""

    cropChanged = Signal(dict)
    dragStateChanged = Signal(bool)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        aspect_ratio: AspectRatio | str | None = None,
        settings: SettingsManager | None = None,
    ) -> None:
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

        min_size = config.MIN_CROP_SIZE
        hit_radius = config.HANDLE_HIT_RADIUS
        if settings is not None:
            if aspect_ratio is None:
                aspect_ratio = settings.get("crop.default_aspect_ratio")
            min_size = float(settings.get("crop.min_size", min_size))
            hit_radius = float(settings.get("crop.handle_hit_radius", hit_radius))

        if aspect_ratio is None:
            aspect_ratio = AspectRatio.HORIZONTAL

        self._pixmap: QPixmap | None = None
        self._controller = CropBoxController(
            aspect_ratio=aspect_ratio,
            on_rect_changed=self._on_rect_changed,
            on_cursor_change=self._on_cursor_change,
            on_drag_ended=self._on_drag_ended,
            min_size=min_size,
            hit_radius=hit_radius,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def controller(self) -> CropBoxController:
        return self._controller

    def crop_values(self) -> dict[str, float]:
        """Return the crop handed to the publishing step."""
        return self._controller.crop_values()

    def set_image(self, pixmap: QPixmap | None) -> None:
        """Show *pixmap* and re-centre the crop box."""
        if pixmap is not None and pixmap.isNull():
            _LOGGER.debug("Treating a null pixmap as no image")
            pixmap = None
        self._pixmap = pixmap
        self._controller.set_image(self._pixmap)

    def set_aspect_ratio(self, aspect_ratio: AspectRatio | str) -> bool:
        """Switch the aspect ratio; returns False while a drag is in progress."""
        return self._controller.set_aspect_ratio(aspect_ratio)

    # ------------------------------------------------------------------
    # Pointer routing
    # ------------------------------------------------------------------
    def _pointer_down(self, pos: QPointF) -> bool:
        mode = self._controller.press(PointerPosition.from_qt(pos))
        if mode is DragMode.NONE:
            return False
        self.dragStateChanged.emit(True)
        return True

    def _pointer_move(self, pos: QPointF) -> None:
        pointer = PointerPosition.from_qt(pos)
        if self._controller.is_dragging():
            self._controller.update_drag(pointer)
        else:
            self._controller.hover(pointer)

    def _pointer_up(self) -> None:
        self._controller.end_drag()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def resizeEvent(self, event) -> None:  # noqa: N802 - Qt API
        super().resizeEvent(event)
        self._controller.set_container_size(self.width(), self.height())

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt API
        if event.button() == Qt.MouseButton.LeftButton and self._pointer_down(event.position()):
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt API
        self._pointer_move(event.position())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt API
        if event.button() == Qt.MouseButton.LeftButton:
            self._pointer_up()

    def leaveEvent(self, event) -> None:  # noqa: N802 - Qt API
        self._pointer_up()
        self.unsetCursor()
        super().leaveEvent(event)

    def event(self, event: QEvent) -> bool:
        kind = event.type()
        if kind in _TOUCH_PRESS + _TOUCH_MOVE + _TOUCH_RELEASE:
            points = event.points()
            if kind in _TOUCH_RELEASE or not points:
                self._pointer_up()
            elif kind in _TOUCH_PRESS:
                self._pointer_down(points[0].position())
            else:
                self._pointer_move(points[0].position())
            event.accept()
            return True
        return super().event(event)

    def paintEvent(self, event) -> None:  # noqa: N802 - Qt API
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        bounds = QRectF(self.rect())
        if self._pixmap is not None:
            painter.drawPixmap(bounds, self._pixmap, QRectF(self._pixmap.rect()))
        else:
            painter.fillRect(bounds, QColor("#2b2b2b"))

        width, height = float(self.width()), float(self.height())
        if width <= 0 or height <= 0:
            return
        left, top, right, bottom = self._controller.rectangle.to_pixels(
            self._controller.container_size
        )
        crop = QRectF(left, top, right - left, bottom - top)

        shade = QPainterPath()
        shade.addRect(bounds)
        hole = QPainterPath()
        hole.addRect(crop)
        painter.fillPath(shade.subtracted(hole), QColor(0, 0, 0, config.CROP_SHADE_ALPHA))

        painter.setPen(QPen(QColor("#ffffff"), config.CROP_FRAME_WIDTH))
        painter.drawRect(crop)

        half = config.CROP_HANDLE_PAINT_SIZE / 2.0
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor("#ffffff"))
        for cx, cy in ((left, top), (right, top), (right, bottom), (left, bottom)):
            painter.drawRect(QRectF(cx - half, cy - half, half * 2.0, half * 2.0))

    # ------------------------------------------------------------------
    # Controller callbacks
    # ------------------------------------------------------------------
    def _on_rect_changed(self, rect: Rectangle) -> None:
        self.cropChanged.emit(rect.as_mapping())
        self.update()

    def _on_drag_ended(self) -> None:
        self.dragStateChanged.emit(False)

    def _on_cursor_change(self, cursor: Qt.CursorShape | None) -> None:
        if cursor is None:
            self.unsetCursor()
        else:
            self.setCursor(cursor)


__all__ = ["CropOverlay"]
