"""
Crop box controller (coordinator).

This module acts as the orchestrator, delegating to specialized modules for
hit testing and geometry while owning the current rectangle and the active
drag session of one uploader widget.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import Qt

from photopost import config

from .hit_tester import HitTester
from .session import DragSession, begin_drag, initialize, update_drag
from .utils import (
    AspectRatio,
    ContainerSize,
    DragMode,
    PointerPosition,
    Rectangle,
    cursor_for_mode,
)

_LOGGER = logging.getLogger(__name__)


class CropBoxController:
    """Maintains an aspect-locked crop rectangle and interprets drag gestures."""

    def __init__(
        self,
        *,
        aspect_ratio: AspectRatio | str = AspectRatio.HORIZONTAL,
        on_rect_changed: Callable[[Rectangle], None] | None = None,
        on_cursor_change: Callable[[Qt.CursorShape | None], None] | None = None,
        on_drag_ended: Callable[[], None] | None = None,
        min_size: float = config.MIN_CROP_SIZE,
        hit_radius: float = config.HANDLE_HIT_RADIUS,
    ) -> None:
        """Initialize the crop box controller.

        Parameters
        ----------
        aspect_ratio:
            Initial aspect ratio of the crop box.
        on_rect_changed:
            Callback receiving the new rectangle whenever it changes.
        on_cursor_change:
            Callback to change cursor, signature: (cursor_shape or None to unset).
        on_drag_ended:
            Callback invoked once whenever an open drag session closes, whether
            by release, cancel or a reset.
        min_size:
            Minimum extent of the ratio-driving dimension, in percent.
        hit_radius:
            Corner handle hit radius, in container pixels.
        """
        self._on_rect_changed = on_rect_changed
        self._on_cursor_change = on_cursor_change
        self._on_drag_ended = on_drag_ended
        self._min_size = float(min_size)
        self._hit_tester = HitTester(hit_radius=hit_radius)

        self._aspect_ratio = AspectRatio.parse(aspect_ratio)
        self._rect = initialize(self._aspect_ratio)
        self._container = ContainerSize(0.0, 0.0)
        self._session: DragSession | None = None
        self._image: object | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def rectangle(self) -> Rectangle:
        return self._rect

    @property
    def aspect_ratio(self) -> AspectRatio:
        return self._aspect_ratio

    @property
    def container_size(self) -> ContainerSize:
        return self._container

    @property
    def session(self) -> DragSession | None:
        return self._session

    @property
    def image(self) -> object | None:
        return self._image

    def is_dragging(self) -> bool:
        """Return True while a drag session is open."""
        return self._session is not None

    def drag_mode(self) -> DragMode:
        return self._session.mode if self._session is not None else DragMode.NONE

    def crop_values(self) -> dict[str, float]:
        """Return the current rectangle as a mapping for export."""
        return self._rect.as_mapping()

    def initialize(self, aspect_ratio: AspectRatio | str | None = None) -> Rectangle:
        """Reset the rectangle to the centred default for *aspect_ratio*.

        Ignored while a drag session is open; the unchanged rectangle is
        returned.
        """
        parsed = AspectRatio.parse(aspect_ratio) if aspect_ratio is not None else None
        if self._session is not None:
            _LOGGER.debug("Ignoring crop reset during a %s drag", self._session.mode.value)
            return self._rect
        self._reset(parsed)
        return self._rect

    def set_container_size(self, width: float, height: float) -> None:
        """Record the container pixel size from the latest layout pass."""
        self._container = ContainerSize(float(width), float(height))
        if not self._container.is_valid:
            _LOGGER.debug("Crop container has degenerate size %s", self._container)

    def set_aspect_ratio(self, aspect_ratio: AspectRatio | str) -> bool:
        """Switch the aspect ratio and re-centre the rectangle.

        Returns False when the change is ignored because a gesture is open or
        the ratio is already active.
        """
        parsed = AspectRatio.parse(aspect_ratio)
        if self._session is not None:
            _LOGGER.debug("Ignoring aspect ratio change to %s during a drag", parsed.value)
            return False
        if parsed is self._aspect_ratio:
            return False
        self._reset(parsed)
        return True

    def set_image(self, image: object | None) -> None:
        """Replace the source image handle and re-centre the rectangle.

        A drag in progress is ended first.
        """
        self._image = image
        self.end_drag()
        self._reset()

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------
    def handle_at(self, pointer: PointerPosition) -> DragMode:
        """Return the gesture a press at *pointer* would start."""
        return self._hit_tester.test(pointer, self._rect, self._container)

    def hover(self, pointer: PointerPosition) -> DragMode:
        """Update the cursor for a pointer hovering without a pressed button."""
        if self._session is not None:
            return self._session.mode
        mode = self.handle_at(pointer)
        if self._on_cursor_change is not None:
            self._on_cursor_change(cursor_for_mode(mode))
        return mode

    def press(self, pointer: PointerPosition) -> DragMode:
        """Hit-test *pointer* and begin whichever gesture it targets."""
        if self._session is not None:
            return DragMode.NONE
        mode = self.handle_at(pointer)
        if mode is DragMode.NONE or not self.begin_drag(mode, pointer):
            return DragMode.NONE
        return mode

    def begin_drag(self, mode: DragMode | str, pointer: PointerPosition) -> bool:
        """Open a drag session for *mode*; return False when rejected."""
        if self._session is not None:
            _LOGGER.debug(
                "Rejecting %s press while a %s gesture is active",
                DragMode(mode).value,
                self._session.mode.value,
            )
            return False
        session = begin_drag(
            mode,
            pointer,
            self._rect,
            self._container,
            hit_tester=self._hit_tester,
            min_size=self._min_size,
        )
        if session is None:
            return False
        self._session = session
        if self._on_cursor_change is not None:
            if session.mode is DragMode.MOVE:
                self._on_cursor_change(Qt.CursorShape.ClosedHandCursor)
            else:
                self._on_cursor_change(cursor_for_mode(session.mode))
        return True

    def update_drag(self, pointer: PointerPosition) -> Rectangle:
        """Apply a pointer move to the active session and return the rectangle."""
        if self._session is None:
            return self._rect
        self._set_rect(update_drag(self._session, pointer, self._aspect_ratio))
        return self._rect

    def end_drag(self) -> None:
        """Discard the active session; the last update is the final state."""
        if self._session is None:
            return
        self._session = None
        if self._on_cursor_change is not None:
            self._on_cursor_change(None)
        if self._on_drag_ended is not None:
            self._on_drag_ended()

    def cancel_drag(self) -> None:
        """Handle pointer leave or touch cancel exactly like a release."""
        self.end_drag()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _reset(self, aspect_ratio: AspectRatio | None = None) -> None:
        if aspect_ratio is not None:
            self._aspect_ratio = aspect_ratio
        self._set_rect(initialize(self._aspect_ratio), force=True)

    def _set_rect(self, rect: Rectangle, *, force: bool = False) -> None:
        if not force and rect == self._rect:
            return
        self._rect = rect
        if self._on_rect_changed is not None:
            self._on_rect_changed(rect)


__all__ = ["CropBoxController"]
