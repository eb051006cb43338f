"""
Hit testing logic for crop handles.

This module contains pure geometric functions for detecting which crop handle
(if any) is under a given point, with no dependencies on Qt events or UI state.
"""

from __future__ import annotations

import math

from photopost import config

from .utils import RESIZE_MODES, ContainerSize, DragMode, PointerPosition, Rectangle


class HitTester:
    """Pure-function hit tester for the crop body and corner handles."""

    def __init__(self, hit_radius: float = config.HANDLE_HIT_RADIUS) -> None:
        """Initialize hit tester.

        Parameters
        ----------
        hit_radius:
            Distance threshold for detecting corner hits, in container pixels.
        """
        self._hit_radius = float(hit_radius)

    @property
    def hit_radius(self) -> float:
        return self._hit_radius

    def hits(
        self,
        mode: DragMode,
        point: PointerPosition,
        rect: Rectangle,
        container: ContainerSize,
    ) -> bool:
        """Return True when *point* lies in the interactive region of *mode*.

        ``MOVE`` targets the rectangle body, edges included.  Each resize mode
        targets a disc of :attr:`hit_radius` around its corner.  ``NONE`` and
        degenerate containers never hit.
        """
        if not container.is_valid:
            return False
        left, top, right, bottom = rect.to_pixels(container)
        if mode is DragMode.MOVE:
            return left <= point.x <= right and top <= point.y <= bottom
        if mode.is_resize:
            cx, cy = {
                DragMode.RESIZE_TOP_LEFT: (left, top),
                DragMode.RESIZE_TOP_RIGHT: (right, top),
                DragMode.RESIZE_BOTTOM_RIGHT: (right, bottom),
                DragMode.RESIZE_BOTTOM_LEFT: (left, bottom),
            }[mode]
            return math.hypot(point.x - cx, point.y - cy) <= self._hit_radius
        return False

    def test(
        self,
        point: PointerPosition,
        rect: Rectangle,
        container: ContainerSize,
    ) -> DragMode:
        """Determine which gesture a press at *point* would start.

        Corners are checked first so a handle that overlaps the body wins.

        Returns
        -------
        DragMode:
            The mode that was hit, or ``DragMode.NONE`` if nothing was hit.
        """
        for mode in RESIZE_MODES:
            if self.hits(mode, point, rect, container):
                return mode
        if self.hits(DragMode.MOVE, point, rect, container):
            return DragMode.MOVE
        return DragMode.NONE
