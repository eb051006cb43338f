"""
Resize strategy for crop box corner dragging.
"""

from __future__ import annotations

from photopost import config

from ..utils import DragMode, Rectangle, clamp
from .abstract import InteractionStrategy

# Direction each dragged corner grows the box in.  The opposite corner is the
# fixed one: +1 means the fixed edge is the left (top) edge, -1 the right
# (bottom) edge.
CORNER_SIGNS: dict[DragMode, tuple[int, int]] = {
    DragMode.RESIZE_TOP_LEFT: (-1, -1),
    DragMode.RESIZE_TOP_RIGHT: (1, -1),
    DragMode.RESIZE_BOTTOM_LEFT: (-1, 1),
    DragMode.RESIZE_BOTTOM_RIGHT: (1, 1),
}


class ResizeStrategy(InteractionStrategy):
    """Strategy for resizing the crop box by one of its corners.

    Width is the driving dimension: it follows the horizontal pointer delta
    and is floored at ``min_size``.  Height is derived from the locked ratio.
    When the result would leave the container the overflowing dimension is
    capped to the room left beside the fixed corner and the other dimension is
    derived again, so the box may lag the pointer near the edges.
    """

    def __init__(self, mode: DragMode, *, min_size: float = config.MIN_CROP_SIZE) -> None:
        if mode not in CORNER_SIGNS:
            raise ValueError(f"{mode!r} is not a resize mode")
        self._mode = mode
        self._sign_x, self._sign_y = CORNER_SIGNS[mode]
        self._min_size = float(min_size)

    @property
    def mode(self) -> DragMode:
        return self._mode

    def apply(self, base: Rectangle, delta_x: float, delta_y: float, ratio: float) -> Rectangle:
        del delta_y  # height follows width through the ratio
        extent = config.CONTAINER_EXTENT

        # The corner diagonally opposite the dragged one stays put
        fixed_x = base.x if self._sign_x > 0 else base.right
        fixed_y = base.y if self._sign_y > 0 else base.bottom
        room_x = extent - fixed_x if self._sign_x > 0 else fixed_x
        room_y = extent - fixed_y if self._sign_y > 0 else fixed_y

        width = max(self._min_size, base.width + self._sign_x * delta_x)
        height = width / ratio
        if width > room_x:
            width = room_x
            height = width / ratio
        if height > room_y:
            height = room_y
            width = height * ratio

        x = fixed_x if self._sign_x > 0 else fixed_x - width
        y = fixed_y if self._sign_y > 0 else fixed_y - height
        return Rectangle(
            x=clamp(x, 0.0, extent - width),
            y=clamp(y, 0.0, extent - height),
            width=width,
            height=height,
        )
