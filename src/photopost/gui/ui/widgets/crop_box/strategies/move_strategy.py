"""
Move strategy for dragging the whole crop box.
"""

from __future__ import annotations

from photopost import config

from ..utils import Rectangle, clamp
from .abstract import InteractionStrategy


class MoveStrategy(InteractionStrategy):
    """Strategy for translating the crop box without changing its size."""

    def apply(self, base: Rectangle, delta_x: float, delta_y: float, ratio: float) -> Rectangle:
        del ratio  # size is untouched
        extent = config.CONTAINER_EXTENT
        return Rectangle(
            x=clamp(base.x + delta_x, 0.0, extent - base.width),
            y=clamp(base.y + delta_y, 0.0, extent - base.height),
            width=base.width,
            height=base.height,
        )
