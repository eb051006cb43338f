"""
Abstract base class for crop interaction strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..utils import Rectangle


class InteractionStrategy(ABC):
    """Base class for crop interaction strategies (move, resize)."""

    @abstractmethod
    def apply(self, base: Rectangle, delta_x: float, delta_y: float, ratio: float) -> Rectangle:
        """Return the rectangle produced by dragging *base* by a delta.

        Parameters
        ----------
        base:
            Rectangle snapshot taken when the gesture started.
        delta_x, delta_y:
            Pointer displacement since the gesture started, in percentage
            units of the container.
        ratio:
            Locked ``width / height`` ratio for the gesture.
        """
