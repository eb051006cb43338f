"""
Crop-related data structures and utility functions for the image uploader.

This module contains pure value types that describe the crop box without any
direct dependency on QWidget or Qt event handling.  Only the cursor lookup
touches Qt, and only to name cursor shapes.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

from PySide6.QtCore import Qt

from photopost import config
from photopost.errors import InvalidAspectRatioError, InvalidRectangleError


def clamp(value: float, low: float, high: float) -> float:
    """Return *value* limited to the closed interval [*low*, *high*]."""
    return max(low, min(high, value))


class AspectRatio(enum.Enum):
    """Aspect ratios offered by the uploader's ratio selector."""

    HORIZONTAL = "horizontal"
    SQUARE = "square"
    VERTICAL = "vertical"

    @property
    def ratio(self) -> float:
        """Return ``width / height`` for this aspect ratio."""
        return _RATIOS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: AspectRatio | str) -> AspectRatio:
        """Return the aspect ratio named by *value*.

        Accepts an :class:`AspectRatio`, its identifier (``"square"``) or its
        display label (``"1:1"``).
        """
        if isinstance(value, AspectRatio):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.label):
                return member
        raise InvalidAspectRatioError(f"Unsupported aspect ratio: {value!r}")


_RATIOS: dict[AspectRatio, float] = {
    AspectRatio.HORIZONTAL: 16.0 / 9.0,
    AspectRatio.SQUARE: 1.0,
    AspectRatio.VERTICAL: 9.0 / 16.0,
}

_LABELS: dict[AspectRatio, str] = {
    AspectRatio.HORIZONTAL: "16:9",
    AspectRatio.SQUARE: "1:1",
    AspectRatio.VERTICAL: "9:16",
}


class DragMode(str, enum.Enum):
    """Gesture kinds a drag session can perform."""

    NONE = "none"
    MOVE = "move"
    RESIZE_TOP_LEFT = "resize-top-left"
    RESIZE_TOP_RIGHT = "resize-top-right"
    RESIZE_BOTTOM_LEFT = "resize-bottom-left"
    RESIZE_BOTTOM_RIGHT = "resize-bottom-right"

    @property
    def is_resize(self) -> bool:
        return self in RESIZE_MODES


RESIZE_MODES: tuple[DragMode, ...] = (
    DragMode.RESIZE_TOP_LEFT,
    DragMode.RESIZE_TOP_RIGHT,
    DragMode.RESIZE_BOTTOM_RIGHT,
    DragMode.RESIZE_BOTTOM_LEFT,
)


def cursor_for_mode(mode: DragMode) -> Qt.CursorShape:
    """Return the appropriate cursor shape for a given drag mode."""
    return {
        DragMode.RESIZE_TOP_LEFT: Qt.CursorShape.SizeFDiagCursor,
        DragMode.RESIZE_BOTTOM_RIGHT: Qt.CursorShape.SizeFDiagCursor,
        DragMode.RESIZE_TOP_RIGHT: Qt.CursorShape.SizeBDiagCursor,
        DragMode.RESIZE_BOTTOM_LEFT: Qt.CursorShape.SizeBDiagCursor,
        DragMode.MOVE: Qt.CursorShape.OpenHandCursor,
    }.get(mode, Qt.CursorShape.ArrowCursor)


class PointerPosition(NamedTuple):
    """Pointer location in container-local pixels."""

    x: float
    y: float

    @classmethod
    def from_qt(cls, point) -> PointerPosition:
        """Build a position from a ``QPointF``/``QPoint`` like object."""
        return cls(float(point.x()), float(point.y()))


class ContainerSize(NamedTuple):
    """Pixel size of the element the crop box is laid out in."""

    width: float
    height: float

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def to_percent(self, dx: float, dy: float) -> tuple[float, float]:
        """Convert a pixel displacement into percentage-of-container units."""
        return (
            dx / self.width * config.CONTAINER_EXTENT,
            dy / self.height * config.CONTAINER_EXTENT,
        )


@dataclass(frozen=True)
class Rectangle:
    """Crop region in percentage units of the container.

    ``x``/``y`` locate the top-left corner; ``width``/``height`` are extents.
    Instances are immutable so snapshots can be shared freely between the
    controller and a :class:`DragSession`.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def ratio(self) -> float:
        """Return ``width / height`` (``inf`` for a zero height)."""
        if self.height <= 0.0:
            return math.inf
        return self.width / self.height

    def corner(self, mode: DragMode) -> tuple[float, float]:
        """Return the corner grabbed by resize *mode* in percentage units."""
        return {
            DragMode.RESIZE_TOP_LEFT: (self.x, self.y),
            DragMode.RESIZE_TOP_RIGHT: (self.right, self.y),
            DragMode.RESIZE_BOTTOM_RIGHT: (self.right, self.bottom),
            DragMode.RESIZE_BOTTOM_LEFT: (self.x, self.bottom),
        }[mode]

    def to_pixels(self, container: ContainerSize) -> tuple[float, float, float, float]:
        """Return ``(left, top, right, bottom)`` in container pixels."""
        sx = container.width / config.CONTAINER_EXTENT
        sy = container.height / config.CONTAINER_EXTENT
        return (self.x * sx, self.y * sy, self.right * sx, self.bottom * sy)

    def is_inside_container(self, tolerance: float = config.RATIO_TOLERANCE) -> bool:
        extent = config.CONTAINER_EXTENT
        return (
            self.x >= -tolerance
            and self.y >= -tolerance
            and self.right <= extent + tolerance
            and self.bottom <= extent + tolerance
        )

    def is_close(self, other: Rectangle, tolerance: float = config.RATIO_TOLERANCE) -> bool:
        """Return True when every coordinate differs by at most *tolerance*."""
        return all(
            abs(a - b) <= tolerance
            for a, b in zip(self.as_tuple(), other.as_tuple(), strict=True)
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def as_mapping(self) -> dict[str, float]:
        """Export the rectangle for the publishing collaborator."""
        return {
            "x": float(self.x),
            "y": float(self.y),
            "width": float(self.width),
            "height": float(self.height),
        }

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> Rectangle:
        """Rebuild a rectangle exported with :meth:`as_mapping`."""
        try:
            rect = cls(
                float(values["x"]),
                float(values["y"]),
                float(values["width"]),
                float(values["height"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidRectangleError(f"Malformed crop rectangle: {values!r}") from exc
        if rect.width <= 0.0 or rect.height <= 0.0 or not rect.is_inside_container():
            raise InvalidRectangleError(f"Crop rectangle out of bounds: {values!r}")
        return rect
