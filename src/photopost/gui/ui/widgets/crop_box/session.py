"""
Crop geometry operations and the drag session value type.

Everything in this module is a pure function of its arguments: pointer
events and container metrics go in, a new :class:`Rectangle` comes out.  The
stateful bookkeeping lives in :mod:`.controller`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from photopost import config

from .hit_tester import HitTester
from .strategies import InteractionStrategy, MoveStrategy, ResizeStrategy
from .utils import AspectRatio, ContainerSize, DragMode, PointerPosition, Rectangle

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragSession:
    """Ephemeral record of one pointer-down-to-pointer-up gesture."""

    mode: DragMode
    anchor: PointerPosition
    base: Rectangle
    container: ContainerSize
    ratio: float
    min_size: float = config.MIN_CROP_SIZE

    def strategy(self) -> InteractionStrategy:
        """Return the strategy interpreting pointer motion for this session."""
        if self.mode is DragMode.MOVE:
            return MoveStrategy()
        return ResizeStrategy(self.mode, min_size=self.min_size)


def initialize(aspect_ratio: AspectRatio | str) -> Rectangle:
    """Return the centred default rectangle for *aspect_ratio*.

    Landscape and square ratios get a fixed width, portrait ratios a fixed
    height, so the box fits the container for every supported ratio.
    """
    ratio = AspectRatio.parse(aspect_ratio).ratio
    if ratio >= 1.0:
        width = config.DEFAULT_LANDSCAPE_WIDTH
        height = width / ratio
    else:
        height = config.DEFAULT_PORTRAIT_HEIGHT
        width = height * ratio
    extent = config.CONTAINER_EXTENT
    return Rectangle(
        x=(extent - width) / 2.0,
        y=(extent - height) / 2.0,
        width=width,
        height=height,
    )


def begin_drag(
    mode: DragMode,
    pointer: PointerPosition,
    rect: Rectangle,
    container: ContainerSize,
    *,
    hit_tester: HitTester | None = None,
    min_size: float = config.MIN_CROP_SIZE,
) -> DragSession | None:
    """Open a drag session, or return ``None`` when the press misses.

    The press must land on the rectangle body for ``MOVE`` or near the
    matching corner for a resize mode.  The ratio of *rect* is locked for the
    lifetime of the session.
    """
    mode = DragMode(mode)
    if mode is DragMode.NONE:
        return None
    if not container.is_valid:
        _LOGGER.debug("Ignoring %s press on degenerate container %s", mode.value, container)
        return None
    tester = hit_tester if hit_tester is not None else HitTester()
    if not tester.hits(mode, pointer, rect, container):
        _LOGGER.debug("Press at %s misses the %s region", tuple(pointer), mode.value)
        return None
    return DragSession(
        mode=mode,
        anchor=PointerPosition(float(pointer.x), float(pointer.y)),
        base=rect,
        container=container,
        ratio=rect.ratio,
        min_size=float(min_size),
    )


def update_drag(
    session: DragSession,
    pointer: PointerPosition,
    aspect_ratio: AspectRatio | str | None = None,
) -> Rectangle:
    """Return the rectangle for *pointer* within *session*.

    The pointer displacement from the session anchor is converted into
    percentage units of the container captured when the gesture began.  An
    *aspect_ratio* that disagrees with the ratio locked by the session is
    ignored until the gesture ends.
    """
    if not session.container.is_valid:
        return session.base
    if aspect_ratio is not None:
        requested = AspectRatio.parse(aspect_ratio).ratio
        if abs(requested - session.ratio) > config.RATIO_TOLERANCE:
            _LOGGER.debug(
                "Ignoring aspect ratio %.4f during %s gesture locked to %.4f",
                requested,
                session.mode.value,
                session.ratio,
            )
    delta_x, delta_y = session.container.to_percent(
        pointer.x - session.anchor.x,
        pointer.y - session.anchor.y,
    )
    return session.strategy().apply(session.base, delta_x, delta_y, session.ratio)


__all__ = ["DragSession", "begin_drag", "initialize", "update_drag"]
