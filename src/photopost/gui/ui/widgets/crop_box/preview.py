"""Preview and export geometry derived from a crop rectangle."""

from __future__ import annotations

from dataclasses import dataclass

from photopost import config

from .utils import Rectangle


@dataclass(frozen=True)
class PreviewGeometry:
    """Background placement that shows only the cropped part of an image.

    The values follow CSS ``background-size``/``background-position``
    semantics and are all percentages.
    """

    size_x: float
    size_y: float
    position_x: float
    position_y: float

    def as_css(self) -> dict[str, str]:
        return {
            "background-size": f"{self.size_x:.4f}% {self.size_y:.4f}%",
            "background-position": f"{self.position_x:.4f}% {self.position_y:.4f}%",
        }


def _position(offset: float, extent: float) -> float:
    slack = config.CONTAINER_EXTENT - extent
    if slack <= config.RATIO_TOLERANCE:
        return 0.0
    return offset / slack * 100.0


def background_geometry(rect: Rectangle) -> PreviewGeometry:
    """Return the background placement that previews *rect*.

    Scaling the image by ``100 / width`` makes the crop span the preview box;
    the position then maps ``x`` onto the remaining slack.
    """
    extent = config.CONTAINER_EXTENT
    return PreviewGeometry(
        size_x=extent / rect.width * 100.0,
        size_y=extent / rect.height * 100.0,
        position_x=_position(rect.x, rect.width),
        position_y=_position(rect.y, rect.height),
    )


def to_pixel_rect(rect: Rectangle, image_width: int, image_height: int) -> dict[str, float]:
    """Convert a percentage crop into image pixel coordinates."""
    sx = float(image_width) / config.CONTAINER_EXTENT
    sy = float(image_height) / config.CONTAINER_EXTENT
    return {
        "left": rect.x * sx,
        "top": rect.y * sy,
        "right": rect.right * sx,
        "bottom": rect.bottom * sy,
    }


__all__ = ["PreviewGeometry", "background_geometry", "to_pixel_rect"]
