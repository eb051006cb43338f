"""
Crop box interaction module.

This package provides the aspect-locked crop box used by the image uploader,
implementing Strategy and State patterns so the geometry can be tested without
a running widget.
"""

from .controller import CropBoxController
from .hit_tester import HitTester
from .preview import PreviewGeometry, background_geometry, to_pixel_rect
from .session import DragSession, begin_drag, initialize, update_drag
from .utils import (
    AspectRatio,
    ContainerSize,
    DragMode,
    PointerPosition,
    Rectangle,
    cursor_for_mode,
)

__all__ = [
    "AspectRatio",
    "ContainerSize",
    "CropBoxController",
    "DragMode",
    "DragSession",
    "HitTester",
    "PointerPosition",
    "PreviewGeometry",
    "Rectangle",
    "background_geometry",
    "begin_drag",
    "cursor_for_mode",
    "initialize",
    "to_pixel_rect",
    "update_drag",
]
