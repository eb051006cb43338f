"""Default configuration values for photopost."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Crop box geometry
# ---------------------------------------------------------------------------

# Crop rectangles are stored in percentage units of the container so the same
# values stay valid across layout passes and device pixel ratios.
CONTAINER_EXTENT: Final[float] = 100.0

# Smallest extent, in percentage units, the ratio-driving dimension may shrink
# to while a corner is being dragged.
MIN_CROP_SIZE: Final[float] = 20.0

# Width of the default rectangle for landscape and square ratios, and height
# of the default rectangle for portrait ratios.
DEFAULT_LANDSCAPE_WIDTH: Final[float] = 70.0
DEFAULT_PORTRAIT_HEIGHT: Final[float] = 80.0

RATIO_TOLERANCE: Final[float] = 1e-6

# ---------------------------------------------------------------------------
# UI interaction constants
# ---------------------------------------------------------------------------

# Distance, in container pixels, within which a press grabs a corner handle.
HANDLE_HIT_RADIUS: Final[float] = 8.0

CROP_HANDLE_PAINT_SIZE: Final[int] = 12
CROP_FRAME_WIDTH: Final[int] = 2
CROP_SHADE_ALPHA: Final[int] = 140
