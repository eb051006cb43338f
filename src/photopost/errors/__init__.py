"""Custom exception hierarchy for photopost."""

from __future__ import annotations


class PhotoPostError(Exception):
    """Base class for all custom errors raised by photopost."""


# --- Crop errors ---

class CropError(PhotoPostError):
    """Base class for crop geometry errors."""


class InvalidAspectRatioError(CropError, ValueError):
    """Raised when a value cannot be interpreted as a supported aspect ratio."""


class InvalidRectangleError(CropError, ValueError):
    """Raised when a crop rectangle mapping is malformed."""


# --- Settings errors ---

class SettingsError(PhotoPostError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be read."""


class SettingsValidationError(SettingsError):
    """Raised when settings fail schema validation."""


__all__ = [
    "CropError",
    "InvalidAspectRatioError",
    "InvalidRectangleError",
    "PhotoPostError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]
