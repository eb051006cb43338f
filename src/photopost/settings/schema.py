"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from .. import config

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "photopost/settings.schema.json",
    "type": "object",
    "required": ["schema", "crop"],
    "properties": {
        "schema": {"const": "photopost/settings@1"},
        "crop": {
            "type": "object",
            "properties": {
                "default_aspect_ratio": {
                    "type": "string",
                    "enum": ["horizontal", "square", "vertical"],
                },
                "min_size": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "maximum": 50,
                },
                "handle_hit_radius": {
                    "type": "number",
                    "minimum": 1,
                    "maximum": 64,
                },
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "photopost/settings@1",
    "crop": {
        "default_aspect_ratio": "horizontal",
        "min_size": config.MIN_CROP_SIZE,
        "handle_hit_radius": config.HANDLE_HIT_RADIUS,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "crop" and isinstance(value, dict):
                target = merged.setdefault("crop", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
