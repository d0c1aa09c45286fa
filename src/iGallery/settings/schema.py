"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_API_URL, RECENT_DATASETS_LIMIT, REQUEST_TIMEOUT_SEC

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "iGallery/settings.schema.json",
    "type": "object",
    "required": ["schema", "api", "ui", "last_datasets"],
    "properties": {
        "schema": {"const": "iGallery/settings@1"},
        "api": {
            "type": "object",
            "required": ["base_url", "timeout_sec"],
            "properties": {
                "base_url": {"type": "string", "minLength": 1},
                "timeout_sec": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": False,
        },
        "ui": {
            "type": "object",
            "properties": {
                "theme": {"type": "string", "enum": ["light", "dark", "system"]},
            },
            "additionalProperties": True,
        },
        "last_datasets": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "maxItems": RECENT_DATASETS_LIMIT,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "iGallery/settings@1",
    "api": {
        "base_url": DEFAULT_API_URL,
        "timeout_sec": REQUEST_TIMEOUT_SEC,
    },
    "ui": {
        "theme": "system",
    },
    "last_datasets": [],
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def _normalise_datasets(entries: list[Any]) -> list[str]:
    normalised: list[str] = []
    for entry in entries:
        if not isinstance(entry, str) or not entry or entry in normalised:
            continue
        normalised.append(entry)
    return normalised[:RECENT_DATASETS_LIMIT]


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in {"api", "ui"} and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key == "last_datasets" and isinstance(value, list):
                merged[key] = _normalise_datasets(value)
                continue
            merged[key] = value
    if isinstance(merged["api"].get("base_url"), str):
        merged["api"]["base_url"] = merged["api"]["base_url"].rstrip("/") or DEFAULT_API_URL
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
