from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from jsonschema import Draft202012Validator
from pydantic import BaseModel, ConfigDict

from recordbridge.utils.logging import configure_logging

DEFAULT_CONFIG_PATH = Path("recordbridge.config.yaml")

BASE_DEFAULTS: Dict[str, Any] = {
    "version": 1,
    "placeholders": {
        "identity_tag": "Pending",
    },
    "envelope": {
        "generic_keys": ["data"],
    },
    "logging": {
        "level": "WARNING",
    },
}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["version"],
    "properties": {
        "version": {"type": "integer", "minimum": 1},
        "placeholders": {
            "type": "object",
            "properties": {
                "identity_tag": {"type": "string", "minLength": 1},
            },
            "additionalProperties": False,
        },
        "envelope": {
            "type": "object",
            "properties": {
                "generic_keys": {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1},
                },
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


class MappingSettings(BaseModel):
    """Runtime knobs for the translation layer."""

    model_config = ConfigDict(frozen=True)

    pending_identity_tag: str = "Pending"
    generic_envelope_keys: Tuple[str, ...] = ("data",)
    log_level: str = "WARNING"

    def placeholder(self, key: str) -> Any:
        """Return the configured placeholder for ``key`` (None if not configurable)."""
        if key == "identity_tag":
            return self.pending_identity_tag
        return None


DEFAULT_SETTINGS = MappingSettings()


def _merge_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay a user document on the built-in defaults, one section deep."""
    merged = deepcopy(BASE_DEFAULTS)
    for key, value in config.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def validate_config(config: Any) -> None:
    """
    Validate a raw config document against CONFIG_SCHEMA.

    Raises:
        ValueError: Listing every schema violation, one per line.
    """
    validator = Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(config), key=lambda e: list(e.absolute_path))
    if errors:
        lines = []
        for error in errors:
            location = ".".join(["$", *map(str, error.absolute_path)])
            lines.append(f"{location}: {error.message}")
        raise ValueError("Invalid recordbridge config:\n" + "\n".join(lines))


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load the recordbridge configuration from YAML.

    Args:
        path: Optional path to the config file. Defaults to recordbridge.config.yaml

    Returns:
        Config dictionary with built-in defaults filled in

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    validate_config(config)

    return _merge_defaults(config)


def settings_from_config(config: Dict[str, Any]) -> MappingSettings:
    """Build MappingSettings from a loaded (defaults-merged) config dict."""
    merged = _merge_defaults(config)
    return MappingSettings(
        pending_identity_tag=merged["placeholders"]["identity_tag"],
        generic_envelope_keys=tuple(merged["envelope"]["generic_keys"]),
        log_level=merged["logging"]["level"],
    )


def resolve_settings(path: Path | None = None) -> MappingSettings:
    """Load settings from YAML (best-effort): defaults when the file is absent."""
    try:
        config = load_config(path)
    except FileNotFoundError:
        return DEFAULT_SETTINGS
    return settings_from_config(config)


def apply_logging_config(settings: MappingSettings) -> None:
    """Install the package log handler at the configured level."""
    configure_logging(settings.log_level)
