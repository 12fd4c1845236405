"""Tests for YAML configuration loading."""

import logging
from pathlib import Path

import pytest

from recordbridge.config.loader import (
    DEFAULT_SETTINGS,
    apply_logging_config,
    load_config,
    resolve_settings,
    settings_from_config,
)


def test_load_config_fills_defaults(config_dir):
    cfg_path = config_dir / "recordbridge.config.yaml"
    cfg_path.write_text("version: 1\nplaceholders:\n  identity_tag: Pendiente\n")

    config = load_config(cfg_path)

    assert config["placeholders"]["identity_tag"] == "Pendiente"
    assert config["envelope"]["generic_keys"] == ["data"]
    assert config["logging"]["level"] == "WARNING"


def test_load_config_missing_file(config_dir):
    with pytest.raises(FileNotFoundError):
        load_config(config_dir / "absent.yaml")


def test_load_config_rejects_non_mapping(config_dir):
    cfg_path = config_dir / "recordbridge.config.yaml"
    cfg_path.write_text("- just\n- a list\n")

    with pytest.raises(ValueError, match="must be a dictionary"):
        load_config(cfg_path)


@pytest.mark.parametrize(
    "body, fragment",
    [
        ("placeholders: {}\n", "'version' is a required property"),
        ("version: 1\nenvelope:\n  generic_keys: data\n", "$.envelope.generic_keys"),
        ("version: 1\nlogging:\n  level: LOUD\n", "$.logging.level"),
        ("version: 1\nextra: true\n", "Additional properties"),
    ],
)
def test_load_config_schema_errors(config_dir, body, fragment):
    cfg_path = config_dir / "recordbridge.config.yaml"
    cfg_path.write_text(body)

    with pytest.raises(ValueError) as excinfo:
        load_config(cfg_path)
    assert fragment in str(excinfo.value)


def test_settings_from_config():
    settings = settings_from_config(
        {"version": 1, "envelope": {"generic_keys": ["results", "data"]}, "logging": {"level": "DEBUG"}}
    )

    assert settings.pending_identity_tag == "Pending"
    assert settings.generic_envelope_keys == ("results", "data")
    assert settings.log_level == "DEBUG"


def test_resolve_settings_defaults_when_absent(config_dir):
    assert resolve_settings(config_dir / "absent.yaml") is DEFAULT_SETTINGS


def test_resolve_settings_reads_file(config_dir):
    cfg_path = config_dir / "recordbridge.config.yaml"
    cfg_path.write_text("version: 1\nplaceholders:\n  identity_tag: TBD\n")

    assert resolve_settings(cfg_path).pending_identity_tag == "TBD"


def test_example_config_is_valid():
    example = Path(__file__).resolve().parents[1] / "config" / "recordbridge.example.yaml"
    settings = settings_from_config(load_config(example))
    assert settings == DEFAULT_SETTINGS


def test_apply_logging_config_sets_package_level():
    apply_logging_config(settings_from_config({"version": 1, "logging": {"level": "ERROR"}}))
    assert logging.getLogger("recordbridge").level == logging.ERROR
    apply_logging_config(DEFAULT_SETTINGS)
    assert logging.getLogger("recordbridge").level == logging.WARNING
