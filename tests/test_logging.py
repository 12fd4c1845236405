"""Tests for logging helpers."""

import logging

import pytest

from recordbridge.utils.logging import configure_logging, get_logger


def test_get_logger_nests_under_package():
    assert get_logger("recordbridge.parsing.normalizer").name == "recordbridge.parsing.normalizer"
    assert get_logger("recordbridge").name == "recordbridge"
    assert get_logger("myapp.views").name == "recordbridge.myapp.views"


def test_configure_logging_installs_one_handler():
    package_logger = logging.getLogger("recordbridge")

    configure_logging("INFO")
    handlers = list(package_logger.handlers)
    configure_logging(logging.DEBUG)

    assert package_logger.handlers == handlers
    assert package_logger.level == logging.DEBUG
    configure_logging("WARNING")


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("CHATTY")


def test_dropped_records_are_logged(caplog):
    from recordbridge.parsing.normalizer import normalize_list

    with caplog.at_level(logging.INFO, logger="recordbridge"):
        normalize_list("member", [{"id": 1}, {"name": "no id"}])

    assert "Dropping member record without usable id" in caplog.text
    assert "Dropped 1 of 2 member records" in caplog.text
