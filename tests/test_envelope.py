"""Tests for locating record lists inside response envelopes."""

import pytest

from recordbridge.parsing.envelope import resolve_list


RECORDS = [{"id": 1}, {"id": 2}]


def test_none_resolves_to_empty_list():
    assert resolve_list(None, "students") == []


def test_bare_list_returned_unchanged():
    """A bare list is passed back as the very same object."""
    assert resolve_list(RECORDS, "students") is RECORDS


def test_plural_key_envelope():
    assert resolve_list({"students": RECORDS}, "students") is RECORDS


def test_data_envelope():
    assert resolve_list({"data": RECORDS}, "students") is RECORDS


def test_plural_key_takes_precedence_over_data():
    other = [{"id": 3}]
    assert resolve_list({"data": other, "students": RECORDS}, "students") is RECORDS


def test_non_list_under_plural_key_falls_through_to_data():
    """Only a key holding a sequence counts as a match."""
    raw = {"students": {"id": 1}, "data": RECORDS}
    assert resolve_list(raw, "students") is RECORDS


def test_no_plural_key_uses_generic_keys():
    assert resolve_list({"data": RECORDS}) is RECORDS


def test_custom_generic_keys():
    raw = {"items": RECORDS}
    assert resolve_list(raw, "students") == []
    assert resolve_list(raw, "students", generic_keys=("results", "items")) is RECORDS


@pytest.mark.parametrize(
    "raw",
    [
        {"detail": "Internal Server Error"},
        {"students": None},
        "<html>error</html>",
        42,
        {},
    ],
)
def test_unexpected_shapes_degrade_to_empty(raw):
    """Malformed envelopes read as 'no records', never as an error."""
    assert resolve_list(raw, "students") == []


def test_tuple_counts_as_sequence():
    records = ({"id": 1},)
    assert resolve_list({"data": records}, "students") is records
