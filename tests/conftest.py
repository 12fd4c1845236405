"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def member_wire():
    """A fully populated member record as the service sends it."""
    return {
        "id": 1,
        "name": "Juan",
        "rfid_id": "ABC123",
        "credits": 50.0,
        "tope": 10,
        "state": True,
        "parent_id": 4,
        "staff_id": None,
        "school": "X",
        "course": "5A",
    }


@pytest.fixture
def transaction_wire():
    return {
        "id": 90,
        "student_id": 1,
        "rfid_used": "ABC123",
        "product": "Empanada",
        "price": 2.5,
        "current_credits": 47.5,
        "timestamp": "2024-03-01T10:15:00",
    }


@pytest.fixture
def config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir
