"""Tests for the per-entity records API used by views and forms."""

import pytest

from recordbridge.api import records_api
from recordbridge.errors import MissingRequiredFieldError
from recordbridge.schema.models import Branch, Guardian, Member, StaffMember, Transaction


def test_parse_members_from_parent_endpoint(member_wire):
    members = records_api.parse_members({"students": [member_wire]})
    assert [m.identity_tag for m in members] == ["ABC123"]
    assert isinstance(members[0], Member)


def test_parse_member_detail(member_wire):
    assert records_api.parse_member(member_wire).balance == 50.0
    assert records_api.parse_member(None) is None


def test_parse_guardians_and_staff():
    raw = {"data": [{"id": 4, "name": "Rosa", "branch_id": 2}]}

    guardians = records_api.parse_guardians(raw)
    staff = records_api.parse_staff(raw)

    assert isinstance(guardians[0], Guardian)
    assert isinstance(staff[0], StaffMember)
    assert records_api.parse_guardian(raw["data"][0]) == guardians[0]
    assert records_api.parse_staff_member(raw["data"][0]) == staff[0]


def test_parse_branches():
    branches = records_api.parse_branches({"branches": [{"id": 2, "client_admin_id": 8}]})
    assert isinstance(branches[0], Branch)
    assert records_api.parse_branch({"id": 2}).owner_client_admin_id is None


def test_parse_transactions_history(transaction_wire):
    history = records_api.parse_transactions([transaction_wire, transaction_wire])
    assert len(history) == 2
    assert isinstance(records_api.parse_transaction(transaction_wire), Transaction)


def test_parse_error_page_as_empty_list():
    """An error body reads as zero records at this layer."""
    assert records_api.parse_members({"detail": "Not Found"}) == []


def test_parse_client_admin_and_quota():
    client = records_api.parse_client_admin({"id": 8, "max_students": "300"})
    quota = records_api.parse_member_quota({"current_count": 10, "max_students": 300, "available": 290})

    assert client.max_students == 300
    assert quota.available == 290


def test_member_payloads():
    assert records_api.member_create_payload({"name": "Juan", "tope": 10}) == {"name": "Juan", "tope": 10}
    assert records_api.member_update_payload({"limit": 20}) == {"tope": 20}


def test_guardian_payloads():
    payload = records_api.guardian_create_payload(
        {"name": "Rosa", "email": "r@x.com", "password": "pw", "branch_id": 2}
    )
    assert payload["branch_id"] == 2
    assert records_api.guardian_update_payload({"email": "n@x.com"}) == {"email": "n@x.com"}


def test_staff_payloads():
    with pytest.raises(MissingRequiredFieldError):
        records_api.staff_create_payload({"name": "Leo"})
    assert records_api.staff_update_payload({"name": "Leo"}) == {"name": "Leo"}


def test_branch_payloads():
    payload = records_api.branch_create_payload(
        {"name": "Centro", "email": "c@x.com", "password": "pw", "owner_client_admin_id": 8}
    )
    assert payload["client_admin_id"] == 8
    assert "location" not in payload
    assert records_api.branch_update_payload({"location": "Av. 2"}) == {"location": "Av. 2"}


def test_transaction_create_payload():
    payload = records_api.transaction_create_payload({"rfid": "ABC123", "product": "Jugo", "price": 1.5})
    assert payload == {"rfid": "ABC123", "product": "Jugo", "price": 1.5}
