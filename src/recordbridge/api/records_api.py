"""Per-entity read/write helpers for views and forms.

Each helper is a named shortcut over normalize/normalize_list and the
denormalizers so call sites don't pass entity kinds around as strings.
"""

from typing import Any, Dict, List, Optional

from recordbridge.config.loader import MappingSettings
from recordbridge.parsing.denormalizer import denormalize_for_create, denormalize_for_update
from recordbridge.parsing.normalizer import normalize, normalize_list
from recordbridge.schema.fields import (
    BRANCH,
    CLIENT_ADMIN,
    GUARDIAN,
    MEMBER,
    MEMBER_QUOTA,
    STAFF,
    TRANSACTION,
)
from recordbridge.schema.models import (
    Branch,
    ClientAdmin,
    Guardian,
    Member,
    MemberQuota,
    StaffMember,
    Transaction,
)


# Read paths


def parse_members(raw: Any, settings: Optional[MappingSettings] = None) -> List[Member]:
    return normalize_list(MEMBER, raw, settings)


def parse_member(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[Member]:
    return normalize(MEMBER, raw, settings)


def parse_guardians(raw: Any, settings: Optional[MappingSettings] = None) -> List[Guardian]:
    return normalize_list(GUARDIAN, raw, settings)


def parse_guardian(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[Guardian]:
    return normalize(GUARDIAN, raw, settings)


def parse_staff(raw: Any, settings: Optional[MappingSettings] = None) -> List[StaffMember]:
    return normalize_list(STAFF, raw, settings)


def parse_staff_member(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[StaffMember]:
    return normalize(STAFF, raw, settings)


def parse_branches(raw: Any, settings: Optional[MappingSettings] = None) -> List[Branch]:
    return normalize_list(BRANCH, raw, settings)


def parse_branch(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[Branch]:
    return normalize(BRANCH, raw, settings)


def parse_transactions(raw: Any, settings: Optional[MappingSettings] = None) -> List[Transaction]:
    return normalize_list(TRANSACTION, raw, settings)


def parse_transaction(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[Transaction]:
    return normalize(TRANSACTION, raw, settings)


def parse_client_admin(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[ClientAdmin]:
    return normalize(CLIENT_ADMIN, raw, settings)


def parse_member_quota(raw: Any, settings: Optional[MappingSettings] = None) -> Optional[MemberQuota]:
    return normalize(MEMBER_QUOTA, raw, settings)


# Write paths


def member_create_payload(data: Any) -> Dict[str, Any]:
    return denormalize_for_create(MEMBER, data)


def member_update_payload(changes: Any) -> Dict[str, Any]:
    return denormalize_for_update(MEMBER, changes)


def guardian_create_payload(data: Any) -> Dict[str, Any]:
    return denormalize_for_create(GUARDIAN, data)


def guardian_update_payload(changes: Any) -> Dict[str, Any]:
    return denormalize_for_update(GUARDIAN, changes)


def staff_create_payload(data: Any) -> Dict[str, Any]:
    return denormalize_for_create(STAFF, data)


def staff_update_payload(changes: Any) -> Dict[str, Any]:
    return denormalize_for_update(STAFF, changes)


def branch_create_payload(data: Any) -> Dict[str, Any]:
    return denormalize_for_create(BRANCH, data)


def branch_update_payload(changes: Any) -> Dict[str, Any]:
    return denormalize_for_update(BRANCH, changes)


def transaction_create_payload(data: Any) -> Dict[str, Any]:
    """Purchase payload: identity tag (sent as ``rfid``), product, price."""
    return denormalize_for_create(TRANSACTION, data)
