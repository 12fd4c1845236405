"""Canonical record types.

Every screen reads these shapes regardless of how the upstream service
spells or wraps a record. Instances are immutable; the normalizer builds a
fresh one on every call.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """Authorization role carried by the session user."""

    SUPER_ADMIN = "super_admin"
    CLIENT_ADMIN = "client_admin"
    BRANCH = "branch"
    PARENT = "parent"
    STAFF = "staff"

    @classmethod
    def parse(cls, value: Any) -> Optional["Role"]:
        """
        Resolve a wire role value to a Role.

        Accepts case, whitespace and hyphen variants ("Client-Admin") and the
        synonym "guardian" for PARENT. Returns None for anything unknown.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        key = _ROLE_SYNONYMS.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_ROLE_SYNONYMS = {
    "guardian": "parent",
    "superadmin": "super_admin",
    "clientadmin": "client_admin",
}


class CanonicalRecord(BaseModel):
    """Base for all canonical records: frozen, camelCase aliases for views."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Member(CanonicalRecord):
    """A person holding a prepaid balance and an identity tag.

    At most one of owner_guardian_id / owner_staff_id is set by the service;
    that exclusivity is not re-checked here.
    """

    id: int
    identity_tag: str = "Pending"
    name: Optional[str] = None
    balance: float = 0
    daily_limit: float = 0
    active: bool = False
    owner_guardian_id: Optional[int] = None
    owner_staff_id: Optional[int] = None
    school: str = ""
    course: str = ""


class Guardian(CanonicalRecord):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    branch_id: Optional[int] = None


class StaffMember(CanonicalRecord):
    """Same shape as Guardian, but owns members directly."""

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    branch_id: Optional[int] = None


class Branch(CanonicalRecord):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    owner_client_admin_id: Optional[int] = None


class ClientAdmin(CanonicalRecord):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    owner_super_admin_id: Optional[int] = None
    tier: Optional[str] = None
    max_students: Optional[int] = None


class Transaction(CanonicalRecord):
    """A purchase charged against a member's balance.

    timestamp is kept as the service sent it.
    """

    id: int
    member_id: Optional[int] = None
    identity_tag_used: Optional[str] = None
    product: Optional[str] = None
    price: Optional[float] = None
    balance_after: Optional[float] = None
    timestamp: Optional[str] = None


class MemberQuota(CanonicalRecord):
    """Member count against a client admin's plan limit."""

    current_count: int = 0
    max_students: int = 0
    available: int = 0


class SessionUser(CanonicalRecord):
    """The authenticated user. ``role`` is the only authorization signal."""

    id: int
    role: Role
    name: str = ""
    email: str = ""
    branch_id: Optional[int] = None
    client_admin_id: Optional[int] = None
    super_admin_id: Optional[int] = None
    location: Optional[str] = None
    tier: Optional[str] = None
    max_students: Optional[int] = None
