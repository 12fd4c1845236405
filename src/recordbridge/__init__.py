"""Canonical normalization layer between the console and the records service.

Wire responses go in through ``normalize`` / ``normalize_list`` /
``normalize_session``; edits come back out through ``denormalize_for_create``
and ``denormalize_for_update``.
"""

from recordbridge.config.loader import DEFAULT_SETTINGS, MappingSettings, resolve_settings
from recordbridge.errors import (
    MissingRequiredFieldError,
    RecordBridgeError,
    UnknownEntityKindError,
)
from recordbridge.parsing.denormalizer import (
    UNSET,
    build_activation_payload,
    build_credit_payload,
    denormalize_for_create,
    denormalize_for_update,
)
from recordbridge.parsing.envelope import resolve_list
from recordbridge.parsing.normalizer import normalize, normalize_list
from recordbridge.parsing.session import normalize_session
from recordbridge.schema.fields import get_schema
from recordbridge.schema.models import (
    Branch,
    CanonicalRecord,
    ClientAdmin,
    Guardian,
    Member,
    MemberQuota,
    Role,
    SessionUser,
    StaffMember,
    Transaction,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SETTINGS",
    "MappingSettings",
    "resolve_settings",
    "MissingRequiredFieldError",
    "RecordBridgeError",
    "UnknownEntityKindError",
    "UNSET",
    "build_activation_payload",
    "build_credit_payload",
    "denormalize_for_create",
    "denormalize_for_update",
    "resolve_list",
    "normalize",
    "normalize_list",
    "normalize_session",
    "get_schema",
    "Branch",
    "CanonicalRecord",
    "ClientAdmin",
    "Guardian",
    "Member",
    "MemberQuota",
    "Role",
    "SessionUser",
    "StaffMember",
    "Transaction",
]
