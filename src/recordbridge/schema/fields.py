"""Declarative field tables for every entity kind.

Each EntitySchema lists, in order, where a canonical field is read from on
the wire, what it defaults to, how it is coerced, and under which name and
rules it is written back for create and update calls. The normalizer and
denormalizer iterate these tables; nothing is mapped by hand per entity.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Type

from pydantic.alias_generators import to_camel

from recordbridge.errors import UnknownEntityKindError
from recordbridge.schema.models import (
    Branch,
    CanonicalRecord,
    ClientAdmin,
    Guardian,
    Member,
    MemberQuota,
    SessionUser,
    StaffMember,
    Transaction,
)

# Field kinds
INTEGER = "integer"
NUMBER = "number"
STRING = "string"
BOOLEAN = "boolean"
ROLE = "role"
ANY = "any"

# Create modes
REQUIRED = "required"
OPTIONAL = "optional"


@dataclass(frozen=True)
class FieldSpec:
    """One canonical field and its wire mapping."""

    name: str
    sources: Tuple[str, ...] = ()  # read precedence; empty = write-only
    kind: str = STRING
    default: Any = None
    required: bool = False  # read path: record is corrupt without it
    create: Optional[str] = None  # REQUIRED | OPTIONAL | None (not sent)
    update: bool = False
    wire: Optional[str] = None  # write name; defaults to sources[0]
    inputs: Tuple[str, ...] = ()  # extra change-set synonyms, lowest precedence
    placeholder: Optional[str] = None  # settings key that overrides default

    @property
    def readable(self) -> bool:
        return bool(self.sources)

    @property
    def wire_name(self) -> str:
        if self.wire:
            return self.wire
        if self.sources:
            return self.sources[0]
        return self.name

    @property
    def input_names(self) -> Tuple[str, ...]:
        """Change-set keys accepted for this field, in declared precedence."""
        ordered = (self.name, to_camel(self.name), self.wire_name, *self.inputs)
        seen = set()
        names = []
        for candidate in ordered:
            if candidate not in seen:
                seen.add(candidate)
                names.append(candidate)
        return tuple(names)


@dataclass(frozen=True)
class EntitySchema:
    kind: str
    model: Type[CanonicalRecord]
    fields: Tuple[FieldSpec, ...]
    plural_key: Optional[str] = None
    aliases: Tuple[str, ...] = field(default=())

    def readable_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.readable)

    def create_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.create)

    def update_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.update)

    def known_inputs(self) -> frozenset:
        return frozenset(name for spec in self.fields for name in spec.input_names)


def _id_field(*sources: str) -> FieldSpec:
    return FieldSpec("id", sources or ("id",), INTEGER, required=True)


def _password_field(create: Optional[str] = REQUIRED, update: bool = True) -> FieldSpec:
    # Write-only: passed through to the service, never read back.
    return FieldSpec("password", create=create, update=update, wire="password")


MEMBER = EntitySchema(
    kind="member",
    model=Member,
    plural_key="students",
    aliases=("student", "students", "members"),
    fields=(
        _id_field(),
        FieldSpec(
            "identity_tag",
            ("rfid_id",),
            default="Pending",
            update=True,
            inputs=("rfid",),
            placeholder="identity_tag",
        ),
        FieldSpec("name", ("name",), create=REQUIRED, update=True),
        FieldSpec("balance", ("credits",), NUMBER, default=0, create=OPTIONAL, update=True),
        FieldSpec(
            "daily_limit",
            ("tope",),
            NUMBER,
            default=0,
            create=OPTIONAL,
            update=True,
            inputs=("limit",),
        ),
        FieldSpec("active", ("state",), BOOLEAN, default=False, update=True),
        FieldSpec(
            "owner_guardian_id",
            ("parent_id",),
            INTEGER,
            create=OPTIONAL,
            update=True,
            inputs=("parentId",),
        ),
        FieldSpec(
            "owner_staff_id",
            ("staff_id",),
            INTEGER,
            create=OPTIONAL,
            update=True,
            inputs=("staffId",),
        ),
        FieldSpec("school", ("school",), default="", create=OPTIONAL, update=True),
        FieldSpec("course", ("course",), default="", create=OPTIONAL, update=True),
    ),
)

GUARDIAN = EntitySchema(
    kind="guardian",
    model=Guardian,
    plural_key="parents",
    aliases=("parent", "parents", "guardians"),
    fields=(
        _id_field(),
        FieldSpec("name", ("name",), create=REQUIRED, update=True),
        FieldSpec("email", ("email",), create=REQUIRED, update=True),
        _password_field(),
        FieldSpec("branch_id", ("branch_id",), INTEGER, create=REQUIRED),
    ),
)

STAFF = EntitySchema(
    kind="staff",
    model=StaffMember,
    plural_key="staff",
    aliases=("staff_member", "staffmember", "staff_members"),
    fields=(
        _id_field(),
        FieldSpec("name", ("name",), create=REQUIRED, update=True),
        FieldSpec("email", ("email",), create=REQUIRED, update=True),
        _password_field(),
        FieldSpec("branch_id", ("branch_id",), INTEGER, create=REQUIRED),
    ),
)

BRANCH = EntitySchema(
    kind="branch",
    model=Branch,
    plural_key="branches",
    aliases=("branches",),
    fields=(
        _id_field(),
        FieldSpec("name", ("name",), create=REQUIRED, update=True),
        FieldSpec("email", ("email",), create=REQUIRED, update=True),
        _password_field(),
        FieldSpec("location", ("location",), create=OPTIONAL, update=True),
        FieldSpec(
            "owner_client_admin_id",
            ("client_admin_id",),
            INTEGER,
            create=REQUIRED,
            inputs=("clientAdminId",),
        ),
    ),
)

CLIENT_ADMIN = EntitySchema(
    kind="client_admin",
    model=ClientAdmin,
    plural_key="clients",
    aliases=("client", "clients", "clientadmin"),
    fields=(
        _id_field(),
        FieldSpec("name", ("name",), create=REQUIRED, update=True),
        FieldSpec("email", ("email",), create=REQUIRED, update=True),
        _password_field(update=False),
        FieldSpec(
            "owner_super_admin_id",
            ("super_admin_id",),
            INTEGER,
            create=REQUIRED,
            inputs=("superAdminId",),
        ),
        FieldSpec("tier", ("tier",), create=OPTIONAL, update=True),
        FieldSpec("max_students", ("max_students",), INTEGER, create=OPTIONAL, update=True),
    ),
)

TRANSACTION = EntitySchema(
    kind="transaction",
    model=Transaction,
    plural_key="transactions",
    aliases=("transactions",),
    fields=(
        _id_field(),
        FieldSpec("member_id", ("student_id",), INTEGER),
        FieldSpec(
            "identity_tag_used",
            ("rfid_used",),
            create=REQUIRED,
            wire="rfid",
            inputs=("rfid_used", "rfidUsed"),
        ),
        FieldSpec("product", ("product",), create=REQUIRED),
        FieldSpec("price", ("price",), NUMBER, create=REQUIRED),
        FieldSpec("balance_after", ("current_credits",), NUMBER),
        FieldSpec("timestamp", ("timestamp",), ANY),
    ),
)

MEMBER_QUOTA = EntitySchema(
    kind="member_quota",
    model=MemberQuota,
    aliases=("student_count", "member_count"),
    fields=(
        FieldSpec("current_count", ("current_count",), INTEGER, default=0),
        FieldSpec("max_students", ("max_students",), INTEGER, default=0),
        FieldSpec("available", ("available",), INTEGER, default=0),
    ),
)

SESSION = EntitySchema(
    kind="session",
    model=SessionUser,
    aliases=("session_user", "sessionuser", "user"),
    fields=(
        _id_field("id", "_id"),
        FieldSpec("role", ("role", "rol"), ROLE, required=True),
        FieldSpec("name", ("name", "nombre"), default=""),
        FieldSpec("email", ("email",), default=""),
        FieldSpec("branch_id", ("branch_id",), INTEGER),
        FieldSpec("client_admin_id", ("client_admin_id",), INTEGER),
        FieldSpec("super_admin_id", ("super_admin_id",), INTEGER),
        FieldSpec("location", ("location",)),
        FieldSpec("tier", ("tier",)),
        FieldSpec("max_students", ("max_students",), INTEGER),
    ),
)

ALL_SCHEMAS: Tuple[EntitySchema, ...] = (
    MEMBER,
    GUARDIAN,
    STAFF,
    BRANCH,
    CLIENT_ADMIN,
    TRANSACTION,
    MEMBER_QUOTA,
    SESSION,
)


def _build_registry() -> Dict[str, EntitySchema]:
    registry: Dict[str, EntitySchema] = {}
    for schema in ALL_SCHEMAS:
        names = (schema.kind, schema.model.__name__, *schema.aliases)
        for name in names:
            registry[_registry_key(name)] = schema
    return registry


def _registry_key(name: str) -> str:
    return name.strip().lower().replace("-", "_")


_REGISTRY = _build_registry()


def get_schema(kind: Any) -> EntitySchema:
    """
    Look up the schema for an entity kind.

    Accepts the kind name, the model class name or a registered alias,
    case-insensitively ("member", "Member", "student"), an EntitySchema, or
    a CanonicalRecord subclass.

    Raises:
        UnknownEntityKindError: If nothing is registered under ``kind``.
    """
    if isinstance(kind, EntitySchema):
        return kind
    if isinstance(kind, type) and issubclass(kind, CanonicalRecord):
        kind = kind.__name__
    if isinstance(kind, str):
        schema = _REGISTRY.get(_registry_key(kind))
        if schema is not None:
            return schema
    raise UnknownEntityKindError(kind)
