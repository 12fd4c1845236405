"""Project canonical edits back into the payloads the service accepts.

Change-sets are tri-state per field:

- key missing, or value ``UNSET``: leave the field out of the payload
- ``None``: send an explicit null (e.g. clearing an owner reference)
- anything else: send the value as given
"""

from collections.abc import Mapping
from typing import Any, Dict, Tuple

from recordbridge.errors import MissingRequiredFieldError
from recordbridge.schema.fields import REQUIRED, EntitySchema, FieldSpec, get_schema
from recordbridge.schema.models import CanonicalRecord
from recordbridge.utils.logging import get_logger

logger = get_logger(__name__)


class _Unset:
    """Marker for "no change" in a change-set; distinct from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "UNSET"


UNSET: Any = _Unset()


def _as_change_set(data: Any) -> Mapping:
    if data is None:
        return {}
    if isinstance(data, CanonicalRecord):
        return data.model_dump(exclude_unset=True)
    if isinstance(data, Mapping):
        return data
    raise TypeError(f"Expected a mapping or canonical record, got {type(data).__name__}")


def _pick(changes: Mapping, spec: FieldSpec, schema: EntitySchema) -> Any:
    """
    Return the value of the first synonym present in ``changes``.

    Declared precedence decides; later synonyms are ignored, not rejected.
    """
    chosen_key = None
    chosen = UNSET
    for name in spec.input_names:
        if name not in changes or changes[name] is UNSET:
            continue
        if chosen_key is None:
            chosen_key = name
            chosen = changes[name]
        else:
            logger.debug(
                "%s.%s: ignoring %r, %r takes precedence",
                schema.kind,
                spec.name,
                name,
                chosen_key,
            )
    return chosen


def _log_unknown_keys(changes: Mapping, schema: EntitySchema, fields: Tuple[FieldSpec, ...]) -> None:
    accepted = {name for spec in fields for name in spec.input_names}
    unknown = [key for key in changes if key not in accepted]
    if unknown:
        logger.debug("%s: ignoring fields not writable here: %s", schema.kind, unknown)


def denormalize_for_create(kind: Any, data: Any) -> Dict[str, Any]:
    """
    Build the wire payload for creating a record.

    Args:
        kind: Entity kind
        data: Mapping of canonical (or synonym) field names, or a canonical record

    Returns:
        Payload with every required field plus the optional fields that were
        supplied. Fields never supplied are omitted, not sent as null.

    Raises:
        MissingRequiredFieldError: If a required field is missing, UNSET or None.
    """
    schema = get_schema(kind)
    changes = _as_change_set(data)
    fields = schema.create_fields()
    _log_unknown_keys(changes, schema, fields)

    payload: Dict[str, Any] = {}
    for spec in fields:
        value = _pick(changes, spec, schema)
        if spec.create == REQUIRED:
            if value is UNSET or value is None:
                raise MissingRequiredFieldError(schema.kind, spec.name)
        elif value is UNSET:
            continue
        payload[spec.wire_name] = value
    return payload


def denormalize_for_update(kind: Any, changes: Any) -> Dict[str, Any]:
    """
    Build a minimal PATCH payload from a sparse change-set.

    Only fields present (and not UNSET) are sent; None is sent as null. An
    empty result is legal; skipping the request is the caller's call.
    """
    schema = get_schema(kind)
    changes = _as_change_set(changes)
    fields = schema.update_fields()
    _log_unknown_keys(changes, schema, fields)

    payload: Dict[str, Any] = {}
    for spec in fields:
        value = _pick(changes, spec, schema)
        if value is UNSET:
            continue
        payload[spec.wire_name] = value
    return payload


def build_activation_payload(member_id: int, identity_tag: str) -> Dict[str, Any]:
    """Payload assigning an identity tag to a pending member."""
    return {"student_id": member_id, "rfid_id": identity_tag}


def build_credit_payload(amount: float) -> Dict[str, Any]:
    """Payload for a balance recharge or charge; the endpoint decides the sign."""
    return {"credits": amount}
