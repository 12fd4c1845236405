"""Map wire records onto canonical records using the schema tables."""

import math
from collections.abc import Mapping
from typing import Any, List, Optional

from recordbridge.config.loader import DEFAULT_SETTINGS, MappingSettings
from recordbridge.parsing.envelope import resolve_list
from recordbridge.schema.fields import (
    INTEGER,
    NUMBER,
    ROLE,
    FieldSpec,
    get_schema,
)
from recordbridge.schema.models import CanonicalRecord, Role
from recordbridge.utils.logging import get_logger

logger = get_logger(__name__)

_MISSING = object()


def _parse_numeric_text(text: str) -> Any:
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        number = float(stripped)
    except ValueError:
        return _MISSING
    if not math.isfinite(number):
        return _MISSING
    return number


def coerce_value(value: Any, kind: str) -> Any:
    """
    Best-effort coercion of a wire value to a field kind.

    Only numeric kinds and roles are converted. Booleans, and text that
    doesn't parse as a number, pass through untouched; validation happens
    outside this layer.

    Args:
        value: Raw wire value (never None here)
        kind: Field kind from the schema table

    Returns:
        Coerced value, or the original value when coercion doesn't apply
    """
    if kind in (INTEGER, NUMBER):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            parsed = _parse_numeric_text(value)
            if parsed is _MISSING:
                return value
            value = parsed
        if kind == INTEGER and isinstance(value, float) and value.is_integer():
            return int(value)
        return value
    if kind == ROLE:
        return Role.parse(value)
    return value


def _read(wire: Mapping, spec: FieldSpec) -> Any:
    """First source key present with a non-null value, else _MISSING."""
    for source in spec.sources:
        value = wire.get(source)
        if value is not None:
            return value
    return _MISSING


def _default_for(spec: FieldSpec, settings: MappingSettings) -> Any:
    if spec.placeholder:
        configured = settings.placeholder(spec.placeholder)
        if configured is not None:
            return configured
    return spec.default


def normalize(
    kind: Any,
    wire: Any,
    settings: Optional[MappingSettings] = None,
) -> Optional[CanonicalRecord]:
    """
    Turn one wire record into its canonical record.

    Fields are filled from the schema table: first present source name,
    coerced by kind, else the declared default. A present zero is a value,
    not an absence.

    Args:
        kind: Entity kind ("member", "Member", a model class, ...)
        wire: Raw record dict as received from the service
        settings: Optional settings (placeholder overrides)

    Returns:
        Fresh canonical record, or None when ``wire`` is None, not a mapping,
        or lacks a required field. Never raises for bad data.
    """
    schema = get_schema(kind)
    if wire is None:
        return None
    if not isinstance(wire, Mapping):
        logger.warning(
            "Skipping %s record of unexpected type %s", schema.kind, type(wire).__name__
        )
        return None

    settings = settings or DEFAULT_SETTINGS
    values = {}
    fields_set = set()
    for spec in schema.readable_fields():
        value = _read(wire, spec)
        if value is not _MISSING:
            value = coerce_value(value, spec.kind)
            if value is None or (spec.placeholder and value == ""):
                value = _MISSING

        if value is _MISSING:
            if spec.required:
                logger.warning(
                    "Dropping %s record without usable %s (sources: %s)",
                    schema.kind,
                    spec.name,
                    ", ".join(spec.sources),
                )
                return None
            value = _default_for(spec, settings)
        else:
            fields_set.add(spec.name)

        values[spec.name] = value

    # Values are coerced best-effort only; skip pydantic validation so a stray
    # non-numeric string can't make the read path raise. Only fields read from
    # the wire count as set, so defaults never flow back into payloads.
    return schema.model.model_construct(_fields_set=fields_set, **values)


def normalize_list(
    kind: Any,
    raw: Any,
    settings: Optional[MappingSettings] = None,
) -> List[CanonicalRecord]:
    """
    Normalize every record in a list response, whatever its envelope.

    Order is preserved; records that normalize to None are dropped so one
    corrupt entry doesn't empty the whole list.
    """
    schema = get_schema(kind)
    settings = settings or DEFAULT_SETTINGS
    items = resolve_list(raw, schema.plural_key, generic_keys=settings.generic_envelope_keys)

    records = []
    for item in items:
        record = normalize(schema, item, settings)
        if record is not None:
            records.append(record)

    dropped = len(items) - len(records)
    if dropped:
        logger.info("Dropped %d of %d %s records", dropped, len(items), schema.kind)
    return records
