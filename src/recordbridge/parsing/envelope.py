"""Locate the record list inside an upstream response.

Endpoints disagree on how they wrap lists: some return a bare array, some
nest it under the entity's plural name ("students"), some under "data".
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence

from recordbridge.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_GENERIC_KEYS = ("data",)


def _is_record_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def resolve_list(
    raw: Any,
    plural_key: Optional[str] = None,
    *,
    generic_keys: Iterable[str] = DEFAULT_GENERIC_KEYS,
) -> Sequence[Any]:
    """
    Return the sequence of wire records carried by ``raw``.

    Lookup order for a keyed response: ``plural_key`` first, then each of
    ``generic_keys``. The first key holding a list wins.

    Args:
        raw: Top-level response value (None, list, or dict envelope)
        plural_key: Entity-specific wrapper key, e.g. "students"
        generic_keys: Fallback wrapper keys, checked in order

    Returns:
        The record sequence; an empty list when nothing matches. A payload of
        an unexpected shape is indistinguishable from "no records" here.
    """
    if raw is None:
        return []
    if _is_record_sequence(raw):
        return raw
    if isinstance(raw, Mapping):
        keys = [plural_key] if plural_key else []
        keys.extend(generic_keys)
        for key in keys:
            value = raw.get(key)
            if _is_record_sequence(value):
                return value
        logger.debug(
            "No record list under %s in envelope with keys %s",
            keys,
            sorted(map(str, raw.keys())),
        )
        return []

    logger.debug("Unexpected envelope type %s, treating as empty", type(raw).__name__)
    return []
