"""Session user adapter.

The service spells the role field either ``role`` or ``rol``. Only the
canonical ``SessionUser.role`` leaves this module; when both spellings are
present ``role`` wins. The route guard reads that field, this module does
no authorization of its own.
"""

from collections.abc import Mapping
from typing import Any, Optional

from recordbridge.config.loader import MappingSettings
from recordbridge.parsing.normalizer import normalize
from recordbridge.schema.fields import SESSION
from recordbridge.schema.models import Role, SessionUser
from recordbridge.utils.logging import get_logger

logger = get_logger(__name__)

ROLE_KEYS = ("role", "rol")


def resolve_role(wire_user: Mapping) -> Optional[Role]:
    """Canonical role from whichever spelling takes precedence, or None."""
    for key in ROLE_KEYS:
        value = wire_user.get(key)
        if value is not None:
            return Role.parse(value)
    return None


def normalize_session(
    wire_user: Any,
    settings: Optional[MappingSettings] = None,
) -> Optional[SessionUser]:
    """
    Normalize the authenticated-user record.

    Returns:
        SessionUser, or None when the record is absent, has no id, or carries
        no recognised role.
    """
    if wire_user is None:
        return None

    if isinstance(wire_user, Mapping):
        primary, legacy = (wire_user.get(key) for key in ROLE_KEYS)
        if legacy is not None and primary is not None and Role.parse(legacy) != resolve_role(wire_user):
            logger.debug("Session role conflict: role=%r rol=%r, using role", primary, legacy)

    return normalize(SESSION, wire_user, settings)
