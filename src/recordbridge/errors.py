"""Caller-visible errors raised by the translation layer.

Read paths never raise for bad data; only programming mistakes (unknown
entity kinds) and incomplete create payloads surface as exceptions.
"""


class RecordBridgeError(Exception):
    """Base class for recordbridge errors."""


class UnknownEntityKindError(RecordBridgeError, ValueError):
    """Raised when an entity kind has no registered schema."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Unknown entity kind: {kind!r}")


class MissingRequiredFieldError(RecordBridgeError, ValueError):
    """Raised when a create payload lacks a field the service requires."""

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} create payload missing required field: {field}")
