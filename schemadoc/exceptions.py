"""
Exception types raised by schemadoc.

Library code raises these and lets them propagate; only the CLI turns them
into printed messages and exit codes.
"""

from typing import Optional


class SchemaDocError(Exception):
    """Base class for schemadoc errors."""


class UnsupportedSchemaKind(SchemaDocError, ValueError):
    """
    Raised when the converter meets a schema variant it has no rule for.

    Attributes:
        kind: Variant tag of the offending node, or "<unknown>" when the value
            carries no tag at all
    """

    def __init__(self, kind: Optional[str]):
        self.kind = kind if kind is not None else "<unknown>"
        super().__init__(f"Schema kind {self.kind} is not supported")


class SchemaLoadError(SchemaDocError):
    """Raised when schema exports cannot be loaded from a module."""
