"""
Schema vocabulary module.

This module defines the schema nodes that the converter introspects: the
primitive and composite constructors, the modifier wrappers, and the check
objects attached to leaf types.

Components:
    - nodes: SchemaNode hierarchy and the SchemaKind variant tags
    - checks: Check classes for string, number, bigint schemas
    - builders: Constructor functions (string(), object_(), union(), ...)

Example:
    ```python
    from schemadoc.schema import builders as s

    Address = s.object_({"city": s.string(), "zip": s.string().length(5)})
    Person = s.object_({"name": s.string().min(1), "address": Address.optional()})
    ```
"""

from schemadoc.schema import builders
from schemadoc.schema.nodes import SchemaKind, SchemaNode, unwrap_inner_type

__all__ = [
    "builders",
    "SchemaKind",
    "SchemaNode",
    "unwrap_inner_type",
]
