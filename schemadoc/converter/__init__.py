"""
Conversion engine module.

This module converts schema nodes into the documentation IR: a tree of
models where nested named exports appear as refs.

Components:
    - dispatcher: Entry points and the per-variant conversion rules
    - references: Inline-or-ref decision against the named export pool
    - constraints: Validation entries for string, number, bigint, array
    - meta: Description/optional/nullable flags for any node
    - types: Model, Ref and NamedModel definitions

Example:
    ```python
    from schemadoc.converter import convert_schemas
    from schemadoc.converter.types import ExportedSchema

    models = convert_schemas([ExportedSchema(name="User", path="models.py", schema=User)])
    ```
"""

from schemadoc.converter.dispatcher import convert_schema, convert_schemas
from schemadoc.converter.meta import schema_to_meta
from schemadoc.converter.references import is_same_schema, resolve_ref
from schemadoc.converter.types import ExportedSchema, NamedModel

__all__ = [
    "convert_schema",
    "convert_schemas",
    "schema_to_meta",
    "is_same_schema",
    "resolve_ref",
    "ExportedSchema",
    "NamedModel",
]
