"""
Reference resolution - decide between inlining a nested schema and pointing
at a named export.

Every nested node is checked against the pool of named exports before it is
converted. A match produces a Ref carrying the export's name and path, which
keeps each exported schema documented once and lets exports that mention
each other terminate.

Matching is shallow. A node is the same schema as an export when it:
    1. is the export's node
    2. wraps the export's node in one optional/nullable/default/readonly layer
    3. is a described copy of the export (only the description differs)
    4. wraps such a described copy in one layer

Schemas built separately with the same shape are not matched.
"""

import logging
from typing import Any, Optional, Sequence

from schemadoc.converter.meta import schema_to_meta, with_meta
from schemadoc.converter.types import ExportedSchema, InlineModel, ModelOrRef, ModelRef, Ref
from schemadoc.schema.nodes import SchemaNode, unwrap_inner_type

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool, bytes)


def resolve_ref(
    schema: SchemaNode,
    exported_schemas: Sequence[ExportedSchema],
    implicit_optional: bool = False,
) -> ModelOrRef:
    """
    Convert a nested schema node into an inlined model or a ref.

    Args:
        schema: Nested node as it appears at the point of use
        exported_schemas: Pool of named exports
        implicit_optional: Passed to the meta extractor; set for object fields

    Returns:
        ModelRef if the node matches an export, otherwise InlineModel

    Raises:
        UnsupportedSchemaKind: If the node (or anything below it) has no
            conversion rule
    """
    # Import here to avoid circular dependency
    from schemadoc.converter.dispatcher import convert_schema, schema_kind

    # Reject untagged values before reading their meta
    schema_kind(schema)
    meta = schema_to_meta(schema, implicit_optional)
    exported = find_exported_schema(schema, exported_schemas)
    if exported is not None:
        logger.debug(f"Referencing export {exported.name or '<default>'} ({exported.path})")
        return ModelRef(ref=Ref(name=exported.name, path=exported.path, **meta))

    return InlineModel(model=with_meta(convert_schema(schema, exported_schemas), meta))


def find_exported_schema(
    schema: SchemaNode, exported_schemas: Sequence[ExportedSchema]
) -> Optional[ExportedSchema]:
    """Return the first export that is the same schema as `schema`, if any."""
    for exported in exported_schemas:
        if is_same_schema(schema, exported.schema):
            return exported
    return None


def is_same_schema(schema: SchemaNode, named: SchemaNode) -> bool:
    unwrapped = unwrap_inner_type(schema)
    return (
        schema is named
        or unwrapped is named
        or is_only_description_changed(schema, named)
        or (unwrapped is not None and is_only_description_changed(unwrapped, named))
    )


def is_only_description_changed(schema: SchemaNode, named: SchemaNode) -> bool:
    """
    True when `schema` is `named` with a different description.

    Both nodes must be the same variant and every definition field must hold
    the same value: the same object for nodes and containers, an equal value
    for scalars.
    """
    if type(schema) is not type(named) or schema.description == named.description:
        return False
    definition = schema.definition()
    return all(
        _same_value(definition[key], value) for key, value in named.definition().items()
    )


def _same_value(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if isinstance(left, _SCALARS) and type(left) is type(right):
        return left == right
    return False
