"""
Meta extraction - variant-independent flags for any schema node.

The flags are read from the node as written at the point of use, so an
optional field reports optional=True even though the converter unwraps the
optional layer before building the model.
"""

from dataclasses import replace
from typing import Any, Dict, TypeVar

from schemadoc.converter.types import ModelMeta
from schemadoc.schema.nodes import SchemaNode

M = TypeVar("M", bound=ModelMeta)


def schema_to_meta(schema: SchemaNode, implicit_optional: bool = False) -> Dict[str, Any]:
    """
    Derive description/optional/nullable flags for a schema node.

    Args:
        schema: Node as it appears at the point of use
        implicit_optional: Suppress the optional flag (object fields already
            carry it as `required`)

    Returns:
        Dict with only the flags that are set. `default` and `readonly` are
        never included; the converter sets them while unwrapping.
    """
    meta: Dict[str, Any] = {}
    if schema.description:
        meta["description"] = schema.description
    if not implicit_optional and schema.is_optional():
        meta["optional"] = True
    if schema.is_nullable():
        meta["nullable"] = True
    return meta


def with_meta(target: M, meta: Dict[str, Any]) -> M:
    """Return a copy of a model or ref with the given meta flags applied."""
    if not meta:
        return target
    return replace(target, **meta)
