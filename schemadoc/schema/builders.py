"""
Constructor functions for schema nodes.

These mirror the usual schema-builder vocabulary so definitions read
naturally in a models module:

    ```python
    from schemadoc.schema import builders as s

    User = s.object_({
        "id": s.string().uuid(),
        "age": s.number().min(0).optional(),
        "tags": s.array(s.string()).max(5),
    })
    ```

Names that collide with Python keywords or builtins carry a trailing
underscore (object_, tuple_, any_).
"""

import enum as _enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, Union

from schemadoc.schema.nodes import (
    AnyNode,
    ArrayNode,
    BigIntNode,
    BooleanNode,
    DateNode,
    DiscriminatedUnionNode,
    EnumNode,
    FunctionNode,
    IntersectionNode,
    LiteralNode,
    NativeEnumNode,
    NeverNode,
    NullNode,
    NumberNode,
    ObjectNode,
    Primitive,
    PromiseNode,
    RecordNode,
    SchemaNode,
    StringNode,
    SymbolNode,
    TupleNode,
    UndefinedNode,
    UnionNode,
    UnknownNode,
    VoidNode,
)


def string(coerce: bool = False) -> StringNode:
    return StringNode(coerce=coerce)


def number(coerce: bool = False) -> NumberNode:
    return NumberNode(coerce=coerce)


def bigint(coerce: bool = False) -> BigIntNode:
    return BigIntNode(coerce=coerce)


def boolean(coerce: bool = False) -> BooleanNode:
    return BooleanNode(coerce=coerce)


def date(coerce: bool = False) -> DateNode:
    return DateNode(coerce=coerce)


def symbol() -> SymbolNode:
    return SymbolNode()


def undefined() -> UndefinedNode:
    return UndefinedNode()


def null() -> NullNode:
    return NullNode()


def any_() -> AnyNode:
    return AnyNode()


def unknown() -> UnknownNode:
    return UnknownNode()


def never() -> NeverNode:
    return NeverNode()


def void() -> VoidNode:
    return VoidNode()


def literal(value: Primitive) -> LiteralNode:
    return LiteralNode(value=value)


def enum(values: Sequence[str]) -> EnumNode:
    """String enum. Values keep their declared order."""
    if not values:
        raise ValueError("enum() needs at least one value")
    return EnumNode(values=list(values))


def native_enum(source: Union[Mapping[str, Union[str, int]], Type[_enum.Enum]]) -> NativeEnumNode:
    """
    Enum built from a key/value mapping or a Python Enum class.

    Args:
        source: Mapping of member name to value, or an Enum subclass

    Returns:
        NativeEnumNode: Node holding the member mapping in declaration order
    """
    if isinstance(source, type) and issubclass(source, _enum.Enum):
        members = {member.name: member.value for member in source}
    else:
        members = dict(source)
    return NativeEnumNode(enum=members)


def array(element: SchemaNode) -> ArrayNode:
    return ArrayNode(element=element)


def object_(shape: Optional[Dict[str, Any]] = None) -> ObjectNode:
    return ObjectNode(shape=dict(shape or {}))


def union(options: Sequence[SchemaNode]) -> UnionNode:
    if len(options) < 2:
        raise ValueError("union() needs at least two options")
    return UnionNode(options=list(options))


def discriminated_union(discriminator: str, options: Sequence[ObjectNode]) -> DiscriminatedUnionNode:
    return DiscriminatedUnionNode(options=list(options), discriminator=discriminator)


def intersection(left: SchemaNode, right: SchemaNode) -> IntersectionNode:
    return IntersectionNode(left=left, right=right)


def record(values: SchemaNode, keys: Optional[SchemaNode] = None) -> RecordNode:
    """Record with string keys unless a key schema is given."""
    return RecordNode(key_type=keys if keys is not None else StringNode(), value_type=values)


def tuple_(items: List[SchemaNode], rest: Optional[SchemaNode] = None) -> TupleNode:
    return TupleNode(items=list(items), rest=rest)


def function(
    args: Optional[Sequence[SchemaNode]] = None,
    returns: Optional[SchemaNode] = None,
) -> FunctionNode:
    """
    Function signature.

    Without explicit arguments the signature takes any number of unknown
    values; without a return schema it returns unknown.
    """
    if args is None:
        arg_tuple = TupleNode(items=[], rest=UnknownNode())
    else:
        arg_tuple = TupleNode(items=list(args))
    return FunctionNode(args=arg_tuple, returns=returns if returns is not None else UnknownNode())


def promise(inner: SchemaNode) -> PromiseNode:
    return PromiseNode(type=inner)
