"""
Schema node definitions.

Schema nodes are declarative descriptions of data shapes. They are built with
the functions in schemadoc.schema.builders and then handed to the converter,
which reads them but never mutates them. Every fluent method returns a new
node, so a schema that has been exported under a name keeps its identity.

Node Hierarchy:
    SchemaNode
    ├── Leaves: StringNode, NumberNode, BigIntNode, BooleanNode, DateNode,
    │   SymbolNode, UndefinedNode, NullNode, AnyNode, UnknownNode, NeverNode,
    │   VoidNode, LiteralNode, EnumNode, NativeEnumNode
    ├── Composites: ArrayNode, ObjectNode, UnionNode, DiscriminatedUnionNode,
    │   IntersectionNode, RecordNode, TupleNode, FunctionNode, PromiseNode
    └── Modifier wrappers: OptionalNode, NullableNode, DefaultNode,
        ReadonlyNode, EffectsNode, BrandedNode, PipelineNode

Nodes use identity equality (eq=False). Two schemas built separately are
different schemas even when they describe the same shape.
"""

import re
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Union

from schemadoc.schema.checks import (
    BigIntCheck,
    BoundCheck,
    DatetimeCheck,
    FiniteCheck,
    FormatCheck,
    IntCheck,
    IpCheck,
    LengthCheck,
    MultipleOfCheck,
    NumberCheck,
    RegexCheck,
    StringCheck,
    StringTransform,
    SubstringCheck,
)

Primitive = Union[str, int, float, bool, None]

MAX_SAFE_INTEGER = 2**53 - 1


class SchemaKind(str, Enum):
    """Variant tag carried by every schema node."""

    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DATE = "date"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    NULL = "null"
    ANY = "any"
    UNKNOWN = "unknown"
    NEVER = "never"
    VOID = "void"
    LITERAL = "literal"
    ENUM = "enum"
    NATIVE_ENUM = "native-enum"
    ARRAY = "array"
    OBJECT = "object"
    UNION = "union"
    DISCRIMINATED_UNION = "discriminated-union"
    INTERSECTION = "intersection"
    RECORD = "record"
    TUPLE = "tuple"
    FUNCTION = "function"
    PROMISE = "promise"
    OPTIONAL = "optional"
    NULLABLE = "nullable"
    DEFAULT = "default"
    READONLY = "readonly"
    EFFECTS = "effects"
    BRANDED = "branded"
    PIPELINE = "pipeline"


@dataclass(eq=False)
class SchemaNode:
    """
    Base class for all schema nodes.

    Attributes:
        description: Human-readable description attached with describe()

    Subclasses set the `kind` class attribute and declare their definition
    fields as dataclass fields. Everything except `description` is part of
    the node's definition record.
    """

    kind: ClassVar[Optional[SchemaKind]] = None

    description: Optional[str] = None

    def definition(self) -> Dict[str, Any]:
        """Return the definition record: every field except description."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "description"}

    def is_optional(self) -> bool:
        """Whether this schema accepts a missing value."""
        return False

    def is_nullable(self) -> bool:
        """Whether this schema accepts None."""
        return False

    # Modifiers

    def describe(self, description: str) -> "SchemaNode":
        return replace(self, description=description)

    def optional(self) -> "OptionalNode":
        return OptionalNode(inner_type=self, description=self.description)

    def nullable(self) -> "NullableNode":
        return NullableNode(inner_type=self, description=self.description)

    def nullish(self) -> "OptionalNode":
        return self.nullable().optional()

    def default(self, value: Any) -> "DefaultNode":
        """
        Wrap this schema with a default value.

        A callable is stored as the default factory; any other value is
        wrapped in a factory returning it.
        """
        factory = value if callable(value) else (lambda: value)
        return DefaultNode(inner_type=self, default_value=factory, description=self.description)

    def readonly(self) -> "ReadonlyNode":
        return ReadonlyNode(inner_type=self, description=self.description)

    def transform(self, fn: Callable[[Any], Any]) -> "EffectsNode":
        return EffectsNode(schema=self, effect_type="transform", effect=fn, description=self.description)

    def refine(self, check: Callable[[Any], bool]) -> "EffectsNode":
        return EffectsNode(schema=self, effect_type="refinement", effect=check, description=self.description)

    def brand(self, brand: Optional[str] = None) -> "BrandedNode":
        return BrandedNode(base_type=self, brand_name=brand, description=self.description)

    def pipe(self, target: "SchemaNode") -> "PipelineNode":
        return PipelineNode(in_type=self, out_type=target)

    def array(self) -> "ArrayNode":
        return ArrayNode(element=self)

    def or_(self, other: "SchemaNode") -> "UnionNode":
        return UnionNode(options=[self, other])

    def and_(self, other: "SchemaNode") -> "IntersectionNode":
        return IntersectionNode(left=self, right=other)


# Leaf nodes


@dataclass(eq=False)
class StringNode(SchemaNode):
    kind = SchemaKind.STRING

    checks: List[StringCheck] = field(default_factory=list)
    coerce: bool = False

    def _add_check(self, check: StringCheck) -> "StringNode":
        return replace(self, checks=[*self.checks, check])

    def min(self, value: int) -> "StringNode":
        return self._add_check(LengthCheck("min", value))

    def max(self, value: int) -> "StringNode":
        return self._add_check(LengthCheck("max", value))

    def length(self, value: int) -> "StringNode":
        return self._add_check(LengthCheck("length", value))

    def nonempty(self) -> "StringNode":
        return self.min(1)

    def email(self) -> "StringNode":
        return self._add_check(FormatCheck("email"))

    def url(self) -> "StringNode":
        return self._add_check(FormatCheck("url"))

    def emoji(self) -> "StringNode":
        return self._add_check(FormatCheck("emoji"))

    def uuid(self) -> "StringNode":
        return self._add_check(FormatCheck("uuid"))

    def cuid(self) -> "StringNode":
        return self._add_check(FormatCheck("cuid"))

    def cuid2(self) -> "StringNode":
        return self._add_check(FormatCheck("cuid2"))

    def ulid(self) -> "StringNode":
        return self._add_check(FormatCheck("ulid"))

    def regex(self, pattern: Union[str, "re.Pattern[str]"]) -> "StringNode":
        return self._add_check(RegexCheck(re.compile(pattern)))

    def includes(self, value: str, position: Optional[int] = None) -> "StringNode":
        return self._add_check(SubstringCheck("includes", value, position))

    def starts_with(self, value: str) -> "StringNode":
        return self._add_check(SubstringCheck("startsWith", value))

    def ends_with(self, value: str) -> "StringNode":
        return self._add_check(SubstringCheck("endsWith", value))

    def datetime(self, offset: bool = False, precision: Optional[int] = None) -> "StringNode":
        return self._add_check(DatetimeCheck(offset=offset, precision=precision))

    def ip(self, version: Optional[str] = None) -> "StringNode":
        if version not in (None, "v4", "v6"):
            raise ValueError(f"Unsupported IP version: {version}")
        return self._add_check(IpCheck(version=version))

    def trim(self) -> "StringNode":
        return self._add_check(StringTransform("trim"))

    def to_lower_case(self) -> "StringNode":
        return self._add_check(StringTransform("toLowerCase"))

    def to_upper_case(self) -> "StringNode":
        return self._add_check(StringTransform("toUpperCase"))


@dataclass(eq=False)
class NumberNode(SchemaNode):
    kind = SchemaKind.NUMBER

    checks: List[NumberCheck] = field(default_factory=list)
    coerce: bool = False

    def _add_check(self, check: NumberCheck) -> "NumberNode":
        return replace(self, checks=[*self.checks, check])

    def gt(self, value: float) -> "NumberNode":
        return self._add_check(BoundCheck("min", value, inclusive=False))

    def gte(self, value: float) -> "NumberNode":
        return self._add_check(BoundCheck("min", value, inclusive=True))

    min = gte

    def lt(self, value: float) -> "NumberNode":
        return self._add_check(BoundCheck("max", value, inclusive=False))

    def lte(self, value: float) -> "NumberNode":
        return self._add_check(BoundCheck("max", value, inclusive=True))

    max = lte

    def int_(self) -> "NumberNode":
        return self._add_check(IntCheck())

    def positive(self) -> "NumberNode":
        return self.gt(0)

    def nonnegative(self) -> "NumberNode":
        return self.gte(0)

    def negative(self) -> "NumberNode":
        return self.lt(0)

    def nonpositive(self) -> "NumberNode":
        return self.lte(0)

    def multiple_of(self, value: float) -> "NumberNode":
        return self._add_check(MultipleOfCheck(value))

    step = multiple_of

    def finite(self) -> "NumberNode":
        return self._add_check(FiniteCheck())

    def safe(self) -> "NumberNode":
        return self.gte(-MAX_SAFE_INTEGER).lte(MAX_SAFE_INTEGER)


@dataclass(eq=False)
class BigIntNode(SchemaNode):
    kind = SchemaKind.BIGINT

    checks: List[BigIntCheck] = field(default_factory=list)
    coerce: bool = False

    def _add_check(self, check: BigIntCheck) -> "BigIntNode":
        return replace(self, checks=[*self.checks, check])

    def gt(self, value: int) -> "BigIntNode":
        return self._add_check(BoundCheck("min", value, inclusive=False))

    def gte(self, value: int) -> "BigIntNode":
        return self._add_check(BoundCheck("min", value, inclusive=True))

    min = gte

    def lt(self, value: int) -> "BigIntNode":
        return self._add_check(BoundCheck("max", value, inclusive=False))

    def lte(self, value: int) -> "BigIntNode":
        return self._add_check(BoundCheck("max", value, inclusive=True))

    max = lte

    def positive(self) -> "BigIntNode":
        return self.gt(0)

    def nonnegative(self) -> "BigIntNode":
        return self.gte(0)

    def negative(self) -> "BigIntNode":
        return self.lt(0)

    def nonpositive(self) -> "BigIntNode":
        return self.lte(0)

    def multiple_of(self, value: int) -> "BigIntNode":
        return self._add_check(MultipleOfCheck(value))


@dataclass(eq=False)
class BooleanNode(SchemaNode):
    kind = SchemaKind.BOOLEAN

    coerce: bool = False


@dataclass(eq=False)
class DateNode(SchemaNode):
    kind = SchemaKind.DATE

    coerce: bool = False


@dataclass(eq=False)
class SymbolNode(SchemaNode):
    kind = SchemaKind.SYMBOL


@dataclass(eq=False)
class UndefinedNode(SchemaNode):
    kind = SchemaKind.UNDEFINED

    def is_optional(self) -> bool:
        return True


@dataclass(eq=False)
class NullNode(SchemaNode):
    kind = SchemaKind.NULL

    def is_nullable(self) -> bool:
        return True


@dataclass(eq=False)
class AnyNode(SchemaNode):
    kind = SchemaKind.ANY

    def is_optional(self) -> bool:
        return True

    def is_nullable(self) -> bool:
        return True


@dataclass(eq=False)
class UnknownNode(AnyNode):
    kind = SchemaKind.UNKNOWN


@dataclass(eq=False)
class NeverNode(SchemaNode):
    kind = SchemaKind.NEVER


@dataclass(eq=False)
class VoidNode(SchemaNode):
    kind = SchemaKind.VOID

    def is_optional(self) -> bool:
        return True


@dataclass(eq=False)
class LiteralNode(SchemaNode):
    kind = SchemaKind.LITERAL

    value: Primitive = None

    def is_nullable(self) -> bool:
        return self.value is None


@dataclass(eq=False)
class EnumNode(SchemaNode):
    """Closed set of string values, kept in declaration order."""

    kind = SchemaKind.ENUM

    values: List[str] = field(default_factory=list)

    @property
    def options(self) -> List[str]:
        return list(self.values)

    def extract(self, *values: str) -> "EnumNode":
        return EnumNode(values=[v for v in self.values if v in values])

    def exclude(self, *values: str) -> "EnumNode":
        return EnumNode(values=[v for v in self.values if v not in values])


@dataclass(eq=False)
class NativeEnumNode(SchemaNode):
    """Key to value mapping, usually taken from a Python Enum class."""

    kind = SchemaKind.NATIVE_ENUM

    enum: Mapping[str, Union[str, int]] = field(default_factory=dict)


# Composite nodes


@dataclass(eq=False)
class ArrayNode(SchemaNode):
    kind = SchemaKind.ARRAY

    element: Optional[SchemaNode] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    exact_length: Optional[int] = None

    def min(self, value: int) -> "ArrayNode":
        return replace(self, min_length=value)

    def max(self, value: int) -> "ArrayNode":
        return replace(self, max_length=value)

    def length(self, value: int) -> "ArrayNode":
        return replace(self, exact_length=value)

    def nonempty(self) -> "ArrayNode":
        return self.min(1)


@dataclass(eq=False)
class ObjectNode(SchemaNode):
    """
    Object with a fixed shape.

    Attributes:
        shape: Mapping of key to schema node, in declaration order. Entries
            whose value is not a SchemaNode are ignored by the converter.
        unknown_keys: Policy for keys outside the shape (strip, strict, passthrough)
    """

    kind = SchemaKind.OBJECT

    shape: Dict[str, Any] = field(default_factory=dict)
    unknown_keys: str = "strip"

    def extend(self, shape: Dict[str, Any]) -> "ObjectNode":
        return replace(self, shape={**self.shape, **shape})

    def merge(self, other: "ObjectNode") -> "ObjectNode":
        return replace(self, shape={**self.shape, **other.shape}, unknown_keys=other.unknown_keys)

    def pick(self, *keys: str) -> "ObjectNode":
        return replace(self, shape={k: v for k, v in self.shape.items() if k in keys})

    def omit(self, *keys: str) -> "ObjectNode":
        return replace(self, shape={k: v for k, v in self.shape.items() if k not in keys})

    def partial(self) -> "ObjectNode":
        return replace(
            self,
            shape={
                k: v.optional() if isinstance(v, SchemaNode) else v for k, v in self.shape.items()
            },
        )

    def strict(self) -> "ObjectNode":
        return replace(self, unknown_keys="strict")

    def passthrough(self) -> "ObjectNode":
        return replace(self, unknown_keys="passthrough")

    def keyof(self) -> EnumNode:
        return EnumNode(values=list(self.shape.keys()))


@dataclass(eq=False)
class UnionNode(SchemaNode):
    kind = SchemaKind.UNION

    options: List[SchemaNode] = field(default_factory=list)

    def is_optional(self) -> bool:
        return any(option.is_optional() for option in self.options)

    def is_nullable(self) -> bool:
        return any(option.is_nullable() for option in self.options)


@dataclass(eq=False)
class DiscriminatedUnionNode(UnionNode):
    kind = SchemaKind.DISCRIMINATED_UNION

    discriminator: str = ""


@dataclass(eq=False)
class IntersectionNode(SchemaNode):
    kind = SchemaKind.INTERSECTION

    left: Optional[SchemaNode] = None
    right: Optional[SchemaNode] = None

    def is_optional(self) -> bool:
        return self.left.is_optional() and self.right.is_optional()

    def is_nullable(self) -> bool:
        return self.left.is_nullable() and self.right.is_nullable()


@dataclass(eq=False)
class RecordNode(SchemaNode):
    kind = SchemaKind.RECORD

    key_type: Optional[SchemaNode] = None
    value_type: Optional[SchemaNode] = None


@dataclass(eq=False)
class TupleNode(SchemaNode):
    kind = SchemaKind.TUPLE

    items: List[SchemaNode] = field(default_factory=list)
    rest: Optional[SchemaNode] = None


@dataclass(eq=False)
class FunctionNode(SchemaNode):
    """Function signature: an argument tuple and a return schema."""

    kind = SchemaKind.FUNCTION

    args: Optional[TupleNode] = None
    returns: Optional[SchemaNode] = None

    def with_args(self, *params: SchemaNode) -> "FunctionNode":
        return replace(self, args=TupleNode(items=list(params), rest=UnknownNode()))

    def with_returns(self, returns: SchemaNode) -> "FunctionNode":
        return replace(self, returns=returns)


@dataclass(eq=False)
class PromiseNode(SchemaNode):
    kind = SchemaKind.PROMISE

    type: Optional[SchemaNode] = None


# Modifier wrappers


@dataclass(eq=False)
class OptionalNode(SchemaNode):
    kind = SchemaKind.OPTIONAL

    inner_type: Optional[SchemaNode] = None

    def is_optional(self) -> bool:
        return True

    def is_nullable(self) -> bool:
        return self.inner_type.is_nullable()


@dataclass(eq=False)
class NullableNode(SchemaNode):
    kind = SchemaKind.NULLABLE

    inner_type: Optional[SchemaNode] = None

    def is_optional(self) -> bool:
        return self.inner_type.is_optional()

    def is_nullable(self) -> bool:
        return True


@dataclass(eq=False)
class DefaultNode(SchemaNode):
    """
    Schema with a default value.

    Attributes:
        inner_type: Wrapped schema
        default_value: Zero-argument factory producing the default
    """

    kind = SchemaKind.DEFAULT

    inner_type: Optional[SchemaNode] = None
    default_value: Callable[[], Any] = lambda: None

    def is_optional(self) -> bool:
        return True

    def is_nullable(self) -> bool:
        return self.inner_type.is_nullable()

    def remove_default(self) -> SchemaNode:
        return self.inner_type


@dataclass(eq=False)
class ReadonlyNode(SchemaNode):
    kind = SchemaKind.READONLY

    inner_type: Optional[SchemaNode] = None

    def is_optional(self) -> bool:
        return self.inner_type.is_optional()

    def is_nullable(self) -> bool:
        return self.inner_type.is_nullable()


@dataclass(eq=False)
class EffectsNode(SchemaNode):
    """
    Schema with a transform, refinement or preprocess step.

    The output type of the effect cannot be read from the definition, only
    the input schema can.
    """

    kind = SchemaKind.EFFECTS

    schema: Optional[SchemaNode] = None
    effect_type: str = "transform"
    effect: Optional[Callable[..., Any]] = None

    def is_optional(self) -> bool:
        return self.schema.is_optional()

    def is_nullable(self) -> bool:
        return self.schema.is_nullable()


@dataclass(eq=False)
class BrandedNode(SchemaNode):
    kind = SchemaKind.BRANDED

    base_type: Optional[SchemaNode] = None
    brand_name: Optional[str] = None

    def is_optional(self) -> bool:
        return self.base_type.is_optional()

    def is_nullable(self) -> bool:
        return self.base_type.is_nullable()


@dataclass(eq=False)
class PipelineNode(SchemaNode):
    """Input schema piped into an output schema."""

    kind = SchemaKind.PIPELINE

    in_type: Optional[SchemaNode] = None
    out_type: Optional[SchemaNode] = None

    def is_optional(self) -> bool:
        return self.in_type.is_optional() and self.out_type.is_optional()

    def is_nullable(self) -> bool:
        return self.in_type.is_nullable() and self.out_type.is_nullable()


# Wrappers that the reference resolver looks through when matching exports.
INNER_TYPE_WRAPPERS = (OptionalNode, NullableNode, DefaultNode, ReadonlyNode)


def unwrap_inner_type(node: SchemaNode) -> Optional[SchemaNode]:
    """Return the wrapped node of an optional/nullable/default/readonly wrapper, else None."""
    if isinstance(node, INNER_TYPE_WRAPPERS):
        return node.inner_type
    return None
