"""
Intermediate model (IR) definitions.

This module defines the documentation models produced by the converter. The
models are plain dataclasses with no reference back to the schema nodes they
were built from, and each one knows how to serialize itself to the
JSON-compatible shape consumed by formatters.

Type Hierarchy:
    ModelMeta: description, default, optional, nullable, readonly
    ├── Model (abstract over `type`)
    │   ├── ArrayModel, ObjectModel, StringModel, NumberModel, BigIntModel
    │   ├── BooleanModel, DateModel, EnumModel, NativeEnumModel, LiteralModel
    │   ├── UnionModel, IntersectionModel, RecordModel, TupleModel
    │   ├── FunctionModel, PromiseModel
    │   └── NullModel, UndefinedModel, SymbolModel, UnknownModel, AnyModel,
    │       VoidModel, NeverModel
    └── Ref: pointer to a named export (name, path)

    ModelOrRef = InlineModel | ModelRef

Serialization rules:
    - Meta keys appear only when set (description present, flags True,
      default provided)
    - `validations` appears only when non-empty
    - Validation tuples become two-element lists; regex parameters become
      their pattern string
"""

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from schemadoc.schema.nodes import SchemaNode


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()

Validation = Union[str, Tuple[str, Any]]


def validation_to_json(validation: Validation) -> Any:
    """Serialize one validation entry: bare tags stay strings, tuples become lists."""
    if isinstance(validation, str):
        return validation
    kind, param = validation
    if isinstance(param, re.Pattern):
        param = param.pattern
    elif isinstance(param, dict):
        param = dict(param)
    return [kind, param]


@dataclass
class ModelMeta:
    """
    Flags orthogonal to a model's shape.

    Attributes:
        description: Human-readable description
        default: Default value (NO_DEFAULT when none was declared)
        optional: Value may be omitted
        nullable: Value may be None
        readonly: Value is declared immutable
    """

    description: Optional[str] = None
    default: Any = NO_DEFAULT
    optional: bool = False
    nullable: bool = False
    readonly: bool = False

    def meta_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.description:
            data["description"] = self.description
        if self.default is not NO_DEFAULT:
            data["default"] = self.default
        if self.optional:
            data["optional"] = True
        if self.nullable:
            data["nullable"] = True
        if self.readonly:
            data["readonly"] = True
        return data


@dataclass
class Model(ModelMeta):
    """Base class for all models. Subclasses set `type` and their structural fields."""

    type: ClassVar[str] = ""

    def structure(self) -> Dict[str, Any]:
        """Structural fields of this model, serialized."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, **self.structure(), **self.meta_dict()}


@dataclass
class Ref(ModelMeta):
    """
    Pointer to a named export.

    The meta on a ref describes the point of use, e.g. a field that is
    optional even though the referenced schema is not.
    """

    name: Optional[str] = None
    path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["path"] = self.path
        data.update(self.meta_dict())
        return data


@dataclass
class InlineModel:
    """A fully converted model embedded in place."""

    model: Model

    kind: ClassVar[str] = "model"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "model": self.model.to_dict()}


@dataclass
class ModelRef:
    """A reference to a named export used in place of an inlined model."""

    ref: Ref

    kind: ClassVar[str] = "ref"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "ref": self.ref.to_dict()}


ModelOrRef = Union[InlineModel, ModelRef]


def _validations(validations: Optional[List[Validation]]) -> Dict[str, Any]:
    if not validations:
        return {}
    return {"validations": [validation_to_json(v) for v in validations]}


@dataclass
class ObjectField:
    """
    One key of an object model.

    Attributes:
        key: Property name
        required: False when the field schema accepts a missing value
        entry: Inlined model or ref describing the field's value
    """

    key: str
    required: bool
    entry: ModelOrRef

    @property
    def kind(self) -> str:
        return self.entry.kind

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "required": self.required, **self.entry.to_dict()}


@dataclass
class ArrayModel(Model):
    type: ClassVar[str] = "array"

    items: Optional[ModelOrRef] = None
    validations: Optional[List[Validation]] = None

    def structure(self) -> Dict[str, Any]:
        return {"items": self.items.to_dict(), **_validations(self.validations)}


@dataclass
class ObjectModel(Model):
    type: ClassVar[str] = "object"

    fields: List[ObjectField] = field(default_factory=list)

    def structure(self) -> Dict[str, Any]:
        return {"fields": [f.to_dict() for f in self.fields]}


@dataclass
class StringModel(Model):
    type: ClassVar[str] = "string"

    validations: Optional[List[Validation]] = None

    def structure(self) -> Dict[str, Any]:
        return _validations(self.validations)


@dataclass
class NumberModel(Model):
    type: ClassVar[str] = "number"

    validations: Optional[List[Validation]] = None

    def structure(self) -> Dict[str, Any]:
        return _validations(self.validations)


@dataclass
class BigIntModel(Model):
    type: ClassVar[str] = "bigint"

    validations: Optional[List[Validation]] = None

    def structure(self) -> Dict[str, Any]:
        return _validations(self.validations)


@dataclass
class BooleanModel(Model):
    type: ClassVar[str] = "boolean"


@dataclass
class DateModel(Model):
    type: ClassVar[str] = "date"


@dataclass
class EnumModel(Model):
    type: ClassVar[str] = "enum"

    values: List[str] = field(default_factory=list)

    def structure(self) -> Dict[str, Any]:
        return {"values": list(self.values)}


@dataclass
class NativeEnumModel(Model):
    type: ClassVar[str] = "native-enum"

    enum: Dict[str, Union[str, int]] = field(default_factory=dict)

    def structure(self) -> Dict[str, Any]:
        return {"enum": dict(self.enum)}


@dataclass
class UnionModel(Model):
    type: ClassVar[str] = "union"

    options: List[ModelOrRef] = field(default_factory=list)

    def structure(self) -> Dict[str, Any]:
        return {"options": [o.to_dict() for o in self.options]}


@dataclass
class IntersectionModel(Model):
    type: ClassVar[str] = "intersection"

    parts: Tuple[ModelOrRef, ...] = ()

    def structure(self) -> Dict[str, Any]:
        return {"parts": [p.to_dict() for p in self.parts]}


@dataclass
class RecordModel(Model):
    type: ClassVar[str] = "record"

    keys: Optional[ModelOrRef] = None
    values: Optional[ModelOrRef] = None

    def structure(self) -> Dict[str, Any]:
        return {"keys": self.keys.to_dict(), "values": self.values.to_dict()}


@dataclass
class TupleModel(Model):
    type: ClassVar[str] = "tuple"

    items: List[ModelOrRef] = field(default_factory=list)
    rest: Optional[ModelOrRef] = None

    def structure(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"items": [i.to_dict() for i in self.items]}
        if self.rest is not None:
            data["rest"] = self.rest.to_dict()
        return data


@dataclass
class FunctionModel(Model):
    type: ClassVar[str] = "function"

    parameters: List[ModelOrRef] = field(default_factory=list)
    return_value: Optional[ModelOrRef] = None

    def structure(self) -> Dict[str, Any]:
        return {
            "parameters": [p.to_dict() for p in self.parameters],
            "returnValue": self.return_value.to_dict(),
        }


@dataclass
class PromiseModel(Model):
    type: ClassVar[str] = "promise"

    resolved_value: Optional[ModelOrRef] = None

    def structure(self) -> Dict[str, Any]:
        return {"resolvedValue": self.resolved_value.to_dict()}


@dataclass
class LiteralModel(Model):
    type: ClassVar[str] = "literal"

    value: Union[str, int, float, bool, None] = None

    def structure(self) -> Dict[str, Any]:
        return {"value": self.value}


@dataclass
class NullModel(Model):
    type: ClassVar[str] = "null"


@dataclass
class UndefinedModel(Model):
    type: ClassVar[str] = "undefined"


@dataclass
class SymbolModel(Model):
    type: ClassVar[str] = "symbol"


@dataclass
class UnknownModel(Model):
    type: ClassVar[str] = "unknown"


@dataclass
class AnyModel(Model):
    type: ClassVar[str] = "any"


@dataclass
class VoidModel(Model):
    type: ClassVar[str] = "void"


@dataclass
class NeverModel(Model):
    type: ClassVar[str] = "never"


@dataclass
class NamedModel:
    """
    Root-level output unit: a model together with the export it came from.

    Attributes:
        name: Export name, None for anonymous/default exports
        path: Source location of the export
        model: Converted model, root meta already merged in
    """

    name: Optional[str]
    path: str
    model: Model

    @property
    def type(self) -> str:
        return self.model.type

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["path"] = self.path
        data.update(self.model.to_dict())
        return data


@dataclass
class ExportedSchema:
    """
    One named export handed to the converter.

    Attributes:
        name: Export name (None for default/anonymous exports)
        path: Source location, unique per export
        schema: Root schema node
    """

    name: Optional[str]
    path: str
    schema: SchemaNode
