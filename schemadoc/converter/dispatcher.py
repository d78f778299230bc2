"""
Schema converter - turns schema nodes into documentation models.

This module is the main entry point of the conversion engine. It handles:
    - Modifier wrappers (optional, nullable, default, readonly, effects,
      branded, pipeline), which are unwrapped before conversion
    - Dispatch on the node's variant tag to one conversion rule per variant
    - Nested schemas, which go through the reference resolver so that named
      exports become refs instead of inlined copies

Usage:
    ```python
    from schemadoc.converter import convert_schemas
    from schemadoc.converter.types import ExportedSchema
    from schemadoc.schema import builders as s

    user = s.object_({"id": s.string().uuid(), "age": s.number().min(0).optional()})
    models = convert_schemas([ExportedSchema(name="User", path="models.py", schema=user)])
    print(models[0].to_dict())
    ```
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List, Sequence, Type

from schemadoc.converter.constraints import (
    array_validations,
    bigint_validations,
    number_validations,
    string_validations,
)
from schemadoc.converter.meta import schema_to_meta, with_meta
from schemadoc.converter.references import resolve_ref
from schemadoc.converter.types import (
    AnyModel,
    ArrayModel,
    BigIntModel,
    BooleanModel,
    DateModel,
    EnumModel,
    ExportedSchema,
    FunctionModel,
    IntersectionModel,
    LiteralModel,
    Model,
    NamedModel,
    NativeEnumModel,
    NeverModel,
    NullModel,
    NumberModel,
    ObjectField,
    ObjectModel,
    PromiseModel,
    RecordModel,
    StringModel,
    SymbolModel,
    TupleModel,
    UndefinedModel,
    UnionModel,
    UnknownModel,
    VoidModel,
)
from schemadoc.exceptions import UnsupportedSchemaKind
from schemadoc.schema.nodes import (
    ArrayNode,
    BigIntNode,
    EnumNode,
    FunctionNode,
    IntersectionNode,
    LiteralNode,
    NativeEnumNode,
    NumberNode,
    ObjectNode,
    PromiseNode,
    RecordNode,
    SchemaKind,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
)

logger = logging.getLogger(__name__)


def convert_schemas(exported_schemas: Sequence[ExportedSchema]) -> List[NamedModel]:
    """
    Convert every named export into a NamedModel.

    Args:
        exported_schemas: Exports in the order they should be documented

    Returns:
        List[NamedModel]: One model per export, same order. Root meta is
            merged into each model; root optionality is never suppressed.

    Raises:
        UnsupportedSchemaKind: If any export contains a variant with no
            conversion rule. Nothing is returned in that case.
    """
    models = []
    for exported in exported_schemas:
        logger.debug(f"Converting export {exported.name or '<default>'} from {exported.path}")
        model = convert_schema(exported.schema, exported_schemas)
        models.append(
            NamedModel(
                name=exported.name,
                path=exported.path,
                model=with_meta(model, schema_to_meta(exported.schema)),
            )
        )
    logger.info(f"Converted {len(models)} schema export(s)")
    return models


def convert_schema(schema: SchemaNode, exported_schemas: Sequence[ExportedSchema]) -> Model:
    """
    Convert a single schema node into a model.

    Modifier wrappers are looked through; the default and readonly wrappers
    leave their mark on the resulting model. Meta flags of the node itself
    (description, optional, nullable) are not applied here; callers merge
    them in from the node as seen at the point of use.

    Args:
        schema: Node to convert
        exported_schemas: Pool of named exports used for nested refs

    Returns:
        Model: Converted model

    Raises:
        UnsupportedSchemaKind: If the variant has no conversion rule
    """
    kind = schema_kind(schema)

    if kind in (SchemaKind.OPTIONAL, SchemaKind.NULLABLE):
        return convert_schema(schema.inner_type, exported_schemas)
    if kind is SchemaKind.DEFAULT:
        return replace(
            convert_schema(schema.inner_type, exported_schemas),
            default=schema.default_value(),
        )
    if kind is SchemaKind.READONLY:
        return replace(convert_schema(schema.inner_type, exported_schemas), readonly=True)
    if kind is SchemaKind.EFFECTS:
        # Only the input side of a transform is visible in its definition
        return convert_schema(schema.schema, exported_schemas)
    if kind is SchemaKind.BRANDED:
        return convert_schema(schema.base_type, exported_schemas)
    if kind is SchemaKind.PIPELINE:
        return convert_schema(schema.out_type, exported_schemas)

    if kind in _PRIMITIVE_MODELS:
        return _PRIMITIVE_MODELS[kind]()

    converter = _CONVERTERS.get(kind)
    if converter is None:
        raise UnsupportedSchemaKind(kind.value)
    return converter(schema, exported_schemas)


def schema_kind(schema: Any) -> SchemaKind:
    """
    Read the variant tag of a schema node.

    Raises:
        UnsupportedSchemaKind: If the value carries no tag or an unregistered one
    """
    tag = schema.kind if isinstance(schema, SchemaNode) else None
    if tag is None:
        raise UnsupportedSchemaKind(None)
    try:
        return SchemaKind(tag)
    except ValueError:
        raise UnsupportedSchemaKind(str(tag)) from None


def _convert_array(schema: ArrayNode, exported_schemas: Sequence[ExportedSchema]) -> ArrayModel:
    validations = array_validations(schema)
    return ArrayModel(
        items=resolve_ref(schema.element, exported_schemas),
        validations=validations or None,
    )


def _convert_object(schema: ObjectNode, exported_schemas: Sequence[ExportedSchema]) -> ObjectModel:
    fields = []
    for key, value in schema.shape.items():
        if not isinstance(value, SchemaNode):
            continue
        fields.append(
            ObjectField(
                key=key,
                required=not value.is_optional(),
                entry=resolve_ref(value, exported_schemas, implicit_optional=True),
            )
        )
    return ObjectModel(fields=fields)


def _convert_string(schema: StringNode, exported_schemas: Sequence[ExportedSchema]) -> StringModel:
    return StringModel(validations=string_validations(schema.checks) or None)


def _convert_number(schema: NumberNode, exported_schemas: Sequence[ExportedSchema]) -> NumberModel:
    return NumberModel(validations=number_validations(schema.checks) or None)


def _convert_bigint(schema: BigIntNode, exported_schemas: Sequence[ExportedSchema]) -> BigIntModel:
    return BigIntModel(validations=bigint_validations(schema.checks) or None)


def _convert_enum(schema: EnumNode, exported_schemas: Sequence[ExportedSchema]) -> EnumModel:
    return EnumModel(values=list(schema.values))


def _convert_native_enum(
    schema: NativeEnumNode, exported_schemas: Sequence[ExportedSchema]
) -> NativeEnumModel:
    return NativeEnumModel(enum=dict(schema.enum))


def _convert_union(schema: UnionNode, exported_schemas: Sequence[ExportedSchema]) -> UnionModel:
    # Discriminated unions land here too; the discriminator key is not modeled
    return UnionModel(options=[resolve_ref(option, exported_schemas) for option in schema.options])


def _convert_intersection(
    schema: IntersectionNode, exported_schemas: Sequence[ExportedSchema]
) -> IntersectionModel:
    return IntersectionModel(
        parts=(
            resolve_ref(schema.left, exported_schemas),
            resolve_ref(schema.right, exported_schemas),
        )
    )


def _convert_record(schema: RecordNode, exported_schemas: Sequence[ExportedSchema]) -> RecordModel:
    return RecordModel(
        keys=resolve_ref(schema.key_type, exported_schemas),
        values=resolve_ref(schema.value_type, exported_schemas),
    )


def _convert_tuple(schema: TupleNode, exported_schemas: Sequence[ExportedSchema]) -> TupleModel:
    return TupleModel(
        items=[resolve_ref(item, exported_schemas) for item in schema.items],
        rest=resolve_ref(schema.rest, exported_schemas) if schema.rest is not None else None,
    )


def _convert_function(
    schema: FunctionNode, exported_schemas: Sequence[ExportedSchema]
) -> FunctionModel:
    # TODO: document the variadic tail of the argument tuple (schema.args.rest)
    return FunctionModel(
        parameters=[resolve_ref(param, exported_schemas) for param in schema.args.items],
        return_value=resolve_ref(schema.returns, exported_schemas),
    )


def _convert_promise(schema: PromiseNode, exported_schemas: Sequence[ExportedSchema]) -> PromiseModel:
    return PromiseModel(resolved_value=resolve_ref(schema.type, exported_schemas))


def _convert_literal(schema: LiteralNode, exported_schemas: Sequence[ExportedSchema]) -> LiteralModel:
    return LiteralModel(value=schema.value)


_PRIMITIVE_MODELS: Dict[SchemaKind, Type[Model]] = {
    SchemaKind.BOOLEAN: BooleanModel,
    SchemaKind.DATE: DateModel,
    SchemaKind.NULL: NullModel,
    SchemaKind.UNDEFINED: UndefinedModel,
    SchemaKind.SYMBOL: SymbolModel,
    SchemaKind.UNKNOWN: UnknownModel,
    SchemaKind.ANY: AnyModel,
    SchemaKind.VOID: VoidModel,
    SchemaKind.NEVER: NeverModel,
}

_CONVERTERS: Dict[SchemaKind, Callable[[Any, Sequence[ExportedSchema]], Model]] = {
    SchemaKind.ARRAY: _convert_array,
    SchemaKind.OBJECT: _convert_object,
    SchemaKind.STRING: _convert_string,
    SchemaKind.NUMBER: _convert_number,
    SchemaKind.BIGINT: _convert_bigint,
    SchemaKind.ENUM: _convert_enum,
    SchemaKind.NATIVE_ENUM: _convert_native_enum,
    SchemaKind.UNION: _convert_union,
    SchemaKind.DISCRIMINATED_UNION: _convert_union,
    SchemaKind.INTERSECTION: _convert_intersection,
    SchemaKind.RECORD: _convert_record,
    SchemaKind.TUPLE: _convert_tuple,
    SchemaKind.FUNCTION: _convert_function,
    SchemaKind.PROMISE: _convert_promise,
    SchemaKind.LITERAL: _convert_literal,
}
