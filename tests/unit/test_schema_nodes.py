"""
Unit tests for schema nodes and builders.
"""

import enum

import pytest

from schemadoc.schema import builders as s
from schemadoc.schema import SchemaKind, unwrap_inner_type
from schemadoc.schema.nodes import (
    BrandedNode,
    DefaultNode,
    EffectsNode,
    EnumNode,
    OptionalNode,
    PipelineNode,
    StringNode,
    UnknownNode,
)


class TestModifiers:
    """Test fluent modifiers."""

    def test_modifiers_return_new_nodes(self):
        """Test modifiers never mutate the receiver."""
        base = s.string()
        longer = base.min(3)

        assert base.checks == []
        assert len(longer.checks) == 1
        assert longer is not base

    def test_describe_shares_definition(self):
        base = s.object_({"a": s.string()})
        described = base.describe("thing")

        assert described.description == "thing"
        assert base.description is None
        assert described.shape is base.shape

    def test_definition_excludes_description(self):
        node = s.string().describe("x")

        assert "description" not in node.definition()
        assert set(node.definition()) == {"checks", "coerce"}

    def test_wrappers_carry_description(self):
        node = s.string().describe("name")

        assert node.optional().description == "name"
        assert node.nullable().description == "name"
        assert node.default("a").description == "name"
        assert node.readonly().description == "name"
        assert node.brand("Name").description == "name"

    def test_default_value_factory(self):
        assert s.number().default(3).default_value() == 3
        assert s.array(s.string()).default(list).default_value() == []

    def test_nullish_is_optional_and_nullable(self):
        node = s.string().nullish()

        assert isinstance(node, OptionalNode)
        assert node.is_optional()
        assert node.is_nullable()

    def test_effects_brand_pipe_wrap(self):
        base = s.string()

        assert isinstance(base.transform(str.upper), EffectsNode)
        assert base.refine(bool).effect_type == "refinement"
        assert isinstance(base.brand("Id"), BrandedNode)
        assert isinstance(base.pipe(s.number()), PipelineNode)

    def test_unwrap_inner_type(self):
        base = s.string()

        assert unwrap_inner_type(base.optional()) is base
        assert unwrap_inner_type(base.nullable()) is base
        assert unwrap_inner_type(base.default("x")) is base
        assert unwrap_inner_type(base.readonly()) is base
        assert unwrap_inner_type(base.brand()) is None
        assert unwrap_inner_type(base) is None


class TestFlags:
    """Test is_optional/is_nullable per variant."""

    @pytest.mark.parametrize(
        "node,optional,nullable",
        [
            (s.string(), False, False),
            (s.undefined(), True, False),
            (s.void(), True, False),
            (s.null(), False, True),
            (s.any_(), True, True),
            (s.unknown(), True, True),
            (s.literal(None), False, True),
            (s.literal("x"), False, False),
            (s.string().optional(), True, False),
            (s.string().nullable(), False, True),
            (s.string().default("x"), True, False),
            (s.string().optional().readonly(), True, False),
            (s.union([s.string(), s.undefined()]), True, False),
            (s.intersection(s.any_(), s.null()), False, True),
            (s.string().optional().transform(str.strip), True, False),
        ],
    )
    def test_flags(self, node, optional, nullable):
        assert node.is_optional() is optional
        assert node.is_nullable() is nullable


class TestObjectHelpers:
    """Test object shape helpers."""

    def test_extend_and_pick(self):
        base = s.object_({"a": s.string(), "b": s.number()})

        assert list(base.extend({"c": s.boolean()}).shape) == ["a", "b", "c"]
        assert list(base.pick("b").shape) == ["b"]
        assert list(base.omit("b").shape) == ["a"]

    def test_partial(self):
        base = s.object_({"a": s.string()})

        assert base.partial().shape["a"].is_optional()

    def test_merge_takes_unknown_keys_policy(self):
        merged = s.object_({"a": s.string()}).merge(s.object_({"b": s.string()}).strict())

        assert merged.unknown_keys == "strict"
        assert list(merged.shape) == ["a", "b"]

    def test_definition_fields(self):
        assert set(s.object_({"a": s.string()}).definition()) == {"shape", "unknown_keys"}

    def test_keyof(self):
        keys = s.object_({"a": s.string(), "b": s.string()}).keyof()

        assert isinstance(keys, EnumNode)
        assert keys.values == ["a", "b"]


class TestBuilders:
    """Test builder functions."""

    def test_enum_requires_values(self):
        with pytest.raises(ValueError):
            s.enum([])

    def test_enum_extract_exclude(self):
        role = s.enum(["a", "b", "c"])

        assert role.extract("a", "c").values == ["a", "c"]
        assert role.exclude("a").values == ["b", "c"]
        assert role.options == ["a", "b", "c"]

    def test_union_requires_two_options(self):
        with pytest.raises(ValueError):
            s.union([s.string()])

    def test_native_enum_from_enum_class(self):
        class Color(enum.Enum):
            RED = "red"
            GREEN = 2

        assert s.native_enum(Color).enum == {"RED": "red", "GREEN": 2}

    def test_record_defaults_to_string_keys(self):
        assert isinstance(s.record(s.number()).key_type, StringNode)

    def test_function_defaults(self):
        fn = s.function()

        assert fn.args.items == []
        assert isinstance(fn.args.rest, UnknownNode)
        assert isinstance(fn.returns, UnknownNode)

    def test_function_with_args(self):
        fn = s.function().with_args(s.string()).with_returns(s.boolean())

        assert len(fn.args.items) == 1
        assert fn.returns.kind is SchemaKind.BOOLEAN

    def test_invalid_ip_version(self):
        with pytest.raises(ValueError):
            s.string().ip("v5")

    def test_discriminated_union_kind(self):
        node = s.discriminated_union("type", [s.object_({"type": s.literal("a")})])

        assert node.kind is SchemaKind.DISCRIMINATED_UNION
        assert node.discriminator == "type"

    def test_default_node_keeps_inner(self):
        inner = s.string()
        node = inner.default("x")

        assert isinstance(node, DefaultNode)
        assert node.remove_default() is inner
