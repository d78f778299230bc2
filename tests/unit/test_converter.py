"""
Unit tests for the schema converter.
"""

import enum
from dataclasses import dataclass

import pytest

from schemadoc.converter import convert_schema, convert_schemas
from schemadoc.converter.types import (
    ArrayModel,
    ExportedSchema,
    InlineModel,
    ModelRef,
    NumberModel,
    ObjectModel,
    StringModel,
)
from schemadoc.exceptions import UnsupportedSchemaKind
from schemadoc.schema import builders as s
from schemadoc.schema.nodes import SchemaNode


@dataclass(eq=False)
class CustomNode(SchemaNode):
    kind = "custom"


def export(name, schema, path="models.py"):
    return ExportedSchema(name=name, path=path, schema=schema)


def convert_one(schema):
    return convert_schema(schema, []).to_dict()


class TestEndToEnd:
    """Test whole export lists."""

    def test_user_example(self):
        """Test the reference User conversion."""
        user = s.object_({
            "id": s.string().uuid(),
            "age": s.number().min(0).optional(),
            "tags": s.array(s.string()).max(5),
        })

        models = convert_schemas([export("User", user, path="models.ts")])

        assert [m.to_dict() for m in models] == [
            {
                "name": "User",
                "path": "models.ts",
                "type": "object",
                "fields": [
                    {
                        "key": "id",
                        "required": True,
                        "kind": "model",
                        "model": {"type": "string", "validations": ["uuid"]},
                    },
                    {
                        "key": "age",
                        "required": False,
                        "kind": "model",
                        "model": {"type": "number", "validations": [["gte", 0]]},
                    },
                    {
                        "key": "tags",
                        "required": True,
                        "kind": "model",
                        "model": {
                            "type": "array",
                            "items": {"kind": "model", "model": {"type": "string"}},
                            "validations": [["max", 5]],
                        },
                    },
                ],
            }
        ]

    def test_output_order_matches_input(self):
        """Test one NamedModel per export, in input order."""
        exports = [export("B", s.string()), export(None, s.number()), export("A", s.boolean())]

        models = convert_schemas(exports)

        assert [(m.name, m.type) for m in models] == [("B", "string"), (None, "number"), ("A", "boolean")]

    def test_conversion_is_deterministic(self):
        """Test converting twice gives identical output."""
        address = s.object_({"zip": s.string(), "city": s.string(), "street": s.string()})
        exports = [export("Address", address), export("Home", s.object_({"a": address, "b": s.number()}))]

        first = [m.to_dict() for m in convert_schemas(exports)]
        second = [m.to_dict() for m in convert_schemas(exports)]

        assert first == second
        assert [f["key"] for f in first[0]["fields"]] == ["zip", "city", "street"]

    def test_root_meta_keeps_optional(self):
        """Test root exports report optional and nullable themselves."""
        models = convert_schemas([export("Maybe", s.string().describe("text").nullish())])

        assert models[0].to_dict() == {
            "name": "Maybe",
            "path": "models.py",
            "type": "string",
            "description": "text",
            "optional": True,
            "nullable": True,
        }

    def test_root_export_is_never_a_ref(self):
        """Test an export is converted as a model even though it is in the pool."""
        name = s.string().min(1)

        models = convert_schemas([export("Name", name)])

        assert isinstance(models[0].model, StringModel)

    def test_unknown_variant_aborts_pass(self):
        """Test an unregistered variant fails the whole pass."""
        exports = [
            export("Good", s.string()),
            export("Bad", s.object_({"x": CustomNode()})),
        ]

        with pytest.raises(UnsupportedSchemaKind, match="custom") as excinfo:
            convert_schemas(exports)

        assert excinfo.value.kind == "custom"


class TestModifiers:
    """Test wrapper unwrapping."""

    def test_optional_and_nullable_unwrap(self):
        assert convert_one(s.string().optional()) == {"type": "string"}
        assert convert_one(s.string().nullable()) == {"type": "string"}

    def test_default_sets_value(self):
        """Test default wrapper evaluates its factory."""
        assert convert_one(s.number().default(3)) == {"type": "number", "default": 3}
        assert convert_one(s.array(s.string()).default(list))["default"] == []

    def test_default_none_is_kept(self):
        """Test a default of None is still reported."""
        assert convert_one(s.string().nullable().default(None)) == {"type": "string", "default": None}

    def test_readonly(self):
        result = convert_one(s.array(s.string()).readonly())

        assert result["type"] == "array"
        assert result["readonly"] is True

    def test_effects_document_input(self):
        """Test transforms and refinements document the input schema."""
        schema = s.string().email().transform(str.lower).refine(lambda v: "@" in v)

        assert convert_one(schema) == {"type": "string", "validations": ["email"]}

    def test_branded(self):
        assert convert_one(s.number().int_().brand("UserId")) == {"type": "number", "validations": ["int"]}

    def test_pipeline_documents_output(self):
        assert convert_one(s.string().pipe(s.number().int_())) == {"type": "number", "validations": ["int"]}


class TestComposites:
    """Test composite conversion rules."""

    def test_object_fields(self):
        """Test required/optional fields and suppressed optional flag."""
        schema = s.object_({
            "name": s.string(),
            "nick": s.string().optional(),
            "note": s.string().nullable(),
            "alias": s.string().nullish(),
            "count": s.number().default(0),
        })

        model = convert_schema(schema, [])

        assert isinstance(model, ObjectModel)
        assert [(f.key, f.required) for f in model.fields] == [
            ("name", True),
            ("nick", False),
            ("note", True),
            ("alias", False),
            ("count", False),
        ]
        for f in model.fields:
            assert isinstance(f.entry, InlineModel)
            assert f.entry.model.optional is False
        assert model.fields[2].entry.model.nullable is True
        assert model.fields[3].entry.model.nullable is True
        assert model.fields[4].entry.model.default == 0

    def test_object_skips_non_schema_entries(self):
        schema = s.object_({"a": s.string(), "helper": "not a schema", "b": s.number()})

        assert [f["key"] for f in convert_one(schema)["fields"]] == ["a", "b"]

    def test_array(self):
        model = convert_schema(s.array(s.number()).min(1), [])

        assert isinstance(model, ArrayModel)
        assert isinstance(model.items, InlineModel)
        assert isinstance(model.items.model, NumberModel)
        assert model.validations == [("min", 1)]

    def test_union(self):
        result = convert_one(s.union([s.string(), s.number()]))

        assert result == {
            "type": "union",
            "options": [
                {"kind": "model", "model": {"type": "string"}},
                {"kind": "model", "model": {"type": "number"}},
            ],
        }

    def test_discriminated_union_is_plain_union(self):
        cat = s.object_({"type": s.literal("cat")})
        dog = s.object_({"type": s.literal("dog")})

        result = convert_one(s.discriminated_union("type", [cat, dog]))

        assert result["type"] == "union"
        assert len(result["options"]) == 2
        assert "discriminator" not in result

    def test_intersection(self):
        result = convert_one(s.intersection(s.object_({"a": s.string()}), s.object_({"b": s.number()})))

        assert result["type"] == "intersection"
        assert [p["model"]["type"] for p in result["parts"]] == ["object", "object"]

    def test_record(self):
        result = convert_one(s.record(s.number()))

        assert result == {
            "type": "record",
            "keys": {"kind": "model", "model": {"type": "string"}},
            "values": {"kind": "model", "model": {"type": "number"}},
        }

    def test_tuple_with_rest(self):
        result = convert_one(s.tuple_([s.string(), s.number()], rest=s.boolean()))

        assert [i["model"]["type"] for i in result["items"]] == ["string", "number"]
        assert result["rest"] == {"kind": "model", "model": {"type": "boolean"}}

    def test_tuple_without_rest(self):
        assert "rest" not in convert_one(s.tuple_([s.string()]))

    def test_function(self):
        result = convert_one(s.function(args=[s.string(), s.number()], returns=s.promise(s.boolean())))

        assert [p["model"]["type"] for p in result["parameters"]] == ["string", "number"]
        assert result["returnValue"] == {
            "kind": "model",
            "model": {
                "type": "promise",
                "resolvedValue": {"kind": "model", "model": {"type": "boolean"}},
            },
        }

    def test_function_defaults(self):
        """Test a bare function has no parameters and returns unknown."""
        result = convert_one(s.function())

        assert result["parameters"] == []
        assert result["returnValue"]["model"]["type"] == "unknown"


class TestLeaves:
    """Test leaf variants."""

    @pytest.mark.parametrize(
        "schema,expected",
        [
            (s.boolean(), "boolean"),
            (s.date(), "date"),
            (s.null(), "null"),
            (s.undefined(), "undefined"),
            (s.symbol(), "symbol"),
            (s.unknown(), "unknown"),
            (s.any_(), "any"),
            (s.void(), "void"),
            (s.never(), "never"),
        ],
    )
    def test_primitives(self, schema, expected):
        assert convert_one(schema) == {"type": expected}

    def test_enum_keeps_order(self):
        assert convert_one(s.enum(["b", "a", "c"])) == {"type": "enum", "values": ["b", "a", "c"]}

    def test_native_enum_from_class(self):
        class Color(enum.Enum):
            RED = "red"
            GREEN = 2

        assert convert_one(s.native_enum(Color)) == {"type": "native-enum", "enum": {"RED": "red", "GREEN": 2}}

    def test_native_enum_from_mapping(self):
        assert convert_one(s.native_enum({"A": 1, "B": 2}))["enum"] == {"A": 1, "B": 2}

    def test_literal(self):
        assert convert_one(s.literal("cat")) == {"type": "literal", "value": "cat"}
        assert convert_one(s.literal(42)) == {"type": "literal", "value": 42}

    def test_trim_only_string_has_no_validations(self):
        """Test cosmetic transforms leave no validations key."""
        model = convert_schema(s.string().trim(), [])

        assert model.validations is None
        assert model.to_dict() == {"type": "string"}


class TestUnsupported:
    """Test variants with no conversion rule."""

    def test_custom_tag(self):
        with pytest.raises(UnsupportedSchemaKind) as excinfo:
            convert_schema(CustomNode(), [])

        assert excinfo.value.kind == "custom"

    def test_untagged_value(self):
        with pytest.raises(UnsupportedSchemaKind, match="<unknown>"):
            convert_schema(object(), [])

    def test_nested_failure_propagates(self):
        with pytest.raises(UnsupportedSchemaKind):
            convert_schema(s.array(CustomNode()), [])

    def test_nested_untagged_value(self):
        """Test untagged values below the root fail like untagged roots."""
        with pytest.raises(UnsupportedSchemaKind, match="<unknown>"):
            convert_schema(s.union([s.string(), object()]), [])

    def test_nested_untagged_value_aborts_pass(self):
        with pytest.raises(UnsupportedSchemaKind, match="<unknown>"):
            convert_schemas([export("Items", s.array(object()))])

    def test_is_value_error(self):
        """Test callers catching ValueError still see the failure."""
        with pytest.raises(ValueError):
            convert_schema(CustomNode(), [])


class TestReferences:
    """Test refs to named exports inside converted models."""

    def test_nested_export_becomes_ref(self):
        address = s.object_({"city": s.string()})
        person = s.object_({"home": address})
        exports = [export("Address", address), export("Person", person, path="people.py")]

        models = convert_schemas(exports)

        home = models[1].model.fields[0]
        assert isinstance(home.entry, ModelRef)
        assert home.to_dict() == {
            "key": "home",
            "required": True,
            "kind": "ref",
            "ref": {"name": "Address", "path": "models.py"},
        }

    def test_optional_export_field(self):
        """Test an optional use of an export is a ref and an optional field."""
        address = s.object_({"city": s.string()})
        person = s.object_({"home": address.optional()})
        field = convert_schemas([export("Address", address), export("Person", person)])[1].model.fields[0]

        assert field.required is False
        assert field.to_dict()["ref"] == {"name": "Address", "path": "models.py"}

    def test_two_wrapper_layers_are_inlined(self):
        """Test matching looks through one wrapper layer only."""
        address = s.object_({"city": s.string()})
        person = s.object_({"home": address.optional().nullable()})
        exports = [export("Address", address), export("Person", person)]

        field = convert_schemas(exports)[1].model.fields[0]

        assert field.required is False
        assert field.kind == "model"
        assert field.entry.model.nullable is True

    def test_described_alias_is_ref(self):
        """Test a described copy of an export carries its own description."""
        address = s.object_({"city": s.string()})
        person = s.object_({"billing": address.describe("Billing address")})
        exports = [export("Address", address), export("Person", person)]

        field = convert_schemas(exports)[1].model.fields[0]

        assert field.to_dict()["ref"] == {
            "name": "Address",
            "path": "models.py",
            "description": "Billing address",
        }

    def test_ref_in_union_option_keeps_meta(self):
        """Test refs outside objects carry optional flags."""
        name = s.string().min(1)
        exports = [export("Name", name), export("Names", s.union([name.optional(), s.number()]))]

        option = convert_schemas(exports)[1].to_dict()["options"][0]

        assert option == {"kind": "ref", "ref": {"name": "Name", "path": "models.py", "optional": True}}

    def test_mutual_references_terminate(self):
        """Test exports that mention each other resolve to refs."""
        tag = s.object_({"label": s.string()})
        post = s.object_({"tags": s.array(tag)})
        author = s.object_({"posts": s.array(post), "favorite": tag})
        exports = [export("Tag", tag), export("Post", post), export("Author", author)]

        models = convert_schemas(exports)

        fields = models[2].to_dict()["fields"]
        assert fields[0]["model"]["items"] == {"kind": "ref", "ref": {"name": "Post", "path": "models.py"}}
        assert fields[1]["ref"]["name"] == "Tag"

    def test_separately_built_schema_is_inlined(self):
        """Test structurally equal but separate schemas are not refs."""
        exports = [export("Id", s.string().uuid()), export("Thing", s.object_({"id": s.string().uuid()}))]

        field = convert_schemas(exports)[1].model.fields[0]

        assert isinstance(field.entry, InlineModel)

    def test_anonymous_export_ref_has_no_name(self):
        shared = s.string()
        exports = [export(None, shared, path="default.py"), export("Wrapper", s.array(shared))]

        items = convert_schemas(exports)[1].to_dict()["items"]

        assert items == {"kind": "ref", "ref": {"path": "default.py"}}

    def test_defaulted_export_ref_drops_default(self):
        """Test a defaulted use of an export keeps only point-of-use meta."""
        role = s.enum(["admin", "viewer"])
        user = s.object_({"role": role.default("viewer")})
        exports = [export("Role", role), export("User", user)]

        field = convert_schemas(exports)[1].to_dict()["fields"][0]

        assert field == {
            "key": "role",
            "required": False,
            "kind": "ref",
            "ref": {"name": "Role", "path": "models.py"},
        }
        assert "default" not in field["ref"]

    def test_readonly_export_ref_drops_readonly(self):
        role = s.enum(["admin", "viewer"])
        exports = [export("Role", role), export("Roles", s.array(role.readonly()))]

        items = convert_schemas(exports)[1].to_dict()["items"]

        assert items == {"kind": "ref", "ref": {"name": "Role", "path": "models.py"}}
