import json
from pathlib import Path
from unittest import TestCase

import pytest

from event_schema_codegen import (
    AnalyticsCall,
    Generator,
    GeneratorOptions,
    Language,
    prepare_build,
)
from event_schema_codegen.pipeline.errors import CyclicReferenceError, MalformedReferenceError, SchemaError
from event_schema_codegen.pipeline.naming import KotlinNamer, TypeScriptNamer
from event_schema_codegen.pipeline.schema_ast import PrimitiveNode, SchemaNode, Type, UnionNode
from event_schema_codegen.utils import snake_to_pascal_case

SCHEMAS_PATH = Path(__file__).parent / "test_data" / "schemas"


def load_schema(name):
    with open(SCHEMAS_PATH / name) as f:
        return json.load(f)


class TypeStringGenerator(Generator):
    """Renders a node as a TypeScript-like type expression"""

    def generate_primitive(self, client, node, path):
        return node.kind.value + (" | null" if node.is_nullable else "")

    def generate_array(self, client, node, items, path):
        return f"{items}[]"

    def generate_object(self, client, node, properties, path):
        fields = [f"{prop.name}: {context}" for prop, context in zip(node.properties, properties)]
        return "{" + "; ".join(fields) + "}"

    def generate_union(self, client, node, members, path):
        return " | ".join(members)

    def generate_reference(self, client, node, ref_name, path):
        return client.namer.register(ref_name, snake_to_pascal_case(ref_name), "types")


class PathRecorder(TypeStringGenerator):
    def __init__(self):
        self.paths = []

    def generate_primitive(self, client, node, path):
        self.paths.append(path)
        return super().generate_primitive(client, node, path)


class TestPrepareBuild(TestCase):
    """Test building the AST and custom types of one event"""

    def setUp(self):
        self.build = prepare_build(load_schema("order_completed.json"), "Order Completed")

    def test_build_holds_schema_and_custom_types(self):
        self.assertEqual(self.build.event_name, "Order Completed")
        self.assertEqual(self.build.schema.name, "Order Completed")
        self.assertEqual(set(self.build.custom_types), {"Address", "Country", "Tag"})

    def test_default_options(self):
        self.assertEqual(self.build.options, GeneratorOptions())

    def test_properties_and_traits_sections(self):
        self.assertEqual(
            [prop.name for prop in self.build.properties_schema().properties],
            ["shipping", "billing", "tags"],
        )
        self.assertEqual([prop.name for prop in self.build.traits_schema().properties], ["email"])

    def test_payload_schema_follows_the_call(self):
        self.assertEqual(self.build.payload_schema(AnalyticsCall.TRACK).properties[0].name, "shipping")
        self.assertEqual(self.build.payload_schema("identify").properties[0].name, "email")

    def test_each_client_gets_a_fresh_namer(self):
        first = self.build.client()
        second = self.build.client()
        self.assertIsNot(first.namer, second.namer)
        self.assertIsInstance(first.namer, TypeScriptNamer)

    def test_client_namer_follows_language(self):
        build = prepare_build({"type": "object"}, "e", GeneratorOptions(language=Language.KOTLIN))
        self.assertIsInstance(build.client().namer, KotlinNamer)

    def test_unnamed_event_uses_title(self):
        build = prepare_build({"type": "object", "title": "Signed Up"})
        self.assertEqual(build.schema.name, "Signed Up")

    def test_errors_propagate(self):
        with self.assertRaises(CyclicReferenceError):
            prepare_build(load_schema("cyclic.json"), "cyclic")

    def test_non_object_event_is_rejected(self):
        with self.assertRaises(SchemaError) as ctx:
            prepare_build(["not", "a", "schema"], "broken")
        self.assertEqual(ctx.exception.path, "#")

    def test_unknown_reference_in_tuple_items_is_fatal(self):
        raw = {
            "type": "object",
            "properties": {"pair": {"type": "array", "items": [{"$ref": "#/$defs/Missing"}, {"type": "string"}]}},
        }
        with self.assertRaises(MalformedReferenceError):
            prepare_build(raw)


class TestGeneratorTraversal(TestCase):
    """Test walking the AST with an emitter"""

    def setUp(self):
        self.raw = load_schema("order_completed.json")

    def render_properties(self, **options):
        build = prepare_build(self.raw, "Order Completed", GeneratorOptions(**options))
        return TypeStringGenerator().traverse(build.client(), build.properties_schema())

    def test_references_are_named(self):
        self.assertEqual(
            self.render_properties(),
            "{shipping: Address; billing: Address; tags: Tag[]}",
        )

    def test_references_are_inlined_without_def_support(self):
        self.assertEqual(
            self.render_properties(def_support=False),
            "{shipping: {city: string; country: string}; billing: {city: string; country: string}; tags: string[]}",
        )

    def test_ref_only_property_stays_nullable_and_inlines_target(self):
        raw = {
            "type": "object",
            "properties": {"origin": {"$ref": "#/$defs/Coord"}},
            "$defs": {"Coord": {"type": "object", "properties": {"lat": {"type": ["number", "null"]}}}},
        }
        build = prepare_build(raw, "trip", GeneratorOptions(def_support=False))
        origin = build.schema.get_property("origin")
        self.assertTrue(origin.is_nullable)
        rendered = TypeStringGenerator().traverse(build.client(), build.schema)
        self.assertEqual(rendered, "{origin: {lat: number | null}}")

    def test_union_and_nullable(self):
        build = prepare_build({"type": "object", "properties": {"v": {"type": ["string", "integer", "null"]}}})
        rendered = TypeStringGenerator().traverse(build.client(), build.schema)
        self.assertEqual(rendered, "{v: string | integer}")

    def test_paths_are_property_names(self):
        raw = {
            "type": "object",
            "properties": {
                "a": {"type": "array", "items": {"type": "string"}},
                "b": {"type": ["string", "number"]},
            },
        }
        build = prepare_build(raw)
        recorder = PathRecorder()
        recorder.traverse(build.client(), build.schema)
        self.assertEqual(recorder.paths, [("a", "items"), ("b", "0"), ("b", "1")])

    def test_unknown_node_is_rejected(self):
        build = prepare_build({"type": "object"})
        with self.assertRaises(TypeError):
            TypeStringGenerator().traverse(build.client(), SchemaNode())

    def test_generator_is_abstract(self):
        with self.assertRaises(TypeError):
            Generator()


class TestGeneratorClient:
    """Test the helpers emitters get from their client"""

    def test_custom_type(self):
        build = prepare_build(load_schema("order_completed.json"), "Order Completed")
        assert build.client().custom_type("Tag").kind == Type.STRING
        with pytest.raises(KeyError):
            build.client().custom_type("Missing")

    def test_resolve_ref_only_node(self):
        build = prepare_build(load_schema("order_completed.json"), "Order Completed")
        client = build.client()
        shipping = build.properties_schema().get_property("shipping")
        assert client.resolve(shipping) is build.custom_types["Address"]

    def test_resolve_keeps_nodes_with_own_type(self):
        build = prepare_build({"type": "object", "$defs": {"Money": {"type": "number"}}})
        node = PrimitiveNode(kind=Type.INTEGER, ref_name="Money")
        assert build.client().resolve(node) is node
        plain = PrimitiveNode()
        assert build.client().resolve(plain) is plain

    def test_type_reference_ignores_unregistered_names(self):
        build = prepare_build({"type": "object"})
        assert build.client().type_reference(PrimitiveNode(ref_name="Ghost")) is None

    def test_enum_id_without_unique_enums(self):
        client = prepare_build({"type": "object"}).client()
        node = PrimitiveNode(kind=Type.STRING, enum=["a", "b"])
        assert client.enum_id(node, "properties.status") == "properties.status"

    def test_enum_id_with_unique_enums(self):
        client = prepare_build({"type": "object"}, options=GeneratorOptions(unique_enums=True)).client()
        first = PrimitiveNode(kind=Type.STRING, enum=["a", "b"])
        second = UnionNode(enum=["a", "b"])
        other = PrimitiveNode(kind=Type.STRING, enum=["a", "c"])
        assert client.enum_id(first, "x") == client.enum_id(second, "y")
        assert client.enum_id(first, "x") != client.enum_id(other, "z")

    def test_enum_id_separators_in_values_do_not_collide(self):
        client = prepare_build({"type": "object"}, options=GeneratorOptions(unique_enums=True)).client()
        joined = PrimitiveNode(kind=Type.STRING, enum=["a|str:b"])
        split = PrimitiveNode(kind=Type.STRING, enum=["a", "b"])
        assert client.enum_id(joined, "x") != client.enum_id(split, "y")

    def test_enum_id_distinguishes_value_types(self):
        client = prepare_build({"type": "object"}, options=GeneratorOptions(unique_enums=True)).client()
        ints = PrimitiveNode(kind=Type.INTEGER, enum=[1])
        bools = PrimitiveNode(kind=Type.BOOLEAN, enum=[True])
        assert client.enum_id(ints, "x") != client.enum_id(bools, "y")


@pytest.mark.parametrize(
    "call, section",
    [
        (AnalyticsCall.TRACK, "properties"),
        (AnalyticsCall.IDENTIFY, "traits"),
        (AnalyticsCall.PAGE, "properties"),
        (AnalyticsCall.SCREEN, "properties"),
        (AnalyticsCall.GROUP, "traits"),
    ],
)
def test_analytics_call_section(call, section):
    assert call.section == section


if __name__ == "__main__":
    pytest.main([__file__])
