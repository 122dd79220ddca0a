"""Tests for the Schemas module."""

import re

import jsonschema
import pytest

from json_workbench.schemas.base import SchemaTarget, ValueKind, classify
from json_workbench.schemas.ddl import NOT_AN_OBJECT_MESSAGE, generate_sql
from json_workbench.schemas.java import JavaPojoGenerator, generate_java
from json_workbench.schemas.jsonschema import DRAFT_07, JsonSchemaGenerator
from json_workbench.schemas.mongoose import generate_mongoose
from json_workbench.schemas.registry import SchemaGeneratorRegistry, render_schema
from json_workbench.schemas.typescript import generate_typescript
from json_workbench.schemas.zod import generate_zod


@pytest.fixture
def nested_sample():
    """A sample with nested objects and an array of objects."""
    return {
        "id": 1,
        "name": "Ada",
        "address": {"city": "London", "geo": {"lat": 51.5}},
        "tags": ["admin"],
        "orders": [{"total": 9.5, "paid": True}],
    }


def _assert_defined_before_use(output: str, pattern: str) -> None:
    """Every referenced named type must be defined earlier in the output."""
    blocks = re.split(r"\n\n(?=export interface|@Data)", output)
    defined = set()
    all_names = set(re.findall(pattern, output))

    for block in blocks:
        names = re.findall(pattern, block)
        if not names:
            continue
        name = names[0]
        body = block.split("{", 1)[1]
        for other in all_names - {name}:
            if re.search(rf"\b{other}\b", body):
                assert other in defined, f"{other} referenced before definition in {name}"
        defined.add(name)


class TestClassify:
    """Tests for the Inferred Value classification."""

    def test_booleans_are_not_numbers(self):
        assert classify(True) == ValueKind.BOOLEAN

    def test_integral_float_is_integer(self):
        assert classify(10.0) == ValueKind.INTEGER
        assert classify(10.5) == ValueKind.FLOAT

    def test_containers(self):
        assert classify([]) == ValueKind.ARRAY
        assert classify({}) == ValueKind.OBJECT
        assert classify(None) == ValueKind.NULL

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            classify({1, 2})


class TestTypeScriptGenerator:
    """Tests for TypeScript interface generation."""

    def test_nested_interfaces(self, nested_sample):
        output = generate_typescript(nested_sample)

        assert output == (
            "export interface OrdersItem {\n"
            "  total: number;\n"
            "  paid: boolean;\n"
            "}\n\n"
            "export interface Geo {\n"
            "  lat: number;\n"
            "}\n\n"
            "export interface Address {\n"
            "  city: string;\n"
            "  geo: Geo;\n"
            "}\n\n"
            "export interface Root {\n"
            "  id: number;\n"
            "  name: string;\n"
            "  address: Address;\n"
            "  tags: string[];\n"
            "  orders: OrdersItem[];\n"
            "}"
        )

    def test_defined_before_use(self, nested_sample):
        output = generate_typescript(nested_sample, "User")

        _assert_defined_before_use(output, r"export interface (\w+)")

    def test_scalar_root(self):
        assert generate_typescript(5) == "export type Root = number;"
        assert generate_typescript(["a"]) == "export type Root = string[];"

    def test_array_root_uses_first_element(self):
        output = generate_typescript([{"x": 1}, {"y": "ignored"}])

        assert output == "export interface Root {\n  x: number;\n}"

    def test_empty_array_and_null(self):
        output = generate_typescript({"items": [], "note": None})

        assert "  items: any[];" in output
        assert "  note: null;" in output

    def test_non_identifier_keys_quoted(self):
        output = generate_typescript({"first-name": "x"})

        assert '  "first-name": string;' in output

    def test_identical_definitions_emitted_once(self):
        value = {"items": [{"id": 1}], "nested": {"items": [{"id": 2}]}}
        output = generate_typescript(value)

        assert output.count("export interface ItemsItem") == 1


class TestJavaPojoGenerator:
    """Tests for Java POJO generation."""

    def test_field_types(self):
        output = generate_java({"id": 1, "price": 10.5, "count": 10.0, "user": {"isActive": True}})

        assert "private Integer id;" in output
        assert "private Double price;" in output
        assert "private Integer count;" in output
        assert "private User user;" in output
        assert '@JsonProperty("isActive")' in output

    def test_imports_and_annotations(self):
        output = generate_java({"id": 1})

        assert output.startswith("import com.fasterxml.jackson.annotation.JsonProperty;")
        assert "@Data\npublic class Root {" in output

    def test_defined_before_use(self, nested_sample):
        output = generate_java(nested_sample)

        assert output.index("public class Address") < output.index("public class Root")
        _assert_defined_before_use(output.split("\n\n", 1)[1], r"public class (\w+)")

    def test_lists(self):
        output = generate_java({"tags": ["a"], "empty": [], "orders": [{"id": 1}]})

        assert "private List<String> tags;" in output
        assert "private List<Object> empty;" in output
        assert "private List<OrdersItem> orders;" in output

    def test_reserved_and_invalid_identifiers(self):
        output = JavaPojoGenerator().generate({"class": "x", "first-name": "y", "1st": 1})

        assert "private String class_;" in output
        assert "private String first_name;" in output
        assert "private Integer _1st;" in output
        assert '@JsonProperty("first-name")' in output


class TestBuilderGenerators:
    """Tests for the Zod and Mongoose generators."""

    def test_zod_object(self):
        assert generate_zod({"id": 1, "name": "x"}) == (
            "import { z } from 'zod';\n\n"
            "export const schema = z.object({\n"
            "  id: z.number(),\n"
            "  name: z.string()\n"
            "});"
        )

    def test_zod_nested(self):
        output = generate_zod({"meta": {"ok": True}, "tags": [], "note": None}, "payload")

        assert "export const payload = z.object({" in output
        assert "  meta: z.object({\n    ok: z.boolean()\n  })" in output
        assert "  tags: z.array(z.any())" in output
        assert "  note: z.null()" in output

    def test_mongoose_object(self):
        assert generate_mongoose({"name": "x", "age": 3}) == (
            "const mongoose = require('mongoose');\n\n"
            "const schema = new mongoose.Schema({\n"
            "  name: String,\n"
            "  age: Number\n"
            "});"
        )

    def test_mongoose_arrays_and_mixed(self):
        output = generate_mongoose({"tags": ["a"], "extra": None})

        assert "  tags: [String]" in output
        assert "  extra: mongoose.Schema.Types.Mixed" in output

    def test_mongoose_scalar_root_wrapped(self):
        output = generate_mongoose(5)

        assert "new mongoose.Schema({\n  value: Number\n});" in output


class TestDDLGenerator:
    """Tests for SQL CREATE TABLE generation."""

    def test_decimal_column(self):
        assert "price DECIMAL" in generate_sql({"price": 10.5})

    def test_integer_column(self):
        assert "id INTEGER" in generate_sql({"id": 1})

    def test_full_statement(self):
        output = generate_sql({"id": 1, "userName": "a", "isActive": True, "tags": []}, "users")

        assert output == (
            "CREATE TABLE users (\n"
            "    id INTEGER,\n"
            "    user_name TEXT,\n"
            "    is_active BOOLEAN,\n"
            "    tags JSONB\n"
            ");"
        )

    def test_non_object_returns_comment(self):
        assert generate_sql([{"id": 1}]) == NOT_AN_OBJECT_MESSAGE
        assert generate_sql("text") == NOT_AN_OBJECT_MESSAGE


class TestJsonSchemaGenerator:
    """Tests for JSON Schema generation."""

    def test_infer(self):
        schema = JsonSchemaGenerator().infer({"id": 1, "tags": ["a"]}, "Item")

        assert schema == {
            "$schema": DRAFT_07,
            "title": "Item",
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "tags": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["id", "tags"],
        }

    def test_sample_validates_against_inferred_schema(self, nested_sample):
        schema = JsonSchemaGenerator().infer(nested_sample)

        jsonschema.validate(nested_sample, schema)


class TestSchemaGeneratorRegistry:
    """Tests for SchemaGeneratorRegistry."""

    def test_default_targets(self):
        registry = SchemaGeneratorRegistry()

        assert set(registry.list_targets()) == set(SchemaTarget)

    def test_get_by_string(self):
        registry = SchemaGeneratorRegistry()

        assert registry.get("TypeScript") is not None
        assert registry.get("cobol") is None
        assert "zod" in registry

    def test_unknown_target_raises(self):
        registry = SchemaGeneratorRegistry()

        with pytest.raises(ValueError):
            registry.generate("cobol", {})

    @pytest.mark.parametrize("target", list(SchemaTarget))
    def test_generators_are_deterministic(self, target, nested_sample):
        first = render_schema(target, nested_sample)
        second = render_schema(target, nested_sample)

        assert first == second

    def test_render_schema_reports_errors_inline(self):
        output = render_schema(SchemaTarget.TYPESCRIPT, {"bad": {1, 2}})

        assert output.startswith("Error generating output:")

    def test_render_schema_unknown_target(self):
        with pytest.raises(ValueError):
            render_schema("cobol", {})
