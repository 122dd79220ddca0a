"""JSON Schema generator.

Infers a draft-07 JSON Schema document from a sample value. Every observed
key is listed as required; arrays are described by their first element.
The emitted document is checked against the draft-07 metaschema.
"""

import json
from typing import Any

from jsonschema import Draft7Validator

from json_workbench.schemas.base import SchemaGenerator, SchemaTarget, ValueKind, classify

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


class JsonSchemaGenerator(SchemaGenerator):
    """Generator for JSON Schema (draft-07) documents."""

    target = SchemaTarget.JSON_SCHEMA
    default_root_name = "Root"

    TYPE_MAPPING = {
        ValueKind.NULL: "null",
        ValueKind.BOOLEAN: "boolean",
        ValueKind.INTEGER: "integer",
        ValueKind.FLOAT: "number",
        ValueKind.STRING: "string",
    }

    def __init__(self, indent: int = 2):
        self.indent = indent

    def _generate(self, value: Any, root_name: str) -> str:
        schema = self.infer(value, root_name)
        return json.dumps(schema, indent=self.indent)

    def infer(self, value: Any, root_name: str | None = None) -> dict[str, Any]:
        """Infer the schema as a dict.

        Raises:
            jsonschema.exceptions.SchemaError: If the inferred document is not a
                valid draft-07 schema
        """
        schema: dict[str, Any] = {"$schema": DRAFT_07}
        if root_name:
            schema["title"] = root_name
        schema.update(self._describe(value))

        Draft7Validator.check_schema(schema)
        return schema

    def _describe(self, value: Any) -> dict[str, Any]:
        kind = classify(value)

        if kind == ValueKind.OBJECT:
            return {
                "type": "object",
                "properties": {key: self._describe(item) for key, item in value.items()},
                "required": list(value.keys()),
            }

        if kind == ValueKind.ARRAY:
            if not value:
                return {"type": "array", "items": {}}
            return {"type": "array", "items": self._describe(value[0])}

        return {"type": self.TYPE_MAPPING[kind]}


def generate_json_schema(value: Any, root_name: str = "Root") -> str:
    """Convenience function to generate a JSON Schema document.

    Args:
        value: Inferred Value to describe
        root_name: Schema title

    Returns:
        JSON Schema as pretty-printed JSON text
    """
    return JsonSchemaGenerator().generate(value, root_name)
