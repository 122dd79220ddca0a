"""Mongoose schema generator.

Same traversal as the Zod generator, spelled with Mongoose SchemaTypes:
subdocuments are nested object literals and arrays are ``[Type]``.
"""

from typing import Any

from json_workbench.schemas.base import BuilderSchemaGenerator, SchemaTarget, ValueKind

MONGOOSE_REQUIRE = "const mongoose = require('mongoose');\n"
MIXED = "mongoose.Schema.Types.Mixed"


class MongooseSchemaGenerator(BuilderSchemaGenerator):
    """Generator for Mongoose document schemas."""

    target = SchemaTarget.MONGOOSE
    default_root_name = "schema"

    PRIMITIVE_TOKENS = {
        ValueKind.NULL: MIXED,
        ValueKind.BOOLEAN: "Boolean",
        ValueKind.INTEGER: "Number",
        ValueKind.FLOAT: "Number",
        ValueKind.STRING: "String",
    }
    ANY_TOKEN = MIXED

    def wrap_array(self, element: str) -> str:
        return f"[{element}]"

    def wrap_object(self, body: str, closing_indent: str) -> str:
        if not body:
            return "{}"
        return f"{{\n{body}\n{closing_indent}}}"

    def _generate(self, value: Any, root_name: str) -> str:
        definition = self.build(value)
        if not definition.startswith("{"):
            # Schemas need a document shape; wrap anything else as a single value field
            definition = f"{{\n{self.indent}value: {definition}\n}}"
        return f"{MONGOOSE_REQUIRE}\nconst {root_name} = new mongoose.Schema({definition});"


def generate_mongoose(value: Any, root_name: str = "schema") -> str:
    """Convenience function to generate a Mongoose schema.

    Args:
        value: Inferred Value to describe
        root_name: Name of the schema constant

    Returns:
        JavaScript source text
    """
    return MongooseSchemaGenerator().generate(value, root_name)
