"""Zod validator generator.

Emits a single composed ``z.object(...)`` expression mirroring the sample.
"""

from typing import Any

from json_workbench.schemas.base import BuilderSchemaGenerator, SchemaTarget, ValueKind

ZOD_IMPORT = "import { z } from 'zod';\n"


class ZodSchemaGenerator(BuilderSchemaGenerator):
    """Generator for Zod validators."""

    target = SchemaTarget.ZOD
    default_root_name = "schema"

    PRIMITIVE_TOKENS = {
        ValueKind.NULL: "z.null()",
        ValueKind.BOOLEAN: "z.boolean()",
        ValueKind.INTEGER: "z.number()",
        ValueKind.FLOAT: "z.number()",
        ValueKind.STRING: "z.string()",
    }
    ANY_TOKEN = "z.any()"

    def wrap_array(self, element: str) -> str:
        return f"z.array({element})"

    def wrap_object(self, body: str, closing_indent: str) -> str:
        if not body:
            return "z.object({})"
        return f"z.object({{\n{body}\n{closing_indent}}})"

    def _generate(self, value: Any, root_name: str) -> str:
        return f"{ZOD_IMPORT}\nexport const {root_name} = {self.build(value)};"


def generate_zod(value: Any, root_name: str = "schema") -> str:
    """Convenience function to generate a Zod schema.

    Args:
        value: Inferred Value to describe
        root_name: Name of the exported constant

    Returns:
        TypeScript source text
    """
    return ZodSchemaGenerator().generate(value, root_name)
