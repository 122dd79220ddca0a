"""TypeScript interface generator.

Emits one ``export interface`` block per discovered object shape, innermost
shapes first.
"""

from typing import Any

from json_workbench.schemas.base import (
    NamedTypeGenerator,
    SchemaTarget,
    TypeDefinition,
    ValueKind,
    classify,
)
from json_workbench.utils.helpers import quote_key


class TypeScriptGenerator(NamedTypeGenerator):
    """Generator for TypeScript interfaces."""

    target = SchemaTarget.TYPESCRIPT
    default_root_name = "Root"

    # TypeScript has a single number type
    TYPE_MAPPING = {
        ValueKind.NULL: "null",
        ValueKind.BOOLEAN: "boolean",
        ValueKind.INTEGER: "number",
        ValueKind.FLOAT: "number",
        ValueKind.STRING: "string",
        ValueKind.OBJECT: "object",
    }

    def type_of(self, value: Any) -> str:
        kind = classify(value)
        if kind == ValueKind.ARRAY:
            if not value:
                return "any[]"
            return self.list_of(self.type_of(value[0]))
        return self.TYPE_MAPPING[kind]

    def list_of(self, element_type: str) -> str:
        return f"{element_type}[]"

    def _render(self, value: Any, root_name: str, definitions: list[TypeDefinition]) -> str:
        if not definitions:
            # Scalar (or scalar array) root: nothing to name but the root itself
            return f"export type {root_name} = {self.type_of(value)};"

        return "\n\n".join(self._render_interface(d) for d in definitions)

    def _render_interface(self, definition: TypeDefinition) -> str:
        lines = [f"  {quote_key(key)}: {type_name};" for key, type_name in definition.fields]
        body = "\n".join(lines)
        if not body:
            return f"export interface {definition.name} {{}}"
        return f"export interface {definition.name} {{\n{body}\n}}"


def generate_typescript(value: Any, root_name: str = "Root") -> str:
    """Convenience function to generate TypeScript interfaces.

    Args:
        value: Inferred Value to describe
        root_name: Name of the root interface

    Returns:
        TypeScript source text
    """
    return TypeScriptGenerator().generate(value, root_name)
