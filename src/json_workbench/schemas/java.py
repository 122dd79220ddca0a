"""Java POJO generator.

Emits Lombok ``@Data`` classes whose fields carry Jackson ``@JsonProperty``
annotations with the original key, so keys that are not valid Java
identifiers still (de)serialize correctly.
"""

from typing import Any

from json_workbench.schemas.base import (
    NamedTypeGenerator,
    SchemaTarget,
    TypeDefinition,
    ValueKind,
    classify,
)
from json_workbench.utils.helpers import java_identifier

JAVA_IMPORTS = (
    "import com.fasterxml.jackson.annotation.JsonProperty;\n"
    "import lombok.Data;\n"
    "import java.util.List;\n"
)


class JavaPojoGenerator(NamedTypeGenerator):
    """Generator for Java data classes."""

    target = SchemaTarget.JAVA
    default_root_name = "Root"

    TYPE_MAPPING = {
        ValueKind.NULL: "Object",
        ValueKind.BOOLEAN: "Boolean",
        ValueKind.INTEGER: "Integer",
        ValueKind.FLOAT: "Double",
        ValueKind.STRING: "String",
        ValueKind.OBJECT: "Object",
    }

    def type_of(self, value: Any) -> str:
        kind = classify(value)
        if kind == ValueKind.ARRAY:
            if not value:
                return self.list_of("Object")
            return self.list_of(self.type_of(value[0]))
        return self.TYPE_MAPPING[kind]

    def list_of(self, element_type: str) -> str:
        return f"List<{element_type}>"

    def _render(self, value: Any, root_name: str, definitions: list[TypeDefinition]) -> str:
        classes = "\n\n".join(self._render_class(d) for d in definitions)
        return f"{JAVA_IMPORTS}\n{classes}"

    def _render_class(self, definition: TypeDefinition) -> str:
        fields = [
            f'    @JsonProperty("{self._escape(key)}")\n'
            f"    private {type_name} {java_identifier(key)};"
            for key, type_name in definition.fields
        ]
        body = "\n\n".join(fields)
        return f"@Data\npublic class {definition.name} {{\n{body}\n}}"

    @staticmethod
    def _escape(key: str) -> str:
        return key.replace("\\", "\\\\").replace('"', '\\"')


def generate_java(value: Any, root_name: str = "Root") -> str:
    """Convenience function to generate Java POJO classes.

    Args:
        value: Inferred Value to describe
        root_name: Name of the root class

    Returns:
        Java source text
    """
    return JavaPojoGenerator().generate(value, root_name)
