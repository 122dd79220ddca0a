"""Base classes for schema inference.

Generators walk an Inferred Value (the tree produced by the format detector)
and emit schema/type definitions for a target language. Shapes are inferred
from the sample, never validated against it: arrays are typed from their first
element only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from json_workbench.utils.helpers import capitalize, quote_key

ITEM_SUFFIX = "Item"


class ValueKind(str, Enum):
    """Tags of the Inferred Value variant."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def classify(value: Any) -> ValueKind:
    """Tag a value with its ValueKind.

    Booleans are never numbers, and floats with an integral value (``10.0``)
    count as integers.

    Raises:
        TypeError: If the value is not part of the Inferred Value model
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.INTEGER if value.is_integer() else ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def is_object_array(value: Any) -> bool:
    """Check whether a value is a non-empty array whose first element is an object."""
    return classify(value) == ValueKind.ARRAY and len(value) > 0 and classify(value[0]) == ValueKind.OBJECT


def nested_type_name(key: str) -> str:
    """Type name for a nested object field."""
    return capitalize(key)


def item_type_name(key: str) -> str:
    """Type name for the elements of an array-of-objects field."""
    return capitalize(key) + ITEM_SUFFIX


class SchemaTarget(str, Enum):
    """Supported schema generation targets."""

    TYPESCRIPT = "typescript"
    ZOD = "zod"
    JAVA = "java"
    SQL = "sql"
    MONGOOSE = "mongoose"
    JSON_SCHEMA = "json_schema"


@dataclass
class TypeDefinition:
    """A named record shape discovered during one inference pass."""

    name: str
    fields: list[tuple[str, str]] = field(default_factory=list)

    def add_field(self, key: str, type_name: str) -> None:
        self.fields.append((key, type_name))


class DefinitionTree:
    """Named definitions collected during a single inference pass.

    Definitions are registered in discovery order (a container before the
    shapes nested inside it) and emitted in reverse, so every type is defined
    before anything that references it. Identical definitions discovered more
    than once are emitted a single time, at their last discovery position.
    """

    def __init__(self):
        self._discovered: list[TypeDefinition] = []

    def open(self, name: str) -> TypeDefinition:
        definition = TypeDefinition(name=name)
        self._discovered.append(definition)
        return definition

    def ordered(self) -> list[TypeDefinition]:
        emitted = []
        seen = set()
        for definition in reversed(self._discovered):
            signature = (definition.name, tuple(definition.fields))
            if signature in seen:
                continue
            seen.add(signature)
            emitted.append(definition)
        return emitted

    def __len__(self) -> int:
        return len(self._discovered)


class SchemaGenerator(ABC):
    """Abstract base class for all schema generators."""

    target: SchemaTarget
    default_root_name: str = "Root"

    def generate(self, value: Any, root_name: str | None = None) -> str:
        """Generate schema text for a sample value.

        Args:
            value: Inferred Value to describe
            root_name: Name of the root type/table/constant

        Returns:
            Generated source text
        """
        return self._generate(value, root_name or self.default_root_name)

    @abstractmethod
    def _generate(self, value: Any, root_name: str) -> str:
        pass


class NamedTypeGenerator(SchemaGenerator):
    """Generator emitting one named block per discovered object shape.

    Nested objects become ``Capitalized(key)`` types and arrays of objects
    become ``Capitalized(key) + "Item"`` types.
    """

    def _generate(self, value: Any, root_name: str) -> str:
        tree = DefinitionTree()
        self._traverse(value, root_name, tree)
        return self._render(value, root_name, tree.ordered())

    def _traverse(self, value: Any, name: str, tree: DefinitionTree) -> None:
        kind = classify(value)

        # Arrays are assumed homogeneous
        if kind == ValueKind.ARRAY:
            if value:
                self._traverse(value[0], name, tree)
            return

        if kind != ValueKind.OBJECT:
            return

        definition = tree.open(name)
        for key, item in value.items():
            definition.add_field(key, self._field_type(key, item, tree))

    def _field_type(self, key: str, value: Any, tree: DefinitionTree) -> str:
        kind = classify(value)

        if kind == ValueKind.OBJECT:
            type_name = nested_type_name(key)
            self._traverse(value, type_name, tree)
            return type_name

        if is_object_array(value):
            type_name = item_type_name(key)
            self._traverse(value[0], type_name, tree)
            return self.list_of(type_name)

        return self.type_of(value)

    @abstractmethod
    def type_of(self, value: Any) -> str:
        """Type expression for a value that does not get its own named type."""

    @abstractmethod
    def list_of(self, element_type: str) -> str:
        """Type expression for a sequence of ``element_type``."""

    @abstractmethod
    def _render(self, value: Any, root_name: str, definitions: list[TypeDefinition]) -> str:
        pass


class BuilderSchemaGenerator(SchemaGenerator):
    """Generator emitting a single nested builder expression.

    Subclasses only provide the token vocabulary: how primitives, arrays and
    objects are spelled in the target ecosystem.
    """

    indent = "  "

    PRIMITIVE_TOKENS: dict[ValueKind, str] = {}
    ANY_TOKEN = ""

    def build(self, value: Any, depth: int = 0) -> str:
        """Build the expression describing ``value``."""
        kind = classify(value)

        if kind == ValueKind.ARRAY:
            if not value:
                return self.wrap_array(self.ANY_TOKEN)
            return self.wrap_array(self.build(value[0], depth))

        if kind == ValueKind.OBJECT:
            return self._build_object(value, depth)

        return self.PRIMITIVE_TOKENS[kind]

    def _build_object(self, value: dict[str, Any], depth: int) -> str:
        if not value:
            return self.wrap_object("", "")

        padding = self.indent * (depth + 1)
        lines = [
            f"{padding}{quote_key(key)}: {self.build(item, depth + 1)}"
            for key, item in value.items()
        ]
        return self.wrap_object(",\n".join(lines), self.indent * depth)

    @abstractmethod
    def wrap_array(self, element: str) -> str:
        pass

    @abstractmethod
    def wrap_object(self, body: str, closing_indent: str) -> str:
        pass
