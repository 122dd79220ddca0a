"""SQL DDL generator.

Builds a ``CREATE TABLE`` statement from a flat sample object: one column per
top-level key, nested structures collapsed to a JSONB column.
"""

from typing import Any

from json_workbench.schemas.base import SchemaGenerator, SchemaTarget, ValueKind, classify
from json_workbench.utils.helpers import camel_to_snake

NOT_AN_OBJECT_MESSAGE = "-- Input must be a JSON object to generate a table schema"


class DDLGenerator(SchemaGenerator):
    """Generator for SQL CREATE TABLE statements."""

    target = SchemaTarget.SQL
    default_root_name = "my_table"

    # Value kind to column type mapping (PostgreSQL flavoured)
    TYPE_MAPPING = {
        ValueKind.NULL: "TEXT",
        ValueKind.BOOLEAN: "BOOLEAN",
        ValueKind.INTEGER: "INTEGER",
        ValueKind.FLOAT: "DECIMAL",
        ValueKind.STRING: "TEXT",
        ValueKind.ARRAY: "JSONB",
        ValueKind.OBJECT: "JSONB",
    }

    def _generate(self, value: Any, root_name: str) -> str:
        if classify(value) != ValueKind.OBJECT:
            return NOT_AN_OBJECT_MESSAGE

        columns = [
            f"    {camel_to_snake(key)} {self.column_type(item)}"
            for key, item in value.items()
        ]
        body = ",\n".join(columns)
        return f"CREATE TABLE {root_name} (\n{body}\n);"

    def column_type(self, value: Any) -> str:
        """Map a sample value to its column type."""
        return self.TYPE_MAPPING[classify(value)]


def generate_sql(value: Any, root_name: str = "my_table") -> str:
    """Convenience function to generate a CREATE TABLE statement.

    Args:
        value: Flat sample object
        root_name: Table name

    Returns:
        SQL DDL text, or an explanatory SQL comment for non-object input
    """
    return DDLGenerator().generate(value, root_name)
