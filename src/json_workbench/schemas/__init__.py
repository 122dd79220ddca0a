"""Schema inference module for emitting schema/type definitions from sample data.

Six targets are supported: TypeScript interfaces, Zod validators, Java POJOs,
SQL DDL, Mongoose schemas and JSON Schema.

Example usage:
    from json_workbench.schemas import generate_typescript

    source = generate_typescript({"id": 1, "meta": {"tags": ["a"]}}, "User")
"""

from json_workbench.schemas.base import (
    SchemaGenerator,
    SchemaTarget,
    ValueKind,
    classify,
)
from json_workbench.schemas.typescript import TypeScriptGenerator, generate_typescript
from json_workbench.schemas.zod import ZodSchemaGenerator, generate_zod
from json_workbench.schemas.java import JavaPojoGenerator, generate_java
from json_workbench.schemas.ddl import DDLGenerator, generate_sql
from json_workbench.schemas.mongoose import MongooseSchemaGenerator, generate_mongoose
from json_workbench.schemas.jsonschema import JsonSchemaGenerator, generate_json_schema
from json_workbench.schemas.registry import (
    SchemaGeneratorRegistry,
    get_global_schema_registry,
    render_schema,
)

__all__ = [
    "SchemaGenerator",
    "SchemaTarget",
    "ValueKind",
    "classify",
    "TypeScriptGenerator",
    "generate_typescript",
    "ZodSchemaGenerator",
    "generate_zod",
    "JavaPojoGenerator",
    "generate_java",
    "DDLGenerator",
    "generate_sql",
    "MongooseSchemaGenerator",
    "generate_mongoose",
    "JsonSchemaGenerator",
    "generate_json_schema",
    "SchemaGeneratorRegistry",
    "get_global_schema_registry",
    "render_schema",
]
