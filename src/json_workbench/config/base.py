"""Workbench configuration models.

Configuration only supplies defaults (root names, indentation, mock and HTTP
settings); every core operation also accepts explicit arguments.
"""

from enum import Enum

from pydantic import BaseModel, Field

from json_workbench.schemas.base import SchemaTarget


class OutputMode(str, Enum):
    """Views the workbench can render for an input."""

    TREE = "tree"
    DIFF = "diff"
    QUERY = "query"
    JWT = "jwt"
    TRANSFORM = "transform"
    MOCK = "mock"
    UTILS = "utils"
    YAML = "yaml"
    XML = "xml"
    CSV = "csv"
    TYPESCRIPT = "typescript"
    ZOD = "zod"
    JAVA = "java"
    SQL = "sql"
    MONGOOSE = "mongoose"
    JSON_SCHEMA = "json_schema"

    @property
    def schema_target(self) -> SchemaTarget | None:
        """The schema target rendered by this mode, if any."""
        try:
            return SchemaTarget(self.value)
        except ValueError:
            return None


class SchemaConfig(BaseModel):
    """Root names used by the schema generators."""

    typescript_root: str = Field(default="Root", description="Root interface name")
    zod_root: str = Field(default="schema", description="Exported Zod constant name")
    java_root: str = Field(default="Root", description="Root class name")
    sql_table: str = Field(default="my_table", description="Table name for CREATE TABLE")
    mongoose_root: str = Field(default="schema", description="Mongoose schema constant name")
    json_schema_title: str = Field(default="Root", description="JSON Schema title")

    def root_name_for(self, target: SchemaTarget) -> str:
        """Get the configured root name for a schema target."""
        return {
            SchemaTarget.TYPESCRIPT: self.typescript_root,
            SchemaTarget.ZOD: self.zod_root,
            SchemaTarget.JAVA: self.java_root,
            SchemaTarget.SQL: self.sql_table,
            SchemaTarget.MONGOOSE: self.mongoose_root,
            SchemaTarget.JSON_SCHEMA: self.json_schema_title,
        }[target]


class MockConfig(BaseModel):
    """Mock data generation settings."""

    count: int = Field(default=5, ge=0, description="Records generated per template")
    seed: int | None = Field(default=None, description="Random seed for reproducible output")
    locale: str | None = Field(default=None, description="Faker locale")


class HttpConfig(BaseModel):
    """API client settings."""

    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class WorkbenchConfig(BaseModel):
    """Top-level workbench configuration."""

    default_mode: OutputMode = Field(default=OutputMode.TREE, description="Mode used when none is given")
    json_indent: int = Field(default=2, ge=0, description="Indentation for rendered JSON")
    schemas: SchemaConfig = Field(default_factory=SchemaConfig, description="Schema generator settings")
    mock: MockConfig = Field(default_factory=MockConfig, description="Mock data settings")
    http: HttpConfig = Field(default_factory=HttpConfig, description="API client settings")
