"""Schema Generator Registry for managing available schema targets."""

import logging
from typing import Any, Type

from json_workbench.schemas.base import SchemaGenerator, SchemaTarget

logger = logging.getLogger(__name__)


class SchemaGeneratorRegistry:
    """Registry for schema generators.

    Maps each SchemaTarget to the generator class producing it and provides
    factory methods for creating generator instances.
    """

    def __init__(self):
        self._generators: dict[SchemaTarget, Type[SchemaGenerator]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the default generators."""
        from json_workbench.schemas.typescript import TypeScriptGenerator
        from json_workbench.schemas.zod import ZodSchemaGenerator
        from json_workbench.schemas.java import JavaPojoGenerator
        from json_workbench.schemas.ddl import DDLGenerator
        from json_workbench.schemas.mongoose import MongooseSchemaGenerator
        from json_workbench.schemas.jsonschema import JsonSchemaGenerator

        self.register(SchemaTarget.TYPESCRIPT, TypeScriptGenerator)
        self.register(SchemaTarget.ZOD, ZodSchemaGenerator)
        self.register(SchemaTarget.JAVA, JavaPojoGenerator)
        self.register(SchemaTarget.SQL, DDLGenerator)
        self.register(SchemaTarget.MONGOOSE, MongooseSchemaGenerator)
        self.register(SchemaTarget.JSON_SCHEMA, JsonSchemaGenerator)

    def register(self, target: SchemaTarget, generator_class: Type[SchemaGenerator]) -> None:
        """Register a generator for a schema target.

        Args:
            target: The schema target this generator produces
            generator_class: The generator class to register
        """
        self._generators[target] = generator_class

    def get(self, target: SchemaTarget | str) -> Type[SchemaGenerator] | None:
        """Get a generator class by target.

        Args:
            target: The schema target (can be string or enum)

        Returns:
            The generator class or None if not found
        """
        if isinstance(target, str):
            try:
                target = SchemaTarget(target.lower())
            except ValueError:
                return None

        return self._generators.get(target)

    def create(self, target: SchemaTarget | str) -> SchemaGenerator | None:
        """Create a generator instance.

        Args:
            target: The schema target to create a generator for

        Returns:
            A generator instance or None if target not found
        """
        generator_class = self.get(target)
        if generator_class is None:
            return None
        return generator_class()

    def generate(self, target: SchemaTarget | str, value: Any, root_name: str | None = None) -> str:
        """Generate schema text for a target.

        Raises:
            ValueError: If the target is not registered
        """
        generator = self.create(target)
        if generator is None:
            available = ", ".join(t.value for t in self.list_targets())
            raise ValueError(f"Unknown schema target '{target}'. Available: {available}")

        logger.debug("Generating %s schema", generator.target.value)
        return generator.generate(value, root_name)

    def list_targets(self) -> list[SchemaTarget]:
        """List all registered schema targets."""
        return list(self._generators.keys())

    def __contains__(self, target: SchemaTarget | str) -> bool:
        """Check if a schema target is registered."""
        return self.get(target) is not None


_global_registry: SchemaGeneratorRegistry | None = None


def get_global_schema_registry() -> SchemaGeneratorRegistry:
    """Get the global schema generator registry singleton."""
    global _global_registry
    if _global_registry is None:
        _global_registry = SchemaGeneratorRegistry()
    return _global_registry


def render_schema(target: SchemaTarget | str, value: Any, root_name: str | None = None) -> str:
    """Generate schema text, rendering any failure inline.

    Unknown targets still raise ValueError; failures inside a generator are
    returned as ``Error generating output: <message>``.
    """
    registry = get_global_schema_registry()
    if target not in registry:
        raise ValueError(f"Unknown schema target '{target}'")

    try:
        return registry.generate(target, value, root_name)
    except Exception as e:
        logger.warning("Schema generation for %s failed: %s", target, e)
        return f"Error generating output: {e}"
