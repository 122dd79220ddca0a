"""Tests for the Config module."""

import tempfile
from pathlib import Path

import pytest

from json_workbench.config.base import OutputMode, SchemaConfig, WorkbenchConfig
from json_workbench.config.loader import ConfigLoader, load_config
from json_workbench.errors import ConfigError
from json_workbench.schemas.base import SchemaTarget


class TestWorkbenchConfig:
    """Tests for configuration models."""

    def test_defaults(self):
        config = WorkbenchConfig()

        assert config.default_mode == OutputMode.TREE
        assert config.json_indent == 2
        assert config.schemas.sql_table == "my_table"
        assert config.mock.count == 5
        assert config.mock.seed is None
        assert config.http.timeout == 30.0

    def test_root_name_for(self):
        schemas = SchemaConfig(typescript_root="User", sql_table="users")

        assert schemas.root_name_for(SchemaTarget.TYPESCRIPT) == "User"
        assert schemas.root_name_for(SchemaTarget.SQL) == "users"
        assert schemas.root_name_for(SchemaTarget.ZOD) == "schema"

    def test_output_mode_schema_target(self):
        assert OutputMode.SQL.schema_target == SchemaTarget.SQL
        assert OutputMode.JSON_SCHEMA.schema_target == SchemaTarget.JSON_SCHEMA
        assert OutputMode.TREE.schema_target is None


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_from_string(self):
        content = """
default_mode: typescript
json_indent: 4
schemas:
  sql_table: users
mock:
  count: 3
  seed: 7
"""
        config = ConfigLoader().load_from_string(content)

        assert config.default_mode == OutputMode.TYPESCRIPT
        assert config.json_indent == 4
        assert config.schemas.sql_table == "users"
        assert config.schemas.typescript_root == "Root"
        assert config.mock.count == 3
        assert config.mock.seed == 7

    def test_empty_document_gives_defaults(self):
        assert ConfigLoader().load_from_string("") == WorkbenchConfig()

    def test_unknown_mode_falls_back(self):
        config = ConfigLoader().load_from_string("default_mode: hologram\n")

        assert config.default_mode == OutputMode.TREE

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_string("- a\n- b\n")

    def test_malformed_yaml_rejected(self):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_string("schemas: [unclosed\n")

    def test_invalid_values_rejected(self):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_string("json_indent: -1\n")

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load_file("/nonexistent/workbench.yaml")

    def test_save_and_load(self):
        config = WorkbenchConfig(
            default_mode=OutputMode.ZOD,
            schemas=SchemaConfig(zod_root="payloadSchema"),
        )

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "workbench.yaml"
            ConfigLoader().save_file(config, path)
            loaded = load_config(path)

        assert loaded == config

    def test_load_config_without_path(self):
        assert load_config() == WorkbenchConfig()
