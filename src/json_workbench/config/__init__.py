"""Configuration module - workbench defaults loaded from YAML."""

from json_workbench.config.base import (
    HttpConfig,
    MockConfig,
    OutputMode,
    SchemaConfig,
    WorkbenchConfig,
)
from json_workbench.config.loader import ConfigLoader, load_config

__all__ = [
    "HttpConfig",
    "MockConfig",
    "OutputMode",
    "SchemaConfig",
    "WorkbenchConfig",
    "ConfigLoader",
    "load_config",
]
