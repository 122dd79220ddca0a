"""Config Loader for loading workbench settings from YAML files."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from json_workbench.config.base import OutputMode, WorkbenchConfig
from json_workbench.errors import ConfigError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads workbench configuration from YAML files."""

    def load_file(self, path: Path | str) -> WorkbenchConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded WorkbenchConfig instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            content = f.read()

        return self.load_from_string(content)

    def load_from_string(self, content: str) -> WorkbenchConfig:
        """Load configuration from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded WorkbenchConfig instance
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config YAML: {e}") from e

        return self._parse_config(data or {})

    def _parse_config(self, data: Any) -> WorkbenchConfig:
        """Parse configuration data from YAML structure."""
        if not isinstance(data, dict):
            raise ConfigError("Config must be a YAML mapping")

        data = dict(data)
        mode = data.get("default_mode")
        if mode is not None:
            try:
                data["default_mode"] = OutputMode(mode)
            except ValueError:
                logger.warning("Unknown default_mode '%s', using '%s'", mode, OutputMode.TREE.value)
                data["default_mode"] = OutputMode.TREE

        try:
            return WorkbenchConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config: {e}") from e

    def save_file(self, config: WorkbenchConfig, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            config: The configuration to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def load_config(path: Path | str | None = None) -> WorkbenchConfig:
    """Convenience function to load configuration.

    Args:
        path: Path to the YAML file; defaults are returned when None

    Returns:
        Loaded WorkbenchConfig instance
    """
    if path is None:
        return WorkbenchConfig()
    return ConfigLoader().load_file(path)
