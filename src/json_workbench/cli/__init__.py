"""CLI module for the JSON Workbench."""

from json_workbench.cli.main import cli

__all__ = ["cli"]
