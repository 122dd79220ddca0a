"""Base types for parsed input.

A ParseResult is produced once per raw-text input and never mutated; a new
input simply produces a new result.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InputFormat(str, Enum):
    """Structural formats the detector can recognise."""

    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    CSV = "csv"
    UNKNOWN = "unknown"


class ParseResult(BaseModel):
    """Outcome of auto-detecting and parsing one raw-text input."""

    model_config = ConfigDict(frozen=True)

    data: Any | None = Field(default=None, description="Inferred value, None when nothing matched")
    format: InputFormat = Field(default=InputFormat.UNKNOWN, description="Detected input format")
    error: str | None = Field(default=None, description="Diagnostic message when detection failed")

    @property
    def ok(self) -> bool:
        """Whether the input was recognised as a structured format."""
        return self.format != InputFormat.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data,
            "format": self.format.value,
            "error": self.error,
        }
