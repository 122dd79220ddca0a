"""
JSON Workbench - A data-format workbench for loosely structured text.

Accepts JSON, YAML, XML, CSV and JWT input, infers its structure, and re-renders
it as alternative representations: serialized formats, generated schema/type
definitions, query results, diffs, or mock data.
"""

__version__ = "0.1.0"

from json_workbench.parsing.base import InputFormat, ParseResult
from json_workbench.parsing.unwrap import unwrap
from json_workbench.parsing.detector import FormatDetector, detect
from json_workbench.schemas.registry import SchemaGeneratorRegistry, render_schema
from json_workbench.engine.diff_engine import DiffEngine, diff
from json_workbench.engine.workbench import Workbench, WorkbenchSession, OutputMode

__all__ = [
    "InputFormat",
    "ParseResult",
    "unwrap",
    "FormatDetector",
    "detect",
    "SchemaGeneratorRegistry",
    "render_schema",
    "DiffEngine",
    "diff",
    "Workbench",
    "WorkbenchSession",
    "OutputMode",
]
