"""Parsing module - format detection and recursive JSON unwrapping.

Example usage:
    from json_workbench.parsing import detect

    result = detect('{"payload": "{\\"id\\": 1}"}')
    result.format   # InputFormat.JSON
    result.data     # {"payload": {"id": 1}}
"""

from json_workbench.parsing.base import InputFormat, ParseResult
from json_workbench.parsing.unwrap import parse_json_strict, unwrap
from json_workbench.parsing.readers import CsvReadResult, read_csv, read_xml, read_yaml
from json_workbench.parsing.detector import FormatDetector, UNDETECTABLE_MESSAGE, detect

__all__ = [
    "InputFormat",
    "ParseResult",
    "parse_json_strict",
    "unwrap",
    "CsvReadResult",
    "read_csv",
    "read_xml",
    "read_yaml",
    "FormatDetector",
    "UNDETECTABLE_MESSAGE",
    "detect",
]
