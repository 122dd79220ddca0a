"""Format readers used by the detector.

Each reader turns raw text into an Inferred Value (None, bool, int, float,
str, list, dict). XML and YAML readers raise on malformed input; the CSV
reader reports problems through an error list instead, so the detector can
apply its own acceptance rules.
"""

import csv
import io
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any

import yaml

ATTRIBUTES_KEY = "_attributes"
TEXT_KEY = "_text"

CSV_DELIMITERS = [",", "\t", "|", ";"]

_NUMBER_PATTERN = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$")
_INTEGER_PATTERN = re.compile(r"^\s*[-+]?\d+\s*$")


# =============================================================================
# XML
# =============================================================================

def coerce_native(text: str) -> Any:
    """Coerce XML text content to a native boolean or number when it looks like one."""
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if _INTEGER_PATTERN.match(text):
        return int(text)
    if _NUMBER_PATTERN.match(text):
        return float(text)
    return text


def _local_name(tag: str) -> str:
    # ElementTree expands prefixes to "{uri}local"
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _add_child(container: dict[str, Any], key: str, value: Any) -> None:
    if key not in container:
        container[key] = value
    elif isinstance(container[key], list):
        container[key].append(value)
    else:
        container[key] = [container[key], value]


def _element_to_compact(element: ET.Element) -> dict[str, Any]:
    node: dict[str, Any] = {}

    if element.attrib:
        node[ATTRIBUTES_KEY] = {
            _local_name(name): value for name, value in element.attrib.items()
        }

    if element.text and element.text.strip():
        _add_child(node, TEXT_KEY, coerce_native(element.text))

    for child in element:
        _add_child(node, _local_name(child.tag), _element_to_compact(child))
        if child.tail and child.tail.strip():
            _add_child(node, TEXT_KEY, coerce_native(child.tail))

    return node


def read_xml(text: str) -> dict[str, Any]:
    """Parse XML into the compact object convention.

    The root element becomes the single top-level key. Attributes are grouped
    under ``_attributes``, text content under ``_text`` (coerced to numbers and
    booleans where possible), and repeated child tags are collected into a
    list. Declarations, comments and processing instructions are dropped.

    Raises:
        xml.etree.ElementTree.ParseError: If the markup is malformed
    """
    root = ET.fromstring(text)
    return {_local_name(root.tag): _element_to_compact(root)}


# =============================================================================
# YAML
# =============================================================================

class TextTimestampLoader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as the text they were written as."""


TextTimestampLoader.add_constructor(
    "tag:yaml.org,2002:timestamp",
    lambda loader, node: loader.construct_scalar(node),
)


def _normalize_yaml(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key if isinstance(key, str) else str(key): _normalize_yaml(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set)):
        return [_normalize_yaml(item) for item in value]
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def read_yaml(text: str) -> Any:
    """Parse YAML with the safe loader and normalize it to an Inferred Value.

    Timestamps stay as their source text, so impossible dates such as
    ``2024-13-01`` load as plain strings. Non-string keys are stringified.

    Raises:
        yaml.YAMLError: If the document is malformed
    """
    return _normalize_yaml(yaml.load(text, Loader=TextTimestampLoader))


# =============================================================================
# CSV
# =============================================================================

@dataclass
class CsvError:
    """A problem found while reading CSV text."""

    code: str
    message: str
    row: int | None = None


@dataclass
class CsvReadResult:
    """Rows (as header-keyed dicts) plus any problems encountered."""

    rows: list[dict[str, str]] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    delimiter: str = ","
    errors: list[CsvError] = field(default_factory=list)


def _split_rows(text: str, delimiter: str) -> list[list[str]]:
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    return [row for row in reader if row and row != [""]]


def guess_delimiter(text: str) -> str | None:
    """Pick the delimiter that splits the text into the most consistent columns.

    A candidate qualifies only if it yields about two or more fields per row
    on average. Returns None when no candidate qualifies.
    """
    best: tuple[int, float] | None = None
    best_delimiter = None

    for delimiter in CSV_DELIMITERS:
        try:
            rows = _split_rows(text, delimiter)
        except csv.Error:
            continue
        if not rows:
            continue

        counts = [len(row) for row in rows]
        average = sum(counts) / len(counts)
        if average <= 1.99:
            continue

        delta = sum(abs(current - previous) for previous, current in zip(counts, counts[1:]))
        score = (delta, -average)
        if best is None or score < best:
            best = score
            best_delimiter = delimiter

    return best_delimiter


def read_csv(text: str) -> CsvReadResult:
    """Read delimited text using the first row as the header.

    Blank lines are skipped. Rows whose field count differs from the header
    are still returned but recorded as errors, as is a delimiter that cannot
    be detected.
    """
    result = CsvReadResult()

    delimiter = guess_delimiter(text)
    if delimiter is None:
        result.errors.append(CsvError(
            code="UndetectableDelimiter",
            message="Unable to auto-detect delimiting character; defaulted to ','",
        ))
        delimiter = ","
    result.delimiter = delimiter

    try:
        rows = _split_rows(text, delimiter)
    except csv.Error as e:
        result.errors.append(CsvError(code="InvalidQuotes", message=str(e)))
        return result

    if not rows:
        return result

    header, *body = rows
    result.fields = header

    for index, row in enumerate(body, start=1):
        if len(row) < len(header):
            result.errors.append(CsvError(
                code="TooFewFields",
                message=f"Too few fields: expected {len(header)} fields but parsed {len(row)}",
                row=index,
            ))
        elif len(row) > len(header):
            result.errors.append(CsvError(
                code="TooManyFields",
                message=f"Too many fields: expected {len(header)} fields but parsed {len(row)}",
                row=index,
            ))
        result.rows.append(dict(zip(header, row)))

    return result
