"""Serializers rendering an Inferred Value as JSON, YAML, XML or CSV.

Each converter returns text. Failures are rendered inline as an error string
rather than raised, so a value that cannot be expressed in one format never
breaks the others.
"""

import csv
import io
import json
import logging
import xml.etree.ElementTree as ET
from typing import Any

import yaml

from json_workbench.parsing.readers import ATTRIBUTES_KEY, TEXT_KEY

logger = logging.getLogger(__name__)

XML_ROOT_TAG = "root"
XML_ITEM_TAG = "item"
XML_INDENT = "    "


def to_json(data: Any, indent: int | None = 2) -> str:
    """Serialize to JSON text (pretty-printed unless ``indent`` is None)."""
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)


def to_yaml(data: Any) -> str:
    """Serialize to block-style YAML, keeping key order."""
    try:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as e:
        logger.warning("YAML conversion failed: %s", e)
        return f"Error converting to YAML: {e}"


# =============================================================================
# XML
# =============================================================================

def _xml_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append_xml(parent: ET.Element, tag: str, value: Any) -> None:
    # Repeated tags in the compact convention are stored as lists
    if isinstance(value, list):
        for item in value:
            _append_xml(parent, tag, item)
        return

    element = ET.SubElement(parent, tag)
    _fill_xml(element, value)


def _fill_xml(element: ET.Element, value: Any) -> None:
    if isinstance(value, list):
        _append_xml(element, XML_ITEM_TAG, value)
        return

    if not isinstance(value, dict):
        element.text = _xml_text(value)
        return

    for key, item in value.items():
        if key == ATTRIBUTES_KEY and isinstance(item, dict):
            for name, attribute in item.items():
                element.set(name, _xml_text(attribute))
        elif key == TEXT_KEY:
            element.text = "".join(_xml_text(t) for t in item) if isinstance(item, list) else _xml_text(item)
        else:
            _append_xml(element, key, item)


def to_xml(data: Any) -> str:
    """Serialize to XML, wrapped in a ``<root>`` element.

    The compact convention produced by the XML reader is honoured:
    ``_attributes`` become attributes, ``_text`` becomes text content and
    lists become repeated elements.
    """
    try:
        root = ET.Element(XML_ROOT_TAG)
        _fill_xml(root, data)
        ET.indent(root, space=XML_INDENT)
        return ET.tostring(root, encoding="unicode")
    except (ValueError, TypeError) as e:
        logger.warning("XML conversion failed: %s", e)
        return f"Error converting to XML: {e}"


# =============================================================================
# CSV
# =============================================================================

def _csv_cell(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def to_csv(data: Any) -> str:
    """Serialize a list of objects (or a single object) to CSV.

    The header is the union of all keys in first-seen order; nested values
    are written as JSON.
    """
    if isinstance(data, dict):
        rows = [data]
    elif isinstance(data, list):
        rows = data
    else:
        type_name = "null" if data is None else type(data).__name__
        return f"Error: CSV conversion requires an array or object. Got {type_name}"

    try:
        fieldnames: list[str] = []
        for row in rows:
            if not isinstance(row, dict):
                raise TypeError(f"row is not an object: {row!r}")
            for key in row:
                if key not in fieldnames:
                    fieldnames.append(key)

        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=fieldnames, lineterminator="\r\n")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _csv_cell(value) for key, value in row.items()})

        return output.getvalue().rstrip("\r\n")
    except (TypeError, csv.Error) as e:
        logger.warning("CSV conversion failed: %s", e)
        return f"Error converting to CSV: {e}"
