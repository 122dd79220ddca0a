"""Converters rendering parsed data in alternative serialization formats."""

from json_workbench.converters.serializers import to_csv, to_json, to_xml, to_yaml

__all__ = [
    "to_csv",
    "to_json",
    "to_xml",
    "to_yaml",
]
