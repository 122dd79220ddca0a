"""Utility functions for the JSON Workbench."""

from json_workbench.utils.helpers import (
    capitalize,
    camel_to_snake,
    format_size,
    is_js_identifier,
    java_identifier,
    quote_key,
)

__all__ = [
    "capitalize",
    "camel_to_snake",
    "format_size",
    "is_js_identifier",
    "java_identifier",
    "quote_key",
]
