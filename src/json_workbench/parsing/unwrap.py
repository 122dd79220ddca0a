"""Recursive unwrapping of stringified JSON.

Real-world payloads often carry JSON that was serialized more than once, for
example a message body stored as a string inside another JSON document.
``unwrap`` repairs that by repeatedly parsing string values until no further
structure is revealed.
"""

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json_strict(text: str) -> Any:
    """Parse JSON text the way a browser's ``JSON.parse`` would.

    ``NaN``/``Infinity`` literals are rejected, as is a leading byte order mark.

    Raises:
        ValueError: If the text is not valid JSON
    """
    return json.loads(text, parse_constant=_reject_constant)


def unwrap(value: Any) -> Any:
    """Replace every string in ``value`` by its deepest parseable JSON form.

    Sequences are unwrapped element-wise and mappings value-wise (keys and key
    order are preserved); numbers, booleans and None are returned unchanged.
    A string that is not valid JSON is returned verbatim, which is the fixed
    point that ends the recursion. Never raises.

    A quoted primitive is unwrapped once: the text `"abc"` (with quotes)
    becomes `abc`, and `{"a": "{\"b\": 2}"}` becomes `{"a": {"b": 2}}`.
    """
    if not isinstance(value, str):
        if isinstance(value, (list, tuple)):
            return [unwrap(item) for item in value]
        if isinstance(value, dict):
            return {key: unwrap(item) for key, item in value.items()}
        return value

    try:
        parsed = parse_json_strict(value)
    except (ValueError, RecursionError):
        return value

    if parsed == value:
        return parsed

    # Numbers, booleans and null are terminal
    if not isinstance(parsed, (dict, list, str)):
        return parsed

    try:
        return unwrap(parsed)
    except RecursionError:
        return parsed
