"""String utilities: Base64, URL encoding and JSON escaping."""

import base64
import binascii
import json
from urllib.parse import quote, unquote


def to_base64(text: str) -> str:
    """Base64-encode UTF-8 text."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def from_base64(text: str) -> str:
    """Decode Base64 text, returning an error message for invalid input."""
    try:
        return base64.b64decode(text.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return "Error: Invalid Base64 string"


def url_encode(text: str) -> str:
    """Percent-encode text the way ``encodeURIComponent`` does."""
    return quote(text, safe="-_.!~*'()")


def url_decode(text: str) -> str:
    return unquote(text)


def escape_json(text: str) -> str:
    """Render text as a quoted, escaped JSON string literal."""
    return json.dumps(text, ensure_ascii=False)


def unescape_json(text: str) -> str:
    """Undo JSON string escaping.

    A quoted literal is decoded as JSON; otherwise only escaped quotes and
    backslashes are unescaped. Invalid input is returned unchanged.
    """
    if text.startswith('"'):
        try:
            decoded = json.loads(text)
        except ValueError:
            return text
        return decoded if isinstance(decoded, str) else text
    return text.replace('\\"', '"').replace("\\\\", "\\")
