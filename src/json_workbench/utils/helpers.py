"""Utility helper functions."""

import re

_JS_IDENTIFIER = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")
_JAVA_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_$]")
_CAMEL_BOUNDARY = re.compile(r"([A-Z])")

JAVA_RESERVED = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
})


def capitalize(value: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def is_js_identifier(name: str) -> bool:
    """Check whether a key can be written unquoted in TypeScript/JavaScript."""
    return bool(_JS_IDENTIFIER.match(name))


def quote_key(name: str) -> str:
    """Quote a key for TypeScript/JavaScript output when it isn't an identifier."""
    if is_js_identifier(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def camel_to_snake(name: str) -> str:
    """Convert a camelCase key to a snake_case column name.

    Every upper-case letter gets an underscore in front of it, so
    ``isActive`` becomes ``is_active`` and ``ID`` becomes ``_i_d``.
    """
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def java_identifier(name: str) -> str:
    """Derive a valid Java field name from an arbitrary key.

    The original key is kept in the ``@JsonProperty`` annotation, so the
    field name only has to compile.
    """
    cleaned = _JAVA_INVALID_CHARS.sub("_", name)
    if not cleaned:
        cleaned = "_"
    if cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    if cleaned in JAVA_RESERVED:
        cleaned = f"{cleaned}_"
    return cleaned


def format_size(size_bytes: int) -> str:
    """Render a byte count as a short human readable string (``1.5 KB``)."""
    if size_bytes <= 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB"]
    value = float(size_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1

    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {units[index]}"
