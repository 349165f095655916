"""Supplementary string routines: case changes, padding, trimming and lenient number parsing."""

from __future__ import annotations

import re

__all__ = [
    "to_lower",
    "to_upper",
    "prepad",
    "trim",
    "trim_quotes",
    "to_int",
    "to_long",
    "to_double",
    "string_hash",
]

# The characters C's isspace() accepts in the "C" locale.
_WHITESPACE = " \t\n\v\f\r"
_QUOTES = "\"'`"

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*("
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan)"
    r")",
    re.ASCII | re.IGNORECASE,
)

_HASH_MASK = (1 << 64) - 1


def to_lower(text: str) -> str:
    """Return ``text`` with every letter in lower case."""
    return text.lower()


def to_upper(text: str) -> str:
    """Return ``text`` with every letter in upper case."""
    return text.upper()


def prepad(text: str, width: int, fill: str = " ") -> str:
    """Pad the start of ``text`` with ``fill`` until it is at least ``width`` long.

    Longer strings are returned unchanged; nothing is cropped.
    """
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return text.rjust(width, fill)


def trim(text: str) -> str:
    """Remove white-space from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def trim_quotes(text: str) -> str:
    """Remove one pair of matching surrounding quotes (``"``, ``'`` or `````)."""
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text


def to_int(text: str) -> int:
    """Parse a leading integer the way ``atoi`` does; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def to_long(text: str) -> int:
    """Parse a leading integer the way ``atol`` does; 0 when there is none."""
    return to_int(text)


def to_double(text: str) -> float:
    """Parse a leading floating-point number the way ``atof`` does; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def string_hash(text: str) -> int:
    """Hash ``text`` with the multiply-by-17-and-xor scheme over its UTF-8 bytes.

    Bytes are taken as signed chars and the result wraps at 64 bits.
    """
    size = 0
    for byte in text.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        size = ((size * 17) ^ (char & _HASH_MASK)) & _HASH_MASK
    return size