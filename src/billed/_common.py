"""Shared parsing helpers: integer coercion of form text, pct default, file name from an input path."""

from __future__ import annotations

import re

DEFAULT_PCT = 20

# Leading optional sign and digits, surrounding whitespace ignored ("20", " 30 ", "12.5" -> 12)
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: str | None) -> int | None:
    """Parse the leading integer of a form value. Return None if there is none."""
    if value is None:
        return None
    m = _INT_PREFIX.match(str(value))
    if not m:
        return None
    return int(m.group(1))


def resolve_pct(value: str | None, default: int = DEFAULT_PCT) -> int:
    """pct from the form; empty, unparsable, zero or negative text gives the default."""
    pct = parse_int(value)
    if pct is None or pct <= 0:
        return default
    return pct


def file_name_from_path(path: str | None) -> str:
    """Last component of a file input value such as 'C:\\fakepath\\test.jpg' (either separator)."""
    if not path:
        return ""
    return re.split(r"[\\/]", path)[-1]
