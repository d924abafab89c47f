"""Conversion of property text into typed values."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import NamedTuple

from skinkit.errors import ErrorCode, ThemeError
from skinkit.runtime_paths import home_path

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")
_LEADING_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_SEGMENT_SPLIT_RE = re.compile(r"[\\/]")
_TRUE_PREFIXES = frozenset("1tTyY")


class Pair(NamedTuple):
    """A 2D value, normally in screen-relative units."""

    x: float
    y: float


def parse_float(text: str | None) -> float:
    """Parse the leading number of ``text``; anything unparseable is 0.0."""
    if not text:
        return 0.0
    match = _LEADING_FLOAT_RE.match(text)
    if match is None:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        return 0.0


def parse_bool(text: str | None, default: bool = False) -> bool:
    """Booleans are true when the text starts with 1, t or y (any case)."""
    if text is None:
        return default
    stripped = text.strip()
    if not stripped:
        return default
    return stripped[0] in _TRUE_PREFIXES


def parse_pair(text: str | None) -> Pair:
    """Split ``text`` at its first space and read each half leniently."""
    value = text or ""
    divider = value.find(" ")
    if divider == -1:
        raise ThemeError(
            ErrorCode.INVALID_PAIR,
            message=f'invalid normalized pair ("{value}")',
            details={"text": value},
        )
    return Pair(parse_float(value[:divider]), parse_float(value[divider:]))


def parse_hex_color(text: str | None) -> int:
    """Pack 6 or 8 hex digits into a 0xRRGGBBAA integer.

    Six digits imply a fully opaque alpha of 0xFF.
    """
    if not text:
        raise ThemeError(ErrorCode.EMPTY_COLOR)

    length = len(text)
    if length not in (6, 8):
        raise ThemeError(
            ErrorCode.INVALID_COLOR,
            message=f'Invalid color (bad length, "{text}" - must be 6 or 8)',
            details={"text": text, "length": length},
        )
    if _HEX_DIGITS_RE.fullmatch(text) is None:
        raise ThemeError(
            ErrorCode.INVALID_COLOR,
            message=f'Invalid color (non-hex digits in "{text}")',
            details={"text": text, "length": length},
        )

    value = int(text, 16)
    if length == 6:
        value = (value << 8) | 0xFF
    return value


def resolve_path(text: str | None, theme_path: str | Path, *, home: str | None = None) -> str:
    """Resolve a theme path reference against the home or theme directory.

    Only the first segment is inspected: ``~`` means the home directory and
    ``.`` means the folder holding the theme file. Anything else is returned
    unchanged.
    """
    if not text:
        return text or ""

    first, _, remainder = _split_first_segment(text)
    if first == "~":
        base = home if home is not None else home_path()
    elif first == ".":
        base = Path(theme_path).parent.as_posix()
    else:
        return text

    joined = base.rstrip("/") + "/" + remainder if remainder else base
    return _normalize(joined)


def _split_first_segment(text: str) -> tuple[str, str, str]:
    parts = _SEGMENT_SPLIT_RE.split(text, maxsplit=1)
    if len(parts) == 1:
        return parts[0], "", ""
    return parts[0], "/", parts[1]


def _normalize(path: str) -> str:
    return os.path.normpath(path).replace("\\", "/")
