"""Common utilities for UI components."""

from __future__ import annotations

from PySide6.QtGui import QColor, QFontDatabase

_FONT_FAMILIES: dict[str, str | None] = {}


def unpack_rgba(color: int) -> tuple[int, int, int, int]:
    """Split a packed 0xRRGGBBAA color into its channels."""
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def to_qcolor(color: int) -> QColor:
    red, green, blue, alpha = unpack_rgba(color)
    return QColor(red, green, blue, alpha)


def css_rgba(color: int) -> str:
    """Format a packed color for a Qt stylesheet."""
    red, green, blue, alpha = unpack_rgba(color)
    return f"rgba({red}, {green}, {blue}, {alpha})"


def load_font_family(path: str) -> str | None:
    """Register a font file with Qt once and return its family name.

    Returns None when the file cannot be loaded.
    """
    if not path:
        return None
    if path in _FONT_FAMILIES:
        return _FONT_FAMILIES[path]

    family: str | None = None
    font_id = QFontDatabase.addApplicationFont(path)
    if font_id != -1:
        families = QFontDatabase.applicationFontFamilies(font_id)
        if families:
            family = families[0]
    _FONT_FAMILIES[path] = family
    return family
