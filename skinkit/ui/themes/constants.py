"""Theme framework constants."""

from __future__ import annotations

from enum import IntFlag

MINIMUM_THEME_VERSION = 3
CURRENT_THEME_VERSION = 3

ROOT_TAG = "theme"
VERSION_TAG = "version"
VIEW_TAG = "view"
NAME_ATTR = "name"
EXTRA_ATTR = "extra"

DEFAULT_SCREEN_SIZE: tuple[float, float] = (1.0, 1.0)


class ThemeFlags(IntFlag):
    """Selects which properties an applier copies onto a component."""

    PATH = 1
    POSITION = 2
    SIZE = 4
    ORIGIN = 8
    COLOR = 16
    FONT_PATH = 32
    FONT_SIZE = 64
    TILING = 128
    SOUND = 256
    CENTER = 512
    TEXT = 1024
    ALL = 2047
