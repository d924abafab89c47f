"""Runtime path helpers for source and frozen executable modes."""

from __future__ import annotations

import os
from pathlib import Path
import sys


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Directory holding the `skinkit` resources, inside a frozen bundle or not."""
    meipass = getattr(sys, "_MEIPASS", None) if is_frozen() else None
    if not meipass:
        return Path(__file__).resolve().parent
    nested = Path(meipass) / "skinkit"
    return nested if nested.is_dir() else Path(meipass)


def builtin_themes_root() -> Path:
    """Resolve the built-in theme directory across source/frozen layouts."""
    return package_root() / "ui" / "themes" / "builtin"


def builtin_theme_path() -> Path:
    """Return the theme file used when no user theme can be loaded."""
    return builtin_themes_root() / "default" / "theme.xml"


def home_path() -> str:
    """Return the user's home directory as a forward-slash path string.

    HOME wins when set, then USERPROFILE / HOMEDRIVE+HOMEPATH on Windows.
    """
    home = os.environ.get("HOME")
    if not home:
        home = os.environ.get("USERPROFILE")
    if not home:
        drive = os.environ.get("HOMEDRIVE", "")
        rest = os.environ.get("HOMEPATH", "")
        if drive or rest:
            home = drive + rest
    if not home:
        home = str(Path.home())
    return home.replace("\\", "/").rstrip("/") or "/"
