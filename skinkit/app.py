"""Command-line bootstrap: validate a theme or preview one of its views."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Iterable, TextIO

from skinkit.config.settings import AppSettings
from skinkit.errors import ThemeError, format_error_for_user
from skinkit.runtime_paths import builtin_theme_path, is_frozen, package_root
from skinkit.ui.themes.theme_data import ThemeData

_FALLBACK_SCREEN_SIZE = (1280.0, 720.0)


def _configure_startup_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("skinkit.startup")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skinkit", description="Load and preview frontend themes.")
    parser.add_argument("theme", nargs="?", help="theme XML file (defaults to the saved theme)")
    parser.add_argument("--check", action="store_true", help="validate the theme and print its views")
    parser.add_argument("--view", help="view whose extras are previewed")
    return parser


def load_with_fallback(
    theme: ThemeData,
    candidates: Iterable[str],
    logger: logging.Logger,
) -> Path | None:
    """Load the first candidate theme file that validates."""
    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        try:
            theme.load_file(candidate)
        except ThemeError as exc:
            logger.warning("theme load failed: %s", exc.render())
            continue
        return Path(candidate)
    return None


def print_summary(theme: ThemeData, stream: TextIO) -> None:
    print(f"{theme.source_path}: version {theme.version:g}, {len(theme.views)} views", file=stream)
    for name, view in theme.views.items():
        entries = []
        for element in view.elements.values():
            label = f"{element.name} ({element.type.value}"
            if element.extra:
                label += ", extra"
            entries.append(label + ")")
        print(f"  {name}: {', '.join(entries)}", file=stream)


def _check_theme(path: str, logger: logging.Logger) -> int:
    theme = ThemeData(sounds_enabled=False)
    try:
        theme.load_file(path)
    except ThemeError as exc:
        logger.warning("theme check failed: %s", exc.render())
        print(format_error_for_user(exc), file=sys.stderr)
        return 1
    print_summary(theme, sys.stdout)
    return 0


def _preview_theme(args: argparse.Namespace, settings: AppSettings, logger: logging.Logger) -> int:
    from PySide6.QtWidgets import QApplication, QWidget

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("SkinKit")
    app.setOrganizationName("SkinKit")

    screen = app.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        screen_size = (float(geometry.width()), float(geometry.height()))
    else:
        screen_size = _FALLBACK_SCREEN_SIZE

    theme = ThemeData(screen_size=screen_size, sounds_enabled=settings.sounds_enabled)
    builtin = builtin_theme_path()
    if not builtin.exists():
        logger.warning("builtin theme missing at %s", builtin)
    candidates = [
        args.theme or "",
        settings.theme_path,
        settings.theme_last_known_good_path,
        str(builtin),
    ]
    loaded = load_with_fallback(theme, candidates, logger)
    if loaded is None:
        print("No valid theme could be loaded.", file=sys.stderr)
        return 1
    if args.theme and loaded == Path(args.theme):
        settings.theme_path = args.theme
    if loaded != builtin:
        settings.theme_last_known_good_path = str(loaded)

    view = args.view or settings.last_view
    if view not in theme.views:
        logger.warning("view %r not found in %s", view, loaded)
    settings.last_view = view

    window = QWidget()
    window.setWindowTitle(f"SkinKit - {view}")
    window.resize(round(screen_size[0]), round(screen_size[1]))
    theme.show_extras(view, window)
    window.show()
    return app.exec()


def run_app(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested mode."""
    args = _build_parser().parse_args(argv)
    settings = AppSettings()
    logger = _configure_startup_logger(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    if args.check:
        path = args.theme or settings.theme_path
        if not path:
            print("No theme file given.", file=sys.stderr)
            return 2
        return _check_theme(path, logger)
    return _preview_theme(args, settings, logger)
