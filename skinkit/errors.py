"""Error codes and error handling utilities for SkinKit."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCategory(Enum):
    """Broad classes of theme load failures."""

    STRUCTURAL = auto()
    SCHEMA = auto()
    VALUE = auto()


class ErrorCode(Enum):
    """Standardized error codes for theme loading."""

    # Structural errors
    MISSING_FILE = auto()
    UNREADABLE_FILE = auto()
    MALFORMED_MARKUP = auto()
    MISSING_ROOT_SECTION = auto()
    MISSING_VERSION = auto()
    UNSUPPORTED_VERSION = auto()

    # Schema errors
    MISSING_NAME = auto()
    MISSING_ELEMENT_NAME = auto()
    UNKNOWN_ELEMENT_TYPE = auto()
    UNKNOWN_PROPERTY_TYPE = auto()
    PROPERTY_KIND_MISMATCH = auto()

    # Value errors
    INVALID_PAIR = auto()
    EMPTY_COLOR = auto()
    INVALID_COLOR = auto()

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES: dict[ErrorCode, ErrorCategory] = {
    ErrorCode.MISSING_FILE: ErrorCategory.STRUCTURAL,
    ErrorCode.UNREADABLE_FILE: ErrorCategory.STRUCTURAL,
    ErrorCode.MALFORMED_MARKUP: ErrorCategory.STRUCTURAL,
    ErrorCode.MISSING_ROOT_SECTION: ErrorCategory.STRUCTURAL,
    ErrorCode.MISSING_VERSION: ErrorCategory.STRUCTURAL,
    ErrorCode.UNSUPPORTED_VERSION: ErrorCategory.STRUCTURAL,
    ErrorCode.MISSING_NAME: ErrorCategory.SCHEMA,
    ErrorCode.MISSING_ELEMENT_NAME: ErrorCategory.SCHEMA,
    ErrorCode.UNKNOWN_ELEMENT_TYPE: ErrorCategory.SCHEMA,
    ErrorCode.UNKNOWN_PROPERTY_TYPE: ErrorCategory.SCHEMA,
    ErrorCode.PROPERTY_KIND_MISMATCH: ErrorCategory.SCHEMA,
    ErrorCode.INVALID_PAIR: ErrorCategory.VALUE,
    ErrorCode.EMPTY_COLOR: ErrorCategory.VALUE,
    ErrorCode.INVALID_COLOR: ErrorCategory.VALUE,
}


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_FILE: "Missing file!",
    ErrorCode.UNREADABLE_FILE: "The theme file could not be read.",
    ErrorCode.MALFORMED_MARKUP: "XML parsing error.",
    ErrorCode.MISSING_ROOT_SECTION: "Missing <theme> tag!",
    ErrorCode.MISSING_VERSION: "<version> tag missing!",
    ErrorCode.UNSUPPORTED_VERSION: "Theme version is not supported.",
    ErrorCode.MISSING_NAME: "View missing \"name\" attribute!",
    ErrorCode.MISSING_ELEMENT_NAME: "Element missing \"name\" attribute!",
    ErrorCode.UNKNOWN_ELEMENT_TYPE: "Unknown element type.",
    ErrorCode.UNKNOWN_PROPERTY_TYPE: "Unknown property type.",
    ErrorCode.PROPERTY_KIND_MISMATCH: "Property value does not match its declared kind.",
    ErrorCode.INVALID_PAIR: "Invalid normalized pair.",
    ErrorCode.EMPTY_COLOR: "Empty color",
    ErrorCode.INVALID_COLOR: "Invalid color.",
}


ERROR_HINTS: dict[ErrorCode, str] = {
    ErrorCode.MISSING_FILE: "Check the theme path in Preferences or on the command line.",
    ErrorCode.UNREADABLE_FILE: "Make sure the path points at a readable XML file, not a folder.",
    ErrorCode.MALFORMED_MARKUP: "Fix the XML syntax near the reported line.",
    ErrorCode.MISSING_ROOT_SECTION: "Wrap the whole document in a <theme> tag.",
    ErrorCode.MISSING_VERSION: "The theme is either out of date or needs a <version> tag inside <theme>.",
    ErrorCode.UNSUPPORTED_VERSION: "Update the theme to the current format.",
    ErrorCode.MISSING_NAME: "Every <view> needs a name attribute.",
    ErrorCode.MISSING_ELEMENT_NAME: "Every element inside a <view> needs a name attribute.",
    ErrorCode.UNKNOWN_ELEMENT_TYPE: "Use one of: image, text, textlist, sound.",
    ErrorCode.UNKNOWN_PROPERTY_TYPE: "Remove the property or check its spelling for this element type.",
    ErrorCode.PROPERTY_KIND_MISMATCH: "Build element properties through the theme loader.",
    ErrorCode.INVALID_PAIR: "Pairs are two numbers separated by a space, e.g. \"0.5 0.5\".",
    ErrorCode.EMPTY_COLOR: "Colors are 6 or 8 hex digits, e.g. FF0000 or FF0000AA.",
    ErrorCode.INVALID_COLOR: "Colors are 6 or 8 hex digits, e.g. FF0000 or FF0000AA.",
}


@dataclass
class ThemeError(Exception):
    """Theme load failure with an error code and a breadcrumb of context frames.

    Frames are stored in the order they were added, innermost first. Each
    parsing layer re-raises a copy extended by ``with_context`` instead of
    mutating the error it caught; the outermost layer attaches the theme
    file with ``with_file``.
    """

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    frames: tuple[str, ...] = ()
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_HINTS.get(self.code, "")

    @property
    def category(self) -> ErrorCategory:
        return self.code.category

    def with_context(self, frame: str) -> ThemeError:
        """Return a copy with ``frame`` appended as the next outer context."""
        return dataclasses.replace(
            self,
            frames=self.frames + (frame,),
            details=dict(self.details),
        )

    def with_file(self, path: str | Path) -> ThemeError:
        """Return a copy that names the theme file it came from."""
        return dataclasses.replace(self, path=Path(path), details=dict(self.details))

    def render(self) -> str:
        """Render the error as one diagnostic string, outermost context first."""
        body = self.message
        if self.frames:
            body = " > ".join(reversed(self.frames)) + ": " + body
        if self.path is None:
            return body
        return f'Error loading theme from "{self.path}":\n   {body}'

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "category": self.category.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "frames": list(reversed(self.frames)),
            "details": self.details,
            "suggestion": self.suggestion,
        }


def format_error_for_user(error: ThemeError) -> str:
    """Format a theme error for display with its actionable hint."""
    parts = [error.render()]
    if error.suggestion and error.suggestion != error.message:
        parts.append(f"\n\nHint: {error.suggestion}")
    return "".join(parts)
