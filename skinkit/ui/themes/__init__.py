"""Theme loading and application exports."""

from skinkit.ui.themes.constants import CURRENT_THEME_VERSION, MINIMUM_THEME_VERSION, ThemeFlags
from skinkit.ui.themes.loader import load_theme_document
from skinkit.ui.themes.models import PropertyValue, ThemeDocument, ThemeElement, ThemeView
from skinkit.ui.themes.schema import ELEMENT_SCHEMAS, ElementType, PropertyKind
from skinkit.ui.themes.sounds import Sound, SoundCache
from skinkit.ui.themes.theme_data import ThemeData
from skinkit.ui.themes.values import Pair, parse_hex_color, resolve_path

__all__ = [
    "CURRENT_THEME_VERSION",
    "ELEMENT_SCHEMAS",
    "ElementType",
    "MINIMUM_THEME_VERSION",
    "Pair",
    "PropertyKind",
    "PropertyValue",
    "Sound",
    "SoundCache",
    "ThemeData",
    "ThemeDocument",
    "ThemeElement",
    "ThemeFlags",
    "ThemeView",
    "load_theme_document",
    "parse_hex_color",
    "resolve_path",
]
