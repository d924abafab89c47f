"""Theme file parsing and validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from lxml import etree

from skinkit.errors import ErrorCode, ThemeError
from skinkit.ui.themes.constants import (
    CURRENT_THEME_VERSION,
    EXTRA_ATTR,
    MINIMUM_THEME_VERSION,
    NAME_ATTR,
    ROOT_TAG,
    VERSION_TAG,
    VIEW_TAG,
)
from skinkit.ui.themes.models import PropertyValue, RawValue, ThemeDocument, ThemeElement, ThemeView
from skinkit.ui.themes.schema import ElementType, PropertyKind, PropertySchema, element_type_for_tag, schema_for
from skinkit.ui.themes.values import parse_bool, parse_float, parse_hex_color, parse_pair, resolve_path

logger = logging.getLogger(__name__)


def load_theme_document(path: str | Path) -> ThemeDocument:
    """Parse and validate a whole theme file.

    Any failure is raised as a ``ThemeError`` naming ``path``; nothing is
    recovered part way through.
    """
    theme_path = Path(path)
    try:
        return _load_theme_document(theme_path)
    except ThemeError as exc:
        raise exc.with_file(theme_path) from exc


def _load_theme_document(theme_path: Path) -> ThemeDocument:
    if not theme_path.exists():
        raise ThemeError(ErrorCode.MISSING_FILE)

    root = _parse_xml(theme_path).getroot()
    if root.tag != ROOT_TAG:
        raise ThemeError(ErrorCode.MISSING_ROOT_SECTION, details={"tag": str(root.tag)})

    version = _parse_version(root)

    views: dict[str, ThemeView] = {}
    for node in root.iterchildren(VIEW_TAG):
        name = node.get(NAME_ATTR)
        if name is None:
            raise ThemeError(ErrorCode.MISSING_NAME, details={"tag": node.tag, "line": node.sourceline})
        try:
            view = parse_view(node, name, theme_path)
        except ThemeError as exc:
            raise exc.with_context(f'view "{name}"') from exc

        if len(view) > 0:
            views[name] = view
        else:
            logger.debug("theme %s: dropping empty view %r", theme_path, name)

    return ThemeDocument(source_path=theme_path, version=version, views=views)


def _parse_xml(theme_path: Path) -> etree._ElementTree:
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        return etree.parse(str(theme_path), parser)
    except etree.XMLSyntaxError as exc:
        raise ThemeError(
            ErrorCode.MALFORMED_MARKUP,
            message=f"XML parsing error: \n    {exc}",
            details={"description": str(exc)},
        ) from exc
    except OSError as exc:
        raise ThemeError(
            ErrorCode.UNREADABLE_FILE,
            message=f"Unable to read theme file: {exc}",
        ) from exc


def _parse_version(root: etree._Element) -> float:
    node = root.find(VERSION_TAG)
    text = (node.text or "").strip() if node is not None else ""
    if not text:
        raise ThemeError(
            ErrorCode.MISSING_VERSION,
            message=(
                "<version> tag missing!\n   It's either out of date or you need to add "
                f"<version>{CURRENT_THEME_VERSION}</version> inside your <theme> tag."
            ),
        )

    version = parse_float(text)
    if version < MINIMUM_THEME_VERSION:
        raise ThemeError(
            ErrorCode.UNSUPPORTED_VERSION,
            message=(
                f"Theme is version {version:g}. "
                f"Minimum supported version is {MINIMUM_THEME_VERSION}."
            ),
            details={"actual": version, "minimum": MINIMUM_THEME_VERSION},
        )
    return version


def parse_view(node: etree._Element, name: str, theme_path: Path) -> ThemeView:
    """Build a view from the element tags nested in a <view> section.

    A repeated element name replaces the earlier definition.
    """
    elements: dict[str, ThemeElement] = {}
    for child in node:
        if not isinstance(child.tag, str):
            continue

        element_name = child.get(NAME_ATTR)
        if element_name is None:
            raise ThemeError(
                ErrorCode.MISSING_ELEMENT_NAME,
                message=f'Element of type "{child.tag}" missing "name" attribute!',
                details={"tag": child.tag, "line": child.sourceline},
            )

        element_type = element_type_for_tag(child.tag)
        if element_type is None:
            raise ThemeError(
                ErrorCode.UNKNOWN_ELEMENT_TYPE,
                message=f'Unknown element of type "{child.tag}"!',
                details={"tag": child.tag, "line": child.sourceline},
            )

        try:
            element = parse_element(child, element_name, element_type, theme_path)
        except ThemeError as exc:
            raise exc.with_context(f'{child.tag} "{element_name}"') from exc

        elements.pop(element_name, None)
        elements[element_name] = element
    return ThemeView(name, elements)


def parse_element(
    node: etree._Element,
    name: str,
    element_type: ElementType,
    theme_path: Path,
) -> ThemeElement:
    """Convert the property tags of one element according to its schema."""
    schema: PropertySchema = schema_for(element_type)
    extra = parse_bool(node.get(EXTRA_ATTR), default=False)

    properties: dict[str, PropertyValue] = {}
    for child in node:
        if not isinstance(child.tag, str):
            continue

        kind = schema.get(child.tag)
        if kind is None:
            raise ThemeError(
                ErrorCode.UNKNOWN_PROPERTY_TYPE,
                message=(
                    f'Unknown property type "{child.tag}" '
                    f"(for element of type {element_type.value})."
                ),
                details={"tag": child.tag, "element_type": element_type.value, "line": child.sourceline},
            )

        try:
            value = _CONVERTERS[kind](child.text, theme_path)
        except ThemeError as exc:
            raise exc.with_context(f"<{child.tag}>") from exc
        properties[child.tag] = PropertyValue(kind, value)

    return ThemeElement(name=name, type=element_type, extra=extra, properties=properties)


def _convert_pair(text: str | None, _theme_path: Path) -> RawValue:
    return parse_pair((text or "").strip())


def _convert_string(text: str | None, _theme_path: Path) -> RawValue:
    return text or ""


def _convert_path(text: str | None, theme_path: Path) -> RawValue:
    raw = (text or "").strip()
    resolved = resolve_path(raw, theme_path)
    if not Path(resolved).exists():
        logger.warning(
            'theme "%s" - could not find file "%s" (resolved to "%s")',
            theme_path,
            raw,
            resolved,
        )
    return resolved


def _convert_color(text: str | None, _theme_path: Path) -> RawValue:
    return parse_hex_color((text or "").strip())


def _convert_float(text: str | None, _theme_path: Path) -> RawValue:
    return parse_float((text or "").strip())


def _convert_bool(text: str | None, _theme_path: Path) -> RawValue:
    return parse_bool(text)


_CONVERTERS: dict[PropertyKind, Callable[[str | None, Path], RawValue]] = {
    PropertyKind.NORMALIZED_PAIR: _convert_pair,
    PropertyKind.STRING: _convert_string,
    PropertyKind.PATH: _convert_path,
    PropertyKind.COLOR: _convert_color,
    PropertyKind.FLOAT: _convert_float,
    PropertyKind.BOOLEAN: _convert_bool,
}
