"""Element type registry: which properties each element may carry."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ElementType(str, Enum):
    """Closed set of element tags a view may contain."""

    IMAGE = "image"
    TEXT = "text"
    TEXT_LIST = "textlist"
    SOUND = "sound"


class PropertyKind(Enum):
    """How the text of a property tag is converted."""

    NORMALIZED_PAIR = "pair"
    PATH = "path"
    STRING = "string"
    COLOR = "color"
    FLOAT = "float"
    BOOLEAN = "boolean"


PropertySchema = Mapping[str, PropertyKind]

_PAIR = PropertyKind.NORMALIZED_PAIR

ELEMENT_SCHEMAS: Mapping[ElementType, PropertySchema] = MappingProxyType(
    {
        ElementType.IMAGE: MappingProxyType(
            {
                "pos": _PAIR,
                "size": _PAIR,
                "origin": _PAIR,
                "path": PropertyKind.PATH,
                "tile": PropertyKind.BOOLEAN,
            }
        ),
        ElementType.TEXT: MappingProxyType(
            {
                "pos": _PAIR,
                "size": _PAIR,
                "text": PropertyKind.STRING,
                "color": PropertyKind.COLOR,
                "fontPath": PropertyKind.PATH,
                "fontSize": PropertyKind.FLOAT,
                "center": PropertyKind.BOOLEAN,
            }
        ),
        ElementType.TEXT_LIST: MappingProxyType(
            {
                "pos": _PAIR,
                "size": _PAIR,
                "selectorColor": PropertyKind.COLOR,
                "selectedColor": PropertyKind.COLOR,
                "primaryColor": PropertyKind.COLOR,
                "secondaryColor": PropertyKind.COLOR,
                "fontPath": PropertyKind.PATH,
                "fontSize": PropertyKind.FLOAT,
            }
        ),
        ElementType.SOUND: MappingProxyType(
            {
                "path": PropertyKind.PATH,
            }
        ),
    }
)

_TYPES_BY_TAG: Mapping[str, ElementType] = MappingProxyType(
    {element_type.value: element_type for element_type in ElementType}
)


def element_type_for_tag(tag: str) -> ElementType | None:
    """Return the element type registered under ``tag``, if any."""
    return _TYPES_BY_TAG.get(tag)


def schema_for(element_type: ElementType) -> PropertySchema:
    return ELEMENT_SCHEMAS[element_type]
