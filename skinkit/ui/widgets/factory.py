"""Builds the component that displays a given element type."""

from __future__ import annotations

from typing import Any

from skinkit.ui.themes.schema import ElementType
from skinkit.ui.widgets.image import ImageComponent
from skinkit.ui.widgets.text import TextComponent
from skinkit.ui.widgets.text_list import TextListComponent


def create_component(element_type: ElementType) -> Any | None:
    """Return a fresh component for ``element_type``; sounds have none."""
    if element_type is ElementType.IMAGE:
        return ImageComponent()
    if element_type is ElementType.TEXT:
        return TextComponent()
    if element_type is ElementType.TEXT_LIST:
        return TextListComponent()
    return None
