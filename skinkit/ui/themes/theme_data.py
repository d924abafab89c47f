"""Loaded theme state and the API that applies it to components."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol, Sequence

from skinkit.errors import ThemeError
from skinkit.ui.themes.constants import DEFAULT_SCREEN_SIZE, ThemeFlags
from skinkit.ui.themes.loader import load_theme_document
from skinkit.ui.themes.models import ThemeElement, ThemeView
from skinkit.ui.themes.schema import ElementType
from skinkit.ui.themes.sounds import SoundCache
from skinkit.ui.themes.values import Pair

logger = logging.getLogger(__name__)

ComponentFactory = Callable[[ElementType], Any]


class PositionedTarget(Protocol):
    def set_position(self, x: float, y: float) -> None: ...
    def set_size(self, width: float, height: float) -> None: ...


class ImageTarget(PositionedTarget, Protocol):
    def set_origin(self, x: float, y: float) -> None: ...
    def set_image(self, path: str) -> None: ...
    def set_tiling(self, tile: bool) -> None: ...


class NinePatchTarget(PositionedTarget, Protocol):
    def set_image_path(self, path: str) -> None: ...


class TextTarget(PositionedTarget, Protocol):
    def set_text(self, text: str) -> None: ...
    def set_color(self, color: int) -> None: ...
    def set_font_path(self, path: str) -> None: ...
    def set_font_size(self, pixels: float) -> None: ...
    def set_centered(self, centered: bool) -> None: ...


class TextListTarget(PositionedTarget, Protocol):
    def set_selector_color(self, color: int) -> None: ...
    def set_selected_color(self, color: int) -> None: ...
    def set_primary_color(self, color: int) -> None: ...
    def set_secondary_color(self, color: int) -> None: ...
    def set_font_path(self, path: str) -> None: ...
    def set_font_size(self, pixels: float) -> None: ...


def _default_component_factory(element_type: ElementType) -> Any:
    from skinkit.ui.widgets.factory import create_component

    return create_component(element_type)


class ThemeData:
    """A theme loaded from one file, queried by view and element name.

    Loading is atomic: a failed ``load_file`` leaves the previously loaded
    views in place. Not thread-safe; callers must not reload while another
    caller is reading.
    """

    def __init__(
        self,
        *,
        screen_size: tuple[float, float] = DEFAULT_SCREEN_SIZE,
        component_factory: ComponentFactory | None = None,
        sound_cache: SoundCache | None = None,
        sounds_enabled: bool = True,
    ) -> None:
        self._screen = Pair(*screen_size)
        self._component_factory = component_factory or _default_component_factory
        self._sounds = sound_cache if sound_cache is not None else SoundCache()
        self._views: dict[str, ThemeView] = {}
        self._version = 0.0
        self._source_path: Path | None = None
        self._generation = 0
        self.sounds_enabled = sounds_enabled

    @property
    def version(self) -> float:
        return self._version

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    @property
    def generation(self) -> int:
        """Incremented by every successful load."""
        return self._generation

    @property
    def views(self) -> Mapping[str, ThemeView]:
        return MappingProxyType(self._views)

    @property
    def screen_size(self) -> Pair:
        return self._screen

    def set_screen_size(self, width: float, height: float) -> None:
        self._screen = Pair(width, height)
        self._generation += 1

    # -- loading --

    def load_file(self, path: str | Path) -> None:
        """Replace the loaded views with those parsed from ``path``.

        Raises ThemeError; on failure the current views are kept.
        """
        try:
            document = load_theme_document(path)
        except ThemeError as exc:
            logger.debug("theme rejected: %s", exc.render())
            raise

        previous = self._views
        self._views = dict(document.views)
        self._version = document.version
        self._source_path = document.source_path
        self._generation += 1
        self._sounds.clear()
        for view in previous.values():
            for component in view.release_extras():
                _dispose(component)

        logger.info(
            "loaded theme %s version=%g views=%d",
            document.source_path,
            document.version,
            len(self._views),
        )

    # -- lookup --

    def get_element(self, view: str, element: str) -> ThemeElement | None:
        theme_view = self._views.get(view)
        if theme_view is None:
            return None
        return theme_view.get(element)

    # -- appliers --

    def apply_to_image(
        self,
        view: str,
        element: str,
        image: ImageTarget,
        properties: int = ThemeFlags.ALL,
    ) -> None:
        elem = self.get_element(view, element)
        if elem is not None:
            self._apply_image(elem, image, ThemeFlags(properties))

    def apply_to_nine_patch(
        self,
        view: str,
        element: str,
        patch: NinePatchTarget,
        properties: int = ThemeFlags.ALL,
    ) -> None:
        elem = self.get_element(view, element)
        if elem is None:
            return
        flags = ThemeFlags(properties)
        self._apply_geometry(elem, patch, flags)
        path = elem.path("path")
        if flags & ThemeFlags.PATH and path is not None:
            patch.set_image_path(path)

    def apply_to_text(
        self,
        view: str,
        element: str,
        text: TextTarget,
        properties: int = ThemeFlags.ALL,
    ) -> None:
        elem = self.get_element(view, element)
        if elem is not None:
            self._apply_text(elem, text, ThemeFlags(properties))

    def apply_to_text_list(
        self,
        view: str,
        element: str,
        text_list: TextListTarget,
        properties: int = ThemeFlags.ALL,
    ) -> None:
        elem = self.get_element(view, element)
        if elem is not None:
            self._apply_text_list(elem, text_list, ThemeFlags(properties))

    # -- extras --

    def get_extras(self, view: str) -> Sequence[Any]:
        """Components for the elements of ``view`` flagged extra, in order.

        Built on first request and reused until the theme is reloaded.
        """
        theme_view = self._views.get(view)
        if theme_view is None:
            return ()
        return theme_view.extras(self._generation, self._build_extra, _dispose)

    def show_extras(self, view: str, parent: Any) -> Sequence[Any]:
        extras = self.get_extras(view)
        for component in extras:
            component.setParent(parent)
            component.show()
        return extras

    def _build_extra(self, element: ThemeElement) -> Any | None:
        component = self._component_factory(element.type)
        if component is None:
            return None
        flags = ThemeFlags.ALL
        if element.type is ElementType.IMAGE:
            self._apply_image(element, component, flags)
        elif element.type is ElementType.TEXT:
            self._apply_text(element, component, flags)
        elif element.type is ElementType.TEXT_LIST:
            self._apply_text_list(element, component, flags)
        logger.debug("built extra %r (%s)", element.name, element.type.value)
        return component

    # -- sounds --

    def play_sound(self, name: str, *, view: str | None = None) -> None:
        """Play the sound element ``name``; unknown names are ignored."""
        if not self.sounds_enabled:
            return
        element = self._find_sound(name, view)
        if element is None:
            return
        path = element.path("path")
        if not path:
            return
        self._sounds.get(path).play()

    def _find_sound(self, name: str, view: str | None) -> ThemeElement | None:
        if view is not None:
            candidates = [self._views[view]] if view in self._views else []
        else:
            candidates = list(self._views.values())
        for theme_view in candidates:
            element = theme_view.get(name)
            if element is not None and element.type is ElementType.SOUND:
                return element
        return None

    # -- property copying --

    def _apply_geometry(self, elem: ThemeElement, target: PositionedTarget, flags: ThemeFlags) -> None:
        pos = elem.pair("pos")
        if flags & ThemeFlags.POSITION and pos is not None:
            target.set_position(*self._scale(pos))
        size = elem.pair("size")
        if flags & ThemeFlags.SIZE and size is not None:
            target.set_size(*self._scale(size))

    def _apply_image(self, elem: ThemeElement, image: ImageTarget, flags: ThemeFlags) -> None:
        self._apply_geometry(elem, image, flags)
        origin = elem.pair("origin")
        if flags & ThemeFlags.ORIGIN and origin is not None:
            image.set_origin(origin.x, origin.y)
        path = elem.path("path")
        if flags & ThemeFlags.PATH and path is not None:
            image.set_image(path)
        tile = elem.flag("tile")
        if flags & ThemeFlags.TILING and tile is not None:
            image.set_tiling(tile)

    def _apply_text(self, elem: ThemeElement, text: TextTarget, flags: ThemeFlags) -> None:
        self._apply_geometry(elem, text, flags)
        color = elem.color("color")
        if flags & ThemeFlags.COLOR and color is not None:
            text.set_color(color)
        content = elem.string("text")
        if flags & ThemeFlags.TEXT and content is not None:
            text.set_text(content)
        self._apply_font(elem, text, flags)
        center = elem.flag("center")
        if flags & ThemeFlags.CENTER and center is not None:
            text.set_centered(center)

    def _apply_text_list(self, elem: ThemeElement, text_list: TextListTarget, flags: ThemeFlags) -> None:
        self._apply_geometry(elem, text_list, flags)
        if flags & ThemeFlags.COLOR:
            setters = (
                ("selectorColor", text_list.set_selector_color),
                ("selectedColor", text_list.set_selected_color),
                ("primaryColor", text_list.set_primary_color),
                ("secondaryColor", text_list.set_secondary_color),
            )
            for prop_name, setter in setters:
                color = elem.color(prop_name)
                if color is not None:
                    setter(color)
        self._apply_font(elem, text_list, flags)

    def _apply_font(self, elem: ThemeElement, target: TextTarget | TextListTarget, flags: ThemeFlags) -> None:
        font_path = elem.path("fontPath")
        if flags & ThemeFlags.FONT_PATH and font_path is not None:
            target.set_font_path(font_path)
        font_size = elem.number("fontSize")
        if flags & ThemeFlags.FONT_SIZE and font_size is not None:
            target.set_font_size(font_size * self._screen.y)

    def _scale(self, pair: Pair) -> Pair:
        return Pair(pair.x * self._screen.x, pair.y * self._screen.y)


def _dispose(component: Any) -> None:
    delete_later = getattr(component, "deleteLater", None)
    if callable(delete_later):
        delete_later()
