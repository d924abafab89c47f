"""Shared geometry handling for themed components."""

from __future__ import annotations


class PositionedMixin:
    """Places a widget from a position, a size and an origin.

    The origin is a fraction of the size: (0.5, 0.5) centers the widget
    on its position. Mix in before the Qt widget class.
    """

    _theme_pos: tuple[float, float] = (0.0, 0.0)
    _theme_size: tuple[float, float] | None = None
    _theme_origin: tuple[float, float] = (0.0, 0.0)

    def set_position(self, x: float, y: float) -> None:
        self._theme_pos = (x, y)
        self._place()

    def set_size(self, width: float, height: float) -> None:
        self._theme_size = (max(0.0, width), max(0.0, height))
        self._place()

    def set_origin(self, x: float, y: float) -> None:
        self._theme_origin = (x, y)
        self._place()

    def theme_geometry(self) -> tuple[tuple[float, float], tuple[float, float] | None, tuple[float, float]]:
        return self._theme_pos, self._theme_size, self._theme_origin

    def _place(self) -> None:
        if self._theme_size is not None:
            self.resize(round(self._theme_size[0]), round(self._theme_size[1]))
        width, height = self.width(), self.height()
        x = self._theme_pos[0] - self._theme_origin[0] * width
        y = self._theme_pos[1] - self._theme_origin[1] * height
        self.move(round(x), round(y))
