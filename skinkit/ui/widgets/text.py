"""Text component driven by theme text elements."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QWidget

from skinkit.ui.utils import css_rgba, load_font_family
from skinkit.ui.widgets.base import PositionedMixin

_DEFAULT_COLOR = 0x000000FF


class TextComponent(PositionedMixin, QLabel):
    """A single line or block of themed text."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWordWrap(True)
        self._color = _DEFAULT_COLOR
        self._centered = False
        self.set_centered(False)
        self._restyle()

    @property
    def color(self) -> int:
        return self._color

    @property
    def centered(self) -> bool:
        return self._centered

    def set_text(self, text: str) -> None:
        self.setText(text)

    def set_color(self, color: int) -> None:
        self._color = color
        self._restyle()

    def set_font_path(self, path: str) -> None:
        family = load_font_family(path)
        if family is None:
            return
        font = self.font()
        font.setFamily(family)
        self.setFont(font)

    def set_font_size(self, pixels: float) -> None:
        if pixels <= 0:
            return
        font = self.font()
        font.setPixelSize(max(1, round(pixels)))
        self.setFont(font)

    def set_centered(self, centered: bool) -> None:
        self._centered = centered
        horizontal = Qt.AlignmentFlag.AlignHCenter if centered else Qt.AlignmentFlag.AlignLeft
        self.setAlignment(horizontal | Qt.AlignmentFlag.AlignVCenter)

    def _restyle(self) -> None:
        self.setStyleSheet(f"QLabel {{ color: {css_rgba(self._color)}; background: transparent; }}")
