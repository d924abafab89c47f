"""List component driven by theme textlist elements."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QListWidget, QListWidgetItem, QWidget

from skinkit.ui.utils import css_rgba, load_font_family, to_qcolor
from skinkit.ui.widgets.base import PositionedMixin

_SECONDARY_ROLE = Qt.ItemDataRole.UserRole + 1


class TextListComponent(PositionedMixin, QListWidget):
    """Selectable list whose rows use primary or secondary text colors."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self._colors = {
            "selector": 0x000000FF,
            "selected": 0xFFFFFFFF,
            "primary": 0x0000FFFF,
            "secondary": 0x00FF00FF,
        }
        self._restyle()

    @property
    def colors(self) -> dict[str, int]:
        return dict(self._colors)

    def add_entry(self, text: str, *, secondary: bool = False) -> QListWidgetItem:
        item = QListWidgetItem(text)
        item.setData(_SECONDARY_ROLE, secondary)
        if secondary:
            item.setForeground(to_qcolor(self._colors["secondary"]))
        self.addItem(item)
        return item

    def set_selector_color(self, color: int) -> None:
        self._set_color("selector", color)

    def set_selected_color(self, color: int) -> None:
        self._set_color("selected", color)

    def set_primary_color(self, color: int) -> None:
        self._set_color("primary", color)

    def set_secondary_color(self, color: int) -> None:
        self._set_color("secondary", color)
        for row in range(self.count()):
            item = self.item(row)
            if item.data(_SECONDARY_ROLE):
                item.setForeground(to_qcolor(color))

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

    def _set_color(self, key: str, color: int) -> None:
        self._colors[key] = color
        self._restyle()

    def _restyle(self) -> None:
        self.setStyleSheet(
            f"""
QListWidget {{
    background: transparent;
    color: {css_rgba(self._colors["primary"])};
}}
QListWidget::item:selected {{
    background-color: {css_rgba(self._colors["selector"])};
    color: {css_rgba(self._colors["selected"])};
}}
"""
        )
