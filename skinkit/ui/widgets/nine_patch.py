"""Stretchable frame drawn from a nine-patch image."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QWidget

from skinkit.ui.widgets.base import PositionedMixin

CORNER_SIZE = 16


class NinePatchComponent(PositionedMixin, QFrame):
    """Frame whose border image keeps its corners unscaled."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._path = ""

    @property
    def image_path(self) -> str:
        return self._path

    def set_image_path(self, path: str) -> None:
        self._path = path
        if not path:
            self.setStyleSheet("")
            return
        edge = CORNER_SIZE
        self.setStyleSheet(
            f'QFrame {{ border-image: url("{path}") {edge} {edge} {edge} {edge} stretch; '
            f"border-width: {edge}px; }}"
        )
