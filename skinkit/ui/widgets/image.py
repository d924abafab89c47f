"""Image component driven by theme image elements."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter, QPixmap
from PySide6.QtWidgets import QLabel, QWidget

from skinkit.ui.widgets.base import PositionedMixin


class ImageComponent(PositionedMixin, QLabel):
    """Shows an image file, stretched or tiled to the component size."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._path = ""
        self._source = QPixmap()
        self._tiling = False

    @property
    def image_path(self) -> str:
        return self._path

    @property
    def tiling(self) -> bool:
        return self._tiling

    def set_image(self, path: str) -> None:
        self._path = path
        self._source = QPixmap(path) if path else QPixmap()
        self._refresh_pixmap()

    def set_tiling(self, tile: bool) -> None:
        self._tiling = tile
        self._refresh_pixmap()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._refresh_pixmap()

    def _refresh_pixmap(self) -> None:
        if self._source.isNull():
            self.clear()
            return
        target = self.size()
        if target.isEmpty():
            self.setPixmap(self._source)
            return

        if not self._tiling:
            self.setPixmap(
                self._source.scaled(
                    target,
                    Qt.AspectRatioMode.IgnoreAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )
            return

        canvas = QPixmap(target)
        canvas.fill(Qt.GlobalColor.transparent)
        painter = QPainter(canvas)
        painter.drawTiledPixmap(canvas.rect(), self._source)
        painter.end()
        self.setPixmap(canvas)
