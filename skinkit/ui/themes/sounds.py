"""Sound resources referenced by theme sound elements."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class Playable(Protocol):
    def play(self) -> None: ...


class Sound:
    """A short sound effect loaded from a local file."""

    def __init__(self, path: str) -> None:
        from PySide6.QtCore import QUrl
        from PySide6.QtMultimedia import QSoundEffect

        self._path = path
        self._effect = QSoundEffect()
        self._effect.setSource(QUrl.fromLocalFile(path))

    @property
    def path(self) -> str:
        return self._path

    def play(self) -> None:
        if self._effect.status() == self._effect.Status.Error:
            logger.warning("could not play sound %s", self._path)
            return
        self._effect.play()


SoundFactory = Callable[[str], Playable]


class SoundCache:
    """Loads each sound file once and hands back the same resource afterwards.

    Entries are keyed by resolved path, so elements sharing a name in
    different views never share a resource.
    """

    def __init__(self, factory: SoundFactory = Sound) -> None:
        self._factory = factory
        self._sounds: dict[str, Playable] = {}
        self._loads = 0

    @property
    def load_count(self) -> int:
        return self._loads

    def __len__(self) -> int:
        return len(self._sounds)

    def __contains__(self, path: object) -> bool:
        return path in self._sounds

    def get(self, path: str) -> Playable:
        sound = self._sounds.get(path)
        if sound is None:
            logger.debug("loading sound %s", path)
            sound = self._factory(path)
            self._sounds[path] = sound
            self._loads += 1
        return sound

    def clear(self) -> None:
        self._sounds = {}
