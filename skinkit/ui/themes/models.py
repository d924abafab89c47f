"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence, Union

from skinkit.errors import ErrorCode, ThemeError
from skinkit.ui.themes.schema import ElementType, PropertyKind, schema_for
from skinkit.ui.themes.values import Pair

RawValue = Union[Pair, str, int, float, bool]

_VALUE_TYPES: dict[PropertyKind, type] = {
    PropertyKind.NORMALIZED_PAIR: Pair,
    PropertyKind.PATH: str,
    PropertyKind.STRING: str,
    PropertyKind.COLOR: int,
    PropertyKind.FLOAT: float,
    PropertyKind.BOOLEAN: bool,
}


def _matches_kind(kind: PropertyKind, value: object) -> bool:
    if kind is PropertyKind.COLOR and isinstance(value, bool):
        return False
    if kind is PropertyKind.COLOR:
        return isinstance(value, int) and 0 <= value <= 0xFFFFFFFF
    return isinstance(value, _VALUE_TYPES[kind])


@dataclass(frozen=True, slots=True)
class PropertyValue:
    """A typed property value tagged with the kind that produced it."""

    kind: PropertyKind
    value: RawValue

    def __post_init__(self) -> None:
        if not _matches_kind(self.kind, self.value):
            raise ThemeError(
                ErrorCode.PROPERTY_KIND_MISMATCH,
                message=f"{self.value!r} is not a valid {self.kind.value} value",
                details={"kind": self.kind.value},
            )


@dataclass(frozen=True, slots=True)
class ThemeElement:
    """One named, typed element of a view.

    Every property name must be declared for ``type`` in the schema and
    carry the declared kind; this is checked once here.
    """

    name: str
    type: ElementType
    extra: bool = False
    properties: Mapping[str, PropertyValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        schema = schema_for(self.type)
        for prop_name, prop in self.properties.items():
            declared = schema.get(prop_name)
            if declared is None:
                raise ThemeError(
                    ErrorCode.UNKNOWN_PROPERTY_TYPE,
                    message=(
                        f'Unknown property type "{prop_name}" '
                        f"(for element of type {self.type.value})."
                    ),
                    details={"tag": prop_name, "element_type": self.type.value},
                )
            if prop.kind is not declared:
                raise ThemeError(
                    ErrorCode.PROPERTY_KIND_MISMATCH,
                    message=(
                        f'Property "{prop_name}" of {self.type.value} must be '
                        f"{declared.value}, got {prop.kind.value}"
                    ),
                    details={"tag": prop_name, "element_type": self.type.value},
                )
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def has(self, prop_name: str) -> bool:
        return prop_name in self.properties

    def get(self, prop_name: str) -> PropertyValue | None:
        return self.properties.get(prop_name)

    def pair(self, prop_name: str) -> Pair | None:
        return self._typed(prop_name, PropertyKind.NORMALIZED_PAIR)

    def path(self, prop_name: str) -> str | None:
        return self._typed(prop_name, PropertyKind.PATH)

    def string(self, prop_name: str) -> str | None:
        return self._typed(prop_name, PropertyKind.STRING)

    def color(self, prop_name: str) -> int | None:
        return self._typed(prop_name, PropertyKind.COLOR)

    def number(self, prop_name: str) -> float | None:
        return self._typed(prop_name, PropertyKind.FLOAT)

    def flag(self, prop_name: str) -> bool | None:
        return self._typed(prop_name, PropertyKind.BOOLEAN)

    def _typed(self, prop_name: str, kind: PropertyKind) -> Any:
        prop = self.properties.get(prop_name)
        if prop is None or prop.kind is not kind:
            return None
        return prop.value


class ThemeView:
    """Named elements of one view plus the extras built from them.

    The view owns its extras: they are built on demand, kept until the
    generation they were built for goes stale, and dropped with the view.
    """

    def __init__(self, name: str, elements: Mapping[str, ThemeElement] | None = None) -> None:
        self.name = name
        self._elements: dict[str, ThemeElement] = dict(elements or {})
        self._extras: tuple[Any, ...] = ()
        self._extras_generation: int | None = None

    @property
    def elements(self) -> Mapping[str, ThemeElement]:
        return MappingProxyType(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def get(self, name: str) -> ThemeElement | None:
        return self._elements.get(name)

    def extra_elements(self) -> list[ThemeElement]:
        return [element for element in self._elements.values() if element.extra]

    def extras(
        self,
        generation: int,
        build: Callable[[ThemeElement], Any | None],
        dispose: Callable[[Any], None] | None = None,
    ) -> Sequence[Any]:
        """Return the extras for ``generation``, building them if stale."""
        if self._extras_generation != generation:
            for stale in self.release_extras():
                if dispose is not None:
                    dispose(stale)
            built = []
            try:
                for element in self.extra_elements():
                    component = build(element)
                    if component is not None:
                        built.append(component)
            except Exception:
                if dispose is not None:
                    for partial in built:
                        dispose(partial)
                raise
            self._extras = tuple(built)
            self._extras_generation = generation
        return self._extras

    def release_extras(self) -> tuple[Any, ...]:
        """Forget the built extras and hand them back to the caller."""
        released = self._extras
        self._extras = ()
        self._extras_generation = None
        return released


@dataclass(frozen=True, slots=True)
class ThemeDocument:
    """Result of parsing one theme file."""

    source_path: Path
    version: float
    views: Mapping[str, ThemeView]
