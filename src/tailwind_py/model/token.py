"""Parsed class tokens: variant tags, values and the token itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Union

from tailwind_py.model.definition import UtilityDefinition


class VariantKind(StrEnum):
    RESPONSIVE = "responsive"
    STATE = "state"
    DARK = "dark"
    CONTAINER = "container"
    MEDIA = "media"
    SELECTOR = "selector"


# Kinds that may appear at most once in a chain.
SINGLE_INSTANCE_KINDS = frozenset({
    VariantKind.RESPONSIVE,
    VariantKind.DARK,
    VariantKind.CONTAINER,
})


# ---------------------------------------------------------------------------
# Variant tags
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Responsive:
    """``md:`` or ``min-[800px]:``."""

    kind: ClassVar[VariantKind] = VariantKind.RESPONSIVE

    name: str
    min_width: str


@dataclass(frozen=True)
class State:
    """Pseudo-class / pseudo-element states, including ``group-*`` and ``peer-*``."""

    kind: ClassVar[VariantKind] = VariantKind.STATE

    name: str


@dataclass(frozen=True)
class Dark:
    kind: ClassVar[VariantKind] = VariantKind.DARK


@dataclass(frozen=True)
class Container:
    """``@md``, ``@[400px]`` or ``@md/sidebar``."""

    kind: ClassVar[VariantKind] = VariantKind.CONTAINER

    size: str
    name: str | None = None
    label: str = ""


@dataclass(frozen=True)
class Media:
    """Device media variants such as ``print`` or ``motion-reduce``."""

    kind: ClassVar[VariantKind] = VariantKind.MEDIA

    name: str


@dataclass(frozen=True)
class ArbitrarySelector:
    """``[&>*]:`` -- a selector template where ``&`` is the element."""

    kind: ClassVar[VariantKind] = VariantKind.SELECTOR

    selector: str


Variant = Union[Responsive, State, Dark, Container, Media, ArbitrarySelector]


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NamedValue:
    """A keyword or scale step (``""`` for bare utilities)."""

    key: str


@dataclass(frozen=True)
class ColorValue:
    """A palette colour; *shade* is ``"DEFAULT"`` for single colours."""

    name: str
    shade: str = "DEFAULT"

    @property
    def label(self) -> str:
        return self.name if self.shade == "DEFAULT" else f"{self.name}-{self.shade}"


@dataclass(frozen=True)
class ArbitraryValue:
    """The raw content of ``[...]`` (type hint removed, not yet decoded)."""

    literal: str


TokenValue = Union[NamedValue, ColorValue, ArbitraryValue]


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassToken:
    """One parsed class string.

    ``definition`` is the immutable registry entry the base utility resolved
    to; the token keeps no reference to the registry itself.
    """

    raw: str
    variants: tuple[Variant, ...]
    utility: str
    definition: UtilityDefinition
    value: TokenValue | None = None
    opacity: str | None = None
    important: bool = False
    negative: bool = False

    @property
    def variant_kinds(self) -> tuple[VariantKind, ...]:
        return tuple(v.kind for v in self.variants)

    @property
    def properties(self) -> tuple[str, ...]:
        return self.definition.properties
