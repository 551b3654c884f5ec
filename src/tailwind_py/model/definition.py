"""Utility definitions and their closed set of value spaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union


@dataclass(frozen=True)
class Keyword:
    """A fixed set of names, each mapped to its CSS literal.

    The empty name ``""`` stands for the bare utility (``flex``, ``border``).
    """

    values: Mapping[str, str]

    @property
    def allowed(self) -> frozenset[str]:
        return frozenset(self.values)


@dataclass(frozen=True)
class Scale:
    """A theme scale: step name -> literal (``"4" -> "1rem"``)."""

    steps: Mapping[str, str]


@dataclass(frozen=True)
class Color:
    """A colour palette: palette name -> shade -> literal."""

    palette: Mapping[str, Mapping[str, str]]
    opacity_capable: bool = True


@dataclass(frozen=True)
class Arbitrary:
    """Only bracketed values are accepted, written to *property* as-is."""

    property: str


ValueSpace = Union[Keyword, Scale, Color, Arbitrary]


@dataclass(frozen=True)
class UtilityDefinition:
    """One registry entry.

    Attributes:
        name: The registry key.  For prefix utilities the value follows
            after a dash (``p`` matches ``p-4``); exact utilities match the
            whole base name only (``flex``, ``border-collapse``).
        properties: CSS properties that receive the resolved literal.
        value_space: How the value part of a class is interpreted.
        negative: Whether a leading ``-`` is accepted.
        arbitrary: The data type accepted inside ``[...]`` (``"any"``,
            ``"color"``, ``"length"``, ``"image"``) or ``None`` when bracketed
            values are not accepted.
        template: Declaration value with ``{}`` standing for the literal.
        exact: True for exact-literal utilities.
        order: Registration index, used to order rules inside a group.
    """

    name: str
    properties: tuple[str, ...]
    value_space: ValueSpace
    negative: bool = False
    arbitrary: str | None = "any"
    template: str = "{}"
    exact: bool = False
    order: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("UtilityDefinition name must be a non-empty string")
        if not self.properties:
            raise ValueError(f"UtilityDefinition {self.name!r} needs at least one property")

    @property
    def is_color(self) -> bool:
        return isinstance(self.value_space, Color)

    def render(self, literal: str) -> str:
        """Place *literal* into this definition's template."""
        return self.template.replace("{}", literal)
