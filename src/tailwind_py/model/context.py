"""Wrapping contexts: the ordered selector/at-rule layers around a rule."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class ContextCategory(StrEnum):
    """Cascade-priority classes used to order rule groups."""

    BASE = "base"
    RESPONSIVE = "responsive"
    STATE = "state"
    CONTAINER = "container"


@dataclass(frozen=True)
class MediaLayer:
    """An ``@media`` predicate; *min_width* is set for responsive breakpoints."""

    query: str
    min_width: str | None = None

    @property
    def prelude(self) -> str:
        return f"@media {self.query}"


@dataclass(frozen=True)
class ContainerLayer:
    """An ``@container`` predicate, optionally bound to a named container."""

    min_width: str
    name: str | None = None

    @property
    def query(self) -> str:
        return f"(min-width: {self.min_width})"

    @property
    def prelude(self) -> str:
        if self.name:
            return f"@container {self.name} {self.query}"
        return f"@container {self.query}"


@dataclass(frozen=True)
class SelectorLayer:
    """A selector template; ``&`` stands for the selector being wrapped.

    ``"&:hover"`` appends a pseudo-class, ``".dark &"`` adds an ancestor.
    """

    template: str

    def apply(self, selector: str) -> str:
        return self.template.replace("&", selector)


Layer = Union[MediaLayer, ContainerLayer, SelectorLayer]


@dataclass(frozen=True)
class WrappingContext:
    """Ordered layers derived from a variant chain, outermost first.

    Contexts are hashable and compare structurally, so rules can be grouped
    by context.
    """

    layers: tuple[Layer, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.layers

    def arrange(self, selector: str) -> tuple[tuple[str, ...], str, tuple[str, ...]]:
        """Lay out *selector* inside this context.

        Returns ``(outer, selector, inner)``: at-rule preludes that wrap the
        style rule, the final style-rule selector, and the frames nested
        inside the style rule.  Selector layers fold into the selector until
        an at-rule follows one of them; from that point on every layer nests
        inside the rule, which keeps the authoring order visible in the CSS.
        """
        outer: list[str] = []
        inner: list[str] = []
        touched = False
        nesting = False
        for layer in self.layers:
            if isinstance(layer, SelectorLayer):
                if nesting:
                    inner.append(layer.template)
                else:
                    selector = layer.apply(selector)
                    touched = True
            elif touched:
                nesting = True
                inner.append(layer.prelude)
            else:
                outer.append(layer.prelude)
        return tuple(outer), selector, tuple(inner)

    @property
    def outer_preludes(self) -> tuple[str, ...]:
        return self.arrange("&")[0]

    def describe(self) -> str:
        """One-line text form, also used as the final ordering tie-breaker."""
        parts: list[str] = []
        for layer in self.layers:
            if isinstance(layer, SelectorLayer):
                parts.append(layer.template)
            else:
                parts.append(layer.prelude)
        return " > ".join(parts)
