"""Tokenizer: raw class string -> ``ClassToken``.

The tokenizer only identifies things.  It splits the variant chain, reads
the ``!``/``-``/``/NN`` modifiers and asks the registry which definition
owns the base utility; turning values into CSS is the rule builder's job.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable

from tailwind_py.config import ThemeConfig
from tailwind_py.errors import (
    AmbiguousDuplicateVariant,
    EmptyClassString,
    InvalidOpacityModifier,
    MalformedArbitraryValue,
    UnbalancedBracket,
    UnknownUtility,
)
from tailwind_py.model.token import (
    SINGLE_INSTANCE_KINDS,
    ArbitraryValue,
    ClassToken,
    ColorValue,
    Variant,
)
from tailwind_py.parser.variants import parse_variant

if TYPE_CHECKING:
    from tailwind_py.model.definition import UtilityDefinition
    from tailwind_py.registry import Resolution, UtilityRegistry

_OPACITY_RE = re.compile(r"^\d+(?:\.\d+)?$")
_PROPERTY_RE = re.compile(r"^(?:--[A-Za-z0-9_-]+|-?[a-z][a-z0-9-]*)$")

# Colour keywords that cannot be blended with an alpha channel.
_NON_BLENDABLE = frozenset({"inherit", "initial", "unset", "revert", "revert-layer"})


def split_segments(raw: str) -> list[str]:
    """Split *raw* on ``:`` outside brackets.

    A backslash escapes the next character.

    Raises:
        UnbalancedBracket: A ``]`` closes nothing or a ``[`` is never closed.
    """
    segments: list[str] = []
    depth = 0
    start = 0
    index = 0
    while index < len(raw):
        char = raw[index]
        if char == "\\":
            index += 2
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                raise UnbalancedBracket(raw)
        elif char == ":" and depth == 0:
            segments.append(raw[start:index])
            start = index + 1
        index += 1
    if depth != 0:
        raise UnbalancedBracket(raw)
    segments.append(raw[start:])
    return segments


def _split_opacity(expr: str) -> tuple[str, str] | None:
    """Split ``bg-blue-500/50`` at its last ``/`` outside brackets."""
    depth = 0
    for index in range(len(expr) - 1, -1, -1):
        char = expr[index]
        if char == "]":
            depth += 1
        elif char == "[":
            depth -= 1
        elif char == "/" and depth == 0:
            return expr[:index], expr[index + 1 :]
    return None


class Tokenizer:
    """Parses class strings against one registry.

    Parsing is a pure function of the string and the registry, so a
    tokenizer can be shared freely between threads.
    """

    def __init__(self, registry: UtilityRegistry, config: ThemeConfig | None = None) -> None:
        self.registry = registry
        self.config = config or registry.config or ThemeConfig()

    def parse(
        self,
        raw: str,
        *,
        lookup: Callable[[str], UtilityDefinition | None] | None = None,
    ) -> ClassToken:
        """Parse one class string.

        *lookup* maps a base name to its definition (a memo such as
        ``TokenCache.get_or_insert_definition``); the registry is asked
        directly when it is None.

        Raises:
            ClassError: One of its subclasses, describing why *raw* is not a
                valid class.
        """
        raw = raw.strip()
        if not raw:
            raise EmptyClassString(raw)
        segments = split_segments(raw)
        expr = segments.pop()
        variants = self._variants(segments, raw)

        important = False
        if expr.endswith("!"):
            important, expr = True, expr[:-1]
        elif expr.startswith("!"):
            important, expr = True, expr[1:]
        if not expr:
            raise EmptyClassString(raw)

        if expr[0] == "[" and expr[-1] == "]":
            return self._arbitrary_property(raw, expr, variants, important)

        utility = expr
        negative = False
        if expr.startswith("-"):
            negative, expr = True, expr[1:]
            if not expr:
                raise EmptyClassString(raw)

        resolution = self._resolve(expr, negative, lookup)
        if resolution is not None:
            return self._token(raw, variants, expr, resolution, None, important, negative)

        split = _split_opacity(expr)
        if split is not None:
            head, opacity = split
            resolution = self._resolve(head, negative, lookup)
            if resolution is not None:
                self._check_opacity(raw, resolution, opacity)
                return self._token(raw, variants, head, resolution, opacity, important, negative)

        raise UnknownUtility(utility, raw=raw)

    __call__ = parse

    # --- pieces -----------------------------------------------------------------

    def _resolve(
        self,
        base: str,
        negative: bool,
        lookup: Callable[[str], UtilityDefinition | None] | None,
    ) -> Resolution | None:
        if lookup is not None:
            definition = lookup(base)
            if definition is None:
                return None
            resolution = self.registry.resolve_with(definition, base, negative=negative)
            if resolution is not None:
                return resolution
        return self.registry.resolve(base, negative=negative)

    def _variants(self, segments: list[str], raw: str) -> tuple[Variant, ...]:
        variants: list[Variant] = []
        for segment in segments:
            if not segment:
                raise EmptyClassString(raw)
            variant = parse_variant(segment, self.config, raw=raw)
            for seen in variants:
                if seen.kind is not variant.kind:
                    continue
                if seen.kind in SINGLE_INSTANCE_KINDS or seen == variant:
                    raise AmbiguousDuplicateVariant(variant.kind.value, raw=raw)
            variants.append(variant)
        return tuple(variants)

    def _arbitrary_property(
        self, raw: str, expr: str, variants: tuple[Variant, ...], important: bool
    ) -> ClassToken:
        prop, sep, value = expr[1:-1].partition(":")
        if not sep or not _PROPERTY_RE.match(prop):
            raise MalformedArbitraryValue(expr, raw=raw, reason="expected [property:value]")
        return ClassToken(
            raw=raw,
            variants=variants,
            utility=expr,
            definition=self.registry.arbitrary_property(prop),
            value=ArbitraryValue(value),
            important=important,
        )

    def _check_opacity(self, raw: str, resolution: Resolution, opacity: str) -> None:
        definition = resolution.definition
        if not definition.is_color or not definition.value_space.opacity_capable:
            raise InvalidOpacityModifier(raw, reason=f"{definition.name!r} is not a colour utility")
        if not _OPACITY_RE.match(opacity) or float(opacity) > 100:
            raise InvalidOpacityModifier(raw, reason="opacity must be a number from 0 to 100")
        value = resolution.value
        if isinstance(value, ColorValue):
            literal = definition.value_space.palette[value.name][value.shade]
            if literal.lower() in _NON_BLENDABLE:
                raise InvalidOpacityModifier(raw, reason=f"{value.label!r} has no alpha channel")

    def _token(
        self,
        raw: str,
        variants: tuple[Variant, ...],
        utility: str,
        resolution: Resolution,
        opacity: str | None,
        important: bool,
        negative: bool,
    ) -> ClassToken:
        return ClassToken(
            raw=raw,
            variants=variants,
            utility=utility,
            definition=resolution.definition,
            value=resolution.value,
            opacity=opacity,
            important=important,
            negative=negative,
        )
