"""Matching a utility's value part against a definition's value space."""

from __future__ import annotations

import re

from tailwind_py.model.definition import Arbitrary, Color, Keyword, Scale, UtilityDefinition
from tailwind_py.model.token import ArbitraryValue, ColorValue, NamedValue, TokenValue
from tailwind_py.units import is_numeric_literal

# Type hints accepted as ``[hint:value]`` and the arbitrary type they select.
TYPE_HINTS: dict[str, str] = {
    "color": "color",
    "length": "length",
    "percentage": "length",
    "number": "length",
    "image": "image",
    "url": "image",
    "any": "any",
}

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_COLOR_FUNCS = ("rgb(", "rgba(", "hsl(", "hsla(", "hwb(", "lab(", "lch(", "oklab(", "oklch(", "color(", "color-mix(")
_COLOR_WORDS = frozenset({"transparent", "currentcolor"})
_IMAGE_FUNCS = ("url(", "image(", "image-set(", "cross-fade(")
_LENGTH_FUNCS = ("calc(", "min(", "max(", "clamp(")


def looks_like_color(value: str) -> bool:
    lowered = value.lower()
    return (
        bool(_HEX_RE.match(value))
        or lowered.startswith(_COLOR_FUNCS)
        or lowered in _COLOR_WORDS
    )


def looks_like_image(value: str) -> bool:
    lowered = value.lower()
    return lowered.startswith(_IMAGE_FUNCS) or "gradient(" in lowered


def infer_type(value: str) -> str:
    """Best-effort data type of an arbitrary value.

    ``"any"`` means the value (a ``var()`` reference, say) is acceptable to
    every typed utility, and ``"other"`` that only untyped utilities take it.
    """
    if value.startswith("var("):
        return "any"
    if looks_like_color(value):
        return "color"
    if looks_like_image(value):
        return "image"
    if is_numeric_literal(value) or value.lower().startswith(_LENGTH_FUNCS):
        return "length"
    return "other"


def split_type_hint(inner: str) -> tuple[str | None, str]:
    """Split ``color:#fff`` into ``("color", "#fff")``; unknown hints stay in the value."""
    head, sep, tail = inner.partition(":")
    if sep and head in TYPE_HINTS:
        return TYPE_HINTS[head], tail
    return None, inner


def match_arbitrary(definition: UtilityDefinition, inner: str) -> ArbitraryValue | None:
    accepted = definition.arbitrary
    if accepted is None:
        return None
    hint, literal = split_type_hint(inner)
    if accepted == "any":
        return ArbitraryValue(literal)
    kind = hint or infer_type(literal)
    if kind in (accepted, "any"):
        return ArbitraryValue(literal)
    return None


def match_color(palette, value: str) -> ColorValue | None:
    shades = palette.get(value)
    if shades is not None and "DEFAULT" in shades:
        return ColorValue(value)
    name, sep, shade = value.rpartition("-")
    if sep and name in palette and shade in palette[name]:
        return ColorValue(name, shade)
    return None


def match_value(definition: UtilityDefinition, remainder: str | None) -> TokenValue | None:
    """Interpret *remainder* (the text after ``name-``) under *definition*.

    ``None`` means the class named the utility with no value at all; that
    matches a keyword ``""`` entry or a scale's ``DEFAULT`` step.
    """
    space = definition.value_space
    if remainder is None:
        if isinstance(space, Keyword) and "" in space.values:
            return NamedValue("")
        if isinstance(space, Scale) and "DEFAULT" in space.steps:
            return NamedValue("DEFAULT")
        return None
    if len(remainder) >= 2 and remainder[0] == "[" and remainder[-1] == "]":
        return match_arbitrary(definition, remainder[1:-1])
    if isinstance(space, Keyword):
        return NamedValue(remainder) if remainder and remainder in space.values else None
    if isinstance(space, Scale):
        return NamedValue(remainder) if remainder in space.steps else None
    if isinstance(space, Color):
        return match_color(space.palette, remainder)
    if isinstance(space, Arbitrary):
        return None
    raise TypeError(f"Unsupported value space: {space!r}")


def named_literal(definition: UtilityDefinition, value: NamedValue) -> str:
    space = definition.value_space
    if isinstance(space, Keyword):
        return space.values[value.key]
    if isinstance(space, Scale):
        return space.steps[value.key]
    raise TypeError(f"{definition.name!r} has no named values")


def accepts_negative(definition: UtilityDefinition, value: TokenValue) -> bool:
    """Negation needs a negatable utility and a numeric (or arbitrary) value."""
    if not definition.negative:
        return False
    if isinstance(value, ArbitraryValue):
        return True
    if isinstance(value, NamedValue):
        return is_numeric_literal(named_literal(definition, value))
    return False
