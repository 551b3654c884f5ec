"""Variant vocabulary and parsing of single variant segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tailwind_py.errors import MalformedArbitraryValue, UnknownVariant
from tailwind_py.model.token import (
    ArbitrarySelector,
    Container,
    Dark,
    Media,
    Responsive,
    State,
    Variant,
)
from tailwind_py.parser.arbitrary import decode_arbitrary

if TYPE_CHECKING:
    from tailwind_py.config import ThemeConfig

PSEUDO_CLASSES: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-visible": ":focus-visible",
    "focus-within": ":focus-within",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "required": ":required",
    "optional": ":optional",
    "valid": ":valid",
    "invalid": ":invalid",
    "read-only": ":read-only",
    "placeholder-shown": ":placeholder-shown",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "empty": ":empty",
}

PSEUDO_ELEMENTS: dict[str, str] = {
    "placeholder": "::placeholder",
    "before": "::before",
    "after": "::after",
    "selection": "::selection",
    "marker": "::marker",
    "file": "::file-selector-button",
    "first-line": "::first-line",
    "first-letter": "::first-letter",
}

MEDIA_VARIANTS: dict[str, str] = {
    "motion-safe": "(prefers-reduced-motion: no-preference)",
    "motion-reduce": "(prefers-reduced-motion: reduce)",
    "print": "print",
    "portrait": "(orientation: portrait)",
    "landscape": "(orientation: landscape)",
    "contrast-more": "(prefers-contrast: more)",
    "contrast-less": "(prefers-contrast: less)",
    "pointer-fine": "(pointer: fine)",
    "pointer-coarse": "(pointer: coarse)",
}


def state_selector(name: str) -> str:
    """Selector template for a state variant; ``&`` is the utility's selector."""
    if name in PSEUDO_CLASSES:
        return f"&{PSEUDO_CLASSES[name]}"
    if name in PSEUDO_ELEMENTS:
        return f"&{PSEUDO_ELEMENTS[name]}"
    if name.startswith("group-"):
        return f".group{PSEUDO_CLASSES[name[6:]]} &"
    if name.startswith("peer-"):
        return f".peer{PSEUDO_CLASSES[name[5:]]} ~ &"
    raise KeyError(name)


def is_state(name: str) -> bool:
    if name in PSEUDO_CLASSES or name in PSEUDO_ELEMENTS:
        return True
    for prefix in ("group-", "peer-"):
        if name.startswith(prefix) and name[len(prefix) :] in PSEUDO_CLASSES:
            return True
    return False


def _bracketed(text: str) -> str | None:
    if len(text) >= 2 and text[0] == "[" and text[-1] == "]":
        return text[1:-1]
    return None


def _container(segment: str, config: ThemeConfig, raw: str) -> Container:
    body = segment[1:]
    name: str | None = None
    if "/" in body and not body.endswith("]"):
        body, _, name = body.rpartition("/")
        if not name:
            raise UnknownVariant(segment, raw=raw)
    inner = _bracketed(body)
    if inner is not None:
        return Container(decode_arbitrary(inner, raw=raw), name=name, label=body)
    if body in config.containers:
        return Container(config.containers[body], name=name, label=body)
    raise UnknownVariant(segment, raw=raw)


def _selector(inner: str, raw: str) -> ArbitrarySelector:
    selector = decode_arbitrary(inner, raw=raw)
    if "&" not in selector:
        raise MalformedArbitraryValue(inner, raw=raw, reason="selector variant needs '&'")
    return ArbitrarySelector(selector)


def parse_variant(segment: str, config: ThemeConfig, *, raw: str = "") -> Variant:
    """Turn one ``segment:`` of a class string into a variant tag.

    Raises:
        UnknownVariant: The segment names no known variant.
        MalformedArbitraryValue: A bracketed part could not be decoded.
    """
    raw = raw or segment
    if segment in config.breakpoints:
        return Responsive(segment, config.breakpoints[segment])
    if segment == "dark":
        return Dark()
    if is_state(segment):
        return State(segment)
    if segment in MEDIA_VARIANTS:
        return Media(segment)
    if segment.startswith("min-"):
        inner = _bracketed(segment[4:])
        if inner is not None:
            return Responsive(segment, decode_arbitrary(inner, raw=raw))
    if segment.startswith("@") and len(segment) > 1:
        return _container(segment, config, raw)
    inner = _bracketed(segment)
    if inner is not None:
        return _selector(inner, raw)
    raise UnknownVariant(segment, raw=raw)
