"""Variant resolver: variant chain -> wrapping context."""

from __future__ import annotations

from typing import Iterable

from tailwind_py.config import DarkMode, ThemeConfig
from tailwind_py.model.context import (
    ContainerLayer,
    Layer,
    MediaLayer,
    SelectorLayer,
    WrappingContext,
)
from tailwind_py.model.token import (
    ArbitrarySelector,
    Container,
    Dark,
    Media,
    Responsive,
    State,
    Variant,
)
from tailwind_py.parser.variants import MEDIA_VARIANTS, state_selector


class VariantResolver:
    """Maps each variant to one layer, keeping authoring order.

    The first variant in the class string becomes the outermost layer, so
    ``md:hover:x`` is a ``:hover`` rule inside a media query while
    ``hover:md:x`` is a media query nested inside the ``:hover`` rule.
    """

    def __init__(self, config: ThemeConfig | None = None) -> None:
        self.config = config or ThemeConfig()

    def resolve(self, variants: Iterable[Variant]) -> WrappingContext:
        return WrappingContext(tuple(self.layer(v) for v in variants))

    __call__ = resolve

    def layer(self, variant: Variant) -> Layer:
        if isinstance(variant, Responsive):
            return MediaLayer(f"(min-width: {variant.min_width})", min_width=variant.min_width)
        if isinstance(variant, State):
            return SelectorLayer(state_selector(variant.name))
        if isinstance(variant, Dark):
            if self.config.dark_mode is DarkMode.MEDIA:
                return MediaLayer("(prefers-color-scheme: dark)")
            return SelectorLayer(f".{self.config.dark_class} &")
        if isinstance(variant, Container):
            return ContainerLayer(variant.size, name=variant.name)
        if isinstance(variant, Media):
            return MediaLayer(MEDIA_VARIANTS[variant.name])
        if isinstance(variant, ArbitrarySelector):
            return SelectorLayer(variant.selector)
        raise TypeError(f"Unsupported variant: {variant!r}")
