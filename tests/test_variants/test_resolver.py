"""Tests for variant resolution and wrapping contexts."""

import pytest

from tailwind_py.config import DarkMode, ThemeConfig
from tailwind_py.model.context import (
    ContainerLayer,
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
)
from tailwind_py.variants import VariantResolver


@pytest.fixture
def resolver():
    return VariantResolver(ThemeConfig())


class TestLayers:
    def test_responsive(self, resolver):
        layer = resolver.layer(Responsive("md", "768px"))
        assert layer == MediaLayer("(min-width: 768px)", min_width="768px")
        assert layer.prelude == "@media (min-width: 768px)"

    def test_state(self, resolver):
        assert resolver.layer(State("hover")) == SelectorLayer("&:hover")
        assert resolver.layer(State("first")) == SelectorLayer("&:first-child")
        assert resolver.layer(State("before")) == SelectorLayer("&::before")

    def test_group_and_peer(self, resolver):
        assert resolver.layer(State("group-hover")) == SelectorLayer(".group:hover &")
        assert resolver.layer(State("peer-checked")) == SelectorLayer(".peer:checked ~ &")

    def test_dark_class_strategy(self, resolver):
        assert resolver.layer(Dark()) == SelectorLayer(".dark &")

    def test_dark_custom_class(self):
        resolver = VariantResolver(ThemeConfig(dark_class="night"))
        assert resolver.layer(Dark()) == SelectorLayer(".night &")

    def test_dark_media_strategy(self):
        resolver = VariantResolver(ThemeConfig(dark_mode=DarkMode.MEDIA))
        assert resolver.layer(Dark()) == MediaLayer("(prefers-color-scheme: dark)")

    def test_container(self, resolver):
        layer = resolver.layer(Container("768px", "sidebar", "md"))
        assert layer == ContainerLayer("768px", name="sidebar")
        assert layer.prelude == "@container sidebar (min-width: 768px)"

    def test_unnamed_container(self, resolver):
        assert resolver.layer(Container("400px")).prelude == "@container (min-width: 400px)"

    def test_media(self, resolver):
        assert resolver.layer(Media("print")) == MediaLayer("print")

    def test_arbitrary_selector(self, resolver):
        assert resolver.layer(ArbitrarySelector("&>*")) == SelectorLayer("&>*")


class TestResolve:
    def test_empty_chain(self, resolver):
        context = resolver.resolve(())
        assert context.is_empty
        assert context == WrappingContext()

    def test_equal_chains_give_equal_hashable_contexts(self, resolver):
        chain = (Responsive("md", "768px"), State("hover"))
        first = resolver.resolve(chain)
        second = resolver.resolve(list(chain))
        assert first == second
        assert hash(first) == hash(second)

    def test_authoring_order_is_nesting_order(self, resolver):
        media_first = resolver.resolve((Responsive("md", "768px"), State("hover")))
        state_first = resolver.resolve((State("hover"), Responsive("md", "768px")))
        assert media_first != state_first
        assert media_first.layers[0] == state_first.layers[1]


# ---------------------------------------------------------------------------
# WrappingContext.arrange
# ---------------------------------------------------------------------------


class TestArrange:
    def test_media_outside_selector(self):
        context = WrappingContext((MediaLayer("(min-width: 768px)", "768px"), SelectorLayer("&:hover")))
        outer, selector, inner = context.arrange(".x")
        assert outer == ("@media (min-width: 768px)",)
        assert selector == ".x:hover"
        assert inner == ()

    def test_selector_then_media_nests(self):
        context = WrappingContext((SelectorLayer("&:hover"), MediaLayer("(min-width: 768px)", "768px")))
        outer, selector, inner = context.arrange(".x")
        assert outer == ()
        assert selector == ".x:hover"
        assert inner == ("@media (min-width: 768px)",)

    def test_selectors_fold_in_order(self):
        context = WrappingContext((SelectorLayer(".dark &"), SelectorLayer("&:hover")))
        assert context.arrange(".x")[1] == ".dark .x:hover"

    def test_describe(self):
        context = WrappingContext((MediaLayer("print"), SelectorLayer("&:focus")))
        assert context.describe() == "@media print > &:focus"
