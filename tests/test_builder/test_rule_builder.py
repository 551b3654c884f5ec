"""Tests for the rule builder, colour helpers and selector escaping."""

import pytest

from tailwind_py.builder import RuleBuilder, escape_class, parse_hex, with_opacity
from tailwind_py.errors import MalformedArbitraryValue
from tailwind_py.model.context import MediaLayer, SelectorLayer, WrappingContext
from tailwind_py.parser import Tokenizer
from tailwind_py.registry import UtilityRegistry
from tailwind_py.units import negate_literal, to_px


@pytest.fixture(scope="module")
def tokenizer():
    return Tokenizer(UtilityRegistry.from_config())


@pytest.fixture(scope="module")
def builder():
    return RuleBuilder()


def _build(tokenizer, builder, raw, context=None):
    token = tokenizer.parse(raw)
    return builder.build(token.definition, token, context)


# ---------------------------------------------------------------------------
# Golden table: class -> declarations
# ---------------------------------------------------------------------------


GOLDEN = [
    ("p-4", {"padding": "1rem"}),
    ("px-2", {"padding-left": "0.5rem", "padding-right": "0.5rem"}),
    ("pt-px", {"padding-top": "1px"}),
    ("m-auto", {"margin": "auto"}),
    ("-mt-2", {"margin-top": "-0.5rem"}),
    ("-m-0", {"margin": "0px"}),
    ("gap-x-3", {"column-gap": "0.75rem"}),
    ("w-1/2", {"width": "50%"}),
    ("w-1/3", {"width": "33.333333%"}),
    ("w-full", {"width": "100%"}),
    ("h-screen", {"height": "100vh"}),
    ("size-8", {"width": "2rem", "height": "2rem"}),
    ("max-w-md", {"max-width": "28rem"}),
    ("max-w-screen-lg", {"max-width": "1024px"}),
    ("inset-x-0", {"left": "0px", "right": "0px"}),
    ("-top-1/2", {"top": "-50%"}),
    ("z-10", {"z-index": "10"}),
    ("-z-10", {"z-index": "-10"}),
    ("block", {"display": "block"}),
    ("hidden", {"display": "none"}),
    ("flex", {"display": "flex"}),
    ("flex-1", {"flex": "1 1 0%"}),
    ("flex-col", {"flex-direction": "column"}),
    ("grow", {"flex-grow": "1"}),
    ("grid-cols-3", {"grid-template-columns": "repeat(3, minmax(0, 1fr))"}),
    ("col-span-2", {"grid-column": "span 2 / span 2"}),
    ("justify-between", {"justify-content": "space-between"}),
    ("items-center", {"align-items": "center"}),
    ("rounded", {"border-radius": "0.25rem"}),
    ("rounded-lg", {"border-radius": "0.5rem"}),
    ("rounded-t-md", {"border-top-left-radius": "0.375rem", "border-top-right-radius": "0.375rem"}),
    ("border", {"border-width": "1px"}),
    ("border-2", {"border-width": "2px"}),
    ("border-t-4", {"border-top-width": "4px"}),
    ("border-x", {"border-left-width": "1px", "border-right-width": "1px"}),
    ("border-red-500", {"border-color": "#ef4444"}),
    ("border-dashed", {"border-style": "dashed"}),
    ("border-collapse", {"border-collapse": "collapse"}),
    ("bg-blue-500", {"background-color": "#3b82f6"}),
    ("bg-white", {"background-color": "#ffffff"}),
    ("bg-current", {"background-color": "currentColor"}),
    ("bg-none", {"background-image": "none"}),
    ("text-center", {"text-align": "center"}),
    ("text-lg", {"font-size": "1.125rem"}),
    ("text-gray-900", {"color": "#111827"}),
    ("font-bold", {"font-weight": "700"}),
    ("leading-tight", {"line-height": "1.25"}),
    ("tracking-wide", {"letter-spacing": "0.025em"}),
    ("-tracking-wide", {"letter-spacing": "-0.025em"}),
    ("italic", {"font-style": "italic"}),
    ("underline", {"text-decoration-line": "underline"}),
    ("uppercase", {"text-transform": "uppercase"}),
    ("whitespace-nowrap", {"white-space": "nowrap"}),
    ("opacity-50", {"opacity": "0.5"}),
    ("cursor-pointer", {"cursor": "pointer"}),
    ("select-none", {"user-select": "none"}),
    ("outline-2", {"outline-width": "2px"}),
    ("accent-pink-500", {"accent-color": "#ec4899"}),
    ("translate-x-4", {"transform": "translateX(1rem)"}),
    ("-translate-x-4", {"transform": "translateX(-1rem)"}),
    ("-translate-y-1/2", {"transform": "translateY(-50%)"}),
    ("shadow", {"box-shadow": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)"}),
    ("shadow-md", {"box-shadow": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)"}),
    ("shadow-none", {"box-shadow": "0 0 #0000"}),
    ("ring", {"box-shadow": "0 0 0 3px var(--tw-ring-color, rgb(59 130 246 / 0.5))"}),
    ("ring-2", {"box-shadow": "0 0 0 2px var(--tw-ring-color, rgb(59 130 246 / 0.5))"}),
    ("ring-blue-500", {"--tw-ring-color": "#3b82f6"}),
    ("transition", {
        "transition-property": (
            "color, background-color, border-color, text-decoration-color, fill, stroke, "
            "opacity, box-shadow, transform, filter, backdrop-filter"
        )
    }),
    ("transition-colors", {
        "transition-property": (
            "color, background-color, border-color, text-decoration-color, fill, stroke"
        )
    }),
    ("duration-300", {"transition-duration": "300ms"}),
    ("delay-150", {"transition-delay": "150ms"}),
    ("ease-in-out", {"transition-timing-function": "cubic-bezier(0.4, 0, 0.2, 1)"}),
    ("rotate-45", {"rotate": "45deg"}),
    ("-rotate-90", {"rotate": "-90deg"}),
    ("rotate-[17deg]", {"rotate": "17deg"}),
    ("scale-150", {"scale": "1.5"}),
    ("scale-x-50", {"scale": "0.5 1"}),
    ("-skew-x-12", {"transform": "skewX(-12deg)"}),
    ("origin-top-right", {"transform-origin": "top right"}),
    ("blur", {"filter": "blur(8px)"}),
    ("blur-sm", {"filter": "blur(4px)"}),
    ("blur-[2px]", {"filter": "blur(2px)"}),
    ("grayscale", {"filter": "grayscale(100%)"}),
    ("brightness-125", {"filter": "brightness(1.25)"}),
    ("backdrop-blur-md", {"backdrop-filter": "blur(12px)"}),
    ("bg-gradient-to-r", {
        "background-image": (
            "linear-gradient(to right, var(--tw-gradient-from, transparent), "
            "var(--tw-gradient-to, transparent))"
        )
    }),
    ("from-blue-500", {"--tw-gradient-from": "#3b82f6"}),
    ("to-pink-500", {"--tw-gradient-to": "#ec4899"}),
    ("table-fixed", {"table-layout": "fixed"}),
    ("table-cell", {"display": "table-cell"}),
    ("border-spacing-2", {"border-spacing": "0.5rem"}),
    ("columns-3", {"columns": "3"}),
    ("columns-xs", {"columns": "20rem"}),
    ("w-[13px]", {"width": "13px"}),
    ("w-[calc(100%_-_2rem)]", {"width": "calc(100% - 2rem)"}),
    ("-m-[3px]", {"margin": "-3px"}),
    ("-m-[var(--gap)]", {"margin": "calc(var(--gap) * -1)"}),
    ("grid-cols-[200px_1fr]", {"grid-template-columns": "200px 1fr"}),
    ("text-[13px]", {"font-size": "13px"}),
    ("text-[#bada55]", {"color": "#bada55"}),
    ("bg-[url(/a_b.png)]", {"background-image": "url(/a_b.png)"}),
    ("[mask-type:luminance]", {"mask-type": "luminance"}),
    ("[--brand:#123456]", {"--brand": "#123456"}),
]


class TestGolden:
    @pytest.mark.parametrize("raw, declarations", GOLDEN, ids=[g[0] for g in GOLDEN])
    def test_declarations(self, tokenizer, builder, raw, declarations):
        rule = _build(tokenizer, builder, raw)
        assert rule.declarations == declarations

    def test_deterministic_across_runs(self, tokenizer, builder):
        first = [_build(tokenizer, builder, raw) for raw, _ in GOLDEN]
        second = [_build(tokenizer, builder, raw) for raw, _ in GOLDEN]
        assert first == second


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class TestModifiers:
    def test_hex_colour_with_opacity(self, tokenizer, builder):
        rule = _build(tokenizer, builder, "bg-blue-500/50")
        assert rule.declarations == {"background-color": "rgb(59 130 246 / 50%)"}

    def test_keyword_colour_with_opacity(self, tokenizer, builder):
        rule = _build(tokenizer, builder, "text-current/25")
        assert rule.declarations == {"color": "color-mix(in srgb, currentColor 25%, transparent)"}

    def test_arbitrary_colour_with_opacity(self, tokenizer, builder):
        rule = _build(tokenizer, builder, "bg-[#f00]/10")
        assert rule.declarations == {"background-color": "rgb(255 0 0 / 10%)"}

    def test_ring_colour_with_opacity(self, tokenizer, builder):
        rule = _build(tokenizer, builder, "ring-blue-500/50")
        assert rule.declarations == {"--tw-ring-color": "rgb(59 130 246 / 50%)"}

    def test_important(self, tokenizer, builder):
        rule = _build(tokenizer, builder, "p-4!")
        assert rule.declarations == {"padding": "1rem !important"}

    def test_important_on_every_property(self, tokenizer, builder):
        rule = _build(tokenizer, builder, "!mx-2")
        assert set(rule.declarations.values()) == {"0.5rem !important"}

    def test_malformed_arbitrary_rejected(self, tokenizer, builder):
        with pytest.raises(MalformedArbitraryValue) as info:
            _build(tokenizer, builder, "w-[1px;color:red]")
        assert info.value.raw == "w-[1px;color:red]"

    def test_empty_arbitrary_rejected(self, tokenizer, builder):
        with pytest.raises(MalformedArbitraryValue):
            _build(tokenizer, builder, "w-[]")

    def test_rule_order_is_definition_order(self, tokenizer, builder):
        assert _build(tokenizer, builder, "p-4").order < _build(tokenizer, builder, "bg-red-500").order

    def test_source_is_raw_class(self, tokenizer, builder):
        assert _build(tokenizer, builder, "p-4").source == "p-4"


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_plain(self, tokenizer, builder):
        assert _build(tokenizer, builder, "p-4").selector == ".p-4"

    def test_state_context(self, tokenizer, builder):
        context = WrappingContext((SelectorLayer("&:hover"),))
        rule = _build(tokenizer, builder, "hover:bg-blue-600", context)
        assert rule.selector == ".hover\\:bg-blue-600:hover"
        assert rule.context == context

    def test_nested_frames(self, tokenizer, builder):
        context = WrappingContext((SelectorLayer("&:hover"), MediaLayer("(min-width: 768px)", "768px")))
        rule = _build(tokenizer, builder, "hover:md:p-4", context)
        assert rule.nested == ("@media (min-width: 768px)",)

    @pytest.mark.parametrize(
        "name, escaped",
        [
            ("md:p-8", "md\\:p-8"),
            ("w-[13px]", "w-\\[13px\\]"),
            ("w-1/2", "w-1\\/2"),
            ("p-0.5", "p-0\\.5"),
            ("2xl:p-4", "\\32 xl\\:p-4"),
            ("-mt-2", "-mt-2"),
            ("p-4!", "p-4\\!"),
            ("[&>*]:p-4", "\\[\\&\\>\\*\\]\\:p-4"),
        ],
    )
    def test_escape_class(self, name, escaped):
        assert escape_class(name) == escaped


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestColourHelpers:
    def test_parse_hex(self):
        assert parse_hex("#3b82f6") == (59, 130, 246)
        assert parse_hex("#fff") == (255, 255, 255)
        assert parse_hex("#ff000080") == (255, 0, 0)
        assert parse_hex("red") is None

    def test_with_opacity_fraction(self):
        assert with_opacity("#000000", "12.5") == "rgb(0 0 0 / 12.5%)"


class TestUnits:
    @pytest.mark.parametrize(
        "literal, negated",
        [("1rem", "-1rem"), ("0px", "0px"), ("0", "0"), ("-2px", "2px"), ("50%", "-50%"), ("auto", "calc(auto * -1)")],
    )
    def test_negate(self, literal, negated):
        assert negate_literal(literal) == negated

    def test_to_px(self):
        assert to_px("768px") == 768
        assert to_px("48rem") == 768
        assert to_px("calc(1px)") is None
