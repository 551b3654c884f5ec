"""Tests for decoding bracketed arbitrary values."""

import pytest

from tailwind_py.errors import MalformedArbitraryValue
from tailwind_py.parser import decode_arbitrary


class TestDecode:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("13px", "13px"),
            ("calc(100%_-_1rem)", "calc(100% - 1rem)"),
            ("1fr_2fr", "1fr 2fr"),
            ("url(/img/hero_bg.png)", "url(/img/hero_bg.png)"),
            ("url('/a_b.png')", "url('/a_b.png')"),
            ("'hello_world'", "'hello_world'"),
            ("snake\\_case", "snake_case"),
            ("rgb(0_0_0/0.5)", "rgb(0 0 0/0.5)"),
            ("var(--gap,_1rem)", "var(--gap, 1rem)"),
            ("&>[data-open]", "&>[data-open]"),
        ],
    )
    def test_values(self, value, expected):
        assert decode_arbitrary(value) == expected


class TestRejects:
    @pytest.mark.parametrize(
        "value",
        [
            "red;background:blue",
            "x}",
            "{x",
            "calc(1px",
            "1px)",
            "a b",
            "'a;b'",
        ],
    )
    def test_injection_and_imbalance(self, value):
        with pytest.raises(MalformedArbitraryValue):
            decode_arbitrary(value, raw=f"w-[{value}]")

    def test_empty(self):
        with pytest.raises(MalformedArbitraryValue):
            decode_arbitrary("")

    def test_only_underscores(self):
        with pytest.raises(MalformedArbitraryValue):
            decode_arbitrary("__")

    def test_error_carries_raw_class(self):
        with pytest.raises(MalformedArbitraryValue) as info:
            decode_arbitrary("red;x", raw="bg-[red;x]")
        assert info.value.raw == "bg-[red;x]"
        assert info.value.value == "red;x"
        assert info.value.cause is not None


class TestCommentDelimiters:
    @pytest.mark.parametrize("value", ["1px/*", "*/1px", "calc(1px/*2)", "&/*"])
    def test_rejected(self, value):
        with pytest.raises(MalformedArbitraryValue) as info:
            decode_arbitrary(value)
        assert info.value.reason == "comment delimiter"

    def test_allowed_inside_quotes(self):
        assert decode_arbitrary("'/*'") == "'/*'"

    def test_plain_slash_and_star(self):
        assert decode_arbitrary("calc(10px*2)") == "calc(10px*2)"
        assert decode_arbitrary("16/9") == "16/9"
