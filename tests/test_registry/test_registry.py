"""Tests for the utility registry, prefix trie and value matching."""

import pytest

from tailwind_py.config import ThemeConfig
from tailwind_py.model.definition import Color, Keyword, Scale, UtilityDefinition
from tailwind_py.model.token import ArbitraryValue, ColorValue, NamedValue
from tailwind_py.registry import PrefixTrie, UtilityRegistry
from tailwind_py.registry.values import infer_type, match_value, split_type_hint


@pytest.fixture(scope="module")
def registry():
    return UtilityRegistry.from_config()


# ---------------------------------------------------------------------------
# PrefixTrie
# ---------------------------------------------------------------------------


class TestPrefixTrie:
    def test_get_exact_key(self):
        trie = PrefixTrie()
        trie.insert("border", "a")
        assert trie.get("border") == ("a",)
        assert trie.get("borde") == ()

    def test_entries_accumulate_in_insert_order(self):
        trie = PrefixTrie()
        trie.insert("text", "align")
        trie.insert("text", "size")
        assert trie.get("text") == ("align", "size")
        assert len(trie) == 1

    def test_prefixes_longest_first(self):
        trie = PrefixTrie()
        trie.insert("border", "width")
        trie.insert("border-t", "top")
        found = [key for key, _ in trie.prefixes("border-t-2")]
        assert found == ["border-t", "border"]

    def test_prefix_needs_separator(self):
        trie = PrefixTrie()
        trie.insert("border-t", "top")
        assert list(trie.prefixes("border-tl-2")) == []

    def test_keys_sorted(self):
        trie = PrefixTrie()
        for key in ("w", "bg", "border"):
            trie.insert(key, key)
        assert trie.keys() == ["bg", "border", "w"]


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestResolveUtility:
    def test_prefix_utility(self, registry):
        definition = registry.resolve_utility("p-4")
        assert definition.name == "p"
        assert definition.properties == ("padding",)

    def test_exact_literal_beats_prefix(self, registry):
        definition = registry.resolve_utility("border-collapse")
        assert definition.exact
        assert definition.properties == ("border-collapse",)

    def test_longest_prefix_wins(self, registry):
        definition = registry.resolve_utility("border-t-2")
        assert definition.name == "border-t"
        assert definition.properties == ("border-top-width",)

    def test_bare_scale_utility_uses_default_step(self, registry):
        definition = registry.resolve_utility("border")
        assert definition.properties == ("border-width",)

    def test_shared_name_tries_definitions_in_order(self, registry):
        assert registry.resolve_utility("text-lg").properties == ("font-size",)
        assert registry.resolve_utility("text-center").properties == ("text-align",)
        assert registry.resolve_utility("text-blue-500").properties == ("color",)

    def test_unknown_returns_none(self, registry):
        assert registry.resolve_utility("unknown-class") is None
        assert registry.resolve_utility("p-nope") is None

    def test_flex_literal_and_keyword(self, registry):
        assert registry.resolve_utility("flex").properties == ("display",)
        assert registry.resolve_utility("flex-1").properties == ("flex",)
        assert registry.resolve_utility("flex-col").properties == ("flex-direction",)


class TestResolve:
    def test_resolution_value(self, registry):
        resolution = registry.resolve("bg-blue-500")
        assert resolution.value == ColorValue("blue", "500")

    def test_single_colour(self, registry):
        assert registry.resolve("bg-white").value == ColorValue("white")

    def test_negative_needs_numeric_value(self, registry):
        assert registry.resolve("m-4", negative=True) is not None
        assert registry.resolve("m-auto", negative=True) is None

    def test_negative_needs_negatable_utility(self, registry):
        assert registry.resolve("p-4", negative=True) is None

    def test_arbitrary_type_steers_shared_name(self, registry):
        assert registry.resolve("text-[13px]").definition.properties == ("font-size",)
        assert registry.resolve("text-[#ff0000]").definition.properties == ("color",)
        assert registry.resolve("text-[color:var(--brand)]").definition.properties == ("color",)

    def test_background_image_arbitrary(self, registry):
        resolution = registry.resolve("bg-[url(/hero.png)]")
        assert resolution.definition.properties == ("background-image",)
        assert resolution.value == ArbitraryValue("url(/hero.png)")

    def test_candidates_order(self, registry):
        names = [m.definition.name for m in registry.candidates("border-t-2")]
        assert names[:2] == ["border-t", "border-t"]
        assert names[-1] == "border"


class TestRegistryConstruction:
    def test_order_is_registration_index(self):
        defs = [
            UtilityDefinition("a", ("x",), Keyword({"1": "1"})),
            UtilityDefinition("b", ("y",), Keyword({"1": "1"})),
        ]
        registry = UtilityRegistry(defs)
        assert [d.order for d in registry] == [0, 1]

    def test_contains_and_names(self, registry):
        assert "p" in registry
        assert "border-collapse" in registry
        assert "nope" not in registry
        assert "bg" in registry.names()

    def test_config_drives_scales(self):
        config = ThemeConfig.from_dict({"spacing": {"huge": "100rem"}})
        registry = UtilityRegistry.from_config(config)
        assert registry.resolve("p-huge") is not None
        assert registry.resolve("p-4") is not None

    def test_arbitrary_property_ordered_last(self, registry):
        definition = registry.arbitrary_property("mask-type")
        assert definition.properties == ("mask-type",)
        assert definition.order == len(registry)

    def test_definition_requires_property(self):
        with pytest.raises(ValueError):
            UtilityDefinition("x", (), Keyword({}))


# ---------------------------------------------------------------------------
# Value matching
# ---------------------------------------------------------------------------


class TestMatchValue:
    def test_scale_step(self):
        definition = UtilityDefinition("p", ("padding",), Scale({"4": "1rem"}))
        assert match_value(definition, "4") == NamedValue("4")
        assert match_value(definition, "5") is None

    def test_keyword_bare(self):
        definition = UtilityDefinition("grow", ("flex-grow",), Keyword({"": "1"}))
        assert match_value(definition, None) == NamedValue("")

    def test_arbitrary_refused_when_disabled(self):
        definition = UtilityDefinition(
            "justify", ("justify-content",), Keyword({"center": "center"}), arbitrary=None
        )
        assert match_value(definition, "[x]") is None

    def test_colour_shade(self):
        definition = UtilityDefinition(
            "bg", ("background-color",), Color({"red": {"500": "#ef4444"}})
        )
        assert match_value(definition, "red-500") == ColorValue("red", "500")
        assert match_value(definition, "red-501") is None


class TestTypeHints:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#fff", "color"),
            ("rgb(0_0_0)", "color"),
            ("13px", "length"),
            ("calc(100%-1rem)", "length"),
            ("url(/a.png)", "image"),
            ("linear-gradient(red,blue)", "image"),
            ("var(--x)", "any"),
            ("auto", "other"),
        ],
    )
    def test_infer_type(self, value, expected):
        assert infer_type(value) == expected

    def test_split_known_hint(self):
        assert split_type_hint("length:var(--x)") == ("length", "var(--x)")

    def test_unknown_hint_left_in_value(self):
        assert split_type_hint("foo:bar") == (None, "foo:bar")
