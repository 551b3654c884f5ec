"""tailwind_py model layer -- public type re-exports."""

from tailwind_py.model.context import (
    ContainerLayer,
    ContextCategory,
    Layer,
    MediaLayer,
    SelectorLayer,
    WrappingContext,
)
from tailwind_py.model.definition import (
    Arbitrary,
    Color,
    Keyword,
    Scale,
    UtilityDefinition,
    ValueSpace,
)
from tailwind_py.model.diagnostic import Diagnostic, Severity
from tailwind_py.model.rule import CssRule
from tailwind_py.model.stylesheet import GeneratedStylesheet, RuleGroup
from tailwind_py.model.token import (
    ArbitrarySelector,
    ArbitraryValue,
    ClassToken,
    ColorValue,
    Container,
    Dark,
    Media,
    NamedValue,
    Responsive,
    State,
    TokenValue,
    Variant,
    VariantKind,
)

__all__ = [
    # definition
    "Keyword",
    "Scale",
    "Color",
    "Arbitrary",
    "ValueSpace",
    "UtilityDefinition",
    # token
    "VariantKind",
    "Responsive",
    "State",
    "Dark",
    "Container",
    "Media",
    "ArbitrarySelector",
    "Variant",
    "NamedValue",
    "ColorValue",
    "ArbitraryValue",
    "TokenValue",
    "ClassToken",
    # context
    "ContextCategory",
    "MediaLayer",
    "ContainerLayer",
    "SelectorLayer",
    "Layer",
    "WrappingContext",
    # rule / stylesheet
    "CssRule",
    "RuleGroup",
    "GeneratedStylesheet",
    # diagnostic
    "Severity",
    "Diagnostic",
]
