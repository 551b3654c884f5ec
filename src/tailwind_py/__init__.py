"""tailwind_py -- utility class strings to CSS rules.

Typical use::

    from tailwind_py import generate

    sheet, errors = generate(["p-4", "md:p-8", "hover:bg-blue-600"])
    print(sheet.to_css())
"""

__version__ = "0.1.0"

from tailwind_py.builder.rule_builder import RuleBuilder  # noqa: E402
from tailwind_py.cache import CacheStats, TokenCache  # noqa: E402
from tailwind_py.class_builder import ClassBuilder  # noqa: E402
from tailwind_py.config import DarkMode, OutputMode, ThemeConfig, load_config  # noqa: E402
from tailwind_py.errors import (  # noqa: E402
    AmbiguousDuplicateVariant,
    ClassError,
    ConfigError,
    EmptyClassString,
    InvalidOpacityModifier,
    MalformedArbitraryValue,
    TailwindError,
    UnbalancedBracket,
    UnknownUtility,
    UnknownVariant,
)
from tailwind_py.generator.generator import Generator, generate  # noqa: E402
from tailwind_py.model.stylesheet import GeneratedStylesheet  # noqa: E402
from tailwind_py.parser.tokenizer import Tokenizer  # noqa: E402
from tailwind_py.registry.registry import UtilityRegistry  # noqa: E402
from tailwind_py.variants.resolver import VariantResolver  # noqa: E402

__all__ = [
    "__version__",
    "AmbiguousDuplicateVariant",
    "CacheStats",
    "ClassBuilder",
    "ClassError",
    "ConfigError",
    "DarkMode",
    "EmptyClassString",
    "GeneratedStylesheet",
    "Generator",
    "InvalidOpacityModifier",
    "MalformedArbitraryValue",
    "OutputMode",
    "RuleBuilder",
    "TailwindError",
    "ThemeConfig",
    "TokenCache",
    "Tokenizer",
    "UnbalancedBracket",
    "UnknownUtility",
    "UnknownVariant",
    "UtilityRegistry",
    "VariantResolver",
    "generate",
    "load_config",
]
