"""Utility registry: definitions, prefix lookup and the stock utility set."""

from tailwind_py.registry.builtin import builtin_definitions
from tailwind_py.registry.registry import Match, Resolution, UtilityRegistry
from tailwind_py.registry.trie import PrefixTrie

__all__ = [
    "Match",
    "PrefixTrie",
    "Resolution",
    "UtilityRegistry",
    "builtin_definitions",
]
