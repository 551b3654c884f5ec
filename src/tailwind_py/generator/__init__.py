"""Batch generation, cascade ordering and CSS emission."""

from tailwind_py.generator.cascade import classify, context_sort_key, group_rules
from tailwind_py.generator.emitter import emit
from tailwind_py.generator.generator import Generator, default_generator, generate

__all__ = [
    "Generator",
    "classify",
    "context_sort_key",
    "default_generator",
    "emit",
    "generate",
    "group_rules",
]
