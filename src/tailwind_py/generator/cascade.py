"""Cascade policy: grouping rules by context and ordering the groups.

Group order depends only on each context's classification, never on the
order classes arrived in:

* ``base`` -- no variants;
* ``responsive`` -- a min-width media query, ascending by width;
* ``state`` -- selector-only chains, dark mode and device media;
* ``container`` -- container queries, ascending by size.

A context with a container layer is ``container`` whatever else it has; one
with a breakpoint is ``responsive``.  The relative order of the four
categories comes from ``ThemeConfig.cascade_priority``.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from tailwind_py.model.context import (
    ContainerLayer,
    ContextCategory,
    MediaLayer,
    WrappingContext,
)
from tailwind_py.model.rule import CssRule
from tailwind_py.model.stylesheet import RuleGroup
from tailwind_py.units import to_px


def classify(context: WrappingContext) -> ContextCategory:
    layers = context.layers
    if any(isinstance(layer, ContainerLayer) for layer in layers):
        return ContextCategory.CONTAINER
    if any(isinstance(layer, MediaLayer) and layer.min_width for layer in layers):
        return ContextCategory.RESPONSIVE
    if layers:
        return ContextCategory.STATE
    return ContextCategory.BASE


def _widths(context: WrappingContext, category: ContextCategory) -> tuple[float, ...]:
    widths: list[str] = []
    for layer in context.layers:
        if category is ContextCategory.CONTAINER and isinstance(layer, ContainerLayer):
            widths.append(layer.min_width)
        elif category is ContextCategory.RESPONSIVE and isinstance(layer, MediaLayer):
            if layer.min_width:
                widths.append(layer.min_width)
    result: list[float] = []
    for width in widths:
        px = to_px(width)
        result.append(math.inf if px is None else px)
    return tuple(result)


def context_sort_key(
    context: WrappingContext, priority: Sequence[ContextCategory]
) -> tuple[int, tuple[float, ...], int, str]:
    category = classify(context)
    return (
        priority.index(category),
        _widths(context, category),
        len(context.layers),
        context.describe(),
    )


def _rule_sort_key(rule: CssRule) -> tuple[int, str, tuple[str, ...]]:
    return (rule.order, rule.selector, rule.nested)


def group_rules(
    rules: Iterable[CssRule], priority: Sequence[ContextCategory]
) -> tuple[RuleGroup, ...]:
    """Group *rules* by context, merge same-selector rules, and order everything.

    Rules are merged in the order given: for the same selector and property
    the later declaration wins.
    """
    buckets: dict[WrappingContext, dict[tuple[str, tuple[str, ...]], CssRule]] = {}
    for rule in rules:
        bucket = buckets.setdefault(rule.context, {})
        existing = bucket.get(rule.key)
        bucket[rule.key] = existing.merge(rule) if existing is not None else rule

    ordered = sorted(buckets, key=lambda context: context_sort_key(context, priority))
    return tuple(
        RuleGroup(
            context=context,
            category=classify(context),
            rules=tuple(sorted(buckets[context].values(), key=_rule_sort_key)),
        )
        for context in ordered
    )
