"""Validation rules for class-string batches.

Each rule is a function taking the list of class strings and a generator,
and returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import difflib
from collections import Counter
from functools import lru_cache

from tailwind_py.errors import (
    AmbiguousDuplicateVariant,
    ClassError,
    UnknownUtility,
    UnknownVariant,
)
from tailwind_py.generator.generator import Generator
from tailwind_py.model.definition import Color, Keyword, Scale
from tailwind_py.model.diagnostic import Diagnostic, Severity
from tailwind_py.model.rule import CssRule
from tailwind_py.parser.variants import MEDIA_VARIANTS, PSEUDO_CLASSES, PSEUDO_ELEMENTS
from tailwind_py.registry.registry import UtilityRegistry

_FIXES: dict[str, str] = {
    "empty_class_string": "Remove the empty class or the stray ':'.",
    "unbalanced_bracket": "Close every '[' with a matching ']'.",
    "invalid_opacity_modifier": "Use '/NN' (0-100) only on colour utilities.",
    "malformed_arbitrary_value": (
        "Remove ';', '{' and '}' from the bracketed value and balance its parentheses."
    ),
}


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


@lru_cache(maxsize=8)
def _vocabulary(registry: UtilityRegistry) -> tuple[str, ...]:
    """Every class name the registry can produce without brackets."""
    words: set[str] = set()
    for definition in registry:
        space = definition.value_space
        if isinstance(space, Keyword):
            keys = list(space.values)
        elif isinstance(space, Scale):
            keys = list(space.steps)
        elif isinstance(space, Color):
            keys = [
                name if shade == "DEFAULT" else f"{name}-{shade}"
                for name, shades in space.palette.items()
                for shade in shades
            ]
        else:
            keys = []
        for key in keys:
            words.add(definition.name if key in ("", "DEFAULT") else f"{definition.name}-{key}")
    return tuple(sorted(words))


def _variant_names(generator: Generator) -> list[str]:
    states = [*PSEUDO_CLASSES, *PSEUDO_ELEMENTS]
    return [
        *generator.config.breakpoints,
        "dark",
        *states,
        *(f"group-{s}" for s in PSEUDO_CLASSES),
        *(f"peer-{s}" for s in PSEUDO_CLASSES),
        *MEDIA_VARIANTS,
        *(f"@{name}" for name in generator.config.containers),
    ]


def _did_you_mean(word: str, vocabulary: list[str] | tuple[str, ...]) -> str | None:
    matches = difflib.get_close_matches(word, vocabulary, n=1, cutoff=0.75)
    return f"Did you mean '{matches[0]}'?" if matches else None


def suggest_fix(error: ClassError, generator: Generator) -> str | None:
    """Remediation hint for *error*, if one is known."""
    if isinstance(error, UnknownUtility):
        return _did_you_mean(error.name.lstrip("-"), _vocabulary(generator.registry))
    if isinstance(error, UnknownVariant):
        return _did_you_mean(error.name, _variant_names(generator))
    if isinstance(error, AmbiguousDuplicateVariant):
        return f"Use at most one {error.variant_kind} variant per class."
    return _FIXES.get(error.kind)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _build_all(classes: list[str], generator: Generator) -> dict[str, CssRule | ClassError]:
    results: dict[str, CssRule | ClassError] = {}
    for raw in dict.fromkeys(classes):
        try:
            results[raw] = generator.build_rule(raw)
        except ClassError as exc:
            results[raw] = exc
    return results


def check_classes_resolve(classes: list[str], generator: Generator) -> list[Diagnostic]:
    """Every class must produce a rule (ERROR)."""
    diagnostics: list[Diagnostic] = []
    for raw, result in _build_all(classes, generator).items():
        if isinstance(result, ClassError):
            diagnostics.append(
                Diagnostic(
                    rule=result.kind,
                    severity=Severity.ERROR,
                    message=str(result),
                    class_name=raw,
                    fix=suggest_fix(result, generator),
                )
            )
    return diagnostics


def check_duplicate_classes(classes: list[str], generator: Generator) -> list[Diagnostic]:
    """A class listed more than once is harmless but usually a mistake (WARNING)."""
    counts = Counter(classes)
    return [
        Diagnostic(
            rule="duplicate_class",
            severity=Severity.WARNING,
            message=f"Class '{raw}' appears {count} times.",
            class_name=raw,
            fix="Remove the repeated class.",
        )
        for raw, count in counts.items()
        if count > 1
    ]


def check_conflicting_utilities(classes: list[str], generator: Generator) -> list[Diagnostic]:
    """Two classes setting the same property in the same context (WARNING).

    Which one wins depends on emission order, not on the order in the class
    attribute, so ``p-4 p-8`` rarely does what the author expects.
    """
    owners: dict[tuple[object, str, tuple[str, ...]], str] = {}
    diagnostics: list[Diagnostic] = []
    for raw, result in _build_all(classes, generator).items():
        if isinstance(result, ClassError):
            continue
        for prop in result.declarations:
            key = (result.context, prop, result.nested)
            first = owners.setdefault(key, raw)
            if first != raw:
                diagnostics.append(
                    Diagnostic(
                        rule="conflicting_utilities",
                        severity=Severity.WARNING,
                        message=f"'{raw}' and '{first}' both set {prop}.",
                        class_name=raw,
                        fix=f"Keep only one of '{first}' and '{raw}'.",
                    )
                )
    return diagnostics


ALL_RULES = [
    check_classes_resolve,
    check_duplicate_classes,
    check_conflicting_utilities,
]
