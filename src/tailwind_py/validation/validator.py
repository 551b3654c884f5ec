"""Class validator: runs all validation rules and reports diagnostics.

This is the ahead-of-time check a build step runs over statically known
class strings; it uses the same parser and builder as generation.
"""

from __future__ import annotations

from typing import Callable, Iterable

from tailwind_py.errors import TailwindError
from tailwind_py.generator.generator import Generator, default_generator
from tailwind_py.model.diagnostic import Diagnostic
from tailwind_py.validation.rules import ALL_RULES


class ValidationError(TailwindError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[list[str], Generator], list[Diagnostic]]


def _split(classes: Iterable[str] | str) -> list[str]:
    if isinstance(classes, str):
        return classes.split()
    return list(classes)


def validate(
    classes: Iterable[str] | str,
    generator: Generator | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *classes*.

    *classes* is a list of class strings or one whitespace-separated string.
    Returns the full list of diagnostics (errors, warnings, info).
    """
    batch = _split(classes)
    generator = generator or default_generator()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(batch, generator))
    return diagnostics


def validate_or_raise(
    classes: Iterable[str] | str,
    generator: Generator | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(classes, generator, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
