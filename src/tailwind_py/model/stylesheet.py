"""Generated stylesheet: ordered rule groups plus the batch's errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from tailwind_py.errors import ClassError
from tailwind_py.model.context import ContextCategory, WrappingContext
from tailwind_py.model.rule import CssRule

if TYPE_CHECKING:
    from tailwind_py.config import OutputMode


@dataclass(frozen=True)
class RuleGroup:
    """All rules sharing one wrapping context."""

    context: WrappingContext
    category: ContextCategory
    rules: tuple[CssRule, ...]

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class GeneratedStylesheet:
    """Ordered rule groups for one batch.

    ``errors`` keeps the per-class failures in input order.  It is left out
    of equality: two stylesheets are equal when they emit the same rules.
    """

    groups: tuple[RuleGroup, ...] = ()
    errors: tuple[ClassError, ...] = field(default=(), compare=False)

    @property
    def rules(self) -> list[CssRule]:
        """All rules in emission order."""
        return [rule for group in self.groups for rule in group.rules]

    @property
    def rule_count(self) -> int:
        return sum(len(group) for group in self.groups)

    @property
    def ok(self) -> bool:
        return not self.errors

    def __iter__(self) -> Iterator[RuleGroup]:
        return iter(self.groups)

    def find(self, selector: str) -> CssRule | None:
        """Return the first rule whose selector equals *selector*."""
        for rule in self.rules:
            if rule.selector == selector:
                return rule
        return None

    def to_css(self, mode: OutputMode | str = "pretty") -> str:
        """Serialize to CSS text."""
        from tailwind_py.generator.emitter import emit

        return emit(self, mode)
