"""CSS rule model."""

from __future__ import annotations

from dataclasses import dataclass, field

from tailwind_py.model.context import WrappingContext


@dataclass(frozen=True)
class CssRule:
    """A style rule: selector plus ordered declarations inside a context.

    ``nested`` holds frames (nested selectors or at-rule preludes) that sit
    inside the style rule; see ``WrappingContext.arrange``.
    """

    selector: str
    declarations: dict[str, str]
    context: WrappingContext = field(default_factory=WrappingContext)
    nested: tuple[str, ...] = ()
    order: int = field(default=0, compare=False)
    source: str = field(default="", compare=False)

    @property
    def key(self) -> tuple[str, tuple[str, ...]]:
        """Identity used when merging rules inside one context."""
        return (self.selector, self.nested)

    def merge(self, later: CssRule) -> CssRule:
        """Combine with a later rule; the later value wins per property."""
        declarations = dict(self.declarations)
        for prop, value in later.declarations.items():
            declarations.pop(prop, None)
            declarations[prop] = value
        return CssRule(
            selector=self.selector,
            declarations=declarations,
            context=self.context,
            nested=self.nested,
            order=self.order,
            source=self.source,
        )
