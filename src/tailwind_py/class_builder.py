"""ClassBuilder: fluent accumulator of class strings for framework adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from tailwind_py.errors import ClassError
    from tailwind_py.generator.generator import Generator
    from tailwind_py.model.stylesheet import GeneratedStylesheet


class ClassBuilder:
    """Collects class strings; resolution is left to the generator.

    Each method accepts one or more whitespace-separated classes.  A class
    already present is ignored, so the first-seen order is kept.

    Example::

        classes = (
            ClassBuilder()
            .cls("p-4 bg-white")
            .responsive("md", "p-8")
            .state("hover", "bg-blue-600")
            .build()
        )
    """

    def __init__(self, *classes: str) -> None:
        self._classes: dict[str, None] = {}
        self.classes(*classes)

    def _add(self, text: str, prefix: str = "") -> ClassBuilder:
        for name in text.split():
            self._classes.setdefault(prefix + name, None)
        return self

    def cls(self, name: str) -> ClassBuilder:
        return self._add(name)

    def classes(self, *names: str) -> ClassBuilder:
        for name in names:
            self._add(name)
        return self

    def responsive(self, breakpoint: str, name: str) -> ClassBuilder:
        """Add *name* under a breakpoint variant (``md`` -> ``md:name``)."""
        return self._add(name, f"{breakpoint}:")

    def state(self, state: str, name: str) -> ClassBuilder:
        return self._add(name, f"{state}:")

    def dark(self, name: str) -> ClassBuilder:
        return self._add(name, "dark:")

    def when(self, condition: object, name: str) -> ClassBuilder:
        """Add *name* only if *condition* is truthy."""
        return self._add(name) if condition else self

    def merge(self, other: ClassBuilder) -> ClassBuilder:
        for name in other:
            self._classes.setdefault(name, None)
        return self

    def build(self) -> str:
        """Space-joined class string."""
        return " ".join(self._classes)

    def generate(
        self, generator: Generator | None = None
    ) -> tuple[GeneratedStylesheet, list[ClassError]]:
        """Same as ``generate(batch)`` over the collected classes."""
        from tailwind_py.generator.generator import default_generator

        return (generator or default_generator()).generate(list(self._classes))

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._classes))

    def __len__(self) -> int:
        return len(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"ClassBuilder({self.build()!r})"
