"""Character trie over utility prefixes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    children: dict[str, _Node[T]] = field(default_factory=dict)
    entries: tuple[T, ...] = ()


class PrefixTrie(Generic[T]):
    """Maps string keys to tuples of entries; finds every key that prefixes a name.

    Mutated only while the registry is being built.
    """

    def __init__(self) -> None:
        self._root: _Node[T] = _Node()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, key: str, entry: T) -> None:
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _Node())
        if not node.entries:
            self._size += 1
        node.entries = node.entries + (entry,)

    def get(self, key: str) -> tuple[T, ...]:
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                return ()
            node = child
        return node.entries

    def prefixes(self, name: str, *, separator: str = "-") -> Iterator[tuple[str, tuple[T, ...]]]:
        """Yield ``(key, entries)`` for keys followed by *separator* in *name*.

        Longest key first, so ``border-t`` is offered before ``border`` for
        ``border-t-2``.
        """
        found: list[tuple[str, tuple[T, ...]]] = []
        node = self._root
        for index, char in enumerate(name):
            child = node.children.get(char)
            if child is None:
                break
            node = child
            end = index + 1
            if node.entries and end < len(name) and name[end] == separator:
                found.append((name[:end], node.entries))
        return reversed(found)

    def keys(self) -> list[str]:
        result: list[str] = []
        stack: list[tuple[str, _Node[T]]] = [("", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.entries:
                result.append(prefix)
            for char, child in node.children.items():
                stack.append((prefix + char, child))
        return sorted(result)
