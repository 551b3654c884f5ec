"""Memoization of class-string parses and base-name lookups."""

from __future__ import annotations

import copy
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from tailwind_py.errors import ClassError
from tailwind_py.model.definition import UtilityDefinition
from tailwind_py.model.token import ClassToken
from tailwind_py.parser.tokenizer import Tokenizer
from tailwind_py.registry.registry import UtilityRegistry

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class CacheStats:
    """Counters since construction (or the last ``clear``).

    Counters are updated without a lock in unbounded mode, so under heavy
    concurrency they are approximate.
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    tokens: int = 0
    definitions: int = 0

    @property
    def size(self) -> int:
        return self.tokens + self.definitions


class _Store(Generic[K, V]):
    """Insert-or-get map; unbounded, or LRU-bounded when *max_size* is set.

    Values are computed outside any lock.  Two threads racing on the same key
    may both compute it; the first insert wins and both return that value.
    """

    def __init__(self, max_size: int | None, on_evict: Callable[[K], None]) -> None:
        self._max_size = max_size
        self._on_evict = on_evict
        self._data: OrderedDict[K, V] | dict[K, V] = OrderedDict() if max_size else {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._data)

    def get_or_insert(self, key: K, compute: Callable[[], V]) -> V:
        if self._max_size is None:
            try:
                value = self._data[key]
            except KeyError:
                pass
            else:
                self.hits += 1
                return value
            self.misses += 1
            return self._data.setdefault(key, compute())

        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)  # type: ignore[union-attr]
                self.hits += 1
                return self._data[key]
            self.misses += 1
        value = compute()
        with self._lock:
            if key in self._data:
                return self._data[key]
            self._data[key] = value
            while len(self._data) > self._max_size:
                evicted, _ = self._data.popitem(last=False)  # type: ignore[call-arg]
                self._on_evict(evicted)
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0


class TokenCache:
    """Memoizes ``Tokenizer.parse`` and ``UtilityRegistry.resolve_utility``.

    Parses go through the definition memo, so ``hover:p-4`` reuses the
    lookup made for ``p-4``.  Failed parses are cached as well and a copy is
    raised on every lookup, so a bad class repeated across a long build is
    only parsed once.  Nothing is evicted unless *max_size* is given.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        registry: UtilityRegistry | None = None,
        *,
        max_size: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size!r}")
        self.tokenizer = tokenizer
        self.registry = registry or tokenizer.registry
        self.max_size = max_size
        self._log = logger or logging.getLogger("tailwind_py.cache")
        self._evictions = 0
        self._tokens: _Store[str, ClassToken | ClassError] = _Store(max_size, self._evicted)
        self._definitions: _Store[str, UtilityDefinition | None] = _Store(
            max_size, self._evicted
        )

    def _evicted(self, key: str) -> None:
        self._evictions += 1
        self._log.debug("Evicted %r from cache", key)

    def _parse(self, raw: str) -> ClassToken | ClassError:
        try:
            return self.tokenizer.parse(raw, lookup=self.get_or_insert_definition)
        except ClassError as exc:
            return exc

    def get_or_insert_token(self, raw: str) -> ClassToken:
        """Cached ``Tokenizer.parse``.

        Raises:
            ClassError: The (cached) parse failure for *raw*.
        """
        result = self._tokens.get_or_insert(raw, lambda: self._parse(raw))
        if isinstance(result, ClassError):
            raise copy.copy(result)
        return result

    def get_or_insert_definition(self, base_name: str) -> UtilityDefinition | None:
        """Cached ``UtilityRegistry.resolve_utility``; None results are cached too."""
        return self._definitions.get_or_insert(
            base_name, lambda: self.registry.resolve_utility(base_name)
        )

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._tokens.hits + self._definitions.hits,
            misses=self._tokens.misses + self._definitions.misses,
            evictions=self._evictions,
            tokens=len(self._tokens),
            definitions=len(self._definitions),
        )

    def clear(self) -> None:
        self._tokens.clear()
        self._definitions.clear()
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._tokens) + len(self._definitions)
