"""Utility registry: immutable lookup from class base names to definitions."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from tailwind_py.config import ThemeConfig
from tailwind_py.model.definition import Arbitrary, UtilityDefinition
from tailwind_py.model.token import TokenValue
from tailwind_py.registry.builtin import builtin_definitions
from tailwind_py.registry.trie import PrefixTrie
from tailwind_py.registry.values import accepts_negative, match_value


@dataclass(frozen=True)
class Match:
    """A definition paired with the value text left after its name.

    ``remainder`` is ``None`` when the base name is the definition's name.
    """

    definition: UtilityDefinition
    remainder: str | None


@dataclass(frozen=True)
class Resolution:
    definition: UtilityDefinition
    value: TokenValue


class UtilityRegistry:
    """Read-only table of utility definitions.

    Exact utilities (``flex-row``, ``border-collapse``) live in a plain dict
    and always win; parameterized utilities live in a prefix trie and are
    tried longest prefix first.  Definitions registered under the same name
    are tried in registration order, which is also the order rules are
    emitted in.  After construction nothing mutates, so lookups need no
    locking.
    """

    def __init__(
        self,
        definitions: Iterable[UtilityDefinition],
        *,
        config: ThemeConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        log = logger or logging.getLogger("tailwind_py.registry")
        self.config = config
        self._definitions: list[UtilityDefinition] = []
        self._exact: dict[str, tuple[UtilityDefinition, ...]] = {}
        self._prefixes: PrefixTrie[UtilityDefinition] = PrefixTrie()
        for index, definition in enumerate(definitions):
            definition = dataclasses.replace(definition, order=index)
            self._definitions.append(definition)
            if definition.exact:
                self._exact[definition.name] = self._exact.get(definition.name, ()) + (definition,)
            else:
                self._prefixes.insert(definition.name, definition)
        log.debug(
            "Built utility registry: %d definitions, %d exact names, %d prefixes",
            len(self._definitions),
            len(self._exact),
            len(self._prefixes),
        )

    @classmethod
    def from_config(
        cls, config: ThemeConfig | None = None, *, logger: logging.Logger | None = None
    ) -> UtilityRegistry:
        """Build the stock utility set for *config* (default theme if None)."""
        config = config or ThemeConfig()
        return cls(builtin_definitions(config), config=config, logger=logger)

    # --- introspection ----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[UtilityDefinition]:
        return iter(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self._exact.get(name) or self._prefixes.get(name))

    def names(self) -> list[str]:
        """Every registered utility name, sorted."""
        return sorted(set(self._exact) | set(self._prefixes.keys()))

    # --- lookup -----------------------------------------------------------------

    def candidates(self, base: str) -> list[Match]:
        """All definitions that could handle *base*, most specific first."""
        matches = [Match(d, None) for d in self._exact.get(base, ())]
        matches.extend(Match(d, None) for d in self._prefixes.get(base))
        for prefix, entries in self._prefixes.prefixes(base):
            remainder = base[len(prefix) + 1 :]
            matches.extend(Match(d, remainder) for d in entries)
        return matches

    def resolve(self, base: str, *, negative: bool = False) -> Resolution | None:
        """First definition whose value space accepts the value part of *base*."""
        for match in self.candidates(base):
            value = match_value(match.definition, match.remainder)
            if value is None:
                continue
            if negative and not accepts_negative(match.definition, value):
                continue
            return Resolution(match.definition, value)
        return None

    def resolve_with(
        self, definition: UtilityDefinition, base: str, *, negative: bool = False
    ) -> Resolution | None:
        """Interpret *base* under a definition that was already looked up."""
        if base == definition.name:
            remainder = None
        elif base.startswith(definition.name + "-"):
            remainder = base[len(definition.name) + 1 :]
        else:
            return None
        value = match_value(definition, remainder)
        if value is None or (negative and not accepts_negative(definition, value)):
            return None
        return Resolution(definition, value)

    def resolve_utility(self, base_name: str) -> UtilityDefinition | None:
        """Definition that *base_name* resolves to, or None if nothing matches."""
        resolution = self.resolve(base_name)
        return resolution.definition if resolution else None

    def arbitrary_property(self, prop: str) -> UtilityDefinition:
        """Definition for an arbitrary property class such as ``[mask-type:luminance]``.

        Ordered after every registered utility.
        """
        return UtilityDefinition(
            name=f"[{prop}]",
            properties=(prop,),
            value_space=Arbitrary(prop),
            exact=True,
            order=len(self._definitions),
        )
