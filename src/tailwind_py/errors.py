"""Error hierarchy for the tailwind_py engine."""
from __future__ import annotations


class TailwindError(Exception):
    """Base error for all tailwind_py errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(TailwindError):
    """The theme configuration could not be loaded or is invalid."""


# ---------------------------------------------------------------------------
# Per-class-string errors
# ---------------------------------------------------------------------------


class ClassError(TailwindError):
    """A single class string could not be turned into a CSS rule.

    These never abort a batch: the generator records them next to the rules
    it could build.
    """

    kind: str = "class_error"

    def __init__(
        self, message: str, *, raw: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.raw = raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    def __copy__(self) -> ClassError:
        """Same error with a fresh traceback, for re-raising a cached failure."""
        clone = type(self).__new__(type(self))
        clone.args = self.args
        clone.__dict__.update(self.__dict__)
        clone.__cause__ = self.__cause__
        return clone


class EmptyClassString(ClassError):
    """The class string (or its utility part) is empty."""

    kind = "empty_class_string"

    def __init__(self, raw: str = "") -> None:
        super().__init__("Empty class string", raw=raw)


class UnbalancedBracket(ClassError):
    """A ``[`` has no matching ``]`` (or the other way round)."""

    kind = "unbalanced_bracket"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Unbalanced bracket in {raw!r}", raw=raw)


class AmbiguousDuplicateVariant(ClassError):
    """The variant chain names the same kind of variant twice."""

    kind = "ambiguous_duplicate_variant"

    def __init__(self, variant_kind: str, *, raw: str = "") -> None:
        super().__init__(f"Duplicate {variant_kind} variant in {raw!r}", raw=raw)
        self.variant_kind = variant_kind


class InvalidOpacityModifier(ClassError):
    """An ``/NN`` opacity suffix on a utility or value that cannot take one."""

    kind = "invalid_opacity_modifier"

    def __init__(self, raw: str, *, reason: str = "") -> None:
        message = f"Invalid opacity modifier in {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, raw=raw)
        self.reason = reason


class UnknownUtility(ClassError):
    """No registry entry matches the utility name."""

    kind = "unknown_utility"

    def __init__(self, name: str, *, raw: str = "") -> None:
        super().__init__(f"Unknown utility {name!r}", raw=raw or name)
        self.name = name


class UnknownVariant(ClassError):
    """A variant segment that names no known variant."""

    kind = "unknown_variant"

    def __init__(self, name: str, *, raw: str = "") -> None:
        super().__init__(f"Unknown variant {name!r}", raw=raw or name)
        self.name = name


class MalformedArbitraryValue(ClassError):
    """A bracketed value that would break out of its CSS declaration."""

    kind = "malformed_arbitrary_value"

    def __init__(
        self,
        value: str,
        *,
        raw: str = "",
        reason: str = "",
        cause: Exception | None = None,
    ) -> None:
        message = f"Malformed arbitrary value {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, raw=raw or value, cause=cause)
        self.value = value
        self.reason = reason


__all__ = [
    "TailwindError",
    "ConfigError",
    "ClassError",
    "EmptyClassString",
    "UnbalancedBracket",
    "AmbiguousDuplicateVariant",
    "InvalidOpacityModifier",
    "UnknownUtility",
    "UnknownVariant",
    "MalformedArbitraryValue",
]
