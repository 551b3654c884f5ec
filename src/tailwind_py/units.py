"""Small helpers for CSS numeric literals."""

from __future__ import annotations

import re

_NUMERIC_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)(?P<unit>[a-zA-Z%]*)$")
_LENGTH_RE = re.compile(r"^(?P<number>-?(?:\d+\.?\d*|\.\d+))(?P<unit>px|rem|em)?$")

# Root font size used to compare rem widths with px widths.
ROOT_FONT_PX = 16.0


def is_numeric_literal(literal: str) -> bool:
    """True for a bare number or a number with a unit (``4``, ``1.5rem``, ``50%``)."""
    return bool(_NUMERIC_RE.match(literal.strip()))


def negate_literal(literal: str) -> str:
    """Negate a resolved literal.

    ``1rem`` becomes ``-1rem`` and ``0px`` stays ``0px``; anything that is not
    a plain number (``auto`` is filtered out before this is reached,
    ``var(--x)`` is not) becomes ``calc(<literal> * -1)``.
    """
    literal = literal.strip()
    if not is_numeric_literal(literal):
        return f"calc({literal} * -1)"
    if literal.startswith("-"):
        return literal[1:]
    match = _NUMERIC_RE.match(literal)
    number = literal[: len(literal) - len(match.group("unit"))] if match else literal
    if float(number) == 0:
        return literal
    return f"-{literal}"


def to_px(length: str) -> float | None:
    """Convert a px/rem/em length to pixels for ordering; None if not a length."""
    match = _LENGTH_RE.match(length.strip())
    if not match:
        return None
    value = float(match.group("number"))
    unit = match.group("unit") or "px"
    if unit in ("rem", "em"):
        value *= ROOT_FONT_PX
    return value
