"""Colour literal helpers for opacity modifiers."""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_hex(literal: str) -> tuple[int, int, int] | None:
    """``#3b82f6`` -> ``(59, 130, 246)``; None for anything that is not hex.

    A hex alpha channel is dropped; the opacity modifier replaces it.
    """
    match = _HEX_RE.match(literal.strip())
    if not match:
        return None
    digits = match.group("digits")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits[:3])
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_percent(opacity: str) -> str:
    """``"50"`` -> ``"50%"``, ``"12.50"`` -> ``"12.5%"``."""
    value = float(opacity)
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return f"{text}%"


def with_opacity(color: str, opacity: str) -> str:
    """Apply an ``/NN`` modifier to a resolved colour literal."""
    percent = format_percent(opacity)
    rgb = parse_hex(color)
    if rgb is not None:
        r, g, b = rgb
        return f"rgb({r} {g} {b} / {percent})"
    return f"color-mix(in srgb, {color} {percent}, transparent)"
