"""Decoding of bracketed arbitrary values with a Lark grammar.

Inside ``[...]`` an underscore stands for a space, except in quoted strings
and inside ``url(...)``; ``\\_`` is a literal underscore.  Parentheses and
brackets must balance, and unescaped ``;``, ``{``, ``}``, whitespace or a
comment delimiter (``/*``, ``*/``) outside quotes are rejected rather than
escaped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

from tailwind_py.errors import MalformedArbitraryValue

GRAMMAR_PATH = Path(__file__).parent / "arbitrary.lark"

_QUOTED_RE = re.compile(r"'(?:[^'\\]|\\.)*'" r'|"(?:[^"\\]|\\.)*"')


@dataclass(frozen=True)
class _Group:
    open: str
    close: str
    items: tuple[object, ...]


class ArbitraryTransformer(Transformer):
    """Collapses the parse tree into tokens and nested groups."""

    def paren(self, items: list[object]) -> _Group:
        return _Group("(", ")", tuple(items))

    def bracket(self, items: list[object]) -> _Group:
        return _Group("[", "]", tuple(items))

    def start(self, items: list[object]) -> list[object]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _render(items: tuple[object, ...] | list[object], *, verbatim: bool = False) -> str:
    out: list[str] = []
    for item in items:
        if isinstance(item, _Group):
            inner = verbatim or (item.open == "(" and "".join(out).lower().endswith("url"))
            out.append(item.open + _render(item.items, verbatim=inner) + item.close)
        elif isinstance(item, Token) and item.type == "UNDERSCORE":
            out.append("_" if verbatim else " ")
        elif isinstance(item, Token) and item.type == "ESCAPE":
            out.append("_" if item == "\\_" else str(item))
        else:
            out.append(str(item))
    return "".join(out)


def _describe(exc: LarkError) -> str:
    if isinstance(exc, UnexpectedCharacters):
        return f"unexpected character {exc.char!r} at position {exc.column}"
    if isinstance(exc, UnexpectedEOF):
        return "unbalanced parenthesis or bracket"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "unbalanced parenthesis or bracket"
        return f"unexpected {str(exc.token)!r}"
    return str(exc)


def decode_arbitrary(value: str, *, raw: str = "") -> str:
    """Decode the content of ``[...]`` into the literal CSS text it stands for.

    Raises:
        MalformedArbitraryValue: The value is empty, unbalanced, or contains
            a character or comment delimiter that could end the
            declaration.
    """
    if not value:
        raise MalformedArbitraryValue(value, raw=raw, reason="empty value")
    try:
        tree = _parser().parse(value)
    except LarkError as exc:
        raise MalformedArbitraryValue(value, raw=raw, reason=_describe(exc), cause=exc) from exc
    literal = _render(ArbitraryTransformer().transform(tree))
    if not literal.strip():
        raise MalformedArbitraryValue(value, raw=raw, reason="empty value")
    bare = _QUOTED_RE.sub("", literal)
    if "/*" in bare or "*/" in bare:
        raise MalformedArbitraryValue(value, raw=raw, reason="comment delimiter")
    return literal
