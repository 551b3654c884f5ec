"""Class-string parsing: tokenizer, variant segments and arbitrary values."""

from tailwind_py.parser.arbitrary import decode_arbitrary
from tailwind_py.parser.tokenizer import Tokenizer, split_segments
from tailwind_py.parser.variants import (
    MEDIA_VARIANTS,
    PSEUDO_CLASSES,
    PSEUDO_ELEMENTS,
    parse_variant,
    state_selector,
)

__all__ = [
    "MEDIA_VARIANTS",
    "PSEUDO_CLASSES",
    "PSEUDO_ELEMENTS",
    "Tokenizer",
    "decode_arbitrary",
    "parse_variant",
    "split_segments",
    "state_selector",
]
