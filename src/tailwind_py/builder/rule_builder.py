"""Rule builder: resolved token + wrapping context -> ``CssRule``."""

from __future__ import annotations

from tailwind_py.builder.color import with_opacity
from tailwind_py.config import ThemeConfig
from tailwind_py.errors import MalformedArbitraryValue
from tailwind_py.model.context import WrappingContext
from tailwind_py.model.definition import Color, UtilityDefinition
from tailwind_py.model.rule import CssRule
from tailwind_py.model.token import ArbitraryValue, ClassToken, ColorValue, NamedValue
from tailwind_py.parser.arbitrary import decode_arbitrary
from tailwind_py.registry.values import named_literal
from tailwind_py.units import negate_literal


def escape_class(name: str) -> str:
    """Escape *name* for use as a CSS class selector (``md:p-8`` -> ``md\\:p-8``)."""
    out: list[str] = []
    for index, char in enumerate(name):
        code = ord(char)
        if code == 0:
            out.append("\ufffd")
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\{code:x} ")
        elif char.isdigit() and char.isascii() and (
            index == 0 or (index == 1 and name[0] == "-")
        ):
            out.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and len(name) == 1:
            out.append("\\-")
        elif code >= 0x80 or char.isalnum() or char in "-_":
            out.append(char)
        else:
            out.append(f"\\{char}")
    return "".join(out)


class RuleBuilder:
    """Turns one parsed token into exactly one ``CssRule``."""

    def __init__(self, config: ThemeConfig | None = None) -> None:
        self.config = config or ThemeConfig()

    def resolve_value(self, definition: UtilityDefinition, token: ClassToken) -> str:
        """The declaration value for *token*, before ``!important``.

        Raises:
            MalformedArbitraryValue: A bracketed value could not be decoded.
        """
        value = token.value
        if isinstance(value, ArbitraryValue):
            literal = decode_arbitrary(value.literal, raw=token.raw)
        elif isinstance(value, ColorValue):
            space = definition.value_space
            if not isinstance(space, Color):
                raise TypeError(f"{definition.name!r} has no palette")
            literal = space.palette[value.name][value.shade]
        elif isinstance(value, NamedValue):
            literal = named_literal(definition, value)
        else:
            raise MalformedArbitraryValue("", raw=token.raw, reason="missing value")

        if token.opacity is not None:
            literal = with_opacity(literal, token.opacity)
        if token.negative:
            literal = negate_literal(literal)
        return definition.render(literal)

    def build(
        self,
        definition: UtilityDefinition,
        token: ClassToken,
        context: WrappingContext | None = None,
    ) -> CssRule:
        context = context or WrappingContext()
        value = self.resolve_value(definition, token)
        if token.important:
            value = f"{value} !important"
        declarations = {prop: value for prop in definition.properties}
        _, selector, nested = context.arrange("." + escape_class(token.raw))
        return CssRule(
            selector=selector,
            declarations=declarations,
            context=context,
            nested=nested,
            order=definition.order,
            source=token.raw,
        )
