"""CSS text serialization for generated stylesheets."""

from __future__ import annotations

from tailwind_py.config import OutputMode
from tailwind_py.model.rule import CssRule
from tailwind_py.model.stylesheet import GeneratedStylesheet, RuleGroup

INDENT = "  "


def _pretty_rule(rule: CssRule, depth: int) -> list[str]:
    lines = [f"{INDENT * depth}{rule.selector} {{"]
    inner = depth + 1
    for frame in rule.nested:
        lines.append(f"{INDENT * inner}{frame} {{")
        inner += 1
    for prop, value in rule.declarations.items():
        lines.append(f"{INDENT * inner}{prop}: {value};")
    for _ in rule.nested:
        inner -= 1
        lines.append(f"{INDENT * inner}}}")
    lines.append(f"{INDENT * depth}}}")
    return lines


def _pretty_group(group: RuleGroup) -> str:
    outer = group.context.outer_preludes
    lines = [f"{INDENT * depth}{prelude} {{" for depth, prelude in enumerate(outer)]
    for index, rule in enumerate(group.rules):
        if index:
            lines.append("")
        lines.extend(_pretty_rule(rule, len(outer)))
    lines.extend(f"{INDENT * depth}}}" for depth in reversed(range(len(outer))))
    return "\n".join(lines)


def _minified_rule(rule: CssRule) -> str:
    body = ";".join(f"{prop}:{value}" for prop, value in rule.declarations.items())
    opened = "".join(f"{frame}{{" for frame in rule.nested)
    return f"{rule.selector}{{{opened}{body}{'}' * len(rule.nested)}}}"


def _minified_group(group: RuleGroup) -> str:
    outer = group.context.outer_preludes
    body = "".join(_minified_rule(rule) for rule in group.rules)
    return "".join(f"{prelude}{{" for prelude in outer) + body + "}" * len(outer)


def emit(sheet: GeneratedStylesheet, mode: OutputMode | str = OutputMode.PRETTY) -> str:
    """Serialize *sheet*; an empty stylesheet gives an empty string."""
    mode = OutputMode(mode)
    if not sheet.groups:
        return ""
    if mode is OutputMode.MINIFIED:
        return "".join(_minified_group(group) for group in sheet.groups)
    return "\n\n".join(_pretty_group(group) for group in sheet.groups) + "\n"
