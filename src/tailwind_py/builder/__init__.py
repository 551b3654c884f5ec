from tailwind_py.builder.color import parse_hex, with_opacity
from tailwind_py.builder.rule_builder import RuleBuilder, escape_class

__all__ = ["RuleBuilder", "escape_class", "parse_hex", "with_opacity"]
