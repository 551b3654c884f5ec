from tailwind_py.theme.defaults import (
    DEFAULT_BORDER_RADIUS,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_BREAKPOINTS,
    DEFAULT_COLORS,
    DEFAULT_CONTAINERS,
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_LETTER_SPACING,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_OPACITY,
    DEFAULT_SPACING,
    DEFAULT_Z_INDEX,
)

__all__ = [
    "DEFAULT_BORDER_RADIUS",
    "DEFAULT_BORDER_WIDTH",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_COLORS",
    "DEFAULT_CONTAINERS",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_FONT_WEIGHT",
    "DEFAULT_LETTER_SPACING",
    "DEFAULT_LINE_HEIGHT",
    "DEFAULT_OPACITY",
    "DEFAULT_SPACING",
    "DEFAULT_Z_INDEX",
]
