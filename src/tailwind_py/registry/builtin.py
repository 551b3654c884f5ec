"""The stock utility set, built from a ``ThemeConfig``.

Registration order matters twice: definitions sharing a name are tried in
this order (``text-lg`` before ``text-blue-500``), and rules inside one
output group are emitted in this order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from tailwind_py.model.definition import Arbitrary, Color, Keyword, Scale, UtilityDefinition

if TYPE_CHECKING:
    from tailwind_py.config import ThemeConfig


def _percent(numerator: int, denominator: int) -> str:
    text = f"{numerator / denominator * 100:.6f}".rstrip("0").rstrip(".")
    return f"{text}%"


FRACTIONS: dict[str, str] = {
    f"{n}/{d}": _percent(n, d)
    for d in (2, 3, 4, 5, 6, 12)
    for n in range(1, d)
}

MAX_WIDTH: dict[str, str] = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "prose": "65ch",
}

_SIZING_KEYWORDS: dict[str, str] = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

_OUTLINE_WIDTH = {"0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px"}
_STROKE_WIDTH = {"0": "0", "1": "1", "2": "2"}
_SIDES = {
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
}
_CORNERS = {
    "t": ("top-left", "top-right"),
    "r": ("top-right", "bottom-right"),
    "b": ("bottom-right", "bottom-left"),
    "l": ("top-left", "bottom-left"),
    "tl": ("top-left",),
    "tr": ("top-right",),
    "br": ("bottom-right",),
    "bl": ("bottom-left",),
}
_SHADOW = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}
_RING_WIDTH = {"0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px", "DEFAULT": "3px"}
_RING = "0 0 0 {} var(--tw-ring-color, rgb(59 130 246 / 0.5))"
_MILLISECONDS = {str(n): f"{n}ms" for n in (0, 75, 100, 150, 200, 300, 500, 700, 1000)}
_DEGREES = {str(n): f"{n}deg" for n in (0, 1, 2, 3, 6, 12, 45, 90, 180)}
_FACTORS = {
    "0": "0",
    "50": "0.5",
    "75": "0.75",
    "90": "0.9",
    "95": "0.95",
    "100": "1",
    "105": "1.05",
    "110": "1.1",
    "125": "1.25",
    "150": "1.5",
    "200": "2",
}
_BLUR = {
    "none": "0",
    "sm": "4px",
    "DEFAULT": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
    "2xl": "40px",
    "3xl": "64px",
}
_TOGGLE_FILTER = {"0": "0", "DEFAULT": "100%"}
_DIRECTIONS = {
    "t": "to top",
    "tr": "to top right",
    "r": "to right",
    "br": "to bottom right",
    "b": "to bottom",
    "bl": "to bottom left",
    "l": "to left",
    "tl": "to top left",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _props(props: str | tuple[str, ...]) -> tuple[str, ...]:
    return (props,) if isinstance(props, str) else tuple(props)


def _literal(name: str, props: str | tuple[str, ...], value: str) -> UtilityDefinition:
    return UtilityDefinition(
        name, _props(props), Keyword({"": value}), arbitrary=None, exact=True
    )


def _literals(props: str | tuple[str, ...], table: Mapping[str, str]) -> list[UtilityDefinition]:
    return [_literal(name, props, value) for name, value in table.items()]


def _keywords(
    name: str,
    props: str | tuple[str, ...],
    values: Mapping[str, str],
    *,
    arbitrary: str | None = None,
) -> UtilityDefinition:
    return UtilityDefinition(name, _props(props), Keyword(dict(values)), arbitrary=arbitrary)


def _scale(
    name: str,
    props: str | tuple[str, ...],
    steps: Mapping[str, str],
    *,
    negative: bool = False,
    arbitrary: str | None = "any",
    template: str = "{}",
) -> UtilityDefinition:
    return UtilityDefinition(
        name,
        _props(props),
        Scale(dict(steps)),
        negative=negative,
        arbitrary=arbitrary,
        template=template,
    )


def _color(
    name: str, props: str | tuple[str, ...], palette: Mapping[str, Mapping[str, str]]
) -> UtilityDefinition:
    return UtilityDefinition(name, _props(props), Color(palette), arbitrary="color")


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------


def _layout() -> list[UtilityDefinition]:
    defs = _literals("display", {
        "block": "block",
        "inline-block": "inline-block",
        "inline": "inline",
        "flex": "flex",
        "inline-flex": "inline-flex",
        "grid": "grid",
        "inline-grid": "inline-grid",
        "table": "table",
        "flow-root": "flow-root",
        "contents": "contents",
        "list-item": "list-item",
        "hidden": "none",
    })
    defs += _literals("position", {
        "static": "static",
        "fixed": "fixed",
        "absolute": "absolute",
        "relative": "relative",
        "sticky": "sticky",
    })
    defs += _literals("visibility", {
        "visible": "visible",
        "invisible": "hidden",
        "collapse": "collapse",
    })
    overflow = {v: v for v in ("auto", "hidden", "clip", "visible", "scroll")}
    defs += [
        _keywords("overflow", "overflow", overflow),
        _keywords("overflow-x", "overflow-x", overflow),
        _keywords("overflow-y", "overflow-y", overflow),
        _keywords("aspect", "aspect-ratio", {
            "auto": "auto",
            "square": "1 / 1",
            "video": "16 / 9",
        }, arbitrary="any"),
    ]
    return defs


def _inset(config: ThemeConfig) -> list[UtilityDefinition]:
    steps = {**config.spacing, **FRACTIONS, "auto": "auto", "full": "100%"}
    families = {
        "inset": ("inset",),
        "inset-x": ("left", "right"),
        "inset-y": ("top", "bottom"),
        "top": ("top",),
        "right": ("right",),
        "bottom": ("bottom",),
        "left": ("left",),
        "start": ("inset-inline-start",),
        "end": ("inset-inline-end",),
    }
    defs = [_scale(name, props, steps, negative=True) for name, props in families.items()]
    defs.append(_scale("z", "z-index", config.z_index, negative=True))
    return defs


def _spacing(config: ThemeConfig) -> list[UtilityDefinition]:
    margin = {**config.spacing, "auto": "auto"}
    defs = [_scale("m", "margin", margin, negative=True)]
    defs += [
        _scale(f"m{side}", tuple(f"margin-{s}" for s in sides), margin, negative=True)
        for side, sides in _SIDES.items()
    ]
    defs += [
        _scale("ms", "margin-inline-start", margin, negative=True),
        _scale("me", "margin-inline-end", margin, negative=True),
        _scale("p", "padding", config.spacing),
    ]
    defs += [
        _scale(f"p{side}", tuple(f"padding-{s}" for s in sides), config.spacing)
        for side, sides in _SIDES.items()
    ]
    defs += [
        _scale("ps", "padding-inline-start", config.spacing),
        _scale("pe", "padding-inline-end", config.spacing),
        _scale("gap", "gap", config.spacing),
        _scale("gap-x", "column-gap", config.spacing),
        _scale("gap-y", "row-gap", config.spacing),
    ]
    return defs


def _sizing(config: ThemeConfig) -> list[UtilityDefinition]:
    base = {**config.spacing, **FRACTIONS, **_SIZING_KEYWORDS}
    max_width = {**MAX_WIDTH}
    for name, width in config.breakpoints.items():
        max_width[f"screen-{name}"] = width
    return [
        _scale("w", "width", {**base, "screen": "100vw"}),
        _scale("min-w", "min-width", {**base, "screen": "100vw"}),
        _scale("max-w", "max-width", max_width),
        _scale("h", "height", {**base, "screen": "100vh"}),
        _scale("min-h", "min-height", {**base, "screen": "100vh"}),
        _scale("max-h", "max-height", {**base, "screen": "100vh"}),
        _scale("size", ("width", "height"), base),
        _scale("basis", "flex-basis", base),
    ]


def _flex_grid() -> list[UtilityDefinition]:
    defs = _literals("flex-direction", {
        "flex-row": "row",
        "flex-row-reverse": "row-reverse",
        "flex-col": "column",
        "flex-col-reverse": "column-reverse",
    })
    defs += _literals("flex-wrap", {
        "flex-wrap": "wrap",
        "flex-wrap-reverse": "wrap-reverse",
        "flex-nowrap": "nowrap",
    })
    columns = {str(n): f"repeat({n}, minmax(0, 1fr))" for n in range(1, 13)}
    spans = {str(n): f"span {n} / span {n}" for n in range(1, 13)}
    defs += [
        _keywords("flex", "flex", {
            "1": "1 1 0%",
            "auto": "1 1 auto",
            "initial": "0 1 auto",
            "none": "none",
        }, arbitrary="any"),
        _keywords("grow", "flex-grow", {"": "1", "0": "0"}, arbitrary="any"),
        _keywords("shrink", "flex-shrink", {"": "1", "0": "0"}, arbitrary="any"),
        _keywords("grid-cols", "grid-template-columns", {
            **columns, "none": "none", "subgrid": "subgrid",
        }, arbitrary="any"),
        _keywords("grid-rows", "grid-template-rows", {
            **columns, "none": "none", "subgrid": "subgrid",
        }, arbitrary="any"),
        _keywords("col-span", "grid-column", {**spans, "full": "1 / -1"}, arbitrary="any"),
        _keywords("row-span", "grid-row", {**spans, "full": "1 / -1"}, arbitrary="any"),
        _keywords("justify", "justify-content", {
            "normal": "normal",
            "start": "flex-start",
            "end": "flex-end",
            "center": "center",
            "between": "space-between",
            "around": "space-around",
            "evenly": "space-evenly",
            "stretch": "stretch",
        }),
        _keywords("justify-items", "justify-items", {
            v: v for v in ("start", "end", "center", "stretch")
        }),
        _keywords("justify-self", "justify-self", {
            v: v for v in ("auto", "start", "end", "center", "stretch")
        }),
        _keywords("items", "align-items", {
            "start": "flex-start",
            "end": "flex-end",
            "center": "center",
            "baseline": "baseline",
            "stretch": "stretch",
        }),
        _keywords("self", "align-self", {
            "auto": "auto",
            "start": "flex-start",
            "end": "flex-end",
            "center": "center",
            "stretch": "stretch",
            "baseline": "baseline",
        }),
    ]
    return defs


def _interactivity() -> list[UtilityDefinition]:
    cursors = (
        "auto", "default", "pointer", "wait", "text", "move", "help",
        "not-allowed", "none", "grab", "grabbing",
    )
    return [
        _keywords("cursor", "cursor", {c: c for c in cursors}, arbitrary="any"),
        _keywords("pointer-events", "pointer-events", {"none": "none", "auto": "auto"}),
        _keywords("select", "user-select", {v: v for v in ("none", "text", "all", "auto")}),
    ]


def _borders(config: ThemeConfig) -> list[UtilityDefinition]:
    defs = [_scale("rounded", "border-radius", config.border_radius)]
    defs += [
        _scale(
            f"rounded-{corner}",
            tuple(f"border-{c}-radius" for c in corners),
            config.border_radius,
        )
        for corner, corners in _CORNERS.items()
    ]
    defs += _literals("border-style", {
        f"border-{style}": style
        for style in ("solid", "dashed", "dotted", "double", "hidden", "none")
    })
    defs += [
        _literal("border-collapse", "border-collapse", "collapse"),
        _literal("border-separate", "border-collapse", "separate"),
        _scale("border", "border-width", config.border_width, arbitrary="length"),
        _color("border", "border-color", config.colors),
    ]
    for side, sides in _SIDES.items():
        defs.append(_scale(
            f"border-{side}",
            tuple(f"border-{s}-width" for s in sides),
            config.border_width,
            arbitrary="length",
        ))
        defs.append(_color(f"border-{side}", tuple(f"border-{s}-color" for s in sides), config.colors))
    return defs


def _backgrounds(config: ThemeConfig) -> list[UtilityDefinition]:
    return [
        _literal("bg-none", "background-image", "none"),
        _color("bg", "background-color", config.colors),
        UtilityDefinition(
            "bg", ("background-image",), Arbitrary("background-image"), arbitrary="image"
        ),
        _color("fill", "fill", config.colors),
        _scale("stroke", "stroke-width", _STROKE_WIDTH, arbitrary="length"),
        _color("stroke", "stroke", config.colors),
    ]


def _typography(config: ThemeConfig) -> list[UtilityDefinition]:
    defs = [
        _keywords("text", "text-align", {
            v: v for v in ("left", "center", "right", "justify", "start", "end")
        }),
        _scale("text", "font-size", config.font_size, arbitrary="length"),
        _color("text", "color", config.colors),
        _keywords("font", "font-family", {
            "sans": 'ui-sans-serif, system-ui, sans-serif',
            "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
            "mono": "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace",
        }),
        _scale("font", "font-weight", config.font_weight),
        _scale("leading", "line-height", config.line_height),
        _scale("tracking", "letter-spacing", config.letter_spacing, negative=True),
        _keywords("whitespace", "white-space", {
            v: v for v in ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces")
        }),
        _color("decoration", "text-decoration-color", config.colors),
    ]
    defs += _literals("font-style", {"italic": "italic", "not-italic": "normal"})
    defs += _literals("text-decoration-line", {
        "underline": "underline",
        "overline": "overline",
        "line-through": "line-through",
        "no-underline": "none",
    })
    defs += _literals("text-transform", {
        "uppercase": "uppercase",
        "lowercase": "lowercase",
        "capitalize": "capitalize",
        "normal-case": "none",
    })
    return defs


def _effects(config: ThemeConfig) -> list[UtilityDefinition]:
    translate = {**config.spacing, **FRACTIONS, "full": "100%"}
    return [
        _scale("opacity", "opacity", config.opacity),
        _literal("outline", "outline-style", "solid"),
        _literal("outline-none", "outline-style", "none"),
        _literal("outline-dashed", "outline-style", "dashed"),
        _scale("outline", "outline-width", _OUTLINE_WIDTH, arbitrary="length"),
        _color("outline", "outline-color", config.colors),
        _color("accent", "accent-color", config.colors),
        _color("caret", "caret-color", config.colors),
        _scale(
            "translate-x", "transform", translate, negative=True, template="translateX({})"
        ),
        _scale(
            "translate-y", "transform", translate, negative=True, template="translateY({})"
        ),
    ]


def _shadows(config: ThemeConfig) -> list[UtilityDefinition]:
    return [
        _scale("shadow", "box-shadow", _SHADOW),
        _scale("ring", "box-shadow", _RING_WIDTH, arbitrary="length", template=_RING),
        _color("ring", "--tw-ring-color", config.colors),
    ]


def _transitions() -> list[UtilityDefinition]:
    colors = "color, background-color, border-color, text-decoration-color, fill, stroke"
    return [
        _keywords("transition", "transition-property", {
            "": f"{colors}, opacity, box-shadow, transform, filter, backdrop-filter",
            "none": "none",
            "all": "all",
            "colors": colors,
            "opacity": "opacity",
            "shadow": "box-shadow",
            "transform": "transform",
        }, arbitrary="any"),
        _scale("duration", "transition-duration", _MILLISECONDS),
        _scale("delay", "transition-delay", _MILLISECONDS),
        _keywords("ease", "transition-timing-function", {
            "linear": "linear",
            "in": "cubic-bezier(0.4, 0, 1, 1)",
            "out": "cubic-bezier(0, 0, 0.2, 1)",
            "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
        }, arbitrary="any"),
    ]


def _transforms() -> list[UtilityDefinition]:
    skew = {k: v for k, v in _DEGREES.items() if int(k) <= 12}
    origins = {
        "center": "center",
        "top": "top",
        "top-right": "top right",
        "right": "right",
        "bottom-right": "bottom right",
        "bottom": "bottom",
        "bottom-left": "bottom left",
        "left": "left",
        "top-left": "top left",
    }
    return [
        _scale("rotate", "rotate", _DEGREES, negative=True),
        _scale("scale", "scale", _FACTORS, negative=True),
        _scale("scale-x", "scale", _FACTORS, negative=True, template="{} 1"),
        _scale("scale-y", "scale", _FACTORS, negative=True, template="1 {}"),
        _scale("skew-x", "transform", skew, negative=True, template="skewX({})"),
        _scale("skew-y", "transform", skew, negative=True, template="skewY({})"),
        _keywords("origin", "transform-origin", origins, arbitrary="any"),
    ]


def _filters() -> list[UtilityDefinition]:
    defs: list[UtilityDefinition] = []
    for prefix, prop in (("", "filter"), ("backdrop-", "backdrop-filter")):
        defs += [
            _scale(f"{prefix}blur", prop, _BLUR, arbitrary="length", template="blur({})"),
            _scale(f"{prefix}brightness", prop, _FACTORS, template="brightness({})"),
            _scale(f"{prefix}contrast", prop, _FACTORS, template="contrast({})"),
            _scale(f"{prefix}grayscale", prop, _TOGGLE_FILTER, template="grayscale({})"),
            _scale(f"{prefix}invert", prop, _TOGGLE_FILTER, template="invert({})"),
            _scale(f"{prefix}sepia", prop, _TOGGLE_FILTER, template="sepia({})"),
        ]
    return defs


def _gradients(config: ThemeConfig) -> list[UtilityDefinition]:
    stops = "var(--tw-gradient-from, transparent), var(--tw-gradient-to, transparent)"
    defs = _literals("background-image", {
        f"bg-gradient-to-{side}": f"linear-gradient({direction}, {stops})"
        for side, direction in _DIRECTIONS.items()
    })
    defs += [
        _color("from", "--tw-gradient-from", config.colors),
        _color("to", "--tw-gradient-to", config.colors),
    ]
    return defs


def _tables(config: ThemeConfig) -> list[UtilityDefinition]:
    defs = _literals("display", {
        name: name
        for name in (
            "table-caption", "table-cell", "table-column", "table-column-group",
            "table-footer-group", "table-header-group", "table-row-group", "table-row",
        )
    })
    defs += _literals("table-layout", {"table-auto": "auto", "table-fixed": "fixed"})
    defs += _literals("caption-side", {"caption-top": "top", "caption-bottom": "bottom"})
    defs.append(_scale("border-spacing", "border-spacing", config.spacing))
    return defs


def _columns() -> list[UtilityDefinition]:
    sizes = ("xs", "sm", "md", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl")
    widths = {"3xs": "16rem", "2xs": "18rem", **{size: MAX_WIDTH[size] for size in sizes}}
    counts = {str(n): str(n) for n in range(1, 13)}
    return [_keywords("columns", "columns", {**counts, "auto": "auto", **widths}, arbitrary="any")]


def builtin_definitions(config: ThemeConfig) -> list[UtilityDefinition]:
    """Every stock definition for *config*, in registration order."""
    return [
        *_layout(),
        *_inset(config),
        *_spacing(config),
        *_sizing(config),
        *_flex_grid(),
        *_interactivity(),
        *_borders(config),
        *_backgrounds(config),
        *_typography(config),
        *_effects(config),
        *_shadows(config),
        *_transitions(),
        *_transforms(),
        *_filters(),
        *_gradients(config),
        *_tables(config),
        *_columns(),
    ]
