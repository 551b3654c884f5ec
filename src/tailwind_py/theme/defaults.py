"""Stock theme tables: spacing, palette, breakpoints and the smaller scales.

Every table here is plain data.  ``ThemeConfig`` copies them into read-only
mappings, and user configuration is merged on top of them per key.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Spacing (padding, margin, gap, inset, translate, sizing)
# ---------------------------------------------------------------------------

DEFAULT_SPACING: dict[str, str] = {
    "0": "0px",
    "px": "1px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

# ---------------------------------------------------------------------------
# Responsive and container breakpoints
# ---------------------------------------------------------------------------

DEFAULT_BREAKPOINTS: dict[str, str] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

DEFAULT_CONTAINERS: dict[str, str] = {
    "xs": "320px",
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

# ---------------------------------------------------------------------------
# Colour palette: name -> shade -> literal
# ---------------------------------------------------------------------------

_SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


def _palette(*hexes: str) -> dict[str, str]:
    return dict(zip(_SHADES, hexes))


DEFAULT_COLORS: dict[str, dict[str, str]] = {
    "inherit": {"DEFAULT": "inherit"},
    "current": {"DEFAULT": "currentColor"},
    "transparent": {"DEFAULT": "transparent"},
    "black": {"DEFAULT": "#000000"},
    "white": {"DEFAULT": "#ffffff"},
    "slate": _palette(
        "#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b",
        "#475569", "#334155", "#1e293b", "#0f172a", "#020617",
    ),
    "gray": _palette(
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
        "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ),
    "zinc": _palette(
        "#fafafa", "#f4f4f5", "#e4e4e7", "#d4d4d8", "#a1a1aa", "#71717a",
        "#52525b", "#3f3f46", "#27272a", "#18181b", "#09090b",
    ),
    "neutral": _palette(
        "#fafafa", "#f5f5f5", "#e5e5e5", "#d4d4d4", "#a3a3a3", "#737373",
        "#525252", "#404040", "#262626", "#171717", "#0a0a0a",
    ),
    "stone": _palette(
        "#fafaf9", "#f5f5f4", "#e7e5e4", "#d6d3d1", "#a8a29e", "#78716c",
        "#57534e", "#44403c", "#292524", "#1c1917", "#0c0a09",
    ),
    "red": _palette(
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
        "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "orange": _palette(
        "#fff7ed", "#ffedd5", "#fed7aa", "#fdba74", "#fb923c", "#f97316",
        "#ea580c", "#c2410c", "#9a3412", "#7c2d12", "#431407",
    ),
    "amber": _palette(
        "#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b",
        "#d97706", "#b45309", "#92400e", "#78350f", "#451a03",
    ),
    "yellow": _palette(
        "#fefce8", "#fef9c3", "#fef08a", "#fde047", "#facc15", "#eab308",
        "#ca8a04", "#a16207", "#854d0e", "#713f12", "#422006",
    ),
    "lime": _palette(
        "#f7fee7", "#ecfccb", "#d9f99d", "#bef264", "#a3e635", "#84cc16",
        "#65a30d", "#4d7c0f", "#3f6212", "#365314", "#1a2e05",
    ),
    "green": _palette(
        "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
        "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
    ),
    "emerald": _palette(
        "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981",
        "#059669", "#047857", "#065f46", "#064e3b", "#022c22",
    ),
    "teal": _palette(
        "#f0fdfa", "#ccfbf1", "#99f6e4", "#5eead4", "#2dd4bf", "#14b8a6",
        "#0d9488", "#0f766e", "#115e59", "#134e4a", "#042f2e",
    ),
    "cyan": _palette(
        "#ecfeff", "#cffafe", "#a5f3fc", "#67e8f9", "#22d3ee", "#06b6d4",
        "#0891b2", "#0e7490", "#155e75", "#164e63", "#083344",
    ),
    "sky": _palette(
        "#f0f9ff", "#e0f2fe", "#bae6fd", "#7dd3fc", "#38bdf8", "#0ea5e9",
        "#0284c7", "#0369a1", "#075985", "#0c4a6e", "#082f49",
    ),
    "blue": _palette(
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
        "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
    "indigo": _palette(
        "#eef2ff", "#e0e7ff", "#c7d2fe", "#a5b4fc", "#818cf8", "#6366f1",
        "#4f46e5", "#4338ca", "#3730a3", "#312e81", "#1e1b4b",
    ),
    "violet": _palette(
        "#f5f3ff", "#ede9fe", "#ddd6fe", "#c4b5fd", "#a78bfa", "#8b5cf6",
        "#7c3aed", "#6d28d9", "#5b21b6", "#4c1d95", "#2e1065",
    ),
    "purple": _palette(
        "#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7",
        "#9333ea", "#7e22ce", "#6b21a8", "#581c87", "#3b0764",
    ),
    "fuchsia": _palette(
        "#fdf4ff", "#fae8ff", "#f5d0fe", "#f0abfc", "#e879f9", "#d946ef",
        "#c026d3", "#a21caf", "#86198f", "#701a75", "#4a044e",
    ),
    "pink": _palette(
        "#fdf2f8", "#fce7f3", "#fbcfe8", "#f9a8d4", "#f472b6", "#ec4899",
        "#db2777", "#be185d", "#9d174d", "#831843", "#500724",
    ),
    "rose": _palette(
        "#fff1f2", "#ffe4e6", "#fecdd3", "#fda4af", "#fb7185", "#f43f5e",
        "#e11d48", "#be123c", "#9f1239", "#881337", "#4c0519",
    ),
}

# ---------------------------------------------------------------------------
# Smaller scales
# ---------------------------------------------------------------------------

DEFAULT_FONT_SIZE: dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
    "6xl": "3.75rem",
    "7xl": "4.5rem",
    "8xl": "6rem",
    "9xl": "8rem",
}

DEFAULT_FONT_WEIGHT: dict[str, str] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

DEFAULT_LINE_HEIGHT: dict[str, str] = {
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

DEFAULT_LETTER_SPACING: dict[str, str] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

DEFAULT_BORDER_RADIUS: dict[str, str] = {
    "none": "0px",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

DEFAULT_BORDER_WIDTH: dict[str, str] = {
    "DEFAULT": "1px",
    "0": "0px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

DEFAULT_OPACITY: dict[str, str] = {
    str(step): "1" if step == 100 else "0" if step == 0 else f"{step / 100:g}"
    for step in (0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100)
}

DEFAULT_Z_INDEX: dict[str, str] = {
    "0": "0",
    "10": "10",
    "20": "20",
    "30": "30",
    "40": "40",
    "50": "50",
    "auto": "auto",
}
