"""Engine configuration: theme tables plus output and cascade options."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from tailwind_py.errors import ConfigError
from tailwind_py.model.context import ContextCategory
from tailwind_py.theme import defaults


class DarkMode(StrEnum):
    """How the ``dark`` variant is expressed in CSS."""

    CLASS = "class"
    MEDIA = "media"


class OutputMode(StrEnum):
    """Serialization style for generated CSS text."""

    PRETTY = "pretty"
    MINIFIED = "minified"


DEFAULT_CASCADE_PRIORITY: tuple[ContextCategory, ...] = (
    ContextCategory.BASE,
    ContextCategory.RESPONSIVE,
    ContextCategory.STATE,
    ContextCategory.CONTAINER,
)

# Config keys holding flat name -> literal tables.
_SCALE_KEYS = (
    "spacing",
    "breakpoints",
    "containers",
    "font_size",
    "font_weight",
    "line_height",
    "letter_spacing",
    "border_radius",
    "border_width",
    "opacity",
    "z_index",
)


def _frozen(table: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({str(k): str(v) for k, v in table.items()})


def _frozen_palette(palette: Mapping[str, Any]) -> Mapping[str, Mapping[str, str]]:
    result: dict[str, Mapping[str, str]] = {}
    for name, shades in palette.items():
        if isinstance(shades, str):
            shades = {"DEFAULT": shades}
        if not isinstance(shades, Mapping):
            raise ConfigError(f"Colour {name!r} must be a string or a shade table")
        result[str(name)] = _frozen(shades)
    return MappingProxyType(result)


@dataclass(frozen=True)
class ThemeConfig:
    """Everything the registry, resolver and emitter read from configuration.

    Table fields are stored as read-only mappings, so one instance can be
    shared by any number of generators and threads.
    """

    spacing: Mapping[str, str] = field(default_factory=lambda: dict(defaults.DEFAULT_SPACING))
    colors: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: dict(defaults.DEFAULT_COLORS)
    )
    breakpoints: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_BREAKPOINTS)
    )
    containers: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_CONTAINERS)
    )
    font_size: Mapping[str, str] = field(default_factory=lambda: dict(defaults.DEFAULT_FONT_SIZE))
    font_weight: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_FONT_WEIGHT)
    )
    line_height: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_LINE_HEIGHT)
    )
    letter_spacing: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_LETTER_SPACING)
    )
    border_radius: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_BORDER_RADIUS)
    )
    border_width: Mapping[str, str] = field(
        default_factory=lambda: dict(defaults.DEFAULT_BORDER_WIDTH)
    )
    opacity: Mapping[str, str] = field(default_factory=lambda: dict(defaults.DEFAULT_OPACITY))
    z_index: Mapping[str, str] = field(default_factory=lambda: dict(defaults.DEFAULT_Z_INDEX))
    dark_mode: DarkMode = DarkMode.CLASS
    dark_class: str = "dark"
    output_mode: OutputMode = OutputMode.PRETTY
    cascade_priority: tuple[ContextCategory, ...] = DEFAULT_CASCADE_PRIORITY
    duplicate_variants: str = "error"
    cache_size: int | None = None

    def __post_init__(self) -> None:
        for key in _SCALE_KEYS:
            object.__setattr__(self, key, _frozen(getattr(self, key)))
        object.__setattr__(self, "colors", _frozen_palette(self.colors))
        try:
            object.__setattr__(self, "dark_mode", DarkMode(self.dark_mode))
            object.__setattr__(self, "output_mode", OutputMode(self.output_mode))
            priority = tuple(ContextCategory(c) for c in self.cascade_priority)
        except ValueError as exc:
            raise ConfigError(str(exc), cause=exc) from exc
        if sorted(priority) != sorted(DEFAULT_CASCADE_PRIORITY):
            raise ConfigError(
                "cascade_priority must list each of "
                + ", ".join(c.value for c in DEFAULT_CASCADE_PRIORITY)
                + " exactly once"
            )
        object.__setattr__(self, "cascade_priority", priority)
        if self.duplicate_variants != "error":
            raise ConfigError(
                f"duplicate_variants must be 'error', got {self.duplicate_variants!r}"
            )
        if self.cache_size is not None and (
            not isinstance(self.cache_size, int)
            or isinstance(self.cache_size, bool)
            or self.cache_size <= 0
        ):
            raise ConfigError(f"cache_size must be a positive integer, got {self.cache_size!r}")
        if not self.dark_class:
            raise ConfigError("dark_class must be a non-empty string")

    # --- construction -----------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThemeConfig:
        """Build a config from a plain dict, merged over the stock theme.

        Table-valued keys are merged entry by entry (palettes shade by shade)
        unless ``"extend": false`` is given, in which case they replace the
        stock tables outright.  Scalar keys always replace.
        """
        known = {f.name for f in fields(cls)}
        extend = bool(data.get("extend", True))
        unknown = set(data) - known - {"extend"}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        base = cls()
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key == "extend":
                continue
            if key in _SCALE_KEYS:
                if not isinstance(value, Mapping):
                    raise ConfigError(f"{key} must be a table, got {type(value).__name__}")
                kwargs[key] = {**getattr(base, key), **value} if extend else dict(value)
            elif key == "colors":
                if not isinstance(value, Mapping):
                    raise ConfigError(f"colors must be a table, got {type(value).__name__}")
                kwargs[key] = _merge_palette(base.colors, value) if extend else dict(value)
            elif key == "cascade_priority":
                kwargs[key] = tuple(value)
            else:
                kwargs[key] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict that ``from_dict`` accepts."""
        data: dict[str, Any] = {key: dict(getattr(self, key)) for key in _SCALE_KEYS}
        data["colors"] = {name: dict(shades) for name, shades in self.colors.items()}
        data["dark_mode"] = self.dark_mode.value
        data["dark_class"] = self.dark_class
        data["output_mode"] = self.output_mode.value
        data["cascade_priority"] = [c.value for c in self.cascade_priority]
        data["duplicate_variants"] = self.duplicate_variants
        data["cache_size"] = self.cache_size
        data["extend"] = False
        return data

    def replace(self, **changes: Any) -> ThemeConfig:
        """Return a copy with *changes* applied (same merge rules as ``from_dict``)."""
        data = self.to_dict()
        data.update(changes)
        return ThemeConfig.from_dict(data)


def _merge_palette(
    base: Mapping[str, Mapping[str, str]], override: Mapping[str, Any]
) -> dict[str, Any]:
    merged: dict[str, Any] = {name: dict(shades) for name, shades in base.items()}
    for name, shades in override.items():
        if isinstance(shades, str):
            shades = {"DEFAULT": shades}
        if not isinstance(shades, Mapping):
            raise ConfigError(f"Colour {name!r} must be a string or a shade table")
        merged[name] = {**merged.get(name, {}), **shades}
    return merged


def load_config(path: Path | str) -> ThemeConfig:
    """Read a JSON theme file at *path* and build a ``ThemeConfig`` from it."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return ThemeConfig.from_dict(data)


__all__ = [
    "DarkMode",
    "OutputMode",
    "ThemeConfig",
    "DEFAULT_CASCADE_PRIORITY",
    "load_config",
]
