"""Theme generation from a list of base colors."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..errors import InvalidInputError
from ..logging import get_logger
from ..models import ThemeAccessibility, ThemeResult
from . import presets
from .scale import BASE_STEP, check_accessibility, generate_color_scale, generate_semantic_colors


class ThemeFormat(str, Enum):
    TAILWIND = "tailwind"
    STYLED_COMPONENTS = "styled-components"
    MATERIAL_UI = "material-ui"
    CSS_VARIABLES = "css-variables"
    JSON = "json"

    def render(self, colors: Dict[str, Any], modes: Sequence[str]) -> Any:
        if self is ThemeFormat.TAILWIND:
            return _tailwind_theme(colors)
        if self is ThemeFormat.STYLED_COMPONENTS:
            return _styled_components_theme(colors)
        if self is ThemeFormat.MATERIAL_UI:
            return _material_ui_theme(colors)
        if self is ThemeFormat.CSS_VARIABLES:
            return _css_variables(colors, modes)
        return {"colors": colors}

    @property
    def examples(self) -> List[str]:
        return list(_EXAMPLES.get(self, ()))


_EXAMPLES: Dict[ThemeFormat, Tuple[str, ...]] = {
    ThemeFormat.TAILWIND: (
        "bg-primary-500 text-white",
        "text-primary-600 hover:text-primary-700",
        "border-primary-300 focus:border-primary-500",
    ),
    ThemeFormat.STYLED_COMPONENTS: (
        "background-color: ${props => props.theme.colors.primary[500]};",
        "color: ${props => props.theme.colors.semantic.success};",
        "padding: ${props => props.theme.spacing.md};",
    ),
    ThemeFormat.CSS_VARIABLES: (
        "background-color: var(--color-primary-500);",
        "color: var(--color-semantic-success);",
        "padding: var(--spacing-md);",
    ),
}


# ---------------------------------------------------------------------------
# Format renderers
# ---------------------------------------------------------------------------


def _tailwind_spacing() -> Dict[str, str]:
    spacing = {"px": "1px"}
    for step in presets.TAILWIND_SPACING_STEPS:
        spacing[f"{step:g}"] = f"{step * 0.25:g}rem" if step else "0px"
    return spacing


def _tailwind_theme(colors: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "colors": {**colors, "transparent": "transparent", "current": "currentColor"},
        "fontFamily": {name: list(stack) for name, stack in presets.FONT_FAMILIES.items()},
        "fontSize": {
            name: [size, {"lineHeight": presets.LINE_HEIGHTS[name]}]
            for name, size in presets.FONT_SIZES.items()
        },
        "spacing": _tailwind_spacing(),
        "borderRadius": {
            "none": "0px",
            "sm": presets.BORDER_RADIUS["sm"],
            "DEFAULT": "0.25rem",
            "md": presets.BORDER_RADIUS["md"],
            "lg": presets.BORDER_RADIUS["lg"],
            "xl": presets.BORDER_RADIUS["xl"],
            "2xl": "1rem",
            "3xl": "1.5rem",
            "full": presets.BORDER_RADIUS["full"],
        },
    }


def _styled_components_theme(colors: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "colors": colors,
        "typography": {
            "fontFamily": {
                name: ", ".join(stack) for name, stack in presets.FONT_FAMILIES.items()
            },
            "fontSize": dict(presets.FONT_SIZES),
            "fontWeight": dict(presets.FONT_WEIGHTS),
            "lineHeight": {"tight": 1.25, "normal": 1.5, "relaxed": 1.75},
        },
        "spacing": dict(presets.SPACING),
        "borderRadius": dict(presets.BORDER_RADIUS),
        "shadows": dict(presets.SHADOWS),
        "transitions": dict(presets.TRANSITIONS),
        "breakpoints": dict(presets.BREAKPOINTS),
    }


def _nearest_step(scale: Any, target: int) -> Any:
    """Pick the scale entry whose numeric step is closest to ``target``."""
    if not isinstance(scale, dict):
        return scale
    steps = [key for key in scale if str(key).isdigit()]
    if not steps:
        return scale.get(BASE_STEP)
    best = min(steps, key=lambda key: (abs(int(key) - target), int(key)))
    return scale[best]


def _palette_entry(scale: Any) -> Dict[str, Any]:
    return {
        "light": _nearest_step(scale, 300),
        "main": _nearest_step(scale, 500),
        "dark": _nearest_step(scale, 700),
        "contrastText": "#ffffff",
    }


def _material_ui_theme(colors: Dict[str, Any]) -> Dict[str, Any]:
    primary = colors["primary"]
    secondary = colors.get("secondary") or primary
    semantic = colors.get("semantic") or {}
    return {
        "palette": {
            "primary": _palette_entry(primary),
            "secondary": _palette_entry(secondary),
            "error": {"main": semantic.get("error", "#ef4444")},
            "warning": {"main": semantic.get("warning", "#f59e0b")},
            "info": {"main": semantic.get("info", "#3b82f6")},
            "success": {"main": semantic.get("success", "#10b981")},
        },
        "typography": {
            "fontFamily": ", ".join(presets.FONT_FAMILIES["sans"]),
            "h1": {"fontSize": "2.25rem", "fontWeight": 700, "lineHeight": 1.2},
            "h2": {"fontSize": "1.875rem", "fontWeight": 600, "lineHeight": 1.3},
            "h3": {"fontSize": "1.5rem", "fontWeight": 600, "lineHeight": 1.4},
            "body1": {"fontSize": "1rem", "lineHeight": 1.5},
            "body2": {"fontSize": "0.875rem", "lineHeight": 1.4},
        },
        "spacing": 8,
        "shape": {"borderRadius": 6},
    }


def _flatten(values: Dict[str, Any], prefix: str) -> Iterable[Tuple[str, Any]]:
    for key, value in values.items():
        name = f"{prefix}-{key}"
        if isinstance(value, dict):
            yield from _flatten(value, name)
        else:
            yield name, value


def _css_variables(colors: Dict[str, Any], modes: Sequence[str]) -> str:
    lines = [":root {"]
    lines.extend(f"  --{name}: {value};" for name, value in _flatten(colors, "color"))

    lines.extend(["", "  /* Typography */"])
    lines.extend(
        f"  --font-family-{name}: {', '.join(stack)};"
        for name, stack in presets.FONT_FAMILIES.items()
    )
    lines.append("")
    lines.extend(f"  --font-size-{name}: {size};" for name, size in presets.FONT_SIZES.items())

    lines.extend(["", "  /* Spacing */"])
    lines.extend(f"  --spacing-{name}: {size};" for name, size in presets.SPACING.items())

    lines.extend(["", "  /* Border Radius */"])
    lines.extend(
        f"  --border-radius-{name}: {size};" for name, size in presets.BORDER_RADIUS.items()
    )
    lines.append("}")

    css = "\n".join(lines)
    if "dark" in modes:
        css += '\n\n[data-theme="dark"] {\n}'
    return css


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _scale_name(index: int) -> str:
    if index < len(presets.SCALE_NAMES):
        return presets.SCALE_NAMES[index]
    return f"color{index + 1}"


def generate_theme(
    base_colors: Sequence[str],
    *,
    modes: Sequence[str] = ("light",),
    format: str | ThemeFormat = ThemeFormat.JSON,  # noqa: A002 - public option name
    accessibility: bool = True,
    include_semantic_colors: bool = True,
    contrast_ratio: float = 4.5,
    log_level: int = logging.INFO,
) -> ThemeResult:
    """Generate color scales from ``base_colors`` and render them as a theme."""
    logger = get_logger("theme", level=log_level)
    if not base_colors:
        raise InvalidInputError("At least one base color is required")
    try:
        theme_format = ThemeFormat(format)
    except ValueError as exc:
        raise InvalidInputError(f"Unsupported theme format: {format}") from exc

    logger.info("Starting theme generation (%s) for %s", theme_format.value, ", ".join(base_colors))

    colors: Dict[str, Any] = {}
    scales: Dict[str, List[int]] = {}
    for index, color in enumerate(base_colors):
        name = _scale_name(index)
        colors[name] = generate_color_scale(color, logger=logger)
        scales[name] = [int(step) for step in colors[name] if step.isdigit()]

    if include_semantic_colors:
        colors["semantic"] = generate_semantic_colors(base_colors)
    colors["gray"] = generate_color_scale(presets.NEUTRAL_BASE, logger=logger)

    report = ThemeAccessibility()
    if accessibility:
        primary = base_colors[0]
        on_white = check_accessibility(primary, "#ffffff", contrast_ratio)
        on_black = check_accessibility(primary, "#000000", contrast_ratio)
        if not on_white.compliant and not on_black.compliant:
            report.compliant = False
            report.issues.append(
                f"Primary color {primary} doesn't meet contrast requirements against white or black"
            )
            report.suggestions.append("Consider adjusting the lightness of your primary color")

        for name, color in colors.get("semantic", {}).items():
            if not check_accessibility(color, "#ffffff", contrast_ratio).compliant:
                report.issues.append(f"Semantic color {name} ({color}) may not have sufficient contrast")

    result = ThemeResult(
        theme=theme_format.render(colors, modes),
        colors=colors,
        scales=scales,
        accessibility=report,
        examples=theme_format.examples,
    )
    logger.info(
        "Theme generation completed: %d base colors, compliant=%s, %d issues",
        len(base_colors),
        report.compliant,
        len(report.issues),
    )
    return result


__all__ = ["ThemeFormat", "generate_theme"]
