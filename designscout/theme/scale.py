"""Color scales, semantic palettes and contrast checks."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from ..logging import get_logger
from ..models import ContrastCheck
from .color import contrast_ratio, parse_color

DEFAULT_STEPS = 10
BASE_STEP = "500"

DEFAULT_SEMANTIC_COLORS = {
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#3b82f6",
}

_LOGGER = get_logger("theme")


def generate_color_scale(
    base_color: str,
    steps: int = DEFAULT_STEPS,
    *,
    logger: Optional[logging.Logger | logging.LoggerAdapter] = None,
) -> Dict[str, str]:
    """Build a lightness ramp keyed by step (``"90"`` .. ``"900"`` for 10 steps).

    The ``"500"`` entry always holds the base color itself. A color that
    cannot be parsed yields ``{"500": base_color}``.
    """
    log = logger or _LOGGER
    try:
        base = parse_color(base_color)
    except ValueError as exc:
        log.warning("Failed to generate color scale for %s: %s", base_color, exc)
        return {BASE_STEP: base_color}

    scale: Dict[str, str] = {}
    for index in range(steps):
        lightness = (index + 1) / (steps + 1)
        if lightness > 0.5:
            shade = base.with_luminance(min(0.9, lightness))
        else:
            shade = base.with_luminance(max(0.05, lightness))
        scale[str(round((index + 1) * 900 / steps))] = shade.hex()
    scale[BASE_STEP] = base.hex()

    return dict(sorted(scale.items(), key=lambda item: int(item[0])))


def check_accessibility(
    foreground: str, background: str, target_ratio: float = 4.5
) -> ContrastCheck:
    """Compare the contrast of two colors against ``target_ratio``."""
    try:
        ratio = contrast_ratio(foreground, background)
    except ValueError:
        return ContrastCheck(ratio=0.0, compliant=False)
    return ContrastCheck(ratio=ratio, compliant=ratio >= target_ratio)


def generate_semantic_colors(base_colors: Sequence[str]) -> Dict[str, str]:
    """Success/warning/error/info colors, taken from the base colors when there are four or more."""
    if len(base_colors) < 4:
        return dict(DEFAULT_SEMANTIC_COLORS)
    return {
        "success": base_colors[1] or DEFAULT_SEMANTIC_COLORS["success"],
        "warning": base_colors[2] or DEFAULT_SEMANTIC_COLORS["warning"],
        "error": base_colors[3] or DEFAULT_SEMANTIC_COLORS["error"],
        "info": base_colors[0] or DEFAULT_SEMANTIC_COLORS["info"],
    }


__all__ = [
    "BASE_STEP",
    "DEFAULT_SEMANTIC_COLORS",
    "DEFAULT_STEPS",
    "check_accessibility",
    "generate_color_scale",
    "generate_semantic_colors",
]
