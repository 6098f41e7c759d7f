"""Color scales, contrast checks and theme generation."""

from .color import Color, contrast_ratio, parse_color
from .generator import ThemeFormat, generate_theme
from .scale import (
    DEFAULT_SEMANTIC_COLORS,
    check_accessibility,
    generate_color_scale,
    generate_semantic_colors,
)

__all__ = [
    "Color",
    "DEFAULT_SEMANTIC_COLORS",
    "ThemeFormat",
    "check_accessibility",
    "contrast_ratio",
    "generate_color_scale",
    "generate_semantic_colors",
    "generate_theme",
    "parse_color",
]
