"""Typography, spacing and radius presets shared by the theme formats."""

from __future__ import annotations

FONT_FAMILIES = {
    "sans": ["Inter", "system-ui", "sans-serif"],
    "serif": ["Merriweather", "serif"],
    "mono": ["Monaco", "monospace"],
}

FONT_SIZES = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
}

LINE_HEIGHTS = {
    "xs": "1rem",
    "sm": "1.25rem",
    "base": "1.5rem",
    "lg": "1.75rem",
    "xl": "1.75rem",
    "2xl": "2rem",
    "3xl": "2.25rem",
    "4xl": "2.5rem",
}

FONT_WEIGHTS = {"light": 300, "normal": 400, "medium": 500, "semibold": 600, "bold": 700}

SPACING = {
    "xs": "0.25rem",
    "sm": "0.5rem",
    "md": "1rem",
    "lg": "1.5rem",
    "xl": "2rem",
    "2xl": "3rem",
    "3xl": "4rem",
    "4xl": "6rem",
}

# Tailwind's numeric spacing scale: step -> rem, step 1 == 0.25rem.
TAILWIND_SPACING_STEPS = (
    0, 0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12,
    14, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96,
)

BORDER_RADIUS = {
    "sm": "0.125rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "full": "9999px",
}

SHADOWS = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1)",
}

TRANSITIONS = {
    "fast": "150ms ease-in-out",
    "normal": "300ms ease-in-out",
    "slow": "500ms ease-in-out",
}

BREAKPOINTS = {"sm": "640px", "md": "768px", "lg": "1024px", "xl": "1280px", "2xl": "1536px"}

NEUTRAL_BASE = "#6b7280"
SCALE_NAMES = ("primary", "secondary", "tertiary", "quaternary")
