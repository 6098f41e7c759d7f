"""Heuristics that infer a token's type and category from its name and value."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

# Rules are evaluated top to bottom; the first match wins, so order matters
# for names that hit several rules (e.g. "text-color").
_TYPE_RULES: Tuple[Tuple[str, Sequence[str], Sequence[str]], ...] = (
    ("color", ("color",), ("#", "rgb", "hsl")),
    ("spacing", ("space", "margin", "padding"), ("px", "rem", "em")),
    ("typography", ("font", "text", "type"), ()),
    ("shadow", ("shadow",), ("shadow",)),
    ("border", ("border",), ("solid", "dashed")),
)

_CATEGORY_RULES: Tuple[Tuple[str, Sequence[str]], ...] = (
    ("brand", ("primary", "secondary", "accent")),
    ("semantic", ("success", "error", "warning", "info")),
    ("neutral", ("gray", "neutral", "background")),
    ("heading", ("h1", "h2", "heading", "title")),
    ("body", ("body", "text", "paragraph")),
    ("spacing", ("space", "spacing", "gap", "margin", "padding")),
)

DEFAULT_TYPE = "size"
DEFAULT_CATEGORY = "misc"


def infer_type(name: str, value: Any) -> str:
    """Return the token type suggested by ``name`` and ``value``."""
    lower_name = name.lower()
    lower_value = str(value).lower()
    for token_type, name_hints, value_hints in _TYPE_RULES:
        if any(hint in lower_name for hint in name_hints):
            return token_type
        if any(hint in lower_value for hint in value_hints):
            return token_type
    return DEFAULT_TYPE


def infer_category(name: str) -> str:
    """Return the coarse semantic bucket suggested by a token name."""
    lower_name = name.lower()
    for category, hints in _CATEGORY_RULES:
        if any(hint in lower_name for hint in hints):
            return category
    return DEFAULT_CATEGORY


__all__ = ["DEFAULT_CATEGORY", "DEFAULT_TYPE", "infer_category", "infer_type"]
