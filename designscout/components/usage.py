"""Complexity, reusability and pattern scoring for a single component."""

from __future__ import annotations

from typing import List, Sequence

from ..models import ComponentProp, ComponentStyle, ComponentUsage

RECOMMEND_SPLIT = "Consider breaking down into smaller components"
RECOMMEND_VARIANTS = "Add variant props to increase reusability"
RECOMMEND_CUSTOMIZATION = "Add className or style prop for customization"


def _any_name(props: Sequence[ComponentProp], *needles: str) -> bool:
    return any(needle in prop.name for prop in props for needle in needles)


def _complexity(props: Sequence[ComponentProp], styles: Sequence[ComponentStyle]) -> str:
    complexity = "simple"
    if len(props) > 5 or len(styles) > 3:
        complexity = "medium"
    if len(props) > 10 or len(styles) > 6:
        complexity = "complex"
    return complexity


def _reusability(props: Sequence[ComponentProp]) -> str:
    has_variants = _any_name(props, "variant", "size", "color")
    has_flexible = any("string" in prop.type or "ReactNode" in prop.type for prop in props)

    reusability = "low"
    if has_variants or has_flexible:
        reusability = "medium"
    if has_variants and has_flexible and len(props) >= 3:
        reusability = "high"
    return reusability


def _design_patterns(props: Sequence[ComponentProp]) -> List[str]:
    patterns: List[str] = []
    if any(prop.name == "children" for prop in props):
        patterns.append("composition")
    if _any_name(props, "onClick", "onPress"):
        patterns.append("interactive")
    if _any_name(props, "variant", "size"):
        patterns.append("variants")
    if _any_name(props, "disabled", "loading"):
        patterns.append("states")
    return patterns


def analyze_usage(
    props: Sequence[ComponentProp], styles: Sequence[ComponentStyle]
) -> ComponentUsage:
    """Score a component from its props and styles."""
    complexity = _complexity(props, styles)
    reusability = _reusability(props)

    recommendations: List[str] = []
    if complexity == "complex":
        recommendations.append(RECOMMEND_SPLIT)
    if reusability == "low":
        recommendations.append(RECOMMEND_VARIANTS)
    if not any(prop.name in ("className", "style") for prop in props):
        recommendations.append(RECOMMEND_CUSTOMIZATION)

    return ComponentUsage(
        complexity=complexity,
        reusability=reusability,
        design_patterns=_design_patterns(props),
        recommendations=recommendations,
    )


__all__ = [
    "RECOMMEND_CUSTOMIZATION",
    "RECOMMEND_SPLIT",
    "RECOMMEND_VARIANTS",
    "analyze_usage",
]
