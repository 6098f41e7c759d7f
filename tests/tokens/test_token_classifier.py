"""Tests for token type and category inference."""

from __future__ import annotations

import pytest

from designscout.tokens.classifier import infer_category, infer_type


@pytest.mark.parametrize("value", ["#3b82f6", "rgb(0, 0, 0)", "RGBA(0,0,0,.5)", "hsl(210, 50%, 40%)"])
def test_color_values_are_detected_without_name_hints(value: str) -> None:
    assert infer_type("brand", value) == "color"


def test_name_hints_take_priority_over_later_rules() -> None:
    assert infer_type("text-color", "inherit") == "color"
    assert infer_type("font-family", "Inter") == "typography"
    assert infer_type("border-width", "2") == "border"
    assert infer_type("z-index", 10) == "size"


def test_value_units_win_before_typography_or_shadow() -> None:
    # px/rem/em values are matched by the spacing rule first.
    assert infer_type("font-size", "16px") == "spacing"
    assert infer_type("shadow-sm", "0 1px 2px black") == "spacing"
    assert infer_type("elevation", "drop-shadow") == "shadow"
    assert infer_type("divider", "solid") == "border"


def test_spacing_names() -> None:
    assert infer_type("spacing-md", "1rem") == "spacing"
    assert infer_type("gutter-padding", "4") == "spacing"
    assert infer_type("space-4", "4") == "spacing"


def test_spacing_word_alone_is_not_a_type_hint() -> None:
    assert infer_type("spacing-unit", "4") == "size"
    assert infer_type("letter-spacing", "normal") == "size"


@pytest.mark.parametrize(
    ("name", "category"),
    [
        ("primary-color", "brand"),
        ("background-primary", "brand"),
        ("error-text", "semantic"),
        ("text-info", "semantic"),
        ("gray-100", "neutral"),
        ("heading-font", "heading"),
        ("body-text", "body"),
        ("space-4", "spacing"),
        ("spacing-md", "spacing"),
        ("grid-gap", "spacing"),
        ("z-index", "misc"),
    ],
)
def test_category_rules_follow_fixed_order(name: str, category: str) -> None:
    assert infer_category(name) == category


def test_category_is_case_insensitive() -> None:
    assert infer_category("PrimaryAccent") == "brand"
