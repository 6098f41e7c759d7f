"""Tests for theme generation and the per-format renderers."""

from __future__ import annotations

import pytest

from designscout.errors import InvalidInputError
from designscout.theme.generator import ThemeFormat, generate_theme

PRIMARY = "#3b82f6"
SCALE_STEPS = [90, 180, 270, 360, 450, 500, 540, 630, 720, 810, 900]


def test_json_theme_holds_scales_semantic_and_gray() -> None:
    result = generate_theme([PRIMARY])

    assert list(result.colors) == ["primary", "semantic", "gray"]
    assert result.colors["primary"]["500"] == PRIMARY
    assert result.colors["gray"]["500"] == "#6b7280"
    assert result.scales == {"primary": SCALE_STEPS}
    assert result.theme == {"colors": result.colors}
    assert result.examples == []


def test_scale_names_follow_base_color_order() -> None:
    result = generate_theme(["#111111", "#222222", "#333333", "#444444", "#555555"])

    assert list(result.scales) == ["primary", "secondary", "tertiary", "quaternary", "color5"]
    assert result.colors["semantic"]["success"] == "#222222"


def test_semantic_colors_can_be_left_out() -> None:
    result = generate_theme([PRIMARY], include_semantic_colors=False)

    assert "semantic" not in result.colors
    assert result.accessibility.issues == []


def test_accessibility_flags_semantic_colors_without_failing_theme() -> None:
    report = generate_theme([PRIMARY]).accessibility

    assert report.compliant is True
    assert report.issues == [
        "Semantic color success (#10b981) may not have sufficient contrast",
        "Semantic color warning (#f59e0b) may not have sufficient contrast",
        "Semantic color error (#ef4444) may not have sufficient contrast",
        "Semantic color info (#3b82f6) may not have sufficient contrast",
    ]


def test_low_contrast_primary_fails_theme() -> None:
    report = generate_theme(
        ["#777777"], include_semantic_colors=False, contrast_ratio=7
    ).accessibility

    assert report.compliant is False
    assert report.issues == [
        "Primary color #777777 doesn't meet contrast requirements against white or black"
    ]
    assert report.suggestions == ["Consider adjusting the lightness of your primary color"]


def test_accessibility_checks_can_be_disabled() -> None:
    report = generate_theme(["#777777"], contrast_ratio=7, accessibility=False).accessibility
    assert report.to_dict() == {"compliant": True, "issues": [], "suggestions": []}


def test_tailwind_theme() -> None:
    result = generate_theme([PRIMARY], format="tailwind")
    theme = result.theme

    assert theme["colors"]["primary"]["500"] == PRIMARY
    assert theme["colors"]["transparent"] == "transparent"
    assert theme["colors"]["current"] == "currentColor"
    assert theme["spacing"]["px"] == "1px"
    assert theme["spacing"]["0"] == "0px"
    assert theme["spacing"]["0.5"] == "0.125rem"
    assert theme["spacing"]["4"] == "1rem"
    assert theme["fontSize"]["base"] == ["1rem", {"lineHeight": "1.5rem"}]
    assert theme["borderRadius"]["DEFAULT"] == "0.25rem"
    assert result.examples[0] == "bg-primary-500 text-white"


def test_styled_components_theme() -> None:
    result = generate_theme([PRIMARY], format=ThemeFormat.STYLED_COMPONENTS)

    assert result.theme["colors"] is result.colors
    assert result.theme["spacing"]["md"] == "1rem"
    assert result.theme["typography"]["fontFamily"]["sans"] == "Inter, system-ui, sans-serif"
    assert len(result.examples) == 3


def test_material_ui_palette() -> None:
    result = generate_theme([PRIMARY], format="material-ui")
    palette = result.theme["palette"]

    assert palette["primary"]["main"] == PRIMARY
    assert palette["primary"]["light"] == result.colors["primary"]["270"]
    assert palette["primary"]["dark"] == result.colors["primary"]["720"]
    assert palette["primary"]["contrastText"] == "#ffffff"
    assert palette["secondary"] == palette["primary"]
    assert palette["error"] == {"main": "#ef4444"}
    assert result.theme["spacing"] == 8
    assert result.examples == []


def test_css_variables_with_dark_mode() -> None:
    css = generate_theme([PRIMARY], format="css-variables", modes=["light", "dark"]).theme

    assert css.startswith(":root {\n")
    assert f"  --color-primary-500: {PRIMARY};" in css
    assert "  --color-semantic-success: #10b981;" in css
    assert "  --font-family-sans: Inter, system-ui, sans-serif;" in css
    assert "  --spacing-md: 1rem;" in css
    assert "  --border-radius-full: 9999px;" in css
    assert css.endswith('\n\n[data-theme="dark"] {\n}')


def test_css_variables_light_only() -> None:
    css = generate_theme([PRIMARY], format="css-variables").theme

    assert css.endswith("}")
    assert "data-theme" not in css


def test_result_serialization() -> None:
    payload = generate_theme([PRIMARY]).to_dict()

    assert set(payload) == {"theme", "variations", "accessibility", "examples"}
    assert payload["variations"]["scales"]["primary"] == SCALE_STEPS


def test_empty_base_colors_rejected() -> None:
    with pytest.raises(InvalidInputError):
        generate_theme([])


def test_unknown_format_rejected() -> None:
    with pytest.raises(InvalidInputError):
        generate_theme([PRIMARY], format="bootstrap")
