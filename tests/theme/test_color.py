"""Tests for color parsing and WCAG contrast math."""

from __future__ import annotations

import pytest

from designscout.theme.color import BLACK, WHITE, Color, contrast_ratio, parse_color


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#fff", Color(255, 255, 255)),
        ("#3B82F6", Color(59, 130, 246)),
        ("  #000000  ", Color(0, 0, 0)),
        ("rgb(59, 130, 246)", Color(59, 130, 246)),
        ("rgba(0, 0, 0, .5)", Color(0, 0, 0, 0.5)),
        ("rgb(0 0 0 / 50%)", Color(0, 0, 0, 0.5)),
        ("rgb(100%, 0%, 0%)", Color(255, 0, 0)),
    ],
)
def test_parse_color(text: str, expected: Color) -> None:
    assert parse_color(text) == expected


def test_parse_hex_with_alpha() -> None:
    color = parse_color("#3b82f680")
    assert (color.r, color.g, color.b) == (59, 130, 246)
    assert color.alpha == pytest.approx(128 / 255)


def test_parse_hsl() -> None:
    assert parse_color("hsl(0, 100%, 50%)").hex() == "#ff0000"
    assert parse_color("hsl(240deg 100% 50%)").hex() == "#0000ff"
    assert parse_color("hsla(0, 100%, 50%, 0.5)").alpha == 0.5


@pytest.mark.parametrize("text", ["", "blue", "#12345", "rgb(1, 2)", "cmyk(0, 0, 0, 0)"])
def test_unparseable_colors_raise(text: str) -> None:
    with pytest.raises(ValueError):
        parse_color(text)


def test_contrast_ratio_bounds() -> None:
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)


def test_hex_output() -> None:
    assert Color(255, 0, 0).hex() == "#ff0000"
    assert Color(0, 0, 0, 0.5).hex() == "#00000080"
    assert Color(300, -4, 127.5).hex() == "#ff0080"


def test_with_luminance_hits_target() -> None:
    base = parse_color("#3b82f6")

    darker = base.with_luminance(0.05)
    lighter = base.with_luminance(0.8)

    assert darker.luminance() == pytest.approx(0.05, abs=0.01)
    assert lighter.luminance() == pytest.approx(0.8, abs=0.01)
    assert base.with_luminance(0) == Color(0, 0, 0)
    assert base.with_luminance(1) == Color(255, 255, 255)


def test_with_luminance_preserves_alpha() -> None:
    assert parse_color("rgba(59, 130, 246, 0.5)").with_luminance(0.5).alpha == 0.5
