"""Color parsing, WCAG luminance and contrast helpers."""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass

_HEX = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNCTION = re.compile(r"^(rgba?|hsla?)\(\s*([^)]*)\)$")

_MAX_ITERATIONS = 20
_TOLERANCE = 1e-7


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _channel_luminance(channel: float) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True)
class Color:
    """An sRGB color with channels in ``0..255`` and alpha in ``0..1``."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    def luminance(self) -> float:
        """WCAG relative luminance."""
        return (
            0.2126 * _channel_luminance(self.r)
            + 0.7152 * _channel_luminance(self.g)
            + 0.0722 * _channel_luminance(self.b)
        )

    def mix(self, other: "Color", ratio: float = 0.5) -> "Color":
        """Linear interpolation in RGB space."""
        return Color(
            self.r + ratio * (other.r - self.r),
            self.g + ratio * (other.g - self.g),
            self.b + ratio * (other.b - self.b),
            self.alpha + ratio * (other.alpha - self.alpha),
        )

    def with_luminance(self, target: float) -> "Color":
        """Return a color of the same hue family whose luminance is ``target``.

        Bisects between black and this color when darkening, or between this
        color and white when lightening. Alpha is preserved.
        """
        if target <= 0:
            return Color(0, 0, 0, self.alpha)
        if target >= 1:
            return Color(255, 255, 255, self.alpha)

        if self.luminance() > target:
            low, high = BLACK, self
        else:
            low, high = self, WHITE

        mid = low.mix(high)
        for _ in range(_MAX_ITERATIONS):
            mid = low.mix(high)
            current = mid.luminance()
            if abs(target - current) < _TOLERANCE:
                break
            if current > target:
                high = mid
            else:
                low = mid

        return Color(
            _round_half_up(mid.r),
            _round_half_up(mid.g),
            _round_half_up(mid.b),
            self.alpha,
        )

    def hex(self) -> str:
        channels = [_round_half_up(_clamp(c, 0, 255)) for c in (self.r, self.g, self.b)]
        text = "#" + "".join(f"{c:02x}" for c in channels)
        if self.alpha < 1:
            text += f"{_round_half_up(_clamp(self.alpha, 0, 1) * 255):02x}"
        return text


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def _parse_number(text: str, scale: float) -> float:
    """Parse a CSS number; percentages are mapped onto ``0..scale``."""
    text = text.strip()
    if text.endswith("%"):
        return float(text[:-1]) / 100.0 * scale
    return float(text)


def _parse_hue(text: str) -> float:
    text = text.strip().lower()
    if text.endswith("deg"):
        text = text[:-3]
    elif text.endswith("turn"):
        return float(text[:-4]) * 360.0
    return float(text)


def _split_arguments(body: str) -> tuple[list[str], str | None]:
    alpha = None
    if "/" in body:
        body, alpha = body.split("/", 1)
    parts = [part for part in re.split(r"[\s,]+", body.strip()) if part]
    if alpha is None and len(parts) == 4:
        alpha = parts.pop()
    return parts, alpha


def parse_color(text: str) -> Color:
    """Parse hex, ``rgb()``/``rgba()`` or ``hsl()``/``hsla()`` notation.

    Raises ``ValueError`` for anything else.
    """
    value = str(text).strip().lower()

    hex_match = _HEX.match(value)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return Color(r, g, b, alpha)

    func_match = _FUNCTION.match(value)
    if func_match:
        kind, body = func_match.groups()
        parts, alpha_text = _split_arguments(body)
        if len(parts) != 3:
            raise ValueError(f"Unrecognized color: {text!r}")
        alpha = _clamp(_parse_number(alpha_text, 1.0), 0, 1) if alpha_text else 1.0

        if kind.startswith("rgb"):
            r, g, b = (_clamp(_parse_number(part, 255.0), 0, 255) for part in parts)
            return Color(r, g, b, alpha)

        hue = _parse_hue(parts[0]) % 360.0
        saturation = _clamp(_parse_number(parts[1], 1.0), 0, 1)
        lightness = _clamp(_parse_number(parts[2], 1.0), 0, 1)
        r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
        return Color(r * 255.0, g * 255.0, b * 255.0, alpha)

    raise ValueError(f"Unrecognized color: {text!r}")


def contrast_ratio(first: str | Color, second: str | Color) -> float:
    """WCAG contrast ratio between two colors, from 1 to 21."""
    a = first if isinstance(first, Color) else parse_color(first)
    b = second if isinstance(second, Color) else parse_color(second)
    lighter = max(a.luminance(), b.luminance())
    darker = min(a.luminance(), b.luminance())
    return (lighter + 0.05) / (darker + 0.05)


__all__ = ["BLACK", "WHITE", "Color", "contrast_ratio", "parse_color"]
