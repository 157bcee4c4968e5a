"""
Color utilities for the contrast check.

Parsing accepts only what getComputedStyle reports in practice plus hex:
- rgb(r, g, b) / rgba(r, g, b, a)  (alpha ignored)
- #rgb / #rrggbb, leading '#' optional

Luminance and contrast follow WCAG 2.x:
https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
"""
import re
from dataclasses import dataclass
from typing import Optional


_RGB_PATTERN = re.compile(r"^rgba?\((\d+)[ ,]+(\d+)[ ,]+(\d+)(?:[ ,/]+([\d.]+))?\)$", re.ASCII)
_HEX3_PATTERN = re.compile(r"^[0-9a-f]{3}$")
_HEX6_PATTERN = re.compile(r"^[0-9a-f]{6}$")

# Channel weights for relative luminance
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722


@dataclass(frozen=True)
class Color:
    """8-bit sRGB color."""
    r: int
    g: int
    b: int


def parse_color(value: Optional[str]) -> Optional[Color]:
    """Parse a CSS color string. Returns None when the syntax is not supported."""
    s = (value or "").strip().lower()
    
    match = _RGB_PATTERN.match(s)
    if match:
        r, g, b = (min(int(c), 255) for c in match.group(1, 2, 3))
        return Color(r, g, b)
    
    hex_digits = s[1:] if s.startswith("#") else s
    if _HEX3_PATTERN.match(hex_digits):
        r, g, b = (int(d * 2, 16) for d in hex_digits)
        return Color(r, g, b)
    if _HEX6_PATTERN.match(hex_digits):
        return Color(
            int(hex_digits[0:2], 16),
            int(hex_digits[2:4], 16),
            int(hex_digits[4:6], 16)
        )
    
    return None


def _to_linear(channel: int) -> float:
    s = channel / 255
    if s <= 0.03928:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    return (
        RED_WEIGHT * _to_linear(color.r) +
        GREEN_WEIGHT * _to_linear(color.g) +
        BLUE_WEIGHT * _to_linear(color.b)
    )


def contrast_ratio(first: Color, second: Color) -> float:
    """WCAG contrast ratio, between 1.0 and 21.0, symmetric in its arguments."""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
