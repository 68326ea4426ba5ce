"""Contrast Analyzer - WCAG 2.x relative luminance and contrast ratio.

``adjust_color_to_meet_contrast`` is a greedy search that moves all three
channels together: first brighter, then (from the original color) darker.
It does not find the nearest passing color, and when neither direction
reaches the target within ``MAX_STEPS`` it still returns the last candidate.
Callers must not assume the returned color passes.
"""

import re
from typing import Union

STEP = 5
MAX_STEPS = 100
DEFAULT_TARGET_RATIO = 4.5

RGB = tuple[int, int, int]
ColorLike = Union[str, RGB]

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def hex_to_rgb(color: str) -> RGB:
    """Parse ``#rgb`` or ``#rrggbb`` into a channel tuple.

    Raises:
        ValueError: if the string is not a hex color
    """
    match = _HEX_COLOR.match(color.strip())
    if not match:
        raise ValueError(f"Not a hex color: {color!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _as_rgb(color: ColorLike) -> RGB:
    if isinstance(color, str):
        return hex_to_rgb(color)
    return tuple(color)


def _linearize(channel: int) -> float:
    v = channel / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an sRGB color, 0.0 (black) to 1.0 (white)."""
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """Contrast ratio between two colors, from 1.0 to 21.0."""
    lum_a = relative_luminance(*_as_rgb(color_a))
    lum_b = relative_luminance(*_as_rgb(color_b))
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def _shift(rgb: RGB, delta: int) -> RGB:
    return tuple(max(0, min(255, c + delta)) for c in rgb)


def adjust_color_to_meet_contrast(
    foreground: str,
    background: str,
    target: float = DEFAULT_TARGET_RATIO,
) -> str:
    """Find a foreground color with at least ``target`` contrast on ``background``.

    Args:
        foreground: Starting foreground color (hex)
        background: Background color (hex), never changed
        target: Minimum contrast ratio to stop at

    Returns:
        Lower-case ``#rrggbb``; the last candidate tried if the target was
        not reached in either direction.
    """
    original = hex_to_rgb(foreground)
    bg = hex_to_rgb(background)

    candidate = original
    for _ in range(MAX_STEPS):
        candidate = _shift(candidate, STEP)
        if contrast_ratio(candidate, bg) >= target:
            return rgb_to_hex(candidate)

    candidate = original
    for _ in range(MAX_STEPS):
        candidate = _shift(candidate, -STEP)
        if contrast_ratio(candidate, bg) >= target:
            return rgb_to_hex(candidate)

    return rgb_to_hex(candidate)
