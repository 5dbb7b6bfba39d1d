"""RGBA colours with HSLA and hex conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


def _round_half_away(x: float) -> int:
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


@dataclass(frozen=True)
class Color:
    """A colour with float components, nominally in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float

    def to_bytes(self) -> Tuple[int, int, int, int]:
        """Components scaled to 0..255 and rounded."""
        return tuple(_round_half_away(c * 255.0) for c in (self.r, self.g, self.b, self.a))

    def desaturate(self) -> "Color":
        k = (self.r + self.g + self.b) / 3.0
        return Color(k, k, k, self.a)

    def darker(self, d: float) -> "Color":
        return Color(max(self.r - d, 0.0), max(self.g - d, 0.0), max(self.b - d, 0.0), self.a)

    def invert(self) -> "Color":
        return Color(1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    def scale(self, fc: "Color") -> "Color":
        """Multiply component-wise, clamping each result to ``[0, 1]``."""

        def clamp(x: float) -> float:
            return max(min(x, 1.0), 0.0)

        return Color(
            clamp(self.r * fc.r),
            clamp(self.g * fc.g),
            clamp(self.b * fc.b),
            clamp(self.a * fc.a),
        )

    def hex(self) -> str:
        """Six lowercase hex digits for the RGB components."""
        r, g, b, _ = self.to_bytes()
        return f"{r:02x}{g:02x}{b:02x}"

    def to_hsla(self) -> "Color":
        """Convert to HSLA, returned as (hue degrees, saturation, lightness, alpha)."""
        high = max(self.r, self.g, self.b)
        low = min(self.r, self.g, self.b)
        c = high - low
        hue = 0.0
        saturation = 0.0
        lightness = (high + low) * 0.5

        if abs(c) > 1e-6:
            if abs(high - self.r) <= 1e-6:
                hue = 60.0 * math.fmod((self.g - self.b) / c, 6.0)
            elif abs(high - self.g) <= 1e-6:
                hue = 60.0 * ((self.b - self.r) / c + 2.0)
            else:
                hue = 60.0 * ((self.r - self.g) / c + 4.0)
            saturation = c / (1.0 - abs(2.0 * lightness - 1.0))

        return Color(hue, saturation, lightness, self.a)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)


def hsla(h: float, s: float, l: float, a: float) -> Color:
    """Build an RGBA colour from hue in degrees, saturation, lightness, alpha."""
    h = math.fmod(h, 360.0)
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = l - c / 2.0

    if 0.0 <= h < 60.0:
        r, g, b = c, x, 0.0
    elif 60.0 <= h < 120.0:
        r, g, b = x, c, 0.0
    elif 120.0 <= h < 180.0:
        r, g, b = 0.0, c, x
    elif 180.0 <= h < 240.0:
        r, g, b = 0.0, x, c
    elif 240.0 <= h < 300.0:
        r, g, b = x, 0.0, c
    elif 300.0 <= h < 360.0:
        r, g, b = c, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return Color(r + m, g + m, b + m, a)


def _hex_digit(char: str) -> int:
    if "0" <= char <= "9" or "a" <= char <= "f" or "A" <= char <= "F":
        return int(char, 16)
    return 0


def hexstr(text: str) -> Color:
    """Parse ``RRGGBB``; any other length yields opaque black.

    Characters that are not hex digits count as zero.
    """
    if len(text) != 6:
        return BLACK
    r, g, b = (
        (_hex_digit(text[i]) * 16 + _hex_digit(text[i + 1])) / 255.0
        for i in range(0, 6, 2)
    )
    return Color(r, g, b, 1.0)