"""HSL color model used by the HSL policy and for seed handling.

This module defines the immutable :class:`Color` value type. All fields
are normalized on construction: hue wraps into [0, 360), saturation and
lightness clamp into [0, 100]. Every transform returns a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from util.color import parse_hex_rgb, rgb_to_hex

from .errors import MalformedHexError
from .tables import DEFAULT_CONFIG, SchemeConfig


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    return (h % 360.0 + 360.0) % 360.0


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


@dataclass(frozen=True)
class Color:
    """Color in HSL space.

    Attributes
    ----------
    hue:
        Hue angle in degrees, [0, 360).
    saturation:
        Saturation in percent, [0, 100].
    lightness:
        Lightness in percent, [0, 100].
    """

    hue: float
    saturation: float
    lightness: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", normalize_hue(float(self.hue)))
        object.__setattr__(self, "saturation", _clamp(float(self.saturation), 0.0, 100.0))
        object.__setattr__(self, "lightness", _clamp(float(self.lightness), 0.0, 100.0))

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from a ``#RRGGBB`` string (case-insensitive).

        Raises
        ------
        MalformedHexError
            If ``hex_str`` is not exactly ``#`` followed by 6 hex digits.
        """
        try:
            r8, g8, b8 = parse_hex_rgb(hex_str)
        except (TypeError, ValueError) as exc:
            raise MalformedHexError(hex_str) from exc
        return cls.from_rgb(r8 / 255.0, g8 / 255.0, b8 / 255.0)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Create a Color from sRGB channels in [0, 1]."""
        mx = max(r, g, b)
        mn = min(r, g, b)
        l = (mx + mn) / 2.0
        if mx == mn:
            return cls(0.0, 0.0, l * 100.0)

        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif mx == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        return cls(h * 60.0, s * 100.0, l * 100.0)

    def to_rgb(self) -> Tuple[float, float, float]:
        """Return sRGB channels in [0, 1]."""
        h = self.hue / 360.0
        s = self.saturation / 100.0
        l = self.lightness / 100.0
        if s == 0.0:
            return (l, l, l)
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        return (
            _hue_to_channel(p, q, h + 1.0 / 3.0),
            _hue_to_channel(p, q, h),
            _hue_to_channel(p, q, h - 1.0 / 3.0),
        )

    def to_hex(self) -> str:
        """Return the lowercase ``#rrggbb`` representation."""
        r, g, b = self.to_rgb()
        return rgb_to_hex(r * 255.0, g * 255.0, b * 255.0)

    def adjust_lightness(self, delta: float) -> "Color":
        """Return a copy with lightness shifted by ``delta`` (clamped, no wrap)."""
        return Color(self.hue, self.saturation, self.lightness + delta)

    def adjust_hue(self, offset: float) -> "Color":
        """Return a copy with hue rotated by ``offset`` degrees (always wraps)."""
        return Color(self.hue + offset, self.saturation, self.lightness)

    def contrast_color(self, config: Optional[SchemeConfig] = None) -> "Color":
        """Return a fixed near-black or near-white foreground for this color.

        This is a binary lightness threshold, not a measured contrast ratio:
        colors lighter than the threshold get near-black, the rest get
        near-white. WCAG contrast minimums are not guaranteed.
        """
        seeds = (config or DEFAULT_CONFIG).seeds
        if self.lightness > seeds.contrast_threshold:
            return Color.from_hex(seeds.near_black)
        return Color.from_hex(seeds.near_white)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


__all__ = ["Color", "normalize_hue"]
