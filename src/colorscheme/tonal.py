"""Tonal palettes on the OKLCH lightness scale.

A :class:`TonalPalette` fixes hue and chroma and varies only perceptual
lightness ("tone", 0 = black, 100 = white). Role colors of the tonal policy
are looked up at fixed tone stops, so equal tone steps look like equal
lightness steps regardless of hue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from util.color import parse_hex_rgb, rgb_to_hex

from .color import normalize_hue
from .engine import OKLCH, ColorEngine, DefaultColorEngine
from .errors import MalformedHexError
from .gamut import to_srgb_gamut_safe


@dataclass(frozen=True)
class TonalPalette:
    """Hue/chroma pair from which tones are derived.

    Attributes
    ----------
    hue:
        OKLCH hue in degrees, [0, 360).
    chroma:
        Requested OKLCH chroma. Tones that cannot reach it inside sRGB are
        reduced to the gamut edge.
    """

    hue: float
    chroma: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", normalize_hue(float(self.hue)))
        object.__setattr__(self, "chroma", max(0.0, float(self.chroma)))

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        return cls(hue=hue, chroma=chroma)

    @classmethod
    def from_hex(cls, hex_str: str, engine: Optional[ColorEngine] = None) -> "TonalPalette":
        """Create a palette carrying the hue and chroma of ``hex_str``."""
        _, C, h = seed_oklch(hex_str, engine)
        return cls(hue=h, chroma=C)

    def tone(self, tone: float, engine: Optional[ColorEngine] = None) -> str:
        """Return ``#rrggbb`` for the given tone (clamped into [0, 100])."""
        if engine is None:
            engine = DefaultColorEngine()
        r, g, b, _ = to_srgb_gamut_safe(engine, tone, self.chroma, self.hue)
        return rgb_to_hex(r * 255.0, g * 255.0, b * 255.0)


def seed_oklch(hex_str: str, engine: Optional[ColorEngine] = None) -> OKLCH:
    """Convert a ``#RRGGBB`` seed into (L, C, h)."""
    try:
        r8, g8, b8 = parse_hex_rgb(hex_str)
    except (TypeError, ValueError) as exc:
        raise MalformedHexError(hex_str) from exc
    if engine is None:
        engine = DefaultColorEngine()
    return engine.srgb_to_oklch(r8 / 255.0, g8 / 255.0, b8 / 255.0)


__all__ = ["TonalPalette", "seed_oklch"]
