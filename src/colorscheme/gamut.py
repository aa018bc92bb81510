"""sRGB gamut handling utilities for OKLCH colors.

This module provides a small helper to convert OKLCH colors into the sRGB
gamut by shrinking chroma (lightness and hue are preserved) until the color
falls inside [0, 1]^3.
"""

from __future__ import annotations

from typing import Tuple

from .engine import OKLCH, ColorEngine

_EPS = 1e-7


def to_srgb_gamut_safe(
    engine: ColorEngine,
    L: float,
    C: float,
    h: float,
    max_iter: int = 24,
) -> Tuple[float, float, float, OKLCH]:
    """Convert OKLCH to in-gamut sRGB, bisecting C down to the gamut edge.

    Returns (r, g, b, (L_adj, C_adj, h_adj)).
    """
    L = max(0.0, min(100.0, L))
    C = max(0.0, C)
    h_norm = engine.normalize_hue(h)

    r, g, b = engine.oklch_to_srgb(L, C, h_norm)
    if _in_gamut(r, g, b):
        return _clip01(r), _clip01(g), _clip01(b), (L, C, h_norm)

    lo, hi = 0.0, C
    for _ in range(max_iter):
        mid = (lo + hi) / 2.0
        if _in_gamut(*engine.oklch_to_srgb(L, mid, h_norm)):
            lo = mid
        else:
            hi = mid

    # lo is always in gamut (achromatic at worst), up to rounding.
    r, g, b = engine.oklch_to_srgb(L, lo, h_norm)
    return _clip01(r), _clip01(g), _clip01(b), (L, lo, h_norm)


def _in_gamut(r: float, g: float, b: float) -> bool:
    return all(-_EPS <= c <= 1.0 + _EPS for c in (r, g, b))


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))


__all__ = ["to_srgb_gamut_safe"]
