"""Accent hue strategies and accent-hue calibration.

This module defines :class:`ColorStrategy` and the logic that derives the
secondary and tertiary hues from the primary seed hue when the user does
not supply them explicitly.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from .color import normalize_hue
from .tables import DEFAULT_CONFIG, HueOffsets


class ColorStrategy(Enum):
    """Geometric hue relationships used to derive accent hues."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"

    @classmethod
    def from_value(cls, value: "ColorStrategy | str") -> "ColorStrategy":
        if isinstance(value, cls):
            return value
        for strategy in cls:
            if strategy.value == value:
                return strategy
        raise ValueError(f"Unknown color strategy: {value}")


def strategy_offsets(
    strategy: ColorStrategy, hues: Optional[HueOffsets] = None
) -> Tuple[float, float]:
    """Return the (secondary, tertiary) hue offsets in degrees for ``strategy``."""
    if hues is None:
        hues = DEFAULT_CONFIG.hues

    if strategy == ColorStrategy.COMPLEMENTARY:
        return hues.complementary
    if strategy == ColorStrategy.ANALOGOUS:
        return hues.analogous
    if strategy == ColorStrategy.TRIADIC:
        return hues.triadic

    raise ValueError(f"Unsupported ColorStrategy: {strategy}")


def calibrate_accent_hue(hue: float, hues: Optional[HueOffsets] = None) -> float:
    """Push an accent hue out of the muddy olive band.

    Hues strictly inside (70, 100) snap to 65 when below 85, else to 110.
    Everything else is returned normalized but otherwise unchanged.
    """
    if hues is None:
        hues = DEFAULT_CONFIG.hues
    h = normalize_hue(hue)
    if hues.muddy_low < h < hues.muddy_high:
        return hues.snap_low if h < hues.muddy_pivot else hues.snap_high
    return h


def derive_accent_hues(
    seed_hue: float,
    strategy: ColorStrategy,
    hues: Optional[HueOffsets] = None,
) -> Tuple[float, float]:
    """Return calibrated (secondary, tertiary) hues derived from ``seed_hue``."""
    secondary_offset, tertiary_offset = strategy_offsets(strategy, hues)
    secondary = calibrate_accent_hue(seed_hue + secondary_offset, hues)
    tertiary = calibrate_accent_hue(seed_hue + tertiary_offset, hues)
    return secondary, tertiary


__all__ = [
    "ColorStrategy",
    "strategy_offsets",
    "calibrate_accent_hue",
    "derive_accent_hues",
]
