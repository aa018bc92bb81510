"""Scheme variants controlling chroma distribution of the tonal palettes.

This module defines :class:`SchemeVariant` and the per-variant chroma
profile that reshapes the seed's hue/chroma into primary, secondary and
tertiary tonal palettes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class SchemeVariant(Enum):
    """Chroma/hue profiles, named after the Material Design 3 schemes."""

    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    TONALSPOT = "tonalspot"
    FIDELITY = "fidelity"
    FRUIT_SALAD = "fruit-salad"
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    RAINBOW = "rainbow"

    @classmethod
    def from_value(cls, value: "SchemeVariant | str") -> "SchemeVariant":
        if isinstance(value, cls):
            return value
        for variant in cls:
            if variant.value == value:
                return variant
        raise ValueError(f"Unknown scheme variant: {value}")


@dataclass(frozen=True)
class VariantProfile:
    """Chroma targets (OKLCH C) of one variant.

    ``None`` means "follow the seed": primary and tertiary keep the seed
    chroma, secondary is reduced relative to it.
    """

    primary_chroma: Optional[float]
    secondary_chroma: Optional[float]
    tertiary_chroma: Optional[float]
    primary_hue_offset: float = 0.0
    achromatic: bool = False


VARIANT_PROFILES: Dict[SchemeVariant, VariantProfile] = {
    SchemeVariant.VIBRANT: VariantProfile(0.20, 0.07, 0.09),
    SchemeVariant.EXPRESSIVE: VariantProfile(0.12, 0.07, 0.09, primary_hue_offset=240.0),
    SchemeVariant.TONALSPOT: VariantProfile(0.10, 0.04, 0.065),
    SchemeVariant.FIDELITY: VariantProfile(None, None, None),
    SchemeVariant.FRUIT_SALAD: VariantProfile(0.13, 0.10, 0.11, primary_hue_offset=-50.0),
    SchemeVariant.MONOCHROME: VariantProfile(0.0, 0.0, 0.0, achromatic=True),
    SchemeVariant.NEUTRAL: VariantProfile(0.035, 0.02, 0.03),
    SchemeVariant.RAINBOW: VariantProfile(0.13, 0.045, 0.065),
}


def get_profile(variant: SchemeVariant) -> VariantProfile:
    try:
        return VARIANT_PROFILES[variant]
    except KeyError:
        raise ValueError(f"Unsupported SchemeVariant: {variant}") from None


def resolve_chromas(variant: SchemeVariant, seed_chroma: float) -> Tuple[float, float, float]:
    """Return (primary, secondary, tertiary) chroma for a seed chroma."""
    profile = get_profile(variant)
    seed_chroma = max(0.0, seed_chroma)

    primary = seed_chroma if profile.primary_chroma is None else profile.primary_chroma
    if profile.secondary_chroma is None:
        secondary = max(seed_chroma - 0.1, seed_chroma * 0.5)
    else:
        secondary = profile.secondary_chroma
    tertiary = seed_chroma if profile.tertiary_chroma is None else profile.tertiary_chroma
    return primary, secondary, tertiary


__all__ = [
    "SchemeVariant",
    "VariantProfile",
    "VARIANT_PROFILES",
    "get_profile",
    "resolve_chromas",
]
