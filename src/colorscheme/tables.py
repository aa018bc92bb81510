"""Tuning constants for scheme generation.

Every number that shapes the visual character of a scheme lives in one
frozen :class:`SchemeConfig`. Generation functions accept an alternative
instance through their ``config`` argument; :data:`DEFAULT_CONFIG` is used
otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

SurfaceTable = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class LightnessDeltas:
    """HSL lightness offsets used by the HSL policy."""

    container_light: float = 35.0
    on_container_light: float = -45.0
    base_dark: float = 25.0
    on_dark: float = -35.0
    container_dark: float = -25.0
    on_container_dark: float = 35.0
    fixed: float = 35.0
    fixed_dim: float = 25.0
    on_fixed: float = -45.0
    on_fixed_variant: float = -25.0
    inverse_primary: float = 25.0


@dataclass(frozen=True)
class ToneStops:
    """Perceptual tones (0..100) used by the tonal policy.

    Each 4-tuple is (base, on, container, on_container); ``fixed`` is
    (fixed, fixed_dim, on_fixed, on_fixed_variant).
    """

    light: Tuple[float, float, float, float] = (40.0, 100.0, 90.0, 10.0)
    dark: Tuple[float, float, float, float] = (80.0, 20.0, 30.0, 90.0)
    fixed: Tuple[float, float, float, float] = (90.0, 80.0, 10.0, 30.0)
    inverse_primary_light: float = 80.0
    inverse_primary_dark: float = 40.0


@dataclass(frozen=True)
class HueOffsets:
    """Hue arithmetic for accent derivation and calibration."""

    # HSL policy: accents rotated from the primary seed.
    hsl_secondary: float = 60.0
    hsl_tertiary: float = -60.0

    # Tonal policy strategies: (secondary offset, tertiary offset).
    complementary: Tuple[float, float] = (30.0, 180.0)
    analogous: Tuple[float, float] = (30.0, 240.0)
    triadic: Tuple[float, float] = (120.0, 240.0)

    # Accent-hue calibration: the open band (low, high) is snapped out of.
    muddy_low: float = 70.0
    muddy_high: float = 100.0
    muddy_pivot: float = 85.0
    snap_low: float = 65.0
    snap_high: float = 110.0


@dataclass(frozen=True)
class DefaultSeeds:
    """Seed colors for roles the user does not supply."""

    # HSL policy
    hsl_neutral: str = "#e1e1e1"
    hsl_error: str = "#bb0e45"
    hsl_info: str = "#2e58ff"
    hsl_warning: Tuple[float, float, float] = (45.0, 100.0, 45.0)
    hsl_success: Tuple[float, float, float] = (140.0, 100.0, 35.0)

    # Tonal policy
    tonal_error: str = "#b3261e"
    tonal_warning: str = "#e6ac00"
    tonal_success: str = "#00b33c"
    tonal_info: str = "#2e58ff"

    # Binary contrast heuristic
    near_black: str = "#080808"
    near_white: str = "#e1e1e1"
    contrast_threshold: float = 50.0

    # Minimum OKLCH chroma for a strategy-derived tertiary accent.
    min_accent_chroma: float = 0.1


LIGHT_SURFACES: SurfaceTable = (
    ("background", "#e1e1e1"),
    ("onBackground", "#1e1e1e"),
    ("surface", "#3f3f3f"),
    ("onSurface", "#989898"),
    ("surfaceVariant", "#ffffff"),
    ("onSurfaceVariant", "#080808"),
    ("outline", "#989898"),
    ("outlineVariant", "#6e6e6e"),
    ("shadow", "#080808"),
    ("scrim", "#080808"),
    ("inverseSurface", "#989898"),
    ("inverseOnSurface", "#3f3f3f"),
)

DARK_SURFACES: SurfaceTable = (
    ("background", "#080808"),
    ("onBackground", "#ffffff"),
    ("surface", "#1e1e1e"),
    ("onSurface", "#e1e1e1"),
    ("surfaceVariant", "#080808"),
    ("onSurfaceVariant", "#6e6e6e"),
    ("outline", "#e1e1e1"),
    ("outlineVariant", "#3f3f3f"),
    ("shadow", "#000000"),
    ("scrim", "#000000"),
    ("inverseSurface", "#e1e1e1"),
    ("inverseOnSurface", "#1e1e1e"),
)

# Container elevations, emitted after inversePrimary.
LIGHT_SURFACE_CONTAINERS: SurfaceTable = (
    ("surfaceContainerLowest", "#ffffff"),
    ("surfaceContainerLow", "#f3f3f3"),
    ("surfaceContainer", "#eeeeee"),
    ("surfaceContainerHigh", "#e8e8e8"),
    ("surfaceContainerHighest", "#e1e1e1"),
    ("surfaceDim", "#dadada"),
    ("surfaceBright", "#f9f9f9"),
)

DARK_SURFACE_CONTAINERS: SurfaceTable = (
    ("surfaceContainerLowest", "#080808"),
    ("surfaceContainerLow", "#1b1b1b"),
    ("surfaceContainer", "#1e1e1e"),
    ("surfaceContainerHigh", "#292929"),
    ("surfaceContainerHighest", "#333333"),
    ("surfaceDim", "#131313"),
    ("surfaceBright", "#393939"),
)


@dataclass(frozen=True)
class SchemeConfig:
    """All tuning constants for one scheme generation call."""

    lightness: LightnessDeltas = field(default_factory=LightnessDeltas)
    tones: ToneStops = field(default_factory=ToneStops)
    hues: HueOffsets = field(default_factory=HueOffsets)
    seeds: DefaultSeeds = field(default_factory=DefaultSeeds)
    light_surfaces: SurfaceTable = LIGHT_SURFACES
    dark_surfaces: SurfaceTable = DARK_SURFACES
    light_surface_containers: SurfaceTable = LIGHT_SURFACE_CONTAINERS
    dark_surface_containers: SurfaceTable = DARK_SURFACE_CONTAINERS

    def surfaces(self, theme: str) -> SurfaceTable:
        return self.light_surfaces if theme == "light" else self.dark_surfaces

    def surface_containers(self, theme: str) -> SurfaceTable:
        return self.light_surface_containers if theme == "light" else self.dark_surface_containers


DEFAULT_CONFIG = SchemeConfig()


__all__ = [
    "LightnessDeltas",
    "ToneStops",
    "HueOffsets",
    "DefaultSeeds",
    "SchemeConfig",
    "LIGHT_SURFACES",
    "DARK_SURFACES",
    "LIGHT_SURFACE_CONTAINERS",
    "DARK_SURFACE_CONTAINERS",
    "DEFAULT_CONFIG",
]
