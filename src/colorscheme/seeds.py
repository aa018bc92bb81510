"""Palette derivation: 1-4 seed colors -> one role source per role.

Two policies assign seeds to roles:

``SchemePolicy.TONAL`` (default)
    The first seed is the primary. Missing secondary/tertiary hues come from
    a :class:`~colorscheme.harmony.ColorStrategy`, are calibrated out of the
    olive band, and get their chroma from the
    :class:`~colorscheme.variant.SchemeVariant` profile. Explicit secondary,
    tertiary and error seeds always win.

``SchemePolicy.HSL``
    Seeds are parsed into HSL :class:`~colorscheme.color.Color` values and
    missing accents are rotated from the primary hue. With
    ``legacy_seed_order=True`` the first seed becomes the tertiary role, as
    in earlier releases of the generator.

Semantic roles (warning, success, info) always use constant seeds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .color import Color
from .engine import ColorEngine, DefaultColorEngine
from .errors import MalformedHexError, check_color_count
from .harmony import ColorStrategy, derive_accent_hues
from .roles import HslRole, RoleSource, TonalRole
from .tables import DEFAULT_CONFIG, SchemeConfig
from .tonal import TonalPalette, seed_oklch
from .variant import SchemeVariant, get_profile, resolve_chromas

logger = logging.getLogger(__name__)


class SchemePolicy(Enum):
    """Seed-to-role derivation algorithm of one generation call."""

    TONAL = "tonal"
    HSL = "hsl"

    @classmethod
    def from_value(cls, value: "SchemePolicy | str") -> "SchemePolicy":
        if isinstance(value, cls):
            return value
        for policy in cls:
            if policy.value == value:
                return policy
        raise ValueError(f"Unknown scheme policy: {value}")


@dataclass(frozen=True)
class SeedPalette:
    """Role sources for every seed-derived role of one scheme."""

    primary: RoleSource
    secondary: RoleSource
    tertiary: RoleSource
    error: RoleSource
    warning: RoleSource
    success: RoleSource
    info: RoleSource


def _seed_at(seeds: Sequence[Optional[str]], index: int) -> Optional[str]:
    if index < len(seeds) and seeds[index] is not None:
        return seeds[index]
    return None


def derive_hsl_palette(
    seeds: Sequence[Optional[str]],
    *,
    legacy_seed_order: bool = False,
    config: Optional[SchemeConfig] = None,
) -> SeedPalette:
    """Assign seeds to roles using HSL arithmetic."""
    check_color_count(len(seeds))
    cfg = config or DEFAULT_CONFIG
    d = cfg.seeds
    hues = cfg.hues

    def parsed(index: int) -> Optional[Color]:
        value = _seed_at(seeds, index)
        return Color.from_hex(value) if value is not None else None

    if legacy_seed_order:
        neutral = Color.from_hex(d.hsl_neutral)
        tertiary = parsed(0) or neutral
        primary = parsed(1) or neutral
        secondary = parsed(2) or neutral.adjust_hue(hues.hsl_secondary)
    else:
        primary = parsed(0) or Color.from_hex(d.hsl_neutral)
        secondary = parsed(1) or primary.adjust_hue(hues.hsl_secondary)
        tertiary = parsed(2) or primary.adjust_hue(hues.hsl_tertiary)
    error = parsed(3) or Color.from_hex(d.hsl_error)

    logger.debug(
        "hsl palette: legacy=%s primary=%s secondary=%s tertiary=%s error=%s",
        legacy_seed_order,
        primary.to_hex(),
        secondary.to_hex(),
        tertiary.to_hex(),
        error.to_hex(),
    )
    return SeedPalette(
        primary=HslRole(primary, cfg),
        secondary=HslRole(secondary, cfg),
        tertiary=HslRole(tertiary, cfg),
        error=HslRole(error, cfg),
        warning=HslRole(Color(*d.hsl_warning), cfg),
        success=HslRole(Color(*d.hsl_success), cfg),
        info=HslRole(Color.from_hex(d.hsl_info), cfg),
    )


def derive_tonal_palette(
    seeds: Sequence[Optional[str]],
    variant: SchemeVariant = SchemeVariant.VIBRANT,
    strategy: ColorStrategy = ColorStrategy.COMPLEMENTARY,
    *,
    config: Optional[SchemeConfig] = None,
    engine: Optional[ColorEngine] = None,
) -> SeedPalette:
    """Assign seeds to roles using perceptual tonal palettes."""
    check_color_count(len(seeds))
    cfg = config or DEFAULT_CONFIG
    if engine is None:
        engine = DefaultColorEngine()

    primary_hex = _seed_at(seeds, 0)
    secondary_hex = _seed_at(seeds, 1)
    tertiary_hex = _seed_at(seeds, 2)
    error_hex = _seed_at(seeds, 3)
    if primary_hex is None:
        raise MalformedHexError(primary_hex)

    _, seed_chroma, seed_hue = seed_oklch(primary_hex, engine)
    profile = get_profile(variant)
    primary_c, secondary_c, tertiary_c = resolve_chromas(variant, seed_chroma)

    primary = TonalPalette.from_hue_and_chroma(seed_hue + profile.primary_hue_offset, primary_c)

    # Explicit seeds override strategy-derived accents.
    if secondary_hex is None or tertiary_hex is None:
        secondary_hue, tertiary_hue = derive_accent_hues(seed_hue, strategy, cfg.hues)
        if not profile.achromatic:
            tertiary_c = max(tertiary_c, cfg.seeds.min_accent_chroma)
        logger.debug(
            "strategy %s: seed hue %.1f -> secondary %.1f, tertiary %.1f",
            strategy.value,
            seed_hue,
            secondary_hue,
            tertiary_hue,
        )
    else:
        secondary_hue = tertiary_hue = seed_hue

    secondary = (
        TonalPalette.from_hex(secondary_hex, engine)
        if secondary_hex is not None
        else TonalPalette.from_hue_and_chroma(secondary_hue, secondary_c)
    )
    tertiary = (
        TonalPalette.from_hex(tertiary_hex, engine)
        if tertiary_hex is not None
        else TonalPalette.from_hue_and_chroma(tertiary_hue, tertiary_c)
    )
    error = TonalPalette.from_hex(
        error_hex if error_hex is not None else cfg.seeds.tonal_error, engine
    )

    def role(palette: TonalPalette) -> TonalRole:
        return TonalRole(palette, cfg, engine)

    return SeedPalette(
        primary=role(primary),
        secondary=role(secondary),
        tertiary=role(tertiary),
        error=role(error),
        warning=role(TonalPalette.from_hex(cfg.seeds.tonal_warning, engine)),
        success=role(TonalPalette.from_hex(cfg.seeds.tonal_success, engine)),
        info=role(TonalPalette.from_hex(cfg.seeds.tonal_info, engine)),
    )


def derive_palette(
    seeds: Sequence[Optional[str]],
    variant: SchemeVariant = SchemeVariant.VIBRANT,
    strategy: ColorStrategy = ColorStrategy.COMPLEMENTARY,
    policy: SchemePolicy = SchemePolicy.TONAL,
    *,
    legacy_seed_order: bool = False,
    config: Optional[SchemeConfig] = None,
) -> SeedPalette:
    """Dispatch to the derivation function of ``policy``."""
    if policy == SchemePolicy.TONAL:
        return derive_tonal_palette(seeds, variant, strategy, config=config)
    if policy == SchemePolicy.HSL:
        if variant != SchemeVariant.VIBRANT or strategy != ColorStrategy.COMPLEMENTARY:
            logger.debug("variant/strategy are ignored by the hsl policy")
        return derive_hsl_palette(seeds, legacy_seed_order=legacy_seed_order, config=config)
    raise ValueError(f"Unsupported SchemePolicy: {policy}")


__all__ = [
    "SchemePolicy",
    "SeedPalette",
    "derive_hsl_palette",
    "derive_tonal_palette",
    "derive_palette",
]
