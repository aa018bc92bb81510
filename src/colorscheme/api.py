"""High-level public API for generating color schemes.

This module provides the entry points that coordinate seed derivation,
role synthesis, assembly and export into a flat token mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .assembly import Scheme, assemble_scheme
from .errors import check_color_count
from .export import generate_css_custom_properties, scheme_to_json
from .harmony import ColorStrategy
from .seeds import SchemePolicy, derive_palette
from .tables import SchemeConfig
from .variant import SchemeVariant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemeResult:
    """Generated scheme with its JSON and CSS serializations."""

    scheme: Scheme
    json: str
    css: str


def generate_color_scheme(
    primary: str,
    secondary: Optional[str] = None,
    tertiary: Optional[str] = None,
    error: Optional[str] = None,
    variant: SchemeVariant | str = SchemeVariant.VIBRANT,
    strategy: ColorStrategy | str = ColorStrategy.COMPLEMENTARY,
    *,
    policy: SchemePolicy | str = SchemePolicy.TONAL,
    legacy_seed_order: bool = False,
    config: Optional[SchemeConfig] = None,
) -> Scheme:
    """Generate a light + dark color scheme from up to four seed colors.

    Parameters
    ----------
    primary:
        Primary seed, ``#RRGGBB`` (case-insensitive).
    secondary, tertiary, error:
        Optional explicit seeds. They override strategy-derived accents and
        the default error color.
    variant:
        Chroma profile of the tonal palettes. Tonal policy only.
    strategy:
        Hue strategy for accents that are not given. Tonal policy only.
    policy:
        ``"tonal"`` (perceptual tone lookup) or ``"hsl"`` (HSL lightness
        arithmetic).
    legacy_seed_order:
        HSL policy only: assign the first seed to the tertiary role and the
        following ones to primary/secondary/error, as earlier releases did.
    config:
        Tuning constants; :data:`~colorscheme.tables.DEFAULT_CONFIG` if None.

    Returns
    -------
    dict
        Ordered mapping of token key to lowercase ``#rrggbb``.

    Raises
    ------
    MalformedHexError
        If any seed is not a ``#RRGGBB`` string.
    ValueError
        For unknown variant, strategy or policy names.
    """
    seeds = [primary, secondary, tertiary, error]
    while seeds and seeds[-1] is None:
        seeds.pop()
    return _generate(seeds, variant, strategy, policy, legacy_seed_order, config)


def generate_color_scheme_from_colors(
    colors: Sequence[str],
    variant: SchemeVariant | str = SchemeVariant.VIBRANT,
    strategy: ColorStrategy | str = ColorStrategy.COMPLEMENTARY,
    *,
    policy: SchemePolicy | str = SchemePolicy.TONAL,
    legacy_seed_order: bool = False,
    config: Optional[SchemeConfig] = None,
) -> SchemeResult:
    """Generate a scheme from 1-4 positional seeds plus its JSON and CSS.

    Seeds are ordered primary, secondary, tertiary, error.

    Raises
    ------
    InvalidColorCountError
        If ``colors`` holds 0 or more than 4 entries.
    """
    check_color_count(len(colors))
    scheme = _generate(list(colors), variant, strategy, policy, legacy_seed_order, config)
    return SchemeResult(
        scheme=scheme,
        json=scheme_to_json(scheme),
        css=generate_css_custom_properties(scheme),
    )


def _generate(
    seeds: list,
    variant: SchemeVariant | str,
    strategy: ColorStrategy | str,
    policy: SchemePolicy | str,
    legacy_seed_order: bool,
    config: Optional[SchemeConfig],
) -> Scheme:
    variant_ = SchemeVariant.from_value(variant)
    strategy_ = ColorStrategy.from_value(strategy)
    policy_ = SchemePolicy.from_value(policy)
    logger.debug(
        "generating scheme: seeds=%s policy=%s variant=%s strategy=%s",
        seeds,
        policy_.value,
        variant_.value,
        strategy_.value,
    )
    palette = derive_palette(
        seeds,
        variant_,
        strategy_,
        policy_,
        legacy_seed_order=legacy_seed_order,
        config=config,
    )
    return assemble_scheme(palette, config)


__all__ = [
    "SchemeResult",
    "generate_color_scheme",
    "generate_color_scheme_from_colors",
    "generate_css_custom_properties",
]
