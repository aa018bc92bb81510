from __future__ import annotations

"""シード色 -> ロール割当（tonal / hsl 両ポリシー）のテスト。"""

import pytest

from colorscheme import (
    Color,
    ColorStrategy,
    InvalidColorCountError,
    MalformedHexError,
    SchemePolicy,
    SchemeVariant,
    TonalPalette,
    calibrate_accent_hue,
)
from colorscheme.seeds import derive_hsl_palette, derive_palette, derive_tonal_palette
from colorscheme.tonal import seed_oklch


# --- HSL policy ---


def test_hsl_primary_first_rotates_missing_accents():
    """既定順: 1 色目が primary、未指定の secondary/tertiary は ±60° 回転。"""
    pal = derive_hsl_palette(["#ff0000"])
    assert pal.primary.color.to_hex() == "#ff0000"
    assert pal.secondary.color.hue == pytest.approx(60.0)
    assert pal.tertiary.color.hue == pytest.approx(300.0)
    assert pal.error.color.to_hex() == "#bb0e45"


def test_hsl_explicit_seeds_fill_roles_positionally(four_seeds):
    pal = derive_hsl_palette(four_seeds)
    assert pal.primary.color.to_hex() == "#0051e0"
    assert pal.secondary.color.to_hex() == "#40617f"
    assert pal.tertiary.color.to_hex() == "#ff00ff"
    assert pal.error.color.to_hex() == "#ff0000"


def test_hsl_legacy_seed_order_assigns_first_seed_to_tertiary():
    """legacy: 1 色目は tertiary、primary/secondary は中立色にフォールバック。"""
    pal = derive_hsl_palette(["#ff0000"], legacy_seed_order=True)
    assert pal.tertiary.color.to_hex() == "#ff0000"
    assert pal.primary.color.to_hex() == "#e1e1e1"
    # 無彩色を回転しても無彩色のまま
    assert pal.secondary.color.to_hex() == "#e1e1e1"

    pal4 = derive_hsl_palette(["#ff0000", "#00ff00", "#0000ff", "#123456"], legacy_seed_order=True)
    assert pal4.tertiary.color.to_hex() == "#ff0000"
    assert pal4.primary.color.to_hex() == "#00ff00"
    assert pal4.secondary.color.to_hex() == "#0000ff"
    assert pal4.error.color.to_hex() == "#123456"


@pytest.mark.parametrize("legacy", [False, True])
def test_hsl_semantic_roles_are_constant(legacy):
    pal = derive_hsl_palette(["#00ff00", "#0000ff"], legacy_seed_order=legacy)
    assert pal.info.color.to_hex() == "#2e58ff"
    assert pal.warning.color == Color(45.0, 100.0, 45.0)
    assert pal.success.color == Color(140.0, 100.0, 35.0)


# --- tonal policy ---


def test_tonal_derives_accents_from_strategy():
    pal = derive_tonal_palette(["#0051e0"], SchemeVariant.VIBRANT, ColorStrategy.TRIADIC)
    _, _, seed_hue = seed_oklch("#0051e0")
    assert pal.secondary.palette.hue == pytest.approx(calibrate_accent_hue(seed_hue + 120.0))
    assert pal.tertiary.palette.hue == pytest.approx(calibrate_accent_hue(seed_hue + 240.0))
    assert pal.primary.palette.hue == pytest.approx(seed_hue)


def test_tonal_complementary_tertiary_is_calibrated():
    """青 (#0051e0) の補色 +180° はオリーブ帯に入るため 65/110 に寄せられる。"""
    pal = derive_tonal_palette(["#0051e0"], strategy=ColorStrategy.COMPLEMENTARY)
    h = pal.tertiary.palette.hue
    assert not (70.0 < h < 100.0)
    assert h in (65.0, 110.0)


def test_tonal_tertiary_has_minimum_accent_chroma():
    pal = derive_tonal_palette(["#0051e0"], SchemeVariant.NEUTRAL)
    assert pal.tertiary.palette.chroma >= 0.1
    assert pal.secondary.palette.chroma == pytest.approx(0.02)


def test_tonal_explicit_seeds_override_strategy(four_seeds):
    pal = derive_tonal_palette(four_seeds, strategy=ColorStrategy.TRIADIC)
    assert pal.secondary.palette == TonalPalette.from_hex("#40617f")
    assert pal.tertiary.palette == TonalPalette.from_hex("#FF00FF")
    assert pal.error.palette == TonalPalette.from_hex("#FF0000")


def test_tonal_only_missing_accent_is_derived():
    _, _, seed_hue = seed_oklch("#0051e0")
    pal = derive_tonal_palette(["#0051e0", "#40617f"], strategy=ColorStrategy.ANALOGOUS)
    assert pal.secondary.palette == TonalPalette.from_hex("#40617f")
    assert pal.tertiary.palette.hue == pytest.approx(calibrate_accent_hue(seed_hue + 240.0))


def test_tonal_variant_profiles():
    _, seed_chroma, seed_hue = seed_oklch("#0051e0")
    expressive = derive_tonal_palette(["#0051e0"], SchemeVariant.EXPRESSIVE)
    assert expressive.primary.palette.hue == pytest.approx((seed_hue + 240.0) % 360.0)

    fidelity = derive_tonal_palette(["#0051e0"], SchemeVariant.FIDELITY)
    assert fidelity.primary.palette.chroma == pytest.approx(seed_chroma)

    mono = derive_tonal_palette(["#0051e0"], SchemeVariant.MONOCHROME)
    assert mono.primary.palette.chroma == 0.0
    assert mono.secondary.palette.chroma == 0.0
    assert mono.tertiary.palette.chroma == 0.0
    assert mono.error.palette.chroma > 0.0


def test_tonal_semantic_and_error_defaults():
    pal = derive_tonal_palette(["#0051e0"])
    assert pal.error.palette == TonalPalette.from_hex("#b3261e")
    assert pal.warning.palette == TonalPalette.from_hex("#e6ac00")
    assert pal.success.palette == TonalPalette.from_hex("#00b33c")
    assert pal.info.palette == TonalPalette.from_hex("#2e58ff")


# --- both ---


@pytest.mark.parametrize("seeds", [[], ["#000000"] * 5])
def test_derivation_rejects_bad_counts(seeds, policy):
    with pytest.raises(InvalidColorCountError, match="Please provide 1-4 colors"):
        derive_palette(seeds, policy=SchemePolicy.from_value(policy))


def test_derive_palette_dispatches_on_policy():
    assert hasattr(derive_palette(["#0051e0"], policy=SchemePolicy.HSL).primary, "color")
    assert hasattr(derive_palette(["#0051e0"], policy=SchemePolicy.TONAL).primary, "palette")


@pytest.mark.parametrize("seeds", [[""], ["#0051e0", ""], ["#0051e0", None, "#ff00ff", ""]])
def test_empty_string_seed_is_malformed_not_missing(seeds, policy):
    """空文字は「未指定」ではなく不正な HEX として扱う。"""
    with pytest.raises(MalformedHexError):
        derive_palette(seeds, policy=SchemePolicy.from_value(policy))


def test_tonal_missing_primary_is_malformed():
    with pytest.raises(MalformedHexError):
        derive_tonal_palette([None, "#40617f"])
