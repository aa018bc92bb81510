from __future__ import annotations

"""colorscheme.color（HSL カラーモデル）の基本動作テスト。"""

import dataclasses

import pytest

from colorscheme import Color, MalformedHexError


def test_construction_normalizes_fields():
    """生成時に hue は折り返し、saturation/lightness はクランプされる。"""
    c = Color(-30.0, 120.0, -5.0)
    assert c.hue == pytest.approx(330.0)
    assert c.saturation == 100.0
    assert c.lightness == 0.0

    c2 = Color(720.0, 50.0, 50.0)
    assert c2.hue == 0.0


def test_adjust_lightness_clamps_without_wraparound():
    """95 + 35 は 100、5 - 45 は 0 で飽和する。"""
    assert Color(200.0, 50.0, 95.0).adjust_lightness(35).lightness == 100.0
    assert Color(200.0, 50.0, 5.0).adjust_lightness(-45).lightness == 0.0
    assert Color(200.0, 50.0, 40.0).adjust_lightness(25).lightness == pytest.approx(65.0)


def test_adjust_hue_wraps():
    """350 + 20 は 10 に折り返す（クランプしない）。"""
    assert Color(350.0, 50.0, 50.0).adjust_hue(20).hue == pytest.approx(10.0)
    assert Color(10.0, 50.0, 50.0).adjust_hue(-60).hue == pytest.approx(310.0)


def test_transforms_return_new_instances():
    """変換は常に新しいインスタンスを返し、元の値は不変。"""
    c = Color(120.0, 40.0, 60.0)
    lighter = c.adjust_lightness(10)
    rotated = c.adjust_hue(30)
    assert lighter is not c and rotated is not c
    assert (c.hue, c.saturation, c.lightness) == (120.0, 40.0, 60.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.lightness = 10.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "hex_str, hsl",
    [
        ("#ff0000", (0.0, 100.0, 50.0)),
        ("#00ff00", (120.0, 100.0, 50.0)),
        ("#0000ff", (240.0, 100.0, 50.0)),
        ("#ffffff", (0.0, 0.0, 100.0)),
        ("#000000", (0.0, 0.0, 0.0)),
    ],
)
def test_from_hex_standard_conversion(hex_str, hsl):
    c = Color.from_hex(hex_str)
    assert (c.hue, c.saturation, c.lightness) == pytest.approx(hsl)


def test_to_hex_is_lowercase_and_round_trips():
    """大文字入力も小文字 #rrggbb で返る。"""
    assert Color.from_hex("#0051E0").to_hex() == "#0051e0"
    assert Color.from_hex("#ABCDEF").to_hex() == "#abcdef"
    assert Color.from_hex("#bb0e45").to_hex() == "#bb0e45"


@pytest.mark.parametrize("bad", ["#12345", "0051e0", "#gg0000", "#fff", "", "#0051e0ff"])
def test_from_hex_rejects_malformed_input(bad):
    """不正な HEX は NaN 伝播ではなく型付きエラーになる。"""
    with pytest.raises(MalformedHexError):
        Color.from_hex(bad)


def test_malformed_hex_error_is_value_error():
    with pytest.raises(ValueError, match="#RRGGBB"):
        Color.from_hex("#xyz")


def test_contrast_color_is_binary_threshold():
    """lightness > 50 なら近黒、それ以外は近白。"""
    assert Color(0.0, 0.0, 80.0).contrast_color().to_hex() == "#080808"
    assert Color(0.0, 0.0, 50.0).contrast_color().to_hex() == "#e1e1e1"
    assert Color(0.0, 0.0, 10.0).contrast_color().to_hex() == "#e1e1e1"
