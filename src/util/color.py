"""
どこで: `util.color`。
何を: 色指定 `#RRGGBB` の厳密な検証/分解を一元化。
なぜ: コア (colorscheme) と CLI で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


def is_hex_color(s: object) -> bool:
    """`#RRGGBB` 形式（大文字/小文字不問）なら True。"""
    return isinstance(s, str) and _HEX_RE.fullmatch(s) is not None


def normalize_hex(s: str) -> str:
    """`#RRGGBB` を小文字の `#rrggbb` に正規化して返す。

    受理形式は `#RRGGBB` のみ（短縮形 `#RGB` やアルファ付きは不可）。
    """
    if not is_hex_color(s):
        raise ValueError(f"invalid hex color: {s!r} (expected #RRGGBB)")
    return s.lower()


def parse_hex_rgb(s: str) -> tuple[int, int, int]:
    """`#RRGGBB` から (r, g, b) を 0–255 の整数で返す。"""
    t = normalize_hex(s)
    return (int(t[1:3], 16), int(t[3:5], 16), int(t[5:7], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """0–255 の RGB を `#rrggbb` へ（最近傍丸め + 範囲クランプ）。"""
    r_i = max(0, min(255, int(round(r))))
    g_i = max(0, min(255, int(round(g))))
    b_i = max(0, min(255, int(round(b))))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


__all__ = ["is_hex_color", "normalize_hex", "parse_hex_rgb", "rgb_to_hex"]
