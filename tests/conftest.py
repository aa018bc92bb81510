"""共通フィクスチャ。

- 代表的なシード色
- tonal / hsl 両ポリシーで生成済みのスキーム
"""

from __future__ import annotations

import pytest

from colorscheme import generate_color_scheme

PRIMARY = "#0051e0"
FOUR_SEEDS = ["#0051e0", "#40617f", "#FF00FF", "#FF0000"]


@pytest.fixture()
def four_seeds() -> list[str]:
    return list(FOUR_SEEDS)


@pytest.fixture()
def scheme_tonal() -> dict[str, str]:
    return generate_color_scheme(PRIMARY)


@pytest.fixture()
def scheme_hsl() -> dict[str, str]:
    return generate_color_scheme(PRIMARY, policy="hsl")


@pytest.fixture(params=["tonal", "hsl"])
def policy(request: pytest.FixtureRequest) -> str:
    return request.param
