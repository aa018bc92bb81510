from __future__ import annotations

import logging
from pathlib import Path

from util.utils import _find_project_root, config_paths, config_section, load_config, scheme_defaults


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    got = _find_project_root(a)
    assert got == a.parent.parent


def test_find_project_root_stops_at_configs_dir(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    start = tmp_path / "src" / "util"
    start.mkdir(parents=True)
    assert _find_project_root(start) == tmp_path.resolve()


def test_load_config_root_overrides_default(tmp_path: Path) -> None:
    # ルート config.yaml はトップレベル単位で default.yaml を上書きする
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "scheme:\n  policy: tonal\n  variant: vibrant\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("scheme:\n  policy: hsl\n", encoding="utf-8")
    cfg = load_config(root=tmp_path)
    assert cfg["scheme"] == {"policy": "hsl"}
    assert cfg["other"] == 1


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("scheme: [unclosed\n", encoding="utf-8")
    assert load_config(root=tmp_path) == {}
    assert load_config(root=tmp_path / "missing") == {}


def test_config_section_ignores_non_dict_values() -> None:
    assert config_section("scheme", {"scheme": {"variant": "neutral"}}) == {"variant": "neutral"}
    assert config_section("scheme", {"scheme": "oops"}) == {}
    assert config_section("scheme", {}) == {}


def test_repository_default_config_has_scheme_section() -> None:
    section = config_section("scheme")
    assert section.get("policy") == "tonal"
    assert section.get("output_dir") == "generated-colors"


def test_scheme_defaults_drops_unknown_keys(caplog) -> None:
    cfg = {"scheme": {"variant": "neutral", "colour": "red"}}
    with caplog.at_level(logging.WARNING, logger="util.utils"):
        assert scheme_defaults(cfg) == {"variant": "neutral"}
    assert "colour" in caplog.text


def test_config_paths_order(tmp_path: Path) -> None:
    # 後勝ち: default.yaml -> config.yaml
    assert config_paths(tmp_path) == [tmp_path / "configs" / "default.yaml", tmp_path / "config.yaml"]
