"""
どこで: `util.utils`。
何を: プロジェクト構成 YAML（`configs/default.yaml` と ルート `config.yaml`）の読込と、
      CLI 既定値を持つ `scheme:` セクションの取り出し。
なぜ: policy/variant/strategy/出力先などの既定値をコード外で調整できるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "configs"
DEFAULT_CONFIG_NAME = "default.yaml"
ROOT_CONFIG_NAME = "config.yaml"

SCHEME_SECTION = "scheme"
SCHEME_KEYS = ("policy", "variant", "strategy", "legacy_seed_order", "output_dir", "preview")


def _read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """YAML を読み、トップレベルが dict でなければ空辞書（読込/構文エラーも空辞書）。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`.git` / `pyproject.toml` / `configs/` を持つ最も近い祖先。

    見つからない場合は `start.parent.parent`（典型: <repo>/src/util -> <repo>）。
    """
    cur = start.resolve()
    markers = (".git", "pyproject.toml", CONFIG_DIR_NAME)
    for parent in [cur, *cur.parents]:
        if any((parent / m).exists() for m in markers):
            return parent
    return cur.parent.parent


def config_paths(root: Path) -> List[Path]:
    """読込順（後勝ち）の候補ファイル。"""
    return [root / CONFIG_DIR_NAME / DEFAULT_CONFIG_NAME, root / ROOT_CONFIG_NAME]


def load_config(root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    `configs/default.yaml` をベースにルート `config.yaml` をトップレベル単位で上書きする。
    どちらも無い/不正なら空辞書。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for path in config_paths(project_root):
        if path.exists():
            merged.update(_read_yaml_mapping(path))
    return merged


def config_section(name: str, cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """構成のサブセクション（dict 以外は空辞書）を返す。"""
    data = load_config() if cfg is None else cfg
    section = data.get(name, {}) if isinstance(data, dict) else {}
    return section if isinstance(section, dict) else {}


def scheme_defaults(cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """`scheme:` セクションのうち既知キーのみを返す（未知キーは警告して捨てる）。"""
    section = config_section(SCHEME_SECTION, cfg)
    unknown = sorted(set(section) - set(SCHEME_KEYS))
    if unknown:
        logger.warning("unknown keys in '%s' config section: %s", SCHEME_SECTION, ", ".join(unknown))
    return {k: v for k, v in section.items() if k in SCHEME_KEYS}


__all__ = ["load_config", "config_paths", "config_section", "scheme_defaults"]
