from __future__ import annotations

"""JSON / CSS カスタムプロパティ出力のテスト。"""

import json
from pathlib import Path

import pytest

from colorscheme import (
    ExportFormat,
    export_scheme,
    export_scheme_to_json,
    generate_css_custom_properties,
    scheme_to_json,
)

SAMPLE = {"light__primary_hlv": "#0051e0", "dark__primary_hlv": "#8fb0ff"}


def test_css_block_exact_format():
    assert generate_css_custom_properties(SAMPLE) == (
        ":root {\n"
        "  --light__primary_hlv: #0051e0;\n"
        "  --dark__primary_hlv: #8fb0ff;\n"
        "}\n"
    )


def test_json_is_two_space_indented_and_ordered():
    assert scheme_to_json(SAMPLE) == (
        "{\n"
        '  "light__primary_hlv": "#0051e0",\n'
        '  "dark__primary_hlv": "#8fb0ff"\n'
        "}"
    )


def test_css_preserves_scheme_order(scheme_tonal):
    css = generate_css_custom_properties(scheme_tonal)
    names = [line.split(":")[0].strip()[2:] for line in css.splitlines()[1:-1]]
    assert names == list(scheme_tonal)


def test_export_scheme_dispatches_format():
    assert export_scheme(SAMPLE, "json") == scheme_to_json(SAMPLE)
    assert export_scheme(SAMPLE, ExportFormat.CSS) == generate_css_custom_properties(SAMPLE)
    assert ExportFormat.CSS.suffix == ".css"
    with pytest.raises(ValueError):
        export_scheme(SAMPLE, "scss")


def test_export_scheme_to_json_writes_file(tmp_path: Path):
    target = tmp_path / "scheme.json"
    path = export_scheme_to_json(SAMPLE, target)
    assert path == target
    assert json.loads(target.read_text(encoding="utf-8")) == SAMPLE


def test_export_scheme_to_json_default_filename(tmp_path: Path, monkeypatch):
    """ファイル名省略時はカレントの color-scheme.json に書く。"""
    monkeypatch.chdir(tmp_path)
    path = export_scheme_to_json(SAMPLE)
    assert path == Path("color-scheme.json")
    assert (tmp_path / "color-scheme.json").exists()


def test_export_scheme_to_json_propagates_os_error(tmp_path: Path):
    missing = tmp_path / "no-such-dir" / "scheme.json"
    with pytest.raises(OSError):
        export_scheme_to_json(SAMPLE, missing)
