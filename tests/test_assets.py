from __future__ import annotations

import json

import pytest

from posh_setup.errors import AssetNotFoundError
from posh_setup.lib.assets import BUNDLED_ASSETS_DIR, copy_asset, resolve_asset
from posh_setup.setup_config import DEFAULT_THEME


def test_existing_path_is_used_as_given(tmp_path):
    theme = tmp_path / "mine.omp.json"
    theme.write_text("{}", encoding="utf-8")

    assert resolve_asset(theme, search_dirs=[]) == theme.resolve()


def test_relative_name_falls_back_to_search_dirs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shipped = tmp_path / "shipped"
    shipped.mkdir()
    (shipped / "t.omp.json").write_text("{}", encoding="utf-8")

    assert resolve_asset("t.omp.json", search_dirs=[shipped]) == (shipped / "t.omp.json").resolve()


def test_unresolvable_asset_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(AssetNotFoundError):
        resolve_asset("missing.omp.json", search_dirs=[tmp_path])


def test_bundled_theme_resolves_and_is_valid_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    theme = resolve_asset(DEFAULT_THEME)

    assert theme.parent == BUNDLED_ASSETS_DIR
    assert json.loads(theme.read_text(encoding="utf-8"))["version"] == 2


def test_copy_creates_destination_dir(tmp_path):
    src = tmp_path / "t.omp.json"
    src.write_text('{"a": 1}', encoding="utf-8")

    dst, copied = copy_asset(src, tmp_path / "themes" / "nested")

    assert copied
    assert dst == tmp_path / "themes" / "nested" / "t.omp.json"
    assert dst.read_bytes() == src.read_bytes()


def test_existing_destination_is_kept_without_overwrite(tmp_path):
    src = tmp_path / "t.omp.json"
    src.write_text("new", encoding="utf-8")
    dst_dir = tmp_path / "themes"
    dst_dir.mkdir()
    (dst_dir / "t.omp.json").write_text("old", encoding="utf-8")

    dst, copied = copy_asset(src, dst_dir)
    assert not copied
    assert dst.read_text(encoding="utf-8") == "old"

    dst, copied = copy_asset(src, dst_dir, overwrite=True)
    assert copied
    assert dst.read_text(encoding="utf-8") == "new"


def test_copy_of_missing_source_raises(tmp_path):
    with pytest.raises(AssetNotFoundError):
        copy_asset(tmp_path / "nope.json", tmp_path / "themes")
