from __future__ import annotations

import pytest

from posh_setup.lib.fonts import font_tokens, is_font_installed


@pytest.fixture
def font_dir(tmp_path):
    d = tmp_path / "Fonts"
    d.mkdir()
    return d


def test_tokens_are_normalized():
    assert font_tokens("JetBrains Mono") == ("jetbrainsmono", "nerdfont", "mono")


def test_font_file_with_all_tokens_is_found(font_dir):
    (font_dir / "MesloLGMNerdFontMono-Regular.ttf").write_bytes(b"")

    assert is_font_installed("Meslo", font_dirs=[font_dir], registry_names=[])


def test_all_three_tokens_are_required(font_dir):
    (font_dir / "MesloLGMNerdFont-Regular.ttf").write_bytes(b"")
    (font_dir / "MesloLGM-Mono.ttf").write_bytes(b"")
    (font_dir / "FiraCodeNerdFontMono-Regular.ttf").write_bytes(b"")

    assert not is_font_installed("Meslo", font_dirs=[font_dir], registry_names=[])


def test_non_font_files_are_ignored(font_dir):
    (font_dir / "MesloLGMNerdFontMono.txt").write_text("x", encoding="utf-8")

    assert not is_font_installed("Meslo", font_dirs=[font_dir], registry_names=[])


def test_registry_registration_name_counts(tmp_path):
    names = ["Arial (TrueType)", "MesloLGM Nerd Font Mono Regular (TrueType)"]

    assert is_font_installed("Meslo", font_dirs=[tmp_path / "missing"], registry_names=names)


def test_missing_font_dirs_are_skipped(tmp_path):
    assert not is_font_installed("Meslo", font_dirs=[tmp_path / "nope"], registry_names=[])
