from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

FONTS_REG_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion\Fonts"
FONT_SUFFIXES = {".ttf", ".otf", ".ttc"}

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize(name: str) -> str:
    return _SEPARATORS.sub("", name).lower()


def font_tokens(family: str) -> Tuple[str, str, str]:
    """Family, "Nerd Font" and "Mono" tokens; all three must match."""

    return (normalize(family), "nerdfont", "mono")


def name_matches(name: str, tokens: Sequence[str]) -> bool:
    n = normalize(name)
    return all(t in n for t in tokens)


def font_file_names(font_dirs: Iterable[str | Path]) -> List[str]:
    names: List[str] = []
    for d in font_dirs:
        p = Path(d)
        if not p.is_dir():
            continue
        names.extend(f.name for f in p.iterdir() if f.suffix.lower() in FONT_SUFFIXES)
    return names


def registry_font_names() -> List[str]:
    """Registered font names (value names and file values) from HKLM and HKCU.

    Empty on non-Windows hosts.
    """

    if sys.platform != "win32":
        return []

    import winreg

    names: List[str] = []
    for hive in (winreg.HKEY_LOCAL_MACHINE, winreg.HKEY_CURRENT_USER):
        try:
            key = winreg.OpenKey(hive, FONTS_REG_KEY)
        except OSError:
            continue
        with key:
            i = 0
            while True:
                try:
                    value_name, value, _ = winreg.EnumValue(key, i)
                except OSError:
                    break
                names.append(str(value_name))
                names.append(str(value))
                i += 1
    return names


def is_font_installed(
    family: str,
    *,
    font_dirs: Iterable[str | Path],
    registry_names: Optional[Iterable[str]] = None,
) -> bool:
    tokens = font_tokens(family)
    if registry_names is None:
        registry_names = registry_font_names()

    for name in font_file_names(font_dirs):
        if name_matches(name, tokens):
            logger.debug("Font file match: %s", name)
            return True
    for name in registry_names:
        if name_matches(name, tokens):
            logger.debug("Font registry match: %s", name)
            return True
    return False
