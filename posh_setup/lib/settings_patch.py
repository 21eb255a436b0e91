from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..errors import KeyPathConflictError, SettingsParseError
from .backup import backup_file

logger = logging.getLogger(__name__)

# A settings document is the plain tree json produces: dict, list, str, int,
# float, bool, None. dicts keep insertion order, so unrelated keys round-trip.
JsonTree = Dict[str, Any]
PatchSet = Mapping[str, Any]

COLOR_SCHEME_KEY = "profiles.defaults.colorScheme"
FONT_FACE_KEY = "profiles.defaults.font.face"
FONT_SIZE_KEY = "profiles.defaults.font.size"


def build_terminal_patch(*, color_scheme: str, font_face: str, font_size: int) -> Dict[str, Any]:
    return {
        COLOR_SCHEME_KEY: color_scheme,
        FONT_FACE_KEY: font_face,
        FONT_SIZE_KEY: int(font_size),
    }


def split_key_path(key_path: str) -> List[str]:
    parts = key_path.split(".")
    if not key_path or any(not part for part in parts):
        raise ValueError(f"Invalid key path: {key_path!r}")
    return parts


def set_key_path(tree: JsonTree, key_path: str, value: Any) -> None:
    """Set ``tree[a][b][c] = value`` for ``key_path`` ``"a.b.c"``.

    Absent intermediates become empty objects. An intermediate holding
    anything other than an object raises KeyPathConflictError; it is never
    replaced.
    """

    parts = split_key_path(key_path)
    node: Any = tree
    walked: List[str] = []
    for key in parts[:-1]:
        walked.append(key)
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise KeyPathConflictError(
                f"Cannot set {key_path}: {'.'.join(walked)} is {type(child).__name__}, not an object"
            )
        node = child
    node[parts[-1]] = value


def get_key_path(tree: JsonTree, key_path: str, default: Any = None) -> Any:
    node: Any = tree
    for key in split_key_path(key_path):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def load_settings(path: Path) -> JsonTree:
    try:
        # Windows Terminal may write the file with a BOM.
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as e:
        raise SettingsParseError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise SettingsParseError(f"{path}: not valid UTF-8 ({e})") from e
    if not isinstance(data, dict):
        raise SettingsParseError(f"{path}: settings root must be an object, got {type(data).__name__}")
    return data


def dump_settings(tree: JsonTree) -> str:
    return json.dumps(tree, indent=4, ensure_ascii=False) + "\n"


def patch_settings(
    path: str | Path,
    patch_set: PatchSet,
    *,
    now: Optional[datetime] = None,
    dry_run: bool = False,
) -> None:
    """Back up, parse, patch and rewrite one existing settings document."""

    p = Path(path)
    if not dry_run:
        backup_file(p, now=now)

    tree = load_settings(p)
    for key_path, value in patch_set.items():
        set_key_path(tree, key_path, value)

    if dry_run:
        logger.info("Would write %s (%s)", p, ", ".join(patch_set))
        return

    p.write_text(dump_settings(tree), encoding="utf-8")
    logger.info("Patched %s (%s)", p, ", ".join(patch_set))


def patch_settings_candidates(
    candidates: Iterable[str | Path],
    patch_set: PatchSet,
    *,
    now: Optional[datetime] = None,
    dry_run: bool = False,
) -> List[Path]:
    """Patch every candidate that exists; returns the patched paths.

    No existing candidate is not an error. The first failure propagates and
    leaves the remaining candidates untouched.
    """

    existing = [Path(c) for c in candidates if Path(c).is_file()]
    if not existing:
        logger.info("No settings file found; nothing to patch")
        return []

    for p in existing:
        patch_settings(p, patch_set, now=now, dry_run=dry_run)
    return existing
