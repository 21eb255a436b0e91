from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, Tuple

from ..errors import AssetNotFoundError

logger = logging.getLogger(__name__)

BUNDLED_ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"


def resolve_asset(requested: str | Path, *, search_dirs: Iterable[str | Path] = (BUNDLED_ASSETS_DIR,)) -> Path:
    """Return ``requested`` if it exists, else the first ``<dir>/<requested>`` that does."""

    p = Path(requested).expanduser()
    if p.is_file():
        return p.resolve()

    looked = [str(p)]
    if not p.is_absolute():
        for d in search_dirs:
            candidate = Path(d) / p
            looked.append(str(candidate))
            if candidate.is_file():
                return candidate.resolve()

    raise AssetNotFoundError(f"Asset not found: {requested} (looked in {', '.join(looked)})")


def copy_asset(
    src: str | Path,
    dst_dir: str | Path,
    *,
    overwrite: bool = False,
    dry_run: bool = False,
) -> Tuple[Path, bool]:
    """Copy ``src`` verbatim into ``dst_dir``. Returns (destination, copied)."""

    s = Path(src)
    d = Path(dst_dir) / s.name
    if not s.is_file():
        raise AssetNotFoundError(str(s))

    if d.exists() and not overwrite:
        logger.info("Asset already present at %s; skipping (use --overwrite to replace)", d)
        return d, False

    if dry_run:
        logger.info("Would copy %s -> %s", s, d)
        return d, False

    d.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(s, d)
    logger.info("Copied %s -> %s", s, d)
    return d, True
