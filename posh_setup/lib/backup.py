from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

BACKUP_MARKER = ".bak-"
TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def backup_path_for(path: str | Path, now: datetime) -> Path:
    p = Path(path)
    return p.with_name(f"{p.name}{BACKUP_MARKER}{now.strftime(TIMESTAMP_FORMAT)}")


def backup_file(path: str | Path, *, now: Optional[datetime] = None) -> Path:
    """Copy ``path`` next to itself as ``<path>.bak-<timestamp>``.

    Two backups inside the same second get ``-001``, ``-002``... appended so an
    earlier backup is never overwritten. Backups are never removed.
    """

    src = Path(path)
    if not src.exists():
        raise FileNotFoundError(str(src))

    base = backup_path_for(src, now or datetime.now())
    dst = base
    n = 0
    while dst.exists():
        n += 1
        dst = base.with_name(f"{base.name}-{n:03d}")

    shutil.copy2(src, dst)
    logger.info("Backed up %s -> %s", src, dst)
    return dst


def list_backups(path: str | Path) -> list[Path]:
    p = Path(path)
    if not p.parent.exists():
        return []
    return sorted(p.parent.glob(f"{p.name}{BACKUP_MARKER}*"))
