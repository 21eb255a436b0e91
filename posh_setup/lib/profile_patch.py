from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .backup import backup_file

logger = logging.getLogger(__name__)

LinePattern = Union[str, "re.Pattern[str]"]

# Loose on purpose: any earlier init line, whatever its --config, is replaced.
OMP_INIT_PATTERN = re.compile(r"oh-my-posh(\.exe)?[\"']?\s+init\s+pwsh", re.IGNORECASE)


def build_init_line(config_path: str | Path) -> str:
    return f'oh-my-posh init pwsh --config "{config_path}" | Invoke-Expression'


def line_matches(line: str, pattern: LinePattern) -> bool:
    if isinstance(pattern, str):
        return pattern in line
    return pattern.search(line) is not None


def read_lines(path: Path) -> List[str]:
    if not path.exists():
        return []
    # utf-8-sig: Windows PowerShell 5 writes profiles with a BOM.
    # read_text folds \r\n and \r into \n; str.splitlines() would also break
    # on form feeds and other separators that belong to the line.
    lines = path.read_text(encoding="utf-8-sig").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def render_lines(lines: List[str]) -> str:
    return "".join(ln + "\n" for ln in lines)


def patch_init_line(
    path: str | Path,
    pattern: LinePattern,
    new_line: str,
    *,
    now: Optional[datetime] = None,
    dry_run: bool = False,
) -> Path:
    """Make ``new_line`` the single line of ``path`` matching ``pattern``.

    Every existing matching line is dropped and ``new_line`` is appended at the
    end; all other lines keep their order. An existing file is backed up first.
    A missing file (and its parent directories) is created.
    """

    p = Path(path)
    if not line_matches(new_line, pattern):
        raise ValueError(f"New line does not match its own pattern: {new_line!r}")

    lines = read_lines(p)
    kept = [ln for ln in lines if not line_matches(ln, pattern)]
    removed = len(lines) - len(kept)
    kept.append(new_line)

    if dry_run:
        logger.info("Would write %s (replacing %d init line(s))", p, removed)
        return p

    p.parent.mkdir(parents=True, exist_ok=True)
    if p.exists():
        backup_file(p, now=now)

    p.write_text(render_lines(kept), encoding="utf-8")
    logger.info("Patched %s (replaced %d init line(s))", p, removed)
    return p
