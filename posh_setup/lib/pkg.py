from __future__ import annotations

import logging

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)

OMP_SCOOP_MANIFEST = "https://github.com/JanDeDobbeleer/oh-my-posh/releases/latest/download/oh-my-posh.json"

# Exit codes are only logged: callers probe for the installed tool or font.


def winget_install(package_id: str, *, dry_run: bool = False) -> CmdResult:
    r = run_cmd(
        [
            "winget",
            "install",
            "--id",
            package_id,
            "--exact",
            "--silent",
            "--source",
            "winget",
            "--accept-package-agreements",
            "--accept-source-agreements",
        ],
        check=False,
        dry_run=dry_run,
    )
    logger.info("winget install %s exited %d", package_id, r.returncode)
    return r


def scoop_install(app: str, *, dry_run: bool = False) -> CmdResult:
    r = run_cmd(["scoop", "install", app], check=False, dry_run=dry_run)
    logger.info("scoop install %s exited %d", app, r.returncode)
    return r


def scoop_bucket_add(bucket: str, *, dry_run: bool = False) -> CmdResult:
    # Non-zero when the bucket already exists; harmless.
    return run_cmd(["scoop", "bucket", "add", bucket], check=False, dry_run=dry_run)


def omp_font_install(omp_exe: str, font: str, *, dry_run: bool = False) -> CmdResult:
    r = run_cmd([omp_exe, "font", "install", font, "--user"], check=False, dry_run=dry_run)
    logger.info("oh-my-posh font install %s exited %d", font, r.returncode)
    return r
