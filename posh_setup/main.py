from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

from .errors import SetupError
from .lib.env import UserPaths
from .logging_utils import configure_logging
from .pipeline import SetupCtx, run_pipeline
from .setup_config import load_setup_config
from .steps import (
    CopyAssetStep,
    InstallFontStep,
    InstallToolStep,
    PatchProfileStep,
    PatchTerminalSettingsStep,
    ResolveAssetStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        InstallToolStep(),
        InstallFontStep(),
        ResolveAssetStep(),
        CopyAssetStep(),
        PatchProfileStep(),
        PatchTerminalSettingsStep(),
    ]


def run(
    *,
    asset: Optional[str] = None,
    overwrite: bool = False,
    config_path: Optional[str] = None,
    profile: Optional[str] = None,
    dry_run: bool = False,
    paths: Optional[UserPaths] = None,
) -> Dict[str, Any]:
    """Run the setup sequence. Raises on the first failed step."""

    cfg = load_setup_config(config_path)
    ctx = SetupCtx(
        cfg=cfg,
        paths=paths or UserPaths.from_environ(),
        asset=asset or cfg.theme,
        overwrite=overwrite,
        dry_run=dry_run or cfg.dry_run,
        profile_override=profile,
    )

    result = run_pipeline(ctx=ctx, steps=build_steps())
    logger.info("Setup complete (%s)", ", ".join(result.ran_steps))
    return result.state


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="posh-setup")
    p.add_argument("asset", nargs="?", default=None, help="Theme file to install (default: bundled theme)")
    p.add_argument("--overwrite", action="store_true", help="Replace an already installed theme file")
    p.add_argument("--config", default=None, help="Path to setup config (json|yaml)")
    p.add_argument("--profile", default=None, help="PowerShell profile to patch")
    p.add_argument("--log", default=None, help="Path to setup log")
    p.add_argument("--dry-run", action="store_true", help="Log actions without changing anything")
    p.add_argument("-v", "--verbose", action="store_true")

    args = p.parse_args(argv)

    paths = UserPaths.from_environ()
    configure_logging(
        log_path=args.log or str(paths.log_path),
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        run(
            asset=args.asset,
            overwrite=bool(args.overwrite),
            config_path=args.config,
            profile=args.profile,
            dry_run=bool(args.dry_run),
            paths=paths,
        )
    except (SetupError, OSError, ValueError) as e:
        logger.exception("Setup failed")
        logger.error("Aborting: %s", e)
        return 1
    return 0
