from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import ToolInstallError
from ..lib.command import which
from ..lib.pkg import scoop_install, winget_install
from ..lib.strategies import Strategy, install_with_fallback
from ..pipeline import SetupCtx, record

logger = logging.getLogger(__name__)

TOOL = "oh-my-posh"

MANUAL_INSTALL_HINT = (
    "Install oh-my-posh manually (https://ohmyposh.dev/docs/installation/windows), "
    "then open a new terminal. The profile is patched regardless."
)


class InstallToolStep:
    step_id = "10_install_tool"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        extra = ctx.paths.omp_candidates

        def present() -> bool:
            return which(TOOL, extra) is not None

        if ctx.dry_run:
            if not present():
                logger.info("Would install %s via winget (%s), falling back to scoop", TOOL, ctx.cfg.winget_id)
            record(state, "tool", {"installed_via": None, "path": which(TOOL, extra)})
            return state

        strategies = [
            Strategy("winget", lambda: winget_install(ctx.cfg.winget_id)),
            Strategy("scoop", lambda: scoop_install(ctx.cfg.scoop_manifest)),
        ]
        try:
            how = install_with_fallback(TOOL, strategies, present, error=ToolInstallError)
        except ToolInstallError as e:
            if ctx.cfg.tool_required:
                raise
            logger.warning("%s", e)
            logger.warning(MANUAL_INSTALL_HINT)
            how = None

        record(state, "tool", {"installed_via": how, "path": which(TOOL, extra)})
        return state
