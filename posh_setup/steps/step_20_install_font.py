from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import FontInstallError, ToolInstallError
from ..lib.command import which
from ..lib.fonts import is_font_installed
from ..lib.pkg import omp_font_install, scoop_bucket_add, scoop_install
from ..lib.strategies import Strategy, install_with_fallback
from ..pipeline import SetupCtx, record

logger = logging.getLogger(__name__)


class InstallFontStep:
    step_id = "20_install_font"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        family = ctx.cfg.font_family
        capability = f"{family} Nerd Font Mono"

        def present() -> bool:
            return is_font_installed(family, font_dirs=ctx.paths.font_dirs)

        if ctx.dry_run:
            if not present():
                logger.info("Would install %s", capability)
            record(state, "font", {"family": family, "installed_via": None})
            return state

        def via_oh_my_posh() -> None:
            omp = which("oh-my-posh", ctx.paths.omp_candidates)
            if not omp:
                raise ToolInstallError("oh-my-posh not available for font install")
            omp_font_install(omp, family.lower())

        def via_scoop() -> None:
            scoop_bucket_add("nerd-fonts")
            scoop_install(f"{family}-NF-Mono")

        how = install_with_fallback(
            capability,
            [Strategy("oh-my-posh", via_oh_my_posh), Strategy("scoop", via_scoop)],
            present,
            error=FontInstallError,
        )
        record(state, "font", {"family": family, "installed_via": how})
        return state
