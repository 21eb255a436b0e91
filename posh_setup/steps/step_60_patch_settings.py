from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.settings_patch import build_terminal_patch, patch_settings_candidates
from ..pipeline import SetupCtx, record

logger = logging.getLogger(__name__)


class PatchTerminalSettingsStep:
    step_id = "60_patch_settings"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        patch = build_terminal_patch(
            color_scheme=ctx.cfg.color_scheme,
            font_face=ctx.cfg.font_face,
            font_size=ctx.cfg.font_size,
        )
        patched = patch_settings_candidates(
            ctx.paths.terminal_settings_candidates,
            patch,
            now=ctx.now,
            dry_run=ctx.dry_run,
        )
        record(state, "terminal_settings", [str(p) for p in patched])
        return state
