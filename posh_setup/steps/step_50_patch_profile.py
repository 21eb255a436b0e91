from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.profile_patch import OMP_INIT_PATTERN, build_init_line, patch_init_line
from ..pipeline import SetupCtx, record

logger = logging.getLogger(__name__)


class PatchProfileStep:
    step_id = "50_patch_profile"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        theme = state.get("theme_path")
        if not theme:
            raise RuntimeError("theme_path missing; run copy step first")

        line = build_init_line(theme)
        profile = patch_init_line(ctx.profile_path, OMP_INIT_PATTERN, line, now=ctx.now, dry_run=ctx.dry_run)
        record(state, "profile", {"path": str(profile), "line": line})
        return state
