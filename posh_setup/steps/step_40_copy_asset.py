from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.assets import copy_asset
from ..pipeline import SetupCtx, record

logger = logging.getLogger(__name__)


class CopyAssetStep:
    step_id = "40_copy_asset"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        src = state.get("asset_path")
        if not src:
            raise RuntimeError("asset_path missing; run resolve step first")

        dst, copied = copy_asset(src, ctx.theme_dir, overwrite=ctx.overwrite, dry_run=ctx.dry_run)
        state["theme_path"] = str(dst)
        record(state, "theme", {"path": str(dst), "copied": copied})
        return state
