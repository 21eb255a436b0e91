from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.assets import BUNDLED_ASSETS_DIR, resolve_asset
from ..pipeline import SetupCtx, record

logger = logging.getLogger(__name__)


class ResolveAssetStep:
    step_id = "30_resolve_asset"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        asset = resolve_asset(ctx.asset, search_dirs=[BUNDLED_ASSETS_DIR])
        state["asset_path"] = str(asset)
        record(state, "asset", str(asset))
        logger.info("Using theme %s", asset)
        return state
