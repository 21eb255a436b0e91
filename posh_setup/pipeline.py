from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .lib.env import UserPaths
from .setup_config import SetupConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupCtx:
    cfg: SetupConfig
    paths: UserPaths
    asset: str
    overwrite: bool = False
    dry_run: bool = False
    profile_override: Optional[str] = None
    # Fixed clock for backup names; None means "now" at each backup.
    now: Optional[datetime] = None

    @property
    def profile_path(self) -> Path:
        return Path(self.profile_override or self.cfg.profile_path or self.paths.pwsh_profile)

    @property
    def theme_dir(self) -> Path:
        return Path(self.cfg.theme_dir or self.paths.theme_dir)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def record(state: Dict[str, Any], key: str, value: Any) -> None:
    state.setdefault("decisions", {})[key] = value


def run_pipeline(*, ctx: SetupCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order; the first exception aborts the run.

    There is no rollback: files patched by earlier steps stay patched (their
    backups sit next to them).
    """

    state: Dict[str, Any] = {"current_step": None, "decisions": {}}
    ran: List[str] = []

    for step in steps:
        state["current_step"] = step.step_id
        logger.info("Running step %s", step.step_id)
        state = step.run(ctx, state)
        ran.append(step.step_id)

    state["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran)
