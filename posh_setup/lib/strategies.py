from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Type

from ..errors import SetupError

logger = logging.getLogger(__name__)

ALREADY_PRESENT = "already-present"


@dataclass(frozen=True)
class Strategy:
    """One way of obtaining a capability (e.g. "install via winget")."""

    name: str
    attempt: Callable[[], object]


def install_with_fallback(
    capability: str,
    strategies: Sequence[Strategy],
    is_present: Callable[[], bool],
    *,
    error: Type[SetupError] = SetupError,
) -> str:
    """Try strategies in order until ``is_present()`` holds.

    Returns the name of the strategy that made the capability available, or
    ALREADY_PRESENT. Raises ``error`` when every strategy has been tried.
    """

    if is_present():
        logger.info("%s already present", capability)
        return ALREADY_PRESENT

    tried: list[str] = []
    for strategy in strategies:
        tried.append(strategy.name)
        logger.info("Installing %s via %s", capability, strategy.name)
        try:
            strategy.attempt()
        except (OSError, RuntimeError) as e:
            logger.warning("%s via %s failed: %s", capability, strategy.name, e)
        if is_present():
            logger.info("%s installed via %s", capability, strategy.name)
            return strategy.name
        logger.warning("%s still missing after %s", capability, strategy.name)

    raise error(f"{capability} not available after trying: {', '.join(tried) or 'nothing'}")
