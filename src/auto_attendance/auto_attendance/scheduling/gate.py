from __future__ import annotations

import logging
import random
import time
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.validators import require_window

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60_000


def is_eligible_day(now: datetime) -> bool:
    """Monday..Friday on ``now``'s own calendar day."""
    return now.weekday() < 5


def compute_delay(min_minutes: int, max_minutes: int, *, rng: Optional[random.Random] = None) -> timedelta:
    """Uniform random delay in [min, max] minutes, inclusive, at millisecond precision."""
    min_minutes, max_minutes = require_window(min_minutes, max_minutes)
    rng = rng or random
    millis = rng.randint(min_minutes * MS_PER_MINUTE, max_minutes * MS_PER_MINUTE)
    return timedelta(milliseconds=millis)


class SchedulerGate:
    def __init__(
        self,
        *,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self._sleep = sleep
        self._rng = rng or random.Random()

    def is_eligible_day(self, now: datetime) -> bool:
        return is_eligible_day(now)

    def wait(self, window: tuple[int, int], *, purpose: str = "") -> timedelta:
        delay = compute_delay(window[0], window[1], rng=self._rng)
        minutes = round(delay.total_seconds() / 60)
        suffix = f" before {purpose}" if purpose else ""

        logger.info("Waiting %d minutes%s...", minutes, suffix)
        self._sleep(delay.total_seconds())
        logger.info("Wait complete, proceeding%s", f" with {purpose}" if purpose else "")
        return delay
