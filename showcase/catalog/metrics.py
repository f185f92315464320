"""
Decorative statistics for the showcase front page.

Only ``total_projects`` reflects real data. Stars, forks and visitors
are a fixed base plus a bounded random offset so the page looks alive;
they are not telemetry and must not be presented as such. The random
source is passed in so callers (and tests) control the seed.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Optional

from .schemas import Metrics

STARS_BASE, STARS_SPREAD = 128, 50
FORKS_BASE, FORKS_SPREAD = 24, 10
VISITORS_BASE, VISITORS_SPREAD = 50, 200


def sample_metrics(total_projects: int, rng: random.Random) -> Metrics:
    return Metrics(
        total_projects=total_projects,
        total_stars=STARS_BASE + rng.randrange(STARS_SPREAD),
        total_forks=FORKS_BASE + rng.randrange(FORKS_SPREAD),
        active_visitors_last_24h=VISITORS_BASE + rng.randrange(VISITORS_SPREAD),
    )


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format ``now`` (default: current time) as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
