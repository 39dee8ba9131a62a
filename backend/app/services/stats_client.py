"""Client-side retrieval of a rule's engagement counters.

``RuleStatsState`` mirrors what a UI binds to: ``loading``, ``error`` and
``stats``. ``RuleStatsClient.load`` fills it from ``GET
/api/rules/{slug}/stats`` and never raises; failures end up in ``error``.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from app.schemas.rule import RuleStats

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load stats"
PLACEHOLDER = "…"


@dataclass
class RuleStatsState:
    slug: str
    stats: RuleStats = field(default_factory=RuleStats)
    loading: bool = True
    error: Optional[str] = None
    cancelled: bool = False

    def update_stats(self, **partial: int) -> RuleStats:
        """
        Merge a subset of counters into the current stats.

        The merged counters are validated; a negative or non-numeric value
        raises and leaves the current stats unchanged.
        """
        unknown = set(partial) - set(RuleStats.model_fields)
        if unknown:
            raise ValueError(f"Unknown stats fields: {sorted(unknown)}")
        self.stats = RuleStats.model_validate({**self.stats.model_dump(), **partial})
        return self.stats

    def cancel(self) -> None:
        """Mark the consumer as gone; later load results are ignored."""
        self.cancelled = True


class RuleStatsClient:
    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def fetch_stats(self, slug: str) -> RuleStats:
        """Fetch counters for one rule. Raises on transport or HTTP errors."""
        async with httpx.AsyncClient(
            base_url=self.base_url, transport=self.transport, timeout=self.timeout
        ) as client:
            response = await client.get(f"/api/rules/{slug}/stats")
            response.raise_for_status()
            return RuleStats.model_validate(response.json())

    async def load(self, state: RuleStatsState) -> RuleStatsState:
        """Populate ``state`` from the API, recording failures as ``error``."""
        if state.cancelled:
            return state

        state.loading = True
        state.error = None
        try:
            stats = await self.fetch_stats(state.slug)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to load stats for {state.slug}: {e}")
            if not state.cancelled:
                state.error = LOAD_ERROR_MESSAGE
                state.loading = False
            return state

        if not state.cancelled:
            state.stats = stats
            state.loading = False
        return state


def render_stats(state: RuleStatsState) -> str:
    """One-line counter summary, with placeholders while loading or failed."""
    if state.loading or state.error:
        return (
            f"{PLACEHOLDER} views · {PLACEHOLDER} copies · "
            f"▲{PLACEHOLDER} ▼{PLACEHOLDER}"
        )
    stats = state.stats
    return (
        f"{stats.view_count} views · {stats.copy_count} copies · "
        f"▲{stats.upvotes} ▼{stats.downvotes}"
    )
