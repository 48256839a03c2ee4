"""Rate limit categories of the Artifacts API.

Every endpoint belongs to exactly one category. The registry is reference data
for whoever throttles requests; nothing here counts or enforces anything.

Source: https://docs.artifactsmmo.com/api_guide/rate_limits
"""

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class RateLimitBy(str, Enum):
    IP = "ip"


class TimeUnit(str, Enum):
    SECONDS = "seconds"
    HOURS = "hours"


_UNIT_SECONDS = {TimeUnit.SECONDS: 1, TimeUnit.HOURS: 3600}


class Threshold(BaseModel):
    """At most ``count`` requests per one ``per`` unit of time."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=1)
    per: TimeUnit

    @property
    def window_seconds(self) -> int:
        return _UNIT_SECONDS[self.per]

    def __str__(self) -> str:
        return f"{self.count}/{self.per.value.rstrip('s')}"


class RateLimit(BaseModel):
    """A named rate limit category."""

    model_config = ConfigDict(frozen=True)

    id: str
    by: RateLimitBy
    thresholds: tuple[Threshold, ...] = Field(min_length=1)


ACCOUNT_CREATION_RATE_LIMIT = RateLimit(
    id="ACCOUNT_CREATION",
    by=RateLimitBy.IP,
    thresholds=(Threshold(count=50, per=TimeUnit.HOURS),),
)
TOKEN_RATE_LIMIT = RateLimit(
    id="TOKEN",
    by=RateLimitBy.IP,
    thresholds=(Threshold(count=50, per=TimeUnit.HOURS),),
)
DATA_RATE_LIMIT = RateLimit(
    id="DATA",
    by=RateLimitBy.IP,
    thresholds=(
        Threshold(count=20, per=TimeUnit.SECONDS),
        Threshold(count=7200, per=TimeUnit.HOURS),
    ),
)
ACTIONS_RATE_LIMIT = RateLimit(
    id="ACTIONS",
    by=RateLimitBy.IP,
    thresholds=(
        Threshold(count=5, per=TimeUnit.SECONDS),
        Threshold(count=7200, per=TimeUnit.HOURS),
    ),
)

RATE_LIMITS = MappingProxyType({
    limit.id: limit
    for limit in (
        ACCOUNT_CREATION_RATE_LIMIT,
        TOKEN_RATE_LIMIT,
        DATA_RATE_LIMIT,
        ACTIONS_RATE_LIMIT,
    )
})


def get_rate_limit(limit_id: str) -> RateLimit:
    """Look up a category by id. Raises KeyError for unknown ids."""
    return RATE_LIMITS[limit_id]
