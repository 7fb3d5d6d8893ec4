"""Recency curves and composite scoring weights.

Two decay curves are in use and are deliberately kept separate: the window
selector ranks with an exponential curve, the bootstrap digest with a
linear one.  Both measure age in days against a 30-day horizon.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

RECENCY_HORIZON_DAYS = 30.0

_SECONDS_PER_DAY = 86_400.0

# Largest exponent math.exp accepts without overflowing.
_MAX_EXPONENT = 700.0


def age_seconds(timestamp: datetime, now: datetime | None = None) -> float:
    """Age of *timestamp* in seconds, relative to *now* (default: current UTC time)."""
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return (now - timestamp).total_seconds()


def age_days(timestamp: datetime, now: datetime | None = None) -> float:
    return age_seconds(timestamp, now) / _SECONDS_PER_DAY


def exponential_recency(timestamp: datetime, now: datetime | None = None) -> float:
    """``exp(-age_days / 30)``: 1.0 when fresh, ~0.368 at 30 days old.

    Future timestamps score above 1.0; the exponent is capped so a far-future
    timestamp yields a large finite score instead of overflowing.
    """
    return math.exp(min(-age_days(timestamp, now) / RECENCY_HORIZON_DAYS, _MAX_EXPONENT))


def linear_recency(timestamp: datetime, now: datetime | None = None) -> float:
    """``max(0, 1 - age_days / 30)``: reaches 0.0 at 30 days and stays there."""
    return max(0.0, 1.0 - age_days(timestamp, now) / RECENCY_HORIZON_DAYS)


class ScoringWeights(BaseModel):
    """Weights for blending importance and recency into one composite score."""

    importance_weight: float = Field(default=0.7, ge=0.0, allow_inf_nan=False)
    recency_weight: float = Field(default=0.3, ge=0.0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)
