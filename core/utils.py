import math
import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a score into [low, high]."""
    if value != value:  # NaN
        logger.error("Score is NaN, clamping to lower bound")
        return low
    return max(low, min(high, value))


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC.

    SQLite hands back naive datetimes even for timezone-aware columns.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
