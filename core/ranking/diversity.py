#!/usr/bin/env python3
"""
Diversity and Decay - Post-scoring adjustments to ranked matches.

- Diversity ranking: recent-hire penalty, cold-start boost for low-trust
  contributors, and a cap on entries per timezone bucket.
- Time decay: exponential decay of stored scores with a 72 hour half-life.
"""

from typing import Iterable, List, Optional
from dataclasses import replace
from datetime import datetime
import logging
import math

from core.config_loader import DiversityConfig
from core.scorer.models import MatchResult
from core.utils import as_utc, round_half_up, utc_now

logger = logging.getLogger(__name__)

RECENT_HIRE_PENALTY = 10
NEW_CONTRIBUTOR_BOOST = 5
NEW_CONTRIBUTOR_TRUST_THRESHOLD = 40

DECAY_HALF_LIFE_HOURS = 72.0


def timezone_bucket(match: MatchResult) -> str:
    """Bucket key for diversity capping.

    Keyed on the timezone-fit score, not the contributor's timezone, so
    candidates with equal fit share a bucket.
    """
    if match.breakdown is None:
        return 'unknown'
    return str(match.breakdown.timezone_fit)


def apply_diversity_ranking(
    matches: List[MatchResult],
    recent_hires: Iterable[str],
    config: Optional[DiversityConfig] = None
) -> List[MatchResult]:
    """
    Re-rank matches for diversity.

    Adjusts scores, re-sorts, then streams through the sorted list keeping at
    most max_from_same_timezone entries per bucket. Excess lower-ranked
    entries are dropped, not redistributed. The input list is left untouched.

    Args:
        matches: Scored matches
        recent_hires: Contributor ids recently hired by the same initiator
        config: DiversityConfig (defaults: 5 per bucket, boost and penalty on)

    Returns:
        New list of adjusted MatchResult copies
    """
    config = config or DiversityConfig()
    recent_hires = set(recent_hires or ())

    adjusted = []
    for match in matches:
        score = match.overall_score

        if config.penalize_recent_hires and match.contributor_id in recent_hires:
            score = max(0, score - RECENT_HIRE_PENALTY)

        if config.boost_new_contributors and match.trust_score < NEW_CONTRIBUTOR_TRUST_THRESHOLD:
            score = min(100, score + NEW_CONTRIBUTOR_BOOST)

        adjusted.append(replace(match, overall_score=score))

    adjusted.sort(key=lambda m: m.overall_score, reverse=True)

    bucket_counts = {}
    diverse = []
    for match in adjusted:
        bucket = timezone_bucket(match)
        count = bucket_counts.get(bucket, 0)
        if count < config.max_from_same_timezone:
            diverse.append(match)
            bucket_counts[bucket] = count + 1

    dropped = len(adjusted) - len(diverse)
    if dropped:
        logger.info(f"Diversity cap dropped {dropped} of {len(adjusted)} matches")

    return diverse


def decay_factor(hours_elapsed: float) -> float:
    decay_rate = math.log(2) / DECAY_HALF_LIFE_HOURS
    return math.exp(-decay_rate * max(0.0, hours_elapsed))


def apply_time_decay(
    match: MatchResult,
    matched_at: Optional[datetime] = None,
    now: Optional[datetime] = None
) -> int:
    """
    Decayed overall score: score * e^(-ln2/72 * hours_elapsed), rounded.

    matched_at defaults to the match's own timestamp. A match from the
    future is not decayed.
    """
    matched_at = matched_at or match.matched_at
    if matched_at is None:
        return match.overall_score

    now = as_utc(now or utc_now())
    hours_elapsed = (now - as_utc(matched_at)).total_seconds() / 3600

    return round_half_up(match.overall_score * decay_factor(hours_elapsed))
