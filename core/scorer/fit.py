#!/usr/bin/env python3
"""
Fit Scores - Availability, budget fit and timezone fit.

All functions are total: unset fields fall back to defaults.
"""

from typing import Optional
import logging
import math
import re

from core.models import ContributorProfile
from core.utils import clamp_score, round_half_up

logger = logging.getLogger(__name__)

NOT_LOOKING_AVAILABILITY = 25
DEFAULT_HOURS_PER_WEEK = 20
MAX_REQUIRED_HOURS_PER_WEEK = 40

# Static abbreviation -> UTC offset (hours) table
TIMEZONE_OFFSETS = {
    'PST': -8, 'PDT': -7, 'MST': -7, 'MDT': -6, 'CST': -6, 'CDT': -5, 'EST': -5, 'EDT': -4,
    'GMT': 0, 'UTC': 0, 'BST': 1, 'CET': 1, 'CEST': 2, 'EET': 2, 'EEST': 3,
    'IST': 5.5, 'SGT': 8, 'CSTCHINA': 8, 'JST': 9, 'KST': 9, 'AEST': 10, 'AEDT': 11, 'NZST': 12,
}

TIMEZONE_UNSET_SCORE = 70


def required_hours_per_week(estimated_duration_days: Optional[float]) -> int:
    """Rough weekly hours a mission needs, derived from its duration."""
    if not estimated_duration_days:
        return DEFAULT_HOURS_PER_WEEK
    return min(MAX_REQUIRED_HOURS_PER_WEEK, math.ceil(estimated_duration_days * 5 / 7))


def calculate_availability(
    contributor: ContributorProfile,
    estimated_duration_days: Optional[float] = None
) -> int:
    """
    Availability score.

    Not looking for work is a hard floor of 25. Otherwise 40 base, up to 40
    for available hours vs. the mission's weekly need, and 20 when a timezone
    is set.
    """
    if not contributor.is_looking_for_work:
        return NOT_LOOKING_AVAILABILITY

    score = 40

    contributor_hours = contributor.availability_hours_per_week or DEFAULT_HOURS_PER_WEEK
    required_hours = max(1, required_hours_per_week(estimated_duration_days))

    if contributor_hours >= required_hours:
        score += 40
    else:
        score += round_half_up(max(0.0, contributor_hours) / required_hours * 40)

    if contributor.timezone:
        score += 20

    return int(clamp_score(score))


def calculate_budget_fit(
    budget_min: float,
    budget_max: float,
    contributor_score: float
) -> int:
    """
    Budget fit, tiered by budget midpoint.

    Contributor score (match power) stands in for rate expectation:
    - midpoint >= 5000: 50 + score * 0.5, capped at 100
    - 1000 <= midpoint < 5000: 75
    - midpoint < 1000: 70
    """
    mid_budget = ((budget_min or 0) + (budget_max or 0)) / 2

    if mid_budget >= 5000:
        return round_half_up(clamp_score(50 + (contributor_score or 0) * 0.5))
    elif mid_budget >= 1000:
        return 75
    return 70


def normalize_timezone(tz: str) -> str:
    return re.sub(r'[^A-Z]', '', tz.upper())


def timezone_hours_diff(tz1: str, tz2: str) -> float:
    """Absolute hour offset between two timezone abbreviations. Unknown ones count as UTC."""
    o1 = TIMEZONE_OFFSETS.get(normalize_timezone(tz1), 0)
    o2 = TIMEZONE_OFFSETS.get(normalize_timezone(tz2), 0)
    return abs(o1 - o2)


def calculate_timezone_fit(
    mission_timezone: Optional[str] = None,
    contributor_timezone: Optional[str] = None
) -> int:
    if not mission_timezone or not contributor_timezone:
        return TIMEZONE_UNSET_SCORE

    hours_diff = timezone_hours_diff(mission_timezone, contributor_timezone)

    if hours_diff <= 2:
        return 100
    if hours_diff <= 4:
        return 85
    if hours_diff <= 6:
        return 70
    if hours_diff <= 9:
        return 50
    return 30
