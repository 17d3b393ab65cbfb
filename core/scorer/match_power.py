#!/usr/bin/env python3
"""
Match Power - Composite 0-100 score of a contributor's platform strength.

Five factors, each allocated on a fixed-point scale and capped at 100:
- Profile completeness (20%)
- Skill depth (25%)
- Verification level (20%)
- Historical performance (25%)
- Engagement signals (10%)
"""

from typing import List, Optional, Tuple
from datetime import datetime
import logging

from core.models import ContributorProfile, ContributorSkill, WorkHistory
from core.scorer.models import MatchPowerFactors
from core.scorer.skill_match import SKILL_LEVEL_SCORES
from core.utils import as_utc, clamp_score, round_half_up, utc_now

logger = logging.getLogger(__name__)

MATCH_POWER_WEIGHTS = {
    'profile_completeness': 0.20,
    'skill_depth': 0.25,
    'verification_level': 0.20,
    'historical_performance': 0.25,
    'engagement_signals': 0.10,
}

VERIFICATION_POINTS = {'verified': 50, 'proof_task_submitted': 30, 'pending': 10}
BACKGROUND_CHECK_POINTS = {'passed': 30, 'in_progress': 15}

NEW_CONTRIBUTOR_PERFORMANCE = 30.0


def calculate_profile_completeness(profile: ContributorProfile) -> float:
    score = 0

    # Basic info (30 points)
    if profile.headline and len(profile.headline) > 10:
        score += 10
    if profile.bio and len(profile.bio) > 50:
        score += 15
    score += 5  # avatar lives on the user record

    # Links (25 points)
    if profile.github_url:
        score += 10
    if profile.linkedin_url:
        score += 8
    if profile.portfolio_url:
        score += 7

    # Professional info (25 points)
    if (profile.years_experience or 0) > 0:
        score += 10
    if profile.timezone:
        score += 8
    score += 7  # rate is scored separately

    # Availability (20 points)
    if profile.is_looking_for_work:
        score += 10
    if profile.availability_hours_per_week and profile.availability_hours_per_week > 0:
        score += 10

    return min(score, 100)


def calculate_skill_depth(skills: List[ContributorSkill]) -> float:
    if not skills:
        return 0.0

    score = 0.0

    # Quantity (up to 30)
    score += min(len(skills) * 5, 30)

    # Proficiency (up to 40)
    avg_level = sum(SKILL_LEVEL_SCORES.get(s.proficiency_level, 1) for s in skills) / len(skills)
    score += (avg_level / 4) * 40

    # Verified bonus (up to 20)
    verified_count = len([s for s in skills if s.verified])
    score += min(verified_count * 5, 20)

    # Experience years (up to 10)
    avg_years = sum((s.years_experience or 0) for s in skills) / len(skills)
    score += min(avg_years * 2, 10)

    return min(score, 100.0)


def calculate_verification_level(profile: ContributorProfile) -> float:
    score = VERIFICATION_POINTS.get(profile.verification_status, 0)
    score += BACKGROUND_CHECK_POINTS.get(profile.background_check_status, 0)
    return min(score, 100)


def calculate_historical_performance(history: WorkHistory) -> float:
    if history.completed_missions == 0:
        return NEW_CONTRIBUTOR_PERFORMANCE

    score = 0.0
    score += history.completion_rate * 30
    score += (history.average_rating / 5) * 25
    score += (1 - history.dispute_rate) * 15
    score += history.on_time_rate * 15
    score += min(history.repeat_clients * 2, 10)
    score += min(history.completed_missions / 10, 5)

    return clamp_score(score)


def calculate_engagement(profile: ContributorProfile, now: Optional[datetime] = None) -> float:
    """
    Engagement from profile freshness and job-seeking status.

    Base 50; +30/+20/+10 for an update within 7/14/30 days, -20 when older;
    +20 when actively looking for work. Clamped to [0, 100].
    """
    score = 50

    if profile.updated_at is not None:
        now = as_utc(now or utc_now())
        days_since_update = (now - as_utc(profile.updated_at)).total_seconds() / 86400

        if days_since_update <= 7:
            score += 30
        elif days_since_update <= 14:
            score += 20
        elif days_since_update <= 30:
            score += 10
        else:
            score -= 20

    if profile.is_looking_for_work:
        score += 20

    return clamp_score(score)


def calculate_match_power(
    profile: ContributorProfile,
    history: WorkHistory,
    now: Optional[datetime] = None
) -> Tuple[int, MatchPowerFactors]:
    """
    Calculate match power with its factor breakdown.

    Returns: (score, factors)
    """
    factors = MatchPowerFactors(
        profile_completeness=calculate_profile_completeness(profile),
        skill_depth=calculate_skill_depth(profile.skills or []),
        verification_level=calculate_verification_level(profile),
        historical_performance=calculate_historical_performance(history),
        engagement_signals=calculate_engagement(profile, now),
    )

    score = sum(getattr(factors, key) * weight for key, weight in MATCH_POWER_WEIGHTS.items())
    score = round_half_up(clamp_score(score))

    logger.debug(f"Match power for {profile.id}: {score} ({factors})")
    return score, factors
