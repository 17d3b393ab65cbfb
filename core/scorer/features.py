#!/usr/bin/env python3
"""
Feature Vectors - Bounded [0, 1] features for downstream ranking models.

Every raw signal is normalized so the vector can be fed to a model without
further scaling. Field order is stable and exposed as FEATURE_NAMES.
"""

from typing import List
from dataclasses import dataclass, fields, astuple
import logging

import numpy as np

from core.models import ContributorProfile, Mission, WorkHistory
from core.scorer.models import MatchResult

logger = logging.getLogger(__name__)

COMPLEXITY_LEVELS = {
    'easy': 0.25,
    'medium': 0.5,
    'hard': 0.75,
    'expert': 1.0,
}


@dataclass
class FeatureVector:
    # Contributor features
    f_match_power: float = 0.0
    f_trust_score: float = 0.0
    f_years_experience: float = 0.0
    f_completed_missions: float = 0.0
    f_avg_rating: float = 0.0
    f_skill_count: float = 0.0
    f_verified_skill_count: float = 0.0
    f_profile_completeness: float = 0.0
    f_is_looking_for_work: float = 0.0
    f_available_hours: float = 0.0

    # Mission features
    f_budget_level: float = 0.0
    f_complexity: float = 0.0
    f_required_skill_count: float = 0.0
    f_duration_days: float = 0.0
    f_is_featured: float = 0.0

    # Interaction features
    f_skill_coverage: float = 0.0
    f_skill_match_quality: float = 0.0
    f_timezone_overlap: float = 0.0

    # Historical interaction, not tracked yet
    f_previous_applications: float = 0.0
    f_previous_hires: float = 0.0

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)


FEATURE_NAMES: List[str] = [f.name for f in fields(FeatureVector)]


def _unit(value) -> float:
    return float(max(0.0, min(1.0, value or 0.0)))


def normalize_budget(budget: float) -> float:
    if budget >= 10000:
        return 1.0
    if budget >= 5000:
        return 0.8
    if budget >= 2000:
        return 0.6
    if budget >= 500:
        return 0.4
    return 0.2


def complexity_to_number(complexity: str) -> float:
    return COMPLEXITY_LEVELS.get(complexity, 0.5)


def profile_score(profile: ContributorProfile) -> float:
    """Lightweight completeness score used for features and contributor stats."""
    score = 0
    if profile.headline:
        score += 15
    if profile.bio and len(profile.bio) > 50:
        score += 20
    if profile.github_url:
        score += 15
    if profile.linkedin_url:
        score += 15
    if profile.portfolio_url:
        score += 15
    if profile.timezone:
        score += 10
    if profile.skills and len(profile.skills) >= 3:
        score += 10
    return min(score, 100)


def build_feature_vector(
    contributor: ContributorProfile,
    mission: Mission,
    history: WorkHistory,
    match: MatchResult
) -> FeatureVector:
    skills = contributor.skills or []
    verified_skills = [s for s in skills if s.verified]

    return FeatureVector(
        f_match_power=_unit((contributor.match_power or 0) / 100),
        f_trust_score=_unit((contributor.trust_score or 0) / 100),
        f_years_experience=_unit((contributor.years_experience or 0) / 20),
        f_completed_missions=_unit(history.completed_missions / 50),
        f_avg_rating=_unit(history.average_rating / 5),
        f_skill_count=_unit(len(skills) / 10),
        f_verified_skill_count=_unit(len(verified_skills) / 5),
        f_profile_completeness=_unit(profile_score(contributor) / 100),
        f_is_looking_for_work=1.0 if contributor.is_looking_for_work else 0.0,
        f_available_hours=_unit((contributor.availability_hours_per_week or 0) / 40),

        f_budget_level=normalize_budget(mission.budget_max or 0),
        f_complexity=complexity_to_number(mission.complexity),
        f_required_skill_count=_unit(len(mission.required_skills or []) / 10),
        f_duration_days=_unit((mission.estimated_duration_days or 0) / 90),
        f_is_featured=1.0 if mission.featured else 0.0,

        f_skill_coverage=_unit(match.breakdown.skills.coverage / 100),
        f_skill_match_quality=_unit(match.skill_score / 100),
        f_timezone_overlap=_unit(match.timezone_fit_score / 100),
    )
