#!/usr/bin/env python3
"""
Match Scorer - Combines sub-scores into a MatchResult.

Pure computation: takes a mission, a contributor, the contributor's work
history and the skill-name catalog, and returns the full breakdown:
- Skill match (coverage + per-skill scores)
- Trust score
- Availability, budget fit, timezone fit
- Engagement
- Overall score: weighted sum, rounded

Designed to be independent of storage and can run in any worker thread.
"""

from typing import Dict, Optional
from datetime import datetime
import logging

from core.config_loader import ScorerConfig
from core.models import ContributorProfile, Mission, WorkHistory
from core.scorer.models import MatchBreakdown, MatchResult
from core.scorer.skill_match import calculate_skill_match
from core.scorer.trust import calculate_trust_score, signals_from_history
from core.scorer.fit import calculate_availability, calculate_budget_fit, calculate_timezone_fit
from core.scorer.match_power import calculate_engagement
from core.utils import clamp_score, round_half_up, utc_now

logger = logging.getLogger(__name__)


class MatchScorer:
    """
    Scores one contributor against one mission.

    Weights come from ScorerConfig so they can be tuned without code changes.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score(
        self,
        mission: Mission,
        contributor: ContributorProfile,
        history: WorkHistory,
        skill_names: Optional[Dict[str, str]] = None,
        now: Optional[datetime] = None
    ) -> MatchResult:
        """Calculate the full match result for a contributor/mission pair.

        Args:
            mission: Mission being staffed
            contributor: Candidate contributor
            history: Aggregated work history for the contributor
            skill_names: Skill id -> name catalog
            now: Evaluation time (defaults to current UTC time)

        Returns:
            MatchResult with rank 0 (ranks are assigned by the orchestrator)
        """
        now = now or utc_now()

        skill_result = calculate_skill_match(
            mission.required_skills or [],
            contributor.skills or [],
            skill_names or {}
        )

        trust = calculate_trust_score(signals_from_history(history))

        availability = calculate_availability(contributor, mission.estimated_duration_days)

        budget_min = mission.budget_min or 0
        budget_max = mission.budget_max or mission.budget_min or self.config.default_budget_max
        contributor_power = contributor.match_power or self.config.default_match_power
        budget_fit = calculate_budget_fit(budget_min, budget_max, contributor_power)

        timezone_fit = calculate_timezone_fit(mission.preferred_timezone, contributor.timezone)

        engagement = round_half_up(calculate_engagement(contributor, now))

        weights = self.config.weights
        overall = (
            skill_result.score * weights.skill +
            trust * weights.trust +
            availability * weights.availability +
            budget_fit * weights.budget +
            timezone_fit * weights.timezone +
            engagement * weights.engagement
        )
        overall_score = round_half_up(clamp_score(overall))

        logger.debug(
            f"Mission {mission.id} / contributor {contributor.id}: overall={overall_score} "
            f"skills={skill_result.score} trust={trust} availability={availability} "
            f"budget={budget_fit} timezone={timezone_fit} engagement={engagement}"
        )

        return MatchResult(
            contributor_id=contributor.id,
            mission_id=mission.id,
            overall_score=overall_score,
            skill_score=skill_result.score,
            trust_score=trust,
            availability_score=availability,
            budget_fit_score=budget_fit,
            timezone_fit_score=timezone_fit,
            engagement_score=engagement,
            breakdown=MatchBreakdown(
                skills=skill_result,
                trust=trust,
                availability=availability,
                budget_fit=budget_fit,
                timezone_fit=timezone_fit,
                engagement=engagement,
            ),
            rank=0,
            matched_at=now,
            contributor_name=contributor.headline,
        )
