#!/usr/bin/env python3
"""
Matching Service - Caller-facing operations of the matching engine.

Wires the orchestrator, recommendation service and explainability helpers
behind one object:
- refresh_matches / get_stored_matches
- get_recommendations
- refresh_match_power
- preview_match / analyze_skill_gaps
- get_contributor_stats
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field, replace
from datetime import datetime
import logging

from core.interfaces import MatchingRepository
from core.config_loader import MatchingConfig, RankingOptions
from core.exceptions import ContributorNotFound, MissionNotFound
from core.cache import SkillNameCache
from core.models import ContributorProfile, Mission
from core.scorer.models import MatchResult, SkillMatchResult
from core.scorer.match_power import calculate_match_power
from core.scorer.features import profile_score
from core.ranking.diversity import apply_time_decay
from core.ranking.explainability import (
    SkillGapReport, analyze_skill_gaps, calculate_match_confidence,
    generate_match_explanation, summarize_skill_gaps
)
from core.matcher.service import MatchOrchestrator, TieBreaker
from core.matcher.recommendations import MissionRecommendation, RecommendationService
from core.utils import utc_now

logger = logging.getLogger(__name__)


@dataclass
class MatchPreview:
    score: int
    confidence: str
    confidence_explanation: str
    explanation: List[str]
    breakdown: Dict[str, int]
    skill_details: SkillMatchResult = field(default_factory=SkillMatchResult)


@dataclass
class ContributorStats:
    match_power: float
    trust_score: float
    skill_count: int
    verified_skills: int
    completed_missions: int
    average_rating: float
    completion_rate: float
    profile_completeness: float


class MatchingService:
    """
    Facade over the matching engine.

    Owns one SkillNameCache shared by the orchestrator and the
    recommendation service.
    """

    def __init__(
        self,
        repo: MatchingRepository,
        config: Optional[MatchingConfig] = None,
        tie_breaker: Optional[TieBreaker] = None,
        skill_cache: Optional[SkillNameCache] = None
    ):
        self.repo = repo
        self.config = config or MatchingConfig()
        self.skill_cache = skill_cache or SkillNameCache(
            repo.get_skill_names, ttl_seconds=self.config.skill_cache.ttl_seconds
        )
        self.orchestrator = MatchOrchestrator(
            repo,
            config=self.config,
            skill_cache=self.skill_cache,
            tie_breaker=tie_breaker
        )
        self.recommendations = RecommendationService(
            repo,
            self.skill_cache,
            config=self.config.recommendations,
            scorer=self.orchestrator.scorer
        )

    def refresh_matches(self, mission_id: str, options: Optional[RankingOptions] = None) -> List[MatchResult]:
        return self.orchestrator.match_contributors_to_mission(mission_id, options)

    def get_stored_matches(
        self,
        mission_id: str,
        apply_decay: bool = False,
        now: Optional[datetime] = None
    ) -> List[MatchResult]:
        """Stored matches, highest score first.

        With apply_decay, overall scores are aged by time since matching.
        """
        matches = self.repo.get_stored_matches(mission_id, limit=self.config.persistence.top_n)
        if not apply_decay:
            return matches

        now = now or utc_now()
        return [replace(m, overall_score=apply_time_decay(m, now=now)) for m in matches]

    def get_recommendations(self, contributor_id: str, limit: Optional[int] = None) -> List[MissionRecommendation]:
        return self.recommendations.get_mission_recommendations(contributor_id, limit)

    def refresh_match_power(self, contributor_id: str) -> int:
        """Recompute and store a contributor's match power."""
        contributor = self._require_contributor(contributor_id)
        history = self.orchestrator.get_work_history(contributor)
        now = utc_now()

        score, _ = calculate_match_power(contributor, history, now)
        self.repo.update_match_power(contributor_id, score, now)

        logger.info(f"Refreshed match power for {contributor_id}: {score}")
        return score

    def preview_match(self, mission_id: str, contributor_id: str) -> MatchPreview:
        """Score one pair without persisting, with confidence and explanation."""
        mission = self._require_mission(mission_id)
        contributor = self._require_contributor(contributor_id)

        history = self.orchestrator.get_work_history(contributor)
        match = self.orchestrator.scorer.score(mission, contributor, history, self.skill_cache.get())
        confidence = calculate_match_confidence(match, history)

        return MatchPreview(
            score=match.overall_score,
            confidence=confidence.confidence,
            confidence_explanation=confidence.explanation,
            explanation=generate_match_explanation(match),
            breakdown={
                'skills': match.skill_score,
                'trust': match.trust_score,
                'availability': match.availability_score,
                'budget': match.budget_fit_score,
                'timezone': match.timezone_fit_score,
                'engagement': match.engagement_score,
            },
            skill_details=match.breakdown.skills,
        )

    def analyze_skill_gaps(self, mission_id: str, contributor_id: str) -> SkillGapReport:
        mission = self._require_mission(mission_id)
        contributor = self._require_contributor(contributor_id)

        gaps = analyze_skill_gaps(mission.required_skills, contributor.skills, self.skill_cache.get())
        return summarize_skill_gaps(mission.required_skills, gaps)

    def get_contributor_stats(self, contributor_id: str) -> ContributorStats:
        contributor = self._require_contributor(contributor_id)
        history = self.orchestrator.get_work_history(contributor)
        skills = contributor.skills or []

        return ContributorStats(
            match_power=contributor.match_power or 0,
            trust_score=contributor.trust_score or 0,
            skill_count=len(skills),
            verified_skills=len([s for s in skills if s.verified]),
            completed_missions=history.completed_missions,
            average_rating=history.average_rating,
            completion_rate=history.completion_rate,
            profile_completeness=profile_score(contributor),
        )

    def _require_mission(self, mission_id: str) -> Mission:
        mission = self.repo.get_mission(mission_id)
        if mission is None:
            raise MissionNotFound(mission_id)
        return mission

    def _require_contributor(self, contributor_id: str) -> ContributorProfile:
        contributor = self.repo.get_contributor(contributor_id)
        if contributor is None:
            raise ContributorNotFound(contributor_id)
        return contributor
