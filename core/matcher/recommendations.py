#!/usr/bin/env python3
"""
Recommendation Service - Best-fit open missions for a contributor.

The inverse of the orchestrator: one contributor against a bounded sample
of open missions.
"""

from typing import List, Optional
from dataclasses import dataclass, field
import logging

from core.interfaces import MatchingRepository
from core.config_loader import RecommendationConfig, ScorerConfig
from core.exceptions import ContributorNotFound
from core.cache import SkillNameCache
from core.scorer.service import MatchScorer
from core.ranking.explainability import generate_match_reason
from core.matcher.history import build_work_history
from core.utils import utc_now

logger = logging.getLogger(__name__)


@dataclass
class MissionRecommendation:
    mission_id: str
    mission_title: str
    budget_min: float
    budget_max: float
    match_score: int
    skill_match: int
    budget_match: int
    reason: str = ""
    matched_skills: List[str] = field(default_factory=list)


class RecommendationService:
    """Ranks open missions for a contributor."""

    def __init__(
        self,
        repo: MatchingRepository,
        skill_cache: SkillNameCache,
        config: Optional[RecommendationConfig] = None,
        scorer: Optional[MatchScorer] = None,
        scorer_config: Optional[ScorerConfig] = None
    ):
        self.repo = repo
        self.skill_cache = skill_cache
        self.config = config or RecommendationConfig()
        self.scorer = scorer or MatchScorer(scorer_config)

    def get_mission_recommendations(
        self,
        contributor_id: str,
        limit: Optional[int] = None
    ) -> List[MissionRecommendation]:
        """
        Score a sample of open missions and return the best fits.

        Missions scoring below config.min_score are dropped. A mission that
        fails to score is logged and skipped.

        Raises:
            ContributorNotFound: contributor does not exist
        """
        if limit is None:
            limit = self.config.default_limit

        contributor = self.repo.get_contributor(contributor_id)
        if contributor is None:
            raise ContributorNotFound(contributor_id)

        missions = self.repo.list_open_missions(self.config.open_statuses, self.config.sample_size)
        history = build_work_history(self.repo.get_history_records(contributor.id), contributor)
        skill_names = self.skill_cache.get()
        now = utc_now()

        recommendations = []
        for mission in missions:
            try:
                match = self.scorer.score(mission, contributor, history, skill_names, now)
            except Exception as e:
                logger.warning(f"Skipping mission {mission.id} for contributor {contributor_id}: {e}")
                continue

            if match.overall_score < self.config.min_score:
                continue

            budget_min = mission.budget_min or 0
            recommendations.append(MissionRecommendation(
                mission_id=mission.id,
                mission_title=mission.title,
                budget_min=budget_min,
                budget_max=mission.budget_max or mission.budget_min or self.scorer.config.default_budget_max,
                match_score=match.overall_score,
                skill_match=match.skill_score,
                budget_match=match.budget_fit_score,
                reason=generate_match_reason(match),
                matched_skills=[s.skill_name for s in match.breakdown.skills.breakdown if s.is_exact],
            ))

        recommendations.sort(key=lambda r: (-r.match_score, r.mission_id))

        logger.info(
            f"Contributor {contributor_id}: {len(recommendations)} of {len(missions)} missions "
            f"above {self.config.min_score}, returning top {limit}"
        )
        return recommendations[:limit]
