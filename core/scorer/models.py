#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field, asdict
from datetime import datetime


@dataclass
class MatchPowerFactors:
    profile_completeness: float = 0.0
    skill_depth: float = 0.0
    verification_level: float = 0.0
    historical_performance: float = 0.0
    engagement_signals: float = 0.0


@dataclass
class TrustSignals:
    completion_rate: float = 0.0  # 0-1
    average_rating: float = 0.0  # 0-5 stars
    dispute_rate: float = 0.0  # 0-1
    response_time: float = 0.0  # average hours to respond
    on_time_delivery: float = 0.0  # 0-1
    repeat_clients: int = 0


@dataclass
class SkillMatch:
    """Per-required-skill match detail."""
    skill_id: str
    skill_name: str
    required_level: str = "intermediate"
    contributor_level: Optional[str] = None
    match_score: int = 0
    is_exact: bool = False
    is_upgrade: bool = False
    verified: bool = False


@dataclass
class SkillMatchResult:
    score: int = 0
    coverage: int = 0
    matched_count: int = 0
    required_met: bool = False
    breakdown: List[SkillMatch] = field(default_factory=list)


@dataclass
class MatchBreakdown:
    skills: SkillMatchResult = field(default_factory=SkillMatchResult)
    trust: int = 0
    availability: int = 0
    budget_fit: int = 0
    timezone_fit: int = 0
    engagement: int = 0


@dataclass
class MatchResult:
    """Complete scored match between one contributor and one mission."""
    contributor_id: str
    mission_id: str

    overall_score: int = 0
    skill_score: int = 0
    trust_score: int = 0
    availability_score: int = 0
    budget_fit_score: int = 0
    timezone_fit_score: int = 0
    engagement_score: int = 0

    breakdown: MatchBreakdown = field(default_factory=MatchBreakdown)
    rank: int = 0
    matched_at: Optional[datetime] = None
    contributor_name: Optional[str] = None

    @property
    def skill_coverage(self) -> int:
        return self.breakdown.skills.coverage

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['matched_at'] = self.matched_at.isoformat() if self.matched_at else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MatchResult':
        breakdown_data = dict(data.get('breakdown') or {})
        skills_data = dict(breakdown_data.pop('skills', None) or {})
        skill_rows = [SkillMatch(**row) for row in skills_data.pop('breakdown', [])]
        breakdown = MatchBreakdown(
            skills=SkillMatchResult(breakdown=skill_rows, **skills_data),
            **breakdown_data
        )
        matched_at = data.get('matched_at')
        if isinstance(matched_at, str):
            matched_at = datetime.fromisoformat(matched_at)
        fields = {k: v for k, v in data.items() if k not in ('breakdown', 'matched_at')}
        return cls(breakdown=breakdown, matched_at=matched_at, **fields)
