#!/usr/bin/env python3
"""
Explainability Module - Confidence labels, rationale strings and skill gaps.

Rule-based: every label comes from fixed score bands, so the same
MatchResult always explains the same way.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
import logging

from core.models import ContributorSkill, WorkHistory
from core.scorer.models import MatchResult

logger = logging.getLogger(__name__)

SEVERITY_CRITICAL = 'critical'
SEVERITY_IMPORTANT = 'important'
SEVERITY_NICE_TO_HAVE = 'nice_to_have'

GAP_MISSING = 'missing'
GAP_UNDERQUALIFIED = 'underqualified'
GAP_NEEDS_VERIFICATION = 'needs_verification'


@dataclass
class MatchConfidence:
    score: int
    confidence: str  # high|medium|low
    explanation: str


@dataclass
class SkillGap:
    skill_id: str
    skill_name: str
    gap: str
    severity: str


@dataclass
class SkillGapReport:
    gaps: List[SkillGap]
    total_required: int
    gap_count: int
    critical_gaps: int
    recommendation: str


def calculate_match_confidence(match: MatchResult, history: WorkHistory) -> MatchConfidence:
    """
    Label how much to trust a match score.

    - high: coverage >= 80 and has history and trust >= 60
    - medium: coverage >= 50 or trust >= 40
    - low: otherwise
    """
    factors = []
    coverage = match.breakdown.skills.coverage
    has_history = history.completed_missions > 0
    trust = match.trust_score

    if coverage >= 80 and has_history and trust >= 60:
        confidence = 'high'
        factors.append('Strong skill match')
        factors.append('Proven track record')
    elif coverage >= 50 or trust >= 40:
        confidence = 'medium'
        if coverage >= 50:
            factors.append('Partial skill match')
        if not has_history:
            factors.append('New contributor')
    else:
        confidence = 'low'
        factors.append('Limited profile data')
        if coverage < 50:
            factors.append('Some skills missing')

    return MatchConfidence(
        score=match.overall_score,
        confidence=confidence,
        explanation=', '.join(factors)
    )


def generate_match_explanation(match: MatchResult) -> List[str]:
    """Ordered labels for skills, trust, availability, budget and timezone."""
    reasons = []
    breakdown = match.breakdown
    coverage = breakdown.skills.coverage

    if coverage == 100:
        reasons.append('All required skills covered')
    elif coverage >= 70:
        reasons.append(f'{coverage}% skill coverage')
    elif coverage >= 50:
        reasons.append(f'Only {coverage}% skill coverage')
    else:
        reasons.append(f'Low skill coverage ({coverage}%)')

    if breakdown.trust >= 80:
        reasons.append('Highly rated contributor')
    elif breakdown.trust >= 60:
        reasons.append('Good track record')
    elif breakdown.trust < 40:
        reasons.append('New or limited history')

    if breakdown.availability >= 80:
        reasons.append('Immediately available')
    elif breakdown.availability < 50:
        reasons.append('Limited availability')

    if breakdown.budget_fit >= 80:
        reasons.append('Great budget fit')
    elif breakdown.budget_fit < 50:
        reasons.append('May be outside budget expectations')

    if breakdown.timezone_fit >= 80:
        reasons.append('Same or close timezone')
    elif breakdown.timezone_fit < 50:
        reasons.append('Timezone difference may affect collaboration')

    return reasons


def generate_match_reason(match: MatchResult) -> str:
    """Short reason shown next to a mission recommendation."""
    reasons = []
    if match.skill_score >= 80:
        reasons.append('Great skill match')
    elif match.skill_score >= 60:
        reasons.append('Good skill match')
    if match.budget_fit_score >= 80:
        reasons.append('fits your profile')
    if match.breakdown.skills.coverage == 100:
        reasons.append('all skills covered')
    return ', '.join(reasons) if reasons else 'Potential match'


def gap_severity(position: int) -> str:
    # Position in the required list is the only priority signal missions carry
    if position == 0:
        return SEVERITY_CRITICAL
    if position < 3:
        return SEVERITY_IMPORTANT
    return SEVERITY_NICE_TO_HAVE


def analyze_skill_gaps(
    required_skill_ids: List[str],
    contributor_skills: List[ContributorSkill],
    skill_name_map: Optional[Dict[str, str]] = None
) -> List[SkillGap]:
    skill_name_map = skill_name_map or {}
    held = {s.skill_id: s for s in contributor_skills or []}
    gaps = []

    for position, skill_id in enumerate(required_skill_ids or []):
        skill = held.get(skill_id)
        skill_name = skill_name_map.get(skill_id) or skill_id
        severity = gap_severity(position)

        if skill is None:
            gap = GAP_MISSING
        elif skill.proficiency_level == 'beginner':
            gap = GAP_UNDERQUALIFIED
        elif not skill.verified and severity == SEVERITY_CRITICAL:
            gap = GAP_NEEDS_VERIFICATION
        else:
            continue

        gaps.append(SkillGap(skill_id=skill_id, skill_name=skill_name, gap=gap, severity=severity))

    return gaps


def summarize_skill_gaps(required_skill_ids: List[str], gaps: List[SkillGap]) -> SkillGapReport:
    if gaps:
        recommendation = 'Consider improving: ' + ', '.join(g.skill_name for g in gaps[:3])
    else:
        recommendation = 'You have all required skills!'

    return SkillGapReport(
        gaps=gaps,
        total_required=len(required_skill_ids or []),
        gap_count=len(gaps),
        critical_gaps=len([g for g in gaps if g.severity == SEVERITY_CRITICAL]),
        recommendation=recommendation
    )
