#!/usr/bin/env python3
"""
Skill Matching - Per-skill scores and coverage for a mission's required skills.
"""

from typing import Dict, List, Optional

from core.models import ContributorSkill
from core.scorer.models import SkillMatch, SkillMatchResult
from core.utils import round_half_up

SKILL_LEVEL_SCORES = {'beginner': 1, 'intermediate': 2, 'advanced': 3, 'expert': 4}

# A mission with no stated requirements accepts anyone
NO_REQUIREMENTS_SCORE = 80
REQUIRED_MET_COVERAGE = 50


def score_contributor_skill(skill: ContributorSkill) -> int:
    """Score a held skill: 70 + level * 7.5, +5 verified, + up to 10 for years. Capped at 100."""
    level = SKILL_LEVEL_SCORES.get(skill.proficiency_level, 2)

    score = 70 + level * 7.5  # 77.5 to 100
    if skill.verified:
        score = min(100.0, score + 5)
    score = min(100.0, score + min(max(0.0, skill.years_experience or 0) * 2, 10))

    return round_half_up(score)


def calculate_skill_match(
    required_skill_ids: List[str],
    contributor_skills: List[ContributorSkill],
    skill_name_map: Optional[Dict[str, str]] = None
) -> SkillMatchResult:
    """
    Match a contributor's skills against a mission's required skill ids.

    Coverage is matched / required * 100, rounded. The overall score is the
    mean of per-skill scores, where missing skills score 0.
    """
    if not required_skill_ids:
        return SkillMatchResult(
            score=NO_REQUIREMENTS_SCORE,
            coverage=100,
            matched_count=0,
            required_met=True,
            breakdown=[]
        )

    skill_name_map = skill_name_map or {}
    held = {s.skill_id: s for s in contributor_skills or []}

    breakdown = []
    matched_count = 0

    for skill_id in required_skill_ids:
        skill_name = skill_name_map.get(skill_id) or skill_id
        match = held.get(skill_id)

        if match is not None:
            matched_count += 1
            level = SKILL_LEVEL_SCORES.get(match.proficiency_level, 2)
            breakdown.append(SkillMatch(
                skill_id=skill_id,
                skill_name=skill_name,
                contributor_level=match.proficiency_level,
                match_score=score_contributor_skill(match),
                is_exact=True,
                is_upgrade=level > 2,
                verified=bool(match.verified),
            ))
        else:
            breakdown.append(SkillMatch(
                skill_id=skill_id,
                skill_name=skill_name,
                contributor_level=None,
                match_score=0,
            ))

    coverage = round_half_up(matched_count / len(required_skill_ids) * 100)
    avg_score = sum(b.match_score for b in breakdown) / len(breakdown)

    return SkillMatchResult(
        score=round_half_up(avg_score),
        coverage=coverage,
        matched_count=matched_count,
        required_met=coverage >= REQUIRED_MET_COVERAGE,
        breakdown=breakdown
    )
