#!/usr/bin/env python3
"""
Skill Weights - Rarity-based importance of skills across the population.

An alternative to flat per-skill averaging: rarer skills weigh more, in an
IDF-like fashion. This path is independent of calculate_skill_match and
callers choose one or the other explicitly.
"""

from typing import Dict, List
import logging
import math

from core.models import ContributorProfile, ContributorSkill

logger = logging.getLogger(__name__)

MIN_SKILL_WEIGHT = 1.0
MAX_SKILL_WEIGHT = 3.0
NO_REQUIREMENTS_SCORE = 80.0


def calculate_skill_weights(contributors: List[ContributorProfile]) -> Dict[str, float]:
    """
    Weight = 1 + min(ln(N / frequency), 2), clamped to [1, 3].

    N is the population size, frequency the number of contributors holding
    the skill (a contributor listing a skill twice counts once).
    """
    frequency: Dict[str, int] = {}
    total = len(contributors)

    for contributor in contributors:
        for skill_id in {s.skill_id for s in contributor.skills or []}:
            frequency[skill_id] = frequency.get(skill_id, 0) + 1

    weights = {}
    for skill_id, count in frequency.items():
        idf = math.log(total / count)
        weight = 1 + min(idf, 2)
        weights[skill_id] = max(MIN_SKILL_WEIGHT, min(MAX_SKILL_WEIGHT, weight))

    logger.debug(f"Calculated weights for {len(weights)} skills across {total} contributors")
    return weights


def calculate_weighted_skill_match(
    required_skill_ids: List[str],
    contributor_skills: List[ContributorSkill],
    skill_weights: Dict[str, float]
) -> float:
    """Share of required skill weight the contributor holds, as 0-100.

    Skills without a known weight count as 1.
    """
    if not required_skill_ids:
        return NO_REQUIREMENTS_SCORE

    held = {s.skill_id for s in contributor_skills or []}

    total_weight = 0.0
    matched_weight = 0.0
    for skill_id in required_skill_ids:
        weight = skill_weights.get(skill_id, MIN_SKILL_WEIGHT)
        total_weight += weight
        if skill_id in held:
            matched_weight += weight

    return (matched_weight / total_weight) * 100 if total_weight > 0 else 0.0
