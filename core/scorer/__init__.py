#!/usr/bin/env python3
"""
Scoring Module - Multi-factor contributor/mission scoring.

Public API:
- MatchScorer: Combines sub-scores into a weighted overall score
- MatchResult: Dataclass for scored match results

Sub-modules:
- skill_match.py: Required-skill coverage and per-skill scores
- trust.py: Trust score from work-history signals
- fit.py: Availability, budget and timezone fit
- match_power.py: Contributor-level match power and engagement
- skill_weights.py: Rarity-weighted skill matching
- features.py: Numeric feature vectors for offline models
"""

from core.scorer.models import MatchResult, MatchBreakdown, SkillMatch, SkillMatchResult
from core.scorer.service import MatchScorer

__all__ = ['MatchScorer', 'MatchResult', 'MatchBreakdown', 'SkillMatch', 'SkillMatchResult']
