"""Ranking Module - Post-scoring adjustments and explanations."""
from core.ranking.diversity import apply_diversity_ranking, apply_time_decay
from core.ranking.explainability import (
    MatchConfidence, SkillGap, SkillGapReport,
    calculate_match_confidence, generate_match_explanation, generate_match_reason,
    analyze_skill_gaps, summarize_skill_gaps
)

__all__ = [
    'apply_diversity_ranking', 'apply_time_decay',
    'MatchConfidence', 'SkillGap', 'SkillGapReport',
    'calculate_match_confidence', 'generate_match_explanation', 'generate_match_reason',
    'analyze_skill_gaps', 'summarize_skill_gaps',
]
