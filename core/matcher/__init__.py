"""Matcher Module - Mission staffing and contributor recommendations."""
from core.matcher.batch import BatchDeadlineExceeded, BatchOutcome, evaluate_in_batches
from core.matcher.history import build_work_history
from core.matcher.service import MatchOrchestrator, make_tie_breaker, rank_matches
from core.matcher.recommendations import MissionRecommendation, RecommendationService

__all__ = [
    'MatchOrchestrator', 'RecommendationService', 'MissionRecommendation',
    'make_tie_breaker', 'rank_matches', 'build_work_history',
    'evaluate_in_batches', 'BatchOutcome', 'BatchDeadlineExceeded'
]
