#!/usr/bin/env python3
"""
Trust Score - Weighted normalization of six reliability signals.
"""

from core.models import WorkHistory
from core.scorer.models import TrustSignals
from core.utils import clamp_score, round_half_up

TRUST_WEIGHTS = {
    'completion_rate': 0.25,
    'average_rating': 0.25,
    'dispute_rate': 0.15,
    'response_time': 0.10,
    'on_time_delivery': 0.15,
    'repeat_clients': 0.10,
}


def signals_from_history(history: WorkHistory) -> TrustSignals:
    return TrustSignals(
        completion_rate=history.completion_rate,
        average_rating=history.average_rating,
        dispute_rate=history.dispute_rate,
        response_time=history.avg_response_time,
        on_time_delivery=history.on_time_rate,
        repeat_clients=history.repeat_clients,
    )


def calculate_trust_score(signals: TrustSignals) -> int:
    """
    Calculate trust score (0-100).

    Each signal is normalized to 0-100 before weighting:
    - completion_rate * 100
    - (average_rating / 5) * 100
    - (1 - dispute_rate) * 100
    - max(0, 100 - 2 * response_hours)
    - on_time_delivery * 100
    - min(repeat_clients * 10, 100)
    """
    normalized = {
        'completion_rate': _unit(signals.completion_rate) * 100,
        'average_rating': _unit(signals.average_rating / 5) * 100,
        'dispute_rate': (1 - _unit(signals.dispute_rate)) * 100,
        'response_time': max(0.0, 100 - (max(0.0, signals.response_time) * 2)),
        'on_time_delivery': _unit(signals.on_time_delivery) * 100,
        'repeat_clients': min(max(0, signals.repeat_clients) * 10, 100),
    }

    score = sum(normalized[key] * weight for key, weight in TRUST_WEIGHTS.items())
    return round_half_up(clamp_score(score))


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value or 0.0))
