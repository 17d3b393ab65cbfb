#!/usr/bin/env python3
"""
Work History - Derive a contributor's track record from raw records.

WorkHistory is never stored. It is recomputed on every evaluation from
completed payments, disputes, reviews and response times.
"""

from typing import Optional
import logging

from core.models import ContributorProfile, HistoryRecords, WorkHistory

logger = logging.getLogger(__name__)

# Fallbacks when no per-contributor data exists yet
DEFAULT_COMPLETION_RATE = 0.9
DEFAULT_RESPONSE_HOURS = 12.0
DEFAULT_ON_TIME_RATE = 0.85


def build_work_history(
    records: HistoryRecords,
    profile: Optional[ContributorProfile] = None
) -> WorkHistory:
    """
    Aggregate history records into a WorkHistory.

    - completion_rate: cached profile value, else 0.9 once anything was completed
    - dispute_rate: disputes / (completed + disputes), 0 with no completions
    - repeat_clients: initiators who paid for more than one completed mission
    - on_time_rate / avg_response_time: measured when available, else defaults
    """
    payments = records.completed_payments or []
    completed = len(payments)
    disputes = max(0, records.dispute_count or 0)

    ratings = [r for r in records.ratings or [] if r is not None]
    average_rating = sum(ratings) / len(ratings) if ratings else 0.0

    initiator_counts = {}
    for payment in payments:
        if payment.initiator_id:
            initiator_counts[payment.initiator_id] = initiator_counts.get(payment.initiator_id, 0) + 1
    repeat_clients = len([c for c in initiator_counts.values() if c > 1])

    completion_rate = profile.completion_rate if profile and profile.completion_rate else None
    if completion_rate is None:
        completion_rate = DEFAULT_COMPLETION_RATE if completed > 0 else 0.0

    dispute_rate = disputes / (completed + disputes) if completed > 0 else 0.0

    on_time_flags = [p.on_time for p in payments if p.on_time is not None]
    on_time_rate = (
        len([f for f in on_time_flags if f]) / len(on_time_flags)
        if on_time_flags else DEFAULT_ON_TIME_RATE
    )

    response_hours = [h for h in records.response_hours or [] if h is not None and h >= 0]
    avg_response_time = (
        sum(response_hours) / len(response_hours)
        if response_hours else DEFAULT_RESPONSE_HOURS
    )

    completed_times = [p.completed_at for p in payments if p.completed_at is not None]

    total_earnings = profile.total_earnings if profile and profile.total_earnings else 0.0

    return WorkHistory(
        completed_missions=completed,
        completion_rate=completion_rate,
        average_rating=average_rating,
        dispute_rate=dispute_rate,
        avg_response_time=avg_response_time,
        on_time_rate=on_time_rate,
        repeat_clients=repeat_clients,
        total_earnings=total_earnings,
        last_completed_at=max(completed_times) if completed_times else None,
    )
