#!/usr/bin/env python3
"""
Unit tests for work-history aggregation.
"""

import unittest
from datetime import datetime, timezone

from core.models import CompletedPayment, ContributorProfile, HistoryRecords
from core.matcher.history import build_work_history


class TestWorkHistory(unittest.TestCase):

    def test_empty_history(self):
        history = build_work_history(HistoryRecords())
        self.assertEqual(history.completed_missions, 0)
        self.assertEqual(history.completion_rate, 0.0)
        self.assertEqual(history.dispute_rate, 0.0)
        self.assertEqual(history.average_rating, 0.0)
        self.assertEqual(history.avg_response_time, 12.0)
        self.assertEqual(history.on_time_rate, 0.85)
        self.assertIsNone(history.last_completed_at)

    def test_aggregates(self):
        t1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
        t2 = datetime(2024, 3, 1, tzinfo=timezone.utc)
        records = HistoryRecords(
            completed_payments=[
                CompletedPayment(initiator_id='i1', amount=100, completed_at=t1),
                CompletedPayment(initiator_id='i1', amount=200, completed_at=t2),
                CompletedPayment(initiator_id='i2', amount=50),
            ],
            dispute_count=1,
            ratings=[4, 5, 3],
        )
        history = build_work_history(records)

        self.assertEqual(history.completed_missions, 3)
        self.assertEqual(history.repeat_clients, 1)
        self.assertEqual(history.dispute_rate, 0.25)
        self.assertEqual(history.average_rating, 4.0)
        self.assertEqual(history.completion_rate, 0.9)
        self.assertEqual(history.last_completed_at, t2)

    def test_profile_completion_rate_wins(self):
        records = HistoryRecords(completed_payments=[CompletedPayment(initiator_id='i1')])
        profile = ContributorProfile(id='c1', completion_rate=0.6, total_earnings=1500)
        history = build_work_history(records, profile)
        self.assertEqual(history.completion_rate, 0.6)
        self.assertEqual(history.total_earnings, 1500)

    def test_disputes_without_completions(self):
        self.assertEqual(build_work_history(HistoryRecords(dispute_count=4)).dispute_rate, 0.0)

    def test_measured_timeliness(self):
        records = HistoryRecords(
            completed_payments=[
                CompletedPayment(on_time=True),
                CompletedPayment(on_time=False),
                CompletedPayment(on_time=None),
                CompletedPayment(on_time=True),
            ],
            response_hours=[2, 4, -1],
        )
        history = build_work_history(records)
        self.assertAlmostEqual(history.on_time_rate, 2 / 3)
        self.assertEqual(history.avg_response_time, 3.0)


if __name__ == '__main__':
    unittest.main()
