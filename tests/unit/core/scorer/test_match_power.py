#!/usr/bin/env python3
"""
Unit tests for match power and its factors.
"""

import unittest
from datetime import datetime, timedelta, timezone

from core.models import ContributorProfile, ContributorSkill, WorkHistory
from core.scorer.match_power import (
    MATCH_POWER_WEIGHTS, calculate_engagement, calculate_historical_performance,
    calculate_match_power, calculate_profile_completeness, calculate_skill_depth,
    calculate_verification_level
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestMatchPowerFactors(unittest.TestCase):

    def test_bare_profile_completeness(self):
        # Only the fixed avatar and rate allowances
        self.assertEqual(calculate_profile_completeness(ContributorProfile(id='c1')), 12)

    def test_full_profile_completeness_capped(self):
        profile = ContributorProfile(
            id='c1', headline='Senior backend engineer', bio='x' * 60,
            github_url='gh', linkedin_url='li', portfolio_url='pf',
            years_experience=5, timezone='UTC', is_looking_for_work=True,
            availability_hours_per_week=30
        )
        self.assertEqual(calculate_profile_completeness(profile), 100)

    def test_skill_depth(self):
        self.assertEqual(calculate_skill_depth([]), 0.0)
        skills = [ContributorSkill(skill_id='py', proficiency_level='expert', verified=True, years_experience=5)]
        self.assertEqual(calculate_skill_depth(skills), 60.0)

    def test_verification_level(self):
        verified = ContributorProfile(id='c1', verification_status='verified', background_check_status='passed')
        self.assertEqual(calculate_verification_level(verified), 80)
        rejected = ContributorProfile(id='c2', verification_status='rejected')
        self.assertEqual(calculate_verification_level(rejected), 0)

    def test_new_contributor_performance(self):
        self.assertEqual(calculate_historical_performance(WorkHistory()), 30.0)

    def test_proven_contributor_performance(self):
        history = WorkHistory(
            completed_missions=50, completion_rate=1.0, average_rating=5.0,
            dispute_rate=0.0, on_time_rate=1.0, repeat_clients=5
        )
        self.assertEqual(calculate_historical_performance(history), 100.0)


class TestEngagement(unittest.TestCase):

    def test_recent_update_and_looking(self):
        profile = ContributorProfile(id='c1', is_looking_for_work=True, updated_at=NOW - timedelta(days=3))
        self.assertEqual(calculate_engagement(profile, NOW), 100)

    def test_stale_profile(self):
        profile = ContributorProfile(id='c1', updated_at=NOW - timedelta(days=60))
        self.assertEqual(calculate_engagement(profile, NOW), 30)

    def test_no_update_timestamp(self):
        self.assertEqual(calculate_engagement(ContributorProfile(id='c1'), NOW), 50)

    def test_naive_timestamp_treated_as_utc(self):
        profile = ContributorProfile(id='c1', updated_at=datetime(2024, 5, 20, 12, 0))
        self.assertEqual(calculate_engagement(profile, NOW), 70)


class TestMatchPower(unittest.TestCase):

    def test_score_is_weighted_sum_of_factors(self):
        profile = ContributorProfile(
            id='c1', verification_status='verified', headline='Data engineer and analyst',
            is_looking_for_work=True, updated_at=NOW,
            skills=[ContributorSkill(skill_id='sql', proficiency_level='advanced')]
        )
        score, factors = calculate_match_power(profile, WorkHistory(), NOW)

        expected = sum(getattr(factors, k) * w for k, w in MATCH_POWER_WEIGHTS.items())
        self.assertEqual(score, int(expected + 0.5))
        self.assertGreaterEqual(score, 0)
        self.assertLessEqual(score, 100)
        self.assertEqual(factors.historical_performance, 30.0)


if __name__ == '__main__':
    unittest.main()
