#!/usr/bin/env python3
"""
Unit tests for MatchScorer, the weighted combination of sub-scores.
"""

import random
import unittest
from datetime import datetime, timedelta, timezone

from core.config_loader import ScorerConfig
from core.models import ContributorProfile, ContributorSkill, Mission, WorkHistory
from core.scorer import MatchScorer

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


class TestMatchScorer(unittest.TestCase):

    def setUp(self):
        self.scorer = MatchScorer()
        self.mission = Mission(
            id='m1', required_skills=['a', 'b', 'c'], budget_min=2000, budget_max=4000,
            estimated_duration_days=14, preferred_timezone='UTC'
        )
        self.contributor = ContributorProfile(
            id='c1', verification_status='verified', is_looking_for_work=True,
            availability_hours_per_week=40, timezone='UTC', headline='Backend dev',
            skills=[
                ContributorSkill(skill_id='a', proficiency_level='expert', verified=True),
                ContributorSkill(skill_id='b', proficiency_level='beginner'),
            ]
        )

    def test_01_full_breakdown(self):
        """Test every sub-score and the weighted overall."""
        print("\n📊 UNIT Test 1: Full Breakdown")
        result = self.scorer.score(self.mission, self.contributor, WorkHistory(), {'a': 'Go'}, NOW)

        self.assertEqual(result.skill_score, 59)
        self.assertEqual(result.trust_score, 35)
        self.assertEqual(result.availability_score, 100)
        self.assertEqual(result.budget_fit_score, 75)
        self.assertEqual(result.timezone_fit_score, 100)
        self.assertEqual(result.engagement_score, 70)
        self.assertEqual(result.overall_score, 66)

        self.assertEqual(result.rank, 0)
        self.assertEqual(result.matched_at, NOW)
        self.assertEqual(result.contributor_name, 'Backend dev')
        self.assertEqual(result.skill_coverage, 67)
        self.assertEqual(result.breakdown.skills.breakdown[0].skill_name, 'Go')

        print(f"  ✓ Overall: {result.overall_score}")

    def test_02_budget_max_falls_back_to_min(self):
        mission = Mission(id='m2', budget_min=6000, budget_max=None)
        self.contributor.match_power = 80
        result = self.scorer.score(mission, self.contributor, WorkHistory(), now=NOW)
        self.assertEqual(result.budget_fit_score, 90)

    def test_03_unset_match_power_uses_default(self):
        mission = Mission(id='m2', budget_min=6000, budget_max=6000)
        result = self.scorer.score(mission, self.contributor, WorkHistory(), now=NOW)
        self.assertEqual(result.budget_fit_score, 75)

    def test_04_custom_weights(self):
        config = ScorerConfig(weights={
            'skill': 1.0, 'trust': 0.0, 'availability': 0.0,
            'budget': 0.0, 'timezone': 0.0, 'engagement': 0.0
        })
        result = MatchScorer(config).score(self.mission, self.contributor, WorkHistory(), now=NOW)
        self.assertEqual(result.overall_score, result.skill_score)

    def test_05_scores_always_bounded(self):
        rng = random.Random(7)
        levels = ['beginner', 'intermediate', 'advanced', 'expert', 'unknown']
        zones = [None, 'PST', 'UTC', 'JST', 'IST', 'NZST', '???']

        for i in range(200):
            contributor = ContributorProfile(
                id=f'c{i}',
                is_looking_for_work=rng.random() < 0.7,
                availability_hours_per_week=rng.choice([None, 0, 5, 20, 60]),
                timezone=rng.choice(zones),
                match_power=rng.choice([None, 0, 55, 100]),
                updated_at=rng.choice([None, NOW - timedelta(days=rng.randint(0, 400))]),
                skills=[
                    ContributorSkill(
                        skill_id=f's{rng.randint(0, 6)}',
                        proficiency_level=rng.choice(levels),
                        years_experience=rng.uniform(0, 30),
                        verified=rng.random() < 0.5
                    )
                    for _ in range(rng.randint(0, 5))
                ]
            )
            mission = Mission(
                id=f'm{i}',
                required_skills=[f's{rng.randint(0, 6)}' for _ in range(rng.randint(0, 4))],
                budget_min=rng.choice([None, 0, 500, 3000, 8000]),
                budget_max=rng.choice([None, 1000, 20000]),
                estimated_duration_days=rng.choice([None, 1, 30, 365]),
                preferred_timezone=rng.choice(zones)
            )
            history = WorkHistory(
                completed_missions=rng.randint(0, 30),
                completion_rate=rng.uniform(0, 1),
                average_rating=rng.uniform(0, 5),
                dispute_rate=rng.uniform(0, 1),
                avg_response_time=rng.uniform(0, 100),
                on_time_rate=rng.uniform(0, 1),
                repeat_clients=rng.randint(0, 20)
            )

            result = self.scorer.score(mission, contributor, history, now=NOW)
            for value in (
                result.overall_score, result.skill_score, result.trust_score,
                result.availability_score, result.budget_fit_score,
                result.timezone_fit_score, result.engagement_score, result.skill_coverage
            ):
                self.assertGreaterEqual(value, 0)
                self.assertLessEqual(value, 100)


if __name__ == '__main__':
    unittest.main()
