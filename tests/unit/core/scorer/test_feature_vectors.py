#!/usr/bin/env python3
"""
Unit tests for feature vector construction.
"""

import unittest

import numpy as np

from core.models import ContributorProfile, ContributorSkill, Mission, WorkHistory
from core.scorer import MatchScorer
from core.scorer.features import (
    FEATURE_NAMES, build_feature_vector, complexity_to_number, normalize_budget, profile_score
)


class TestFeatureVectors(unittest.TestCase):

    def setUp(self):
        self.contributor = ContributorProfile(
            id='c1', is_looking_for_work=True, availability_hours_per_week=80,
            match_power=70, trust_score=120, years_experience=30, timezone='UTC',
            skills=[ContributorSkill(skill_id=s, verified=True) for s in ('a', 'b', 'c')]
        )
        self.mission = Mission(
            id='m1', required_skills=['a', 'd'], budget_max=12000,
            complexity='hard', estimated_duration_days=30, featured=True
        )
        self.history = WorkHistory(completed_missions=100, average_rating=4.0)
        self.match = MatchScorer().score(self.mission, self.contributor, self.history)

    def test_vector_shape_and_bounds(self):
        vector = build_feature_vector(self.contributor, self.mission, self.history, self.match)
        array = vector.to_array()

        self.assertEqual(array.dtype, np.float64)
        self.assertEqual(array.shape, (len(FEATURE_NAMES),))
        self.assertEqual(len(FEATURE_NAMES), 20)
        self.assertTrue(np.all(array >= 0.0))
        self.assertTrue(np.all(array <= 1.0))

    def test_feature_values(self):
        vector = build_feature_vector(self.contributor, self.mission, self.history, self.match)
        self.assertEqual(vector.f_trust_score, 1.0)
        self.assertEqual(vector.f_completed_missions, 1.0)
        self.assertEqual(vector.f_budget_level, 1.0)
        self.assertEqual(vector.f_complexity, 0.75)
        self.assertEqual(vector.f_is_featured, 1.0)
        self.assertEqual(vector.f_skill_coverage, 0.5)
        self.assertEqual(vector.f_previous_hires, 0.0)

    def test_budget_tiers(self):
        self.assertEqual(normalize_budget(0), 0.2)
        self.assertEqual(normalize_budget(500), 0.4)
        self.assertEqual(normalize_budget(2500), 0.6)
        self.assertEqual(normalize_budget(5000), 0.8)

    def test_unknown_complexity(self):
        self.assertEqual(complexity_to_number('galactic'), 0.5)

    def test_profile_score(self):
        self.assertEqual(profile_score(ContributorProfile(id='c0')), 0)
        self.assertEqual(profile_score(self.contributor), 20)


if __name__ == '__main__':
    unittest.main()
