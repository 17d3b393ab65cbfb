#!/usr/bin/env python3
"""
Unit tests for mission recommendations.
"""

import unittest

from core.cache import SkillNameCache
from core.config_loader import RecommendationConfig
from core.exceptions import ContributorNotFound
from core.matcher import RecommendationService
from core.scorer import MatchScorer
from tests.mocks.fake_repository import FakeMatchingRepository, make_contributor, make_mission


class FailingScorer(MatchScorer):
    def score(self, mission, contributor, history, skill_names=None, now=None):
        if mission.id == 'bad':
            raise ValueError("corrupt mission")
        return super().score(mission, contributor, history, skill_names, now)


class TestRecommendations(unittest.TestCase):

    def setUp(self):
        self.repo = FakeMatchingRepository(
            missions=[
                make_mission('m1', ['py']),
                make_mission('m2', ['py', 'sql'], status='matching'),
                make_mission('m3', ['py'], status='completed'),
                make_mission('m4', ['haskell', 'ocaml']),
            ],
            contributors=[make_contributor('c1', ['py'])],
            skill_names={'py': 'Python', 'sql': 'SQL'},
        )
        self.cache = SkillNameCache(self.repo.get_skill_names)

    def _service(self, **config):
        return RecommendationService(self.repo, self.cache, config=RecommendationConfig(**config))

    def test_01_ranked_open_missions(self):
        """Test ordering, status scan and the fields of each recommendation."""
        print("\n📊 UNIT Test 1: Mission Recommendations")
        results = self._service().get_mission_recommendations('c1')

        self.assertEqual([r.mission_id for r in results], ['m1', 'm2', 'm4'])
        self.assertEqual([r.match_score for r in results], [76, 63, 49])

        top = results[0]
        self.assertEqual(top.mission_title, 'Mission m1')
        self.assertEqual(top.skill_match, 93)
        self.assertEqual(top.budget_match, 75)
        self.assertEqual((top.budget_min, top.budget_max), (2000, 4000))
        self.assertEqual(top.matched_skills, ['Python'])
        self.assertEqual(top.reason, 'Great skill match, all skills covered')

        print(f"  ✓ Recommended: {[r.mission_id for r in results]}")

    def test_02_min_score_filter(self):
        results = self._service(min_score=60).get_mission_recommendations('c1')
        self.assertEqual([r.mission_id for r in results], ['m1', 'm2'])

    def test_03_limit(self):
        self.assertEqual(len(self._service().get_mission_recommendations('c1', limit=1)), 1)
        self.assertEqual(len(self._service(default_limit=2).get_mission_recommendations('c1')), 2)

    def test_08_explicit_zero_limit(self):
        self.assertEqual(self._service().get_mission_recommendations('c1', limit=0), [])

    def test_04_sample_size_bounds_scan(self):
        results = self._service(sample_size=1).get_mission_recommendations('c1')
        self.assertEqual(len(results), 1)

    def test_05_unknown_contributor(self):
        with self.assertRaises(ContributorNotFound):
            self._service().get_mission_recommendations('ghost')

    def test_06_mission_failure_isolated(self):
        self.repo.missions['bad'] = make_mission('bad', ['py'])
        service = RecommendationService(self.repo, self.cache, scorer=FailingScorer())

        results = service.get_mission_recommendations('c1')

        self.assertNotIn('bad', [r.mission_id for r in results])
        self.assertIn('m1', [r.mission_id for r in results])

    def test_07_missing_budget_max(self):
        self.repo.missions = {'m9': make_mission('m9', ['py'], budget_min=1500, budget_max=None)}
        result = self._service().get_mission_recommendations('c1')[0]
        self.assertEqual((result.budget_min, result.budget_max), (1500, 1500))


if __name__ == '__main__':
    unittest.main()
