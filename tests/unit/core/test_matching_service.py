#!/usr/bin/env python3
"""
Unit tests for the MatchingService facade.
"""

import unittest
from datetime import timedelta

from core.exceptions import ContributorNotFound, MissionNotFound, NotFoundException
from core.matching_service import MatchingService
from core.models import CompletedPayment, ContributorSkill, HistoryRecords
from tests.mocks.fake_repository import FakeMatchingRepository, make_contributor, make_mission


class TestMatchingService(unittest.TestCase):

    def setUp(self):
        self.repo = FakeMatchingRepository(
            missions=[make_mission('m1', ['py', 'sql', 'go'])],
            contributors=[
                make_contributor('c1', [
                    ContributorSkill(skill_id='py', proficiency_level='expert', verified=True),
                    ContributorSkill(skill_id='sql', proficiency_level='beginner'),
                    ContributorSkill(skill_id='rust', proficiency_level='advanced', verified=True),
                ], bio='b' * 80, github_url='https://github.com/c1'),
                make_contributor('c2', ['py', 'sql', 'go']),
            ],
            history={
                'c1': HistoryRecords(
                    completed_payments=[
                        CompletedPayment(initiator_id='i1', amount=500),
                        CompletedPayment(initiator_id='i1', amount=700),
                    ],
                    ratings=[5, 4],
                )
            },
            skill_names={'py': 'Python', 'sql': 'SQL', 'go': 'Go'},
        )
        self.service = MatchingService(self.repo)

    def test_01_refresh_and_read_back(self):
        """Test refresh persists and stored matches come back in score order."""
        print("\n📊 UNIT Test 1: Refresh and Read Back")
        refreshed = self.service.refresh_matches('m1')
        stored = self.service.get_stored_matches('m1')

        self.assertEqual(
            [(m.contributor_id, m.overall_score) for m in refreshed],
            [(m.contributor_id, m.overall_score) for m in stored]
        )
        scores = [m.overall_score for m in stored]
        self.assertEqual(scores, sorted(scores, reverse=True))

        print(f"  ✓ Stored: {len(stored)} matches")

    def test_02_stored_matches_with_decay(self):
        self.service.refresh_matches('m1')
        stored = self.service.get_stored_matches('m1')
        later = stored[0].matched_at + timedelta(hours=72)

        decayed = self.service.get_stored_matches('m1', apply_decay=True, now=later)

        for original, aged in zip(stored, decayed):
            self.assertAlmostEqual(aged.overall_score, original.overall_score / 2, delta=1)

    def test_03_stored_matches_unknown_mission_empty(self):
        self.assertEqual(self.service.get_stored_matches('nope'), [])

    def test_04_refresh_match_power(self):
        score = self.service.refresh_match_power('c1')

        self.assertGreaterEqual(score, 0)
        self.assertLessEqual(score, 100)
        self.assertEqual(self.repo.match_power_updates[0][:2], ('c1', score))
        self.assertEqual(self.repo.contributors['c1'].match_power, score)

    def test_05_refresh_match_power_unknown(self):
        with self.assertRaises(ContributorNotFound):
            self.service.refresh_match_power('ghost')
        self.assertEqual(self.repo.match_power_updates, [])

    def test_06_preview_match(self):
        preview = self.service.preview_match('m1', 'c1')

        self.assertEqual(set(preview.breakdown), {'skills', 'trust', 'availability', 'budget', 'timezone', 'engagement'})
        self.assertIn(preview.confidence, ('high', 'medium', 'low'))
        self.assertEqual(preview.explanation[0], 'Only 67% skill coverage')
        self.assertEqual(preview.skill_details.coverage, 67)
        self.assertEqual(self.repo.replace_calls, [])

    def test_07_preview_not_found(self):
        with self.assertRaises(MissionNotFound):
            self.service.preview_match('nope', 'c1')
        with self.assertRaises(ContributorNotFound):
            self.service.preview_match('m1', 'ghost')

    def test_08_skill_gaps(self):
        report = self.service.analyze_skill_gaps('m1', 'c1')

        self.assertEqual(report.total_required, 3)
        self.assertEqual([(g.skill_name, g.gap) for g in report.gaps],
                         [('SQL', 'underqualified'), ('Go', 'missing')])
        self.assertEqual(report.critical_gaps, 0)
        self.assertEqual(report.recommendation, 'Consider improving: SQL, Go')

    def test_09_contributor_stats(self):
        stats = self.service.get_contributor_stats('c1')

        self.assertEqual(stats.skill_count, 3)
        self.assertEqual(stats.verified_skills, 2)
        self.assertEqual(stats.completed_missions, 2)
        self.assertEqual(stats.average_rating, 4.5)
        self.assertEqual(stats.completion_rate, 0.9)
        # headline, bio, github, timezone, 3+ skills
        self.assertEqual(stats.profile_completeness, 70)

    def test_10_not_found_is_common_base(self):
        with self.assertRaises(NotFoundException):
            self.service.get_contributor_stats('ghost')

    def test_11_skill_cache_shared(self):
        self.service.refresh_matches('m1')
        self.service.preview_match('m1', 'c2')
        self.service.get_recommendations('c2')
        self.assertEqual(self.repo.skill_name_loads, 1)

        self.service.skill_cache.invalidate()
        self.service.analyze_skill_gaps('m1', 'c2')
        self.assertEqual(self.repo.skill_name_loads, 2)


if __name__ == '__main__':
    unittest.main()
