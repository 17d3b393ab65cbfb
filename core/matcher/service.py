#!/usr/bin/env python3
"""
Match Orchestrator - Ranks the contributor population for a mission.

Pipeline:
1. Load mission (MissionNotFound aborts, nothing persisted)
2. Load eligible contributors (verified and looking for work)
3. Per candidate: fetch history records -> WorkHistory -> MatchScorer,
   evaluated in bounded-parallel batches with per-candidate error isolation
4. Filter on hard floors (coverage, availability, optional budget/min score)
5. Optional tie-break jitter and diversity re-ranking
6. Sort, assign ranks 1..N
7. Persist the top N atomically, one refresh per mission at a time

A refresh runs under a deadline. Past the deadline the whole run is
discarded rather than persisting a partial ranking.
"""

from typing import Callable, Dict, Iterator, List, Optional
from contextlib import contextmanager
from datetime import datetime, timedelta
import logging
import random
import threading
import time

from core.interfaces import MatchingRepository
from core.config_loader import MatchingConfig, RankingOptions
from core.exceptions import MissionNotFound, RefreshDeadlineExceeded
from core.models import ContributorProfile, Mission, WorkHistory
from core.cache import SkillNameCache
from core.scorer.models import MatchResult
from core.scorer.service import MatchScorer
from core.ranking.diversity import apply_diversity_ranking
from core.matcher.batch import BatchDeadlineExceeded, evaluate_in_batches
from core.matcher.history import build_work_history
from core.utils import utc_now

logger = logging.getLogger(__name__)

TieBreaker = Callable[[MatchResult], int]

MAX_TIE_BREAK_JITTER = 2


def make_tie_breaker(seed: Optional[int] = None) -> TieBreaker:
    """Jitter in [0, 2] for tie-break variety. Pass a seed for reproducible order."""
    rng = random.Random(seed)

    def tie_breaker(match: MatchResult) -> int:
        return rng.randint(0, MAX_TIE_BREAK_JITTER)

    return tie_breaker


def rank_matches(matches: List[MatchResult]) -> List[MatchResult]:
    """Sort by overall score (highest first) and assign ranks 1..N.

    Contributor id breaks exact ties so identical input gives identical order.
    """
    ranked = sorted(matches, key=lambda m: (-m.overall_score, m.contributor_id))
    for index, match in enumerate(ranked):
        match.rank = index + 1
    return ranked


class MatchOrchestrator:
    """
    End-to-end matching of contributors to a mission.

    Dependencies are injected so tests can supply a fake repository, a
    seeded tie-breaker and a controllable clock.
    """

    def __init__(
        self,
        repo: MatchingRepository,
        config: Optional[MatchingConfig] = None,
        skill_cache: Optional[SkillNameCache] = None,
        scorer: Optional[MatchScorer] = None,
        tie_breaker: Optional[TieBreaker] = None,
        clock: Callable[[], float] = time.monotonic,
        now_fn: Callable[[], datetime] = utc_now
    ):
        self.repo = repo
        self.config = config or MatchingConfig()
        self.skill_cache = skill_cache or SkillNameCache(
            repo.get_skill_names, ttl_seconds=self.config.skill_cache.ttl_seconds
        )
        self.scorer = scorer or MatchScorer(self.config.scorer)
        self.tie_breaker = tie_breaker or make_tie_breaker()
        self.clock = clock
        self.now_fn = now_fn

        self._locks_guard = threading.Lock()
        self._mission_locks: Dict[str, _MissionLock] = {}

    def get_work_history(self, contributor: ContributorProfile) -> WorkHistory:
        records = self.repo.get_history_records(contributor.id)
        return build_work_history(records, contributor)

    def evaluate_candidate(
        self,
        mission: Mission,
        contributor: ContributorProfile,
        skill_names: Optional[Dict[str, str]] = None,
        now: Optional[datetime] = None
    ) -> MatchResult:
        """Fetch history and score a single contributor against a mission."""
        history = self.get_work_history(contributor)
        if skill_names is None:
            skill_names = self.skill_cache.get()
        return self.scorer.score(mission, contributor, history, skill_names, now)

    def match_contributors_to_mission(
        self,
        mission_id: str,
        options: Optional[RankingOptions] = None
    ) -> List[MatchResult]:
        """Score, filter, rank and persist matches for a mission.

        Args:
            mission_id: Mission to staff
            options: RankingOptions for filtering, jitter, diversity and limit

        Returns:
            Ranked matches, truncated to options.limit if given

        Raises:
            MissionNotFound: mission does not exist
            RefreshDeadlineExceeded: the refresh ran out of time; nothing persisted
        """
        options = options or RankingOptions()
        batch_config = self.config.batch
        deadline = None
        if batch_config.deadline_seconds is not None:
            deadline = self.clock() + batch_config.deadline_seconds

        mission = self.repo.get_mission(mission_id)
        if mission is None:
            raise MissionNotFound(mission_id)

        contributors = self.repo.list_eligible_contributors()
        skill_names = self.skill_cache.get()
        now = self.now_fn()

        logger.info(f"Matching mission {mission_id} against {len(contributors)} eligible contributors")

        try:
            outcomes = evaluate_in_batches(
                contributors,
                lambda contributor: self.evaluate_candidate(mission, contributor, skill_names, now),
                batch_size=batch_config.batch_size,
                parallelism=batch_config.parallelism,
                deadline=deadline,
                clock=self.clock
            )
        except BatchDeadlineExceeded as e:
            logger.error(f"Refresh for mission {mission_id} abandoned: {e}")
            raise RefreshDeadlineExceeded(mission_id, batch_config.deadline_seconds) from e

        matches = []
        for outcome in outcomes:
            if outcome.ok:
                matches.append(outcome.value)
            else:
                logger.warning(
                    f"Skipping contributor {outcome.item.id} for mission {mission_id}: {outcome.error}"
                )

        matches = [m for m in matches if self._passes_filters(m, options)]

        if options.diversity_boost:
            for match in matches:
                match.overall_score = min(100, match.overall_score + self.tie_breaker(match))

        if options.diversity is not None:
            since = now - timedelta(days=self.config.persistence.recent_hire_days)
            recent_hires = self.repo.get_recent_hire_ids(mission.initiator_id, since)
            matches = apply_diversity_ranking(matches, recent_hires, options.diversity)

        ranked = rank_matches(matches)

        if deadline is not None and self.clock() >= deadline:
            logger.error(f"Refresh for mission {mission_id} finished past its deadline, discarding")
            raise RefreshDeadlineExceeded(mission_id, batch_config.deadline_seconds)

        self._persist(mission_id, ranked[:self.config.persistence.top_n], deadline)

        failed = len(outcomes) - len([o for o in outcomes if o.ok])
        logger.info(
            f"Mission {mission_id}: {len(ranked)} matches ranked "
            f"({failed} failed, {len(contributors) - failed - len(ranked)} filtered)"
        )

        if options.limit:
            return ranked[:options.limit]
        return ranked

    def _passes_filters(self, match: MatchResult, options: RankingOptions) -> bool:
        filters = self.config.filters
        if options.minimum_score and match.overall_score < options.minimum_score:
            return False
        if match.breakdown.skills.coverage < filters.min_skill_coverage:
            return False
        if match.availability_score < filters.min_availability:
            return False
        if options.strict_budget and match.budget_fit_score < filters.strict_budget_min:
            return False
        return True

    @contextmanager
    def _mission_lock(self, mission_id: str, timeout: Optional[float] = None) -> Iterator[bool]:
        """Hold the mission's lock, yielding False if it was not acquired in time.

        An entry lives only while someone holds or waits on it.
        """
        with self._locks_guard:
            entry = self._mission_locks.get(mission_id)
            if entry is None:
                entry = _MissionLock()
                self._mission_locks[mission_id] = entry
            entry.users += 1

        acquired = False
        try:
            acquired = entry.lock.acquire(timeout=-1 if timeout is None else timeout)
            yield acquired
        finally:
            if acquired:
                entry.lock.release()
            with self._locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._mission_locks[mission_id]

    def _persist(self, mission_id: str, results: List[MatchResult], deadline: Optional[float] = None) -> None:
        timeout = None if deadline is None else max(0.0, deadline - self.clock())

        with self._mission_lock(mission_id, timeout) as acquired:
            if not acquired or (deadline is not None and self.clock() >= deadline):
                logger.error(f"Refresh for mission {mission_id} hit its deadline waiting to persist, discarding")
                raise RefreshDeadlineExceeded(mission_id, self.config.batch.deadline_seconds)
            self.repo.replace_matches(mission_id, results)

        logger.info(f"Stored {len(results)} matches for mission {mission_id}")


class _MissionLock:
    __slots__ = ('lock', 'users')

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0
