"""
Repository Interface - Abstract storage collaborator for the matching engine.

The scoring core only talks to this interface, so it has no knowledge of the
underlying storage technology.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Set

from core.models import ContributorProfile, HistoryRecords, Mission
from core.scorer.models import MatchResult


class MatchingRepository(ABC):
    """
    Abstract interface for the records the matching engine reads and writes.

    Implementations must be safe to call from several worker threads at once.
    """

    @abstractmethod
    def get_mission(self, mission_id: str) -> Optional[Mission]:
        pass

    @abstractmethod
    def get_contributor(self, contributor_id: str) -> Optional[ContributorProfile]:
        pass

    @abstractmethod
    def list_eligible_contributors(self) -> List[ContributorProfile]:
        """
        Contributors that are verified AND looking for work, in a stable order.
        """
        pass

    @abstractmethod
    def list_open_missions(self, statuses: List[str], limit: int) -> List[Mission]:
        pass

    @abstractmethod
    def get_history_records(self, contributor_id: str) -> HistoryRecords:
        """
        Completed payments, disputes, review ratings and response times for a contributor.
        """
        pass

    @abstractmethod
    def get_skill_names(self) -> Dict[str, str]:
        pass

    @abstractmethod
    def get_recent_hire_ids(self, initiator_id: str, since: datetime) -> Set[str]:
        """
        Contributor ids the initiator has paid for completed work since the given time.
        """
        pass

    @abstractmethod
    def replace_matches(self, mission_id: str, results: List[MatchResult]) -> None:
        """
        Atomically replace the mission's stored matches (delete all, then insert all).

        Must serialize concurrent replacements for the same mission.
        """
        pass

    @abstractmethod
    def get_stored_matches(self, mission_id: str, limit: int = 50) -> List[MatchResult]:
        pass

    @abstractmethod
    def update_match_power(self, contributor_id: str, score: int, updated_at: datetime) -> None:
        pass
