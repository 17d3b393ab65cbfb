import logging
from typing import List

from sqlalchemy import select, delete

from database.models import MissionMatch
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def delete_for_mission(self, mission_id: str) -> int:
        result = self.db.execute(delete(MissionMatch).where(MissionMatch.mission_id == mission_id))
        return result.rowcount

    def add_all(self, matches: List[MissionMatch]) -> None:
        self.db.add_all(matches)
        self.db.flush()

    def list_for_mission(self, mission_id: str, limit: int = 50) -> List[MissionMatch]:
        stmt = (
            select(MissionMatch)
            .where(MissionMatch.mission_id == mission_id)
            .order_by(MissionMatch.overall_score.desc(), MissionMatch.rank)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())
