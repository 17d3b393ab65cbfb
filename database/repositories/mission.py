from typing import List, Optional

from sqlalchemy import select

from database.models import MissionRecord
from database.repositories.base import BaseRepository


class MissionRepository(BaseRepository):
    def get_by_id(self, mission_id: str) -> Optional[MissionRecord]:
        stmt = select(MissionRecord).where(MissionRecord.id == mission_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def lock(self, mission_id: str) -> Optional[MissionRecord]:
        """Take a row lock on the mission for the rest of the transaction.

        SQLite has no row locks; the clause is dropped there.
        """
        stmt = select(MissionRecord).where(MissionRecord.id == mission_id).with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_status(self, statuses: List[str], limit: int) -> List[MissionRecord]:
        stmt = (
            select(MissionRecord)
            .where(MissionRecord.status.in_(statuses))
            .order_by(MissionRecord.created_at.desc(), MissionRecord.id)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())
