import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from database.models import ContributorProfileRecord, ContributorSkillRecord
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ContributorRepository(BaseRepository):
    def get_by_id(self, contributor_id: str) -> Optional[ContributorProfileRecord]:
        stmt = (
            select(ContributorProfileRecord)
            .where(ContributorProfileRecord.id == contributor_id)
            .options(selectinload(ContributorProfileRecord.skills).selectinload(ContributorSkillRecord.skill))
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_eligible(self) -> List[ContributorProfileRecord]:
        """Verified contributors looking for work, ordered by id."""
        stmt = (
            select(ContributorProfileRecord)
            .where(
                ContributorProfileRecord.verification_status == 'verified',
                ContributorProfileRecord.is_looking_for_work.is_(True)
            )
            .order_by(ContributorProfileRecord.id)
            .options(selectinload(ContributorProfileRecord.skills).selectinload(ContributorSkillRecord.skill))
        )
        return list(self.db.execute(stmt).scalars().all())

    def update_match_power(self, contributor_id: str, score: int, updated_at: datetime) -> int:
        stmt = (
            update(ContributorProfileRecord)
            .where(ContributorProfileRecord.id == contributor_id)
            .values(match_power=score, updated_at=updated_at)
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            logger.warning(f"Match power not stored, contributor {contributor_id} is gone")
        return result.rowcount
