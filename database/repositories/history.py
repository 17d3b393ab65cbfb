from datetime import datetime
from typing import List, Set

from sqlalchemy import select, func

from database.models import Payment, Dispute, Review, ResponseSample
from database.repositories.base import BaseRepository

COMPLETED = 'completed'


class HistoryRepository(BaseRepository):
    """Read-only access to a contributor's track record."""

    def completed_payments(self, contributor_id: str) -> List[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.contributor_id == contributor_id, Payment.status == COMPLETED)
            .order_by(Payment.completed_at)
        )
        return list(self.db.execute(stmt).scalars().all())

    def dispute_count(self, contributor_id: str) -> int:
        stmt = select(func.count(Dispute.id)).where(Dispute.contributor_id == contributor_id)
        return self.db.execute(stmt).scalar_one()

    def ratings(self, contributor_id: str) -> List[float]:
        stmt = select(Review.rating).where(Review.reviewee_id == contributor_id)
        return [float(r) for r in self.db.execute(stmt).scalars().all()]

    def response_hours(self, contributor_id: str) -> List[float]:
        stmt = select(ResponseSample.hours).where(ResponseSample.contributor_id == contributor_id)
        return [float(h) for h in self.db.execute(stmt).scalars().all()]

    def recent_hire_ids(self, initiator_id: str, since: datetime) -> Set[str]:
        stmt = (
            select(Payment.contributor_id)
            .where(
                Payment.initiator_id == initiator_id,
                Payment.status == COMPLETED,
                Payment.completed_at >= since
            )
            .distinct()
        )
        return set(self.db.execute(stmt).scalars().all())
