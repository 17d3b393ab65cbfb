from sqlalchemy import Column, Text, TIMESTAMP, Boolean, Float, Numeric, JSON, Index

from .base import Base, new_id, now_utc


class MissionRecord(Base):
    """
    A unit of paid work posted by an initiator.

    required_skill_ids is an ordered JSON list of skill ids. Order matters:
    skill-gap severity is derived from position.
    """
    __tablename__ = 'mission'

    id = Column(Text, primary_key=True, default=new_id)
    initiator_id = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)

    required_skill_ids = Column(JSON, nullable=False, default=list)

    budget_min = Column(Numeric(12, 2), nullable=True)
    budget_max = Column(Numeric(12, 2), nullable=True)
    # easy|medium|hard|expert
    complexity = Column(Text, nullable=False, default='medium')
    estimated_duration_days = Column(Float, nullable=True)
    preferred_timezone = Column(Text, nullable=True)

    # draft|open|matching|in_progress|completed|cancelled
    status = Column(Text, nullable=False, default='open')
    featured = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_mission_status', 'status'),
        Index('idx_mission_created', 'created_at'),
    )
