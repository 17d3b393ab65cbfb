from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, JSON, UniqueConstraint, Index

from .base import Base, new_id, now_utc


class MissionMatch(Base):
    """
    Stored match between a mission and a contributor.

    The set of rows for a mission is replaced wholesale on every refresh.
    breakdown keeps the full per-skill detail as JSON for explainability.
    """
    __tablename__ = 'mission_match'

    id = Column(Text, primary_key=True, default=new_id)
    mission_id = Column(Text, ForeignKey('mission.id', ondelete='CASCADE'), nullable=False)
    contributor_id = Column(Text, ForeignKey('contributor_profile.id', ondelete='CASCADE'), nullable=False)

    overall_score = Column(Integer, nullable=False)
    skill_score = Column(Integer, nullable=False, default=0)
    trust_score = Column(Integer, nullable=False, default=0)
    availability_score = Column(Integer, nullable=False, default=0)
    budget_fit_score = Column(Integer, nullable=False, default=0)
    timezone_fit_score = Column(Integer, nullable=False, default=0)
    engagement_score = Column(Integer, nullable=False, default=0)

    breakdown = Column(JSON, nullable=False, default=dict)
    rank = Column(Integer, nullable=False)
    contributor_name = Column(Text, nullable=True)

    matched_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        UniqueConstraint('mission_id', 'contributor_id', name='uq_mission_match_pair'),
        Index('idx_mission_match_score', 'mission_id', 'overall_score'),
    )
