from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Float, Numeric, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base, new_id, now_utc


class ContributorProfileRecord(Base):
    """
    Contributor profile with cached trust score and match power.

    Only verified contributors who are looking for work are matched.
    """
    __tablename__ = 'contributor_profile'

    id = Column(Text, primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, unique=True)

    # pending|proof_task_submitted|verified|rejected
    verification_status = Column(Text, nullable=False, default='pending')
    # not_started|in_progress|passed|failed
    background_check_status = Column(Text, nullable=False, default='not_started')

    is_looking_for_work = Column(Boolean, nullable=False, default=False)
    availability_hours_per_week = Column(Float, nullable=True)
    timezone = Column(Text, nullable=True)

    headline = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    github_url = Column(Text, nullable=True)
    linkedin_url = Column(Text, nullable=True)
    portfolio_url = Column(Text, nullable=True)
    years_experience = Column(Float, nullable=False, default=0)

    trust_score = Column(Numeric(5, 2), nullable=True)
    match_power = Column(Numeric(5, 2), nullable=True)
    completion_rate = Column(Numeric(3, 2), nullable=True)
    total_earnings = Column(Numeric(12, 2), nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    skills = relationship(
        "ContributorSkillRecord",
        back_populates="contributor",
        cascade="all, delete-orphan",
        order_by="ContributorSkillRecord.skill_id"
    )

    __table_args__ = (
        Index('idx_contributor_eligible', 'verification_status', 'is_looking_for_work'),
    )


class ContributorSkillRecord(Base):
    __tablename__ = 'contributor_skill'

    id = Column(Text, primary_key=True, default=new_id)
    contributor_id = Column(Text, ForeignKey('contributor_profile.id', ondelete='CASCADE'), nullable=False)
    skill_id = Column(Text, ForeignKey('skill.id', ondelete='CASCADE'), nullable=False)

    # beginner|intermediate|advanced|expert
    proficiency_level = Column(Text, nullable=False, default='intermediate')
    years_experience = Column(Float, nullable=False, default=0)
    verified = Column(Boolean, nullable=False, default=False)

    contributor = relationship("ContributorProfileRecord", back_populates="skills")
    skill = relationship("Skill")

    __table_args__ = (
        UniqueConstraint('contributor_id', 'skill_id', name='uq_contributor_skill'),
        Index('idx_contributor_skill_skill', 'skill_id'),
    )
