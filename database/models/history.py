from sqlalchemy import Column, Text, TIMESTAMP, Boolean, Float, Integer, Numeric, Index

from .base import Base, new_id, now_utc


class Payment(Base):
    """
    Escrowed payment for a mission. Only 'completed' payments count as
    completed work in a contributor's history.
    """
    __tablename__ = 'payment'

    id = Column(Text, primary_key=True, default=new_id)
    mission_id = Column(Text, nullable=False)
    contributor_id = Column(Text, nullable=False)
    initiator_id = Column(Text, nullable=False)

    amount = Column(Numeric(12, 2), nullable=False, default=0)
    # pending|escrowed|completed|refunded
    status = Column(Text, nullable=False, default='pending')
    on_time = Column(Boolean, nullable=True)  # NULL when delivery timing is unknown

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)
    completed_at = Column(TIMESTAMP(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_payment_contributor_status', 'contributor_id', 'status'),
        Index('idx_payment_initiator_status', 'initiator_id', 'status'),
    )


class Dispute(Base):
    __tablename__ = 'dispute'

    id = Column(Text, primary_key=True, default=new_id)
    mission_id = Column(Text, nullable=False)
    contributor_id = Column(Text, nullable=False)
    reason = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default='open')
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_dispute_contributor', 'contributor_id'),
    )


class Review(Base):
    __tablename__ = 'review'

    id = Column(Text, primary_key=True, default=new_id)
    mission_id = Column(Text, nullable=False)
    reviewer_id = Column(Text, nullable=False)
    reviewee_id = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_review_reviewee', 'reviewee_id'),
    )


class ResponseSample(Base):
    """Hours a contributor took to answer an initiator, one row per exchange."""
    __tablename__ = 'response_sample'

    id = Column(Text, primary_key=True, default=new_id)
    contributor_id = Column(Text, nullable=False)
    hours = Column(Float, nullable=False)
    recorded_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_response_sample_contributor', 'contributor_id'),
    )
