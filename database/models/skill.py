from sqlalchemy import Column, Text, TIMESTAMP

from .base import Base, new_id, now_utc


class Skill(Base):
    """
    Skills catalog. Names are resolved through the skill-name cache.
    """
    __tablename__ = 'skill'

    id = Column(Text, primary_key=True, default=new_id)
    name = Column(Text, nullable=False, unique=True)
    category = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc)
