import contextlib
import logging
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from database.database import db_session_scope
from database.repositories import (
    ContributorRepository, HistoryRepository, MatchRepository,
    MissionRepository, SkillRepository
)

logger = logging.getLogger(__name__)


class MatchingUnitOfWork:
    """Entity repositories bound to one Session."""

    def __init__(self, session: Session):
        self.session = session
        self.contributors = ContributorRepository(session)
        self.missions = MissionRepository(session)
        self.skills = SkillRepository(session)
        self.history = HistoryRepository(session)
        self.matches = MatchRepository(session)


@contextlib.contextmanager
def matching_uow(session_factory: Optional[sessionmaker] = None):
    """Per-unit-of-work transaction scope.

    Yields a MatchingUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with matching_uow() as uow:
            mission = uow.missions.get_by_id(mission_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    with db_session_scope(session_factory) as session:
        yield MatchingUnitOfWork(session)
