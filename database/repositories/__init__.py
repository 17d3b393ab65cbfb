from database.repositories.base import BaseRepository
from database.repositories.contributor import ContributorRepository
from database.repositories.mission import MissionRepository
from database.repositories.skill import SkillRepository
from database.repositories.history import HistoryRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'ContributorRepository',
    'MissionRepository',
    'SkillRepository',
    'HistoryRepository',
    'MatchRepository',
]
