from .base import Base
from .skill import Skill
from .contributor import ContributorProfileRecord, ContributorSkillRecord
from .mission import MissionRecord
from .history import Payment, Dispute, Review, ResponseSample
from .match import MissionMatch

__all__ = [
    'Base',
    'Skill',
    'ContributorProfileRecord',
    'ContributorSkillRecord',
    'MissionRecord',
    'Payment',
    'Dispute',
    'Review',
    'ResponseSample',
    'MissionMatch',
]
