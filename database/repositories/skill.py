from typing import Dict

from sqlalchemy import select

from database.models import Skill
from database.repositories.base import BaseRepository


class SkillRepository(BaseRepository):
    def get_name_map(self) -> Dict[str, str]:
        rows = self.db.execute(select(Skill.id, Skill.name)).all()
        return {skill_id: name for skill_id, name in rows}
