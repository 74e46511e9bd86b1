"""
Service for skills
"""
from typing import List, Optional

from sqlalchemy import func

from portfolio.core.logging_config import LoggingConfig
from portfolio.models.skill import Skill
from portfolio.schemas.skill import SkillCreate
from portfolio.services.base import BaseService

logger = LoggingConfig.get_logger(__name__)


class SkillService(BaseService):

    def create_skill(self, data: SkillCreate) -> Skill:
        skill = Skill.from_create(data)
        self.db.add(skill)
        self._commit("skills")
        self.db.refresh(skill)

        logger.info(f"Created skill {skill.id} ({skill.name}) in {skill.category}")
        return skill

    def get_skill(self, skill_id: int) -> Optional[Skill]:
        return self.db.get(Skill, skill_id)

    def list_skills(self, category: Optional[str] = None) -> List[Skill]:
        """Skills in display order (order ascending, then id)"""
        query = self.db.query(Skill)
        if category is not None:
            query = query.filter(Skill.category == category)
        return query.order_by(func.coalesce(Skill.order, 0), Skill.id).all()

    def list_categories(self) -> List[str]:
        rows = self.db.query(Skill.category).distinct().order_by(Skill.category).all()
        return [row[0] for row in rows]
