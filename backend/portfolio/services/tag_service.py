"""
Service for project tags
"""
from typing import List, Optional

from portfolio.core.logging_config import LoggingConfig
from portfolio.models.project import Project, ProjectTag, Tag
from portfolio.schemas.project import TagCreate
from portfolio.services.base import BaseService

logger = LoggingConfig.get_logger(__name__)


class TagService(BaseService):

    def create_tag(self, data: TagCreate) -> Tag:
        """
        Create a tag

        Raises:
            ConstraintViolation: If a tag with this name exists (kind=unique)
        """
        tag = Tag.from_create(data)
        self.db.add(tag)
        self._commit("tags")
        self.db.refresh(tag)

        logger.info(f"Created tag {tag.id} ({tag.name})")
        return tag

    def get_tag(self, tag_id: int) -> Optional[Tag]:
        return self.db.get(Tag, tag_id)

    def get_tag_or_raise(self, tag_id: int) -> Tag:
        return self._get_or_raise(Tag, tag_id)

    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        return self.db.query(Tag).filter(Tag.name == name).first()

    def list_tags(self) -> List[Tag]:
        return self.db.query(Tag).order_by(Tag.name).all()

    def get_projects(self, tag_id: int) -> List[Project]:
        """Projects carrying the tag, joined through project_tags, by project id"""
        return (
            self.db.query(Project)
            .join(ProjectTag, ProjectTag.project_id == Project.id)
            .filter(ProjectTag.tag_id == tag_id)
            .order_by(Project.id)
            .all()
        )
