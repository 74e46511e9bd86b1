"""
Service for projects and their tag associations
"""
from typing import Iterable, List, Optional

from sqlalchemy import delete, insert
from sqlalchemy.exc import IntegrityError

from portfolio.core.logging_config import LoggingConfig
from portfolio.models.project import Project, ProjectTag, Tag
from portfolio.schemas.project import (ProjectCreate, ProjectRecord,
                                       ProjectTagCreate, ProjectWithTags,
                                       TagRecord)
from portfolio.services.base import BaseService

logger = LoggingConfig.get_logger(__name__)


def _unique_ids(tag_ids: Iterable[int]) -> List[int]:
    seen = []
    for tag_id in tag_ids:
        if tag_id not in seen:
            seen.append(tag_id)
    return seen


class ProjectService(BaseService):
    """
    Projects and the project_tags junction.

    Junction rows are written with Core INSERT/DELETE statements: a pair is
    never updated in place, only added or removed.
    """

    def create_project(self, data: ProjectCreate, tag_ids: Iterable[int] = ()) -> Project:
        """
        Create a project together with its initial tags

        Args:
            data: Validated insertable project
            tag_ids: Ids of existing tags to attach (duplicates ignored)

        Returns:
            The stored project

        Raises:
            ConstraintViolation: If any tag id does not exist; nothing is
                stored in that case
        """
        tag_ids = _unique_ids(tag_ids)

        with self._transaction():
            project = Project.from_create(data)
            self.db.add(project)
            self._flush("projects")

            if tag_ids:
                try:
                    self.db.execute(
                        insert(ProjectTag),
                        [{"project_id": project.id, "tag_id": tag_id} for tag_id in tag_ids],
                    )
                except IntegrityError as exc:
                    self._reject(exc, "project_tags")
            self._commit("project_tags" if tag_ids else "projects")
        self.db.refresh(project)

        logger.info(
            f"Created project {project.id} ({project.title})",
            extra={"tag_ids": tag_ids},
        )
        return project

    def get_project(self, project_id: int) -> Optional[Project]:
        return self.db.get(Project, project_id)

    def get_project_or_raise(self, project_id: int) -> Project:
        return self._get_or_raise(Project, project_id)

    def list_projects(self, featured_only: bool = False) -> List[Project]:
        """Newest first"""
        query = self.db.query(Project)
        if featured_only:
            query = query.filter(Project.featured.is_(True))
        return query.order_by(Project.created_at.desc(), Project.id.desc()).all()

    def get_tags(self, project_id: int) -> List[Tag]:
        """Tags of a project, joined through project_tags, by tag id"""
        return (
            self.db.query(Tag)
            .join(ProjectTag, ProjectTag.tag_id == Tag.id)
            .filter(ProjectTag.project_id == project_id)
            .order_by(Tag.id)
            .all()
        )

    def get_project_with_tags(self, project_id: int) -> ProjectWithTags:
        """
        Raises:
            NotFoundError: If the project does not exist
        """
        project = self.get_project_or_raise(project_id)
        # Project.tags is lazy="raise", so the record is built from columns only
        record = ProjectRecord.model_validate(project)
        return ProjectWithTags(
            **record.model_dump(),
            tags=[TagRecord.model_validate(tag) for tag in self.get_tags(project_id)],
        )

    def add_tag(self, data: ProjectTagCreate) -> None:
        """
        Attach a tag to a project

        Raises:
            ConstraintViolation: kind=unique if the pair already exists,
                kind=foreign_key if the project or tag does not exist
        """
        try:
            self.db.execute(insert(ProjectTag).values(project_id=data.project_id, tag_id=data.tag_id))
        except IntegrityError as exc:
            self._reject(exc, "project_tags")
        self._commit("project_tags")
        logger.info(f"Tagged project {data.project_id} with tag {data.tag_id}")

    def remove_tag(self, project_id: int, tag_id: int) -> bool:
        """Detach a tag; returns False if the pair did not exist"""
        result = self.db.execute(
            delete(ProjectTag).where(
                ProjectTag.project_id == project_id,
                ProjectTag.tag_id == tag_id,
            )
        )
        self._commit("project_tags")
        return result.rowcount > 0

    def set_tags(self, project_id: int, tag_ids: Iterable[int]) -> List[Tag]:
        """
        Replace the project's tag set in one transaction

        Raises:
            NotFoundError: If the project does not exist
            ConstraintViolation: If any tag id does not exist; the previous
                tag set is kept
        """
        self.get_project_or_raise(project_id)
        tag_ids = _unique_ids(tag_ids)

        with self._transaction():
            self.db.execute(delete(ProjectTag).where(ProjectTag.project_id == project_id))
            if tag_ids:
                try:
                    self.db.execute(
                        insert(ProjectTag),
                        [{"project_id": project_id, "tag_id": tag_id} for tag_id in tag_ids],
                    )
                except IntegrityError as exc:
                    self._reject(exc, "project_tags")
            self._commit("project_tags")

        logger.info(f"Replaced tags of project {project_id}", extra={"tag_ids": tag_ids})
        return self.get_tags(project_id)

    def delete_project(self, project_id: int) -> None:
        """Delete a project and its junction rows"""
        project = self.get_project_or_raise(project_id)
        self.db.execute(delete(ProjectTag).where(ProjectTag.project_id == project_id))
        self.db.delete(project)
        self._commit("projects")
        logger.info(f"Deleted project {project_id}")
