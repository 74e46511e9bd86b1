"""
Project, Tag and ProjectTag models

Projects and tags are many-to-many through the project_tags junction table,
whose (project_id, tag_id) pair is the primary key.

Relationships are declared with lazy="raise": related collections are only
ever fetched by an explicit query (see ProjectService / TagService) or an
explicit loader option such as selectinload(Project.tags).
"""
from sqlalchemy import (Boolean, Column, DateTime, ForeignKey, Integer, Text,
                        func)
from sqlalchemy.orm import relationship
from sqlalchemy.sql.expression import false

from portfolio.core.database import Base
from portfolio.schemas.project import (DEFAULT_TAG_COLOR, ProjectCreate,
                                       ProjectTagCreate, TagCreate)
from portfolio.utils.datetime_utils import utc_now


class ProjectTag(Base):
    """Junction row linking one project to one tag"""
    __tablename__ = "project_tags"

    project_id = Column(Integer, ForeignKey("projects.id"), primary_key=True, nullable=False)
    tag_id = Column(Integer, ForeignKey("tags.id"), primary_key=True, nullable=False)

    @classmethod
    def from_create(cls, data: ProjectTagCreate) -> "ProjectTag":
        return cls(project_id=data.project_id, tag_id=data.tag_id)

    def __repr__(self):
        return f"<ProjectTag(project_id={self.project_id}, tag_id={self.tag_id})>"


class Project(Base):
    """Portfolio project"""
    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image = Column(Text, nullable=True)
    github = Column(Text, nullable=False)
    live_url = Column(Text, nullable=True)
    featured = Column(Boolean, default=False, server_default=false())
    created_at = Column(DateTime, nullable=False, default=utc_now, server_default=func.now())

    # Relationships
    tags = relationship(
        "Tag",
        secondary="project_tags",
        viewonly=True,
        lazy="raise",
        order_by="Tag.id",
    )

    @classmethod
    def from_create(cls, data: ProjectCreate) -> "Project":
        return cls(
            title=data.title,
            description=data.description,
            image=data.image,
            github=data.github,
            live_url=data.live_url,
            featured=bool(data.featured),
            created_at=utc_now(),
        )

    def __repr__(self):
        return f"<Project(id={self.id}, title={self.title}, featured={self.featured})>"


class Tag(Base):
    """Project tag; name is globally unique"""
    __tablename__ = "tags"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    color = Column(Text, default=DEFAULT_TAG_COLOR, server_default=DEFAULT_TAG_COLOR)

    # Relationships
    projects = relationship(
        "Project",
        secondary="project_tags",
        viewonly=True,
        lazy="raise",
        order_by="Project.id",
    )

    @classmethod
    def from_create(cls, data: TagCreate) -> "Tag":
        return cls(
            name=data.name,
            color=data.color if data.color is not None else DEFAULT_TAG_COLOR,
        )

    def __repr__(self):
        return f"<Tag(id={self.id}, name={self.name}, color={self.color})>"
