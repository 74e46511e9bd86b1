"""
Projects, tags and the project/tag junction
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from portfolio.schemas.validation import (CreateSchema, RecordSchema,
                                          ValidationResult, validate_candidate)

DEFAULT_TAG_COLOR = "gray"


class ProjectCreate(CreateSchema):
    """Insertable project; ``featured`` falls back to False when omitted"""

    title: str
    description: str
    image: Optional[str] = None
    github: str
    live_url: Optional[str] = None
    featured: Optional[bool] = None


class TagCreate(CreateSchema):
    """Insertable tag; ``color`` falls back to "gray" when omitted"""

    name: str
    color: Optional[str] = None


class ProjectTagCreate(CreateSchema):
    project_id: int
    tag_id: int


class TagRecord(RecordSchema):
    id: int
    name: str
    color: Optional[str] = DEFAULT_TAG_COLOR


class ProjectRecord(RecordSchema):
    id: int
    title: str
    description: str
    image: Optional[str] = None
    github: str
    live_url: Optional[str] = None
    featured: Optional[bool] = False
    created_at: datetime


class ProjectTagRecord(RecordSchema):
    project_id: int
    tag_id: int


class ProjectWithTags(ProjectRecord):
    """Project plus its tags, assembled by ProjectService.get_project_with_tags"""

    tags: List[TagRecord] = Field(default_factory=list)


def validate_project(candidate: Any) -> ValidationResult[ProjectCreate]:
    return validate_candidate(ProjectCreate, candidate)


def validate_tag(candidate: Any) -> ValidationResult[TagCreate]:
    return validate_candidate(TagCreate, candidate)


def validate_project_tag(candidate: Any) -> ValidationResult[ProjectTagCreate]:
    return validate_candidate(ProjectTagCreate, candidate)
