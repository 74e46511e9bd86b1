"""
Work and education entries and their bullet-point details
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from portfolio.schemas.validation import (CreateSchema, RecordSchema,
                                          ValidationResult, validate_candidate)


class ExperienceType(str, Enum):
    """Experience type enumeration"""
    WORK = "work"
    EDUCATION = "education"


class ExperienceCreate(CreateSchema):
    title: str
    subtitle: str
    date: Optional[str] = None  # free-form, e.g. "2019 - 2022"
    # Lax so the plain strings "work"/"education" are accepted
    type: ExperienceType = Field(strict=False)
    order: Optional[int] = None


class ExperienceDetailCreate(CreateSchema):
    experience_id: int
    detail: str
    order: Optional[int] = None


class ExperienceDetailRecord(RecordSchema):
    id: int
    experience_id: int
    detail: str
    order: Optional[int] = 0


class ExperienceRecord(RecordSchema):
    id: int
    title: str
    subtitle: str
    date: Optional[str] = None
    type: str
    order: Optional[int] = 0


class ExperienceWithDetails(ExperienceRecord):
    details: List[ExperienceDetailRecord] = Field(default_factory=list)


def validate_experience(candidate: Any) -> ValidationResult[ExperienceCreate]:
    return validate_candidate(ExperienceCreate, candidate)


def validate_experience_detail(candidate: Any) -> ValidationResult[ExperienceDetailCreate]:
    return validate_candidate(ExperienceDetailCreate, candidate)
