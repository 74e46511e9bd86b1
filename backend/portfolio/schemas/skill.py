"""
Skills shown on the portfolio, grouped by category
"""

from __future__ import annotations

from typing import Any, Optional

from portfolio.schemas.validation import (CreateSchema, RecordSchema,
                                          ValidationResult, validate_candidate)


class SkillCreate(CreateSchema):
    name: str
    icon: str
    category: str
    description: Optional[str] = None
    order: Optional[int] = None


class SkillRecord(RecordSchema):
    id: int
    name: str
    icon: str
    category: str
    description: Optional[str] = None
    order: Optional[int] = 0


def validate_skill(candidate: Any) -> ValidationResult[SkillCreate]:
    return validate_candidate(SkillCreate, candidate)
