"""
User accounts

The password is stored as supplied; callers hash it before it gets here.
"""

from __future__ import annotations

from typing import Any

from portfolio.schemas.validation import (CreateSchema, RecordSchema,
                                          ValidationResult, validate_candidate)


class UserCreate(CreateSchema):
    username: str
    password: str


class UserRecord(RecordSchema):
    id: int
    username: str
    password: str


def validate_user(candidate: Any) -> ValidationResult[UserCreate]:
    return validate_candidate(UserCreate, candidate)
