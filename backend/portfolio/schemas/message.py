"""
Contact messages
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from portfolio.schemas.validation import (CreateSchema, RecordSchema,
                                          ValidationResult, validate_candidate)


class MessageCreate(CreateSchema):
    """Contact-form submission"""

    name: str
    email: str
    subject: Optional[str] = None
    message: str


class MessageRecord(RecordSchema):
    id: int
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    created_at: datetime


def validate_message(candidate: Any) -> ValidationResult[MessageCreate]:
    return validate_candidate(MessageCreate, candidate)
