"""
Insertable and persisted shapes for every entity, plus their validators
"""
from typing import Any, Dict, Type, Union

from portfolio.schemas.experience import (ExperienceCreate,
                                          ExperienceDetailCreate,
                                          ExperienceDetailRecord,
                                          ExperienceRecord, ExperienceType,
                                          ExperienceWithDetails,
                                          validate_experience,
                                          validate_experience_detail)
from portfolio.schemas.message import (MessageCreate, MessageRecord,
                                       validate_message)
from portfolio.schemas.project import (DEFAULT_TAG_COLOR, ProjectCreate,
                                       ProjectRecord, ProjectTagCreate,
                                       ProjectTagRecord, ProjectWithTags,
                                       TagCreate, TagRecord, validate_project,
                                       validate_project_tag, validate_tag)
from portfolio.schemas.skill import SkillCreate, SkillRecord, validate_skill
from portfolio.schemas.user import UserCreate, UserRecord, validate_user
from portfolio.schemas.validation import (CreateSchema, FieldError,
                                          FieldErrorKind, RecordSchema,
                                          ValidationResult, errors_to_dict,
                                          validate_candidate)

# Entity name -> insertable shape
CREATE_SCHEMAS: Dict[str, Type[CreateSchema]] = {
    "message": MessageCreate,
    "user": UserCreate,
    "project": ProjectCreate,
    "tag": TagCreate,
    "project_tag": ProjectTagCreate,
    "skill": SkillCreate,
    "experience": ExperienceCreate,
    "experience_detail": ExperienceDetailCreate,
}


def validate(entity: Union[str, Type[CreateSchema]], candidate: Any) -> ValidationResult:
    """Validate ``candidate`` against the insertable shape of ``entity``.

    Raises:
        KeyError: If ``entity`` names no known entity (a programming error,
            not malformed input)
    """
    schema = CREATE_SCHEMAS[entity] if isinstance(entity, str) else entity
    return validate_candidate(schema, candidate)


__all__ = [
    "CREATE_SCHEMAS",
    "validate",
    # Validation
    "CreateSchema",
    "RecordSchema",
    "FieldError",
    "FieldErrorKind",
    "ValidationResult",
    "validate_candidate",
    "errors_to_dict",
    # Messages
    "MessageCreate",
    "MessageRecord",
    "validate_message",
    # Users
    "UserCreate",
    "UserRecord",
    "validate_user",
    # Projects and tags
    "DEFAULT_TAG_COLOR",
    "ProjectCreate",
    "ProjectRecord",
    "ProjectWithTags",
    "TagCreate",
    "TagRecord",
    "ProjectTagCreate",
    "ProjectTagRecord",
    "validate_project",
    "validate_tag",
    "validate_project_tag",
    # Skills
    "SkillCreate",
    "SkillRecord",
    "validate_skill",
    # Experiences
    "ExperienceType",
    "ExperienceCreate",
    "ExperienceRecord",
    "ExperienceWithDetails",
    "ExperienceDetailCreate",
    "ExperienceDetailRecord",
    "validate_experience",
    "validate_experience_detail",
]
