"""
Tests for insertable-shape validators
"""
import pytest

from portfolio.schemas import (CREATE_SCHEMAS, ExperienceType, FieldErrorKind,
                               ProjectCreate, errors_to_dict, validate,
                               validate_experience, validate_message,
                               validate_project, validate_project_tag,
                               validate_skill, validate_tag)

REQUIRED_CANDIDATES = {
    "message": {"name": "Ada", "email": "ada@example.com", "message": "Hello there"},
    "user": {"username": "admin", "password": "$2b$12$hashed"},
    "project": {"title": "Portfolio", "description": "My site", "github": "https://github.com/x/y"},
    "tag": {"name": "TypeScript"},
    "project_tag": {"project_id": 1, "tag_id": 2},
    "skill": {"name": "Python", "icon": "python.svg", "category": "backend"},
    "experience": {"title": "Engineer", "subtitle": "ACME", "type": "work"},
    "experience_detail": {"experience_id": 1, "detail": "Shipped things"},
}


def test_every_entity_has_a_candidate():
    assert set(REQUIRED_CANDIDATES) == set(CREATE_SCHEMAS)


@pytest.mark.parametrize("entity", sorted(REQUIRED_CANDIDATES))
def test_required_fields_only_succeeds(entity):
    """Exactly the required fields validate and come back unchanged"""
    candidate = REQUIRED_CANDIDATES[entity]
    result = validate(entity, candidate)

    assert result.ok
    assert result.errors == []
    assert result.value.model_dump(exclude_unset=True) == candidate


@pytest.mark.parametrize(
    "entity,field",
    [(entity, field) for entity, candidate in sorted(REQUIRED_CANDIDATES.items()) for field in candidate],
)
def test_missing_required_field_is_named(entity, field):
    candidate = dict(REQUIRED_CANDIDATES[entity])
    del candidate[field]

    result = validate(entity, candidate)

    assert not result.ok
    assert result.value is None
    assert field in result.error_fields()
    error = next(e for e in result.errors if e.field == field)
    assert error.kind == FieldErrorKind.MISSING


def test_wrong_primitive_types_are_reported():
    result = validate_project({
        "title": 42,
        "description": "desc",
        "github": "https://github.com/x/y",
        "featured": "true",
    })

    assert not result.ok
    kinds = {e.field: e.kind for e in result.errors}
    assert kinds == {"title": FieldErrorKind.WRONG_TYPE, "featured": FieldErrorKind.WRONG_TYPE}


def test_numeric_strings_are_not_coerced():
    result = validate_skill({"name": "Go", "icon": "go.svg", "category": "backend", "order": "1"})

    assert not result.ok
    assert result.error_fields() == ["order"]
    assert result.errors[0].kind == FieldErrorKind.WRONG_TYPE


def test_null_for_required_field_is_wrong_type():
    result = validate_message({"name": None, "email": "a@b.c", "message": "hi"})

    assert result.error_fields() == ["name"]
    assert result.errors[0].kind == FieldErrorKind.WRONG_TYPE


def test_optional_fields_accept_null():
    result = validate_message({"name": "Ada", "email": "a@b.c", "message": "hi", "subject": None})

    assert result.ok
    assert result.value.subject is None


def test_camel_case_keys_accepted():
    result = validate_project({
        "title": "Portfolio",
        "description": "desc",
        "github": "https://github.com/x/y",
        "liveUrl": "https://example.com",
    })

    assert result.ok
    assert result.value.live_url == "https://example.com"
    assert result.value.model_dump(by_alias=True, exclude_unset=True)["liveUrl"] == "https://example.com"


def test_camel_case_missing_key_reports_python_name():
    result = validate_project_tag({"projectId": 3})

    assert result.error_fields() == ["tag_id"]


def test_generated_fields_are_dropped():
    """id and created_at cannot be set by callers"""
    candidate = dict(REQUIRED_CANDIDATES["message"], id=99, created_at="2020-01-01", createdAt="x")
    result = validate_message(candidate)

    assert result.ok
    dumped = result.value.model_dump()
    assert "id" not in dumped
    assert "created_at" not in dumped


def test_experience_type_must_be_work_or_education():
    base = {"title": "Engineer", "subtitle": "ACME"}

    assert validate_experience(dict(base, type="education")).value.type == ExperienceType.EDUCATION

    result = validate_experience(dict(base, type="freelance"))
    assert not result.ok
    assert result.errors[0].field == "type"
    assert result.errors[0].kind == FieldErrorKind.INVALID_VALUE


def test_experience_type_of_wrong_type():
    result = validate_experience({"title": "Engineer", "subtitle": "ACME", "type": 5})

    assert not result.ok
    assert result.errors[0].field == "type"
    assert result.errors[0].kind == FieldErrorKind.WRONG_TYPE


def test_non_mapping_candidate():
    result = validate_tag(["TypeScript"])

    assert not result.ok
    assert result.error_fields() == ["__root__"]
    assert result.errors[0].kind == FieldErrorKind.WRONG_TYPE


def test_validate_accepts_schema_class():
    result = validate(ProjectCreate, REQUIRED_CANDIDATES["project"])
    assert result.ok
    assert result.value.featured is None


def test_unknown_entity_is_a_programming_error():
    with pytest.raises(KeyError):
        validate("invoice", {})


def test_errors_to_dict_groups_by_field():
    result = validate_message({"email": 5})
    grouped = errors_to_dict(result)

    assert set(grouped) == {"name", "email", "message"}
    assert all(isinstance(messages, list) and messages for messages in grouped.values())
