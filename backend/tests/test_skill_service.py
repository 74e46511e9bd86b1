"""
Tests for SkillService
"""
import pytest

from portfolio.core.exceptions import ConstraintKind, ConstraintViolation
from portfolio.schemas import SkillCreate, validate_skill
from portfolio.services import SkillService


def _skill(name, category="backend", **kwargs):
    return SkillCreate(name=name, icon=f"{name.lower()}.svg", category=category, **kwargs)


def test_order_defaults_to_zero(db):
    result = validate_skill({"name": "Python", "icon": "python.svg", "category": "backend"})
    skill = SkillService(db).create_skill(result.value)

    assert skill.order == 0
    assert skill.description is None


def test_list_skills_in_display_order(db):
    service = SkillService(db)
    sql = service.create_skill(_skill("SQL", order=1))
    python = service.create_skill(_skill("Python"))
    go = service.create_skill(_skill("Go"))
    react = service.create_skill(_skill("React", category="frontend"))

    assert [s.id for s in service.list_skills("backend")] == [python.id, go.id, sql.id]
    assert [s.id for s in service.list_skills()] == [python.id, go.id, react.id, sql.id]
    assert service.list_categories() == ["backend", "frontend"]


def test_skill_names_are_unique(db):
    service = SkillService(db)
    service.create_skill(_skill("Python"))

    with pytest.raises(ConstraintViolation) as exc_info:
        service.create_skill(_skill("Python", category="scripting"))

    assert exc_info.value.kind == ConstraintKind.UNIQUE
