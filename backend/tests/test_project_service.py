"""
Tests for ProjectService and TagService
"""
import pytest
from sqlalchemy.exc import InvalidRequestError, StatementError
from sqlalchemy.orm import selectinload

from portfolio.core.exceptions import (ConstraintKind, ConstraintViolation,
                                       NotFoundError)
from portfolio.models import Project, ProjectTag
from portfolio.schemas import (MessageCreate, ProjectCreate, ProjectRecord,
                               ProjectTagCreate, ProjectTagRecord, TagCreate,
                               validate_project, validate_tag)
from portfolio.services import MessageService, ProjectService, TagService


def _project(title="Portfolio", **kwargs):
    return ProjectCreate(
        title=title,
        description="Personal site",
        github="https://github.com/x/y",
        **kwargs,
    )


def test_create_project_end_to_end(db):
    """Validated form data -> stored project -> tag attached -> tags retrieved"""
    projects = ProjectService(db)
    tags = TagService(db)

    result = validate_project({
        "title": "Portfolio",
        "description": "...",
        "github": "https://github.com/x/y",
    })
    assert result.ok

    project = projects.create_project(result.value)
    record = ProjectRecord.model_validate(project)
    assert record.id is not None
    assert record.created_at is not None
    assert record.featured is False
    assert record.live_url is None

    tag = tags.create_tag(validate_tag({"name": "TypeScript"}).value)
    projects.add_tag(ProjectTagCreate(project_id=project.id, tag_id=tag.id))

    with_tags = projects.get_project_with_tags(project.id)
    assert [t.model_dump(include={"name", "color"}) for t in with_tags.tags] == [
        {"name": "TypeScript", "color": "gray"}
    ]


def test_create_project_with_initial_tags(db):
    tags = TagService(db)
    python = tags.create_tag(TagCreate(name="Python"))
    sql = tags.create_tag(TagCreate(name="SQL", color="blue"))

    service = ProjectService(db)
    project = service.create_project(_project(), tag_ids=[sql.id, python.id, sql.id])

    assert [t.name for t in service.get_tags(project.id)] == ["Python", "SQL"]


def test_create_project_with_unknown_tag_stores_nothing(db):
    service = ProjectService(db)

    with pytest.raises(ConstraintViolation) as exc_info:
        service.create_project(_project(), tag_ids=[999])

    assert exc_info.value.kind == ConstraintKind.FOREIGN_KEY
    assert exc_info.value.table == "project_tags"
    assert db.query(Project).count() == 0


def test_add_tag_with_unknown_tag_is_constraint_violation(db):
    service = ProjectService(db)
    project = service.create_project(_project())

    with pytest.raises(ConstraintViolation) as exc_info:
        service.add_tag(ProjectTagCreate(project_id=project.id, tag_id=12345))

    assert exc_info.value.kind == ConstraintKind.FOREIGN_KEY
    assert db.query(ProjectTag).count() == 0


def test_same_pair_twice_is_rejected(db):
    service = ProjectService(db)
    project = service.create_project(_project())
    tag = TagService(db).create_tag(TagCreate(name="Docker"))
    pair = ProjectTagCreate(project_id=project.id, tag_id=tag.id)

    service.add_tag(pair)
    with pytest.raises(ConstraintViolation) as exc_info:
        service.add_tag(pair)

    assert exc_info.value.kind == ConstraintKind.UNIQUE
    assert db.query(ProjectTag).count() == 1


def test_remove_tag(db):
    service = ProjectService(db)
    project = service.create_project(_project())
    tag = TagService(db).create_tag(TagCreate(name="CSS"))
    service.add_tag(ProjectTagCreate(project_id=project.id, tag_id=tag.id))

    assert service.remove_tag(project.id, tag.id) is True
    assert service.remove_tag(project.id, tag.id) is False
    assert service.get_tags(project.id) == []


def test_set_tags_replaces_tag_set(db):
    tags = TagService(db)
    a, b, c = (tags.create_tag(TagCreate(name=name)) for name in ("A", "B", "C"))
    service = ProjectService(db)
    project = service.create_project(_project(), tag_ids=[a.id, b.id])

    result = service.set_tags(project.id, [c.id, b.id])

    assert [t.name for t in result] == ["B", "C"]


def test_set_tags_failure_keeps_previous_tags(db):
    tags = TagService(db)
    a = tags.create_tag(TagCreate(name="A"))
    service = ProjectService(db)
    project = service.create_project(_project(), tag_ids=[a.id])

    with pytest.raises(ConstraintViolation):
        service.set_tags(project.id, [404])

    assert [t.name for t in service.get_tags(project.id)] == ["A"]


def test_tag_lists_its_projects(db):
    tag = TagService(db).create_tag(TagCreate(name="Python"))
    service = ProjectService(db)
    first = service.create_project(_project("First"), tag_ids=[tag.id])
    service.create_project(_project("Untagged"))
    third = service.create_project(_project("Third"), tag_ids=[tag.id])

    assert [p.id for p in TagService(db).get_projects(tag.id)] == [first.id, third.id]


def test_duplicate_tag_name_is_rejected(db):
    tags = TagService(db)
    tags.create_tag(TagCreate(name="Go"))

    with pytest.raises(ConstraintViolation) as exc_info:
        tags.create_tag(TagCreate(name="Go", color="cyan"))

    assert exc_info.value.kind == ConstraintKind.UNIQUE
    assert exc_info.value.table == "tags"
    assert tags.get_tag_by_name("Go").color == "gray"


def test_related_collections_are_never_lazy_loaded(db):
    service = ProjectService(db)
    tag = TagService(db).create_tag(TagCreate(name="Vue"))
    project = service.create_project(_project(), tag_ids=[tag.id])

    with pytest.raises(InvalidRequestError):
        project.tags

    db.expunge_all()
    loaded = (
        db.query(Project)
        .options(selectinload(Project.tags))
        .filter(Project.id == project.id)
        .one()
    )
    assert [t.name for t in loaded.tags] == ["Vue"]


def test_list_projects_featured_only(db):
    service = ProjectService(db)
    service.create_project(_project("Plain"))
    star = service.create_project(_project("Star", featured=True))

    assert [p.id for p in service.list_projects(featured_only=True)] == [star.id]
    assert len(service.list_projects()) == 2


def test_delete_project_removes_junction_rows(db):
    tag = TagService(db).create_tag(TagCreate(name="Svelte"))
    service = ProjectService(db)
    project = service.create_project(_project(), tag_ids=[tag.id])

    service.delete_project(project.id)

    assert service.get_project(project.id) is None
    assert db.query(ProjectTag).count() == 0
    assert TagService(db).get_tag(tag.id) is not None


def test_missing_project_raises_not_found(db):
    service = ProjectService(db)

    with pytest.raises(NotFoundError) as exc_info:
        service.get_project_with_tags(7)

    assert exc_info.value.to_dict() == {"error": "NotFoundError", "entity": "Project", "key": 7}
    assert service.get_project(7) is None


def test_create_project_unbindable_tag_id_leaves_nothing_pending(db):
    service = ProjectService(db)

    with pytest.raises(StatementError):
        service.create_project(_project(), tag_ids=[object()])
    MessageService(db).create_message(MessageCreate(name="n", email="e@x.io", message="m"))

    assert db.query(Project).count() == 0
    assert db.query(ProjectTag).count() == 0


def test_junction_row_reads_into_record(db):
    tag = TagService(db).create_tag(TagCreate(name="Go"))
    service = ProjectService(db)
    project = service.create_project(_project(), tag_ids=[tag.id])

    record = ProjectTagRecord.model_validate(db.query(ProjectTag).one())

    assert (record.project_id, record.tag_id) == (project.id, tag.id)
    assert record.model_dump(by_alias=True) == {"projectId": project.id, "tagId": tag.id}
