import logging
from datetime import datetime

import pytest

from core.domain import Task, parse_dependency_ids, serialize_dependency_ids
from infra.db.models import TaskORM
from infra.db.task.mapper import task_from_orm, task_to_orm

DUE = datetime(2025, 3, 20, 17, 0, 0)


@pytest.mark.parametrize(
    "raw",
    [None, "", "not json", "{\"a\": 1}", "[1, \"2\"]", "[true]", "3", 42, {"x": 1}],
)
def test_malformed_dependency_data_degrades_to_empty(raw):
    assert parse_dependency_ids(raw) == frozenset()


def test_malformed_dependency_data_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="core.domain.task"):
        parse_dependency_ids("[1,")

    assert "malformed dependency data" in caplog.text


def test_dependency_ids_parse_from_json_and_sequences():
    assert parse_dependency_ids("[3, 1, 3]") == frozenset({1, 3})
    assert parse_dependency_ids([2, 2, 5]) == frozenset({2, 5})
    assert serialize_dependency_ids([5, 2, 5]) == "[2, 5]"


def test_mapper_keeps_fields_and_stores_sorted_unique_ids():
    task = Task(id=7, title="Write docs", due_date=DUE, description="d", dependencies=[4, 2, 4])

    row = task_to_orm(task)

    assert row.id == 7
    assert row.dependencies == "[2, 4]"
    assert task_from_orm(row).dependencies == frozenset({2, 4})


def test_repository_roundtrip_and_corrupt_row(services, session):
    ts = services["task_service"]
    first = ts.create_task("First", DUE)
    second = ts.create_task("Second", DUE, description="  trimmed  ", dependencies=[first.id])

    session.add(TaskORM(title="Legacy", due_date=DUE, dependencies="oops"))
    session.commit()

    stored = {t.title: t for t in ts.list_tasks()}
    assert stored["Second"].description == "trimmed"
    assert stored["Second"].dependencies == frozenset({first.id})
    assert stored["Second"].created_at is not None
    assert stored["Legacy"].dependencies == frozenset()

    # a corrupt row never blocks scheduling
    result = services["scheduling_engine"].recalculate_schedule(now=datetime(2025, 3, 10))
    assert result.critical_path == [first.id, second.id]
