from datetime import datetime, timedelta

from core.domain import Task
from core.services.scheduling import compute_earliest_starts

NOW = datetime(2025, 3, 10, 9, 0, 0)


def _task(task_id: int, due_in_days: float, deps=()) -> Task:
    return Task(
        id=task_id,
        title=f"T{task_id}",
        due_date=NOW + timedelta(days=due_in_days),
        dependencies=deps,
    )


def test_dependency_free_future_task_starts_now():
    starts = compute_earliest_starts([_task(1, 10), _task(2, 3)], now=NOW)

    assert starts == {1: NOW, 2: NOW}


def test_overdue_task_clamps_to_its_due_date_and_ignores_dependencies():
    tasks = [_task(1, 10), _task(4, -1, [1])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[4] == NOW - timedelta(days=1)


def test_task_takes_latest_dependency_start():
    # 2 depends on an overdue task (start = its due date) and a fresh one (start = now)
    tasks = [_task(1, -5), _task(3, 4), _task(2, 7, [1, 3])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[1] == NOW - timedelta(days=5)
    assert starts[3] == NOW
    assert starts[2] == NOW


def test_dependency_on_overdue_task_only_can_start_in_the_past():
    tasks = [_task(1, -2), _task(2, 7, [1])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[2] == NOW - timedelta(days=2)


def test_dangling_dependency_ids_are_skipped():
    tasks = [_task(1, -3), _task(2, 5, [1, 999]), _task(3, 5, [999])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[2] == NOW - timedelta(days=3)
    # only dead edges: treated as dependency-free
    assert starts[3] == NOW


def test_scenario_chain_is_non_decreasing():
    tasks = [_task(1, 10), _task(2, 5, [1]), _task(3, 15, [1, 2])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[1] == NOW
    assert starts[2] >= starts[1]
    assert starts[3] >= starts[2]


def test_now_defaults_to_one_sample_per_pass():
    far_future = datetime(2999, 1, 1)
    tasks = [Task(id=i, title=f"T{i}", due_date=far_future) for i in range(1, 50)]
    before = datetime.now()

    starts = compute_earliest_starts(tasks)

    assert len(set(starts.values())) == 1
    assert next(iter(starts.values())) >= before


def test_cycle_upstream_does_not_loop_forever():
    tasks = [_task(1, 5, [2]), _task(2, 5, [1])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts == {1: NOW, 2: NOW}


def test_diamond_shares_sub_dependencies():
    # 4 depends on 2 and 3, both depend on 1
    tasks = [_task(1, -1), _task(2, 5, [1]), _task(3, 5, [1]), _task(4, 5, [2, 3])]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[4] == NOW - timedelta(days=1)


def test_deep_chain_is_iterative():
    size = 20_000
    tasks = [_task(1, -1)] + [_task(i, 30, [i - 1]) for i in range(2, size + 1)]

    starts = compute_earliest_starts(tasks, now=NOW)

    assert starts[size] == NOW - timedelta(days=1)
