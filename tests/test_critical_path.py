from datetime import datetime

from core.domain import Task
from core.services.scheduling import find_critical_path

DUE = datetime(2030, 1, 1)


def _task(task_id: int, deps=()) -> Task:
    return Task(id=task_id, title=f"T{task_id}", due_date=DUE, dependencies=deps)


def test_scenario_critical_path_is_full_chain():
    tasks = [_task(1), _task(2, [1]), _task(3, [1, 2])]

    assert find_critical_path(tasks) == [1, 2, 3]


def test_empty_input_has_empty_path():
    assert find_critical_path([]) == []


def test_isolated_tasks_pick_lowest_id():
    assert find_critical_path([_task(9), _task(4), _task(7)]) == [4]


def test_tie_break_does_not_depend_on_input_order():
    # two chains of length 2: 1 -> 2 and 3 -> 4
    tasks = [_task(3), _task(4, [3]), _task(1), _task(2, [1])]

    assert find_critical_path(tasks) == [1, 2]
    assert find_critical_path(list(reversed(tasks))) == [1, 2]


def test_only_one_of_tied_chains_is_reported():
    # 5 depends on 3 and 4 which both depend on 1: two maximal chains
    tasks = [_task(1), _task(3, [1]), _task(4, [1]), _task(5, [3, 4])]

    path = find_critical_path(tasks)

    assert path == [1, 3, 5]
    assert 4 not in path


def test_longest_chain_wins_over_more_tasks():
    tasks = [
        _task(1), _task(2, [1]), _task(3, [2]), _task(4, [3]),
        _task(10), _task(11, [10]), _task(12, [10]), _task(13, [10]),
    ]

    assert find_critical_path(tasks) == [1, 2, 3, 4]


def test_dangling_dependencies_do_not_extend_the_chain():
    tasks = [_task(1, [50]), _task(2, [1, 60])]

    assert find_critical_path(tasks) == [1, 2]


def test_path_length_matches_longest_chain_on_shared_sub_dependencies():
    # ladder of diamonds; naive re-expansion would be exponential
    tasks = [_task(0)]
    previous = 0
    next_id = 1
    for _ in range(60):
        left, right, join = next_id, next_id + 1, next_id + 2
        tasks += [_task(left, [previous]), _task(right, [previous]), _task(join, [left, right])]
        previous = join
        next_id += 3

    path = find_critical_path(tasks)

    assert len(path) == 1 + 60 * 2
    assert path[0] == 0
    assert path[-1] == previous


def test_broken_invariant_still_terminates():
    tasks = [_task(1, [2]), _task(2, [1]), _task(3, [2])]

    path = find_critical_path(tasks)

    # 2's dependency on 1 closes the loop and is dropped
    assert path == [2, 1]


def test_deep_chain_is_iterative():
    size = 20_000
    tasks = [_task(1)] + [_task(i, [i - 1]) for i in range(2, size + 1)]

    path = find_critical_path(tasks)

    assert len(path) == size
    assert path[0] == 1 and path[-1] == size
