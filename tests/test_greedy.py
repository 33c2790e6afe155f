import random

import pytest

import examslots.algorithms.greedy as greedy
from examslots.algorithms.greedy import color_all, first_fit
from examslots.graph_build import build_conflict_graph
from examslots.models import SlotCounter
from examslots.scheduling.assign_timeslots import assign_slots
from examslots.scheduling.validation import conflicts_ok, slots_in_range

TRIANGLE = [
    ("S1", ["Math", "Phys"]),
    ("S2", ["Phys", "Chem"]),
    ("S3", ["Math", "Chem"]),
]


def random_records(n_students, n_courses, per_student=4, seed=0):
    rng = random.Random(seed)
    courses = [f"C{i}" for i in range(n_courses)]
    return [(f"stu{i}", rng.sample(courses, per_student)) for i in range(n_students)]


def slots(G):
    return {c.name: c.slot for c in G.courses()}


def test_triangle_needs_three_slots():
    G = build_conflict_graph(TRIANGLE)
    counter = color_all(G)
    assert slots(G) == {"Math": 0, "Phys": 1, "Chem": 2}
    assert counter.max == 3


def test_isolated_course_takes_slot_zero():
    G = build_conflict_graph([("Ann", ["Math"])])
    counter = color_all(G)
    assert G.get_course("Math").slot == 0
    assert counter.max == 1


def test_path_reuses_slots():
    G = build_conflict_graph([("a", ["A", "B"]), ("b", ["B", "C"]), ("c", ["C", "D"])])
    counter = color_all(G)
    assert slots(G) == {"A": 0, "B": 1, "C": 0, "D": 1}
    assert counter.max == 2


def test_coloring_propagates_depth_first(monkeypatch):
    # A-B, A-C, B-D, C-D: B is coloured after A, then D before C
    G = build_conflict_graph([("x", ["A", "B"]), ("y", ["A", "C"]), ("z", ["B", "D"]), ("w", ["C", "D"])])
    order = []

    def spy(graph, course, counter):
        order.append(course.name)
        return first_fit(graph, course, counter)

    monkeypatch.setattr(greedy, "first_fit", spy)
    color_all(G)
    assert order == ["A", "B", "D", "C"]


def test_deep_chain_does_not_recurse():
    n = 5000
    records = [(f"s{i}", [f"C{i}", f"C{i + 1}"]) for i in range(n)]
    G = build_conflict_graph(records)
    counter = color_all(G)
    assert counter.max == 2
    assert conflicts_ok(G)


def test_counter_is_shared_and_only_grows():
    counter = SlotCounter(max=3)
    G = build_conflict_graph([("Ann", ["A", "B"])])
    color_all(G, counter)
    assert counter.max == 3
    assert slots(G) == {"A": 0, "B": 1}


def test_first_fit_grows_only_when_forced():
    G = build_conflict_graph(TRIANGLE)
    counter = SlotCounter()
    math, phys, chem = G.courses()
    first_fit(G, math, counter)
    assert counter.max == 1
    first_fit(G, phys, counter)
    assert (phys.slot, counter.max) == (1, 2)
    chem.slot = -1
    math.slot = 1
    first_fit(G, chem, counter)
    assert (chem.slot, counter.max) == (0, 2)


def test_already_assigned_courses_are_kept():
    G = build_conflict_graph(TRIANGLE)
    G.get_course("Chem").slot = 0
    counter = color_all(G, SlotCounter(max=1))
    assert G.get_course("Chem").slot == 0
    assert conflicts_ok(G)
    assert slots_in_range(G, counter)
    assert counter.max == 3


def test_deterministic():
    records = random_records(60, 25, seed=7)
    first = build_conflict_graph(records)
    second = build_conflict_graph(records)
    color_all(first)
    color_all(second)
    assert slots(first) == slots(second)


@pytest.mark.parametrize("algo", ["greedy", "welsh_powell", "dsatur"])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_invariants_hold_for_every_algorithm(algo, seed):
    G = build_conflict_graph(random_records(80, 30, seed=seed))
    counter = assign_slots(G, algo=algo)
    assert all(c.assigned for c in G.courses())
    assert conflicts_ok(G)
    assert slots_in_range(G, counter)


def test_unknown_algorithm():
    G = build_conflict_graph(TRIANGLE)
    with pytest.raises(ValueError):
        assign_slots(G, algo="tabu")
