"""Read-only views over a coloured conflict graph.

Slots are 0-based in the views and 1-based in the formatted lines.
"""
from typing import Dict, List, Tuple

from ..errors import require
from ..graph_build import ConflictGraph
from ..models import SlotCounter, Student

SlotRow = Tuple[int, List[str]]
RosterRow = Tuple[str, int, List[str]]
ScheduleRow = Tuple[str, List[int]]


def slot_view(graph: ConflictGraph, counter: SlotCounter) -> List[SlotRow]:
    buckets: List[List[str]] = [[] for _ in range(counter.max)]
    for c in graph.courses():
        require(0 <= c.slot < counter.max, f"course {c.name} has slot {c.slot} outside [0, {counter.max})")
        buckets[c.slot].append(c.name)
    return [(slot, names) for slot, names in enumerate(buckets) if names]


def roster_view(graph: ConflictGraph) -> List[RosterRow]:
    """Courses with the students taking them, alphabetical by course.

    Built from edge labels, so a course that shares no student with any
    other course does not show up.
    """
    rosters: Dict[str, List[Student]] = {}
    slots: Dict[str, int] = {}
    for _, _, students in graph.conflicts():
        for s in students:
            for c in s.courses:
                roster = rosters.setdefault(c.name, [])
                slots[c.name] = c.slot
                if not any(r is s for r in roster):
                    roster.append(s)
    return [(name, slots[name], [s.name for s in rosters[name]]) for name in sorted(rosters)]


def schedule_view(graph: ConflictGraph) -> List[ScheduleRow]:
    seen: Dict[str, Student] = {}
    for _, _, students in graph.conflicts():
        for s in students:
            seen.setdefault(s.name, s)
    return [(s.name, [c.slot for c in s.courses]) for s in sorted(seen.values())]


def format_slot_view(rows: List[SlotRow]) -> List[str]:
    return [f"Slot {slot + 1}: {' '.join(names)}" for slot, names in rows]


def format_roster_view(rows: List[RosterRow]) -> List[str]:
    return [f"{name} @ slot {slot + 1} students: {' '.join(students)}" for name, slot, students in rows]


def format_schedule_view(rows: List[ScheduleRow]) -> List[str]:
    return [f"{name}: {' '.join(str(s + 1) for s in slots)}" for name, slots in rows]


def render_report(graph: ConflictGraph, counter: SlotCounter) -> str:
    blocks = [
        format_slot_view(slot_view(graph, counter)),
        format_roster_view(roster_view(graph)),
        format_schedule_view(schedule_view(graph)),
    ]
    return "\n\n".join("\n".join(lines) for lines in blocks)
