from ..graph_build import ConflictGraph
from ..models import SlotCounter


def conflicts_ok(graph: ConflictGraph) -> bool:
    for a, b, _ in graph.conflicts():
        if a.slot == b.slot:
            return False
    return True


def slots_in_range(graph: ConflictGraph, counter: SlotCounter) -> bool:
    return all(0 <= c.slot < counter.max for c in graph.courses())
