from ..graph_build import ConflictGraph
from ..models import SlotCounter
from .validation import conflicts_ok, slots_in_range


def greedy_clique_lb(graph: ConflictGraph) -> int:
    """Fast lower bound on the number of slots via a greedy maximal clique.

    Starts from the highest-degree course and keeps adding the highest-degree
    candidate adjacent to every course already in the clique.
    """
    G = graph.G
    if G.number_of_nodes() == 0:
        return 0
    seed = max(G.nodes(), key=lambda u: G.degree(u))
    clique = {seed}
    candidates = set(G.neighbors(seed))
    while candidates:
        u = max(candidates, key=lambda v: (G.degree(v), v))
        clique.add(u)
        candidates = candidates.intersection(G.neighbors(u))
    return len(clique)


def summary(graph: ConflictGraph, counter: SlotCounter) -> str:
    used = len({c.slot for c in graph.courses() if c.assigned})
    lb = greedy_clique_lb(graph)
    return (
        f"Courses: {len(graph)}  Conflicts: {graph.number_of_conflicts()}  Students: {len(graph.students)}\n"
        f"Slots used: {used}  Slot budget: {counter.max}\n"
        f"Clique lower bound: {lb}\n"
        f"Valid (conflicts): {conflicts_ok(graph)}  Valid (range): {slots_in_range(graph, counter)}\n"
    )
