from typing import Optional

from ..graph_build import ConflictGraph
from ..models import SlotCounter
from ..algorithms.greedy import color_all, welsh_powell
from ..algorithms.dsatur import dsatur

ALGORITHMS = {
    'greedy': color_all,
    'welsh_powell': welsh_powell,
    'dsatur': dsatur,
}


def assign_slots(graph: ConflictGraph, algo: str = 'greedy', counter: Optional[SlotCounter] = None) -> SlotCounter:
    try:
        colorer = ALGORITHMS[algo]
    except KeyError:
        raise ValueError(f"algo must be one of {', '.join(ALGORITHMS)}; got {algo!r}") from None
    return colorer(graph, counter if counter is not None else SlotCounter())
