import logging
from typing import Dict, Optional, Set

from ..graph_build import ConflictGraph
from ..models import SlotCounter
from .greedy import first_fit

logger = logging.getLogger(__name__)


def dsatur(graph: ConflictGraph, counter: Optional[SlotCounter] = None) -> SlotCounter:
    """DSATUR: always colour the course whose neighbours use the most slots.

    Ties go to the higher degree, then to the earlier course.
    """
    if counter is None:
        counter = SlotCounter()
    order: Dict[str, int] = {}
    saturation: Dict[str, Set[int]] = {}
    for i, u in enumerate(graph.courses()):
        order[u.name] = i
        saturation[u.name] = {v.slot for v in graph.neighbors(u) if v.assigned}
    uncolored = [u for u in graph.courses() if not u.assigned]
    while uncolored:
        u = max(uncolored, key=lambda x: (len(saturation[x.name]), graph.degree(x), -order[x.name]))
        uncolored.remove(u)
        c = first_fit(graph, u, counter)
        for v in graph.neighbors(u):
            if not v.assigned:
                saturation[v.name].add(c)
    logger.info("dsatur colouring used %d slots", counter.max)
    return counter
