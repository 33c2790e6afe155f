import logging
from typing import Optional

from ..graph_build import ConflictGraph
from ..models import Course, SlotCounter

logger = logging.getLogger(__name__)


def first_fit(graph: ConflictGraph, course: Course, counter: SlotCounter) -> int:
    """Give ``course`` the lowest slot no coloured neighbour holds.

    Only slots below ``counter.max`` are tried; when all of them are taken
    the course opens a new slot and the counter grows.
    """
    neighbor_slots = {v.slot for v in graph.neighbors(course) if v.assigned}
    for c in range(counter.max):
        if c not in neighbor_slots:
            course.slot = c
            break
    else:
        course.slot = counter.grow()
    logger.debug("course %s -> slot %d (max=%d)", course.name, course.slot, counter.max)
    return course.slot


def color_all(graph: ConflictGraph, counter: Optional[SlotCounter] = None) -> SlotCounter:
    """Depth-first greedy colouring of every course in the graph.

    Courses are visited in insertion order. Each newly coloured course
    immediately colours its uncoloured neighbours, depth-first, before the
    outer pass moves on. The walk keeps a stack of neighbour iterators, so
    the visiting order matches a recursive walk without its depth limit.
    """
    if counter is None:
        counter = SlotCounter()
    for root in graph.courses():
        if root.assigned:
            continue
        first_fit(graph, root, counter)
        stack = [graph.neighbors(root)]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
            elif not nxt.assigned:
                first_fit(graph, nxt, counter)
                stack.append(graph.neighbors(nxt))
    logger.info("greedy colouring used %d slots", counter.max)
    return counter


def welsh_powell(graph: ConflictGraph, counter: Optional[SlotCounter] = None) -> SlotCounter:
    if counter is None:
        counter = SlotCounter()
    # sorted() is stable, so equal degrees keep insertion order
    nodes = sorted(graph.courses(), key=lambda u: graph.degree(u), reverse=True)
    for u in nodes:
        if not u.assigned:
            first_fit(graph, u, counter)
    logger.info("welsh-powell colouring used %d slots", counter.max)
    return counter
