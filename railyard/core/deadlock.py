"""Deadlock detection and mitigation over a wait-for graph.

The search is an iterative depth-first traversal with an explicit stack and a
tri-state visitation array. When an edge reaches a node that is still
``IN_PROGRESS`` the graph has a cycle, and the nodes on the stack at that
moment form the live traversal path. The resolver picks its victim from that
path.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import List, Optional, Tuple

from .models import DEADLOCK_DELAY, DeadlockReport, Minutes, Train

logger = logging.getLogger(__name__)


class VisitState(IntEnum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


def _search(graph: List[List[int]]) -> Tuple[Optional[List[int]], List[VisitState]]:
    state = [VisitState.UNVISITED] * len(graph)
    for root in range(len(graph)):
        if state[root] != VisitState.UNVISITED:
            continue
        state[root] = VisitState.IN_PROGRESS
        # (node, index of next successor to explore)
        stack: List[Tuple[int, int]] = [(root, 0)]
        while stack:
            node, k = stack[-1]
            successors = graph[node]
            if k == len(successors):
                state[node] = VisitState.DONE
                stack.pop()
                continue
            stack[-1] = (node, k + 1)
            nxt = successors[k]
            if state[nxt] == VisitState.IN_PROGRESS:
                return [n for n, _ in stack], state
            if state[nxt] == VisitState.UNVISITED:
                state[nxt] = VisitState.IN_PROGRESS
                stack.append((nxt, 0))
    return None, state


def find_search_path(graph: List[List[int]]) -> Optional[List[int]]:
    """Return the traversal path (root first) at the first back-edge, or None."""
    path, _ = _search(graph)
    return path


def has_cycle(graph: List[List[int]]) -> bool:
    return find_search_path(graph) is not None


def resolve_deadlock(graph: List[List[int]], trains: List[Train], delay: Minutes = DEADLOCK_DELAY) -> DeadlockReport:
    """Delay one train on the first detected cycle's path.

    Single step only: the victim is the lowest-index train marked in progress
    when the cycle is found, and only its ``departure_time`` changes. Track
    fields are untouched, so calling this again on the same data picks the
    same victim.
    """
    path, state = _search(graph)
    if path is None:
        logger.info("No deadlock detected to resolve.")
        return DeadlockReport(deadlocked=False)
    logger.warning("Deadlock detected. Resolving...")
    victim = next(i for i, s in enumerate(state) if s == VisitState.IN_PROGRESS)
    train = trains[victim]
    train.departure_time += delay
    logger.warning("Train %s delayed by %d minutes.", train.id, delay)
    return DeadlockReport(
        deadlocked=True,
        victim_index=victim,
        victim_id=train.id,
        delay=delay,
        search_path=path,
    )
