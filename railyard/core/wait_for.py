from typing import List

from .models import Train

WaitForGraph = List[List[int]]


def build_wait_for_graph(trains: List[Train]) -> WaitForGraph:
    """Edge i -> j when train i waits for the track train j currently holds.

    Nodes are positions in ``trains``, not train ids. A waiting train gets one
    edge per holder of the track, so fan-out is possible. Rebuilt from scratch
    on every call.
    """
    graph: WaitForGraph = [[] for _ in trains]
    for i, waiter in enumerate(trains):
        if waiter.waiting_for_track is None:
            continue
        for j, holder in enumerate(trains):
            # a train never waits on itself
            if j == i:
                continue
            if holder.current_track == waiter.waiting_for_track:
                graph[i].append(j)
    return graph
