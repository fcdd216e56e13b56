import heapq
import math
from typing import List, Optional, Tuple

from .models import StationGraph

# Distance reported for stations with no path from the source
UNREACHABLE = math.inf


class InvalidStationError(ValueError):
    pass


def _check_station(graph: StationGraph, station: int) -> None:
    if not (0 <= station < graph.size):
        raise InvalidStationError(
            f"Invalid station number {station}; expected 0 to {graph.size - 1}"
        )


def _dijkstra(graph: StationGraph, source: int) -> Tuple[List[float], List[Optional[int]]]:
    # Edge weights must be non-negative (enforced by StationGraph.add_edge)
    dist: List[float] = [UNREACHABLE] * graph.size
    prev: List[Optional[int]] = [None] * graph.size
    dist[source] = 0
    frontier = [(0, source)]
    while frontier:
        d, u = heapq.heappop(frontier)
        if d > dist[u]:
            continue  # stale entry
        for v, weight in graph.adjacency[u]:
            if d + weight < dist[v]:
                dist[v] = d + weight
                prev[v] = u
                heapq.heappush(frontier, (dist[v], v))
    return dist, prev


def shortest_distances(graph: StationGraph, source: int) -> List[float]:
    """Minimum travel cost from ``source`` to every station, in station order."""
    _check_station(graph, source)
    dist, _ = _dijkstra(graph, source)
    return dist


def shortest_route(graph: StationGraph, source: int, target: int) -> Tuple[Optional[List[int]], float]:
    """Cheapest station sequence from source to target and its cost; (None, UNREACHABLE) when there is no path."""
    _check_station(graph, source)
    _check_station(graph, target)
    dist, prev = _dijkstra(graph, source)
    if dist[target] == UNREACHABLE:
        return None, UNREACHABLE
    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path, dist[target]
