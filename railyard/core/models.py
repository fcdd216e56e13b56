from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Minutes = int

# Track/platform value used by train record files for "none"; never stored on a Train
NO_TRACK = -1
# Departure delay applied to a deadlock victim
DEADLOCK_DELAY: Minutes = 5


@dataclass
class Train:
    id: int
    arrival_time: Minutes
    departure_time: Minutes
    platform: Optional[int] = None  # set by the platform scheduler
    capacity: int = 0
    available_seats: int = 0
    current_track: Optional[int] = None
    waiting_for_track: Optional[int] = None
    # Carried for record compatibility; no algorithm reads it
    priority: int = 0

    @property
    def is_waiting(self) -> bool:
        return self.waiting_for_track is not None


@dataclass
class Station:
    id: int
    name: str


@dataclass
class Route:
    train_id: int
    stations: List[int]
    arrival_times: List[Minutes]
    departure_times: List[Minutes]


@dataclass
class StationGraph:
    # adjacency[u] = [(v, weight), ...]
    adjacency: List[List[Tuple[int, int]]] = field(default_factory=list)

    @classmethod
    def with_stations(cls, count: int) -> "StationGraph":
        return cls(adjacency=[[] for _ in range(count)])

    @property
    def size(self) -> int:
        return len(self.adjacency)

    def add_edge(self, src: int, dst: int, weight: int) -> None:
        if not (0 <= src < self.size and 0 <= dst < self.size):
            raise ValueError(f"Edge {src}->{dst} references an unknown station")
        if weight < 0:
            raise ValueError(f"Edge {src}->{dst} has negative weight {weight}")
        self.adjacency[src].append((dst, weight))

    def edges(self) -> List[Tuple[int, int, int]]:
        return [(u, v, w) for u, out in enumerate(self.adjacency) for v, w in out]


@dataclass
class DeadlockReport:
    deadlocked: bool
    victim_index: Optional[int] = None
    victim_id: Optional[int] = None
    delay: Minutes = 0
    # Trains (by index) on the DFS stack at the back edge; may start with a lead-in not on the cycle
    search_path: List[int] = field(default_factory=list)
