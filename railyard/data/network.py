import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from railyard.core.models import Route, Station, StationGraph


@dataclass
class NetworkTables:
    stations: List[Station]
    routes: List[Route]
    graph: StationGraph
    # Static per-train maintenance task durations
    maintenance_tasks: List[int] = field(default_factory=list)

    def station_name(self, sid: int) -> str:
        for s in self.stations:
            if s.id == sid:
                return s.name
        return "Unknown"

    def route_for(self, train_id: int) -> Optional[Route]:
        for r in self.routes:
            if r.train_id == train_id:
                return r
        return None


def default_network() -> NetworkTables:
    stations = [Station(0, "Station A"), Station(1, "Station B"), Station(2, "Station C")]
    routes = [
        Route(train_id=0, stations=[0, 1, 2], arrival_times=[10, 15, 20], departure_times=[20, 25, 30]),
        Route(train_id=1, stations=[0, 1], arrival_times=[15, 20], departure_times=[25, 30]),
        Route(train_id=2, stations=[1, 2], arrival_times=[20, 30], departure_times=[30, 40]),
    ]
    graph = StationGraph.with_stations(len(stations))
    graph.add_edge(0, 1, 5)
    graph.add_edge(1, 2, 10)
    return NetworkTables(stations=stations, routes=routes, graph=graph, maintenance_tasks=[5, 2, 3, 7])


def network_from_dict(data: Dict[str, Any]) -> NetworkTables:
    stations = [Station(id=int(s["id"]), name=s["name"]) for s in data.get("stations", [])]
    routes = [
        Route(
            train_id=int(r["train_id"]),
            stations=[int(x) for x in r["stations"]],
            arrival_times=[int(x) for x in r["arrival_times"]],
            departure_times=[int(x) for x in r["departure_times"]],
        )
        for r in data.get("routes", [])
    ]
    graph = StationGraph.with_stations(int(data.get("station_count", len(stations))))
    for e in data.get("edges", []):
        graph.add_edge(int(e["src"]), int(e["dst"]), int(e["weight"]))
    tasks = [int(x) for x in data.get("maintenance_tasks", [])]
    return NetworkTables(stations=stations, routes=routes, graph=graph, maintenance_tasks=tasks)


def load_network(path: Optional[str | Path] = None) -> NetworkTables:
    if not path:
        return default_network()
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return network_from_dict(data)
