import csv
import io
from typing import Any, Dict, List

from fastapi import FastAPI
from fastapi.responses import RedirectResponse, Response, StreamingResponse
from pydantic import BaseModel, Field

from railyard.config import RailyardConfig
from railyard.core.models import StationGraph, Train
from railyard.core.platform_scheduler import assign_platforms
from railyard.core.wait_for import build_wait_for_graph
from railyard.core.deadlock import has_cycle, resolve_deadlock
from railyard.core.router import UNREACHABLE, shortest_distances, shortest_route
from railyard.core.maintenance import shortest_job_first
from railyard.data.loader import check_track_fields, load_trains
from railyard.data.network import load_network
from railyard.sim.simulator import summarize_platforms, platform_gantt
from railyard.sim.timetable import timetable_rows, calculate_fare
from railyard.sim.recommend import recommend_train
from railyard.sim.audit import write_audit

app = FastAPI(title="Rail Yard Contention API")


@app.get("/")
async def root() -> RedirectResponse:
    # Redirect base URL to interactive docs to avoid 404 confusion
    return RedirectResponse(url="/docs")


@app.get("/favicon.ico")
async def favicon() -> Response:
    return Response(status_code=204)


class TrainIn(BaseModel):
    id: int
    arrival_time: int
    departure_time: int
    platform: int | None = None
    capacity: int = 0
    available_seats: int = 0
    current_track: int | None = None
    waiting_for_track: int | None = None
    priority: int = 0


class TrainsBody(BaseModel):
    trains: List[TrainIn] = Field(default_factory=list)


class ScheduleBody(TrainsBody):
    platforms: int | None = None


class ResolveBody(TrainsBody):
    delay: int | None = None


class EdgeIn(BaseModel):
    src: int
    dst: int
    weight: int = Field(ge=0)


class RouteQuery(BaseModel):
    stations: int = Field(ge=0)
    edges: List[EdgeIn] = Field(default_factory=list)
    source: int
    target: int | None = None


class RecommendBody(TrainsBody):
    preference: str


class MaintenanceBody(BaseModel):
    tasks: List[int] = Field(default_factory=list)


def _to_trains(items: List[TrainIn]) -> List[Train]:
    return [Train(**t.model_dump()) for t in items]


def _trains_out(trains: List[Train]) -> List[Dict[str, Any]]:
    return [TrainIn(**vars(t)).model_dump() for t in trains]


def _build_graph(q: RouteQuery) -> StationGraph:
    graph = StationGraph.with_stations(q.stations)
    for e in q.edges:
        graph.add_edge(e.src, e.dst, e.weight)
    return graph


def _json_distance(d: float) -> int | None:
    return None if d == UNREACHABLE else int(d)


@app.post("/schedule")
async def schedule(body: ScheduleBody) -> Dict[str, Any]:
    """Greedy platform assignment in the order the trains are given."""
    cfg = RailyardConfig()
    platforms = cfg.platforms if body.platforms is None else body.platforms
    if platforms < 0:
        return {"error": f"platforms must be >= 0, got {platforms}"}
    trains = _to_trains(body.trains)
    availability = [0] * platforms
    unscheduled = assign_platforms(trains, availability)
    kpis = summarize_platforms(trains, unscheduled, platforms)
    write_audit({
        "type": "schedule",
        "platforms": platforms,
        "kpis": kpis,
        "unscheduled": unscheduled,
    })
    return {
        "trains": _trains_out(trains),
        "unscheduled": unscheduled,
        "platform_free_at": availability,
        "kpis": kpis,
        "gantt": platform_gantt(trains, unscheduled),
    }


@app.post("/deadlock/detect")
async def detect(body: TrainsBody) -> Dict[str, Any]:
    trains = _to_trains(body.trains)
    graph = build_wait_for_graph(trains)
    deadlocked = has_cycle(graph)
    write_audit({"type": "deadlock_detect", "trains": len(trains), "deadlocked": deadlocked})
    return {"deadlocked": deadlocked, "wait_for_graph": graph}


@app.post("/deadlock/resolve")
async def resolve(body: ResolveBody) -> Dict[str, Any]:
    """Delay one train on a detected wait-for cycle.

    Only ``departure_time`` of the victim changes; posting the returned trains
    again selects the same victim because track fields are left as they were.
    """
    cfg = RailyardConfig()
    delay = cfg.deadlock_delay if body.delay is None else body.delay
    trains = _to_trains(body.trains)
    report = resolve_deadlock(build_wait_for_graph(trains), trains, delay=delay)
    write_audit({
        "type": "deadlock_resolve",
        "deadlocked": report.deadlocked,
        "delayed_train_id": report.victim_id,
        "delay": report.delay,
    })
    if not report.deadlocked:
        return {"status": "no_deadlock"}
    return {
        "status": "delayed",
        "delayed_train_id": report.victim_id,
        "delay": report.delay,
        "search_path": report.search_path,
        "trains": _trains_out(trains),
    }


@app.post("/routes/distances")
async def distances(q: RouteQuery) -> Dict[str, Any]:
    try:
        graph = _build_graph(q)
        dist = shortest_distances(graph, q.source)
    except ValueError as e:
        # invalid source station or edge; nothing computed
        return {"error": str(e)}
    write_audit({"type": "distances", "source": q.source, "stations": q.stations})
    return {"source": q.source, "distances": [_json_distance(d) for d in dist]}


@app.post("/routes/shortest")
async def shortest(q: RouteQuery) -> Dict[str, Any]:
    if q.target is None:
        return {"error": "target is required"}
    try:
        graph = _build_graph(q)
        path, cost = shortest_route(graph, q.source, q.target)
    except ValueError as e:
        return {"error": str(e)}
    return {"source": q.source, "target": q.target, "path": path, "cost": _json_distance(cost)}


@app.get("/timetable")
async def timetable() -> Dict[str, Any]:
    cfg = RailyardConfig()
    network = load_network(cfg.network_path)
    return {"rows": timetable_rows(network)}


@app.get("/timetable.csv")
async def timetable_csv() -> StreamingResponse:
    cfg = RailyardConfig()
    rows = timetable_rows(load_network(cfg.network_path))
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=["train_id", "station_id", "station", "arrival", "departure"])
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    buf.seek(0)
    return StreamingResponse(buf, media_type="text/csv", headers={"Content-Disposition": "attachment; filename=timetable.csv"})


@app.get("/fare")
async def fare(train_id: int, train_class: str = "Second") -> Dict[str, Any]:
    cfg = RailyardConfig()
    try:
        return calculate_fare(load_network(cfg.network_path), train_id, train_class)
    except LookupError as e:
        return {"error": str(e)}


@app.post("/recommend")
async def recommend(body: RecommendBody) -> Dict[str, Any]:
    trains = _to_trains(body.trains)
    try:
        best = recommend_train(trains, body.preference)
    except ValueError as e:
        return {"error": str(e)}
    return {"preference": body.preference, "train": _trains_out([best])[0] if best else None}


@app.post("/maintenance/order")
async def maintenance_order(body: MaintenanceBody) -> Dict[str, Any]:
    return {"order": shortest_job_first(body.tasks)}


@app.get("/demo")
async def demo() -> Dict[str, Any]:
    """Schedule the configured train file and check it for deadlock."""
    cfg = RailyardConfig()
    trains = load_trains(cfg.train_data_path)
    issues = check_track_fields(trains, cfg.total_tracks)
    availability = [0] * cfg.platforms
    unscheduled = assign_platforms(trains, availability)
    return {
        "kpis": summarize_platforms(trains, unscheduled, cfg.platforms),
        "trains": _trains_out(trains),
        "unscheduled": unscheduled,
        "deadlocked": has_cycle(build_wait_for_graph(trains)),
        "data_issues": issues,
    }
