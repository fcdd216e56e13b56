from typing import Any, Dict, List

from railyard.data.network import NetworkTables

# Fare per unit of distance by travel class; anything other than First pays the lower rate
FARE_PER_UNIT = {"First": 10}
DEFAULT_FARE_PER_UNIT = 5


def timetable_rows(network: NetworkTables) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for route in network.routes:
        for sid, arr, dep in zip(route.stations, route.arrival_times, route.departure_times):
            rows.append({
                "train_id": route.train_id,
                "station_id": sid,
                "station": network.station_name(sid),
                "arrival": arr,
                "departure": dep,
            })
    return rows


def render_timetable(network: NetworkTables) -> str:
    lines = ["*** Train Timetable ***"]
    for route in network.routes:
        lines.append(f"Train ID: {route.train_id}")
        lines.append(f"{'Station':>15}{'Arrival':>15}{'Departure':>15}")
        lines.append("-" * 45)
        for sid, arr, dep in zip(route.stations, route.arrival_times, route.departure_times):
            lines.append(f"{network.station_name(sid):>15}{arr:>15}{dep:>15}")
        lines.append("")
    return "\n".join(lines)


def route_distance(network: NetworkTables, train_id: int) -> int:
    route = network.route_for(train_id)
    if route is None:
        raise LookupError(f"Train {train_id} not found")
    # distance proxy: gap between consecutive station ids
    return sum(abs(b - a) for a, b in zip(route.stations, route.stations[1:]))


def calculate_fare(network: NetworkTables, train_id: int, train_class: str) -> Dict[str, int]:
    distance = route_distance(network, train_id)
    per_unit = FARE_PER_UNIT.get(train_class, DEFAULT_FARE_PER_UNIT)
    return {"train_id": train_id, "distance": distance, "fare": distance * per_unit}
