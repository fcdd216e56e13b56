from typing import Any, Dict, Iterable, List
from railyard.core.models import Train

# Platform-plan KPIs and chart rows


def summarize_platforms(trains: List[Train], unscheduled: List[int], platform_count: int) -> Dict[str, int]:
    # returns basic KPIs: totals, makespan of the scheduled trains, platform utilization proxy
    missed = set(unscheduled)
    placed = [t for t in trains if t.id not in missed and t.platform is not None]
    if not placed or platform_count <= 0:
        return {
            "total_trains": len(trains),
            "scheduled": len(placed),
            "unscheduled": len(unscheduled),
            "makespan": 0,
            "utilization": 0,
        }
    start = min(t.arrival_time for t in placed)
    end = max(t.departure_time for t in placed)
    makespan = end - start
    # utilization proxy: occupied platform-time over available platform-time (capped at 100)
    occupied = sum(max(0, t.departure_time - t.arrival_time) for t in placed)
    utilization = int(100 * occupied / (makespan * platform_count)) if makespan > 0 else 0
    return {
        "total_trains": len(trains),
        "scheduled": len(placed),
        "unscheduled": len(unscheduled),
        "makespan": makespan,
        "utilization": min(utilization, 100),
    }


def platform_gantt(trains: List[Train], unscheduled: Iterable[int] = ()) -> List[Dict[str, Any]]:
    # One bar per train placed by the scheduler; a stale platform on a rejected train is ignored
    missed = set(unscheduled)
    return [
        {
            "train": str(t.id),
            "platform": f"P{t.platform}",
            "start": t.arrival_time,
            "end": t.departure_time,
        }
        for t in trains
        if t.id not in missed and t.platform is not None
    ]
