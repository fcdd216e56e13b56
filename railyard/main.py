"""Command line entry point for the rail yard tools.

Usage:
    python -m railyard.main schedule --platforms 3
    python -m railyard.main detect
    python -m railyard.main resolve
    python -m railyard.main routes --source 0
    python -m railyard.main timetable
    python -m railyard.main fare --train 0 --class First
    python -m railyard.main recommend --preference "less time"
    python -m railyard.main maintenance 5 2 3 7
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List

from railyard.config import RailyardConfig
from railyard.core.platform_scheduler import schedule_trains
from railyard.core.wait_for import build_wait_for_graph
from railyard.core.deadlock import has_cycle, resolve_deadlock
from railyard.core.router import UNREACHABLE, InvalidStationError, shortest_distances
from railyard.core.maintenance import shortest_job_first
from railyard.data.loader import check_track_fields, load_trains
from railyard.data.network import load_network
from railyard.sim.timetable import render_timetable, calculate_fare
from railyard.sim.recommend import PREFERENCES, recommend_train


def build_parser(cfg: RailyardConfig) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="railyard", description="Platform scheduling, deadlock and routing tools")
    ap.add_argument("--data", default=cfg.train_data_path, help="Train record file")
    ap.add_argument("--network", default=cfg.network_path, help="Network JSON (stations/routes/edges)")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("schedule", help="Assign platforms in file order")
    p.add_argument("--platforms", type=int, default=cfg.platforms)
    sub.add_parser("detect", help="Check the wait-for graph for a deadlock")
    p = sub.add_parser("resolve", help="Delay one train on a deadlock cycle")
    p.add_argument("--delay", type=int, default=cfg.deadlock_delay)
    p = sub.add_parser("routes", help="Shortest distances from a station")
    p.add_argument("--source", type=int, required=True)
    sub.add_parser("timetable", help="Print the route timetable")
    p = sub.add_parser("fare", help="Fare for a train's route")
    p.add_argument("--train", type=int, required=True)
    p.add_argument("--class", dest="train_class", default="Second")
    p = sub.add_parser("recommend", help="Recommend a train")
    p.add_argument("--preference", choices=PREFERENCES, required=True)
    p = sub.add_parser("maintenance", help="Shortest-job-first maintenance order")
    p.add_argument("tasks", type=int, nargs="*")
    return ap


def main(argv: List[str] | None = None) -> int:
    cfg = RailyardConfig()
    args = build_parser(cfg).parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)

    if args.command in ("schedule", "detect", "resolve", "recommend"):
        trains = load_trains(args.data)
        for issue in check_track_fields(trains, cfg.total_tracks):
            print(f"warning: {issue}", file=sys.stderr)

    if args.command == "schedule":
        unscheduled = schedule_trains(trains, args.platforms)
        for tid in unscheduled:
            print(f"Train {tid} could not be scheduled on any platform.")
        print("Train scheduling completed.")
        for t in trains:
            if t.id not in unscheduled:
                print(f"  Train {t.id}: platform {t.platform} [{t.arrival_time}, {t.departure_time})")
    elif args.command == "detect":
        if has_cycle(build_wait_for_graph(trains)):
            print("Deadlock detected.")
        else:
            print("No deadlock detected.")
    elif args.command == "resolve":
        report = resolve_deadlock(build_wait_for_graph(trains), trains, delay=args.delay)
        if report.deadlocked:
            print("Deadlock detected. Resolving...")
            print(f"Train {report.victim_id} delayed by {report.delay} minutes.")
        else:
            print("No deadlock detected to resolve.")
    elif args.command == "routes":
        network = load_network(args.network)
        try:
            dist = shortest_distances(network.graph, args.source)
        except InvalidStationError:
            print("Invalid station number.")
            return 1
        shown = " ".join("inf" if d == UNREACHABLE else str(int(d)) for d in dist)
        print(f"Shortest distances from station {args.source}: {shown}")
    elif args.command == "timetable":
        print(render_timetable(load_network(args.network)))
    elif args.command == "fare":
        try:
            res = calculate_fare(load_network(args.network), args.train, args.train_class)
        except LookupError:
            print("Train not found.")
            return 1
        print(f"Total fare for Train {args.train}: {res['fare']} units")
    elif args.command == "recommend":
        best = recommend_train(trains, args.preference)
        if best is None:
            print("No trains available.")
            return 1
        print(f"Recommended Train based on '{args.preference}':")
        print(f"Train ID: {best.id}, Arrival Time: {best.arrival_time}, "
              f"Departure Time: {best.departure_time}, Available Seats: {best.available_seats}")
    elif args.command == "maintenance":
        tasks = args.tasks or load_network(args.network).maintenance_tasks
        print("Maintenance order: " + " ".join(str(t) for t in shortest_job_first(tasks)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
