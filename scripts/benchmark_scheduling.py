"""Benchmark platform scheduling and deadlock detection for varying numbers of trains.

Usage:
    python scripts/benchmark_scheduling.py -Min 100 -Max 1000 -Step 100 -Platforms 6 -Tracks 20
    python -m scripts.benchmark_scheduling -Min 100 -Max 1000 -Step 100 -Json

Notes:
    - Platform scheduling is O(T * P).
    - Wait-for graph construction is O(T^2); detection is O(V + E).
"""

from __future__ import annotations
import argparse, random, statistics, json, time, os, sys
from typing import List

# Ensure project root on path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from railyard.core.models import Train  # type: ignore
from railyard.core.platform_scheduler import schedule_trains  # type: ignore
from railyard.core.wait_for import build_wait_for_graph  # type: ignore
from railyard.core.deadlock import has_cycle  # type: ignore


def build_random_trains(n: int, tracks: int, wait_ratio: float) -> List[Train]:
    trains: List[Train] = []
    for i in range(n):
        arr = random.randint(0, 600)
        dwell = random.randint(5, 45)
        current = random.randrange(tracks)
        waiting = None
        if random.random() < wait_ratio:
            waiting = random.choice([t for t in range(tracks) if t != current] or [None])
        trains.append(Train(
            id=i + 1,
            arrival_time=arr,
            departure_time=arr + dwell,
            capacity=200,
            available_seats=random.randint(0, 200),
            current_track=current,
            waiting_for_track=waiting,
            priority=random.randint(1, 3),
        ))
    return trains


def run_once(n_trains: int, platforms: int, tracks: int, wait_ratio: float) -> dict:
    trains = build_random_trains(n_trains, tracks, wait_ratio)
    t0 = time.perf_counter()
    unscheduled = schedule_trains(trains, platforms)
    t1 = time.perf_counter()
    deadlocked = has_cycle(build_wait_for_graph(trains))
    t2 = time.perf_counter()
    return {
        "n_trains": n_trains,
        "platforms": platforms,
        "schedule_s": t1 - t0,
        "deadlock_s": t2 - t1,
        "unscheduled": len(unscheduled),
        "deadlocked": deadlocked,
    }


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('-Min', type=int, default=100)
    ap.add_argument('-Max', type=int, default=500)
    ap.add_argument('-Step', type=int, default=100)
    ap.add_argument('-Platforms', type=int, default=6)
    ap.add_argument('-Tracks', type=int, default=20)
    ap.add_argument('-WaitRatio', type=float, default=0.3)
    ap.add_argument('-Repeats', type=int, default=3)
    ap.add_argument('-Json', action='store_true')
    args = ap.parse_args()

    random.seed(42)
    rows = []
    for n in range(args.Min, args.Max + 1, args.Step):
        for _ in range(args.Repeats):
            row = run_once(n, args.Platforms, args.Tracks, args.WaitRatio)
            rows.append(row)
            if args.Json:
                print(json.dumps(row))
            else:
                print(f"Trains={row['n_trains']:<5} schedule={row['schedule_s']*1000:7.2f} ms "
                      f"deadlock={row['deadlock_s']*1000:7.2f} ms unscheduled={row['unscheduled']:<4} deadlocked={row['deadlocked']}")
    if not args.Json:
        from collections import defaultdict
        by_n = defaultdict(list)
        for r in rows:
            by_n[r['n_trains']].append(r['schedule_s'] + r['deadlock_s'])
        print('\nSummary (mean ms per train count)')
        for n in sorted(by_n):
            ms = statistics.fmean(by_n[n]) * 1000
            print(f"  {n:>5}: {ms:7.2f} ms")


if __name__ == '__main__':
    main()
