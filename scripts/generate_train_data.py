"""Write a random train record file in the loader's nine-column format."""
import argparse, random, os, sys
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from railyard.core.models import Train  # type: ignore
from railyard.data.loader import dump_trains  # type: ignore


def build_trains(n: int, tracks: int, stagger: int, wait_ratio: float) -> List[Train]:
    trains: List[Train] = []
    for i in range(n):
        arr = i * 5 + random.randint(0, stagger)
        capacity = random.choice([120, 150, 180, 200, 220])
        current = random.randrange(tracks) if tracks > 0 else None
        waiting = None
        if tracks > 1 and random.random() < wait_ratio:
            waiting = random.choice([t for t in range(tracks) if t != current])
        trains.append(Train(
            id=100 + i + 1,
            arrival_time=arr,
            departure_time=arr + random.randint(5, 30),
            capacity=capacity,
            available_seats=random.randint(0, capacity),
            current_track=current,
            waiting_for_track=waiting,
            priority=random.randint(1, 3),
        ))
    return trains


def main():
    p = argparse.ArgumentParser()
    p.add_argument('-Trains', type=int, default=20)
    p.add_argument('-Tracks', type=int, default=5)
    p.add_argument('-Stagger', type=int, default=20)
    p.add_argument('-WaitRatio', type=float, default=0.4)
    p.add_argument('-Seed', type=int, default=42)
    p.add_argument('-Out', type=str, default='train_data.txt')
    a = p.parse_args()

    random.seed(a.Seed)
    trains = build_trains(a.Trains, a.Tracks, a.Stagger, a.WaitRatio)
    dump_trains(trains, a.Out)
    print(f"Wrote {len(trains)} trains -> {a.Out}")


if __name__ == '__main__':
    main()
