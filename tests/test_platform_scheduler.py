from railyard.core.models import Train
from railyard.core.platform_scheduler import schedule_trains, assign_platforms


def make_trains():
    return [
        Train(id=1, arrival_time=0, departure_time=10),
        Train(id=2, arrival_time=5, departure_time=15),
        Train(id=3, arrival_time=10, departure_time=20),
    ]


def test_single_platform_rejects_overlapping_train():
    trains = make_trains()
    unscheduled = schedule_trains(trains, 1)

    assert unscheduled == [2]
    assert trains[0].platform == 0
    assert trains[1].platform is None
    assert trains[2].platform == 0


def test_no_overlap_on_any_platform():
    trains = make_trains() + [
        Train(id=4, arrival_time=3, departure_time=8),
        Train(id=5, arrival_time=12, departure_time=25),
    ]
    schedule_trains(trains, 2)

    by_platform = {}
    for t in trains:
        if t.platform is not None:
            by_platform.setdefault(t.platform, []).append(t)
    for p, items in by_platform.items():
        items.sort(key=lambda t: t.arrival_time)
        for a, b in zip(items, items[1:]):
            assert a.departure_time <= b.arrival_time, f"Overlap on platform {p}: {a} vs {b}"


def test_lowest_index_platform_wins_ties():
    trains = [
        Train(id=1, arrival_time=0, departure_time=5),
        Train(id=2, arrival_time=0, departure_time=5),
        Train(id=3, arrival_time=5, departure_time=9),
    ]
    assert schedule_trains(trains, 3) == []
    assert [t.platform for t in trains] == [0, 1, 0]


def test_input_order_is_respected_not_arrival_order():
    # Late arrival listed first grabs platform 0 and blocks the earlier train
    trains = [
        Train(id=1, arrival_time=10, departure_time=30),
        Train(id=2, arrival_time=0, departure_time=5),
    ]
    assert schedule_trains(trains, 1) == [2]
    assert trains[0].platform == 0


def test_priority_is_not_consulted():
    trains = [
        Train(id=1, arrival_time=0, departure_time=10, priority=1),
        Train(id=2, arrival_time=0, departure_time=10, priority=9),
    ]
    assert schedule_trains(trains, 1) == [2]


def test_departure_before_arrival_is_accepted():
    trains = [
        Train(id=1, arrival_time=10, departure_time=4),
        Train(id=2, arrival_time=5, departure_time=12),
    ]
    assert schedule_trains(trains, 1) == []
    assert trains[1].platform == 0


def test_availability_vector_is_updated():
    trains = make_trains()
    availability = [0, 0]
    assert assign_platforms(trains, availability) == []
    assert availability == [20, 15]


def test_track_fields_untouched():
    trains = [Train(id=1, arrival_time=0, departure_time=10, current_track=2, waiting_for_track=3)]
    schedule_trains(trains, 1)
    assert trains[0].current_track == 2
    assert trains[0].waiting_for_track == 3


def test_deterministic_for_same_input():
    first = make_trains()
    second = make_trains()
    assert schedule_trains(first, 2) == schedule_trains(second, 2)
    assert [t.platform for t in first] == [t.platform for t in second]


def test_zero_platforms_and_empty_input():
    trains = make_trains()
    assert schedule_trains(trains, 0) == [1, 2, 3]
    assert schedule_trains([], 3) == []
