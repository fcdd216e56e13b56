from railyard.core.models import Train
from railyard.data.loader import (
    check_track_fields,
    dump_trains,
    format_train_line,
    load_trains,
    parse_train_line,
)


def test_parse_full_record_maps_sentinels_to_none():
    t = parse_train_line("101 0 10 -1 200 40 0 -1 2")
    assert t == Train(id=101, arrival_time=0, departure_time=10, platform=None, capacity=200,
                      available_seats=40, current_track=0, waiting_for_track=None, priority=2)


def test_short_and_malformed_lines_are_partial():
    t = parse_train_line("7 3 9")
    assert (t.id, t.arrival_time, t.departure_time) == (7, 3, 9)
    assert t.current_track is None and t.waiting_for_track is None and t.capacity == 0

    t = parse_train_line("8 1 4 2 x 5 5 5 5")
    assert t.platform == 2
    assert t.capacity == 0 and t.available_seats == 0


def test_format_writes_sentinels_back():
    t = Train(id=5, arrival_time=1, departure_time=2, current_track=3)
    assert format_train_line(t) == "5 1 2 -1 0 0 3 -1 0"


def test_dump_then_load_file(tmp_path):
    path = tmp_path / "trains.txt"
    trains = [
        Train(id=1, arrival_time=0, departure_time=10, capacity=100, available_seats=20,
              current_track=0, waiting_for_track=1, priority=1),
        Train(id=2, arrival_time=5, departure_time=15, platform=1, current_track=1),
    ]
    dump_trains(trains, path)
    path.write_text(path.read_text() + "\n\n")  # trailing blank lines are ignored
    assert load_trains(path) == trains


def test_missing_file_yields_no_trains(tmp_path):
    assert load_trains(tmp_path / "nope.txt") == []


def test_bundled_data_file_loads():
    from railyard.config import DEFAULT_TRAIN_DATA
    trains = load_trains(DEFAULT_TRAIN_DATA)
    assert [t.id for t in trains] == [101, 102, 103, 104, 105]
    assert all(t.platform is None for t in trains)


def test_check_track_fields_reports_without_raising():
    trains = [
        Train(id=1, arrival_time=0, departure_time=1, current_track=0, waiting_for_track=9),
        Train(id=2, arrival_time=0, departure_time=1, current_track=2, waiting_for_track=2),
        Train(id=3, arrival_time=0, departure_time=1, current_track=4),
    ]
    issues = check_track_fields(trains, total_tracks=5)
    assert len(issues) == 2
    assert "Train 1" in issues[0] and "waiting_for_track 9" in issues[0]
    assert "Train 2" in issues[1]
