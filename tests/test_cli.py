from railyard.data.loader import dump_trains
from railyard.core.models import Train
from railyard.main import main


def write_cycle(path):
    dump_trains([
        Train(id=1, arrival_time=0, departure_time=10, current_track=0, waiting_for_track=1),
        Train(id=2, arrival_time=5, departure_time=15, current_track=1, waiting_for_track=0),
        Train(id=3, arrival_time=10, departure_time=20, current_track=2),
    ], path)


def test_schedule_command(tmp_path, capsys):
    data = tmp_path / "trains.txt"
    write_cycle(data)
    assert main(["--data", str(data), "schedule", "--platforms", "1"]) == 0
    out = capsys.readouterr().out
    assert "Train 2 could not be scheduled on any platform." in out
    assert "Train scheduling completed." in out


def test_detect_and_resolve_commands(tmp_path, capsys):
    data = tmp_path / "trains.txt"
    write_cycle(data)
    main(["--data", str(data), "detect"])
    assert "Deadlock detected." in capsys.readouterr().out
    main(["--data", str(data), "resolve"])
    assert "Train 1 delayed by 5 minutes." in capsys.readouterr().out


def test_missing_data_file_is_empty_input(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main(["--data", missing, "detect"]) == 0
    assert "No deadlock detected." in capsys.readouterr().out
    assert main(["--data", missing, "resolve"]) == 0
    assert "No deadlock detected to resolve." in capsys.readouterr().out


def test_routes_command(capsys):
    assert main(["routes", "--source", "0"]) == 0
    assert "Shortest distances from station 0: 0 5 15" in capsys.readouterr().out
    assert main(["routes", "--source", "1"]) == 0
    assert "Shortest distances from station 1: inf 0 10" in capsys.readouterr().out
    assert main(["routes", "--source", "9"]) == 1
    assert "Invalid station number." in capsys.readouterr().out


def test_reference_commands(capsys):
    main(["fare", "--train", "0", "--class", "First"])
    assert "Total fare for Train 0: 20 units" in capsys.readouterr().out
    assert main(["fare", "--train", "9"]) == 1
    main(["maintenance"])
    assert "Maintenance order: 2 3 5 7" in capsys.readouterr().out
    main(["timetable"])
    assert "Train ID: 2" in capsys.readouterr().out
