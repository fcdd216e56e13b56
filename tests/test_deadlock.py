from railyard.core.models import Train
from railyard.core.wait_for import build_wait_for_graph
from railyard.core.deadlock import has_cycle, find_search_path, resolve_deadlock


def cycle_trains():
    # A waits on B's track, B on C's, C on A's
    return [
        Train(id=10, arrival_time=0, departure_time=20, current_track=0, waiting_for_track=1),
        Train(id=11, arrival_time=0, departure_time=30, current_track=1, waiting_for_track=2),
        Train(id=12, arrival_time=0, departure_time=40, current_track=2, waiting_for_track=0),
    ]


def chain_trains():
    return [
        Train(id=10, arrival_time=0, departure_time=20, current_track=0, waiting_for_track=1),
        Train(id=11, arrival_time=0, departure_time=30, current_track=1, waiting_for_track=2),
        Train(id=12, arrival_time=0, departure_time=40, current_track=2),
    ]


def test_wait_for_edges():
    assert build_wait_for_graph(cycle_trains()) == [[1], [2], [0]]
    assert build_wait_for_graph(chain_trains()) == [[1], [2], []]


def test_wait_for_fan_out_and_no_self_edge():
    trains = [
        Train(id=1, arrival_time=0, departure_time=1, current_track=0, waiting_for_track=3),
        Train(id=2, arrival_time=0, departure_time=1, current_track=3),
        Train(id=3, arrival_time=0, departure_time=1, current_track=3),
        # malformed: waits on the track it holds
        Train(id=4, arrival_time=0, departure_time=1, current_track=4, waiting_for_track=4),
    ]
    assert build_wait_for_graph(trains) == [[1, 2], [], [], []]


def test_cycle_detected_and_dag_clean():
    assert has_cycle(build_wait_for_graph(cycle_trains())) is True
    assert has_cycle(build_wait_for_graph(chain_trains())) is False


def test_detection_is_repeatable():
    graph = build_wait_for_graph(cycle_trains())
    assert has_cycle(graph) == has_cycle(graph)
    assert graph == [[1], [2], [0]]


def test_cycle_found_past_a_finished_subtree():
    # 0 -> 1 (dead end), 2 <-> 3
    graph = [[1], [], [3], [2]]
    assert has_cycle(graph)
    assert find_search_path(graph) == [2, 3]


def test_diamond_is_not_a_cycle():
    graph = [[1, 2], [3], [3], []]
    assert find_search_path(graph) is None


def test_long_chain_does_not_hit_recursion_limit():
    n = 5000
    graph = [[i + 1] for i in range(n - 1)] + [[]]
    assert not has_cycle(graph)
    graph[-1] = [0]
    assert has_cycle(graph)


def test_resolve_delays_exactly_one_train():
    trains = cycle_trains()
    before = [t.departure_time for t in trains]
    report = resolve_deadlock(build_wait_for_graph(trains), trains)

    assert report.deadlocked
    assert report.victim_index == 0
    assert report.victim_id == 10
    assert report.delay == 5
    assert report.search_path == [0, 1, 2]
    after = [t.departure_time for t in trains]
    assert after == [before[0] + 5, before[1], before[2]]
    # tracks are left alone
    assert [(t.current_track, t.waiting_for_track) for t in trains] == [(0, 1), (1, 2), (2, 0)]


def test_resolve_again_picks_same_victim():
    trains = cycle_trains()
    first = resolve_deadlock(build_wait_for_graph(trains), trains)
    second = resolve_deadlock(build_wait_for_graph(trains), trains)
    assert first.victim_id == second.victim_id == 10
    assert trains[0].departure_time == 30


def test_victim_is_lowest_index_on_live_path():
    # 0 waits into the 1 <-> 2 cycle; 0 is still on the path when the back edge is found
    graph = [[1], [2], [1]]
    trains = [Train(id=i, arrival_time=0, departure_time=0) for i in range(3)]
    report = resolve_deadlock(graph, trains, delay=7)
    assert report.victim_index == 0
    assert report.search_path == [0, 1, 2]
    assert trains[0].departure_time == 7


def test_victim_skips_finished_nodes():
    # 0 finishes without a cycle before the 1 <-> 2 cycle is explored
    graph = [[], [2], [1]]
    trains = [Train(id=i, arrival_time=0, departure_time=0) for i in range(3)]
    report = resolve_deadlock(graph, trains)
    assert report.victim_index == 1
    assert [t.departure_time for t in trains] == [0, 5, 0]


def test_no_deadlock_reports_and_does_not_mutate():
    trains = chain_trains()
    report = resolve_deadlock(build_wait_for_graph(trains), trains)
    assert not report.deadlocked
    assert report.victim_id is None
    assert [t.departure_time for t in trains] == [20, 30, 40]


def test_empty_input():
    assert build_wait_for_graph([]) == []
    assert has_cycle([]) is False
    assert resolve_deadlock([], []).deadlocked is False
