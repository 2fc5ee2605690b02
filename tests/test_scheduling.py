import pytest

from algobox.scheduling import (
    Schedule,
    first_come_first_serve,
    priority_schedule,
    round_robin,
    shortest_job_first,
)


def _assert_consistent(schedule):
    for p in schedule.processes:
        assert p.turnaround_time == p.waiting_time + p.burst_time
        assert p.waiting_time >= 0


def test_sjf_runs_shortest_first():
    schedule = shortest_job_first([6, 8, 7, 3])
    bursts = [p.burst_time for p in schedule.processes]
    assert bursts == sorted(bursts)
    assert [p.pid for p in schedule.processes][0] == 4
    _assert_consistent(schedule)


def test_sjf_textbook_average():
    assert shortest_job_first([6, 8, 7, 3]).average_waiting_time() == pytest.approx(7.0)


def test_sjf_back_to_back_waits():
    schedule = shortest_job_first([5, 1, 3])
    processes = schedule.processes
    assert processes[0].waiting_time == 0
    for before, after in zip(processes, processes[1:]):
        assert after.waiting_time == before.completion_time


def test_sjf_averages_match_processes():
    schedule = shortest_job_first([4, 2, 9, 1])
    waits = [p.waiting_time for p in schedule.processes]
    tats = [p.turnaround_time for p in schedule.processes]
    assert schedule.average_waiting_time() == pytest.approx(sum(waits) / len(waits))
    assert schedule.average_turnaround_time() == pytest.approx(sum(tats) / len(tats))


def test_priority_orders_by_priority():
    schedule = priority_schedule([10, 1, 2], [3, 1, 2])
    assert [p.pid for p in schedule.processes] == [2, 3, 1]
    assert [p.priority for p in schedule.processes] == [1, 2, 3]
    _assert_consistent(schedule)


def test_priority_length_mismatch():
    with pytest.raises(ValueError):
        priority_schedule([1, 2], [1])


def test_fcfs_orders_by_arrival():
    schedule = first_come_first_serve([3, 2, 4], [4, 0, 1])
    assert [p.pid for p in schedule.processes] == [2, 3, 1]
    _assert_consistent(schedule)


def test_fcfs_idle_processor_means_no_wait():
    schedule = first_come_first_serve([2], [5])
    process = schedule.processes[0]
    assert process.waiting_time == 0
    assert process.completion_time == 7


def test_fcfs_all_at_zero_matches_input_order():
    bursts = [5, 1, 3]
    schedule = first_come_first_serve(bursts, [0, 0, 0])
    assert [p.burst_time for p in schedule.processes] == bursts


def test_round_robin_single_process():
    schedule = round_robin([7], [5], [0], 2)
    process = schedule.processes[0]
    assert process.pid == 7
    assert process.waiting_time == 0
    assert process.turnaround_time == 5


def test_round_robin_large_quantum_matches_fcfs():
    bursts = [3, 5, 2]
    arrivals = [0, 0, 0]
    rr = round_robin([1, 2, 3], bursts, arrivals, 100)
    fcfs = first_come_first_serve(bursts, arrivals)
    assert rr.average_waiting_time() == pytest.approx(fcfs.average_waiting_time())
    assert rr.average_turnaround_time() == pytest.approx(fcfs.average_turnaround_time())


def test_round_robin_invariants():
    schedule = round_robin([1, 2, 3], [5, 3, 8], [0, 1, 2], 2)
    _assert_consistent(schedule)
    last = max(p.completion_time for p in schedule.processes)
    assert last == sum(p.burst_time for p in schedule.processes)
    assert [p.pid for p in schedule.processes] == [1, 2, 3]


def test_round_robin_waits_for_late_arrival():
    schedule = round_robin([1], [2], [3], 1)
    assert schedule.processes[0].completion_time == 5


def test_round_robin_rejects_bad_quantum():
    with pytest.raises(ValueError):
        round_robin([1], [2], [0], 0)


def test_round_robin_rejects_zero_burst():
    with pytest.raises(ValueError):
        round_robin([1], [0], [0], 1)


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        shortest_job_first([])
    with pytest.raises(ValueError):
        Schedule(())


def test_negative_burst_rejected():
    with pytest.raises(ValueError):
        first_come_first_serve([-1], [0])