"""CPU scheduling policies: shortest job first, first come first serve, priority, round robin."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate
from statistics import fmean


@dataclass(frozen=True)
class ScheduledProcess:
    """One process together with the times a scheduling policy gave it."""

    pid: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    priority: int | None = None

    @property
    def completion_time(self) -> int:
        """The moment the process finished running."""
        return self.arrival_time + self.turnaround_time


@dataclass(frozen=True)
class Schedule:
    """Processes in the order a policy ran them, with summary statistics."""

    processes: tuple[ScheduledProcess, ...]

    def __post_init__(self) -> None:
        if not self.processes:
            raise ValueError("a schedule needs at least one process")

    def average_waiting_time(self) -> float:
        """Mean time the processes spent ready but not running."""
        return fmean(p.waiting_time for p in self.processes)

    def average_turnaround_time(self) -> float:
        """Mean time from arrival to completion."""
        return fmean(p.turnaround_time for p in self.processes)


def _checked(name: str, values: Sequence[int], length: int | None = None) -> list[int]:
    result = list(values)
    if not result:
        raise ValueError(f"{name} must not be empty")
    if length is not None and len(result) != length:
        raise ValueError(f"{name} must have one entry per process")
    if any(value < 0 for value in result):
        raise ValueError(f"{name} must not be negative")
    return result


def _back_to_back(
    order: Sequence[int], bursts: Sequence[int], priorities: Sequence[int] | None = None
) -> Schedule:
    """Run the given process indices one after another from time zero."""
    ordered_bursts = [bursts[i] for i in order]
    starts = [0, *accumulate(ordered_bursts)][:-1]
    return Schedule(
        tuple(
            ScheduledProcess(
                pid=i + 1,
                burst_time=bursts[i],
                arrival_time=0,
                waiting_time=start,
                turnaround_time=start + bursts[i],
                priority=None if priorities is None else priorities[i],
            )
            for i, start in zip(order, starts)
        )
    )


def shortest_job_first(burst_times: Sequence[int]) -> Schedule:
    """Non-preemptive SJF with every process arriving at time zero; ids count from 1."""
    bursts = _checked("burst_times", burst_times)
    order = sorted(range(len(bursts)), key=bursts.__getitem__)
    return _back_to_back(order, bursts)


def priority_schedule(burst_times: Sequence[int], priorities: Sequence[int]) -> Schedule:
    """Non-preemptive priority scheduling; a lower priority value runs first."""
    bursts = _checked("burst_times", burst_times)
    ranks = list(priorities)
    if len(ranks) != len(bursts):
        raise ValueError("priorities must have one entry per process")
    order = sorted(range(len(bursts)), key=ranks.__getitem__)
    return _back_to_back(order, bursts, ranks)


def first_come_first_serve(
    burst_times: Sequence[int], arrival_times: Sequence[int]
) -> Schedule:
    """Run processes in order of arrival; the processor idles until the next arrival."""
    bursts = _checked("burst_times", burst_times)
    arrivals = _checked("arrival_times", arrival_times, len(bursts))
    clock = 0
    processes = []
    for i in sorted(range(len(bursts)), key=arrivals.__getitem__):
        start = max(clock, arrivals[i])
        clock = start + bursts[i]
        processes.append(
            ScheduledProcess(
                pid=i + 1,
                burst_time=bursts[i],
                arrival_time=arrivals[i],
                waiting_time=start - arrivals[i],
                turnaround_time=clock - arrivals[i],
            )
        )
    return Schedule(tuple(processes))


def round_robin(
    process_ids: Sequence[int],
    burst_times: Sequence[int],
    arrival_times: Sequence[int],
    quantum: int,
) -> Schedule:
    """Round robin in input order; returns the processes in input order.

    Each pass visits every arrived, unfinished process once and gives it up to
    ``quantum`` units. When a pass runs nothing, the clock advances by one.
    """
    if quantum < 1:
        raise ValueError("quantum must be at least 1")
    ids = list(process_ids)
    bursts = _checked("burst_times", burst_times, len(ids))
    arrivals = _checked("arrival_times", arrival_times, len(ids))
    if any(burst == 0 for burst in bursts):
        raise ValueError("burst_times must be positive")
    remaining = list(bursts)
    finish = [0] * len(ids)
    clock = 0
    done = 0
    while done < len(ids):
        ran = False
        for i, arrival in enumerate(arrivals):
            if arrival > clock or remaining[i] == 0:
                continue
            ran = True
            if remaining[i] <= quantum:
                clock += remaining[i]
                remaining[i] = 0
                finish[i] = clock
                done += 1
            else:
                clock += quantum
                remaining[i] -= quantum
        if not ran:
            clock += 1
    return Schedule(
        tuple(
            ScheduledProcess(
                pid=pid,
                burst_time=burst,
                arrival_time=arrival,
                waiting_time=end - arrival - burst,
                turnaround_time=end - arrival,
            )
            for pid, burst, arrival, end in zip(ids, bursts, arrivals, finish)
        )
    )