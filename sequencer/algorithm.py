"""
Core sequencing algorithm.

This module implements the pure greedy selection that picks which
unit-time jobs to run, one per slot, so that each finishes by its
deadline and the total profit is as large as the greedy allows.

The default strategy works in two phases over the deadline-sorted jobs:
the slot allocator counts how many slots each deadline boundary opens,
and the profit selector walks the boundaries from the largest deadline
down, admitting the most profitable jobs seen so far from a max-heap.

The algorithm is deterministic: given the same inputs, it will always
produce the same outputs.
"""

import heapq
import logging
from itertools import count
from typing import List, Optional, Sequence

from .types import Job, JobId, ScheduleResult, SelectionStrategy, SequencingPolicy


logger = logging.getLogger(__name__)


def schedule(jobs: Sequence[Job]) -> List[JobId]:
    """
    Select and order the jobs that maximize profit.

    Args:
        jobs: Jobs competing for slots; the sequence is not modified

    Returns:
        Identifiers of the admitted jobs, ordered by assigned slot
    """
    return sequence_jobs(jobs).job_ids


def sequence_jobs(
    jobs: Sequence[Job],
    policy: Optional[SequencingPolicy] = None
) -> ScheduleResult:
    """
    Run the policy's selection strategy and build the full result.

    Args:
        jobs: Jobs competing for slots
        policy: Sequencing policy; defaults to the deadline-gap strategy

    Returns:
        ScheduleResult with the admitted jobs in slot order
    """
    if policy is None:
        policy = SequencingPolicy()

    if policy.strategy == SelectionStrategy.SLOT_SEARCH:
        admitted = slot_search_select(jobs)
    else:
        sorted_jobs = sort_by_deadline(jobs)
        slots = allocate_slots(sorted_jobs)
        admitted = select_jobs(sorted_jobs, slots)
        # Execution order is the deadline order; ties keep admission order
        admitted = sorted(admitted, key=lambda job: job.deadline)

    logger.debug(
        "Admitted %d of %d jobs using %s",
        len(admitted), len(jobs), policy.strategy.value
    )

    return ScheduleResult(
        job_ids=[job.job_id for job in admitted],
        jobs=admitted,
        total_profit=sum(job.profit for job in admitted),
        strategy=policy.strategy
    )


def sort_by_deadline(jobs: Sequence[Job]) -> List[Job]:
    """
    Sort a copy of the jobs by ascending deadline.

    Jobs whose deadline is below 1 can never finish in time and are
    dropped here, so they neither take a slot nor shift the boundaries
    of the jobs that remain.

    Args:
        jobs: Jobs to sort

    Returns:
        New list of schedulable jobs, stable-sorted by deadline
    """
    eligible = [job for job in jobs if job.deadline >= 1]
    if len(eligible) != len(jobs):
        logger.debug("Dropped %d jobs with deadline < 1", len(jobs) - len(eligible))
    return sorted(eligible, key=lambda job: job.deadline)


def allocate_slots(sorted_jobs: Sequence[Job]) -> List[int]:
    """
    Count the slots each deadline boundary opens.

    The first boundary opens as many slots as its deadline; every later
    boundary opens the gap between its deadline and the previous one,
    so boundaries that share a deadline open none.

    Args:
        sorted_jobs: Jobs sorted by ascending deadline

    Returns:
        Slot count per boundary, aligned with sorted_jobs
    """
    slots = []
    previous = None

    for job in sorted_jobs:
        if previous is None:
            slots.append(job.deadline)
        else:
            slots.append(job.deadline - previous)
        previous = job.deadline

    return slots


def select_jobs(sorted_jobs: Sequence[Job], slots: Sequence[int]) -> List[Job]:
    """
    Admit the most profitable jobs boundary by boundary.

    Boundaries are visited from the largest deadline down. Each job is
    pushed into a max-heap keyed by profit as its boundary is reached,
    then the boundary's slots are filled from the top of the heap. Equal
    profits pop in the order they were pushed.

    Args:
        sorted_jobs: Jobs sorted by ascending deadline
        slots: Slot counts from allocate_slots

    Returns:
        Admitted jobs in admission order
    """
    admitted = []
    heap = []
    counter = count()

    for i in range(len(sorted_jobs) - 1, -1, -1):
        job = sorted_jobs[i]
        slots_available = slots[i]

        heapq.heappush(heap, (-job.profit, next(counter), job))

        while slots_available > 0 and heap:
            _, _, best = heapq.heappop(heap)
            admitted.append(best)
            slots_available -= 1

    return admitted


def slot_search_select(jobs: Sequence[Job]) -> List[Job]:
    """
    Textbook greedy: place each job in the latest free slot before its deadline.

    Jobs are taken by descending profit (ties keep input order). A job
    with no free slot at or before its deadline is skipped.

    Args:
        jobs: Jobs competing for slots

    Returns:
        Admitted jobs ordered by slot
    """
    eligible = [job for job in jobs if job.deadline >= 1]
    if not eligible:
        return []

    horizon = min(max(job.deadline for job in eligible), len(eligible))
    slots: List[Optional[Job]] = [None] * horizon

    for job in sorted(eligible, key=lambda j: -j.profit):
        for slot in range(min(job.deadline, horizon) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break

    return [job for job in slots if job is not None]


def is_feasible(jobs: Sequence[Job]) -> bool:
    """
    Check that the ordered jobs can run one per slot without missing a deadline.

    The k-th job (1-based) runs in slot k, so the order is feasible when
    every job's deadline is at least its position.

    Args:
        jobs: Jobs in execution order

    Returns:
        True if every job finishes by its deadline
    """
    return all(job.deadline >= position for position, job in enumerate(jobs, start=1))


def calculate_schedule_metrics(
    result: ScheduleResult,
    jobs: Sequence[Job]
) -> dict:
    """
    Calculate metrics about the sequencing decision.

    total_offered_profit sums the positive profits of jobs with a
    deadline of at least 1. It is not an achievable bound.

    Args:
        result: Result of a sequencing run
        jobs: Original list of jobs

    Returns:
        Dictionary containing sequencing metrics
    """
    return {
        "jobs_scheduled": len(result.jobs),
        "jobs_rejected": len(jobs) - len(result.jobs),
        "total_profit": result.total_profit,
        "total_offered_profit": sum(
            j.profit for j in jobs if j.deadline >= 1 and j.profit > 0
        ),
        "horizon": max((j.deadline for j in result.jobs), default=0)
    }
