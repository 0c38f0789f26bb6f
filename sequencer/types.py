"""
Data models for the job sequencer.

This module defines the core data structures used in sequencing:
- Jobs competing for unit-time slots
- The selection strategy and policy
- The result of a sequencing run
"""

from dataclasses import dataclass, field
from typing import Hashable, List
from enum import Enum


JobId = Hashable


class SelectionStrategy(Enum):
    """Strategy used to admit jobs into slots."""
    DEADLINE_GAP = "deadline_gap"
    SLOT_SEARCH = "slot_search"


@dataclass(frozen=True)
class Job:
    """
    A unit-time job with a deadline and a profit.

    Attributes:
        job_id: Label used for reporting only
        deadline: Latest time unit (1-indexed) by which the job must finish
        profit: Reward earned if the job finishes by its deadline
    """
    job_id: JobId
    deadline: int
    profit: int

    def __post_init__(self):
        """Validate job fields."""
        if not _is_int(self.deadline):
            raise ValueError(f"Deadline must be an integer, got {self.deadline!r}")
        if not _is_int(self.profit):
            raise ValueError(f"Profit must be an integer, got {self.profit!r}")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SequencingPolicy:
    """
    Policy configuration for the sequencer.

    Attributes:
        strategy: Selection strategy used to admit jobs
        max_jobs: Maximum number of jobs accepted per request
    """
    strategy: SelectionStrategy = SelectionStrategy.DEADLINE_GAP
    max_jobs: int = 10000


@dataclass
class ScheduleResult:
    """
    Outcome of a sequencing run.

    Attributes:
        job_ids: Admitted job identifiers in slot order
        jobs: Admitted jobs in slot order
        total_profit: Sum of the admitted profits
        strategy: Strategy that produced the result
    """
    job_ids: List[JobId] = field(default_factory=list)
    jobs: List[Job] = field(default_factory=list)
    total_profit: int = 0
    strategy: SelectionStrategy = SelectionStrategy.DEADLINE_GAP


@dataclass
class SequenceRequest:
    """
    Request to sequence a batch of jobs.

    Attributes:
        jobs: Jobs competing for slots
        strategy: Strategy to use for this request
    """
    jobs: List[Job]
    strategy: SelectionStrategy = SelectionStrategy.DEADLINE_GAP


def parse_strategy(value) -> SelectionStrategy:
    """
    Resolve a strategy from its name or enum member.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(value, SelectionStrategy):
        return value
    return SelectionStrategy(value)
