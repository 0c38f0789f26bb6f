"""
Job Sequencer Package

A deterministic greedy sequencer for unit-time jobs with deadlines:
selects and orders the jobs that maximize total profit, one job per
time slot.
"""

__version__ = '0.1.0'

from .types import (
    Job,
    ScheduleResult,
    SequenceRequest,
    SequencingPolicy,
    SelectionStrategy,
    parse_strategy
)

from .algorithm import (
    schedule,
    sequence_jobs,
    sort_by_deadline,
    allocate_slots,
    select_jobs,
    slot_search_select,
    is_feasible,
    calculate_schedule_metrics
)

from .server import create_app, run_server

__all__ = [
    'Job',
    'ScheduleResult',
    'SequenceRequest',
    'SequencingPolicy',
    'SelectionStrategy',
    'parse_strategy',
    'schedule',
    'sequence_jobs',
    'sort_by_deadline',
    'allocate_slots',
    'select_jobs',
    'slot_search_select',
    'is_feasible',
    'calculate_schedule_metrics',
    'create_app',
    'run_server',
]
