"""
Fixed scenarios with known sequences, runnable without a test runner.
"""

from typing import Dict, List, Tuple

from .types import Job
from .algorithm import schedule


SUCCESS_MESSAGE = "All tests have successfully passed!"


SCENARIOS: Dict[str, Tuple[List[Job], List[str]]] = {
    "five jobs": (
        [
            Job("a", deadline=2, profit=100),
            Job("b", deadline=1, profit=19),
            Job("c", deadline=2, profit=27),
            Job("d", deadline=1, profit=25),
            Job("e", deadline=3, profit=15),
        ],
        ["a", "c", "e"],
    ),
    "four jobs with shared deadline": (
        [
            Job("x", deadline=1, profit=50),
            Job("y", deadline=2, profit=60),
            Job("z", deadline=2, profit=20),
            Job("w", deadline=3, profit=30),
        ],
        ["x", "y", "w"],
    ),
    "one late job": (
        [
            Job("a", deadline=4, profit=20),
            Job("b", deadline=1, profit=10),
            Job("c", deadline=1, profit=40),
            Job("d", deadline=1, profit=30),
        ],
        ["c", "a"],
    ),
}


def run_self_tests() -> None:
    """
    Run every scenario and assert the expected sequence.

    Raises:
        AssertionError: If a scenario produces a different sequence
    """
    for name, (jobs, expected) in SCENARIOS.items():
        result = schedule(jobs)
        if result != expected:
            raise AssertionError(f"{name}: expected {expected}, got {result}")

    print(SUCCESS_MESSAGE)
