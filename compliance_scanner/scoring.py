"""Reduce check results into a score and a letter grade."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Sequence, Tuple

from .result import CheckResult, Grade, Status

BASELINE = 100
WARNING_FACTOR = 0.5

# Inclusive lower bounds, evaluated high to low.
GRADE_THRESHOLDS: Tuple[Tuple[int, Grade], ...] = (
    (90, Grade.A),
    (80, Grade.B),
    (70, Grade.C),
    (60, Grade.D),
)


def calculate_deductions(results: Iterable[CheckResult]) -> float:
    """Failed results cost their full impact, warnings half. Nothing else deducts."""

    total = 0.0
    for result in results:
        if result.status == Status.FAILED:
            total += result.score_impact
        elif result.status == Status.WARNING:
            total += result.score_impact * WARNING_FACTOR
    return total


def calculate_score(results: Iterable[CheckResult]) -> int:
    # half-up rounding, so 92.5 scores 93
    return max(0, math.floor(BASELINE - calculate_deductions(results) + 0.5))


def calculate_grade(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


def count_statuses(results: Sequence[CheckResult]) -> Dict[Status, int]:
    counts = {status: 0 for status in Status}
    for result in results:
        counts[result.status] += 1
    return counts
