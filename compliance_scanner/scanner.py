"""Scan entry point composing the collector, executor and scorer."""

from __future__ import annotations

import secrets
import time
from pathlib import Path
from typing import Iterable, Optional, Sequence

import structlog

from .category import Category
from .checks import Check
from .collector import DEFAULT_MAX_DEPTH, build_context
from .executor import run_checks
from .registry import ALL_CHECKS
from .result import ScanResult, Status
from .scoring import calculate_grade, calculate_score, count_statuses

logger = structlog.get_logger(__name__)


def generate_scan_id() -> str:
    return secrets.token_hex(4)


async def scan(
    path: str | Path = ".",
    categories: Optional[Iterable[Category]] = None,
    sovereign_mode: bool = False,
    checks: Sequence[Check] = ALL_CHECKS,
    max_depth: int = DEFAULT_MAX_DEPTH,
    exclude: Iterable[str] = (),
) -> ScanResult:
    """Scan ``path`` and return the scored result.

    Individual check failures never raise; they are reported as skipped results.
    """

    started = time.monotonic()
    context = build_context(path, sovereign_mode=sovereign_mode, max_depth=max_depth, exclude=exclude)
    results = await run_checks(checks, context, categories)

    score = calculate_score(results)
    counts = count_statuses(results)
    result = ScanResult(
        scan_path=str(context.scan_path),
        score=score,
        grade=calculate_grade(score),
        results=results,
        passed=counts[Status.PASSED],
        warnings=counts[Status.WARNING],
        failed=counts[Status.FAILED],
        skipped=counts[Status.SKIPPED],
        duration_ms=int((time.monotonic() - started) * 1000),
        scan_id=generate_scan_id(),
        sovereign_mode=sovereign_mode,
    )
    logger.info(
        "scan_completed",
        scan_id=result.scan_id,
        path=result.scan_path,
        score=result.score,
        grade=result.grade.value,
        checks=len(results),
    )
    return result
