"""Run checks against a scan context, one at a time, in registry order."""

from __future__ import annotations

import dataclasses
from typing import Iterable, List, Optional, Sequence

import structlog

from .category import Category
from .checks import Check, ScanContext
from .result import CheckResult

logger = structlog.get_logger(__name__)


def select_checks(checks: Sequence[Check], categories: Optional[Iterable[Category]] = None) -> List[Check]:
    """Return the checks in registry order, restricted to ``categories`` when given."""

    allowed = set(categories or ())
    if not allowed:
        return list(checks)
    return [check for check in checks if check.category in allowed]


async def run_checks(
    checks: Sequence[Check],
    context: ScanContext,
    categories: Optional[Iterable[Category]] = None,
) -> List[CheckResult]:
    """Evaluate each selected check and return exactly one result per check."""

    results: List[CheckResult] = []
    for check in select_checks(checks, categories):
        results.append(await run_check(check, context))
    return results


async def run_check(check: Check, context: ScanContext) -> CheckResult:
    """Evaluate a single check, converting any failure into a skipped result."""

    try:
        result = await check.run(context)
        if not isinstance(result, CheckResult):
            raise TypeError(f"expected CheckResult, got {type(result).__name__}")
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("check_failed", check_id=check.check_id, error=str(exc))
        return check.skipped(f"Check failed to run: {exc}")
    logger.debug("check_completed", check_id=check.check_id, status=result.status.value)
    return validate_result(check, result)


def validate_result(check: Check, result: CheckResult) -> CheckResult:
    """Enforce the result invariants the check author is expected to keep.

    ``score_impact`` is clamped to ``[0, score_weight]`` and ``can_auto_fix`` is
    cleared when no remediation coroutine is attached.
    """

    changes = {}
    if result.score_impact < 0 or result.score_impact > check.score_weight:
        clamped = min(max(result.score_impact, 0), check.score_weight)
        logger.warning(
            "score_impact_clamped",
            check_id=check.check_id,
            score_impact=result.score_impact,
            score_weight=check.score_weight,
        )
        changes["score_impact"] = clamped
    if result.can_auto_fix and (result.fix_action is None or result.fix_action.auto_fix is None):
        logger.warning("auto_fix_missing", check_id=check.check_id)
        changes["can_auto_fix"] = False
    if not changes:
        return result
    return dataclasses.replace(result, **changes)
