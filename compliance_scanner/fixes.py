"""Select fixable results and apply their remediation actions."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import structlog

from .result import CheckResult, FixReport

logger = structlog.get_logger(__name__)


def get_fixable_issues(results: Iterable[CheckResult]) -> List[CheckResult]:
    """Return non-passed results that declare an auto-fix, in input order."""

    return [result for result in results if result.is_fixable]


async def apply_fixes(issues: Sequence[CheckResult], dry_run: bool = False) -> FixReport:
    """Run each issue's remediation sequentially and tally the outcomes.

    Issues without a remediation coroutine are ignored. A dry run counts every
    remediation as fixed without invoking it.
    """

    report = FixReport()
    for issue in issues:
        fix_action = issue.fix_action
        if fix_action is None or fix_action.auto_fix is None:
            continue

        if dry_run:
            logger.info("would_fix", check_id=issue.check_id, description=fix_action.description)
            report.fixed += 1
            continue

        try:
            success = await fix_action.auto_fix()
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("fix_failed", check_id=issue.check_id, error=str(exc))
            report.failed += 1
            continue

        if success:
            logger.info("fix_applied", check_id=issue.check_id)
            report.fixed += 1
        else:
            logger.warning("fix_failed", check_id=issue.check_id, error="remediation reported failure")
            report.failed += 1
    return report
