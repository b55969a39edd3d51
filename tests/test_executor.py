import asyncio
from pathlib import Path

from compliance_scanner.category import Category
from compliance_scanner.checks import Check, ScanContext
from compliance_scanner.executor import run_checks, select_checks
from compliance_scanner.result import CheckResult, FixAction, Status
from compliance_scanner.severity import Severity


def passing(check):
    return check.passed("ok")


def failing(check):
    return check.failed("missing")


def raising(check):
    raise RuntimeError("boom")


def make_check(check_id, outcome=passing, category=Category.GDPR, weight=10):
    holder = {}

    async def run(context):
        return outcome(holder["check"])

    holder["check"] = Check(
        check_id=check_id,
        name=f"Check {check_id}",
        category=category,
        severity=Severity.HIGH,
        score_weight=weight,
        description="test check",
        run=run,
    )
    return holder["check"]


def run(checks, categories=None):
    context = ScanContext(scan_path=Path("."))
    return asyncio.run(run_checks(checks, context, categories))


def test_results_follow_registry_order():
    checks = [make_check("T-003"), make_check("T-001"), make_check("T-002")]

    results = run(checks)

    assert [result.check_id for result in results] == ["T-003", "T-001", "T-002"]


def test_failing_check_becomes_skipped_and_scan_continues():
    checks = [make_check("T-A", raising), make_check("T-B", passing)]

    results = run(checks)

    assert len(results) == 2
    assert results[0].status == Status.SKIPPED
    assert results[0].score_impact == 0
    assert results[0].can_auto_fix is False
    assert "boom" in results[0].message
    assert results[0].severity == Severity.HIGH
    assert results[0].name == "Check T-A"
    assert results[1].status == Status.PASSED


def test_non_result_return_value_is_contained():
    checks = [make_check("T-X", lambda check: {"status": "passed"})]

    results = run(checks)

    assert results[0].status == Status.SKIPPED
    assert "expected CheckResult" in results[0].message


def test_category_filter_selects_matching_checks_only():
    checks = [
        make_check("X-1", category=Category.GDPR),
        make_check("X-2", category=Category.GDPR),
        make_check("Y-1", category=Category.NIS2),
    ]

    results = run(checks, categories=[Category.NIS2])

    assert [result.check_id for result in results] == ["Y-1"]


def test_empty_category_filter_runs_everything():
    checks = [make_check("E-1", category=Category.GDPR), make_check("E-2", category=Category.JIS)]

    assert len(select_checks(checks, [])) == 2
    assert len(select_checks(checks, None)) == 2


def test_one_result_per_check_even_when_checks_raise():
    checks = [make_check("C-1", passing), make_check("C-2", failing), make_check("C-3", raising)]

    results = run(checks)

    assert len(results) == len(checks)
    assert [result.status for result in results] == [Status.PASSED, Status.FAILED, Status.SKIPPED]


def test_score_impact_is_clamped_to_weight():
    check = make_check("V-1", lambda check: check.failed("too much", score_impact=50), weight=10)

    results = run([check])

    assert results[0].score_impact == 10


def test_auto_fix_flag_cleared_without_callback():
    def outcome(check):
        return CheckResult(
            check_id=check.check_id,
            name=check.name,
            status=Status.FAILED,
            severity=check.severity,
            category=check.category,
            score_impact=5,
            can_auto_fix=True,
            fix_action=FixAction(description="manual only"),
        )

    results = run([make_check("V-2", outcome)])

    assert results[0].can_auto_fix is False
    assert results[0].fix_action.description == "manual only"
