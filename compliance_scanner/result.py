"""Core result data structures for the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Sequence

from .category import Category
from .severity import Severity


class Status(str, Enum):
    """Outcome of a single check evaluation."""

    PASSED = "passed"
    WARNING = "warning"
    FAILED = "failed"
    SKIPPED = "skipped"


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


STATUS_ICONS = {
    Status.PASSED: "+",
    Status.WARNING: "!",
    Status.FAILED: "x",
    Status.SKIPPED: "-",
}


@dataclass(frozen=True)
class FixAction:
    """Describe a remediation and optionally carry the coroutine that applies it."""

    description: str
    command: Optional[str] = None
    auto_fix: Optional[Callable[[], Awaitable[bool]]] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "description": self.description,
            "command": self.command,
            "auto_fix": self.auto_fix is not None,
        }


@dataclass(frozen=True)
class CheckResult:
    """Capture a single check evaluation.

    The identifying fields are copied from the originating check so the result
    stays meaningful without the registry.
    """

    check_id: str
    name: str
    status: Status
    severity: Severity
    category: Category
    message: Optional[str] = None
    recommendation: Optional[str] = None
    reference: Optional[str] = None
    score_impact: int = 0
    can_auto_fix: bool = False
    fix_action: Optional[FixAction] = None

    @property
    def is_fixable(self) -> bool:
        return self.can_auto_fix and self.status != Status.PASSED

    def to_dict(self) -> Dict[str, object]:
        return {
            "check_id": self.check_id,
            "name": self.name,
            "status": self.status.value,
            "severity": self.severity.value,
            "category": self.category.value,
            "message": self.message,
            "recommendation": self.recommendation,
            "reference": self.reference,
            "score_impact": self.score_impact,
            "can_auto_fix": self.can_auto_fix,
            "fix_action": self.fix_action.to_dict() if self.fix_action else None,
        }


@dataclass
class ScanResult:
    """Bundle the score, grade, status counts and ordered check results."""

    scan_path: str
    score: int
    grade: Grade
    results: List[CheckResult] = field(default_factory=list)
    passed: int = 0
    warnings: int = 0
    failed: int = 0
    skipped: int = 0
    duration_ms: int = 0
    scan_id: str = ""
    sovereign_mode: bool = False
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, object]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "scan_path": self.scan_path,
            "score": self.score,
            "grade": self.grade.value,
            "passed": self.passed,
            "warnings": self.warnings,
            "failed": self.failed,
            "skipped": self.skipped,
            "results": [result.to_dict() for result in self.results],
            "duration_ms": self.duration_ms,
            "scan_id": self.scan_id,
            "sovereign_mode": self.sovereign_mode,
        }

    def exit_code(self) -> int:
        return 1 if self.failed > 0 else 0

    def fixable(self) -> List[CheckResult]:
        return [result for result in self.results if result.is_fixable]

    def top_priorities(self, max_failed: int = 3, max_warnings: int = 2) -> List[CheckResult]:
        """Return the most severe failed results followed by the most severe warnings.

        Ties keep registry order.
        """

        failed = _by_severity(result for result in self.results if result.status == Status.FAILED)
        warnings = _by_severity(result for result in self.results if result.status == Status.WARNING)
        return failed[:max_failed] + warnings[:max_warnings]

    def by_category(self) -> Dict[Category, List[CheckResult]]:
        grouped: Dict[Category, List[CheckResult]] = {}
        for result in self.results:
            grouped.setdefault(result.category, []).append(result)
        return grouped


def _by_severity(results: Iterable[CheckResult]) -> List[CheckResult]:
    return sorted(results, key=lambda result: result.severity.rank, reverse=True)


@dataclass
class FixReport:
    """Tally of remediation outcomes."""

    fixed: int = 0
    failed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"fixed": self.fixed, "failed": self.failed}


def format_report(result: ScanResult, verbose: bool = False) -> str:
    """Create a human-readable summary for console output."""

    lines: List[str] = []
    lines.append(f"Compliance Health Score: {result.score}/100 (Grade: {result.grade.value})")
    lines.append("=" * 60)

    for category, checks in result.by_category().items():
        evaluated = [check for check in checks if check.status != Status.SKIPPED]
        if not evaluated:
            continue
        passed = sum(1 for check in evaluated if check.status == Status.PASSED)
        lines.append(f"{category.value.upper():<8} : {passed}/{len(evaluated)} passed")
        if verbose:
            for check in checks:
                lines.append(f"  [{STATUS_ICONS[check.status]}] {check.check_id} {check.name}")
                if check.message and check.status != Status.PASSED:
                    lines.append(f"      {check.message}")

    priorities = result.top_priorities()
    if priorities:
        lines.append("")
        lines.append("Top Priorities")
        lines.append("-" * 60)
        for index, issue in enumerate(priorities, start=1):
            lines.append(f"{index}. [{issue.severity.value.upper()}] {issue.check_id} {issue.name}")
            if issue.recommendation:
                lines.append(f"   -> {issue.recommendation}")
            if issue.fix_action and issue.fix_action.command:
                lines.append(f"   $ {issue.fix_action.command}")

    fixable = result.fixable()
    if fixable:
        lines.append("")
        lines.append(f"{len(fixable)} issue(s) can be auto-fixed: compliance-scanner fix --auto")

    lines.append("-" * 60)
    lines.append(
        f"Scanned in {result.duration_ms}ms | Passed: {result.passed} | Warnings: {result.warnings} "
        f"| Failed: {result.failed} | Skipped: {result.skipped}"
    )
    if result.sovereign_mode:
        lines.append("Sovereign mode: all checks ran locally")
    return "\n".join(lines)


def format_fix_list(issues: Sequence[CheckResult]) -> str:
    lines = [f"Found {len(issues)} fixable issue(s):"]
    for issue in issues:
        lines.append(f"  [{STATUS_ICONS[issue.status]}] {issue.check_id}: {issue.name}")
        if issue.fix_action and issue.fix_action.description:
            lines.append(f"      -> {issue.fix_action.description}")
        if issue.fix_action and issue.fix_action.command:
            lines.append(f"      $ {issue.fix_action.command}")
    return "\n".join(lines)
