"""Check model and the heuristics shared by the check modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Tuple

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult, FixAction, Status
from compliance_scanner.severity import Severity
from compliance_scanner.utils import dependency_names, read_text_file

AI_LIBRARIES = (
    "openai",
    "@anthropic-ai/sdk",
    "anthropic",
    "@google/generative-ai",
    "langchain",
    "@langchain/core",
    "llamaindex",
    "llama-index",
    "transformers",
    "tensorflow",
    "@tensorflow/tfjs",
    "torch",
    "onnxruntime",
    "ml5",
    "brain.js",
)


@dataclass(frozen=True)
class ScanContext:
    """Bundle inputs shared across checks. Built once per scan, never mutated."""

    scan_path: Path
    manifest: Optional[Dict[str, Any]] = None
    files: Tuple[Path, ...] = ()
    sovereign_mode: bool = False


@dataclass(frozen=True)
class Check:
    """A single compliance heuristic.

    ``run`` is a coroutine function taking the scan context and returning the
    check's ``CheckResult``. The outcome helpers copy the identifying fields so
    check bodies only state what they found.
    """

    check_id: str
    name: str
    category: Category
    severity: Severity
    score_weight: int
    description: str
    run: Callable[[ScanContext], Awaitable[CheckResult]] = field(repr=False, compare=False)

    def _result(self, status: Status, message: Optional[str], **extra: Any) -> CheckResult:
        return CheckResult(
            check_id=self.check_id,
            name=self.name,
            status=status,
            severity=self.severity,
            category=self.category,
            message=message,
            **extra,
        )

    def passed(self, message: Optional[str] = None) -> CheckResult:
        return self._result(Status.PASSED, message)

    def skipped(
        self,
        message: Optional[str] = None,
        recommendation: Optional[str] = None,
        reference: Optional[str] = None,
    ) -> CheckResult:
        return self._result(Status.SKIPPED, message, recommendation=recommendation, reference=reference)

    def warning(
        self,
        message: str,
        recommendation: Optional[str] = None,
        reference: Optional[str] = None,
        score_impact: Optional[int] = None,
        fix_action: Optional[FixAction] = None,
    ) -> CheckResult:
        return self._not_passed(Status.WARNING, message, recommendation, reference, score_impact, fix_action)

    def failed(
        self,
        message: str,
        recommendation: Optional[str] = None,
        reference: Optional[str] = None,
        score_impact: Optional[int] = None,
        fix_action: Optional[FixAction] = None,
    ) -> CheckResult:
        return self._not_passed(Status.FAILED, message, recommendation, reference, score_impact, fix_action)

    def _not_passed(
        self,
        status: Status,
        message: str,
        recommendation: Optional[str],
        reference: Optional[str],
        score_impact: Optional[int],
        fix_action: Optional[FixAction],
    ) -> CheckResult:
        return self._result(
            status,
            message,
            recommendation=recommendation,
            reference=reference,
            score_impact=self.score_weight if score_impact is None else score_impact,
            can_auto_fix=fix_action is not None and fix_action.auto_fix is not None,
            fix_action=fix_action,
        )


# ----------------------------------------------------------------------
# Heuristics
# ----------------------------------------------------------------------
def find_file(context: ScanContext, patterns: Iterable[str]) -> Optional[Path]:
    """Return the first discovered file whose name contains any pattern."""

    lowered = [pattern.lower() for pattern in patterns]
    for path in context.files:
        basename = path.name.lower()
        if any(pattern in basename for pattern in lowered):
            return path
    return None


def has_file_named(context: ScanContext, names: Iterable[str]) -> bool:
    wanted = {name.lower() for name in names}
    return any(path.name.lower() in wanted for path in context.files)


def file_contains(path: Path, keywords: Iterable[str]) -> bool:
    """Case-insensitive keyword search. Unreadable files never match."""

    try:
        content = read_text_file(path).lower()
    except (OSError, UnicodeDecodeError):
        return False
    return any(keyword.lower() in content for keyword in keywords)


def has_dependency(context: ScanContext, names: Iterable[str]) -> bool:
    declared = dependency_names(context.manifest)
    return any(name.lower() in declared for name in names)


def has_ai_libraries(context: ScanContext) -> bool:
    return has_dependency(context, AI_LIBRARIES)
