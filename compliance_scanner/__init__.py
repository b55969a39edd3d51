"""Static compliance heuristics scanner."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("compliance-scanner")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

from .log import use_stdlib_logging

use_stdlib_logging()

from .category import Category
from .checks import Check, ScanContext
from .fixes import apply_fixes, get_fixable_issues
from .registry import ALL_CHECKS, CATEGORY_CHECKS
from .result import CheckResult, FixAction, FixReport, Grade, ScanResult, Status
from .scanner import scan
from .severity import Severity

__all__ = [
    "__version__",
    "ALL_CHECKS",
    "CATEGORY_CHECKS",
    "Category",
    "Check",
    "CheckResult",
    "FixAction",
    "FixReport",
    "Grade",
    "ScanContext",
    "ScanResult",
    "Severity",
    "Status",
    "apply_fixes",
    "get_fixable_issues",
    "scan",
]
