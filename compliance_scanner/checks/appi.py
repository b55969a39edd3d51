"""Japan Act on the Protection of Personal Information checks."""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult
from compliance_scanner.severity import Severity

from . import Check, ScanContext, find_file


async def _privacy_policy(context: ScanContext) -> CheckResult:
    found = find_file(context, ("privacy", "プライバシー"))
    if found:
        return PRIVACY_POLICY.passed(f"Found: {found.name}")
    return PRIVACY_POLICY.failed(
        "No privacy policy found",
        recommendation="Create privacy policy compliant with APPI",
        reference="APPI Article 21",
    )


async def _handling_records(context: ScanContext) -> CheckResult:
    found = find_file(context, ("data-handling", "records", "processing-log"))
    if found:
        return DATA_HANDLING_RECORDS.passed(f"Found: {found.name}")
    return DATA_HANDLING_RECORDS.warning(
        "No data handling records found",
        recommendation="Maintain records of data handling activities",
        reference="APPI Article 26",
    )


async def _cross_border(context: ScanContext) -> CheckResult:
    if find_file(context, ("transfer", "cross-border", "international")):
        return CROSS_BORDER_RULES.passed("Cross-border documentation found")
    return CROSS_BORDER_RULES.warning(
        "No cross-border transfer documentation",
        recommendation="Document transfers outside Japan with adequate protection",
        reference="APPI Article 28",
    )


async def _pseudonymization(context: ScanContext) -> CheckResult:
    if find_file(context, ("pseudonym", "anonymize", "mask")):
        return PSEUDONYMIZATION.passed("Pseudonymization documentation found")
    return PSEUDONYMIZATION.warning(
        "No pseudonymization documentation",
        recommendation="Consider pseudonymization for enhanced data protection",
        reference="APPI Article 41",
    )


PRIVACY_POLICY = Check(
    check_id="APPI-001",
    name="Privacy Policy (APPI)",
    category=Category.APPI,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for APPI-compliant privacy policy",
    run=_privacy_policy,
)

DATA_HANDLING_RECORDS = Check(
    check_id="APPI-002",
    name="Data Handling Records",
    category=Category.APPI,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for data handling records",
    run=_handling_records,
)

CROSS_BORDER_RULES = Check(
    check_id="APPI-003",
    name="Cross-Border Transfer Rules",
    category=Category.APPI,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for cross-border transfer compliance",
    run=_cross_border,
)

PSEUDONYMIZATION = Check(
    check_id="APPI-004",
    name="Pseudonymization Support",
    category=Category.APPI,
    severity=Severity.MEDIUM,
    score_weight=10,
    description="Check for pseudonymization capabilities",
    run=_pseudonymization,
)

APPI_CHECKS = (
    PRIVACY_POLICY,
    DATA_HANDLING_RECORDS,
    CROSS_BORDER_RULES,
    PSEUDONYMIZATION,
)
