"""South Korea Personal Information Protection Act checks.

PIPA requires breach notification within 24 hours.
"""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult
from compliance_scanner.severity import Severity

from . import Check, ScanContext, file_contains, find_file

BREACH_PATTERNS = ("breach", "incident", "notification")
TRANSFER_PATTERNS = ("transfer", "cross-border", "international")


async def _privacy_officer(context: ScanContext) -> CheckResult:
    found = find_file(context, ("privacy", "cpo", "officer"))
    if found and file_contains(found, ("officer", "cpo", "책임자")):
        return PRIVACY_OFFICER.passed("Privacy officer information found")
    return PRIVACY_OFFICER.failed(
        "No Chief Privacy Officer (CPO) designation found",
        recommendation="Designate and document a Chief Privacy Officer",
        reference="PIPA Article 31",
    )


async def _breach_notification(context: ScanContext) -> CheckResult:
    found = find_file(context, BREACH_PATTERNS)
    if found:
        if file_contains(found, ("24", "twenty-four")):
            return BREACH_NOTIFICATION_24H.passed("24-hour breach notification procedure found")
        return BREACH_NOTIFICATION_24H.warning(
            "Breach procedure found but 24-hour requirement not explicit",
            recommendation="Update to specify 24-hour notification (PIPA requirement)",
            score_impact=10,
        )
    return BREACH_NOTIFICATION_24H.failed(
        "No 24-hour breach notification procedure found",
        recommendation="Create breach procedure with 24-hour notification",
        reference="PIPA Article 34",
    )


async def _explicit_consent(context: ScanContext) -> CheckResult:
    if find_file(context, ("consent", "opt-in", "agreement")):
        return EXPLICIT_CONSENT.passed("Consent documentation found")
    return EXPLICIT_CONSENT.warning(
        "No explicit opt-in consent mechanism found",
        recommendation="Implement clear opt-in consent (PIPA requires explicit consent)",
        reference="PIPA Article 15",
    )


async def _cross_border(context: ScanContext) -> CheckResult:
    if find_file(context, TRANSFER_PATTERNS):
        return CROSS_BORDER_TRANSFER.passed("Cross-border transfer documentation found")
    return CROSS_BORDER_TRANSFER.warning(
        "No cross-border transfer documentation found",
        recommendation="Document data transfers outside South Korea",
        reference="PIPA Article 17",
    )


PRIVACY_OFFICER = Check(
    check_id="PIPA-001",
    name="Privacy Officer Designation",
    category=Category.PIPA,
    severity=Severity.CRITICAL,
    score_weight=20,
    description="Check for designated privacy officer (CPO)",
    run=_privacy_officer,
)

BREACH_NOTIFICATION_24H = Check(
    check_id="PIPA-002",
    name="24-Hour Breach Notification",
    category=Category.PIPA,
    severity=Severity.CRITICAL,
    score_weight=20,
    description="Check for 24-hour breach notification procedure",
    run=_breach_notification,
)

EXPLICIT_CONSENT = Check(
    check_id="PIPA-003",
    name="Explicit Consent (Opt-in)",
    category=Category.PIPA,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for opt-in consent mechanism",
    run=_explicit_consent,
)

CROSS_BORDER_TRANSFER = Check(
    check_id="PIPA-004",
    name="Cross-Border Transfer Documentation",
    category=Category.PIPA,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for cross-border data transfer documentation",
    run=_cross_border,
)

PIPA_CHECKS = (
    PRIVACY_OFFICER,
    BREACH_NOTIFICATION_24H,
    EXPLICIT_CONSENT,
    CROSS_BORDER_TRANSFER,
)
