"""Singapore Personal Data Protection Act checks."""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult
from compliance_scanner.severity import Severity

from . import Check, ScanContext, file_contains, find_file


async def _consent(context: ScanContext) -> CheckResult:
    if find_file(context, ("consent", "agreement", "terms")):
        return CONSENT_OBLIGATION.passed("Consent documentation found")
    return CONSENT_OBLIGATION.warning(
        "No consent mechanism found",
        recommendation="Implement clear consent mechanism",
        reference="PDPA Part IV",
    )


async def _data_protection_officer(context: ScanContext) -> CheckResult:
    found = find_file(context, ("dpo", "officer", "privacy"))
    if found and file_contains(found, ("officer", "dpo")):
        return DATA_PROTECTION_OFFICER.passed("DPO information found")
    return DATA_PROTECTION_OFFICER.warning(
        "No DPO designation found",
        recommendation="Designate a Data Protection Officer",
        reference="PDPA Section 11(3)",
    )


async def _breach_notification(context: ScanContext) -> CheckResult:
    found = find_file(context, ("breach", "incident", "notification"))
    if found and file_contains(found, ("3 day", "three day", "72")):
        return BREACH_NOTIFICATION_3D.passed("Breach notification with timeline found")
    return BREACH_NOTIFICATION_3D.failed(
        "No 3-day breach notification procedure",
        recommendation="Create breach procedure with 3-day notification to PDPC",
        reference="PDPA Section 26D",
    )


async def _do_not_call(context: ScanContext) -> CheckResult:
    if find_file(context, ("dnc", "do-not-call", "marketing")):
        return DO_NOT_CALL.passed("DNC compliance documentation found")
    return DO_NOT_CALL.warning(
        "No DNC registry compliance found",
        recommendation="Check Singapore DNC registry before marketing calls",
        reference="PDPA Part IX",
    )


CONSENT_OBLIGATION = Check(
    check_id="PDPA-001",
    name="Consent Obligation",
    category=Category.PDPA,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for consent mechanism",
    run=_consent,
)

DATA_PROTECTION_OFFICER = Check(
    check_id="PDPA-002",
    name="Data Protection Officer",
    category=Category.PDPA,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for DPO designation",
    run=_data_protection_officer,
)

BREACH_NOTIFICATION_3D = Check(
    check_id="PDPA-003",
    name="3-Day Breach Notification",
    category=Category.PDPA,
    severity=Severity.CRITICAL,
    score_weight=20,
    description="Check for 3-day breach notification procedure",
    run=_breach_notification,
)

DO_NOT_CALL = Check(
    check_id="PDPA-004",
    name="Do Not Call Compliance",
    category=Category.PDPA,
    severity=Severity.MEDIUM,
    score_weight=10,
    description="Check for DNC registry compliance",
    run=_do_not_call,
)

PDPA_CHECKS = (
    CONSENT_OBLIGATION,
    DATA_PROTECTION_OFFICER,
    BREACH_NOTIFICATION_3D,
    DO_NOT_CALL,
)
