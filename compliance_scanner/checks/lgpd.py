"""Brazil Lei Geral de Proteção de Dados checks."""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult
from compliance_scanner.severity import Severity

from . import Check, ScanContext, file_contains, find_file


async def _legal_basis(context: ScanContext) -> CheckResult:
    found = find_file(context, ("legal-basis", "privacy", "lgpd"))
    if found and file_contains(found, ("legal basis", "base legal", "consent")):
        return LEGAL_BASIS.passed("Legal basis documentation found")
    return LEGAL_BASIS.warning(
        "No documented legal basis for processing",
        recommendation="Document legal basis per LGPD Article 7",
        reference="LGPD Article 7",
    )


async def _encarregado(context: ScanContext) -> CheckResult:
    found = find_file(context, ("dpo", "encarregado", "officer", "privacy"))
    if found and file_contains(found, ("encarregado", "dpo", "officer")):
        return ENCARREGADO.passed("Encarregado designation found")
    return ENCARREGADO.warning(
        "No Encarregado (DPO) designation found",
        recommendation="Designate an Encarregado (Data Protection Officer)",
        reference="LGPD Article 41",
    )


async def _subject_rights(context: ScanContext) -> CheckResult:
    if find_file(context, ("rights", "arco", "subject-rights")):
        return DATA_SUBJECT_RIGHTS.passed("Data subject rights documentation found")
    return DATA_SUBJECT_RIGHTS.warning(
        "No ARCO rights implementation found",
        recommendation="Implement Access, Rectification, Cancellation and Opposition rights",
        reference="LGPD Article 18",
    )


async def _breach_notification(context: ScanContext) -> CheckResult:
    if find_file(context, ("breach", "incident", "notification")):
        return BREACH_NOTIFICATION.passed("Breach notification procedure found")
    return BREACH_NOTIFICATION.failed(
        "No breach notification procedure",
        recommendation="Create breach notification procedure for ANPD",
        reference="LGPD Article 48",
    )


LEGAL_BASIS = Check(
    check_id="LGPD-001",
    name="Legal Basis for Processing",
    category=Category.LGPD,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for documented legal basis",
    run=_legal_basis,
)

ENCARREGADO = Check(
    check_id="LGPD-002",
    name="Encarregado (DPO)",
    category=Category.LGPD,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for Encarregado/DPO designation",
    run=_encarregado,
)

DATA_SUBJECT_RIGHTS = Check(
    check_id="LGPD-003",
    name="Data Subject Rights (ARCO)",
    category=Category.LGPD,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for ARCO rights implementation",
    run=_subject_rights,
)

BREACH_NOTIFICATION = Check(
    check_id="LGPD-004",
    name="Breach Notification",
    category=Category.LGPD,
    severity=Severity.CRITICAL,
    score_weight=20,
    description="Check for breach notification procedure",
    run=_breach_notification,
)

LGPD_CHECKS = (
    LEGAL_BASIS,
    ENCARREGADO,
    DATA_SUBJECT_RIGHTS,
    BREACH_NOTIFICATION,
)
