"""EU General Data Protection Regulation checks."""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult, FixAction
from compliance_scanner.severity import Severity
from compliance_scanner.templates import BREACH_PROCEDURE, PRIVACY_POLICY, template_writer

from . import Check, ScanContext, file_contains, find_file, has_dependency

PRIVACY_PATTERNS = ("privacy", "privacy-policy", "privacypolicy", "gdpr", "datenschutz")
CONSENT_LIBRARIES = (
    "cookieconsent",
    "cookie-consent",
    "gdpr-cookie",
    "tarteaucitron",
    "klaro",
    "onetrust",
    "cookiebot",
    "consent-manager",
)


async def _privacy_policy(context: ScanContext) -> CheckResult:
    found = find_file(context, PRIVACY_PATTERNS)
    if found:
        return PRIVACY_POLICY_DOCUMENT.passed(f"Found: {found.name}")
    return PRIVACY_POLICY_DOCUMENT.failed(
        "No privacy policy document found",
        recommendation="Create a PRIVACY.md or privacy-policy.md file",
        reference="GDPR Article 13 & 14",
        fix_action=FixAction(
            description="Create privacy policy template",
            auto_fix=template_writer(context.scan_path, "PRIVACY.md", PRIVACY_POLICY),
        ),
    )


async def _data_retention(context: ScanContext) -> CheckResult:
    privacy = find_file(context, ("privacy", "gdpr"))
    if privacy and file_contains(privacy, ("retention", "how long")):
        return DATA_RETENTION_POLICY.passed("Retention policy found in privacy document")
    found = find_file(context, ("retention", "data-retention", "dataretention"))
    if found:
        return DATA_RETENTION_POLICY.passed(f"Found: {found.name}")
    return DATA_RETENTION_POLICY.failed(
        "No data retention policy found",
        recommendation="Add data retention section to privacy policy",
        reference="GDPR Article 5(1)(e)",
    )


async def _breach_procedure(context: ScanContext) -> CheckResult:
    found = find_file(context, ("breach", "incident", "security-incident", "data-breach"))
    if found:
        return BREACH_NOTIFICATION_PROCEDURE.passed(f"Found: {found.name}")
    return BREACH_NOTIFICATION_PROCEDURE.failed(
        "No breach notification procedure found",
        recommendation="Create incident response plan (GDPR requires 72-hour notification)",
        reference="GDPR Article 33 & 34",
        fix_action=FixAction(
            description="Create breach notification template",
            auto_fix=template_writer(context.scan_path, "BREACH-PROCEDURE.md", BREACH_PROCEDURE),
        ),
    )


async def _consent_management(context: ScanContext) -> CheckResult:
    if has_dependency(context, CONSENT_LIBRARIES):
        return CONSENT_MANAGEMENT.passed("Consent management library found")
    found = find_file(context, ("consent", "cookie"))
    if found:
        return CONSENT_MANAGEMENT.passed(f"Found: {found.name}")
    return CONSENT_MANAGEMENT.warning(
        "No consent management detected",
        recommendation="Implement a cookie consent banner (e.g. cookieconsent, klaro)",
        reference="GDPR Article 7",
    )


async def _dpo_contact(context: ScanContext) -> CheckResult:
    privacy = find_file(context, ("privacy", "gdpr"))
    if privacy and file_contains(privacy, ("dpo", "data protection officer", "datenschutzbeauftragter")):
        return DPO_CONTACT.passed("DPO information found in privacy policy")
    return DPO_CONTACT.warning(
        "No DPO contact information found",
        recommendation="Add DPO contact to privacy policy",
        reference="GDPR Article 37-39",
    )


PRIVACY_POLICY_DOCUMENT = Check(
    check_id="GDPR-001",
    name="Privacy Policy Document",
    category=Category.GDPR,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for privacy policy document",
    run=_privacy_policy,
)

DATA_RETENTION_POLICY = Check(
    check_id="GDPR-002",
    name="Data Retention Policy",
    category=Category.GDPR,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for data retention policy",
    run=_data_retention,
)

BREACH_NOTIFICATION_PROCEDURE = Check(
    check_id="GDPR-003",
    name="Breach Notification Procedure",
    category=Category.GDPR,
    severity=Severity.CRITICAL,
    score_weight=20,
    description="Check for data breach notification procedure (72 hours)",
    run=_breach_procedure,
)

CONSENT_MANAGEMENT = Check(
    check_id="GDPR-004",
    name="Consent Management",
    category=Category.GDPR,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for consent management implementation",
    run=_consent_management,
)

DPO_CONTACT = Check(
    check_id="GDPR-005",
    name="DPO Contact Information",
    category=Category.GDPR,
    severity=Severity.MEDIUM,
    score_weight=10,
    description="Check for Data Protection Officer contact",
    run=_dpo_contact,
)

GDPR_CHECKS = (
    PRIVACY_POLICY_DOCUMENT,
    DATA_RETENTION_POLICY,
    BREACH_NOTIFICATION_PROCEDURE,
    CONSENT_MANAGEMENT,
    DPO_CONTACT,
)
