"""JIS bilateral consent and TIBET provenance checks."""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult
from compliance_scanner.severity import Severity

from . import Check, ScanContext, find_file, has_dependency


async def _bilateral_consent(context: ScanContext) -> CheckResult:
    if has_dependency(context, ("did-jis", "@jtel/jis", "jis-consent")):
        return BILATERAL_CONSENT.passed("JIS bilateral consent library found")
    if find_file(context, ("consent", "jis", "bilateral")):
        return BILATERAL_CONSENT.passed("Consent implementation found")
    return BILATERAL_CONSENT.warning(
        "No bilateral consent mechanism found",
        recommendation="Implement did:jis for bilateral consent",
        reference="JIS Protocol v1.0",
    )


async def _provenance_trail(context: ScanContext) -> CheckResult:
    if has_dependency(context, ("tibet-vault", "tibet-audit", "mcp-server-tibet")):
        return PROVENANCE_TRAIL.passed("TIBET provenance library found")
    if find_file(context, ("tibet", "provenance", "audit-trail")):
        return PROVENANCE_TRAIL.passed("Provenance documentation found")
    return PROVENANCE_TRAIL.warning(
        "No TIBET provenance trail found",
        recommendation="Implement TIBET for an audit trail",
        reference="IETF draft-vandemeent-tibet-provenance",
    )


async def _intent_verification(context: ScanContext) -> CheckResult:
    if find_file(context, ("intent", "erachter", "purpose")):
        return INTENT_VERIFICATION.passed("Intent verification found")
    return INTENT_VERIFICATION.warning(
        "No explicit intent verification",
        recommendation="Document the ERACHTER (intent/why) for data processing",
        reference="TIBET ERACHTER principle",
    )


async def _signoff_workflow(context: ScanContext) -> CheckResult:
    if find_file(context, ("signoff", "approval", "review")):
        return SIGNOFF_WORKFLOW.passed("Sign-off workflow found")
    # optional outside regulated environments
    return SIGNOFF_WORKFLOW.skipped(
        "No sign-off workflow (optional for non-regulated)",
        recommendation="Add a human sign-off step for compliance verification",
        reference="JIS Sign-off Protocol",
    )


BILATERAL_CONSENT = Check(
    check_id="JIS-001",
    name="Bilateral Consent Implementation",
    category=Category.JIS,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for bilateral consent mechanism (did:jis)",
    run=_bilateral_consent,
)

PROVENANCE_TRAIL = Check(
    check_id="JIS-002",
    name="TIBET Provenance Trail",
    category=Category.JIS,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for TIBET provenance implementation",
    run=_provenance_trail,
)

INTENT_VERIFICATION = Check(
    check_id="JIS-003",
    name="Intent Verification",
    category=Category.JIS,
    severity=Severity.MEDIUM,
    score_weight=10,
    description="Check for intent verification (ERACHTER)",
    run=_intent_verification,
)

SIGNOFF_WORKFLOW = Check(
    check_id="JIS-004",
    name="Sign-off Workflow",
    category=Category.JIS,
    severity=Severity.MEDIUM,
    score_weight=10,
    description="Check for human sign-off workflow",
    run=_signoff_workflow,
)

JIS_CHECKS = (
    BILATERAL_CONSENT,
    PROVENANCE_TRAIL,
    INTENT_VERIFICATION,
    SIGNOFF_WORKFLOW,
)
