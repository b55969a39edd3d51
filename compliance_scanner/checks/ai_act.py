"""EU AI Act checks.

Every check here is skipped when the manifest declares no AI/ML library.
"""

from __future__ import annotations

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult, FixAction
from compliance_scanner.severity import Severity
from compliance_scanner.templates import AI_AUDIT_TRAIL, AI_RISK_ASSESSMENT, template_writer

from . import Check, ScanContext, file_contains, find_file, has_ai_libraries, has_dependency

NO_AI_MESSAGE = "No AI libraries detected"
LOGGING_LIBRARIES = ("winston", "pino", "bunyan", "log4js", "structlog", "loguru", "tibet-vault")


async def _audit_trail(context: ScanContext) -> CheckResult:
    if not has_ai_libraries(context):
        return AI_DECISION_AUDIT_TRAIL.skipped(NO_AI_MESSAGE)
    found = find_file(context, ("audit", "ai-log", "decision-log", "ml-audit", "inference-log"))
    if found:
        return AI_DECISION_AUDIT_TRAIL.passed(f"Found: {found.name}")
    if has_dependency(context, LOGGING_LIBRARIES):
        return AI_DECISION_AUDIT_TRAIL.warning(
            "Logging library found, but no AI-specific audit trail detected",
            recommendation="Log AI decisions as structured, append-only provenance records",
            score_impact=10,
        )
    return AI_DECISION_AUDIT_TRAIL.failed(
        "No AI decision audit trail found",
        recommendation="Implement logging for AI decisions",
        reference="EU AI Act Article 12 - Record-keeping",
        fix_action=FixAction(
            description="Create AI audit trail template",
            auto_fix=template_writer(context.scan_path, "AI-AUDIT-TRAIL.md", AI_AUDIT_TRAIL),
        ),
    )


async def _human_oversight(context: ScanContext) -> CheckResult:
    if not has_ai_libraries(context):
        return HUMAN_OVERSIGHT.skipped(NO_AI_MESSAGE)
    found = find_file(context, ("review", "approval", "human-oversight", "hitl", "moderation"))
    if found:
        return HUMAN_OVERSIGHT.passed(f"Found: {found.name}")
    return HUMAN_OVERSIGHT.warning(
        "No human oversight mechanism detected",
        recommendation="Implement human review for high-risk AI decisions",
        reference="EU AI Act Article 14 - Human oversight",
    )


async def _transparency(context: ScanContext) -> CheckResult:
    if not has_ai_libraries(context):
        return TRANSPARENCY_NOTICE.skipped(NO_AI_MESSAGE)
    readme = find_file(context, ("readme",))
    if readme and file_contains(readme, ("ai",)) and file_contains(readme, ("powered by", "uses")):
        return TRANSPARENCY_NOTICE.passed("AI disclosure found in README")
    found = find_file(context, ("ai-disclosure", "transparency", "model-card", "ai-notice"))
    if found:
        return TRANSPARENCY_NOTICE.passed(f"Found: {found.name}")
    return TRANSPARENCY_NOTICE.warning(
        "No AI transparency notice found",
        recommendation="Add AI disclosure to README or create MODEL-CARD.md",
        reference="EU AI Act Article 13 - Transparency",
    )


async def _risk_assessment(context: ScanContext) -> CheckResult:
    if not has_ai_libraries(context):
        return RISK_ASSESSMENT.skipped(NO_AI_MESSAGE)
    found = find_file(context, ("risk-assessment", "ai-risk", "impact-assessment", "pia", "dpia"))
    if found:
        return RISK_ASSESSMENT.passed(f"Found: {found.name}")
    return RISK_ASSESSMENT.failed(
        "No AI risk assessment found",
        recommendation="Create AI risk assessment document",
        reference="EU AI Act Article 9 - Risk management system",
        fix_action=FixAction(
            description="Create AI risk assessment template",
            auto_fix=template_writer(context.scan_path, "AI-RISK-ASSESSMENT.md", AI_RISK_ASSESSMENT),
        ),
    )


AI_DECISION_AUDIT_TRAIL = Check(
    check_id="AIACT-001",
    name="AI Decision Audit Trail",
    category=Category.AI_ACT,
    severity=Severity.CRITICAL,
    score_weight=20,
    description="Check for AI decision logging/audit trail",
    run=_audit_trail,
)

HUMAN_OVERSIGHT = Check(
    check_id="AIACT-002",
    name="Human Oversight Mechanism",
    category=Category.AI_ACT,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for human oversight in AI decisions",
    run=_human_oversight,
)

TRANSPARENCY_NOTICE = Check(
    check_id="AIACT-003",
    name="AI Transparency Notice",
    category=Category.AI_ACT,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for AI transparency/disclosure",
    run=_transparency,
)

RISK_ASSESSMENT = Check(
    check_id="AIACT-004",
    name="AI Risk Assessment",
    category=Category.AI_ACT,
    severity=Severity.HIGH,
    score_weight=15,
    description="Check for AI risk assessment documentation",
    run=_risk_assessment,
)

AI_ACT_CHECKS = (
    AI_DECISION_AUDIT_TRAIL,
    HUMAN_OVERSIGHT,
    TRANSPARENCY_NOTICE,
    RISK_ASSESSMENT,
)
