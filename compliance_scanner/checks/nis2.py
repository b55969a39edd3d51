"""Network and Information Security Directive 2 (EU) checks."""

from __future__ import annotations

import json
from typing import List, Optional, Tuple

from compliance_scanner.category import Category
from compliance_scanner.result import CheckResult, FixAction
from compliance_scanner.severity import Severity
from compliance_scanner.templates import SECURITY_TXT, template_writer
from compliance_scanner.utils import read_text_file

from . import Check, ScanContext, file_contains, find_file, has_file_named

FOREIGN_CLOUD_PROVIDERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("AWS", ("amazonaws.com", "aws-sdk", "aws.amazon", "s3.amazonaws", "boto3")),
    ("Azure", ("azure.com", "microsoft.com", "azure-sdk", "blob.core.windows")),
    ("Google Cloud", ("googleapis.com", "google-cloud", "gcp", "storage.cloud.google")),
    ("Cloudflare (US)", ("cloudflare.com", "cloudflare-sdk")),
    ("DigitalOcean", ("digitalocean.com", "digitaloceanspaces")),
    ("Kyndryl/IBM", ("kyndryl.com", "ibm.com", "softlayer")),
)
CONFIG_SUFFIXES = (".json", ".yaml", ".yml", ".toml")
MAX_CONFIG_FILES = 20
LOCKFILES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml", "poetry.lock", "uv.lock", "pipfile.lock")
LOCKFILE_COMMANDS = (
    ("package.json", "npm install --package-lock-only"),
    ("pyproject.toml", "uv lock"),
)


def detect_foreign_cloud(context: ScanContext) -> List[str]:
    """Return the providers whose markers appear in the manifest or config files."""

    found: List[str] = []

    def _record(content: str) -> None:
        for provider, patterns in FOREIGN_CLOUD_PROVIDERS:
            if provider not in found and any(pattern in content for pattern in patterns):
                found.append(provider)

    if context.manifest:
        _record(json.dumps(context.manifest, default=str).lower())

    config_files = [
        path
        for path in context.files
        if ".env" in path.name.lower() or "config" in path.name.lower() or path.name.lower().endswith(CONFIG_SUFFIXES)
    ]
    for path in config_files[:MAX_CONFIG_FILES]:
        try:
            _record(read_text_file(path).lower())
        except (OSError, UnicodeDecodeError):
            continue
    return found


async def _risk_management(context: ScanContext) -> CheckResult:
    found = find_file(context, ("risk", "security-policy", "isms", "risk-management"))
    if found and file_contains(found, ("risk", "threat", "vulnerability", "assessment")):
        return RISK_MANAGEMENT_POLICY.passed("Risk management documentation found")
    return RISK_MANAGEMENT_POLICY.failed(
        "No risk management policy found",
        recommendation="Create risk management policy per NIS2 Article 21",
        reference="NIS2 Article 21(2)(a)",
    )


async def _incident_handling(context: ScanContext) -> CheckResult:
    found = find_file(context, ("incident", "response", "breach", "csirt"))
    if found:
        if file_contains(found, ("24 hour", "24-hour", "24h", "within 24")):
            return INCIDENT_HANDLING.passed("Incident handling with 24h notification found")
        return INCIDENT_HANDLING.warning(
            "Incident procedure found but no 24h notification mentioned",
            recommendation="Update procedure with 24-hour early warning requirement",
            reference="NIS2 Article 23(4)(a)",
            score_impact=10,
        )
    return INCIDENT_HANDLING.failed(
        "No incident handling procedure found",
        recommendation="Create incident response plan with 24h CSIRT notification",
        reference="NIS2 Article 23",
    )


async def _supply_chain(context: ScanContext) -> CheckResult:
    if find_file(context, ("supply-chain", "vendor", "third-party", "supplier")):
        return SUPPLY_CHAIN_SECURITY.passed("Supply chain security documentation found")
    if has_file_named(context, LOCKFILES):
        return SUPPLY_CHAIN_SECURITY.warning(
            "Lockfile found but no supply chain policy",
            recommendation="Document supply chain security policy and vendor assessment process",
            reference="NIS2 Article 21(2)(d)",
            score_impact=6,
        )
    return SUPPLY_CHAIN_SECURITY.failed(
        "No supply chain security measures found",
        recommendation="Implement supply chain security per NIS2 requirements",
        reference="NIS2 Article 21(2)(d)",
        fix_action=_lockfile_action(context),
    )


def _lockfile_action(context: ScanContext) -> Optional[FixAction]:
    for manifest, command in LOCKFILE_COMMANDS:
        if (context.scan_path / manifest).is_file():
            return FixAction(description="Pin dependencies with a lockfile", command=command)
    return None


async def _business_continuity(context: ScanContext) -> CheckResult:
    if find_file(context, ("continuity", "disaster", "recovery", "backup", "bcp", "drp")):
        return BUSINESS_CONTINUITY.passed("Business continuity plan found")
    return BUSINESS_CONTINUITY.failed(
        "No business continuity plan found",
        recommendation="Create BCP/DRP documentation",
        reference="NIS2 Article 21(2)(c)",
    )


async def _access_control(context: ScanContext) -> CheckResult:
    if find_file(context, ("access", "rbac", "authentication", "authorization")):
        return ACCESS_CONTROL_POLICY.passed("Access control documentation found")
    return ACCESS_CONTROL_POLICY.warning(
        "No access control policy found",
        recommendation="Document access control and authentication policies",
        reference="NIS2 Article 21(2)(i)",
    )


async def _encryption(context: ScanContext) -> CheckResult:
    if find_file(context, ("encryption", "crypto", "tls", "certificate", "ssl", "cert")):
        return ENCRYPTION.passed("Encryption configuration found")
    return ENCRYPTION.warning(
        "No encryption policy found",
        recommendation="Document cryptography policy and ensure TLS configuration",
        reference="NIS2 Article 21(2)(h)",
    )


async def _vulnerability_management(context: ScanContext) -> CheckResult:
    if find_file(context, ("vulnerability", "security.md", "security.txt", "cve")):
        return VULNERABILITY_MANAGEMENT.passed("Vulnerability handling documentation found")
    return VULNERABILITY_MANAGEMENT.warning(
        "No vulnerability management process found",
        recommendation="Add security.txt and vulnerability disclosure process",
        reference="NIS2 Article 21(2)(e)",
        fix_action=FixAction(
            description="Create security.txt with contact info",
            auto_fix=template_writer(context.scan_path, ".well-known/security.txt", SECURITY_TXT),
        ),
    )


async def _digital_sovereignty(context: ScanContext) -> CheckResult:
    providers = detect_foreign_cloud(context)
    if not providers:
        return DIGITAL_SOVEREIGNTY.passed("No foreign cloud dependencies detected")
    return DIGITAL_SOVEREIGNTY.warning(
        f"Foreign cloud detected: {', '.join(providers)}",
        recommendation="Consider EU-sovereign alternatives. US CLOUD Act allows foreign access to data.",
        reference="NIS2 Recital 79 (supply chain), Schrems II",
    )


async def _security_training(context: ScanContext) -> CheckResult:
    if find_file(context, ("training", "awareness", "onboarding", "security-guide")):
        return SECURITY_TRAINING.passed("Security training documentation found")
    return SECURITY_TRAINING.warning(
        "No security awareness training found",
        recommendation="Implement cyber hygiene and security training program",
        reference="NIS2 Article 21(2)(g)",
    )


async def _asset_management(context: ScanContext) -> CheckResult:
    if find_file(context, ("asset", "inventory", "cmdb", "infrastructure")):
        return ASSET_MANAGEMENT.passed("Asset management documentation found")
    return ASSET_MANAGEMENT.warning(
        "No asset inventory found",
        recommendation="Create and maintain IT asset inventory",
        reference="NIS2 Article 21(2)(a) - risk analysis requires asset knowledge",
    )


RISK_MANAGEMENT_POLICY = Check(
    check_id="NIS2-001",
    name="Risk Management Policy",
    category=Category.NIS2,
    severity=Severity.CRITICAL,
    score_weight=15,
    description="Check for risk management documentation (Article 21)",
    run=_risk_management,
)

INCIDENT_HANDLING = Check(
    check_id="NIS2-002",
    name="Incident Handling Procedure",
    category=Category.NIS2,
    severity=Severity.CRITICAL,
    score_weight=15,
    description="Check for incident response plan (24h notification)",
    run=_incident_handling,
)

SUPPLY_CHAIN_SECURITY = Check(
    check_id="NIS2-003",
    name="Supply Chain Security",
    category=Category.NIS2,
    severity=Severity.HIGH,
    score_weight=12,
    description="Check for supply chain security measures",
    run=_supply_chain,
)

BUSINESS_CONTINUITY = Check(
    check_id="NIS2-004",
    name="Business Continuity",
    category=Category.NIS2,
    severity=Severity.HIGH,
    score_weight=12,
    description="Check for business continuity / disaster recovery plan",
    run=_business_continuity,
)

ACCESS_CONTROL_POLICY = Check(
    check_id="NIS2-005",
    name="Access Control Policy",
    category=Category.NIS2,
    severity=Severity.HIGH,
    score_weight=10,
    description="Check for access control documentation",
    run=_access_control,
)

ENCRYPTION = Check(
    check_id="NIS2-006",
    name="Encryption & Cryptography",
    category=Category.NIS2,
    severity=Severity.HIGH,
    score_weight=10,
    description="Check for encryption policy and implementation",
    run=_encryption,
)

VULNERABILITY_MANAGEMENT = Check(
    check_id="NIS2-007",
    name="Vulnerability Management",
    category=Category.NIS2,
    severity=Severity.HIGH,
    score_weight=10,
    description="Check for vulnerability disclosure and handling",
    run=_vulnerability_management,
)

DIGITAL_SOVEREIGNTY = Check(
    check_id="NIS2-008",
    name="Digital Sovereignty",
    category=Category.NIS2,
    severity=Severity.HIGH,
    score_weight=12,
    description="Check for foreign cloud dependencies (US CLOUD Act risk)",
    run=_digital_sovereignty,
)

SECURITY_TRAINING = Check(
    check_id="NIS2-009",
    name="Security Awareness Training",
    category=Category.NIS2,
    severity=Severity.MEDIUM,
    score_weight=8,
    description="Check for security training documentation",
    run=_security_training,
)

ASSET_MANAGEMENT = Check(
    check_id="NIS2-010",
    name="Asset Management",
    category=Category.NIS2,
    severity=Severity.MEDIUM,
    score_weight=8,
    description="Check for asset inventory",
    run=_asset_management,
)

NIS2_CHECKS = (
    RISK_MANAGEMENT_POLICY,
    INCIDENT_HANDLING,
    SUPPLY_CHAIN_SECURITY,
    BUSINESS_CONTINUITY,
    ACCESS_CONTROL_POLICY,
    ENCRYPTION,
    VULNERABILITY_MANAGEMENT,
    DIGITAL_SOVEREIGNTY,
    SECURITY_TRAINING,
    ASSET_MANAGEMENT,
)
