import asyncio

from compliance_scanner.checks.nis2 import (
    DIGITAL_SOVEREIGNTY,
    INCIDENT_HANDLING,
    RISK_MANAGEMENT_POLICY,
    SUPPLY_CHAIN_SECURITY,
    VULNERABILITY_MANAGEMENT,
)
from compliance_scanner.collector import build_context
from compliance_scanner.result import Status


def run_check(check, root):
    return asyncio.run(check.run(build_context(root)))


def test_incident_procedure_without_24h_is_a_warning(tmp_path):
    (tmp_path / "incident-response.md").write_text("Call the on-call engineer.", encoding="utf-8")

    result = run_check(INCIDENT_HANDLING, tmp_path)

    assert result.status == Status.WARNING
    assert result.score_impact == 10


def test_incident_procedure_with_24h_passes(tmp_path):
    (tmp_path / "incident-response.md").write_text("Notify the CSIRT within 24 hours.", encoding="utf-8")

    assert run_check(INCIDENT_HANDLING, tmp_path).status == Status.PASSED


def test_risk_file_needs_risk_keywords(tmp_path):
    (tmp_path / "risk-register.md").write_text("TBD", encoding="utf-8")

    assert run_check(RISK_MANAGEMENT_POLICY, tmp_path).status == Status.FAILED

    (tmp_path / "risk-register.md").write_text("Threat model and assessment", encoding="utf-8")

    assert run_check(RISK_MANAGEMENT_POLICY, tmp_path).status == Status.PASSED


def test_lockfile_only_supply_chain_is_partial(tmp_path):
    (tmp_path / "package-lock.json").write_text("{}", encoding="utf-8")

    result = run_check(SUPPLY_CHAIN_SECURITY, tmp_path)

    assert result.status == Status.WARNING
    assert result.score_impact == 6


def test_foreign_cloud_in_config_is_flagged(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "storage.yaml").write_text("bucket: https://s3.amazonaws.com/data\n", encoding="utf-8")

    result = run_check(DIGITAL_SOVEREIGNTY, tmp_path)

    assert result.status == Status.WARNING
    assert result.message == "Foreign cloud detected: AWS"


def test_no_foreign_cloud_passes(tmp_path):
    (tmp_path / "settings.json").write_text('{"host": "localhost"}', encoding="utf-8")

    assert run_check(DIGITAL_SOVEREIGNTY, tmp_path).status == Status.PASSED


def test_security_txt_fix_creates_well_known_directory(tmp_path):
    result = run_check(VULNERABILITY_MANAGEMENT, tmp_path)

    assert result.status == Status.WARNING
    assert result.can_auto_fix is True
    assert asyncio.run(result.fix_action.auto_fix()) is True
    content = (tmp_path / ".well-known" / "security.txt").read_text(encoding="utf-8")
    assert content.startswith("Contact: security@example.com")
    assert "Expires: " in content


def test_missing_lockfile_suggests_a_command(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

    result = run_check(SUPPLY_CHAIN_SECURITY, tmp_path)

    assert result.status == Status.FAILED
    assert result.fix_action.command == "uv lock"
    assert result.can_auto_fix is False


def test_missing_lockfile_without_manifest_has_no_action(tmp_path):
    result = run_check(SUPPLY_CHAIN_SECURITY, tmp_path)

    assert result.status == Status.FAILED
    assert result.fix_action is None
