import asyncio
import json

from compliance_scanner.checks.ai_act import (
    AI_DECISION_AUDIT_TRAIL,
    AI_ACT_CHECKS,
    RISK_ASSESSMENT,
    TRANSPARENCY_NOTICE,
)
from compliance_scanner.collector import build_context
from compliance_scanner.result import Status


def write_manifest(root, dependencies):
    (root / "package.json").write_text(json.dumps({"dependencies": dependencies}), encoding="utf-8")


def run_check(check, root):
    return asyncio.run(check.run(build_context(root)))


def test_all_checks_skip_without_ai_libraries(tmp_path):
    write_manifest(tmp_path, {"express": "^4"})

    for check in AI_ACT_CHECKS:
        result = run_check(check, tmp_path)
        assert result.status == Status.SKIPPED
        assert result.message == "No AI libraries detected"


def test_audit_trail_warns_when_only_logging_library_present(tmp_path):
    write_manifest(tmp_path, {"openai": "^4", "pino": "^8"})

    result = run_check(AI_DECISION_AUDIT_TRAIL, tmp_path)

    assert result.status == Status.WARNING
    assert result.score_impact == 10


def test_audit_trail_fails_and_offers_template(tmp_path):
    write_manifest(tmp_path, {"langchain": "^0.1"})

    result = run_check(AI_DECISION_AUDIT_TRAIL, tmp_path)

    assert result.status == Status.FAILED
    assert result.can_auto_fix is True
    asyncio.run(result.fix_action.auto_fix())
    assert (tmp_path / "AI-AUDIT-TRAIL.md").exists()
    assert run_check(AI_DECISION_AUDIT_TRAIL, tmp_path).status == Status.PASSED


def test_python_ai_dependency_is_detected(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\ndependencies = ["anthropic>=0.30"]\n',
        encoding="utf-8",
    )

    result = run_check(RISK_ASSESSMENT, tmp_path)

    assert result.status == Status.FAILED
    assert result.fix_action.description == "Create AI risk assessment template"


def test_readme_disclosure_counts_as_transparency(tmp_path):
    write_manifest(tmp_path, {"openai": "^4"})
    (tmp_path / "README.md").write_text("This assistant is powered by an AI model.", encoding="utf-8")

    result = run_check(TRANSPARENCY_NOTICE, tmp_path)

    assert result.status == Status.PASSED
    assert result.message == "AI disclosure found in README"
