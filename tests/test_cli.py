import json

import pytest

from compliance_scanner import __version__, cli
from compliance_scanner.registry import ALL_CHECKS


def make_jis_ready(root):
    (root / "package.json").write_text('{"dependencies": {"tibet-vault": "1.0.0"}}', encoding="utf-8")
    (root / "consent.md").write_text("Bilateral consent via did:jis", encoding="utf-8")
    (root / "intent.md").write_text("ERACHTER", encoding="utf-8")


def test_scan_json_report_on_stdout(tmp_path, capsys):
    exit_code = cli.main(["scan", str(tmp_path), "--output", "json"])

    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert exit_code == 1
    assert data["failed"] > 0
    assert len(data["results"]) == len(ALL_CHECKS)
    assert len(data["scan_id"]) == 8
    assert data["sovereign_mode"] is False


def test_scan_writes_report_file(tmp_path, capsys):
    output_path = tmp_path / "reports" / "scan.json"

    cli.main(["scan", str(tmp_path), "-o", "json", "--out", str(output_path), "-c", "gdpr"])

    captured = capsys.readouterr()
    assert f"Report written to {output_path}" in captured.out
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert {result["category"] for result in data["results"]} == {"gdpr"}


def test_scan_passes_when_selected_category_is_clean(tmp_path, capsys):
    make_jis_ready(tmp_path)

    exit_code = cli.main(["scan", str(tmp_path), "--categories", "jis", "--quiet"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.strip() == "100/100 (A)"


def test_terminal_report_lists_priorities(tmp_path, capsys):
    exit_code = cli.main(["scan", str(tmp_path), "-c", "gdpr", "--sovereign"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Compliance Health Score:" in captured.out
    assert "Top Priorities" in captured.out
    assert "Sovereign mode" in captured.out


def test_unknown_category_is_a_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["scan", str(tmp_path), "-c", "gdpr,hipaa"])

    assert excinfo.value.code == 2
    assert "unknown category 'hipaa'" in capsys.readouterr().err


def test_broken_config_exits_with_two(tmp_path, capsys):
    (tmp_path / ".compliance-scanner.yaml").write_text("max_depth: deep\n", encoding="utf-8")

    exit_code = cli.main(["scan", str(tmp_path)])

    assert exit_code == 2
    assert "compliance-scanner: error:" in capsys.readouterr().err


def test_fix_dry_run_changes_nothing(tmp_path, capsys):
    exit_code = cli.main(["fix", str(tmp_path), "--dry-run"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Dry run: 3 fix(es) would be applied. No changes made." in captured.out
    assert list(tmp_path.iterdir()) == []


def test_fix_without_auto_only_lists(tmp_path, capsys):
    exit_code = cli.main(["fix", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Run with --auto to apply fixes automatically." in captured.out
    assert not (tmp_path / "PRIVACY.md").exists()


def test_fix_auto_writes_templates(tmp_path, capsys):
    exit_code = cli.main(["fix", str(tmp_path), "--auto"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Done. Fixed: 3, Failed: 0" in captured.out
    assert (tmp_path / "PRIVACY.md").exists()
    assert (tmp_path / "BREACH-PROCEDURE.md").exists()
    assert (tmp_path / ".well-known" / "security.txt").exists()


def test_fix_reports_nothing_to_do(tmp_path, capsys):
    (tmp_path / "PRIVACY.md").write_text("# Privacy", encoding="utf-8")
    (tmp_path / "BREACH-PROCEDURE.md").write_text("72 hours", encoding="utf-8")
    (tmp_path / "SECURITY.md").write_text("Report vulnerabilities", encoding="utf-8")

    exit_code = cli.main(["fix", str(tmp_path), "--auto"])

    assert exit_code == 0
    assert "No fixable issues found." in capsys.readouterr().out


def test_version_command(capsys):
    assert cli.main(["version"]) == 0
    assert capsys.readouterr().out.strip() == f"compliance-scanner {__version__}"
