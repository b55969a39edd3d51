import asyncio
import json
import logging

import structlog

from compliance_scanner.category import Category
from compliance_scanner.fixes import apply_fixes
from compliance_scanner.log import configure_logging, use_stdlib_logging
from compliance_scanner.scanner import scan


def test_library_calls_keep_stdout_clean(tmp_path, capsys):
    structlog.reset_defaults()
    use_stdlib_logging()

    result = asyncio.run(scan(tmp_path, categories=[Category.GDPR]))
    asyncio.run(apply_fixes(result.fixable(), dry_run=True))

    assert structlog.is_configured()
    assert capsys.readouterr().out == ""


def test_existing_structlog_configuration_is_kept():
    structlog.reset_defaults()
    sentinel = [structlog.processors.JSONRenderer()]
    structlog.configure(processors=sentinel)

    use_stdlib_logging()

    config = structlog.get_config()
    assert config["processors"] == sentinel
    assert not isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
    structlog.reset_defaults()
    use_stdlib_logging()


def test_json_logs_go_to_stderr(capfd):
    configure_logging("INFO", "json")

    structlog.get_logger("compliance_scanner.test").info("scan_completed", score=85)

    captured = capfd.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "scan_completed"
    assert event["score"] == 85
    assert logging.getLogger().level == logging.INFO
