import pytest

from compliance_scanner.category import Category
from compliance_scanner.config import CONFIG_FILENAME, ConfigError, ScannerConfig, load_config


def test_defaults_without_config_file(tmp_path):
    config = load_config(scan_root=tmp_path, environ={})

    assert config == ScannerConfig()


def test_config_file_in_scan_root_is_picked_up(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(
        """
categories: [gdpr, nis2]
sovereign: true
max_depth: 2
exclude: [vendor, dist]
logging:
  level: info
  format: json
""".strip(),
        encoding="utf-8",
    )

    config = load_config(scan_root=tmp_path, environ={})

    assert config.categories == (Category.GDPR, Category.NIS2)
    assert config.sovereign_mode is True
    assert config.max_depth == 2
    assert config.exclude == ("vendor", "dist")
    assert config.log_level == "INFO"
    assert config.log_format == "json"


def test_environment_overrides_logging(tmp_path):
    config = load_config(
        scan_root=tmp_path,
        environ={"COMPLIANCE_SCANNER_LOG_LEVEL": "debug", "COMPLIANCE_SCANNER_LOG_FORMAT": "json"},
    )

    assert config.log_level == "DEBUG"
    assert config.log_format == "json"


def test_unknown_category_is_rejected(tmp_path):
    config_path = tmp_path / "scanner.yaml"
    config_path.write_text("categories: gdpr,hipaa\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="hipaa"):
        load_config(config_path, environ={})


def test_invalid_types_are_rejected(tmp_path):
    config_path = tmp_path / "scanner.yaml"
    config_path.write_text("max_depth: deep\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="max_depth"):
        load_config(config_path, environ={})


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml", environ={})


def test_invalid_yaml_is_an_error(tmp_path):
    config_path = tmp_path / "scanner.yaml"
    config_path.write_text("categories: [gdpr\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(config_path, environ={})
