from compliance_scanner.collector import build_context, collect_files
from compliance_scanner.utils import dependency_names, load_manifest


def test_collect_files_skips_hidden_and_node_modules(tmp_path):
    (tmp_path / "README.md").write_text("hello", encoding="utf-8")
    (tmp_path / ".env").write_text("SECRET=1", encoding="utf-8")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("", encoding="utf-8")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "privacy.md").write_text("", encoding="utf-8")

    files = collect_files(tmp_path)

    assert [path.name for path in files] == ["README.md"]


def test_collect_files_respects_depth_limit(tmp_path):
    deep = tmp_path
    for level in range(5):
        deep = deep / f"level{level}"
        deep.mkdir()
        (deep / f"file{level}.md").write_text("", encoding="utf-8")

    names = {path.name for path in collect_files(tmp_path, max_depth=3)}

    assert names == {"file0.md", "file1.md", "file2.md"}


def test_collect_files_honours_configured_excludes(tmp_path):
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "privacy.md").write_text("", encoding="utf-8")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "privacy.md").write_text("", encoding="utf-8")

    files = collect_files(tmp_path, exclude=("vendor",))

    assert [path.parent.name for path in files] == ["docs"]


def test_missing_root_yields_empty_context(tmp_path):
    context = build_context(tmp_path / "does-not-exist")

    assert context.files == ()
    assert context.manifest is None


def test_malformed_manifest_is_treated_as_absent(tmp_path):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")

    assert load_manifest(tmp_path) is None


def test_package_json_dependencies(tmp_path):
    (tmp_path / "package.json").write_text(
        '{"dependencies": {"openai": "^4"}, "devDependencies": {"Klaro": "1"}}',
        encoding="utf-8",
    )

    context = build_context(tmp_path, sovereign_mode=True)

    assert context.sovereign_mode is True
    assert context.scan_path == tmp_path.resolve()
    assert dependency_names(context.manifest) == {"openai", "klaro"}


def test_pyproject_dependencies(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "demo"
dependencies = ["transformers>=4.0", "structlog"]

[project.optional-dependencies]
ml = ["torch[cuda] ; platform_system == 'Linux'"]
""".strip(),
        encoding="utf-8",
    )

    manifest = load_manifest(tmp_path)

    assert dependency_names(manifest) == {"transformers", "structlog", "torch"}
