"""Integration tests for the CLI."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from boxgen.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def config_file(workspace):
    """Write a configuration file for the workspace."""
    path = workspace / "boxgen.yaml"
    path.write_text(f"""
paths:
  runtime_jar: {workspace}/dist/kotlin-runtime.jar
  libs_folder: {workspace}/android/libs
  tested_module_libs_folder: {workspace}/android/tested/libs
  src_folder: {workspace}/android/src
  compiled_output: {workspace}/android/libs/compiled
  license_file: {workspace}/license/LICENSE.txt
fixtures:
  roots:
    - {workspace}/testData/box
    - {workspace}/testData/boxWithStdlib
  sort_fixtures: true
""")
    return path


@pytest.fixture
def patched_compiler(fake_compiler):
    """Make the CLI build the fake compiler instead of kotlinc."""
    with patch("boxgen.generator.KotlincCompiler", return_value=fake_compiler):
        yield fake_compiler


class TestGenerateCommand:
    def test_success(self, runner, config_file, patched_compiler, workspace):
        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 0
        assert "Generated 3 tests" in result.output
        generated = list((workspace / "android" / "src").rglob("*.java"))
        assert len(generated) == 1

    def test_json_output(self, runner, config_file, patched_compiler):
        result = runner.invoke(main, ["generate", str(config_file), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["test_count"] == 3

    def test_verbose_flag(self, runner, config_file, patched_compiler):
        result = runner.invoke(main, ["--verbose", "generate", str(config_file)])

        assert result.exit_code == 0

    def test_compilation_failure_exit_code(self, runner, config_file, patched_compiler):
        patched_compiler.fail_with = RuntimeError("backend crashed")

        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 1
        assert "Compilation failed" in result.output

    def test_missing_runtime_jar_exit_code(self, runner, config_file, patched_compiler, workspace):
        (workspace / "dist" / "kotlin-runtime.jar").unlink()

        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 2
        assert "Runtime jar not found" in result.output

    def test_nonexistent_config(self, runner):
        result = runner.invoke(main, ["generate", "nonexistent.yaml"])

        assert result.exit_code == 2

    def test_invalid_yaml(self, runner, tmp_path):
        bad_file = tmp_path / "bad.yaml"
        bad_file.write_text("paths: [not: valid: yaml")

        result = runner.invoke(main, ["generate", str(bad_file)])

        assert result.exit_code == 2
        assert "Error loading file" in result.output

    def test_invalid_config(self, runner, tmp_path):
        bad_file = tmp_path / "bad.yaml"
        bad_file.write_text("batching:\n  flush_threshold: -1\n")

        result = runner.invoke(main, ["generate", str(bad_file)])

        assert result.exit_code == 2
        assert "batching.flush_threshold" in result.output

    def test_blocked_tested_libs_folder_exit_code(
        self, runner, config_file, patched_compiler, workspace
    ):
        (workspace / "android" / "tested").mkdir(parents=True)
        (workspace / "android" / "tested" / "libs").write_text("not a directory")

        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 2
        assert "Cannot create libs folder" in result.output

    def test_undecodable_fixture_exit_code(
        self, runner, config_file, patched_compiler, workspace
    ):
        (workspace / "testData" / "box" / "Bad.kt").write_bytes(b"fun box() = \"\xff\"\n")

        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 2
        assert "Cannot read fixture" in result.output
        assert "Bad.kt" in result.output

    def test_blocked_compiled_output_exit_code(
        self, runner, config_file, patched_compiler, workspace
    ):
        (workspace / "android" / "libs").mkdir(parents=True)
        (workspace / "android" / "libs" / "compiled").write_text("not a directory")

        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 2
        assert "compiled files" in result.output

    def test_blocked_src_folder_exit_code(
        self, runner, config_file, patched_compiler, workspace
    ):
        (workspace / "android").mkdir()
        (workspace / "android" / "src").write_text("not a directory")

        result = runner.invoke(main, ["generate", str(config_file)])

        assert result.exit_code == 2
        assert "Cannot write generated test class" in result.output


class TestListFixturesCommand:
    def test_lists_fixtures(self, runner, config_file, workspace):
        result = runner.invoke(main, ["list-fixtures", str(config_file)])

        assert result.exit_code == 0
        assert "testSimple" in result.output
        assert "testCollections  [full_jdk]" in result.output
        assert "3 fixture(s)" in result.output
        assert not (workspace / "android").exists()

    def test_json(self, runner, config_file):
        result = runner.invoke(main, ["list-fixtures", str(config_file), "--format", "json"])

        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 3

    def test_missing_root(self, runner, tmp_path):
        config = tmp_path / "boxgen.yaml"
        config.write_text(f"fixtures:\n  roots: {tmp_path}/missing\n")

        result = runner.invoke(main, ["list-fixtures", str(config)])

        assert result.exit_code == 2
        assert "Folder with testData is empty" in result.output

    def test_undecodable_fixture(self, runner, config_file, workspace):
        (workspace / "testData" / "box" / "Bad.kt").write_bytes(b"fun box() = \"\xff\"\n")

        result = runner.invoke(main, ["list-fixtures", str(config_file)])

        assert result.exit_code == 2
        assert "Cannot read fixture" in result.output
