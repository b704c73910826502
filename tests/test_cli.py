"""
Tests for the CLI — options, output, and exit status.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from atman_prompts.core.config.loader import PromptsConfig
from atman_prompts.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, args: list[str], config: PromptsConfig):
    return runner.invoke(cli, args, obj={"config": config})


class TestCLIGlobal:
    def test_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "generate prompt files" in result.output

    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenerateCommand:
    def test_default_run(self, runner: CliRunner, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert "🚀 Generating prompt files..." in result.output
        assert "📁 Created directory structure: .prompts" in result.output
        assert "🎉 Prompt file generation completed successfully!" in result.output
        for language in ("en", "ja"):
            files = list((tmp_path / ".prompts" / language).iterdir())
            assert files
            assert all(f.suffix == ".md" for f in files)

    def test_second_run_skips(self, runner: CliRunner, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner.invoke(cli, [])
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert "Created" not in result.output.replace("Created directory structure", "")

    def test_output_dir_and_languages(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "custom"
        result = _invoke(runner, ["-o", str(out), "-l", "ja"], config)
        assert result.exit_code == 0, result.output
        assert (out / "ja" / "a.md").is_file()
        assert not (out / "en").exists()
        assert "✅ Created 1 prompt files:" in result.output
        assert str(out / "ja" / "a.md") in result.output

    def test_space_separated_languages(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "out"
        result = _invoke(runner, ["-o", str(out), "-l", "en ja"], config)
        assert result.exit_code == 0
        assert (out / "en" / "b.md").is_file()
        assert (out / "ja" / "a.md").is_file()

    def test_unknown_language_fails(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "out"
        result = _invoke(runner, ["-o", str(out), "-l", "en", "-l", "xx"], config)
        assert result.exit_code == 1
        assert "❌ Encountered 1 errors:" in result.output
        assert "No template files found for language: xx" in result.output
        assert (out / "en" / "a.md").is_file()

    def test_existing_file_preserved(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "out"
        (out / "en").mkdir(parents=True)
        (out / "en" / "a.md").write_text("custom", encoding="utf-8")
        result = _invoke(runner, ["-o", str(out)], config)
        assert result.exit_code == 0
        assert "⏭️  Skipped 1 existing files:" in result.output
        assert (out / "en" / "a.md").read_text(encoding="utf-8") == "custom"

    def test_verbose(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "out"
        result = _invoke(runner, ["-o", str(out), "-v"], config)
        assert result.exit_code == 0
        assert "Starting prompt file generation" in result.output
        assert "   - " not in result.output

    def test_quiet(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "out"
        result = _invoke(runner, ["-o", str(out), "-q"], config)
        assert result.exit_code == 0
        assert "Generating" not in result.output
        assert "completed successfully" in result.output

    def test_json(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        out = tmp_path / "out"
        result = _invoke(runner, ["-o", str(out), "--json"], config)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["counts"]["created"] == 3

    def test_config_file(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        cfg = tmp_path / "prompts.yml"
        cfg.write_text("output_dir: generated\nlanguages: [ja]\n")
        result = _invoke(runner, ["-c", str(cfg)], config)
        assert result.exit_code == 0, result.output
        assert (tmp_path / "generated" / "ja" / "a.md").is_file()

    def test_bad_config_file(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        cfg = tmp_path / "prompts.yml"
        cfg.write_text("- not\n- a mapping\n")
        result = _invoke(runner, ["-c", str(cfg)], config)
        assert result.exit_code == 1
        assert "Expected a YAML mapping" in result.output

    def test_bad_config_file_json(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        result = _invoke(runner, ["-c", str(tmp_path / "missing.yml"), "--json"], config)
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["ok"] is False
        assert "not found" in data["error"]

    def test_nul_code_in_config_file(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        cfg = tmp_path / "prompts.yml"
        cfg.write_text('languages: ["a\\0b", "ja"]\n')
        result = _invoke(runner, ["-c", str(cfg)], config)
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "NUL byte" in result.output

    def test_unusable_output_dir(self, runner: CliRunner, tmp_path: Path, config: PromptsConfig):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        result = _invoke(runner, ["-o", str(blocker)], config)
        assert result.exit_code == 1
        assert "Could not create directory structure" in result.output
        assert "Created directory structure" not in result.output


class TestListLanguages:
    def test_bundled(self, runner: CliRunner):
        result = runner.invoke(cli, ["--list-languages"])
        assert result.exit_code == 0
        assert "en (default)" in result.output
        assert "ja (default)" in result.output

    def test_json(self, runner: CliRunner, config: PromptsConfig):
        result = _invoke(runner, ["--list-languages", "--json"], config)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["languages"] == [
            {"code": "en", "templates": ["a.md", "b.md"]},
            {"code": "ja", "templates": ["a.md"]},
        ]

    def test_empty_root(self, runner: CliRunner, tmp_path: Path):
        result = _invoke(runner, ["--list-languages"], PromptsConfig(templates_root=tmp_path / "none"))
        assert result.exit_code == 0
        assert "No bundled templates found." in result.output
