# tests/unit/test_cli.py
"""
CLI unit tests.

Tests each command via typer's CliRunner. Every invocation points --config
at a temporary file so the user config directory is never touched.
"""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from planwright.cli import app

runner = CliRunner()

REST_API = "Implement REST API with authentication and PostgreSQL database integration"

PRD = """# Team Chat

## Features
- Message threads (high priority)
- File sharing
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def restore_logging():
    """generate reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.yaml"


def _generate(config_path: Path, *args: str):
    return runner.invoke(app, ["generate", *args, "--config", str(config_path)])


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestHelp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "generate" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("generate", "viewpoints", "strategies", "examples", "serve"):
            assert command in result.output


class TestGenerate:
    def test_description_renders_roadmap(self, config_path):
        result = _generate(config_path, REST_API)

        assert result.exit_code == 0
        assert f"# {REST_API}" in result.stdout
        assert "## Roadmap" in result.stdout
        assert "## Phase 1: API Design & Specification" in result.stdout

    def test_creates_default_config(self, config_path):
        _generate(config_path, REST_API)
        assert config_path.exists()

    def test_json_output(self, config_path):
        result = _generate(config_path, REST_API, "--output", "json", "--quiet")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["viewpoint"] == "backend"
        assert data["strategy"] == "systematic"

    def test_viewpoint_and_strategy_options(self, config_path):
        result = _generate(
            config_path, REST_API, "-p", "qa", "-s", "agile", "-o", "json", "-q"
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["viewpoint"] == "qa"
        assert data["strategy"] == "iterative"

    def test_markdown_file(self, config_path, tmp_path):
        prd = tmp_path / "prd.md"
        prd.write_text(PRD, encoding="utf-8")

        result = _generate(config_path, str(prd))

        assert result.exit_code == 0
        assert "# Team Chat" in result.stdout

    def test_unsupported_file(self, config_path, tmp_path):
        doc = tmp_path / "prd.pdf"
        doc.write_text(PRD, encoding="utf-8")

        result = _generate(config_path, str(doc))

        assert result.exit_code == 1
        assert "Error: Unsupported file format" in result.output

    def test_binary_unsupported_file(self, config_path, tmp_path):
        doc = tmp_path / "prd.pdf"
        doc.write_bytes(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")

        result = _generate(config_path, str(doc))

        assert result.exit_code == 1
        assert "Error: Unsupported file format: prd.pdf" in result.output

    def test_unknown_viewpoint(self, config_path):
        result = _generate(config_path, REST_API, "--viewpoint", "wizard")
        assert result.exit_code == 1
        assert "Unknown viewpoint 'wizard'" in result.output

    def test_unknown_output_format(self, config_path):
        result = _generate(config_path, REST_API, "--output", "pdf")
        assert result.exit_code == 1
        assert "Unknown output format 'pdf'" in result.output

    def test_invalid_config(self, config_path):
        config_path.write_text("synthesis:\n  sprint_capacity: 0\n", encoding="utf-8")
        result = _generate(config_path, REST_API)
        assert result.exit_code == 1
        assert "invalid config" in result.output

    def test_save(self, config_path, tmp_path):
        target = tmp_path / "out" / "workflow.md"

        result = _generate(config_path, REST_API, "--save", str(target))

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").startswith(f"# {REST_API}")

    def test_validate_reports_quality(self, config_path):
        result = _generate(config_path, REST_API, "--validate")
        assert result.exit_code == 0
        assert "Quality gates" in result.output

    def test_all_passes(self, config_path):
        result = _generate(config_path, REST_API, "--all", "--output", "detailed")

        assert result.exit_code == 0
        assert "## Risk Assessment" in result.stdout
        assert "## Dependencies" in result.stdout
        assert "## Quality Gate Results" in result.stdout


class TestInteractive:
    """Prompts: input, viewpoint, strategy, format, then three confirms."""

    def test_prompts_drive_generation(self, config_path):
        answers = f"{REST_API}\n\nagile\n\ny\nn\nn\n"

        result = runner.invoke(app, ["interactive", "--config", str(config_path)], input=answers)

        assert result.exit_code == 0
        assert "Sprint 1" in result.stdout
        assert "**Strategy:** Iterative" in result.stdout

    def test_short_alias(self, config_path):
        answers = f"{REST_API}\nqa\n\n\nn\nn\nn\n"

        result = runner.invoke(app, ["i", "--config", str(config_path)], input=answers)

        assert result.exit_code == 0
        assert "**Viewpoint:** Qa" in result.stdout

    def test_unknown_viewpoint(self, config_path):
        answers = f"{REST_API}\nwizard\n\n\nn\nn\nn\n"

        result = runner.invoke(app, ["interactive", "--config", str(config_path)], input=answers)

        assert result.exit_code == 1
        assert "Unknown viewpoint 'wizard'" in result.output


class TestCatalogCommands:
    def test_viewpoints(self):
        result = runner.invoke(app, ["viewpoints"])
        assert result.exit_code == 0
        for name in ("architect", "frontend", "backend", "security", "devops", "qa"):
            assert name in result.output

    def test_strategies(self):
        result = runner.invoke(app, ["strategies"])
        assert result.exit_code == 0
        assert "iterative (agile)" in result.output
        assert "minimum-scope (mvp)" in result.output

    def test_examples(self):
        result = runner.invoke(app, ["examples"])
        assert result.exit_code == 0
        assert "1. Generate workflow from a requirements document:" in result.output
        assert "planwright generate" in result.output
