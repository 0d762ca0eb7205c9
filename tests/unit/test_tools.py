# tests/unit/test_tools.py
"""
Tests for the MCP tool implementations.

Tests the tools (not the MCP wrappers) with an in-memory configuration.
"""

import json
from pathlib import Path

import pytest
from fastmcp.exceptions import ToolError

from planwright.config.schema import PlanwrightConfig
from planwright.tools.generate_workflow import generate_workflow
from planwright.tools.list_catalogs import list_strategies_tool, list_viewpoints_tool

REST_API = "Implement REST API with authentication and PostgreSQL database integration"


@pytest.fixture
def config() -> PlanwrightConfig:
    return PlanwrightConfig()


@pytest.mark.asyncio
async def test_generate_from_description(config):
    """Defaults: auto viewpoint, systematic strategy, roadmap format."""
    result = await generate_workflow(REST_API, config=config)

    assert result["viewpoint"] == "backend"
    assert result["strategy"] == "systematic"
    assert result["format"] == "roadmap"
    assert result["content"].startswith(f"# {REST_API}")
    assert result["phase_count"] == len(result["workflow"]["phases"])
    assert result["task_count"] > 0
    assert result["quality_score"] is None


@pytest.mark.asyncio
async def test_generate_with_all_passes(config):
    result = await generate_workflow(REST_API, config=config, include_all=True)

    assert result["quality_score"] is not None
    assert "risks" in result["workflow"]
    assert "dependencies" in result["workflow"]


@pytest.mark.asyncio
async def test_generate_json_format_and_alias(config):
    result = await generate_workflow(
        REST_API, config=config, strategy="mvp", output_format="json"
    )

    assert result["strategy"] == "minimum-scope"
    assert json.loads(result["content"])["strategy"] == "minimum-scope"


@pytest.mark.asyncio
async def test_generate_from_file(config, tmp_path: Path):
    path = tmp_path / "prd.md"
    path.write_text("# Team Chat\n\n## Features\n- Message threads\n", encoding="utf-8")

    result = await generate_workflow(None, config=config, file_path=str(path))

    assert result["title"] == "Team Chat"


@pytest.mark.asyncio
async def test_generate_missing_file(config, tmp_path: Path):
    with pytest.raises(ToolError, match="does not exist"):
        await generate_workflow(None, config=config, file_path=str(tmp_path / "nope.md"))


@pytest.mark.asyncio
async def test_generate_unsupported_file(config, tmp_path: Path):
    path = tmp_path / "prd.pdf"
    path.write_bytes(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")

    with pytest.raises(ToolError, match="Unsupported file format: prd.pdf"):
        await generate_workflow(None, config=config, file_path=str(path))


@pytest.mark.asyncio
async def test_generate_rejects_short_description(config):
    with pytest.raises(ToolError, match="too short"):
        await generate_workflow("hi", config=config)


@pytest.mark.asyncio
async def test_generate_rejects_missing_input(config):
    with pytest.raises(ToolError, match="empty"):
        await generate_workflow(None, config=config)


@pytest.mark.asyncio
async def test_generate_unknown_viewpoint(config):
    with pytest.raises(ToolError, match="Unknown viewpoint"):
        await generate_workflow(REST_API, config=config, viewpoint="wizard")


@pytest.mark.asyncio
async def test_list_viewpoints():
    result = await list_viewpoints_tool()

    assert result["total"] == 6
    assert [item["name"] for item in result["items"]][0] == "architect"
    assert all(item["description"] for item in result["items"])


@pytest.mark.asyncio
async def test_list_strategies():
    result = await list_strategies_tool()
    items = {item["name"]: item for item in result["items"]}

    assert result["total"] == 3
    assert items["iterative"]["aliases"] == ["agile"]
    assert items["minimum-scope"]["aliases"] == ["mvp"]
    assert items["systematic"]["aliases"] == []
