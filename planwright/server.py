# planwright/server.py
"""
FastMCP server instance with tool registration.

CRITICAL: configure_logging() is called first to prevent stdout pollution.
All logging goes to stderr as JSON.
"""

# Configure logging FIRST before any other imports
from planwright.logging_config import configure_logging

configure_logging()

# Now safe to import everything else
import logging

from fastmcp import FastMCP

from planwright.config.loader import load_config
from planwright.config.schema import PlanwrightConfig
from planwright.tools.generate_workflow import generate_workflow as _generate_workflow
from planwright.tools.list_catalogs import list_strategies_tool, list_viewpoints_tool

logger = logging.getLogger(__name__)

# Create FastMCP instance
mcp = FastMCP("planwright")

_config: PlanwrightConfig | None = None


def get_config() -> PlanwrightConfig:
    """Load configuration on first use."""
    global _config
    if _config is None:
        _config = load_config()
        logger.info(
            f"Loaded configuration: viewpoint={_config.defaults.viewpoint}, "
            f"strategy={_config.defaults.strategy}"
        )
    return _config


@mcp.tool()
async def generate_workflow(
    description: str | None = None,
    file_path: str | None = None,
    viewpoint: str | None = None,
    strategy: str | None = None,
    output_format: str | None = None,
    include_dependencies: bool = False,
    include_risks: bool = False,
    include_estimates: bool = False,
    include_parallel_streams: bool = False,
    include_milestones: bool = False,
    run_quality_gates: bool = False,
    include_all: bool = False,
) -> dict:
    """Generate a phased implementation workflow from a description or requirements document."""
    return await _generate_workflow(
        description,
        config=get_config(),
        file_path=file_path,
        viewpoint=viewpoint,
        strategy=strategy,
        output_format=output_format,
        include_dependencies=include_dependencies,
        include_risks=include_risks,
        include_estimates=include_estimates,
        include_parallel_streams=include_parallel_streams,
        include_milestones=include_milestones,
        run_quality_gates=run_quality_gates,
        include_all=include_all,
    )


@mcp.tool()
async def list_viewpoints() -> dict:
    """List the expert viewpoints a workflow can be built from."""
    return await list_viewpoints_tool()


@mcp.tool()
async def list_strategies() -> dict:
    """List the workflow strategies and their aliases."""
    return await list_strategies_tool()


logger.info("MCP server initialized with 3 tools")
