# planwright/models/responses.py
"""
Pydantic response models for MCP tool outputs.

All tools return structured responses using these models for consistency.
"""

from typing import Any

from pydantic import BaseModel, Field


class GenerateWorkflowResponse(BaseModel):
    """Response from generate_workflow tool."""

    title: str = Field(description="Workflow title")
    viewpoint: str = Field(description="Viewpoint the workflow was built from")
    strategy: str = Field(description="Canonical strategy name")
    format: str = Field(description="Rendered output format")
    content: str = Field(description="Workflow rendered in the requested format")
    phase_count: int = Field(ge=0, description="Number of phases")
    task_count: int = Field(ge=0, description="Number of tasks across all phases")
    quality_score: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Overall quality gate score if validated"
    )
    workflow: dict[str, Any] = Field(
        default_factory=dict, description="Full workflow as structured data"
    )


class CatalogEntry(BaseModel):
    """One viewpoint or strategy."""

    name: str = Field(description="Canonical name")
    description: str = Field(description="What it is for")
    aliases: list[str] = Field(default_factory=list, description="Accepted alternative names")


class CatalogResponse(BaseModel):
    """Response from list_viewpoints and list_strategies tools."""

    items: list[CatalogEntry] = Field(default_factory=list)
    total: int = Field(ge=0, description="Number of entries")
