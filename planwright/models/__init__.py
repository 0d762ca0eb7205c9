# planwright/models/__init__.py
"""Response models for MCP tools."""

from .responses import CatalogEntry, CatalogResponse, GenerateWorkflowResponse

__all__ = ["CatalogEntry", "CatalogResponse", "GenerateWorkflowResponse"]
