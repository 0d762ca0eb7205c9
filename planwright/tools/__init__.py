# planwright/tools/__init__.py
"""Service layer shared by the MCP server and the CLI."""
