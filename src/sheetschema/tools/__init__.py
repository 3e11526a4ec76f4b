"""MCP-style tools for sheetschema."""

from .registry import Tool, ToolParameter, ToolRegistry
from .schema import SchemaTools, tool_result

__all__ = ["Tool", "ToolParameter", "ToolRegistry", "SchemaTools", "tool_result"]
