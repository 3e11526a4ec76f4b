"""Registry of MCP-style tools and their input schemas."""

import inspect
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """One named argument of a tool."""

    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None
    items: Optional[dict] = None  # Element schema for array parameters

    def to_property(self) -> dict:
        """JSON Schema property for this argument."""
        prop = {"type": self.type, "description": self.description}
        if self.items:
            prop["items"] = self.items
        if self.default is not None:
            prop["default"] = self.default
        return prop


class Tool(BaseModel):
    """A named operation exposed to MCP clients."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str
    parameters: list[ToolParameter] = Field(default_factory=list)
    handler: Optional[Callable] = Field(default=None, exclude=True)

    def to_mcp_schema(self) -> dict:
        """Entry for an MCP ``tools/list`` response."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": {p.name: p.to_property() for p in self.parameters},
                "required": [p.name for p in self.parameters if p.required],
            },
        }


class ToolRegistry:
    """Holds tools by name and dispatches calls to their handlers."""

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool):
        self._tools[tool.name] = tool

    def to_mcp_tools(self) -> list[dict]:
        return [tool.to_mcp_schema() for tool in self._tools.values()]

    async def execute(self, tool_name: str, **kwargs) -> Any:
        """Call a tool's handler, awaiting it when it is a coroutine function."""
        tool = self._tools.get(tool_name)
        if tool is None:
            raise ValueError(f"Unknown tool: {tool_name}")
        if tool.handler is None:
            raise ValueError(f"Tool {tool_name} has no handler")

        if inspect.iscoroutinefunction(tool.handler):
            return await tool.handler(**kwargs)
        return tool.handler(**kwargs)
