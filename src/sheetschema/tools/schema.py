"""Schema inference tools."""

from typing import Optional

from pydantic import ValidationError

from ..inference import InferenceResult, InferSchemaRequest, SchemaInferenceEngine
from .registry import Tool, ToolParameter, ToolRegistry


def tool_result(result: InferenceResult) -> dict:
    """Render an InferenceResult as an MCP tool result."""
    return {
        "content": [{"type": "text", "text": result.text}],
        "isError": result.is_error,
    }


def _describe_invalid_arguments(error: ValidationError) -> str:
    problems = [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    ]
    return "invalid arguments: " + "; ".join(problems)


class SchemaTools:
    """Schema inference tools that can be registered with a ToolRegistry."""

    def __init__(self, engine: Optional[SchemaInferenceEngine] = None):
        self.engine = engine or SchemaInferenceEngine()

    def register(self, registry: ToolRegistry):
        """Register all schema tools with the registry."""
        registry.register(self._infer_schema_tool())
        registry.register(self._list_sheets_tool())

    def _infer_schema_tool(self) -> Tool:
        """Create the infer_schema tool."""

        async def handler(
            spreadsheet_id: Optional[str] = None,
            sheet_name: Optional[str] = None,
            headers: Optional[list[str]] = None,
            lang: Optional[str] = None,
            header_start_cell: Optional[str] = None,
        ) -> dict:
            arguments = {
                "spreadsheet_id": spreadsheet_id,
                "sheet_name": sheet_name,
                "headers": headers,
                "lang": lang,
                "header_start_cell": header_start_cell,
            }
            # Missing arguments fall through to the engine's required-input checks
            try:
                request = InferSchemaRequest(
                    **{key: value for key, value in arguments.items() if value is not None}
                )
            except ValidationError as e:
                return tool_result(
                    InferenceResult(success=False, error=_describe_invalid_arguments(e))
                )
            return tool_result(await self.engine.infer(request))

        return Tool(
            name="sheets.infer_schema",
            description="Locate a header row in a sheet and infer a field schema "
            "(field names, columns, header range and data range). "
            "Headers can be translated to English first when a source language is given.",
            parameters=[
                ToolParameter(
                    name="spreadsheet_id",
                    type="string",
                    description="The ID of the Google Spreadsheet (from the URL)",
                ),
                ToolParameter(
                    name="sheet_name",
                    type="string",
                    description="The sheet (tab) that holds the header row",
                ),
                ToolParameter(
                    name="headers",
                    type="array",
                    description="Header labels in left-to-right order, exactly as they appear",
                    items={"type": "string"},
                ),
                ToolParameter(
                    name="lang",
                    type="string",
                    description="Source language of the headers (e.g. 'ja'); "
                    "omit to skip translation",
                    required=False,
                ),
                ToolParameter(
                    name="header_start_cell",
                    type="string",
                    description="Cell of the first header (e.g. 'A3' or 'Sheet1!A3'); "
                    "omit to scan A1:Z100",
                    required=False,
                ),
            ],
            handler=handler,
        )

    def _list_sheets_tool(self) -> Tool:
        """Create the list_sheets tool."""

        async def handler(spreadsheet_id: str) -> dict:
            info = await self.engine.sheets_client.fetch_spreadsheet_info(spreadsheet_id)
            return {
                "spreadsheet_id": info.spreadsheet_id,
                "title": info.title,
                "sheets": [
                    {"title": sheet.title, "id": sheet.sheet_id} for sheet in info.sheets
                ],
            }

        return Tool(
            name="sheets.list_sheets",
            description="List the sheets (tabs) of a spreadsheet with their numeric IDs.",
            parameters=[
                ToolParameter(
                    name="spreadsheet_id",
                    type="string",
                    description="The ID of the Google Spreadsheet",
                ),
            ],
            handler=handler,
        )
