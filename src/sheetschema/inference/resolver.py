"""Resolve a requested sheet name against spreadsheet metadata."""

import logging

from ..errors import SheetNotFoundError
from ..sheets import GoogleSheetsClient
from .models import SheetMetadata

logger = logging.getLogger(__name__)


class SheetResolver:
    """
    Resolves the exact title and numeric ID of a sheet.

    Metadata only corrects the title; if it cannot be fetched the requested
    name is used as-is. A sheet that is genuinely absent is an error.
    """

    def __init__(self, sheets_client: GoogleSheetsClient):
        self.sheets_client = sheets_client

    async def resolve(self, spreadsheet_id: str, requested_name: str) -> SheetMetadata:
        """
        Resolve ``requested_name`` to a SheetMetadata.

        Raises:
            SheetNotFoundError: metadata was fetched but no sheet matches
        """
        try:
            info = await self.sheets_client.fetch_spreadsheet_info(spreadsheet_id)
        except Exception as e:
            logger.warning(
                f"Could not fetch metadata for {spreadsheet_id}, "
                f"using sheet name '{requested_name}' as given: {e}"
            )
            return SheetMetadata(
                exact_title=requested_name,
                resolved_from_metadata=False,
                fallback_reason=str(e),
            )

        for sheet in info.sheets:
            if sheet.title == requested_name:
                return SheetMetadata(exact_title=sheet.title, sheet_id=sheet.sheet_id)

        # Case-insensitive match, only when it is unambiguous
        folded = requested_name.strip().casefold()
        candidates = [s for s in info.sheets if s.title.strip().casefold() == folded]
        if len(candidates) == 1:
            sheet = candidates[0]
            logger.info(f"Resolved sheet '{requested_name}' to '{sheet.title}'")
            return SheetMetadata(exact_title=sheet.title, sheet_id=sheet.sheet_id)

        searched = [requested_name]
        if folded != requested_name:
            searched.append(folded)
        raise SheetNotFoundError(requested_name, info.sheet_titles, searched)
