"""Schema inference engine: sheet resolution, header location, translation, synthesis."""

import logging
from typing import Optional

from ..config import Settings, settings as default_settings
from ..errors import InvalidArgumentError, SheetSchemaError
from ..sheets import GoogleSheetsClient
from ..sheets.notation import parse_cell_reference
from ..translate import GoogleTranslateClient
from .locator import HeaderLocator
from .models import InferenceResult, InferSchemaRequest
from .resolver import SheetResolver
from .synthesizer import SchemaSynthesizer
from .translator import HeaderTranslator

logger = logging.getLogger(__name__)


def _validate(request: InferSchemaRequest):
    if not request.spreadsheet_id or not request.sheet_name:
        raise InvalidArgumentError("spreadsheet_id and sheet_name are required")
    if not request.headers:
        raise InvalidArgumentError("headers must be a non-empty list")
    if request.header_start_cell is not None and not request.header_start_cell.strip():
        raise InvalidArgumentError("header_start_cell must not be empty when given")


class SchemaInferenceEngine:
    """
    Infers a FeatureSchema from a header row in a live spreadsheet.

    Each call is independent: nothing is cached between calls, and every
    failure is returned as an InferenceResult rather than raised.
    """

    def __init__(
        self,
        sheets_client: Optional[GoogleSheetsClient] = None,
        translate_client: Optional[GoogleTranslateClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the engine.

        Args:
            sheets_client: Google Sheets client (created if not provided)
            translate_client: Translation client (created if not provided)
            settings: Settings for the scan window and target language
        """
        self.settings = settings or default_settings
        self.sheets_client = sheets_client or GoogleSheetsClient(settings=self.settings)
        self.translate_client = translate_client or GoogleTranslateClient(settings=self.settings)

        self.resolver = SheetResolver(self.sheets_client)
        self.locator = HeaderLocator(
            self.sheets_client,
            scan_rows=self.settings.scan_max_rows,
            scan_columns=self.settings.scan_max_columns,
        )
        self.translator = HeaderTranslator(
            self.translate_client, target_language=self.settings.translate_target_language
        )
        self.synthesizer = SchemaSynthesizer()

    async def infer(self, request: InferSchemaRequest) -> InferenceResult:
        """Run one inference. Never raises except on cancellation."""
        diagnostics: dict = {}
        try:
            _validate(request)

            # A sheet named in the start cell takes the place of sheet_name
            sheet_name = request.sheet_name
            start_cell = request.header_start_cell
            if start_cell:
                ref = parse_cell_reference(start_cell, sheet_name)
                sheet_name, start_cell = ref.sheet_name, ref.cell

            sheet = await self.resolver.resolve(request.spreadsheet_id, sheet_name)
            if not sheet.resolved_from_metadata:
                diagnostics["metadata_fallback"] = sheet.fallback_reason

            location = await self.locator.locate(
                request.spreadsheet_id,
                sheet.exact_title,
                request.headers,
                start_cell=start_cell,
                diagnostics=diagnostics,
            )

            translated = await self.translator.translate(request.headers, request.lang)
            schema, data_range = self.synthesizer.synthesize(
                location, request.headers, translated, request.lang
            )
        except SheetSchemaError as e:
            logger.info(f"Schema inference failed for '{request.sheet_name}': {e}")
            return InferenceResult(success=False, error=str(e), diagnostics=diagnostics)
        except Exception as e:
            logger.exception(f"Unexpected error inferring schema for '{request.sheet_name}'")
            return InferenceResult(success=False, error=str(e), diagnostics=diagnostics)

        logger.info(
            f"Inferred {len(schema.fields)} fields from {schema.header_range} "
            f"(data: {data_range})"
        )
        return InferenceResult(success=True, feature_schema=schema, data_range=data_range)
