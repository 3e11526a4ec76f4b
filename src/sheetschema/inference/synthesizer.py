"""Build a FeatureSchema from a located header row."""

from typing import Optional

from ..sheets.notation import build_range, index_to_col_letter
from .identifiers import to_identifier
from .models import FeatureSchema, FieldSchema, FieldType, HeaderLocation


class SchemaSynthesizer:
    """Turns a header location and header text into fields and ranges."""

    def synthesize(
        self,
        location: HeaderLocation,
        headers: list[str],
        translated: Optional[list[str]] = None,
        lang: Optional[str] = None,
    ) -> tuple[FeatureSchema, str]:
        """
        Returns the schema and its open-ended data range.

        Every field is typed ``string``; refining types is left to callers.
        """
        translated = translated or []
        start = location.start_column_index
        end = start + len(headers) - 1
        header_row = location.header_row_index + 1

        header_range = build_range(location.sheet_name, start, header_row, end, header_row)
        data_range = build_range(location.sheet_name, start, header_row + 1, end)

        fields = []
        for i, original in enumerate(headers):
            fallback = f"field{i + 1}"
            text = (translated[i] if i < len(translated) else "") or original or fallback
            fields.append(
                FieldSchema(
                    name=to_identifier(str(text), fallback),
                    type=FieldType.STRING,
                    column=index_to_col_letter(start + i),
                    description=f"source({lang}): {original}" if lang else original,
                )
            )

        schema = FeatureSchema(
            sheet_name=location.sheet_name,
            header_range=header_range,
            fields=fields,
        )
        return schema, data_range
