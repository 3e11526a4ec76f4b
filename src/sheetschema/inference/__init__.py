"""Schema inference from spreadsheet header rows."""

from .engine import SchemaInferenceEngine
from .identifiers import to_identifier
from .locator import HeaderLocator
from .models import (
    FeatureSchema,
    FieldSchema,
    FieldType,
    HeaderLocation,
    InferenceResult,
    InferSchemaRequest,
    SheetMetadata,
)
from .resolver import SheetResolver
from .synthesizer import SchemaSynthesizer
from .translator import HeaderTranslator

__all__ = [
    "SchemaInferenceEngine",
    "to_identifier",
    "HeaderLocator",
    "FeatureSchema",
    "FieldSchema",
    "FieldType",
    "HeaderLocation",
    "InferenceResult",
    "InferSchemaRequest",
    "SheetMetadata",
    "SheetResolver",
    "SchemaSynthesizer",
    "HeaderTranslator",
]
