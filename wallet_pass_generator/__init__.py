"""
Wallet pass generator

Builds the data model of a wallet pass and writes the pass.json document that
goes into a signed .pkpass bundle. Signing, manifest hashing and zipping are
left to the packaging step.
"""

__version__ = "1.0.0"

from .enums import (
    BarcodeType, DataDetectorType, DateKind, FieldDateTimeStyle,
    FieldNumberStyle, FieldTextAlignment, PassStyle, TransitType
)
from .exceptions import DuplicateFieldKeyError, InvalidFormatError, PassGeneratorError, RequestLoadError
from .fields import CurrencyField, DateField, Field, NumberField, StandardField
from .models import Barcode, Localizations, Nfc, RelevantBeacon, RelevantLocation
from .request import PassGeneratorRequest
from .semantics import SemanticTag, SemanticTags
from .writer import JsonWriter

__all__ = [
    "BarcodeType",
    "DataDetectorType",
    "DateKind",
    "FieldDateTimeStyle",
    "FieldNumberStyle",
    "FieldTextAlignment",
    "PassStyle",
    "TransitType",
    "DuplicateFieldKeyError",
    "InvalidFormatError",
    "PassGeneratorError",
    "RequestLoadError",
    "CurrencyField",
    "DateField",
    "Field",
    "NumberField",
    "StandardField",
    "Barcode",
    "Localizations",
    "Nfc",
    "RelevantBeacon",
    "RelevantLocation",
    "PassGeneratorRequest",
    "SemanticTag",
    "SemanticTags",
    "JsonWriter",
]
