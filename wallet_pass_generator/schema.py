"""
Structural JSON schema for a finished pass.json document.

The generator itself does not enforce required keys; this schema is an opt-in
check for callers that want to catch an incomplete pass before packaging it.
"""

from typing import Any, Dict

import jsonschema

REQ_JSON_KEYS = [
    "formatVersion", "passTypeIdentifier", "teamIdentifier",
    "serialNumber", "organizationName", "description"
]

STYLE_KEYS = ["generic", "boardingPass", "coupon", "eventTicket", "storeCard"]

_FIELD_LIST = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["key"],
        "properties": {
            "key": {"type": "string", "minLength": 1},
            "label": {"type": "string"},
            "changeMessage": {"type": "string"},
        },
    },
}

_STYLE_OBJECT = {
    "type": "object",
    "properties": {
        "headerFields": _FIELD_LIST,
        "primaryFields": _FIELD_LIST,
        "secondaryFields": _FIELD_LIST,
        "auxiliaryFields": _FIELD_LIST,
        "backFields": _FIELD_LIST,
        "transitType": {
            "type": "string",
            "enum": ["PKTransitTypeAir", "PKTransitTypeBoat", "PKTransitTypeBus",
                     "PKTransitTypeGeneric", "PKTransitTypeTrain"],
        },
    },
}

_COLOR = {
    "type": "string",
    "pattern": r"^rgb\(\s*\d{1,3}\s*,\s*\d{1,3}\s*,\s*\d{1,3}\s*\)$",
}

_BARCODE = {
    "type": "object",
    "required": ["format", "message", "messageEncoding"],
    "properties": {
        "format": {
            "type": "string",
            "enum": ["PKBarcodeFormatQR", "PKBarcodeFormatPDF417",
                     "PKBarcodeFormatAztec", "PKBarcodeFormatCode128"],
        },
        "message": {"type": "string"},
        "messageEncoding": {"type": "string"},
        "altText": {"type": "string"},
    },
}

PASS_JSON_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": REQ_JSON_KEYS,
    "properties": {
        "formatVersion": {"const": 1},
        "passTypeIdentifier": {"type": "string", "minLength": 1},
        "teamIdentifier": {"type": "string", "minLength": 1},
        "serialNumber": {"type": "string", "minLength": 1},
        "organizationName": {"type": "string", "minLength": 1},
        "description": {"type": "string", "minLength": 1},
        "sharingProhibited": {"type": "boolean"},
        "associatedStoreIdentifiers": {"type": "array", "items": {"type": "integer"}},
        "foregroundColor": _COLOR,
        "backgroundColor": _COLOR,
        "labelColor": _COLOR,
        "maxDistance": {"type": "string", "pattern": "^[0-9]+$"},
        "barcode": _BARCODE,
        "barcodes": {"type": "array", "items": _BARCODE},
        "nfc": {
            "type": "object",
            "required": ["message"],
            "properties": {"message": {"type": "string", "maxLength": 64}},
        },
        **{style: _STYLE_OBJECT for style in STYLE_KEYS},
    },
    "anyOf": [{"required": [style]} for style in STYLE_KEYS],
    "dependentRequired": {"authenticationToken": ["webServiceURL"]},
}


def validate_pass_json(document: Dict[str, Any]) -> None:
    """Raise jsonschema.ValidationError if document is not a complete pass.json."""
    jsonschema.validate(instance=document, schema=PASS_JSON_SCHEMA,
                        cls=jsonschema.Draft202012Validator)
