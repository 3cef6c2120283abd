"""
Build a PassGeneratorRequest from a JSON pass description.

The description uses pass.json key names, with the five field sections at the
top level and a "style" key naming the pass style. It is validated with
jsonschema before anything is built.
"""

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema

from .config import GeneratorSettings
from .enums import (
    BarcodeType, DataDetectorType, FieldDateTimeStyle, FieldNumberStyle,
    FieldTextAlignment, PassStyle, TransitType
)
from .exceptions import InvalidFormatError, RequestLoadError
from .fields import CurrencyField, DateField, Field, NumberField, StandardField
from .models import Barcode, Nfc, RelevantLocation
from .request import PassGeneratorRequest
from .semantics import (
    TAG_TYPES, CurrencyAmountSemanticTag, DateSemanticTag, LocationSemanticTag,
    PersonNameSemanticTag, Seat, Seats, SemanticTag, SemanticTags,
    StringListSemanticTag, WifiAccess
)

logger = logging.getLogger(__name__)

STYLE_NAMES = {
    "generic": PassStyle.GENERIC,
    "boardingPass": PassStyle.BOARDING_PASS,
    "coupon": PassStyle.COUPON,
    "eventTicket": PassStyle.EVENT_TICKET,
    "storeCard": PassStyle.STORE_CARD,
}

SECTION_NAMES = ["headerFields", "primaryFields", "secondaryFields", "auxiliaryFields", "backFields"]

_FIELD_SCHEMA = {
    "type": "object",
    "required": ["key"],
    "properties": {
        "type": {
            "type": "string",
            "enum": ["standard", "date", "number", "currency"],
            "default": "standard",
            "description": "Field variant; decides how value is written"
        },
        "key": {"type": "string", "minLength": 1},
        "label": {"type": "string"},
        "changeMessage": {"type": "string"},
        "textAlignment": {"type": "string", "enum": [a.value for a in FieldTextAlignment]},
        "attributedValue": {"type": "string"},
        "dataDetectorTypes": {
            "type": "array",
            "items": {"type": "string", "enum": [d.value for d in DataDetectorType]}
        },
        "row": {"type": "integer", "enum": [0, 1]},
        "value": {"type": ["string", "number", "null"]},
        "dateStyle": {"type": "string", "enum": [s.value for s in FieldDateTimeStyle]},
        "timeStyle": {"type": "string", "enum": [s.value for s in FieldDateTimeStyle]},
        "isRelative": {"type": "boolean"},
        "ignoresTimeZone": {"type": "boolean"},
        "currencyCode": {"type": "string", "pattern": "^[A-Z]{3}$"},
        "numberStyle": {"type": "string", "enum": [s.value for s in FieldNumberStyle]},
        "semantics": {"type": "object"}
    },
    "additionalProperties": False
}

_BARCODE_SCHEMA = {
    "type": "object",
    "required": ["format", "message"],
    "properties": {
        "format": {"type": "string", "enum": [b.value for b in BarcodeType]},
        "message": {"type": "string"},
        "messageEncoding": {"type": "string", "default": "iso-8859-1"},
        "altText": {"type": "string"}
    },
    "additionalProperties": False
}

# JSON Schema for pass descriptions
REQUEST_SCHEMA = {
    "type": "object",
    "properties": {
        # Standard keys
        "passTypeIdentifier": {"type": "string"},
        "serialNumber": {"type": "string"},
        "description": {"type": "string"},
        "teamIdentifier": {"type": "string"},
        "organizationName": {"type": "string"},
        "sharingProhibited": {"type": "boolean"},
        "style": {
            "type": "string",
            "enum": list(STYLE_NAMES),
            "description": "Name of the style object in pass.json"
        },
        "transitType": {"type": "string", "enum": [t.value for t in TransitType]},

        # Appearance
        "foregroundColor": {"type": "string"},
        "backgroundColor": {"type": "string"},
        "labelColor": {"type": "string"},
        "logoText": {"type": "string"},
        "suppressStripShine": {"type": "boolean"},
        "groupingIdentifier": {"type": "string"},

        # Expiration and relevance
        "expirationDate": {"type": "string"},
        "voided": {"type": "boolean"},
        "relevantDate": {"type": "string"},
        "maxDistance": {"type": "integer", "minimum": 0},
        "locations": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["latitude", "longitude"],
                "properties": {
                    "latitude": {"type": "number", "minimum": -90, "maximum": 90},
                    "longitude": {"type": "number", "minimum": -180, "maximum": 180},
                    "altitude": {"type": "number"},
                    "relevantText": {"type": "string"}
                },
                "additionalProperties": False
            }
        },
        "beacons": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["proximityUUID"],
                "properties": {
                    "proximityUUID": {"type": "string"},
                    "relevantText": {"type": "string"},
                    "major": {"type": "integer", "minimum": 0, "maximum": 65535},
                    "minor": {"type": "integer", "minimum": 0, "maximum": 65535}
                },
                "additionalProperties": False
            }
        },

        # Associated apps and web service
        "associatedStoreIdentifiers": {
            "type": "array",
            "items": {"type": "integer", "minimum": -(2 ** 63), "maximum": 2 ** 63 - 1}
        },
        "appLaunchURL": {"type": "string"},
        "authenticationToken": {"type": "string"},
        "webServiceURL": {"type": "string"},

        "userInfo": {"type": "object"},
        "nfc": {
            "type": "object",
            "required": ["message"],
            "properties": {
                "message": {"type": "string"},
                "encryptionPublicKey": {"type": "string"},
                "requiresAuthentication": {"type": "boolean"}
            },
            "additionalProperties": False
        },
        "barcode": _BARCODE_SCHEMA,
        "barcodes": {"type": "array", "items": _BARCODE_SCHEMA},
        **{section: {"type": "array", "items": _FIELD_SCHEMA} for section in SECTION_NAMES},
        "semantics": {"type": "object"},
        "localizations": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "additionalProperties": {"type": "string"}
            },
            "description": "language code -> translation key -> translated string"
        }
    },
    "additionalProperties": False
}

# Simple description key -> request attribute copies
_PLAIN_KEYS = {
    "passTypeIdentifier": "pass_type_identifier",
    "serialNumber": "serial_number",
    "description": "description",
    "teamIdentifier": "team_identifier",
    "organizationName": "organization_name",
    "sharingProhibited": "sharing_prohibited",
    "foregroundColor": "foreground_color",
    "backgroundColor": "background_color",
    "labelColor": "label_color",
    "logoText": "logo_text",
    "suppressStripShine": "suppress_strip_shine",
    "groupingIdentifier": "grouping_identifier",
    "voided": "voided",
    "maxDistance": "max_distance",
    "appLaunchURL": "app_launch_url",
    "authenticationToken": "authentication_token",
    "webServiceURL": "web_service_url",
}


def parse_date(value: str, path: str = "$") -> datetime:
    """Parse an ISO 8601 timestamp; a trailing Z means UTC."""
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        raise RequestLoadError(f"Invalid ISO 8601 date '{value}'", path) from None


def _reject_constant(name: str):
    raise RequestLoadError(f"Non-finite number {name} is not allowed in pass.json")


def load_request(path: Union[str, Path], settings: Optional[GeneratorSettings] = None) -> PassGeneratorRequest:
    """Read a JSON pass description from path and build the request.

    Floats are read as Decimal so number fields and userInfo keep their exact
    scale. NaN and Infinity literals are rejected.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal,
                          parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise RequestLoadError(f"Invalid JSON in {path.name}: {e.msg}") from e

    logger.info(f"Loaded pass description from: {path}")
    return request_from_dict(data, settings)


def request_from_dict(data: Dict[str, Any], settings: Optional[GeneratorSettings] = None) -> PassGeneratorRequest:
    """Validate a pass description and turn it into a PassGeneratorRequest."""
    try:
        jsonschema.validate(instance=data, schema=REQUEST_SCHEMA)
    except jsonschema.ValidationError as e:
        raise RequestLoadError(e.message, e.json_path) from e

    request = PassGeneratorRequest()

    if settings is not None:
        request.pass_type_identifier = settings.pass_type_identifier
        request.team_identifier = settings.team_identifier
        request.organization_name = settings.organization_name
        request.web_service_url = settings.web_service_url

    for key, attribute in _PLAIN_KEYS.items():
        if key in data:
            setattr(request, attribute, data[key])
    if "userInfo" in data:
        request.user_info = data["userInfo"]

    if "style" in data:
        request.style = STYLE_NAMES[data["style"]]
    if "transitType" in data:
        request.transit_type = TransitType(data["transitType"])

    if "expirationDate" in data:
        request.expiration_date = parse_date(data["expirationDate"], "$.expirationDate")
    if "relevantDate" in data:
        request.relevant_date = parse_date(data["relevantDate"], "$.relevantDate")

    for location in data.get("locations", []):
        request.relevant_locations.append(RelevantLocation(
            latitude=float(location["latitude"]),
            longitude=float(location["longitude"]),
            relevant_text=location.get("relevantText"),
            altitude=float(location["altitude"]) if "altitude" in location else None,
        ))

    for beacon in data.get("beacons", []):
        request.add_beacon(beacon["proximityUUID"], beacon.get("relevantText"),
                           beacon.get("major"), beacon.get("minor"))

    request.associated_store_identifiers.extend(data.get("associatedStoreIdentifiers", []))

    if "nfc" in data:
        nfc = data["nfc"]
        request.nfc = Nfc(nfc["message"], nfc.get("encryptionPublicKey"), nfc.get("requiresAuthentication"))

    if "barcode" in data:
        request.barcode = _build_barcode(data["barcode"])
    for barcode in data.get("barcodes", []):
        request.barcodes.append(_build_barcode(barcode))

    section_adders = {
        "headerFields": request.add_header_field,
        "primaryFields": request.add_primary_field,
        "secondaryFields": request.add_secondary_field,
        "auxiliaryFields": request.add_auxiliary_field,
        "backFields": request.add_back_field,
    }
    for section in SECTION_NAMES:
        for index, field_data in enumerate(data.get(section, [])):
            section_adders[section](_build_field(field_data, f"$.{section}[{index}]"))

    for tag in _build_semantic_tags(data.get("semantics", {}), "$.semantics"):
        request.semantic_tags.add(tag)

    for language, strings in data.get("localizations", {}).items():
        for key, value in strings.items():
            request.add_localization(language, key, value)

    logger.debug(f"Built {request.style.value} request '{request.serial_number}'")
    return request


def _build_barcode(data: Dict[str, Any]) -> Barcode:
    return Barcode(
        type=BarcodeType(data["format"]),
        message=data["message"],
        message_encoding=data.get("messageEncoding", "iso-8859-1"),
        alt_text=data.get("altText"),
    )


def _build_field(data: Dict[str, Any], path: str) -> Field:
    field_type = data.get("type", "standard")
    common = {
        "key": data["key"],
        "label": data.get("label"),
        "change_message": data.get("changeMessage"),
        "text_alignment": FieldTextAlignment(data["textAlignment"]) if "textAlignment" in data else None,
        "attributed_value": data.get("attributedValue"),
        "data_detector_types": (
            [DataDetectorType(d) for d in data["dataDetectorTypes"]]
            if "dataDetectorTypes" in data else None
        ),
        "row": data.get("row"),
        "semantics": SemanticTags(_build_semantic_tags(data.get("semantics", {}), f"{path}.semantics")),
    }
    value = data.get("value")

    if field_type == "date":
        if value is not None and not isinstance(value, str):
            raise RequestLoadError("Date field value must be an ISO 8601 string", f"{path}.value")
        return DateField(
            value=parse_date(value, f"{path}.value") if value is not None else None,
            date_style=FieldDateTimeStyle(data.get("dateStyle", FieldDateTimeStyle.UNSPECIFIED)),
            time_style=FieldDateTimeStyle(data.get("timeStyle", FieldDateTimeStyle.UNSPECIFIED)),
            is_relative=data.get("isRelative"),
            ignores_time_zone=data.get("ignoresTimeZone"),
            **common,
        )

    if field_type in ("number", "currency"):
        cls = CurrencyField if field_type == "currency" else NumberField
        try:
            return cls(
                value=value,
                currency_code=data.get("currencyCode"),
                number_style=FieldNumberStyle(data.get("numberStyle", FieldNumberStyle.UNSPECIFIED)),
                **common,
            )
        except (InvalidFormatError, ValueError) as e:
            raise RequestLoadError(str(e), path) from e

    if isinstance(value, Decimal):
        # standard fields display text; keep the number as written
        value = str(value)
    return StandardField(value=value, **common)


def _build_semantic_tags(data: Dict[str, Any], path: str):
    tags = []
    for name, value in data.items():
        tag_type = TAG_TYPES.get(name)
        if tag_type is None:
            raise RequestLoadError(f"Unknown semantic tag '{name}'", path)
        tags.append(_build_semantic_tag(tag_type, value, f"{path}.{name}"))
    return tags


def _build_semantic_tag(tag_type: type, value: Any, path: str) -> SemanticTag:
    try:
        if issubclass(tag_type, DateSemanticTag):
            return tag_type(parse_date(value, path))
        if issubclass(tag_type, CurrencyAmountSemanticTag):
            return tag_type(str(value["amount"]), value["currencyCode"])
        if issubclass(tag_type, LocationSemanticTag):
            return tag_type(float(value["latitude"]), float(value["longitude"]))
        if issubclass(tag_type, PersonNameSemanticTag):
            names = {camel: snake for snake, camel in PersonNameSemanticTag._COMPONENTS}
            return tag_type(**{names[k]: v for k, v in value.items()})
        if issubclass(tag_type, StringListSemanticTag):
            return tag_type(list(value))
        if tag_type is Seats:
            names = {camel: snake for snake, camel in Seat._PROPERTIES}
            return Seats([Seat(**{names[k]: v for k, v in seat.items()}) for seat in value])
        if tag_type is WifiAccess:
            return WifiAccess({network["ssid"]: network["password"] for network in value})
        return tag_type(value)
    except (KeyError, TypeError, AttributeError) as e:
        raise RequestLoadError(f"Invalid value for semantic tag: {e}", path) from e
