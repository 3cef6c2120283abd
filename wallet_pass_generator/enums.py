"""
Enumerations used by the pass.json model.

Values are the literal strings the wallet platform expects in pass.json.
"""

from enum import Enum


class PassStyle(str, Enum):
    """Pass category; selects the style-specific object holding the fields."""

    GENERIC = "Generic"
    BOARDING_PASS = "BoardingPass"
    COUPON = "Coupon"
    EVENT_TICKET = "EventTicket"
    STORE_CARD = "StoreCard"


class TransitType(str, Enum):
    AIR = "PKTransitTypeAir"
    BOAT = "PKTransitTypeBoat"
    BUS = "PKTransitTypeBus"
    GENERIC = "PKTransitTypeGeneric"
    TRAIN = "PKTransitTypeTrain"


class BarcodeType(str, Enum):
    QR = "PKBarcodeFormatQR"
    PDF417 = "PKBarcodeFormatPDF417"
    AZTEC = "PKBarcodeFormatAztec"
    CODE128 = "PKBarcodeFormatCode128"


class FieldDateTimeStyle(str, Enum):
    """Date/time display style. UNSPECIFIED is never written."""

    UNSPECIFIED = "Unspecified"
    NONE = "PKDateStyleNone"
    SHORT = "PKDateStyleShort"
    MEDIUM = "PKDateStyleMedium"
    LONG = "PKDateStyleLong"
    FULL = "PKDateStyleFull"


class FieldNumberStyle(str, Enum):
    """Number display style. UNSPECIFIED is never written."""

    UNSPECIFIED = "Unspecified"
    DECIMAL = "PKNumberStyleDecimal"
    PERCENT = "PKNumberStylePercent"
    SCIENTIFIC = "PKNumberStyleScientific"
    SPELL_OUT = "PKNumberStyleSpellOut"


class FieldTextAlignment(str, Enum):
    LEFT = "PKTextAlignmentLeft"
    CENTER = "PKTextAlignmentCenter"
    RIGHT = "PKTextAlignmentRight"
    NATURAL = "PKTextAlignmentNatural"


class DataDetectorType(str, Enum):
    PHONE_NUMBER = "PKDataDetectorTypePhoneNumber"
    LINK = "PKDataDetectorTypeLink"
    ADDRESS = "PKDataDetectorTypeAddress"
    CALENDAR_EVENT = "PKDataDetectorTypeCalendarEvent"


class DateKind(Enum):
    """How a timestamp is rendered: with a literal Z or with its own offset."""

    UTC = "utc"
    UNSPECIFIED = "unspecified"
    LOCAL = "local"
