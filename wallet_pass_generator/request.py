"""
The pass request: everything that goes into pass.json, and the writer that
emits it in the order the wallet platform expects.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from .enums import BarcodeType, PassStyle, TransitType
from .exceptions import DuplicateFieldKeyError
from .fields import Field
from .models import Barcode, Localizations, Nfc, RelevantBeacon, RelevantLocation
from .semantics import SemanticTags
from .utils import camel_case_style, convert_color, format_date
from .writer import JsonWriter

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class PassGeneratorRequest:
    """Aggregate root for one pass.

    Populate it through attributes and the add_*/set_* helpers (they return
    the request so calls can be chained), then call write() or to_json().
    Required identifiers are not checked here; the wallet platform accepts or
    rejects the finished pass.
    """

    def __init__(self):
        # Standard keys
        self.pass_type_identifier: Optional[str] = None
        self.serial_number: Optional[str] = None
        self.description: Optional[str] = None
        self.team_identifier: Optional[str] = None
        self.organization_name: Optional[str] = None
        self.sharing_prohibited: bool = False

        # Images are handed to the packaging step untouched (file name -> bytes)
        self.images: Dict[str, bytes] = {}

        # Expiration keys
        self.expiration_date: Optional[datetime] = None
        self.voided: Optional[bool] = None

        # Visual appearance keys
        self.foreground_color: Optional[str] = None
        self.background_color: Optional[str] = None
        self.label_color: Optional[str] = None
        self.logo_text: Optional[str] = None
        self.suppress_strip_shine: Optional[bool] = None
        self.grouping_identifier: Optional[str] = None
        self.style: PassStyle = PassStyle.GENERIC
        self.transit_type: Optional[TransitType] = None

        self.semantic_tags = SemanticTags()
        self.header_fields: List[Field] = []
        self.primary_fields: List[Field] = []
        self.secondary_fields: List[Field] = []
        self.auxiliary_fields: List[Field] = []
        self.back_fields: List[Field] = []

        # Relevance keys
        self.relevant_date: Optional[datetime] = None
        self.relevant_locations: List[RelevantLocation] = []
        self.relevant_beacons: List[RelevantBeacon] = []
        self.max_distance: Optional[int] = None

        # Web service keys
        self.authentication_token: Optional[str] = None
        self.web_service_url: Optional[str] = None

        # Associated app keys
        self.associated_store_identifiers: List[int] = []
        self.app_launch_url: Optional[str] = None

        self.barcode: Optional[Barcode] = None
        self.barcodes: List[Barcode] = []

        self.user_info: Optional[Dict[str, Any]] = None
        self.localizations = Localizations()
        self.nfc: Optional[Nfc] = None

    @property
    def format_version(self) -> int:
        return FORMAT_VERSION

    # Fields

    def add_header_field(self, field: Field) -> "PassGeneratorRequest":
        return self._add_field(self.header_fields, field)

    def add_primary_field(self, field: Field) -> "PassGeneratorRequest":
        return self._add_field(self.primary_fields, field)

    def add_secondary_field(self, field: Field) -> "PassGeneratorRequest":
        return self._add_field(self.secondary_fields, field)

    def add_auxiliary_field(self, field: Field) -> "PassGeneratorRequest":
        return self._add_field(self.auxiliary_fields, field)

    def add_back_field(self, field: Field) -> "PassGeneratorRequest":
        return self._add_field(self.back_fields, field)

    def _add_field(self, section: List[Field], field: Field) -> "PassGeneratorRequest":
        if type(field) is Field or not isinstance(field, Field):
            raise TypeError(f"Expected a field variant such as StandardField, got {type(field).__name__}")
        if not field.key:
            raise ValueError("Field key must not be empty")
        self.ensure_field_key_is_unique(field.key)
        section.append(field)
        return self

    def ensure_field_key_is_unique(self, key: str) -> None:
        """Raise DuplicateFieldKeyError if any of the five sections already uses key."""
        for section in self._sections().values():
            if any(existing.key == key for existing in section):
                logger.warning(f"Rejected field with duplicate key '{key}'")
                raise DuplicateFieldKeyError(key)

    def _sections(self) -> Dict[str, List[Field]]:
        return {
            "headerFields": self.header_fields,
            "primaryFields": self.primary_fields,
            "secondaryFields": self.secondary_fields,
            "auxiliaryFields": self.auxiliary_fields,
            "backFields": self.back_fields,
        }

    # Barcodes, relevance and localization

    def add_barcode(self, type: BarcodeType, message: str, encoding: str,
                    alternate_text: Optional[str] = None) -> "PassGeneratorRequest":
        self.barcodes.append(Barcode(type, message, encoding, alternate_text))
        return self

    def set_barcode(self, type: BarcodeType, message: str, encoding: str,
                    alternate_text: Optional[str] = None) -> "PassGeneratorRequest":
        self.barcode = Barcode(type, message, encoding, alternate_text)
        return self

    def add_location(self, latitude: float, longitude: float,
                     relevant_text: Optional[str] = None) -> "PassGeneratorRequest":
        self.relevant_locations.append(RelevantLocation(latitude, longitude, relevant_text))
        return self

    def add_beacon(self, proximity_uuid: str, relevant_text: Optional[str] = None,
                   major: Optional[int] = None, minor: Optional[int] = None) -> "PassGeneratorRequest":
        self.relevant_beacons.append(RelevantBeacon(proximity_uuid, relevant_text, major, minor))
        return self

    def add_localization(self, language_code: str, key: str, value: str) -> "PassGeneratorRequest":
        self.localizations.add(language_code, key, value)
        return self

    # Serialization

    def populate_fields(self) -> None:
        """Hook for subclasses to add fields or tags right before writing."""

    def to_json(self, indent: Optional[int] = None) -> str:
        writer = JsonWriter(indent=indent)
        self.write(writer)
        return writer.getvalue()

    def write(self, writer: JsonWriter) -> None:
        """Write the complete pass.json document into writer."""
        self.populate_fields()

        writer.write_start_object()

        logger.debug("Writing semantics..")
        self.semantic_tags.write(writer)
        logger.debug("Writing standard keys..")
        self._write_standard_keys(writer)
        logger.debug("Writing user information..")
        self._write_user_info(writer)
        logger.debug("Writing relevance keys..")
        self._write_relevance_keys(writer)
        logger.debug("Writing appearance keys..")
        self._write_appearance_keys(writer)
        logger.debug("Writing expiration keys..")
        self._write_expiration_keys(writer)
        logger.debug("Writing barcode keys..")
        self._write_barcodes(writer)

        if self.nfc is not None:
            logger.debug("Writing NFC fields..")
            self._write_nfc_keys(writer)

        logger.debug("Opening style section..")
        writer.write_property_name(camel_case_style(PassStyle(self.style)))
        writer.write_start_object()

        for section_name, fields in self._sections().items():
            logger.debug(f"Writing {section_name}..")
            self._write_section(writer, section_name, fields)

        if self.style == PassStyle.BOARDING_PASS:
            writer.write_property_name("transitType")
            writer.write_value(TransitType(self.transit_type).value if self.transit_type else "")

        logger.debug("Closing style section..")
        writer.write_end_object()

        self._write_barcode(writer)
        self._write_urls(writer)

        writer.write_end_object()

    def _write_standard_keys(self, writer: JsonWriter) -> None:
        writer.write_property_name("passTypeIdentifier")
        writer.write_value(self.pass_type_identifier)

        writer.write_property_name("formatVersion")
        writer.write_value(self.format_version)

        writer.write_property_name("serialNumber")
        writer.write_value(self.serial_number)

        writer.write_property_name("description")
        writer.write_value(self.description)

        writer.write_property_name("organizationName")
        writer.write_value(self.organization_name)

        writer.write_property_name("teamIdentifier")
        writer.write_value(self.team_identifier)

        writer.write_property_name("sharingProhibited")
        writer.write_value(bool(self.sharing_prohibited))

        if self.logo_text:
            writer.write_property_name("logoText")
            writer.write_value(self.logo_text)

        if self.associated_store_identifiers:
            writer.write_property_name("associatedStoreIdentifiers")
            writer.write_start_array()
            for store_identifier in self.associated_store_identifiers:
                writer.write_value(int(store_identifier))
            writer.write_end_array()

        if self.app_launch_url:
            writer.write_property_name("appLaunchURL")
            writer.write_value(self.app_launch_url)

    def _write_user_info(self, writer: JsonWriter) -> None:
        if self.user_info is None:
            return
        writer.write_property_name("userInfo")
        writer.write_json(self.user_info)

    def _write_relevance_keys(self, writer: JsonWriter) -> None:
        if self.relevant_date is not None:
            writer.write_property_name("relevantDate")
            writer.write_value(format_date(self.relevant_date))

        if self.max_distance is not None:
            writer.write_property_name("maxDistance")
            writer.write_value(str(int(self.max_distance)))

        if self.relevant_locations:
            writer.write_property_name("locations")
            writer.write_start_array()
            for location in self.relevant_locations:
                location.write(writer)
            writer.write_end_array()

        if self.relevant_beacons:
            writer.write_property_name("beacons")
            writer.write_start_array()
            for beacon in self.relevant_beacons:
                beacon.write(writer)
            writer.write_end_array()

    def _write_appearance_keys(self, writer: JsonWriter) -> None:
        for property_name, color in (
            ("foregroundColor", self.foreground_color),
            ("backgroundColor", self.background_color),
            ("labelColor", self.label_color),
        ):
            if color:
                writer.write_property_name(property_name)
                writer.write_value(convert_color(color))

        if self.suppress_strip_shine is not None:
            writer.write_property_name("suppressStripShine")
            writer.write_value(self.suppress_strip_shine)

        if self.grouping_identifier:
            writer.write_property_name("groupingIdentifier")
            writer.write_value(self.grouping_identifier)

    def _write_expiration_keys(self, writer: JsonWriter) -> None:
        if self.expiration_date is not None:
            writer.write_property_name("expirationDate")
            writer.write_value(format_date(self.expiration_date))

        if self.voided is not None:
            writer.write_property_name("voided")
            writer.write_value(self.voided)

    def _write_barcodes(self, writer: JsonWriter) -> None:
        if not self.barcodes:
            return
        writer.write_property_name("barcodes")
        writer.write_start_array()
        for barcode in self.barcodes:
            barcode.write(writer)
        writer.write_end_array()

    def _write_nfc_keys(self, writer: JsonWriter) -> None:
        if not self.nfc.message:
            return
        writer.write_property_name("nfc")
        self.nfc.write(writer)

    @staticmethod
    def _write_section(writer: JsonWriter, section_name: str, fields: List[Field]) -> None:
        writer.write_property_name(section_name)
        writer.write_start_array()
        for field in fields:
            field.write(writer)
        writer.write_end_array()

    def _write_barcode(self, writer: JsonWriter) -> None:
        if self.barcode is None:
            return
        writer.write_property_name("barcode")
        self.barcode.write(writer)

    def _write_urls(self, writer: JsonWriter) -> None:
        if not self.authentication_token:
            return
        writer.write_property_name("authenticationToken")
        writer.write_value(self.authentication_token)
        writer.write_property_name("webServiceURL")
        writer.write_value(self.web_service_url or "")
