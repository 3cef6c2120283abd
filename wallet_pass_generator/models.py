"""
Value objects held by a pass request: barcodes, relevance data, NFC and localizations.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .enums import BarcodeType
from .writer import JsonWriter


@dataclass
class Barcode:
    """Barcode shown on the pass"""

    type: BarcodeType
    message: str
    message_encoding: str = "iso-8859-1"
    alt_text: Optional[str] = None

    def write(self, writer: JsonWriter) -> None:
        writer.write_start_object()

        writer.write_property_name("format")
        writer.write_value(BarcodeType(self.type).value)

        writer.write_property_name("message")
        writer.write_value(self.message)

        writer.write_property_name("messageEncoding")
        writer.write_value(self.message_encoding)

        if self.alt_text:
            writer.write_property_name("altText")
            writer.write_value(self.alt_text)

        writer.write_end_object()


@dataclass
class RelevantLocation:
    """Location where the pass becomes relevant"""

    latitude: float
    longitude: float
    relevant_text: Optional[str] = None
    altitude: Optional[float] = None

    def write(self, writer: JsonWriter) -> None:
        writer.write_start_object()

        writer.write_property_name("latitude")
        writer.write_value(float(self.latitude))

        writer.write_property_name("longitude")
        writer.write_value(float(self.longitude))

        if self.altitude is not None:
            writer.write_property_name("altitude")
            writer.write_value(float(self.altitude))

        if self.relevant_text:
            writer.write_property_name("relevantText")
            writer.write_value(self.relevant_text)

        writer.write_end_object()


@dataclass
class RelevantBeacon:
    """iBeacon marking a location where the pass is relevant.

    The minor value is only meaningful together with a major value and is
    dropped when major is not set.
    """

    proximity_uuid: str
    relevant_text: Optional[str] = None
    major: Optional[int] = None
    minor: Optional[int] = None

    def write(self, writer: JsonWriter) -> None:
        writer.write_start_object()

        writer.write_property_name("proximityUUID")
        writer.write_value(self.proximity_uuid)

        if self.relevant_text:
            writer.write_property_name("relevantText")
            writer.write_value(self.relevant_text)

        if self.major is not None:
            writer.write_property_name("major")
            writer.write_value(self.major)

            if self.minor is not None:
                writer.write_property_name("minor")
                writer.write_value(self.minor)

        writer.write_end_object()


@dataclass
class Nfc:
    """NFC payload for Value Added Services passes"""

    message: str
    encryption_public_key: Optional[str] = None
    requires_authentication: Optional[bool] = None

    def write(self, writer: JsonWriter) -> None:
        writer.write_start_object()

        writer.write_property_name("message")
        writer.write_value(self.message)

        if self.encryption_public_key:
            writer.write_property_name("encryptionPublicKey")
            writer.write_value(self.encryption_public_key)

        if self.requires_authentication is not None:
            writer.write_property_name("requiresAuthentication")
            writer.write_value(self.requires_authentication)

        writer.write_end_object()


class Localizations:
    """Translated strings per language.

    Keys are compared case-insensitively within a language; the casing of the
    first insertion is kept for output.
    """

    def __init__(self):
        self._languages: Dict[str, Dict[str, Tuple[str, str]]] = {}

    def add(self, language_code: str, key: str, value: str) -> None:
        values = self._languages.setdefault(language_code, {})
        folded = key.casefold()
        original_key = values[folded][0] if folded in values else key
        values[folded] = (original_key, value)

    def get(self, language_code: str, key: str) -> Optional[str]:
        entry = self._languages.get(language_code, {}).get(key.casefold())
        return entry[1] if entry else None

    def languages(self) -> List[str]:
        return list(self._languages)

    def items(self, language_code: str) -> Iterator[Tuple[str, str]]:
        return iter(self._languages.get(language_code, {}).values())

    def to_strings(self, language_code: str) -> str:
        """Render the pass.strings content for one language ("key" = "value"; per line)."""
        lines = [
            f'"{_escape_strings_literal(key)}" = "{_escape_strings_literal(value)}";'
            for key, value in self.items(language_code)
        ]
        return "\n".join(lines) + ("\n" if lines else "")

    def __contains__(self, language_code: str) -> bool:
        return language_code in self._languages

    def __len__(self) -> int:
        return len(self._languages)


def _escape_strings_literal(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )
