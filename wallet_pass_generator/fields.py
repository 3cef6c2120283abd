"""
Pass fields.

A field is a labeled value shown in one of the five field sections of a pass.
Field.write() emits the keys every field shares and then hands over to the
variant: write_keys() for its own formatting keys and write_value() for the
payload of the "value" key.
"""

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from .enums import DataDetectorType, FieldDateTimeStyle, FieldNumberStyle, FieldTextAlignment
from .exceptions import InvalidFormatError
from .semantics import SemanticTags
from .utils import format_date
from .writer import JsonWriter


@dataclass
class Field:
    """Base class for all field variants"""

    key: str = ""
    label: Optional[str] = None
    change_message: Optional[str] = None
    text_alignment: Optional[FieldTextAlignment] = None
    attributed_value: Optional[str] = None
    data_detector_types: Optional[List[DataDetectorType]] = None
    row: Optional[int] = None
    semantics: SemanticTags = dataclasses.field(default_factory=SemanticTags)

    def write(self, writer: JsonWriter) -> None:
        writer.write_start_object()

        writer.write_property_name("key")
        writer.write_value(self.key)

        if self.change_message:
            writer.write_property_name("changeMessage")
            writer.write_value(self.change_message)

        if self.text_alignment is not None:
            writer.write_property_name("textAlignment")
            writer.write_value(FieldTextAlignment(self.text_alignment).value)

        if self.label:
            writer.write_property_name("label")
            writer.write_value(self.label)

        if self.data_detector_types is not None:
            writer.write_property_name("dataDetectorTypes")
            writer.write_start_array()
            for detector in self.data_detector_types:
                writer.write_value(DataDetectorType(detector).value)
            writer.write_end_array()

        if self.row is not None:
            writer.write_property_name("row")
            writer.write_value(self.row)

        self.semantics.write(writer)

        self.write_keys(writer)

        if self.has_value():
            writer.write_property_name("value")
            self.write_value(writer)

        if self.attributed_value:
            writer.write_property_name("attributedValue")
            writer.write_value(self.attributed_value)

        writer.write_end_object()

    def write_keys(self, writer: JsonWriter) -> None:
        """Write variant-specific keys. Called before the value."""

    def write_value(self, writer: JsonWriter) -> None:
        raise NotImplementedError

    def has_value(self) -> bool:
        return True


@dataclass
class StandardField(Field):
    """Plain text (or integer) field"""

    value: Optional[Union[str, int]] = None

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(self.value)

    def has_value(self) -> bool:
        return self.value is not None


@dataclass
class DateField(Field):
    """Date/time field.

    A naive datetime or one in UTC is written with a trailing Z; any other
    zone keeps its wall-clock time and appends its ±HH:MM offset.
    """

    value: Optional[datetime] = None
    date_style: FieldDateTimeStyle = FieldDateTimeStyle.UNSPECIFIED
    time_style: FieldDateTimeStyle = FieldDateTimeStyle.UNSPECIFIED
    is_relative: Optional[bool] = None
    ignores_time_zone: Optional[bool] = None

    def write_keys(self, writer: JsonWriter) -> None:
        if self.date_style != FieldDateTimeStyle.UNSPECIFIED:
            writer.write_property_name("dateStyle")
            writer.write_value(FieldDateTimeStyle(self.date_style).value)

        if self.time_style != FieldDateTimeStyle.UNSPECIFIED:
            writer.write_property_name("timeStyle")
            writer.write_value(FieldDateTimeStyle(self.time_style).value)

        if self.is_relative is not None:
            writer.write_property_name("isRelative")
            writer.write_value(self.is_relative)

        if self.ignores_time_zone is not None:
            writer.write_property_name("ignoresTimeZone")
            writer.write_value(self.ignores_time_zone)

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(format_date(self.value))

    def has_value(self) -> bool:
        return self.value is not None


@dataclass
class NumberField(Field):
    """Numeric field, written as a raw JSON number with the decimal's own scale"""

    value: Optional[Decimal] = None
    currency_code: Optional[str] = None
    number_style: FieldNumberStyle = FieldNumberStyle.UNSPECIFIED

    def __post_init__(self):
        if self.value is None or isinstance(self.value, Decimal):
            return
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            # floats would carry binary rounding into the output
            raise InvalidFormatError(self.value, "number values must be int, str or Decimal")
        try:
            self.value = Decimal(self.value)
        except InvalidOperation:
            raise InvalidFormatError(self.value, "not a decimal number") from None

    def write_keys(self, writer: JsonWriter) -> None:
        if self.currency_code:
            writer.write_property_name("currencyCode")
            writer.write_value(self.currency_code)

        if self.number_style != FieldNumberStyle.UNSPECIFIED:
            writer.write_property_name("numberStyle")
            writer.write_value(FieldNumberStyle(self.number_style).value)

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(self.value)

    def has_value(self) -> bool:
        return self.value is not None


@dataclass
class CurrencyField(NumberField):
    """Number field shown as an amount of money; currency_code is required."""

    def __post_init__(self):
        super().__post_init__()
        if not self.currency_code:
            raise ValueError(f"Currency field '{self.key}' needs a currency code")
