"""
Tests for the field variants and their value encoding.
"""

import json
import unittest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from wallet_pass_generator import (
    CurrencyField, DataDetectorType, DateField, FieldDateTimeStyle,
    FieldNumberStyle, FieldTextAlignment, InvalidFormatError, JsonWriter,
    NumberField, StandardField
)
from wallet_pass_generator.semantics import EventName, SemanticTags


def write_field(field) -> str:
    writer = JsonWriter()
    field.write(writer)
    return writer.getvalue()


class TestStandardField(unittest.TestCase):

    def test_common_keys(self):
        field = StandardField(
            key="gate",
            label="GATE",
            value="B12",
            change_message="Gate changed to %@",
            text_alignment=FieldTextAlignment.RIGHT,
        )
        self.assertEqual(
            write_field(field),
            '{"key":"gate","changeMessage":"Gate changed to %@",'
            '"textAlignment":"PKTextAlignmentRight","label":"GATE","value":"B12"}'
        )

    def test_value_is_omitted_when_not_set(self):
        self.assertEqual(write_field(StandardField(key="empty")), '{"key":"empty"}')

    def test_integer_value(self):
        self.assertEqual(json.loads(write_field(StandardField(key="n", value=7)))["value"], 7)

    def test_optional_keys(self):
        field = StandardField(
            key="terms",
            value="See website",
            attributed_value="<a href='https://example.com'>See website</a>",
            data_detector_types=[DataDetectorType.LINK, DataDetectorType.PHONE_NUMBER],
            semantics=SemanticTags([EventName("Concert")]),
        )
        document = json.loads(write_field(field))

        self.assertEqual(list(document), [
            "key", "dataDetectorTypes", "semantics", "value", "attributedValue"
        ])
        self.assertEqual(document["dataDetectorTypes"], [
            "PKDataDetectorTypeLink", "PKDataDetectorTypePhoneNumber"
        ])
        self.assertEqual(document["semantics"], {"eventName": "Concert"})

    def test_empty_data_detector_list_is_written(self):
        field = StandardField(key="plain", value="555-0100", data_detector_types=[])
        self.assertEqual(json.loads(write_field(field))["dataDetectorTypes"], [])


class TestDateField(unittest.TestCase):

    def test_utc_value_ends_with_z(self):
        field = DateField(key="d", value=datetime(2018, 1, 5, 17, 0, 0, tzinfo=timezone.utc))
        self.assertEqual(json.loads(write_field(field))["value"], "2018-01-05T17:00:00Z")

    def test_naive_value_is_treated_as_utc(self):
        field = DateField(key="d", value=datetime(2018, 1, 5, 12, 0, 0))
        self.assertEqual(json.loads(write_field(field))["value"], "2018-01-05T12:00:00Z")

    def test_negative_offset(self):
        value = datetime(2018, 1, 5, 12, 0, 0, tzinfo=timezone(timedelta(hours=-5)))
        field = DateField(key="d", value=value)
        self.assertEqual(json.loads(write_field(field))["value"], "2018-01-05T12:00:00-05:00")

    def test_offsets_with_minutes(self):
        cases = [
            (timedelta(hours=-3, minutes=-30), "2020-02-29T08:15:00-03:30"),
            (timedelta(hours=5, minutes=45), "2020-02-29T08:15:00+05:45"),
            (timedelta(hours=9, minutes=30), "2020-02-29T08:15:00+09:30"),
        ]
        for offset, expected in cases:
            value = datetime(2020, 2, 29, 8, 15, 0, tzinfo=timezone(offset))
            self.assertEqual(json.loads(write_field(DateField(key="d", value=value)))["value"], expected)

    def test_microseconds_are_dropped(self):
        field = DateField(key="d", value=datetime(2018, 1, 5, 12, 0, 0, 999999, tzinfo=timezone.utc))
        self.assertEqual(json.loads(write_field(field))["value"], "2018-01-05T12:00:00Z")

    def test_style_keys_come_before_value(self):
        field = DateField(
            key="departure",
            label="DEPARTS",
            value=datetime(2018, 1, 5, 12, 0, 0),
            date_style=FieldDateTimeStyle.SHORT,
            time_style=FieldDateTimeStyle.NONE,
            is_relative=True,
            ignores_time_zone=False,
        )
        document = json.loads(write_field(field))

        self.assertEqual(list(document), [
            "key", "label", "dateStyle", "timeStyle", "isRelative", "ignoresTimeZone", "value"
        ])
        self.assertEqual(document["dateStyle"], "PKDateStyleShort")
        self.assertEqual(document["timeStyle"], "PKDateStyleNone")
        self.assertIs(document["isRelative"], True)
        self.assertIs(document["ignoresTimeZone"], False)

    def test_unspecified_styles_are_omitted(self):
        document = json.loads(write_field(DateField(key="d", value=datetime(2018, 1, 5))))
        self.assertEqual(list(document), ["key", "value"])


class TestNumberField(unittest.TestCase):

    def test_decimal_is_written_as_raw_number_with_its_scale(self):
        text = write_field(NumberField(key="balance", value=Decimal("10.50")))
        self.assertEqual(text, '{"key":"balance","value":10.50}')

    def test_large_decimal_keeps_every_digit(self):
        text = write_field(NumberField(key="big", value=Decimal("12345678901234567890.123456789")))
        self.assertIn("12345678901234567890.123456789", text)

    def test_int_and_str_values_become_decimals(self):
        self.assertEqual(NumberField(key="a", value=3).value, Decimal(3))
        self.assertEqual(NumberField(key="b", value="0.10").value, Decimal("0.10"))

    def test_float_value_is_rejected(self):
        with self.assertRaises(InvalidFormatError):
            NumberField(key="f", value=0.1)

    def test_garbage_string_is_rejected(self):
        with self.assertRaises(InvalidFormatError):
            NumberField(key="g", value="ten")

    def test_variant_keys(self):
        field = NumberField(
            key="discount",
            value=Decimal("0.25"),
            number_style=FieldNumberStyle.PERCENT,
        )
        self.assertEqual(
            write_field(field),
            '{"key":"discount","numberStyle":"PKNumberStylePercent","value":0.25}'
        )

    def test_currency_code_is_written_when_set(self):
        field = NumberField(key="price", value=Decimal("99.99"), currency_code="EUR")
        self.assertEqual(write_field(field), '{"key":"price","currencyCode":"EUR","value":99.99}')


class TestCurrencyField(unittest.TestCase):

    def test_currency_field(self):
        field = CurrencyField(key="balance", label="BALANCE", value="1000", currency_code="GBP")
        document = json.loads(write_field(field), parse_float=Decimal)
        self.assertEqual(document["currencyCode"], "GBP")
        self.assertEqual(document["value"], 1000)

    def test_currency_code_is_required(self):
        with self.assertRaises(ValueError):
            CurrencyField(key="balance", value=Decimal("1"))


if __name__ == "__main__":
    unittest.main()
