"""
Tests for color, date and style-name formatting.
"""

import unittest
from datetime import datetime, timedelta, timezone

from wallet_pass_generator import DateKind, InvalidFormatError, PassStyle
from wallet_pass_generator.utils import camel_case_style, convert_color, date_kind, format_date


class TestConvertColor(unittest.TestCase):

    def test_three_digit_colors_use_one_digit_per_channel(self):
        self.assertEqual(convert_color("#fff"), "rgb(15,15,15)")
        self.assertEqual(convert_color("#1a0"), "rgb(1,10,0)")

    def test_six_digit_colors(self):
        self.assertEqual(convert_color("#17BB52"), "rgb(23,187,82)")
        self.assertEqual(convert_color("#000000"), "rgb(0,0,0)")

    def test_extra_digits_are_ignored(self):
        self.assertEqual(convert_color("#17BB52FF"), "rgb(23,187,82)")

    def test_invalid_lengths(self):
        for color in ("#", "#1", "#12", "#1234", "#12345"):
            with self.assertRaises(InvalidFormatError) as context:
                convert_color(color)
            self.assertEqual(context.exception.value, color)
            self.assertIn(color, str(context.exception))

    def test_non_hex_digits(self):
        with self.assertRaises(InvalidFormatError):
            convert_color("#GGHHII")

    def test_other_syntax_passes_through(self):
        self.assertEqual(convert_color("rgb(1, 2, 3)"), "rgb(1, 2, 3)")
        self.assertEqual(convert_color(""), "")


class TestFormatDate(unittest.TestCase):

    def test_kinds(self):
        self.assertIs(date_kind(datetime(2020, 1, 1)), DateKind.UNSPECIFIED)
        self.assertIs(date_kind(datetime(2020, 1, 1, tzinfo=timezone.utc)), DateKind.UTC)
        self.assertIs(date_kind(datetime(2020, 1, 1, tzinfo=timezone(timedelta(hours=1)))), DateKind.LOCAL)

    def test_utc_and_unspecified_render_the_same(self):
        naive = datetime(2018, 1, 5, 12, 0, 0)
        self.assertEqual(format_date(naive), "2018-01-05T12:00:00Z")
        self.assertEqual(format_date(naive.replace(tzinfo=timezone.utc)), "2018-01-05T12:00:00Z")

    def test_local_offsets(self):
        value = datetime(2018, 1, 5, 12, 0, 0, tzinfo=timezone(timedelta(hours=-5)))
        self.assertEqual(format_date(value), "2018-01-05T12:00:00-05:00")
        value = datetime(2018, 7, 5, 12, 0, 0, tzinfo=timezone(timedelta(hours=14)))
        self.assertEqual(format_date(value), "2018-07-05T12:00:00+14:00")

    def test_named_zero_offset_zone_is_local(self):
        london = timezone(timedelta(0), "GMT")
        self.assertEqual(format_date(datetime(2018, 1, 5, 12, 0, 0, tzinfo=london)), "2018-01-05T12:00:00+00:00")

    def test_early_years_are_zero_padded(self):
        self.assertEqual(format_date(datetime(999, 1, 2, 3, 4, 5)), "0999-01-02T03:04:05Z")


class TestCamelCaseStyle(unittest.TestCase):

    def test_style_names(self):
        self.assertEqual(camel_case_style(PassStyle.BOARDING_PASS), "boardingPass")
        self.assertEqual(camel_case_style(PassStyle.STORE_CARD), "storeCard")
        self.assertEqual(camel_case_style(PassStyle.GENERIC), "generic")


if __name__ == "__main__":
    unittest.main()
