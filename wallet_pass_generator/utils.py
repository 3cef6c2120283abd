"""
Formatting helpers shared by the field, semantic tag and request writers.
"""

import re
from datetime import datetime

from .enums import DateKind, PassStyle
from .exceptions import InvalidFormatError

_HEX_DIGITS = re.compile(r'^[0-9a-fA-F]+$')


def convert_color(color: str) -> str:
    """Normalize a #rgb / #rrggbb color to the rgb(r,g,b) form pass.json expects.

    Strings that do not start with '#' are assumed to be in the target syntax
    already and are returned unchanged. With three digits each digit is a
    channel value on its own ("#fff" -> "rgb(15,15,15)"); with six or more the
    first six digits are read in pairs and the rest is ignored.
    """
    if not color or not color.startswith("#"):
        return color

    digits = color[1:]
    if len(digits) == 3:
        channels = [digits[0], digits[1], digits[2]]
    elif len(digits) >= 6:
        channels = [digits[0:2], digits[2:4], digits[4:6]]
    else:
        raise InvalidFormatError(color)

    if not all(_HEX_DIGITS.match(channel) for channel in channels):
        raise InvalidFormatError(color)

    r, g, b = (int(channel, 16) for channel in channels)
    return f"rgb({r},{g},{b})"


def date_kind(value: datetime) -> DateKind:
    """Classify a datetime: naive is UNSPECIFIED, UTC-zoned is UTC, anything else LOCAL."""
    if value.tzinfo is None or value.utcoffset() is None:
        return DateKind.UNSPECIFIED
    if value.tzname() in ("UTC", "Z"):
        return DateKind.UTC
    return DateKind.LOCAL


def format_date(value: datetime) -> str:
    """Render a timestamp as yyyy-MM-ddTHH:mm:ss followed by Z or a ±HH:MM offset.

    UTC and naive (unspecified) values get a literal Z. Any other zone keeps its
    wall-clock time and appends its offset from UTC, e.g.
    2018-01-05T12:00:00-05:00.
    """
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )

    if date_kind(value) is not DateKind.LOCAL:
        return text + "Z"

    offset_seconds = int(value.utcoffset().total_seconds())
    sign = "-" if offset_seconds < 0 else "+"
    hours, remainder = divmod(abs(offset_seconds), 3600)
    minutes = remainder // 60
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def camel_case_style(style: PassStyle) -> str:
    """Property name of the style-specific object, e.g. BoardingPass -> boardingPass."""
    name = style.value
    return name[:1].lower() + name[1:]
