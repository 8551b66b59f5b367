#!/usr/bin/env python3
"""
Test module for {{DATE:...}} formatting.
File: tests/test_date_format.py

Usage:  python test_date_format.py
        pytest test_date_format.py
"""

import sys

from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from attachment_renamer.renamer.date_format import format_date
from tests.helpers import run_test_group


FRIDAY = datetime(2022, 4, 8, 14, 5, 9, 123456)
NEW_YEAR_MIDNIGHT = datetime(2022, 1, 1, 0, 0, 0)


def test_compact_date():
    assert format_date(FRIDAY, "YYYYMMDD") == "20220408"
    assert format_date(FRIDAY, "YYMMDD") == "220408"


def test_date_and_time_with_literal():
    assert format_date(FRIDAY, "YYYY-MM-DD[T]HH:mm:ss") == "2022-04-08T14:05:09"
    assert format_date(FRIDAY, "[at] HH[h]") == "at 14h"


def test_names_and_ordinals():
    assert format_date(FRIDAY, "dddd, MMMM Do YYYY") == "Friday, April 8th 2022"
    assert format_date(FRIDAY, "ddd MMM D") == "Fri Apr 8"
    assert format_date(FRIDAY, "dd") == "Fr"
    assert format_date(FRIDAY, "Mo") == "4th"
    assert format_date(datetime(2022, 3, 22), "Do") == "22nd"
    assert format_date(datetime(2022, 3, 13), "Do") == "13th"


def test_numeric_weekday_and_quarter():
    assert format_date(FRIDAY, "d E Q") == "5 5 2"
    assert format_date(datetime(2022, 4, 10), "d E") == "0 7"


def test_day_of_year_and_iso_week():
    assert format_date(FRIDAY, "DDDD DDD") == "098 98"
    assert format_date(FRIDAY, "GGGG-[W]WW") == "2022-W14"
    assert format_date(NEW_YEAR_MIDNIGHT, "GGGG WW W") == "2021 52 52"


def test_twelve_hour_clock():
    assert format_date(FRIDAY, "hh:mm A") == "02:05 PM"
    assert format_date(FRIDAY, "h a") == "2 pm"
    assert format_date(NEW_YEAR_MIDNIGHT, "h A kk k") == "12 AM 24 24"


def test_unpadded_tokens():
    moment = datetime(2022, 4, 8, 7, 3, 2)
    assert format_date(moment, "M/D H:m:s") == "4/8 7:3:2"


def test_fractional_seconds():
    assert format_date(FRIDAY, "SSS SS S") == "123 12 1"


def test_unix_timestamps():
    moment = datetime(2022, 4, 8, tzinfo=timezone.utc)
    assert format_date(moment, "X") == "1649376000"
    assert format_date(moment, "x") == "1649376000000"


def test_utc_offsets():
    plus_two = datetime(2022, 4, 8, tzinfo=timezone(timedelta(hours=2)))
    assert format_date(plus_two, "Z") == "+02:00"
    assert format_date(plus_two, "ZZ") == "+0200"

    minus = datetime(2022, 4, 8, tzinfo=timezone(timedelta(hours=-5, minutes=-30)))
    assert format_date(minus, "Z") == "-05:30"


def test_other_characters_pass_through():
    assert format_date(FRIDAY, "YYYY_??") == "2022_??"
    assert format_date(FRIDAY, "") == ""


def main() -> int:
    return run_test_group("Testing date formatting", [
        test_compact_date,
        test_date_and_time_with_literal,
        test_names_and_ordinals,
        test_numeric_weekday_and_quarter,
        test_day_of_year_and_iso_week,
        test_twelve_hour_clock,
        test_unpadded_tokens,
        test_fractional_seconds,
        test_unix_timestamps,
        test_utc_offsets,
        test_other_characters_pass_through,
    ])


if __name__ == "__main__":
    sys.exit(main())


# End of file #
