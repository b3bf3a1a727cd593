#!/usr/bin/env python
"""
Tests for the rendering of property and parameter values.
"""
import datetime
from zoneinfo import ZoneInfo

import pytest

from icalwriter import values
from icalwriter.values import param_value
from icalwriter.values import param_values
from icalwriter.values import to_value
from icalwriter.values import ValueType

utc = datetime.timezone.utc


class _Zone(datetime.tzinfo):
    """Minimal named time zone, like zoneinfo.ZoneInfo but without tzdata"""

    key = "Europe/Oslo"

    def utcoffset(self, dt):
        return datetime.timedelta(hours=1)

    def dst(self, dt):
        return datetime.timedelta(0)

    def tzname(self, dt):
        return "CET"


class TestSimpleValues:
    def test_text(self):
        assert values.text("Atlanta, Georgia").to_ical() == "Atlanta\\, Georgia"
        assert values.text(b"bytes; too").to_ical() == "bytes\\; too"

    def test_raw(self):
        assert values.raw("a,b;c\\d").to_ical() == "a,b;c\\d"

    def test_integer(self):
        assert values.integer(42).to_ical() == "42"
        assert values.integer(0).to_ical() == "0"
        assert values.integer(-5).to_ical() == "-5"

    def test_float(self):
        assert values.float_(1.5).to_ical() == "1.5"
        assert values.float_(-0.25).to_ical() == "-0.25"
        assert values.float_(1e-7).to_ical() == "0.0000001"
        assert "e" not in values.float_(1e20).to_ical()

    def test_float_keeps_small_magnitudes(self):
        assert values.float_(1e-25).to_ical() == "0.0000000000000000000000001"
        assert values.float_(-2.5e-30).to_ical() == "-0.0000000000000000000000000000025"
        assert values.float_(1e20).to_ical() == "100000000000000000000"

    def test_boolean(self):
        assert values.boolean(True).to_ical() == "TRUE"
        assert values.boolean(False).to_ical() == "FALSE"

    def test_geo(self):
        assert values.geo(37.386013, -122.082932).to_ical() == "37.386013;-122.082932"

    def test_binary(self):
        assert values.binary(b"abc").to_ical() == "YWJj"
        assert values.binary(b"").to_ical() == ""

    def test_uri_and_cal_address(self):
        assert values.uri("http://example.com/a,b").to_ical() == "http://example.com/a,b"
        assert (
            values.cal_address("mailto:jsmith@example.com").to_ical()
            == "mailto:jsmith@example.com"
        )

    def test_str(self):
        assert str(values.integer(3)) == "3"


class TestDateAndTime:
    def test_date(self):
        assert values.date(datetime.date(1997, 11, 2)).to_ical() == "19971102"
        assert values.date(datetime.date(1, 1, 1)).to_ical() == "00010101"

    def test_date_time_utc(self):
        dt = datetime.datetime(1996, 9, 18, 14, 30, tzinfo=utc)
        assert values.date_time(dt).to_ical() == "19960918T143000Z"

    def test_date_time_floating(self):
        dt = datetime.datetime(1998, 4, 15, 0, 0)
        assert values.date_time(dt).to_ical() == "19980415T000000"

    def test_date_time_fixed_offset_is_converted(self):
        tz = datetime.timezone(datetime.timedelta(hours=2))
        dt = datetime.datetime(1996, 9, 18, 16, 30, tzinfo=tz)
        assert values.date_time(dt).to_ical() == "19960918T143000Z"

    def test_date_time_named_zone(self):
        dt = datetime.datetime(2020, 1, 1, 10, 0, tzinfo=_Zone())
        assert values.date_time(dt).to_ical() == "20200101T100000"
        assert values.tzid_of(dt) == "Europe/Oslo"

    def test_tzid_of(self):
        assert values.tzid_of(datetime.datetime(2020, 1, 1)) is None
        assert values.tzid_of(datetime.datetime(2020, 1, 1, tzinfo=utc)) is None

    def test_time(self):
        assert values.time(datetime.time(12, 0, 0)).to_ical() == "120000"
        assert values.time(datetime.time(7, 5, 9, tzinfo=utc)).to_ical() == "070509Z"

    def test_time_fixed_offset_is_converted(self):
        plus_one = datetime.timezone(datetime.timedelta(hours=1))
        assert values.time(datetime.time(10, 0, tzinfo=plus_one)).to_ical() == "090000Z"
        minus_five = datetime.timezone(datetime.timedelta(hours=-5))
        assert values.time(datetime.time(22, 30, tzinfo=minus_five)).to_ical() == "033000Z"

    def test_time_named_zone_is_local(self):
        ## without a date there is no offset, the caller adds a TZID
        t = datetime.time(10, 0, tzinfo=ZoneInfo("Europe/Berlin"))
        assert values.time(t).to_ical() == "100000"


class TestDuration:
    @pytest.mark.parametrize(
        "delta,expected",
        [
            (datetime.timedelta(0), "PT0S"),
            (datetime.timedelta(hours=1), "PT1H"),
            (datetime.timedelta(minutes=15), "PT15M"),
            (datetime.timedelta(seconds=30), "PT30S"),
            (datetime.timedelta(hours=1, minutes=30), "PT1H30M"),
            (datetime.timedelta(hours=2, seconds=5), "PT2H0M5S"),
            (datetime.timedelta(days=1, hours=2, seconds=5), "P1DT2H0M5S"),
            (datetime.timedelta(days=15), "P15D"),
            (datetime.timedelta(days=14), "P2W"),
            (datetime.timedelta(weeks=1, hours=1), "P7DT1H"),
            (-datetime.timedelta(minutes=15), "-PT15M"),
            (-datetime.timedelta(days=7), "-P1W"),
        ],
    )
    def test_duration(self, delta, expected):
        assert values.duration(delta).to_ical() == expected

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (datetime.timedelta(0), "+0000"),
            (datetime.timedelta(hours=-5), "-0500"),
            (datetime.timedelta(hours=5, minutes=30), "+0530"),
            (datetime.timedelta(hours=-3, minutes=-30), "-0330"),
            (datetime.timedelta(hours=1, seconds=15), "+010015"),
        ],
    )
    def test_utc_offset(self, delta, expected):
        assert values.utc_offset(delta).to_ical() == expected

    def test_period(self):
        start = datetime.datetime(1997, 3, 8, 16, 0, tzinfo=utc)
        end = datetime.datetime(1997, 3, 9, 0, 0, tzinfo=utc)
        assert values.period(start, end).to_ical() == "19970308T160000Z/19970309T000000Z"
        assert (
            values.period(start, datetime.timedelta(hours=8, minutes=30)).to_ical()
            == "19970308T160000Z/PT8H30M"
        )

    def test_period_in_named_zone_is_utc(self):
        berlin = ZoneInfo("Europe/Berlin")
        start = datetime.datetime(2020, 1, 1, 10, 0, tzinfo=berlin)
        end = datetime.datetime(2020, 7, 1, 10, 0, tzinfo=berlin)
        assert (
            values.period(start, datetime.timedelta(hours=1)).to_ical()
            == "20200101T090000Z/PT1H"
        )
        assert values.period(start, end).to_ical() == "20200101T090000Z/20200701T080000Z"

    def test_period_floating(self):
        start = datetime.datetime(2020, 1, 1, 10, 0)
        assert (
            values.period(start, datetime.timedelta(hours=1)).to_ical()
            == "20200101T100000/PT1H"
        )


class TestRecur:
    def test_rule_parts_in_order(self):
        rule = values.recur(freq="YEARLY", by_month=3, by_day="-1SU")
        assert rule.to_ical() == "FREQ=YEARLY;BYMONTH=3;BYDAY=-1SU"

    def test_lists_and_until(self):
        rule = values.recur(
            freq="WEEKLY",
            until=datetime.datetime(1997, 12, 24, tzinfo=utc),
            by_day=["TU", "TH"],
        )
        assert rule.to_ical() == "FREQ=WEEKLY;UNTIL=19971224T000000Z;BYDAY=TU,TH"

    def test_until_date_and_count(self):
        assert (
            values.recur(freq="DAILY", until=datetime.date(2000, 1, 1)).to_ical()
            == "FREQ=DAILY;UNTIL=20000101"
        )
        assert values.recur(freq="DAILY", count=10).to_ical() == "FREQ=DAILY;COUNT=10"

    def test_positional_parts(self):
        rule = values.recur(("X-NAME", "Y"), freq="DAILY")
        assert rule.to_ical() == "X-NAME=Y;FREQ=DAILY"


class TestLists:
    def test_text_list(self):
        assert values.text_list(["a,b", "c"]).to_ical() == "a\\,b,c"

    def test_value_list(self):
        assert values.value_list([1, 2, 3]).to_ical() == "1,2,3"
        dates = [datetime.date(1997, 3, 8), datetime.date(1997, 3, 9)]
        assert values.value_list(dates).to_ical() == "19970308,19970309"

    def test_separator(self):
        assert values.value_list([1, 2], separator=";").to_ical() == "1;2"

    def test_empty(self):
        assert values.value_list([]).to_ical() == ""


class TestToValue:
    @pytest.mark.parametrize(
        "obj,kind",
        [
            ("x", ValueType.RAW),
            (True, ValueType.BOOLEAN),
            (5, ValueType.INTEGER),
            (1.5, ValueType.FLOAT),
            (datetime.datetime(2020, 1, 1), ValueType.DATE_TIME),
            (datetime.date(2020, 1, 1), ValueType.DATE),
            (datetime.time(12, 0), ValueType.TIME),
            (datetime.timedelta(hours=1), ValueType.DURATION),
            (b"\x00\x01", ValueType.BINARY),
            ([1, 2], ValueType.LIST),
        ],
    )
    def test_kind(self, obj, kind):
        assert to_value(obj).kind is kind

    def test_none_is_empty(self):
        assert to_value(None).to_ical() == ""

    def test_value_passes_through(self):
        value = values.text("a")
        assert to_value(value) is value

    def test_values_are_immutable(self):
        value = values.integer(1)
        with pytest.raises(AttributeError):
            value.data = 2


class TestParameterValues:
    def test_plain(self):
        assert param_value("ACCEPTED") == "ACCEPTED"
        assert param_value("audio/basic") == "audio/basic"

    def test_quoted(self):
        assert param_value("mailto:jsmith@example.com") == '"mailto:jsmith@example.com"'
        assert param_value("Doe, John") == '"Doe, John"'
        assert param_value("a;b") == '"a;b"'

    def test_rfc6868(self):
        assert param_value("a^b") == "a^^b"
        assert param_value('say "hi"') == "say ^'hi^'"
        assert param_value("x\ny") == "x^ny"
        assert param_value("x\r\ny") == "x^ny"

    def test_other_types(self):
        assert param_value(True) == "TRUE"
        assert param_value(False) == "FALSE"
        assert param_value(3) == "3"
        assert param_value(values.text("Doe, John")) == '"Doe, John"'
        assert param_value(ValueType.DATE.value) == "DATE"
        assert param_value(None) == ""
        assert param_values([None]) == ""

    def test_multiple(self):
        assert (
            param_values(["mailto:a@example.com", "mailto:b@example.com"])
            == '"mailto:a@example.com","mailto:b@example.com"'
        )
        assert param_values(["A", "B"]) == "A,B"
