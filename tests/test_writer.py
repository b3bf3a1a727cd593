#!/usr/bin/env python
"""
Tests for serialization to byte sinks, and for the streaming writer.
"""
import datetime
import io
import logging

import pytest

from icalwriter import values
from icalwriter.calendar import Event
from icalwriter.calendar import ICalendar
from icalwriter.components import Component
from icalwriter.components import Property
from icalwriter.lib.error import SinkError
from icalwriter.properties import Description
from icalwriter.properties import DtStart
from icalwriter.properties import Summary
from icalwriter.properties import Trigger
from icalwriter.writer import CalendarWriter
from icalwriter.writer import serialize
from icalwriter.writer import to_ical

utc = datetime.timezone.utc
dtstamp = datetime.datetime(1996, 9, 1, 13, 0, tzinfo=utc)

DESCRIPTION = (
    "Networld+Interop Conference and Exhibit\n"
    "Atlanta World Congress Center\n"
    "Atlanta, Georgia"
)


class FailingSink:
    """Accepts a number of writes, then fails like a full disk"""

    def __init__(self, accept: int) -> None:
        self.accept = accept
        self.data = b""

    def write(self, data: bytes) -> int:
        if self.accept <= 0:
            raise OSError(28, "No space left on device")
        self.accept -= 1
        self.data += data
        return len(data)


def build_calendar() -> ICalendar:
    calendar = ICalendar(prodid="-//Example Corp.//icalwriter tests//EN")
    event = Event("19970901T130000Z-123401@example.com", dtstamp)
    event.add_property(DtStart(datetime.datetime(1996, 9, 18, 14, 30, tzinfo=utc)))
    event.add_property(Summary("Networld+Interop Conference"))
    event.add_property(Description(DESCRIPTION))
    calendar.add_event(event)
    return calendar


def test_empty_component():
    assert to_ical(Component("VEVENT")) == b"BEGIN:VEVENT\r\nEND:VEVENT\r\n"


def test_folded_description():
    prop = Description(DESCRIPTION)
    sink = io.BytesIO()
    serialize(Component("VEVENT").add_property(prop), sink)
    assert sink.getvalue() == (
        b"BEGIN:VEVENT\r\n"
        b"DESCRIPTION:Networld+Interop Conference and Exhibit\\nAtlanta World Congress\r\n"
        b"  Center\\nAtlanta\\, Georgia\r\n"
        b"END:VEVENT\r\n"
    )


def test_every_line_fits():
    calendar = build_calendar()
    calendar.components[0].add_property(Description("老虎 " * 100))
    data = calendar.to_ical()
    assert data.endswith(b"END:VCALENDAR\r\n")
    for line in data.split(b"\r\n"):
        assert len(line) <= 75
        line.decode("utf-8")


def test_repeated_serialization():
    calendar = build_calendar()
    sink = io.BytesIO()
    serialize(calendar, sink)
    first = sink.getvalue()
    serialize(calendar, sink)
    assert sink.getvalue() == first + first
    assert calendar.to_ical() == first


def test_sink_error():
    sink = FailingSink(accept=3)
    with pytest.raises(SinkError) as excinfo:
        serialize(build_calendar(), sink)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "No space left on device" in str(excinfo.value)
    ## what was accepted before the failure stays there
    assert sink.data == b"BEGIN:VCALENDAR\r\nVERSION:2.0\r\nPRODID:-//Example Corp.//icalwriter tests//EN\r\n"


def test_sink_error_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="icalwriter"):
        with pytest.raises(SinkError):
            serialize(build_calendar(), FailingSink(accept=0))
    assert "failed after 0 lines" in caplog.text


def test_closed_sink():
    sink = io.BytesIO()
    sink.close()
    with pytest.raises(SinkError) as excinfo:
        serialize(Component("VEVENT"), sink)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_write_to_file(tmp_path):
    path = tmp_path / "calendar.ics"
    calendar = build_calendar()
    with open(path, "wb") as f:
        calendar.write(f)
    assert path.read_bytes() == calendar.to_ical()


class TestCalendarWriter:
    def test_same_as_tree(self):
        sink = io.BytesIO()
        with CalendarWriter(sink, prodid="-//Example Corp.//icalwriter tests//EN") as cal:
            with cal.event("19970901T130000Z-123401@example.com", dtstamp) as event:
                event.write(DtStart(datetime.datetime(1996, 9, 18, 14, 30, tzinfo=utc)))
                event.write(Summary("Networld+Interop Conference"))
                event.write(Description(DESCRIPTION))
        assert sink.getvalue() == build_calendar().to_ical()

    def test_alarm(self):
        sink = io.BytesIO()
        with CalendarWriter(sink) as cal:
            with cal.todo("uid-1", dtstamp) as todo:
                with todo.display_alarm(
                    Trigger(-datetime.timedelta(minutes=15)), Description("Wake up")
                ):
                    pass
        data = sink.getvalue()
        assert (
            b"BEGIN:VALARM\r\nACTION:DISPLAY\r\nTRIGGER:-PT15M\r\n"
            b"DESCRIPTION:Wake up\r\nEND:VALARM\r\nEND:VTODO\r\n" in data
        )
        assert data.startswith(b"BEGIN:VCALENDAR\r\nVERSION:2.0\r\nPRODID:")
        assert data.endswith(b"END:VCALENDAR\r\n")

    def test_whole_components(self):
        sink = io.BytesIO()
        with CalendarWriter(sink) as cal:
            cal.write_component(Event("uid-2", dtstamp))
            with cal.component("X-CUSTOM", Property("X-A", values.text("b,c"))):
                pass
        data = sink.getvalue()
        assert b"BEGIN:VEVENT\r\nUID:uid-2\r\nDTSTAMP:19960901T130000Z\r\nEND:VEVENT\r\n" in data
        assert b"BEGIN:X-CUSTOM\r\nX-A:b\\,c\r\nEND:X-CUSTOM\r\n" in data

    def test_exception_leaves_component_open(self):
        sink = io.BytesIO()
        with pytest.raises(RuntimeError):
            with CalendarWriter(sink) as cal:
                with cal.event("uid-3", dtstamp):
                    raise RuntimeError("boom")
        data = sink.getvalue()
        assert b"BEGIN:VEVENT" in data
        assert b"END:VEVENT" not in data
        assert b"END:VCALENDAR" not in data

    def test_close(self):
        sink = io.BytesIO()
        cal = CalendarWriter(sink, version="2.0", prodid="-//A//B//EN")
        cal.close()
        assert cal.closed
        assert sink.getvalue() == (
            b"BEGIN:VCALENDAR\r\nVERSION:2.0\r\nPRODID:-//A//B//EN\r\nEND:VCALENDAR\r\n"
        )
        assert cal.lines.lines_written == 4

    def test_sink_error(self):
        with pytest.raises(SinkError):
            CalendarWriter(FailingSink(accept=1))
