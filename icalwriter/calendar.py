#!/usr/bin/env python
"""
The calendar components of RFC 5545 section 3.6, each created with the
properties the RFC requires.  What else goes into them is up to the
caller, nothing checks that a property is allowed in a component (see
:mod:`icalwriter.validation` for that).

Example::

    calendar = ICalendar(prodid="-//xyz Corp//NONSGML PDA Calendar Version 1.0//EN")
    event = Event("b68378cf-872d-44f1-9703-5e3725c56e71", dtstamp)
    event.add_property(Summary("Networld+Interop Conference"))
    calendar.add_event(event)
    with open("event.ics", "wb") as f:
        calendar.write(f)
"""
import datetime
from typing import Any
from typing import Union

from icalwriter.components import Component
from icalwriter.components import Property
from icalwriter.properties import Action
from icalwriter.properties import Description
from icalwriter.properties import DtStamp
from icalwriter.properties import DtStart
from icalwriter.properties import ProdID
from icalwriter.properties import Summary
from icalwriter.properties import Trigger
from icalwriter.properties import TzID
from icalwriter.properties import TzOffsetFrom
from icalwriter.properties import TzOffsetTo
from icalwriter.properties import Uid
from icalwriter.properties import Version
from icalwriter.writer import DEFAULT_PRODID
from icalwriter.writer import DEFAULT_VERSION


def _as_property(cls, value: Any) -> Property:
    if isinstance(value, Property):
        return value
    return cls(value)


class ICalendar(Component):
    """
    The iCalendar object, VCALENDAR.  VERSION and PRODID are required and
    always written first.
    """

    name = "VCALENDAR"

    def __init__(
        self, version: str = DEFAULT_VERSION, prodid: str = DEFAULT_PRODID
    ) -> None:
        super().__init__()
        self.add_property(Version(version))
        self.add_property(ProdID(prodid))

    def add_event(self, event: "Event") -> "ICalendar":
        return self.add_component(event)

    def add_todo(self, todo: "ToDo") -> "ICalendar":
        return self.add_component(todo)

    def add_journal(self, journal: "Journal") -> "ICalendar":
        return self.add_component(journal)

    def add_freebusy(self, freebusy: "FreeBusy") -> "ICalendar":
        return self.add_component(freebusy)

    def add_timezone(self, timezone: "TimeZone") -> "ICalendar":
        return self.add_component(timezone)


class CalendarObject(Component):
    """Base for the components that are identified by UID and DTSTAMP."""

    def __init__(
        self, uid: Union[str, Property], dtstamp: Union[datetime.datetime, str, Property]
    ) -> None:
        super().__init__()
        self.add_property(_as_property(Uid, uid))
        self.add_property(_as_property(DtStamp, dtstamp))


class Event(CalendarObject):
    """VEVENT.  A UID should be generated randomly (``uuid.uuid4()``), DTSTAMP must be in UTC."""

    name = "VEVENT"

    def add_alarm(self, alarm: "Alarm") -> "Event":
        return self.add_component(alarm)


class ToDo(CalendarObject):
    name = "VTODO"

    def add_alarm(self, alarm: "Alarm") -> "ToDo":
        return self.add_component(alarm)


class Journal(CalendarObject):
    name = "VJOURNAL"


class FreeBusy(CalendarObject):
    name = "VFREEBUSY"


class ZoneTime(Component):
    """
    A STANDARD or DAYLIGHT observance within a VTIMEZONE.  DTSTART is
    the local onset time, so naive datetimes are expected.
    """

    def __init__(
        self,
        dtstart: Union[datetime.datetime, str, Property],
        tzoffsetfrom: Union[datetime.timedelta, str, Property],
        tzoffsetto: Union[datetime.timedelta, str, Property],
    ) -> None:
        super().__init__()
        self.add_property(_as_property(DtStart, dtstart))
        self.add_property(_as_property(TzOffsetFrom, tzoffsetfrom))
        self.add_property(_as_property(TzOffsetTo, tzoffsetto))


class Standard(ZoneTime):
    name = "STANDARD"


class Daylight(ZoneTime):
    name = "DAYLIGHT"


class TimeZone(Component):
    """VTIMEZONE, needs at least one STANDARD or DAYLIGHT observance."""

    name = "VTIMEZONE"

    def __init__(self, tzid: Union[str, Property], zone_time: ZoneTime) -> None:
        super().__init__()
        self.add_property(_as_property(TzID, tzid))
        self.add_component(zone_time)

    def add_zone_time(self, zone_time: ZoneTime) -> "TimeZone":
        return self.add_component(zone_time)


class Alarm(Component):
    """
    VALARM.  Use the constructors :meth:`audio`, :meth:`display` and
    :meth:`email`, they add what each kind of alarm requires.
    """

    name = "VALARM"

    def __init__(
        self,
        action: Union[str, Property],
        trigger: Union[datetime.timedelta, datetime.datetime, str, Property],
    ) -> None:
        super().__init__()
        self.add_property(_as_property(Action, action))
        self.add_property(_as_property(Trigger, trigger))

    @classmethod
    def audio(cls, trigger) -> "Alarm":
        return cls(Action.AUDIO, trigger)

    @classmethod
    def display(cls, trigger, description) -> "Alarm":
        alarm = cls(Action.DISPLAY, trigger)
        alarm.add_property(_as_property(Description, description))
        return alarm

    @classmethod
    def email(cls, trigger, description, summary) -> "Alarm":
        alarm = cls(Action.EMAIL, trigger)
        alarm.add_property(_as_property(Description, description))
        alarm.add_property(_as_property(Summary, summary))
        return alarm
