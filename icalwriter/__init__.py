#!/usr/bin/env python
import logging

## Must be set before anything else is imported, lib.error reads it
__version__ = "0.5.0"

from .calendar import Alarm
from .calendar import Daylight
from .calendar import Event
from .calendar import FreeBusy
from .calendar import ICalendar
from .calendar import Journal
from .calendar import Standard
from .calendar import TimeZone
from .calendar import ToDo
from .components import Component
from .components import Parameter
from .components import Property
from .contentline import escape_text
from .contentline import fold_line
from .writer import CalendarWriter
from .writer import serialize
from .writer import to_ical

# Silence notification of no default logging handler
log = logging.getLogger("icalwriter")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "Alarm",
    "CalendarWriter",
    "Component",
    "Daylight",
    "Event",
    "FreeBusy",
    "ICalendar",
    "Journal",
    "Parameter",
    "Property",
    "Standard",
    "TimeZone",
    "ToDo",
    "escape_text",
    "fold_line",
    "serialize",
    "to_ical",
]
