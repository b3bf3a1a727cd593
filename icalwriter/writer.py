#!/usr/bin/env python
"""
Serialization of a component tree into content lines.

The sink is anything with a ``write(bytes)`` method: a file opened in
binary mode, ``io.BytesIO``, a socket file, ...  Text mode files must
not be used, they would mangle the CRLF line endings on some platforms.

Two ways of writing are offered:

* :func:`serialize` / :func:`to_ical` walk a complete tree built with
  :mod:`icalwriter.components`.
* :class:`CalendarWriter` writes a calendar incrementally, component by
  component, so that large calendars never need to be held in memory::

      with CalendarWriter(f, prodid="-//Example Corp.//EN") as cal:
          with cal.event(uid, dtstamp) as event:
              event.write(Summary("Networld+Interop Conference"))
"""
import io
from contextlib import contextmanager
from typing import Iterator
from typing import TYPE_CHECKING

from icalwriter.contentline import fold_line
from icalwriter.lib.error import assert_
from icalwriter.lib.error import log
from icalwriter.lib.error import SinkError

if TYPE_CHECKING:
    from icalwriter.components import Component
    from icalwriter.components import Property

DEFAULT_VERSION = "2.0"
DEFAULT_PRODID = "-//icalwriter//icalwriter//EN"


class ContentLineWriter:
    """
    Pushes folded content lines into a sink.  This is the only place
    where the sink is touched, and thus the only place errors are
    raised from.
    """

    def __init__(self, sink) -> None:
        self.sink = sink
        self.lines_written = 0

    def _write(self, data: bytes) -> None:
        try:
            self.sink.write(data)
        except (OSError, ValueError) as err:
            ## ValueError is what a closed file object raises
            log.error(
                f"Writing to {self.sink!r} failed after {self.lines_written} lines: {err}"
            )
            raise SinkError(reason=str(err)) from err
        self.lines_written += 1

    def write_line(self, line: str) -> None:
        self._write(fold_line(line))

    def write_begin(self, name: str) -> None:
        self.write_line("BEGIN:%s" % name)

    def write_end(self, name: str) -> None:
        self.write_line("END:%s" % name)

    def write_property(self, property: "Property") -> None:
        self.write_line(property.to_ical())

    def write_component(self, component: "Component") -> None:
        self.write_begin(component.name)
        for property in component.properties:
            self.write_property(property)
        for subcomponent in component.components:
            self.write_component(subcomponent)
        self.write_end(component.name)


def serialize(component: "Component", sink) -> None:
    """
    Writes ``component`` and everything below it to ``sink``.

    The tree is only read.  Calling this repeatedly on the same sink
    produces several independent calendar objects back to back.

    Raises:
        SinkError: the sink failed; output written so far is left as is
    """
    log.debug(f"Serializing {component.name} to {sink!r}")
    lines = ContentLineWriter(sink)
    lines.write_component(component)
    log.debug(f"Serialized {component.name} in {lines.lines_written} content lines")


def to_ical(component: "Component") -> bytes:
    """Returns the serialized component as bytes."""
    buffer = io.BytesIO()
    serialize(component, buffer)
    return buffer.getvalue()


class ComponentWriter:
    """
    Writes the body of an open component.  Obtained from
    :meth:`CalendarWriter.component` and friends; the BEGIN and END
    lines are handled by the context manager.
    """

    def __init__(self, lines: ContentLineWriter, name: str) -> None:
        self.lines = lines
        self.name = name

    def write(self, property: "Property") -> None:
        self.lines.write_property(property)

    def write_component(self, component: "Component") -> None:
        self.lines.write_component(component)

    @contextmanager
    def component(self, name: str, *properties: "Property") -> Iterator["ComponentWriter"]:
        """
        Opens a sub-component.  ``properties`` are written right after
        the BEGIN line.  If the body raises, the END line is not written.
        """
        self.lines.write_begin(name)
        sub = ComponentWriter(self.lines, name)
        for property in properties:
            sub.write(property)
        yield sub
        self.lines.write_end(name)

    def alarm(self, action: str, trigger: "Property", *properties: "Property"):
        from icalwriter.properties import Action

        return self.component("VALARM", Action(action), trigger, *properties)

    def audio_alarm(self, trigger: "Property", *properties: "Property"):
        return self.alarm("AUDIO", trigger, *properties)

    def display_alarm(
        self, trigger: "Property", description: "Property", *properties: "Property"
    ):
        return self.alarm("DISPLAY", trigger, description, *properties)

    def email_alarm(
        self,
        trigger: "Property",
        description: "Property",
        summary: "Property",
        *properties: "Property",
    ):
        return self.alarm("EMAIL", trigger, description, summary, *properties)


class CalendarWriter(ComponentWriter):
    """
    Incremental writer for one VCALENDAR object.  The header (BEGIN,
    VERSION and PRODID) is written on construction, :meth:`close`
    writes the END line.

    As a context manager the calendar is closed on a clean exit only;
    after an exception the output is incomplete and it's up to the
    caller to discard it.
    """

    def __init__(
        self,
        sink,
        version: str = DEFAULT_VERSION,
        prodid: str = DEFAULT_PRODID,
    ) -> None:
        from icalwriter.properties import ProdID
        from icalwriter.properties import Version

        super().__init__(ContentLineWriter(sink), "VCALENDAR")
        self.closed = False
        self.lines.write_begin(self.name)
        self.write(Version(version))
        self.write(ProdID(prodid))

    def _object(self, name: str, uid: str, dtstamp, *properties: "Property"):
        from icalwriter.properties import DtStamp
        from icalwriter.properties import Uid

        return self.component(name, Uid(uid), DtStamp(dtstamp), *properties)

    def event(self, uid: str, dtstamp, *properties: "Property"):
        return self._object("VEVENT", uid, dtstamp, *properties)

    def todo(self, uid: str, dtstamp, *properties: "Property"):
        return self._object("VTODO", uid, dtstamp, *properties)

    def journal(self, uid: str, dtstamp, *properties: "Property"):
        return self._object("VJOURNAL", uid, dtstamp, *properties)

    def freebusy(self, uid: str, dtstamp, *properties: "Property"):
        return self._object("VFREEBUSY", uid, dtstamp, *properties)

    def timezone(self, tzid: str, *properties: "Property"):
        from icalwriter.properties import TzID

        return self.component("VTIMEZONE", TzID(tzid), *properties)

    def close(self) -> None:
        assert_(not self.closed)
        self.lines.write_end(self.name)
        self.closed = True

    def __enter__(self) -> "CalendarWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None and not self.closed:
            self.close()
