#!/usr/bin/env python
"""
Property value types (RFC 5545 section 3.3).

Every value is a :class:`Value` tagged with a :class:`ValueType`.  The
set of value types is fixed by the RFC, so rendering is a plain lookup
in ``_RENDERERS`` rather than a class hierarchy.  Rendering is total:
nothing here checks that a date is sensible or that a URI is well
formed, that is left to :mod:`icalwriter.validation` or the caller.

Example::

    from icalwriter import values

    values.text("Networld+Interop, Atlanta").to_ical()
    ## 'Networld+Interop\\, Atlanta'
    values.duration(timedelta(hours=1, minutes=30)).to_ical()
    ## 'PT1H30M'
"""
import base64
import datetime
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterable
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from icalwriter.contentline import escape_text
from icalwriter.lib.python_utilities import to_unicode


class ValueType(Enum):
    """Value data types.  The enum value is the name used by the VALUE parameter."""

    BINARY = "BINARY"
    BOOLEAN = "BOOLEAN"
    CAL_ADDRESS = "CAL-ADDRESS"
    DATE = "DATE"
    DATE_TIME = "DATE-TIME"
    DURATION = "DURATION"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    PERIOD = "PERIOD"
    RECUR = "RECUR"
    TEXT = "TEXT"
    TIME = "TIME"
    URI = "URI"
    UTC_OFFSET = "UTC-OFFSET"
    ## not RFC value types
    GEO = "GEO"
    LIST = "LIST"
    RAW = "RAW"


@dataclass(frozen=True)
class Value:
    """
    A typed property value.

    Attributes:
        kind: the value type, selects the rendering function
        data: the payload, whatever the rendering function for ``kind`` expects
        separator: only used by LIST values
    """

    kind: ValueType
    data: Any
    separator: str = ","

    def to_ical(self) -> str:
        return _RENDERERS[self.kind](self)

    def __str__(self) -> str:
        return self.to_ical()


## Rendering functions, one per value type


def _utc_datetime(dt: datetime.datetime) -> bool:
    if dt.tzinfo is None:
        return False
    if dt.tzinfo is datetime.timezone.utc:
        return True
    return dt.utcoffset() == datetime.timedelta(0) and dt.tzname() in ("UTC", "Z")


def tzid_of(dt: Union[datetime.datetime, datetime.time]) -> Optional[str]:
    """
    Returns the time zone identifier usable as TZID parameter, or None
    for naive, UTC and anonymous fixed-offset values.

    Both zoneinfo (``key``) and pytz (``zone``) time zones are recognized.
    """
    tz = dt.tzinfo
    if tz is None or (isinstance(dt, datetime.datetime) and _utc_datetime(dt)):
        return None
    name = getattr(tz, "key", None) or getattr(tz, "zone", None)
    if not name or name == "UTC":
        return None
    return name


def _render_date(value: Value) -> str:
    d = value.data
    return "%04d%02d%02d" % (d.year, d.month, d.day)


def _format_date_time(dt: datetime.datetime) -> str:
    if dt.tzinfo is not None and not _utc_datetime(dt) and not tzid_of(dt):
        ## anonymous fixed offset, there is no TZID we could refer to
        dt = dt.astimezone(datetime.timezone.utc)
    ret = "%04d%02d%02dT%02d%02d%02d" % (
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
    )
    if _utc_datetime(dt):
        ret += "Z"
    return ret


def _render_date_time(value: Value) -> str:
    return _format_date_time(value.data)


def _render_time(value: Value) -> str:
    """
    Times with a fixed offset are converted to UTC.  A time in a named
    zone has no offset without a date (``utcoffset()`` is None), it is
    written as local time and a TZID parameter is up to the caller.
    """
    t = value.data
    offset = t.utcoffset() if t.tzinfo is not None else None
    if offset is None:
        return "%02d%02d%02d" % (t.hour, t.minute, t.second)
    seconds = t.hour * 3600 + t.minute * 60 + t.second - int(offset.total_seconds())
    seconds %= 86400
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return "%02d%02d%02dZ" % (hours, minutes, seconds)


def _format_duration(delta: datetime.timedelta) -> str:
    seconds = int(delta.total_seconds())
    if seconds == 0:
        return "PT0S"
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)

    if days and days % 7 == 0 and not (hours or minutes or seconds):
        return "%sP%dW" % (sign, days // 7)

    ret = sign + "P"
    if days:
        ret += "%dD" % days
    if hours or minutes or seconds:
        ret += "T"
        if hours:
            ret += "%dH" % hours
        ## dur-hour is followed by dur-minute if there are seconds
        if minutes or (hours and seconds):
            ret += "%dM" % minutes
        if seconds:
            ret += "%dS" % seconds
    return ret


def _render_duration(value: Value) -> str:
    return _format_duration(value.data)


def _render_utc_offset(value: Value) -> str:
    seconds = int(value.data.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, rest = divmod(abs(seconds), 3600)
    minutes, seconds = divmod(rest, 60)
    ret = "%s%02d%02d" % (sign, hours, minutes)
    if seconds:
        ret += "%02d" % seconds
    return ret


def _format_float(number: float) -> str:
    if math.isnan(number) or math.isinf(number):
        return repr(number)
    ret = repr(float(number))
    if "e" in ret or "E" in ret:
        ret = format(Decimal(ret), "f")
    return ret


def _render_float(value: Value) -> str:
    return _format_float(value.data)


def _render_integer(value: Value) -> str:
    return "%d" % value.data


def _render_boolean(value: Value) -> str:
    return "TRUE" if value.data else "FALSE"


def _render_text(value: Value) -> str:
    return escape_text(value.data)


def _render_verbatim(value: Value) -> str:
    return to_unicode(value.data)


def _render_binary(value: Value) -> str:
    return base64.b64encode(value.data).decode("ascii")


def _render_geo(value: Value) -> str:
    latitude, longitude = value.data
    return "%s;%s" % (_format_float(latitude), _format_float(longitude))


def _period_date_time(dt: datetime.datetime) -> str:
    ## periods carry no TZID, aware values are written in UTC
    if dt.tzinfo is not None:
        dt = dt.astimezone(datetime.timezone.utc)
    return _format_date_time(dt)


def _render_period(value: Value) -> str:
    start, end = value.data
    if isinstance(end, datetime.timedelta):
        return "%s/%s" % (_period_date_time(start), _format_duration(end))
    return "%s/%s" % (_period_date_time(start), _period_date_time(end))


def _recur_part(part: Any) -> str:
    if isinstance(part, Value):
        return part.to_ical()
    if isinstance(part, (list, tuple)):
        return ",".join(_recur_part(x) for x in part)
    if isinstance(part, (datetime.datetime, datetime.date, int)) and not isinstance(
        part, bool
    ):
        return to_value(part).to_ical()
    return str(part)


def _render_recur(value: Value) -> str:
    return ";".join(
        "%s=%s" % (name, _recur_part(part)) for name, part in value.data
    )


def _render_list(value: Value) -> str:
    return value.separator.join(x.to_ical() for x in value.data)


_RENDERERS: Dict[ValueType, Callable[[Value], str]] = {
    ValueType.BINARY: _render_binary,
    ValueType.BOOLEAN: _render_boolean,
    ValueType.CAL_ADDRESS: _render_verbatim,
    ValueType.DATE: _render_date,
    ValueType.DATE_TIME: _render_date_time,
    ValueType.DURATION: _render_duration,
    ValueType.FLOAT: _render_float,
    ValueType.INTEGER: _render_integer,
    ValueType.PERIOD: _render_period,
    ValueType.RECUR: _render_recur,
    ValueType.TEXT: _render_text,
    ValueType.TIME: _render_time,
    ValueType.URI: _render_verbatim,
    ValueType.UTC_OFFSET: _render_utc_offset,
    ValueType.GEO: _render_geo,
    ValueType.LIST: _render_list,
    ValueType.RAW: _render_verbatim,
}


## Constructors


def text(value: Union[str, bytes]) -> Value:
    return Value(ValueType.TEXT, to_unicode(value))


def raw(value: Union[str, bytes]) -> Value:
    """Already formatted content, written out exactly as given."""
    return Value(ValueType.RAW, to_unicode(value))


def integer(value: int) -> Value:
    return Value(ValueType.INTEGER, int(value))


def float_(value: float) -> Value:
    return Value(ValueType.FLOAT, float(value))


def boolean(value: bool) -> Value:
    return Value(ValueType.BOOLEAN, bool(value))


def date(value: datetime.date) -> Value:
    return Value(ValueType.DATE, value)


def date_time(value: datetime.datetime) -> Value:
    return Value(ValueType.DATE_TIME, value)


def time(value: datetime.time) -> Value:
    return Value(ValueType.TIME, value)


def duration(value: datetime.timedelta) -> Value:
    return Value(ValueType.DURATION, value)


def utc_offset(value: datetime.timedelta) -> Value:
    return Value(ValueType.UTC_OFFSET, value)


def period(
    start: datetime.datetime, end: Union[datetime.datetime, datetime.timedelta]
) -> Value:
    return Value(ValueType.PERIOD, (start, end))


def recur(*parts: Tuple[str, Any], **rule: Any) -> Value:
    """
    A recurrence rule.  Rule parts are kept in the order given, keyword
    names are upper-cased with underscores removed::

        recur(freq="WEEKLY", count=10, by_day=["MO", "WE"])
        ## FREQ=WEEKLY;COUNT=10;BYDAY=MO,WE

    Positional ``(name, value)`` pairs go first, for names that are not
    valid python identifiers (``X-NAME``).
    """
    items = list(parts)
    for name, part in rule.items():
        items.append((name.replace("_", "").upper(), part))
    return Value(ValueType.RECUR, tuple(items))


def binary(value: bytes) -> Value:
    return Value(ValueType.BINARY, bytes(value))


def uri(value: str) -> Value:
    return Value(ValueType.URI, value)


def cal_address(value: str) -> Value:
    return Value(ValueType.CAL_ADDRESS, value)


def geo(latitude: float, longitude: float) -> Value:
    return Value(ValueType.GEO, (float(latitude), float(longitude)))


def value_list(items: Iterable[Any], separator: str = ",") -> Value:
    """A list value; elements that are not Values are coerced with :func:`to_value`."""
    return Value(ValueType.LIST, tuple(to_value(x) for x in items), separator)


def text_list(items: Iterable[Union[str, bytes]], separator: str = ",") -> Value:
    """Comma separated text, every element escaped on its own (CATEGORIES, RESOURCES)."""
    return Value(ValueType.LIST, tuple(text(x) for x in items), separator)


def to_value(obj: Any) -> Value:
    """
    Coerces native python objects into Values.  A ``str`` is taken as
    already formatted content; wrap it in :func:`text` if it needs
    escaping.
    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return raw("")
    ## bool is a subclass of int
    if isinstance(obj, bool):
        return boolean(obj)
    if isinstance(obj, int):
        return integer(obj)
    if isinstance(obj, float):
        return float_(obj)
    ## datetime is a subclass of date
    if isinstance(obj, datetime.datetime):
        return date_time(obj)
    if isinstance(obj, datetime.date):
        return date(obj)
    if isinstance(obj, datetime.time):
        return time(obj)
    if isinstance(obj, datetime.timedelta):
        return duration(obj)
    if isinstance(obj, (bytes, bytearray)):
        return binary(obj)
    if isinstance(obj, str):
        return raw(obj)
    if isinstance(obj, (list, tuple)):
        return value_list(obj)
    return raw(str(obj))


## Parameter values (RFC 5545 section 3.2, RFC 6868)

_PARAM_ENCODING = {"^": "^^", "\n": "^n", '"': "^'"}
_PARAM_QUOTE_CHARS = (":", ";", ",")


def param_value(value: Any) -> str:
    """
    Formats one parameter value.  Newlines, carets and double quotes are
    encoded as in RFC 6868, values containing ``:``, ``;`` or ``,`` are
    quoted.
    """
    if value is None:
        value = ""
    elif isinstance(value, Value):
        value = value.data if value.kind is ValueType.TEXT else value.to_ical()
    elif isinstance(value, bool):
        value = "TRUE" if value else "FALSE"
    else:
        value = to_unicode(value)
        if not isinstance(value, str):
            value = str(value)
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    value = "".join(_PARAM_ENCODING.get(char, char) for char in value)
    if any(char in value for char in _PARAM_QUOTE_CHARS):
        return '"%s"' % value
    return value


def param_values(values: Sequence[Any]) -> str:
    return ",".join(param_value(x) for x in values)
