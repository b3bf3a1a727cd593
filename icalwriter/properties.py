#!/usr/bin/env python
"""
Properties from RFC 5545 section 3.7/3.8 and RFC 7986 section 5.

These are thin wrappers around :class:`icalwriter.components.Property`:
each class fixes the key and the value type, and adds the parameters the
value type requires (``VALUE=DATE`` for dates, ``TZID`` for date-times
in a named time zone, ``ENCODING=BASE64`` for inline binaries).  IANA
and ``X-`` properties are created with ``Property`` directly.

Values that are already :class:`icalwriter.values.Value` objects are
used as they are, a plain ``str`` given to a non-text property is taken
as already formatted.
"""
import datetime
from typing import Any
from typing import Callable
from typing import ClassVar
from typing import Iterable
from typing import List
from typing import Optional

from icalwriter import values
from icalwriter.components import Parameter
from icalwriter.components import Property
from icalwriter.parameters import Encoding
from icalwriter.parameters import TzIDParam
from icalwriter.parameters import ValueParam
from icalwriter.values import Value
from icalwriter.values import ValueType


class ValuedProperty(Property):
    default: ClassVar[Any] = None
    convert: ClassVar[Callable[[Any], Value]] = staticmethod(values.to_value)

    def __init__(
        self, value: Any = None, parameters: Optional[Iterable[Parameter]] = None
    ) -> None:
        if value is None:
            value = self.default
        super().__init__(value=self._convert(value))
        self.append(self._implied_parameters(value))
        if parameters is not None:
            self.append(parameters)

    def _convert(self, value: Any) -> Value:
        if isinstance(value, Value):
            return value
        return type(self).convert(value)

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        return []


class TextProperty(ValuedProperty):
    convert = staticmethod(values.text)


class TextListProperty(ValuedProperty):
    """Several comma separated text values, each one escaped on its own."""

    def _convert(self, value: Any) -> Value:
        if isinstance(value, Value):
            return value
        if isinstance(value, (list, tuple)):
            return values.text_list(value)
        return values.text(value)


class UriProperty(ValuedProperty):
    convert = staticmethod(values.uri)


class CalAddressProperty(ValuedProperty):
    convert = staticmethod(values.cal_address)


class IntegerProperty(ValuedProperty):
    convert = staticmethod(values.integer)


class UtcOffsetProperty(ValuedProperty):
    def _convert(self, value: Any) -> Value:
        if isinstance(value, datetime.timedelta):
            return values.utc_offset(value)
        return super()._convert(value)


def _date_time_parameters(value: Any) -> List[Parameter]:
    if isinstance(value, (list, tuple)):
        if not value:
            return []
        value = value[0]
    if isinstance(value, tuple):
        return [ValueParam(ValueType.PERIOD)]
    if isinstance(value, datetime.datetime):
        tzid = values.tzid_of(value)
        if tzid:
            return [TzIDParam(tzid)]
        return []
    if isinstance(value, datetime.date):
        return [ValueParam(ValueType.DATE)]
    return []


class DateTimeProperty(ValuedProperty):
    """
    DATE-TIME by default, DATE when given a ``datetime.date``.  A
    date-time in a named time zone (zoneinfo or pytz) gets a TZID
    parameter and is written in local time; the matching VTIMEZONE is the
    caller's business.
    """

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        return _date_time_parameters(value)


class DateTimeListProperty(DateTimeProperty):
    """
    EXDATE and RDATE, a single value or a list sharing one value type.
    ``(start, end_or_duration)`` tuples in a list are periods, written
    in UTC with ``VALUE=PERIOD``.
    """

    def _convert(self, value: Any) -> Value:
        if isinstance(value, (list, tuple)):
            return values.value_list(
                values.period(*x) if isinstance(x, tuple) else x for x in value
            )
        return super()._convert(value)


class DurationProperty(ValuedProperty):
    pass


## Calendar properties


class CalScale(TextProperty):
    key = "CALSCALE"
    default = "GREGORIAN"


class Method(TextProperty):
    key = "METHOD"


class ProdID(TextProperty):
    key = "PRODID"


class Version(TextProperty):
    key = "VERSION"
    default = "2.0"


## Descriptive component properties


class Attach(ValuedProperty):
    """A URI, or inline data when given ``bytes``."""

    key = "ATTACH"

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        if isinstance(value, (bytes, bytearray)):
            return [Encoding(Encoding.BASE64), ValueParam(ValueType.BINARY)]
        return []

    def _convert(self, value: Any) -> Value:
        if isinstance(value, (bytes, bytearray)):
            return values.binary(value)
        if isinstance(value, str):
            return values.uri(value)
        return super()._convert(value)


class Categories(TextListProperty):
    key = "CATEGORIES"


class Class(TextProperty):
    key = "CLASS"
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    CONFIDENTIAL = "CONFIDENTIAL"
    default = PUBLIC


class Comment(TextProperty):
    key = "COMMENT"


class Description(TextProperty):
    key = "DESCRIPTION"


class Geo(ValuedProperty):
    key = "GEO"

    def __init__(
        self,
        latitude: float,
        longitude: float,
        parameters: Optional[Iterable[Parameter]] = None,
    ) -> None:
        super().__init__(values.geo(latitude, longitude), parameters)


class Location(TextProperty):
    key = "LOCATION"


class PercentComplete(IntegerProperty):
    key = "PERCENT-COMPLETE"


class Priority(IntegerProperty):
    key = "PRIORITY"
    default = 0


class Resources(TextListProperty):
    key = "RESOURCES"


class Status(TextProperty):
    key = "STATUS"
    TENTATIVE = "TENTATIVE"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    NEEDS_ACTION = "NEEDS-ACTION"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"
    DRAFT = "DRAFT"
    FINAL = "FINAL"


class Summary(TextProperty):
    key = "SUMMARY"


## Date and time component properties


class Completed(DateTimeProperty):
    key = "COMPLETED"


class DtEnd(DateTimeProperty):
    key = "DTEND"


class Due(DateTimeProperty):
    key = "DUE"


class DtStart(DateTimeProperty):
    key = "DTSTART"


class Duration(DurationProperty):
    key = "DURATION"


class FreeBusyTime(ValuedProperty):
    """FREEBUSY, one or more ``(start, end_or_duration)`` periods."""

    key = "FREEBUSY"

    def _convert(self, value: Any) -> Value:
        if isinstance(value, Value):
            return value
        if isinstance(value, list):
            return Value(
                ValueType.LIST, tuple(values.period(*x) for x in value)
            )
        if isinstance(value, tuple):
            return values.period(*value)
        return super()._convert(value)


class Transp(TextProperty):
    key = "TRANSP"
    OPAQUE = "OPAQUE"
    TRANSPARENT = "TRANSPARENT"
    default = OPAQUE


## Time zone component properties


class TzID(TextProperty):
    key = "TZID"


class TzName(TextProperty):
    key = "TZNAME"


class TzOffsetFrom(UtcOffsetProperty):
    key = "TZOFFSETFROM"


class TzOffsetTo(UtcOffsetProperty):
    key = "TZOFFSETTO"


class TzURL(UriProperty):
    key = "TZURL"


## Relationship component properties


class Attendee(CalAddressProperty):
    key = "ATTENDEE"


class Contact(TextProperty):
    key = "CONTACT"


class Organizer(CalAddressProperty):
    key = "ORGANIZER"


class RecurrenceID(DateTimeProperty):
    key = "RECURRENCE-ID"


class RelatedTo(TextProperty):
    key = "RELATED-TO"


class URL(UriProperty):
    key = "URL"


class Uid(TextProperty):
    key = "UID"


## Recurrence component properties


class ExDate(DateTimeListProperty):
    key = "EXDATE"


class RDate(DateTimeListProperty):
    key = "RDATE"


class RRule(ValuedProperty):
    """
    Takes either a ready made RECUR value or the rule parts as keyword
    arguments, see :func:`icalwriter.values.recur`::

        RRule(freq="YEARLY", by_month=3, by_day="-1SU")
    """

    key = "RRULE"

    def __init__(
        self,
        value: Any = None,
        parameters: Optional[Iterable[Parameter]] = None,
        **rule: Any,
    ) -> None:
        if value is None:
            value = values.recur(**rule)
        super().__init__(value, parameters)


## Alarm component properties


class Action(TextProperty):
    key = "ACTION"
    AUDIO = "AUDIO"
    DISPLAY = "DISPLAY"
    EMAIL = "EMAIL"


class Repeat(IntegerProperty):
    key = "REPEAT"
    default = 0


class Trigger(ValuedProperty):
    """
    A duration relative to the start (or end) or an absolute UTC
    date-time.  Aware date-times are converted to UTC, naive ones are
    taken to be UTC already.
    """

    key = "TRIGGER"

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        if isinstance(value, datetime.datetime):
            return [ValueParam(ValueType.DATE_TIME)]
        return []

    def _convert(self, value: Any) -> Value:
        if isinstance(value, datetime.datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=datetime.timezone.utc)
            else:
                value = value.astimezone(datetime.timezone.utc)
        return super()._convert(value)


## Change management component properties


class Created(DateTimeProperty):
    key = "CREATED"


class DtStamp(DateTimeProperty):
    key = "DTSTAMP"


class LastModified(DateTimeProperty):
    key = "LAST-MODIFIED"


class Sequence(IntegerProperty):
    key = "SEQUENCE"
    default = 0


## Miscellaneous component properties


class RequestStatus(ValuedProperty):
    """REQUEST-STATUS, a status code, a description and optional extra data."""

    key = "REQUEST-STATUS"

    def __init__(
        self,
        code: str,
        description: str,
        extdata: Optional[str] = None,
        parameters: Optional[Iterable[Parameter]] = None,
    ) -> None:
        parts = [values.raw(code), values.text(description)]
        if extdata is not None:
            parts.append(values.text(extdata))
        super().__init__(Value(ValueType.LIST, tuple(parts), ";"), parameters)


## RFC 7986


class Name(TextProperty):
    key = "NAME"


class RefreshInterval(DurationProperty):
    key = "REFRESH-INTERVAL"

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        return [ValueParam(ValueType.DURATION)]


class Source(UriProperty):
    key = "SOURCE"


class Color(TextProperty):
    key = "COLOR"


class Image(Attach):
    key = "IMAGE"

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        if isinstance(value, (bytes, bytearray)):
            return super()._implied_parameters(value)
        return [ValueParam(ValueType.URI)]


class Conference(UriProperty):
    key = "CONFERENCE"

    def _implied_parameters(self, value: Any) -> List[Parameter]:
        return [ValueParam(ValueType.URI)]
