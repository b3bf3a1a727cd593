#!/usr/bin/env python
"""
Property parameters from RFC 5545 section 3.2 and RFC 7986 section 6.

IANA and ``X-`` parameters are created with
:class:`icalwriter.components.Parameter` directly.  Where the RFC
defines a default value it is the default of the constructor, the other
defined values are available as class attributes::

    PartStat()                     ## PARTSTAT=NEEDS-ACTION
    PartStat(PartStat.ACCEPTED)    ## PARTSTAT=ACCEPTED
"""
from typing import Any
from typing import ClassVar

from icalwriter.components import Parameter


class ValuedParameter(Parameter):
    default: ClassVar[Any] = None

    def __init__(self, value: Any = None) -> None:
        if value is None:
            value = self.default
        super().__init__(value=value)


class AltRep(ValuedParameter):
    key = "ALTREP"


class CN(ValuedParameter):
    key = "CN"


class CUType(ValuedParameter):
    key = "CUTYPE"
    INDIVIDUAL = "INDIVIDUAL"
    GROUP = "GROUP"
    RESOURCE = "RESOURCE"
    ROOM = "ROOM"
    UNKNOWN = "UNKNOWN"
    default = INDIVIDUAL


class DelegatedFrom(ValuedParameter):
    key = "DELEGATED-FROM"


class DelegatedTo(ValuedParameter):
    key = "DELEGATED-TO"


class Dir(ValuedParameter):
    key = "DIR"


class Encoding(ValuedParameter):
    key = "ENCODING"
    BIT8 = "8BIT"
    BASE64 = "BASE64"
    default = BIT8


class FmtType(ValuedParameter):
    key = "FMTTYPE"


class FBType(ValuedParameter):
    key = "FBTYPE"
    FREE = "FREE"
    BUSY = "BUSY"
    BUSY_UNAVAILABLE = "BUSY-UNAVAILABLE"
    BUSY_TENTATIVE = "BUSY-TENTATIVE"
    default = BUSY


class Language(ValuedParameter):
    key = "LANGUAGE"


class Member(ValuedParameter):
    key = "MEMBER"


class PartStat(ValuedParameter):
    key = "PARTSTAT"
    NEEDS_ACTION = "NEEDS-ACTION"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    TENTATIVE = "TENTATIVE"
    DELEGATED = "DELEGATED"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"
    default = NEEDS_ACTION


class Range(ValuedParameter):
    key = "RANGE"
    THISANDFUTURE = "THISANDFUTURE"
    default = THISANDFUTURE


class Related(ValuedParameter):
    key = "RELATED"
    START = "START"
    END = "END"
    default = START


class RelType(ValuedParameter):
    key = "RELTYPE"
    PARENT = "PARENT"
    CHILD = "CHILD"
    SIBLING = "SIBLING"
    default = PARENT


class Role(ValuedParameter):
    key = "ROLE"
    CHAIR = "CHAIR"
    REQ_PARTICIPANT = "REQ-PARTICIPANT"
    OPT_PARTICIPANT = "OPT-PARTICIPANT"
    NON_PARTICIPANT = "NON-PARTICIPANT"
    default = REQ_PARTICIPANT


class RSVP(ValuedParameter):
    """RSVP=TRUE / RSVP=FALSE, takes a python bool."""

    key = "RSVP"
    default = False


class SentBy(ValuedParameter):
    key = "SENT-BY"


class TzIDParam(ValuedParameter):
    key = "TZID"


class ValueParam(ValuedParameter):
    """
    The VALUE parameter.  Accepts a :class:`icalwriter.values.ValueType`
    or its name.
    """

    key = "VALUE"

    def __init__(self, value: Any = None) -> None:
        super().__init__(getattr(value, "value", value))


## RFC 7986


class Display(ValuedParameter):
    key = "DISPLAY"
    BADGE = "BADGE"
    GRAPHIC = "GRAPHIC"
    FULLSIZE = "FULLSIZE"
    THUMBNAIL = "THUMBNAIL"
    default = BADGE


class Email(ValuedParameter):
    key = "EMAIL"


class Feature(ValuedParameter):
    key = "FEATURE"
    AUDIO = "AUDIO"
    CHAT = "CHAT"
    FEED = "FEED"
    MODERATOR = "MODERATOR"
    PHONE = "PHONE"
    SCREEN = "SCREEN"
    VIDEO = "VIDEO"


class Label(ValuedParameter):
    key = "LABEL"
