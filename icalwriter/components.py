#!/usr/bin/env python
"""
The in-memory calendar tree: components own an ordered list of
properties and an ordered list of sub-components, properties own an
ordered list of parameters.

Lists rather than dicts are used all the way down.  RFC 5545 allows
repeating both properties (ATTENDEE, CATEGORIES, ...) and parameter
keys, and the output follows insertion order exactly.  Nothing is
sorted, merged or validated here (see :mod:`icalwriter.validation`).

Custom (IANA or ``X-``) components, properties and parameters are
built by using these classes directly::

    event = Component("VEVENT")
    prop = Property("X-MY-PROP", values.text("hello, world"))
    prop.add(Parameter("X-MY-PARAM", ["a", "b"]))
    event.add_property(prop)
"""
import sys
from typing import Any
from typing import ClassVar
from typing import Iterable
from typing import List
from typing import Optional
from typing import Union

from icalwriter import writer
from icalwriter.values import param_values
from icalwriter.values import to_value
from icalwriter.values import Value

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class Parameter:
    """
    A key with one or more values.  Several values are written comma
    separated (``MEMBER="mailto:a@example.com","mailto:b@example.com"``).
    """

    key: ClassVar[Optional[str]] = None
    values: List[Any]

    def __init__(self, key: Optional[str] = None, value: Any = None) -> None:
        if key is not None:
            self.key = key
        if isinstance(value, (list, tuple)):
            self.values = list(value)
        else:
            self.values = [value]

    def to_ical(self) -> str:
        return "%s=%s" % (self.key, param_values(self.values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self.key == other.key and self.values == other.values

    def __repr__(self) -> str:
        return "%s(%r, %r)" % (self.__class__.__name__, self.key, self.values)


class Property:
    """
    A key, a typed value and zero or more parameters, written as one
    content line.

    Plain python objects given as value are converted with
    :func:`icalwriter.values.to_value`; notably a ``str`` is written
    verbatim, use :func:`icalwriter.values.text` for text that needs
    escaping.
    """

    key: ClassVar[Optional[str]] = None
    value: Value
    parameters: List[Parameter]

    def __init__(
        self,
        key: Optional[str] = None,
        value: Any = None,
        parameters: Optional[Iterable[Parameter]] = None,
    ) -> None:
        if key is not None:
            self.key = key
        self.value = to_value(value)
        self.parameters = []
        if parameters is not None:
            self.append(parameters)

    def add(self, parameter: Parameter) -> Self:
        """Adds a parameter.  Repeated keys are kept, in order."""
        self.parameters.append(parameter)
        return self

    def append(self, parameters: Iterable[Parameter]) -> Self:
        """Adds several parameters at once."""
        self.parameters.extend(parameters)
        return self

    def to_ical(self) -> str:
        """The unfolded content line, without line break."""
        ret = [self.key]
        for parameter in self.parameters:
            ret.append(";")
            ret.append(parameter.to_ical())
        ret.append(":")
        ret.append(self.value.to_ical())
        return "".join(ret)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return (
            self.key == other.key
            and self.value == other.value
            and self.parameters == other.parameters
        )

    def __repr__(self) -> str:
        return "%s(%r, %r, %r)" % (
            self.__class__.__name__,
            self.key,
            self.value,
            self.parameters,
        )


class Component:
    """
    A named calendar component (VCALENDAR, VEVENT, VALARM, ...) holding
    properties and sub-components.
    """

    name: ClassVar[Optional[str]] = None
    properties: List[Property]
    components: List["Component"]

    def __init__(self, name: Optional[str] = None) -> None:
        if name is not None:
            self.name = name
        self.properties = []
        self.components = []

    def add_property(self, property: Property) -> Self:
        """Adds a property.  Some properties may be added several times,
        each occurrence is written as a content line of its own."""
        self.properties.append(property)
        return self

    def add_component(self, component: "Component") -> Self:
        """Adds a sub-component."""
        self.components.append(component)
        return self

    def append(
        self,
        element: Union[Property, "Component", Iterable[Union[Property, "Component"]]],
    ) -> Self:
        if isinstance(element, Property):
            return self.add_property(element)
        if isinstance(element, Component):
            return self.add_component(element)
        for x in element:
            self.append(x)
        return self

    def __add__(
        self,
        other: Union[Property, "Component", Iterable[Union[Property, "Component"]]],
    ) -> Self:
        return self.append(other)

    def write(self, sink) -> None:
        """Serializes the component to a binary sink, see :func:`icalwriter.writer.serialize`."""
        writer.serialize(self, sink)

    def to_ical(self) -> bytes:
        return writer.to_ical(self)

    def __str__(self) -> str:
        return self.to_ical().decode("utf-8")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return (
            self.name == other.name
            and self.properties == other.properties
            and self.components == other.components
        )

    def __repr__(self) -> str:
        return "%s(%r, %d properties, %d components)" % (
            self.__class__.__name__,
            self.name,
            len(self.properties),
            len(self.components),
        )
