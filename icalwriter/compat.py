#!/usr/bin/env python
"""
Interoperability with the icalendar library.

:func:`from_icalendar` turns an ``icalendar`` component (typically an
``icalendar.Calendar``) into an :mod:`icalwriter.components` tree, so
that data already held in icalendar objects can be written through this
library.  Values are rendered by icalendar itself and taken over
verbatim; parameters are re-encoded by icalwriter.

icalendar groups repeated properties under one key, so properties come
out grouped by key in the order the keys were first added.
"""
from typing import Any
from typing import List

import icalendar

from icalwriter.components import Component
from icalwriter.components import Parameter
from icalwriter.components import Property
from icalwriter.values import raw


def _parameters(value: Any) -> List[Parameter]:
    params = getattr(value, "params", None) or {}
    return [Parameter(key, params[key]) for key in params]


def _property(component: icalendar.Component, key: str, value: Any) -> Property:
    if not hasattr(value, "to_ical"):
        value = component.types_factory.for_property(key)(value)
    return Property(key, raw(value.to_ical()), _parameters(value))


def from_icalendar(component: icalendar.Component) -> Component:
    """Converts an icalendar component, sub-components included."""
    ret = Component(component.name)
    for key, value in component.items():
        if isinstance(value, list):
            for item in value:
                ret.add_property(_property(component, key, item))
        else:
            ret.add_property(_property(component, key, value))
    for subcomponent in component.subcomponents:
        ret.add_component(from_icalendar(subcomponent))
    return ret
