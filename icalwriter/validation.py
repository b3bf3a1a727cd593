#!/usr/bin/env python
"""
Optional sanity checks on a component tree.

The serializer writes whatever it's given.  This module is a separate
pass that can be run before serializing; it only reports, it never
changes the tree or the output.

Checks done:

* component names, property keys and parameter keys are non-empty
  and consist of letters, digits and dashes
* components are nested where RFC 5545 allows them (IANA and ``X-``
  components are accepted anywhere)
* PRIORITY is within 0-9 and PERCENT-COMPLETE within 0-100
* STATUS has one of the values defined for the component
"""
import re
from typing import Dict
from typing import FrozenSet
from typing import List
from typing import Optional

from icalwriter.components import Component
from icalwriter.components import Property
from icalwriter.lib.error import log
from icalwriter.lib.error import ValidationError
from icalwriter.values import ValueType

_NAME_RE = re.compile(r"^[A-Za-z0-9-]+$")

## component name -> components that may be nested inside it
CONTAINMENT: Dict[str, FrozenSet[str]] = {
    "VCALENDAR": frozenset(
        ("VEVENT", "VTODO", "VJOURNAL", "VFREEBUSY", "VTIMEZONE")
    ),
    "VEVENT": frozenset(("VALARM",)),
    "VTODO": frozenset(("VALARM",)),
    "VJOURNAL": frozenset(),
    "VFREEBUSY": frozenset(),
    "VTIMEZONE": frozenset(("STANDARD", "DAYLIGHT")),
    "STANDARD": frozenset(),
    "DAYLIGHT": frozenset(),
    "VALARM": frozenset(),
}

STATUS_VALUES: Dict[str, FrozenSet[str]] = {
    "VEVENT": frozenset(("TENTATIVE", "CONFIRMED", "CANCELLED")),
    "VTODO": frozenset(("NEEDS-ACTION", "COMPLETED", "IN-PROCESS", "CANCELLED")),
    "VJOURNAL": frozenset(("DRAFT", "FINAL", "CANCELLED")),
}

INTEGER_RANGES = {
    "PRIORITY": (0, 9),
    "PERCENT-COMPLETE": (0, 100),
}


def _is_extension(name: str) -> bool:
    return name.upper() not in CONTAINMENT


def _check_name(what: str, name: Optional[str], path: str, issues: List[str]) -> None:
    if not name:
        issues.append(f"{path}: empty {what}")
    elif not _NAME_RE.match(name):
        issues.append(f"{path}: invalid {what} {name!r}")


def _check_property(
    prop: Property, component: Component, path: str, issues: List[str]
) -> None:
    _check_name("property key", prop.key, path, issues)
    for parameter in prop.parameters:
        _check_name("parameter key", parameter.key, f"{path};{prop.key}", issues)

    key = (prop.key or "").upper()
    value = prop.value
    if key in INTEGER_RANGES and value.kind is ValueType.INTEGER:
        low, high = INTEGER_RANGES[key]
        if not low <= value.data <= high:
            issues.append(f"{path}: {key} {value.data} outside {low}-{high}")

    if key == "STATUS":
        allowed = STATUS_VALUES.get((component.name or "").upper())
        if allowed is not None and value.to_ical().upper() not in allowed:
            issues.append(
                f"{path}: STATUS {value.to_ical()!r} not allowed in {component.name}"
            )


def _check_component(component: Component, path: str, issues: List[str]) -> None:
    _check_name("component name", component.name, path, issues)
    for prop in component.properties:
        _check_property(prop, component, path, issues)

    name = (component.name or "").upper()
    allowed = CONTAINMENT.get(name)
    for sub in component.components:
        subpath = f"{path}/{sub.name}"
        if (
            allowed is not None
            and sub.name
            and not _is_extension(sub.name)
            and sub.name.upper() not in allowed
        ):
            issues.append(f"{subpath}: {sub.name} is not allowed inside {component.name}")
        _check_component(sub, subpath, issues)


def validate(component: Component, strict: bool = False) -> List[str]:
    """
    Checks the tree below ``component`` and returns a list of findings,
    empty if everything looks fine.  Each finding is logged as a warning.

    Raises:
        ValidationError: if ``strict`` is set and anything was found
    """
    issues: List[str] = []
    _check_component(component, component.name or "", issues)
    for issue in issues:
        log.warning(f"Deviation from RFC 5545 found: {issue}")
    if strict and issues:
        raise ValidationError(issues)
    return issues
