#!/usr/bin/env python
import logging
import os
from typing import List
from typing import Optional

from icalwriter import __version__

## Environmental variables prepended with "PYTHON_ICALWRITER" are used for debug purposes
## one of DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_ICALWRITER_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("icalwriter")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def assert_(condition: object) -> None:
    try:
        assert condition
    except AssertionError:
        if debugmode == "PRODUCTION":
            log.error(
                "Deviation from expectations found.  %s" % ERR_FRAGMENT, exc_info=True
            )
        else:
            raise


ERR_FRAGMENT: str = "Please consider raising an issue on the icalwriter issue tracker, include this error and the traceback (if any)"


class ICalWriterError(Exception):
    reason: str = "no reason"

    def __init__(self, reason: Optional[str] = None) -> None:
        if reason:
            self.reason = reason
        super().__init__(self.reason)

    def __str__(self) -> str:
        return "%s, reason %s" % (self.__class__.__name__, self.reason)


class SinkError(ICalWriterError):
    """
    The byte sink refused the output (disk full, closed stream, broken
    pipe ...).  The original exception is available as ``__cause__``.
    Anything written before the failure stays on the sink.
    """

    pass


class ValidationError(ICalWriterError):
    """
    Raised by the optional validator in strict mode.  The ``issues``
    attribute holds every finding, not only the first one.
    """

    issues: List[str]

    def __init__(self, issues: List[str]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(self.issues))
