"""DOM transition recording - replayable records of DOM events.

This package provides the unit of replay memory for browser-driven crawling:
- Transition lifecycle (unstarted -> running -> completed) with timing
- Replay eligibility and depth accounting per event
- Timing-independent equality for de-duplicating replay logs
- A Browser capability contract for replaying against a live page

Lifecycle events are logged with structlog at debug level. Call
``dom_transition.utils.configure_logging()`` or
``dom_transition.config.configure_logging_from_settings()`` at startup,
otherwise structlog's defaults print them to stdout.
"""

from .browser import Browser
from .errors import (
    AlreadyCompletedError,
    AlreadyRunningError,
    InvalidElementError,
    NotRunningError,
    TransitionError,
    TransitionErrorKind,
)
from .transition import (
    NON_REPLAYABLE,
    ZERO_DEPTH,
    DOMEvent,
    Transition,
    TransitionState,
)

__all__ = [
    # Transition
    "Transition",
    "TransitionState",
    "DOMEvent",
    "NON_REPLAYABLE",
    "ZERO_DEPTH",
    # Errors
    "TransitionError",
    "TransitionErrorKind",
    "AlreadyCompletedError",
    "AlreadyRunningError",
    "NotRunningError",
    "InvalidElementError",
    # Browser
    "Browser",
]
