"""
DOM Transition

Records a single DOM event applied to a page element during crawling, so the
page state it led to can be reproduced later by replaying the same sequence of
transitions against a fresh browser.

A transition moves through three states:

    unstarted --start()--> running --complete()--> completed

Timing is tracked from ``start`` to ``complete`` and reported as ``elapsed``.
Identity (equality and hashing) covers the element, event and options only, so
a replayed transition equals the recorded one however long either took.
"""

from __future__ import annotations

import copy
import sys
import time
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Optional

from .errors import (
    AlreadyCompletedError,
    AlreadyRunningError,
    InvalidElementError,
    NotRunningError,
    TransitionError,
)
from .utils.logging import get_logger

logger = get_logger(__name__)


class DOMEvent(str, Enum):
    """Common DOM event names. Any other event name is accepted as a string."""
    CLICK = "click"
    DBLCLICK = "dblclick"
    MOUSEDOWN = "mousedown"
    MOUSEUP = "mouseup"
    MOUSEOVER = "mouseover"
    MOUSEOUT = "mouseout"
    FOCUS = "focus"
    BLUR = "blur"
    CHANGE = "change"
    INPUT = "input"
    KEYDOWN = "keydown"
    KEYUP = "keyup"
    KEYPRESS = "keypress"
    SELECT = "select"
    SUBMIT = "submit"
    LOAD = "load"
    REQUEST = "request"


class TransitionState(str, Enum):
    """Lifecycle state of a transition."""
    UNSTARTED = "unstarted"
    RUNNING = "running"
    COMPLETED = "completed"


# Events reached as a side effect of navigation; they cannot be re-fired.
NON_REPLAYABLE = frozenset({DOMEvent.REQUEST.value, DOMEvent.LOAD.value})

# Events without a DOM depth.
ZERO_DEPTH = frozenset({DOMEvent.REQUEST.value})


def normalize_event(event: Any) -> str:
    """Convert an event name to its canonical interned string form.

    Raises:
        InvalidElementError: If the event is missing or empty
    """
    if isinstance(event, Enum):
        event = event.value
    if event is None or event == "":
        raise InvalidElementError("Event must be a non-empty name.")
    return sys.intern(str(event))


def normalize_element(element: Any) -> str:
    """Convert an element identifier to its canonical interned string form.

    Raises:
        InvalidElementError: If the identifier is not a non-empty string
    """
    if isinstance(element, Enum):
        element = element.value
    if not isinstance(element, str) or not element:
        raise InvalidElementError(
            f"Element must be a non-empty string identifier, got {type(element).__name__}."
        )
    return sys.intern(str(element))


def _freeze(value: Any) -> Any:
    """Recursively convert option values into hashable equivalents.

    Equal values must freeze to equal results, so unhashable leaves are
    reduced to their type name only.
    """
    if isinstance(value, Mapping):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    try:
        hash(value)
    except TypeError:
        return type(value).__qualname__
    return value


class Transition:
    """A single DOM event applied to an element, with lifecycle and timing.

    Usage:
        # Explicit lifecycle
        transition = Transition().start({"#submit-btn": "click"}, {"value": "x"})
        browser.fire_event(...)
        transition.complete()

        # Start on construction, complete after running the work
        transition = Transition({"#submit-btn": "click"}, work=lambda: page.click("#submit-btn"))

    Attributes:
        options: Extra parameters passed through to the browser on replay
    """

    def __init__(
        self,
        transition: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        work: Optional[Callable[[], Any]] = None,
    ):
        """Create a transition, starting it if ``transition`` is given.

        Args:
            transition: ``{element: event}`` mapping, forwarded to ``start``
            options: Extra options, forwarded to ``start``
            work: Callable forwarded to ``start``

        Raises:
            InvalidElementError: When the element is not a valid identifier
        """
        self._element: Optional[str] = None
        self._event: Optional[str] = None
        self._elapsed: Optional[float] = None
        self._started_at: Optional[float] = None
        self.options: dict[str, Any] = {}

        if transition is None:
            return

        self.start(transition, options, work)

    @property
    def element(self) -> Optional[str]:
        """Identifier of the HTML element which received the event."""
        return self._element

    @property
    def event(self) -> Optional[str]:
        """Event triggered on the element."""
        return self._event

    @event.setter
    def event(self, event: Any) -> None:
        self._ensure_unstarted("set_event")
        try:
            self._event = normalize_event(event)
        except InvalidElementError as e:
            raise self._rejected(e, "set_event") from None

    @property
    def elapsed(self) -> Optional[float]:
        """Seconds it took to apply the event, set once completed."""
        return self._elapsed

    @property
    def state(self) -> TransitionState:
        if self.completed():
            return TransitionState.COMPLETED
        if self.running():
            return TransitionState.RUNNING
        return TransitionState.UNSTARTED

    def start(
        self,
        transition: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
        work: Optional[Callable[[], Any]] = None,
    ) -> "Transition":
        """Mark the transition as running and start its timer.

        Args:
            transition: Single-entry ``{element: event}`` mapping
            options: Extra options to associate with this transition
            work: If given, it is called and the transition is then
                completed automatically

        Returns:
            The transition itself

        Raises:
            AlreadyCompletedError: When the transition has completed
            AlreadyRunningError: When the transition is already running
            InvalidElementError: When the element is not a valid identifier
        """
        self._ensure_unstarted("start")

        if not isinstance(transition, Mapping) or len(transition) != 1:
            raise self._rejected(
                InvalidElementError("Transition must be a single {element: event} mapping."),
                "start",
            )
        ((element, event),) = transition.items()

        try:
            element = normalize_element(element)
            event = normalize_event(event)
        except InvalidElementError as e:
            raise self._rejected(e, "start") from None

        self._element = element
        self._event = event
        self.options = dict(options) if options else {}
        self._started_at = time.perf_counter()

        logger.debug("Transition started", element=self._element, dom_event=self._event)

        if work is None:
            return self

        work()
        return self.complete()

    def complete(self) -> "Transition":
        """Mark the transition as finished and record ``elapsed``.

        Returns:
            The transition itself

        Raises:
            AlreadyCompletedError: When the transition has already completed
            NotRunningError: When the transition is not running
        """
        if self.completed():
            raise self._rejected(AlreadyCompletedError(), "complete")
        if not self.running():
            raise self._rejected(NotRunningError(), "complete")

        self._elapsed = max(0.0, time.perf_counter() - self._started_at)
        self._started_at = None

        logger.debug(
            "Transition completed",
            element=self._element,
            dom_event=self._event,
            elapsed=self._elapsed,
        )
        return self

    def running(self) -> bool:
        return self._started_at is not None

    def completed(self) -> bool:
        return self._elapsed is not None

    def depth(self) -> int:
        """Replay depth: 0 for implicit page requests, 1 for everything else."""
        return 0 if self._event in ZERO_DEPTH else 1

    def replayable(self) -> bool:
        """Whether the event can be re-fired on its own, see ``NON_REPLAYABLE``."""
        return self._event not in NON_REPLAYABLE

    def replay(self, browser) -> Optional["Transition"]:
        """Re-fire this transition's event using ``browser``.

        Args:
            browser: Object providing ``locate_element`` and ``fire_event``
                (see ``dom_transition.browser.Browser``)

        Returns:
            Whatever transition the browser produced, or None when this
            transition is not replayable

        Raises:
            NotRunningError: When the transition was never started
        """
        if self._element is None:
            raise self._rejected(NotRunningError("Transition has not been started."), "replay")

        if not self.replayable():
            logger.debug("Skipping non-replayable transition", element=self._element, dom_event=self._event)
            return None

        logger.debug("Replaying transition", element=self._element, dom_event=self._event)
        handle = browser.locate_element(self._element)
        return browser.fire_event(handle, self._event, dict(self.options))

    def identity(self) -> tuple:
        """Fields that define equality: element, event and options."""
        return (self._element, self._event, self.options)

    def to_structured(self) -> dict[str, Any]:
        return {
            "element": self._element,
            "event": self._event,
            "options": copy.deepcopy(self.options),
            "elapsed": self._elapsed,
        }

    to_dict = to_structured

    def duplicate(self) -> "Transition":
        """Deep copy sharing no mutable state with this transition."""
        return copy.deepcopy(self)

    def __copy__(self) -> "Transition":
        return self.duplicate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self.identity() == other.identity()

    def __hash__(self) -> int:
        return hash((self._element, self._event, _freeze(self.options)))

    def __str__(self) -> str:
        return f"'{self._event}' on: {self._element}"

    def __repr__(self) -> str:
        return (
            f"Transition(element={self._element!r}, event={self._event!r}, "
            f"state={self.state.value})"
        )

    def _ensure_unstarted(self, operation: str) -> None:
        if self.completed():
            raise self._rejected(AlreadyCompletedError(), operation)
        if self.running():
            raise self._rejected(AlreadyRunningError(), operation)

    def _rejected(self, error: TransitionError, operation: str) -> TransitionError:
        logger.warning(
            "Transition operation rejected",
            operation=operation,
            kind=error.kind.value,
            element=self._element,
            dom_event=self._event,
            error=str(error),
        )
        return error
