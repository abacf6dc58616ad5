"""Transition error taxonomy.

Every error is a precondition violation raised by a :class:`Transition`
operation. The set of kinds is closed: handlers may match on
``TransitionError.kind`` exhaustively instead of on the class hierarchy.
"""

from enum import Enum


class TransitionErrorKind(str, Enum):
    """Closed set of transition precondition violations."""
    ALREADY_COMPLETED = "already_completed"
    ALREADY_RUNNING = "already_running"
    NOT_RUNNING = "not_running"
    INVALID_ELEMENT = "invalid_element"


class TransitionError(Exception):
    """Base exception for transition errors."""

    kind: TransitionErrorKind
    default_message = "Invalid transition operation."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class AlreadyCompletedError(TransitionError):
    """Operation is not applicable to a completed transition."""

    kind = TransitionErrorKind.ALREADY_COMPLETED
    default_message = "Transition has completed."


class AlreadyRunningError(TransitionError):
    """Transition was started while already running."""

    kind = TransitionErrorKind.ALREADY_RUNNING
    default_message = "Transition is already running."


class NotRunningError(TransitionError):
    """Transition was completed without having been started."""

    kind = TransitionErrorKind.NOT_RUNNING
    default_message = "Transition is not running."


class InvalidElementError(TransitionError):
    """Element identifier is not a non-empty string."""

    kind = TransitionErrorKind.INVALID_ELEMENT
    default_message = "Element must be a non-empty string identifier."
