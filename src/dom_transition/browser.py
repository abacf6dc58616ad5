"""
Browser Capability

The contract a browser automation backend must satisfy for transitions to be
replayed against it. Element lookup and event dispatch live entirely in the
backend; a transition only asks it to locate its element and fire its event.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .transition import Transition


class Browser(ABC):
    """Abstract browser capability consumed by ``Transition.replay``.

    Subclassing is optional: any object exposing ``locate_element`` and
    ``fire_event`` with these signatures can be passed to ``replay``.
    """

    @abstractmethod
    def locate_element(self, identifier: str) -> Any:
        """Resolve a stored element identifier to a live element handle.

        Args:
            identifier: Element identifier recorded on the transition

        Returns:
            Backend-specific element handle

        Raises:
            Any backend error if the element no longer exists.
        """

    @abstractmethod
    def fire_event(
        self,
        element: Any,
        event: str,
        options: dict[str, Any],
    ) -> Transition | None:
        """Dispatch ``event`` on ``element``.

        Args:
            element: Handle returned by ``locate_element``
            event: Event name, e.g. "click"
            options: Extra parameters recorded with the transition

        Returns:
            The transition produced by the dispatch, or None if there was none
        """
