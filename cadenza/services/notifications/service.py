"""
Notifications Service - Change events and observer fan-out
Every successful mutation command publishes exactly one event
"""
import logging
from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


# ============================================================================
# EVENTS
# ============================================================================

class ChangeKind(str, Enum):
    COLLECTION_CHANGED = "collection_changed"
    SELECTION_CHANGED = "selection_changed"
    CATEGORIES_CHANGED = "categories_changed"


class ChangeEvent(BaseModel):
    """Published after a command has finished mutating state"""
    kind: ChangeKind
    command: str
    subject_id: Optional[str] = None


Observer = Callable[[ChangeEvent], None]


# ============================================================================
# OBSERVER REGISTRY
# ============================================================================

class ChangeNotifier:
    """
    Registry of observers that are called synchronously after each command
    """

    def __init__(self):
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer

        Args:
            observer: Callable receiving a ChangeEvent

        Returns:
            A function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe():
            self.unsubscribe(observer)

        return unsubscribe

    def unsubscribe(self, observer: Observer) -> bool:
        """
        Remove an observer

        Returns:
            True if the observer was registered, False otherwise
        """
        if observer in self._observers:
            self._observers.remove(observer)
            return True
        return False

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def publish(self, kind: ChangeKind, command: str, subject_id: Optional[str] = None) -> ChangeEvent:
        """
        Deliver one event to every observer

        An observer that raises is logged and skipped; the remaining
        observers still receive the event.

        Args:
            kind: What part of the state changed
            command: Name of the command that caused the change
            subject_id: Optional id of the habit or category involved

        Returns:
            The published event
        """
        event = ChangeEvent(kind=kind, command=command, subject_id=subject_id)
        logger.debug(f"Publishing {event.kind.value} from {command} to {len(self._observers)} observer(s)")

        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception as e:
                logger.error(f"Observer {observer!r} failed handling {event.kind.value}: {e}", exc_info=True)

        return event
