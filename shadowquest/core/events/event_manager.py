"""
Event bus for the game rules.

Managers publish events instead of printing; the Game drains the queue
after every player action so log lines reach the console in the order
they happened.
"""

from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Queued publisher-subscriber bus, delivered in publication order."""

    def __init__(self, enable_debug_logging: bool = False):
        self.enable_debug_logging = enable_debug_logging
        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._queue: deque[tuple["GameEvent", str]] = deque()
        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Route bus diagnostics (subscriber errors, traffic) to ``callback``."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Call ``subscriber`` for every delivered event of ``event_type``."""
        self._subscribers[event_type].append(subscriber)
        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to {event_type.name} events")

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue ``event`` until the next process_events call."""
        self._queue.append((event, source or "unknown"))

    def process_events(self) -> int:
        """Deliver queued events, including any published while delivering.

        Returns:
            Number of events delivered
        """
        delivered = 0
        while self._queue:
            event, source = self._queue.popleft()
            self._deliver(event, source)
            delivered += 1
        return delivered

    def _deliver(self, event: "GameEvent", source: str) -> None:
        self._debug_log(
            f"Delivering {event.__class__.__name__} from {source} (turn: {event.turn})"
        )
        for subscriber in list(self._subscribers.get(event.event_type, [])):
            try:
                subscriber(event)
            except Exception as e:
                self._debug_log(
                    f"Error in subscriber {getattr(subscriber, '__name__', 'anonymous')}: {e}"
                )

    def shutdown(self) -> None:
        """Drop all subscribers and pending events."""
        self._subscribers.clear()
        self._queue.clear()
