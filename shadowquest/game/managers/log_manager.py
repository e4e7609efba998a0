"""
Message log for the console.

Game rules publish LogMessage events; this manager files them by category
and level, hands new visible lines to the console once, and can dump the
whole buffer to a file when the session ends in debug mode.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ...core.events import DebugMessage, EventType, LogSaveRequested
from ...core.events import LogMessage as LogEvent

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager


class LogCategory(Enum):
    """Where a message came from."""
    SYSTEM = auto()
    BATTLE = auto()
    MOVEMENT = auto()
    INVENTORY = auto()
    PROGRESSION = auto()
    PERSISTENCE = auto()
    DEBUG = auto()
    ERROR = auto()


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.MOVEMENT: "MOV",
    LogCategory.INVENTORY: "INV",
    LogCategory.PROGRESSION: "PRG",
    LogCategory.PERSISTENCE: "SAV",
    LogCategory.DEBUG: "DBG",
    LogCategory.ERROR: "ERR",
}


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class LogMessage:
    """A single stored log line."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_category: bool = True) -> str:
        if include_category:
            return f"[{CATEGORY_TAGS[self.category]}] {self.text}"
        return self.text


class LogManager:
    """Collects log events and releases the visible ones to the console."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        log_dir: str = "logs",
    ):
        """Initialize the log manager.

        Args:
            event_manager: Bus carrying LogMessage, DebugMessage and LogSaveRequested
            max_messages: Size of the bounded message buffer
            log_dir: Directory used by save_log_to_file
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self._unread: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = LogLevel.INFO
        self.enabled_categories = set(LogCategory) - {LogCategory.DEBUG}
        self.log_dir = log_dir

        event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )
        event_manager.subscribe(
            EventType.DEBUG_MESSAGE,
            self._handle_debug_message_event,
            subscriber_name="LogManager.debug_message"
        )
        event_manager.subscribe(
            EventType.LOG_SAVE_REQUESTED,
            self._handle_log_save_request,
            subscriber_name="LogManager.log_save_request"
        )

    def _handle_log_message_event(self, event: LogEvent) -> None:
        try:
            category = LogCategory[event.category.upper()]
        except KeyError:
            category = LogCategory.SYSTEM
        try:
            level = LogLevel[event.level.upper()]
        except KeyError:
            level = LogLevel.INFO
        self._store(LogMessage(text=event.message, category=category, level=level))

    def _handle_debug_message_event(self, event: DebugMessage) -> None:
        self.debug(f"[{event.source}] {event.message}")

    def _handle_log_save_request(self, event: LogSaveRequested) -> None:
        self.save_log_to_file()

    def _store(self, message: LogMessage) -> None:
        self.messages.append(message)
        if message.category in self.enabled_categories and message.level.value >= self.log_level.value:
            self._unread.append(message)

    def log(
        self,
        text: str,
        category: LogCategory = LogCategory.SYSTEM,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        """Add a message to the log."""
        self._store(LogMessage(text=text, category=category, level=level))

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG, LogLevel.DEBUG)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR, LogLevel.ERROR)

    def pop_unread(self) -> list[LogMessage]:
        """Return visible messages logged since the last call, oldest first."""
        unread = list(self._unread)
        self._unread.clear()
        return unread

    def is_debug_enabled(self) -> bool:
        return LogCategory.DEBUG in self.enabled_categories

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.enabled_categories.discard(LogCategory.DEBUG)
            self.log_level = LogLevel.INFO
        else:
            self.enabled_categories.add(LogCategory.DEBUG)
            self.log_level = LogLevel.DEBUG

    def save_log_to_file(self) -> Optional[str]:
        """Write every buffered message, visible or not, to a timestamped file.

        Returns:
            The written file path, or None if the file could not be written
        """
        now = datetime.now()
        filepath = os.path.join(self.log_dir, f"log_{now.strftime('%Y%m%d_%H%M%S')}.log")
        try:
            os.makedirs(self.log_dir, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Shadow Quest - Game Log\n")
                f.write(f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")
                if not self.messages:
                    f.write("No messages to save.\n")
                for msg in self.messages:
                    stamp = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{stamp}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Game log saved to {filepath}")
        return filepath
