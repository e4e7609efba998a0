"""
Inventory management for using and acquiring items during a session.

The :class:`~shadowquest.game.entities.inventory.Inventory` container holds
the data; this manager applies it to the session's player and reports what
happened through the event bus.
"""
from typing import TYPE_CHECKING

from ...core.data.game_enums import ItemType
from ...core.events import ItemAcquired, ItemUsed, LogMessage

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager
    from ..entities.inventory import Item
    from ..session import GameSession


RESOURCE_LABELS = {
    ItemType.HEALTH_POTION: "HP",
    ItemType.MANA_POTION: "MP",
}


class InventoryManager:
    """Uses and adds items on behalf of the player."""

    def __init__(self, event_manager: "EventManager"):
        self.event_manager = event_manager

    def _emit_log(self, session: "GameSession", message: str, level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=session.turn,
                message=message,
                category="INVENTORY",
                level=level,
                source="InventoryManager"
            ),
            source="InventoryManager"
        )

    def use_item(self, session: "GameSession", index: int) -> bool:
        """Use the item at ``index`` (0-based). Returns True if it took effect."""
        inventory = session.inventory
        if not 0 <= index < len(inventory):
            self._emit_log(session, f"No item in slot {index + 1}", level="WARNING")
            return False

        item = inventory[index]
        name, item_type, value = item.name, item.item_type, item.value
        restored = inventory.use(index, session.player)
        if restored is None:
            self._emit_log(session, "You can't use that right now!")
            return False

        self._emit_log(session, f"Used {name}! Restored {value} {RESOURCE_LABELS[item_type]}!")
        self.event_manager.publish(
            ItemUsed(turn=session.turn, item_name=name, amount=restored),
            source="InventoryManager"
        )
        return True

    def acquire(self, session: "GameSession", item: "Item") -> bool:
        """Add ``item`` to the inventory, stacking by name."""
        if not session.inventory.add(item):
            self._emit_log(session, "Inventory full!", level="WARNING")
            return False

        self.event_manager.publish(
            ItemAcquired(turn=session.turn, item_name=item.name, quantity=item.quantity),
            source="InventoryManager"
        )
        return True
