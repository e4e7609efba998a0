"""Inventory storage with name-based stacking and a bounded entry count."""

from dataclasses import dataclass
from typing import Iterator, Optional

from ...core.data.game_enums import ItemType
from ...core.data.game_info import ITEM_CATALOG
from .player import Player


@dataclass
class Item:
    """A stack of identical items."""
    name: str
    item_type: ItemType
    value: int
    quantity: int = 1

    @classmethod
    def from_catalog(cls, name: str, quantity: int = 1) -> "Item":
        """Create an item stack from the static item catalog."""
        info = ITEM_CATALOG[name]
        return cls(info.name, info.item_type, info.value, quantity)

    @property
    def is_consumable(self) -> bool:
        return self.item_type in (ItemType.HEALTH_POTION, ItemType.MANA_POTION)

    def apply(self, player: Player) -> Optional[int]:
        """Apply this item's effect to ``player``.

        Returns the amount restored, or None when the item has no usable
        effect (equipment). Does not change the quantity.
        """
        if self.item_type == ItemType.HEALTH_POTION:
            before = player.hp
            player.change_hp(self.value)
            return player.hp - before
        if self.item_type == ItemType.MANA_POTION:
            before = player.mp
            player.change_mp(self.value)
            return player.mp - before
        return None


class Inventory:
    """Ordered item stacks, at most ``max_entries`` distinct names."""

    def __init__(self, max_entries: int = 20):
        self.max_entries = max_entries
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.max_entries

    def clear(self) -> None:
        self._items.clear()

    def find(self, name: str) -> Optional[int]:
        """Linear search by exact name. Returns the index or None."""
        for index, item in enumerate(self._items):
            if item.name == name:
                return index
        return None

    def add(self, item: Item) -> bool:
        """Stack onto an existing entry or append a new one.

        Returns False (and leaves the inventory unchanged) if the name is new
        and the inventory is full.
        """
        index = self.find(item.name)
        if index is not None:
            self._items[index].quantity += item.quantity
            return True
        if self.is_full:
            return False
        self._items.append(Item(item.name, item.item_type, item.value, item.quantity))
        return True

    def remove_one(self, index: int) -> None:
        """Consume one unit of the stack at ``index``, dropping empty stacks."""
        item = self._items[index]
        item.quantity -= 1
        if item.quantity <= 0:
            del self._items[index]

    def use(self, index: int, player: Player) -> Optional[int]:
        """Use one item on ``player``.

        Returns the amount restored, or None if the index is out of range or
        the item cannot be used. Only a successful use consumes a unit.
        """
        if not 0 <= index < len(self._items):
            return None
        amount = self._items[index].apply(player)
        if amount is None:
            return None
        self.remove_one(index)
        return amount

    def sort_by_name(self) -> None:
        """Sort stacks alphabetically by name."""
        self._items.sort(key=lambda item: item.name)

    def replace_contents(self, items: list[Item]) -> None:
        """Replace every entry, keeping order. Used when loading a save."""
        if len(items) > self.max_entries:
            raise ValueError(
                f"{len(items)} inventory entries exceed the maximum of {self.max_entries}"
            )
        self._items = list(items)
