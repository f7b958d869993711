"""
Cargo module: a weight-limited container of tracked items.

Items are stored by tracking number. Count, total weight and overweight
status are derived from the stored items on every call, so they always
reflect the current contents after adds and removes.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Set

from cargohold_app.models import Item

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class CargoModuleError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True)
class DuplicateTrackingError(CargoModuleError):
    tracking: int = 0


def _heaviest(items: Iterable[Item]) -> Optional[Item]:
    heaviest: Optional[Item] = None
    for item in items:
        if heaviest is None or item.weight > heaviest.weight:
            heaviest = item
    return heaviest


def _average_weight(items: Iterable[Item]) -> float:
    count = 0
    total = 0
    for item in items:
        count += 1
        total += item.weight
    if count == 0:
        return math.nan
    return total / count


class CargoModule:
    """A cargo module holding items, with a fixed weight capacity."""

    def __init__(self, max_weight: int) -> None:
        self._max_weight = max_weight
        self._items: Dict[int, Item] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    def __contains__(self, tracking: object) -> bool:
        return tracking in self._items

    def __repr__(self) -> str:
        return f"CargoModule(max_weight={self._max_weight}, item_count={len(self._items)})"

    @property
    def max_weight(self) -> int:
        return self._max_weight

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def total_weight(self) -> int:
        return sum(item.weight for item in self._items.values())

    @property
    def is_overweight(self) -> bool:
        """True iff the stored items weigh more than the capacity."""
        return self.total_weight > self._max_weight

    def add(self, item: Item) -> None:
        """
        Store an item.

        Adding an item that is already stored is a no-op. Adding a different
        item under a tracking number that is already stored raises
        DuplicateTrackingError and leaves the module unchanged.
        """
        stored = self._items.get(item.tracking)
        if stored is not None:
            if stored == item:
                return
            _LOG.warning("Rejected item %r: tracking #%d already stored", item.name, item.tracking)
            raise DuplicateTrackingError(
                f"An item with tracking number {item.tracking} is already stored.",
                tracking=item.tracking,
            )
        self._items[item.tracking] = item
        _LOG.debug("Added item #%d (%s, %d)", item.tracking, item.name, item.weight)

    def contains(self, tracking: int) -> bool:
        return tracking in self._items

    def remove(self, tracking: int) -> bool:
        """Remove the item with the given tracking number. Returns True if one was removed."""
        item = self._items.pop(tracking, None)
        if item is None:
            return False
        _LOG.debug("Removed item #%d (%s)", tracking, item.name)
        return True

    def items_by_name(self, name: str) -> Set[Item]:
        return {item for item in self._items.values() if item.name == name}

    def heaviest(self, name: str | None = None) -> Optional[Item]:
        """
        Heaviest stored item, optionally restricted to items called ``name``.

        Ties go to the item stored first. Returns None when nothing matches.
        """
        if name is None:
            return _heaviest(self._items.values())
        return _heaviest(item for item in self._items.values() if item.name == name)

    def average_weight(self, name: str | None = None) -> float:
        """Mean weight of the stored items (or of those called ``name``); NaN if none."""
        if name is None:
            return _average_weight(self._items.values())
        return _average_weight(item for item in self._items.values() if item.name == name)

    def items_by_tracking_numbers(self, tracking: Iterable[int] | None) -> Optional[Set[Item]]:
        if tracking is None:
            return None
        return {self._items[t] for t in set(tracking) if t in self._items}

    def items_by_names(self, names: Iterable[str] | None) -> Optional[Dict[str, Set[Item]]]:
        """Map each requested name to its stored items. Unmatched names map to an empty set."""
        if names is None:
            return None
        return {name: self.items_by_name(name) for name in names}
