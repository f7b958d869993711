"""
Item model and the tracking numbers that identify items.

Every item receives a tracking number when it is created. Numbers come from a
``TrackingNumberGenerator``; unless another generator is passed in, all items
share the process-wide generator returned by ``default_tracking_numbers()``,
which starts at 101 and is never reset.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from cargohold_app.config.limits import FIRST_TRACKING_NUMBER, MAX_TRACKING_NUMBER


@dataclass(slots=True)
class TrackingNumbersExhaustedError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class TrackingNumberGenerator:
    """Issues sequential tracking numbers."""

    def __init__(self, start: int = FIRST_TRACKING_NUMBER) -> None:
        self._next = start
        self._lock = threading.Lock()

    def issue(self) -> int:
        """Return the next tracking number and advance the counter."""
        with self._lock:
            tracking = self._next
            if tracking > MAX_TRACKING_NUMBER:
                raise TrackingNumbersExhaustedError(
                    f"Tracking numbers exhausted after {MAX_TRACKING_NUMBER}."
                )
            self._next = tracking + 1
            return tracking

    def peek(self) -> int:
        with self._lock:
            return self._next


_DEFAULT_TRACKING_NUMBERS = TrackingNumberGenerator()


def default_tracking_numbers() -> TrackingNumberGenerator:
    """Process-wide generator used by ``Item(name, weight)``."""
    return _DEFAULT_TRACKING_NUMBERS


def _issue_default() -> int:
    return _DEFAULT_TRACKING_NUMBERS.issue()


@dataclass(frozen=True, slots=True)
class Item:
    """An item for transport. Items are immutable."""

    name: str
    weight: int
    tracking: int = field(init=False, default_factory=_issue_default)

    @classmethod
    def create(
        cls,
        name: str,
        weight: int,
        tracking_numbers: TrackingNumberGenerator | None = None,
    ) -> "Item":
        """Create an item numbered by ``tracking_numbers`` (default generator if None)."""
        if tracking_numbers is None:
            return cls(name, weight)
        # Bypass __init__ so the default generator is not advanced
        item = object.__new__(cls)
        object.__setattr__(item, "name", name)
        object.__setattr__(item, "weight", weight)
        object.__setattr__(item, "tracking", tracking_numbers.issue())
        return item
