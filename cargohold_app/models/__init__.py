"""
Domain models for the cargohold app.
"""

from cargohold_app.models.item import (
    Item,
    TrackingNumberGenerator,
    TrackingNumbersExhaustedError,
    default_tracking_numbers,
)

__all__ = [
    "Item",
    "TrackingNumberGenerator",
    "TrackingNumbersExhaustedError",
    "default_tracking_numbers",
]
