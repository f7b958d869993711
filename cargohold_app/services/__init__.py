"""
Cargo module service layer.
"""

from cargohold_app.services.cargo_module import (
    CargoModule,
    CargoModuleError,
    DuplicateTrackingError,
)

__all__ = [
    "CargoModule",
    "CargoModuleError",
    "DuplicateTrackingError",
]
