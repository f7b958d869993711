"""
Simple text-based manifest for a cargo module.
"""

from __future__ import annotations

import math

from cargohold_app.services.cargo_module import CargoModule


def build_manifest_text(module: CargoModule, title: str = "") -> str:
    lines: list[str] = []
    if title:
        lines.append(f"Manifest: {title}")
    lines.append(f"Capacity: {module.max_weight}")
    lines.append(f"Items: {module.item_count}")
    lines.append(f"Total weight: {module.total_weight}")
    lines.append(f"Overweight: {'YES' if module.is_overweight else 'no'}")
    average = module.average_weight()
    lines.append(f"Average weight: {'n/a' if math.isnan(average) else f'{average:.2f}'}")
    items = sorted(module, key=lambda item: item.tracking)
    if items:
        lines.append("")
        for item in items:
            lines.append(f"#{item.tracking}  {item.name}  {item.weight}")
    return "\n".join(lines)
