"""
Reporting utilities for cargohold.
"""

from cargohold_app.reports.simple_text_report import build_manifest_text

__all__ = [
    "build_manifest_text",
]
