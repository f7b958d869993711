"""
Fixed limits for tracking numbers.
"""

from __future__ import annotations

# First tracking number ever issued in a process
FIRST_TRACKING_NUMBER = 101

# Tracking numbers are signed 64-bit values
MAX_TRACKING_NUMBER = 2**63 - 1
