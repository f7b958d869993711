"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cargohold_app.models import Item, TrackingNumberGenerator
from cargohold_app.services import CargoModule


@pytest.fixture
def tracking_numbers():
    """A fresh generator, so tracking numbers start at 101."""
    return TrackingNumberGenerator()


@pytest.fixture
def module():
    """An empty cargo module with capacity 100."""
    return CargoModule(100)


@pytest.fixture
def sample_items(tracking_numbers):
    """Items numbered 101-104."""
    return [
        Item.create("crate", 30, tracking_numbers),
        Item.create("barrel", 45, tracking_numbers),
        Item.create("crate", 10, tracking_numbers),
        Item.create("sack", 5, tracking_numbers),
    ]


@pytest.fixture
def loaded_module(module, sample_items):
    for item in sample_items:
        module.add(item)
    return module
