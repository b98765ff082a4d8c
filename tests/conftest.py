"""
Shared pytest fixtures for Niu Niu scorer tests.

Provides a helper for building hands from space-separated rank labels.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")  # must precede any pyplot import

import pytest

from niuniu.engine.deck import create_deck


def hand(labels: str) -> tuple[str, ...]:
    """Build a hand tuple from a space-separated string of rank labels.

    Examples:
        >>> hand('10 10 10 3 2')
        ('10', '10', '10', '3', '2')
    """
    return tuple(labels.split())


@pytest.fixture
def fresh_deck():
    """Return a full 52-card deck."""
    return create_deck()
