"""Pytest configuration for path tracer tests.

Provides shared fixtures: a seeded random generator so sampling tests are
repeatable, and a placeholder material for geometry that is never shaded.
"""

import random

import pytest

from pathtracer.materials import Empty


@pytest.fixture
def rng():
    """Seeded generator passed wherever an operation draws random numbers."""
    return random.Random(42)


@pytest.fixture
def material():
    """Material for hit tests that only inspect geometry."""
    return Empty()
