"""Shared fixtures for tweening tests."""

import math

import pytest

from tweening import LinearInterpolator


@pytest.fixture
def linear():
    return LinearInterpolator()


@pytest.fixture
def start():
    """Start value with four components."""
    return [1.0, -2.0, 0.5, 10.0]


@pytest.fixture
def end():
    """End value with four components."""
    return [3.0, 6.0, -0.5, 20.0]


@pytest.fixture
def output():
    return [0.0, 0.0, 0.0, 0.0]


@pytest.fixture
def identity_quat():
    """Quaternion (x, y, z, w) with no rotation."""
    return [0.0, 0.0, 0.0, 1.0]


@pytest.fixture
def quarter_turn_z():
    """Quaternion (x, y, z, w) for a 90 degree rotation around z."""
    half = math.pi / 4
    return [0.0, 0.0, math.sin(half), math.cos(half)]
