"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. The CPU backend is
    used because canvas fields are float64.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def default_world():
    """The two-sphere reference world."""
    from raytracer.scene.world import default_world

    return default_world()
