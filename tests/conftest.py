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
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture(autouse=True)
def clear_camera_state():
    """Clear the active camera before and after each test.

    This ensures tests are isolated from each other.
    """
    # Import here so Taichi is initialized first
    from tinytracer.camera.pinhole import clear_camera

    clear_camera()
    yield
    clear_camera()


@pytest.fixture
def origin():
    """The eye point at the world origin."""
    from tinytracer.core.vector import Vector3

    return Vector3(0.0, 0.0, 0.0)


@pytest.fixture
def forward():
    """Unit direction straight down -z."""
    from tinytracer.core.vector import Vector3

    return Vector3(0.0, 0.0, -1.0)
