"""Pytest configuration for phongray tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields allocated by earlier tests. Fields are 64-bit so that
    canvas quantization matches double-precision arithmetic.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, random_seed=42)
    yield


@pytest.fixture
def builder():
    """A fresh SceneBuilder, so shape ids start from zero in every test."""
    from phongray.scene.builder import SceneBuilder

    return SceneBuilder()


@pytest.fixture
def default_world(builder):
    """The default two-sphere world, built with the test's builder."""
    from phongray.scene.default_world import create_default_world

    return create_default_world(builder=builder)
