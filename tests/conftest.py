"""
Pytest fixtures for brush3d tests.
"""
import pytest

import brushes


@pytest.fixture
def cube_planes():
    return brushes.cube()


@pytest.fixture
def slab_planes():
    return brushes.slab()


@pytest.fixture
def tetra_planes():
    return brushes.tetra()


@pytest.fixture
def chopped_cube_planes():
    return brushes.chopped_cube()
