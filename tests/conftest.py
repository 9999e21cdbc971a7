"""
Shared pytest fixtures for the blob model tests.
"""
import numpy as np
import pytest

from bezierblob.config import BlobConfig
from bezierblob.model.geometry import build_geometry
from bezierblob.model.shape import BlobShape
from bezierblob.model.state import BlobSession


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so oscillation runs are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def square_shape(rng) -> BlobShape:
    """Four anchors on a circle of radius 100: the reference construction."""
    return BlobShape(build_geometry(4, 100.0), rng)


@pytest.fixture
def session() -> BlobSession:
    return BlobSession.create(BlobConfig(point_count=4, base_radius=100.0, seed=7))
