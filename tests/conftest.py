"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator (trajectories are still not asserted)."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def sim(rng):
    """A fresh simulation at level 1."""
    from structsim.core import Simulation
    return Simulation(rng=rng)


@pytest.fixture
def make_store():
    """Factory for a store with hand-placed particles."""
    from structsim.core import ParticleStore, ParticleStoreConfig

    def _make(positions, velocities=None, radii=None):
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
        n = positions.shape[0]
        store = ParticleStore(ParticleStoreConfig(n_particles=n))
        store.positions = positions.copy()
        store.velocities = (
            np.zeros((n, 2)) if velocities is None
            else np.asarray(velocities, dtype=np.float64).reshape(-1, 2).copy()
        )
        store.radii = np.full(n, 5.0) if radii is None else np.asarray(radii, dtype=np.float64)
        store.tags = np.zeros(n, dtype=np.int64)
        return store

    return _make


@pytest.fixture
def caps_factory():
    """Build Capabilities flags directly."""
    from structsim.core import Capabilities

    def _caps(gravity=False, containment=False, health=False, protocols=False):
        return Capabilities(
            gravity_enabled=gravity,
            containment_enabled=containment,
            health_tracking_enabled=health,
            protocols_enabled=protocols,
        )

    return _caps
