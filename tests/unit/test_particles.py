"""Unit tests for ParticleStore and ParticleStoreConfig."""

import numpy as np
import pytest

from structsim.core.particles import ParticleStore, ParticleStoreConfig


class TestParticleStoreConfig:
    """Tests for ParticleStoreConfig."""

    def test_default_config(self):
        cfg = ParticleStoreConfig()
        assert cfg.n_particles == 60
        assert cfg.spawn_width == 400.0
        assert cfg.spawn_height == 400.0
        assert cfg.n_tags == 5

    def test_non_positive_count_rejected(self):
        with pytest.raises(ValueError):
            ParticleStoreConfig(n_particles=0)

    def test_non_positive_radius_rejected(self):
        with pytest.raises(ValueError):
            ParticleStoreConfig(min_radius=0.0)


class TestParticleStore:
    """Tests for ParticleStore."""

    def test_starts_empty(self):
        store = ParticleStore(ParticleStoreConfig())
        assert len(store) == 0
        assert store.is_empty
        assert store.average_speed() == 0.0

    def test_initialize_shapes(self, rng):
        store = ParticleStore(ParticleStoreConfig(n_particles=60), rng=rng)
        store.initialize()

        assert store.positions.shape == (60, 2)
        assert store.velocities.shape == (60, 2)
        assert store.radii.shape == (60,)
        assert store.tags.shape == (60,)
        assert not store.is_empty

    def test_initialize_ranges(self, rng):
        store = ParticleStore(ParticleStoreConfig(n_particles=500), rng=rng)
        store.initialize()

        assert np.all(store.positions >= 0.0)
        assert np.all(store.positions < 400.0)
        assert np.all(store.velocities >= -2.0)
        assert np.all(store.velocities < 2.0)
        assert np.all(store.radii >= 4.0)
        assert np.all(store.radii < 10.0)
        assert set(np.unique(store.tags)) <= {0, 1, 2, 3, 4}

    def test_reinitialize_keeps_count(self, rng):
        store = ParticleStore(ParticleStoreConfig(n_particles=30), rng=rng)
        store.initialize()
        first = store.positions.copy()
        store.initialize()

        assert len(store) == 30
        assert not np.allclose(first, store.positions)

    def test_average_speed_is_l1(self, make_store):
        store = make_store(
            [[0, 0], [10, 10]],
            velocities=[[1.0, -2.0], [0.0, 3.0]],
        )
        # (|1| + |-2| + |0| + |3|) / 2
        assert store.average_speed() == pytest.approx(3.0)
        assert np.allclose(store.speeds(), [3.0, 3.0])
