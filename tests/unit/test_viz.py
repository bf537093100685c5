"""Smoke tests for the matplotlib renderer."""

import dataclasses

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from structsim.analysis import MeterHistory
from structsim.viz import plot_snapshot, particle_colors, plot_meter_history, plot_activity, save_figure
from structsim.viz.theme import STAGNATED_PARTICLE, PARTICLE_PALETTE


class TestParticleColors:
    """Tests for particle_colors."""

    def test_palette_colors(self, sim):
        colors = particle_colors(sim.snapshot())
        assert len(colors) == 60
        assert set(colors) <= set(PARTICLE_PALETTE)

    def test_grey_when_stagnated(self, sim):
        snap = dataclasses.replace(sim.snapshot(), level=3, stagnation=75.0)
        assert set(particle_colors(snap)) == {STAGNATED_PARTICLE}

    def test_not_grey_at_threshold(self, sim):
        snap = dataclasses.replace(sim.snapshot(), level=3, stagnation=70.0)
        assert STAGNATED_PARTICLE not in particle_colors(snap)


class TestPlots:
    """Figures build without error."""

    def test_plot_snapshot_levels(self, sim):
        for _ in range(4):
            fig, ax = plot_snapshot(sim.snapshot())
            assert ax.get_title().startswith(f"Lvl {sim.level}")
            plt.close(fig)
            sim.advance_level()

    def test_plot_snapshot_cracking(self, sim):
        snap = dataclasses.replace(sim.snapshot(), level=3, stress=90.0, stagnation=90.0)
        fig, ax = plot_snapshot(snap, title="stressed")
        assert ax.get_title() == "stressed"
        plt.close(fig)

    def test_meter_plots_and_save(self, sim, tmp_path):
        history = MeterHistory()
        for _ in range(20):
            sim.step()
            history.record(sim)

        fig, _ = plot_meter_history(history)
        out = tmp_path / "nested" / "meters.png"
        save_figure(fig, out)
        plt.close(fig)
        assert out.exists()

        fig = plot_activity(history)
        plt.close(fig)
