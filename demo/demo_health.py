#!/usr/bin/env python3
"""
Demo: Stress and Stagnation

Runs the health scenarios and plots the meters:

1. Stress recovery: no collisions, stress drains at the recovery rate
2. Stagnation: particles at rest, stagnation charges to saturation
3. Protocol pulse: alternating focused/exploratory presets

The measured slopes should match the configured damage/recovery rates.

Output: output/demo_health/*.png
"""

import matplotlib.pyplot as plt

from structsim.core import HealthConfig
from structsim.analysis import estimate_rate
from structsim.experiments import run_stress_recovery, run_stagnation, run_protocol_pulse
from structsim.viz import plot_meter_history, plot_activity, save_figure


def main():
    print("=" * 60)
    print("  HEALTH METER DEMONSTRATION")
    print("=" * 60)
    rates = HealthConfig()

    print("\n1. Stress recovery...")
    result = run_stress_recovery(n_ticks=200, initial_stress=50.0)
    slope = estimate_rate(result.history.stress, result.history.ticks)
    print(f"   Measured slope: {slope:.3f} / tick (expected -{rates.recovery_rate})")
    print(f"   Final stress: {result.stats['final_stress']:.1f}")
    fig, _ = plot_meter_history(result.history, title="Stress Recovery")
    save_figure(fig, "output/demo_health/stress_recovery.png")
    plt.close(fig)

    print("\n2. Stagnation...")
    result = run_stagnation(n_ticks=250)
    slope = estimate_rate(result.history.stagnation, result.history.ticks)
    print(f"   Measured slope: {slope:.3f} / tick (expected +{rates.damage_rate})")
    print(f"   Final stagnation: {result.stats['final_stagnation']:.1f}")
    fig, _ = plot_meter_history(result.history, title="Stagnation")
    save_figure(fig, "output/demo_health/stagnation.png")
    plt.close(fig)

    print("\n3. Protocol pulse...")
    result = run_protocol_pulse(cycles=3, ticks_per_phase=150)
    print(f"   Max stress: {result.stats['max_stress']:.1f}")
    print(f"   Max stagnation: {result.stats['max_stagnation']:.1f}")
    print(f"   Collisions: {result.stats['collisions']}")
    fig, _ = plot_meter_history(result.history, title="Protocol Pulse")
    save_figure(fig, "output/demo_health/protocol_pulse.png")
    plt.close(fig)
    fig = plot_activity(result.history, title="Protocol Pulse: Activity")
    save_figure(fig, "output/demo_health/protocol_activity.png")
    plt.close(fig)

    print("\n   Saved: output/demo_health/")
    print("\n" + "=" * 60)
    print("  Health demonstration complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
