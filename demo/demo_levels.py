#!/usr/bin/env python3
"""
Demo: The Level Progression

Walks one simulation through all four levels:

1. The Void       - energy only, particles drift and wrap around
2. The Container  - discipline pulls particles in and closes a wall
3. The Organism   - stress and stagnation start to accumulate
4. The Architect  - protocols pulse between focus and exploration

Output: output/demo_levels/levels.png
"""

import matplotlib.pyplot as plt

from structsim.core import Simulation
from structsim.analysis import containment_overshoot
from structsim.viz import plot_snapshot, save_figure


def main():
    print("=" * 60)
    print("  LEVEL PROGRESSION DEMONSTRATION")
    print("=" * 60)

    sim = Simulation()
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))

    print("\n1. The Void (innovation=50)...")
    sim.run(200)
    print(f"   Mean speed: {sim.last_average_speed:.2f}")
    plot_snapshot(sim.snapshot(), ax=axes[0, 0])

    print("\n2. The Container (discipline unlocked)...")
    sim.advance_level()
    print(f"   Discipline default: {sim.discipline:.0f}")
    sim.set_discipline(50)
    stats = sim.run(300)
    print(f"   Container radius: {sim.container_radius:.1f}")
    print(f"   Collisions: {stats['collisions']}")
    print(f"   Worst overshoot: {containment_overshoot(sim.snapshot()):.3f}")
    plot_snapshot(sim.snapshot(), ax=axes[0, 1])

    print("\n3. The Organism (health tracking)...")
    sim.advance_level()
    sim.set_innovation(95)
    sim.set_discipline(95)
    stats = sim.run(400)
    print(f"   Stress: {stats['stress']:.1f}   Stagnation: {stats['stagnation']:.1f}")
    plot_snapshot(sim.snapshot(), ax=axes[1, 0])

    print("\n4. The Architect (protocols)...")
    sim.advance_level()
    for name in ("focused", "exploratory", "focused"):
        sim.apply_protocol(name)
        stats = sim.run(150)
        print(f"   {name:<12} stress={stats['stress']:5.1f}  stagnation={stats['stagnation']:5.1f}")
    plot_snapshot(sim.snapshot(), ax=axes[1, 1])

    fig.suptitle("Structure Simulator: Level Progression", fontsize=14, fontweight="bold")
    fig.tight_layout()
    save_figure(fig, "output/demo_levels/levels.png")
    plt.close(fig)
    print("\n   Saved: output/demo_levels/levels.png")

    print("\n" + "=" * 60)
    print("  Level progression complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
