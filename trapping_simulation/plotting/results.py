"""
Simulation results visualization.

This module provides visualization functions for trapping simulation
results: distributions per end state and a printed statistical summary.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import numpy as np
import matplotlib.pyplot as plt

from .. import config
from ..core.data_classes import EndState, SimulationResult
from ..core.simulation import summarize_results

STATE_COLORS = {
    EndState.ACCEPTED: 'green',
    EndState.PASS: 'blue',
    EndState.REJECTED: 'red',
    EndState.LOWENERGY: 'gray',
    EndState.STUCK: 'orange',
}


def visualize_results(
    results: List[SimulationResult],
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Plot final energy, collision number, path length and initial angle
    distributions, one histogram per end state.

    Parameters
    ----------
    results : List[SimulationResult]
        Results of all simulated trials.
    save_path : str, optional
        Base path for saving the figure.
    show : bool
        Whether to open the figure window.
    """
    if not results:
        print("[warning] No simulation results to visualize.")
        return

    fig, axes = plt.subplots(2, 2, figsize=config.RESULTS_FIGSIZE)
    panels = [
        (axes[0, 0], lambda r: r.energy, 'Final Energy (eV)', 'Final Energy Distribution'),
        (axes[0, 1], lambda r: r.collision_number, 'Collisions', 'Collision Number Distribution'),
        (axes[1, 0], lambda r: r.path_length, 'Path Length (m)', 'Path Length Distribution'),
        (axes[1, 1], lambda r: np.degrees(r.init_theta), 'Initial Pitch Angle (deg)', 'Initial Angle by Fate'),
    ]

    for ax, value, xlabel, title in panels:
        for state, color in STATE_COLORS.items():
            values = np.array([value(r) for r in results if r.state == state], dtype=float)
            if values.size == 0:
                continue
            ax.hist(values, bins=config.HISTOGRAM_BINS, alpha=0.6, color=color,
                    label=f'{state.name} ({values.size})')
        ax.set_xlabel(xlabel)
        ax.set_ylabel('Count')
        ax.set_title(title)
        ax.legend()
        ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        output = Path(f"{save_path}_results.png")
        output.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output, dpi=config.PLOT_DPI, bbox_inches='tight')
        print(f"[info] Saved results visualization to {output}")

    if show:
        plt.show()
    else:
        plt.close(fig)


def print_statistics(results: List[SimulationResult]):
    """Print statistical summary of simulation results.

    Parameters
    ----------
    results : List[SimulationResult]
        Results of all simulated trials.
    """
    if not results:
        print("\n[Statistics] No simulation results to display.")
        return

    n_total = len(results)
    summary = summarize_results(results)

    print("\n" + "=" * 60)
    print("ELECTRON FATE STATISTICS")
    print("=" * 60)
    print(f"Total electrons simulated: {n_total}")
    for name, entry in summary.items():
        print(f"  {name:<10} {entry['count']:>8} ({100 * entry['fraction']:.2f}%)")
    print()

    energies = np.array([r.energy for r in results])
    collisions = np.array([r.collision_number for r in results])
    lengths = np.array([r.path_length for r in results])

    print("Final Energy (eV):")
    print(f"  Mean: {np.mean(energies):.2f}, Std: {np.std(energies):.2f}")
    print(f"  Range: [{np.min(energies):.2f}, {np.max(energies):.2f}]")
    print()
    print("Collision Number:")
    print(f"  Mean: {np.mean(collisions):.2f}, Std: {np.std(collisions):.2f}")
    print(f"  Range: [{np.min(collisions)}, {np.max(collisions)}]")
    print()
    print("Path Length (m):")
    print(f"  Mean: {np.mean(lengths):.4f}, Std: {np.std(lengths):.4f}")
    print(f"  Range: [{np.min(lengths):.4f}, {np.max(lengths):.4f}]")
    print("=" * 60 + "\n")
