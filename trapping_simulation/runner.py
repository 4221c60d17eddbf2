"""
Trapping Simulation Runner Module

This module provides the main simulation runner function that can be called
from scripts or imported directly.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional

import numpy as np

from . import config
from .core.data_classes import SimulationResult, UniformField
from .core.field import mirror_field
from .core.io_utils import export_results_to_csv, load_initial_conditions
from .core.sampling import sample_initial_conditions
from .core.simulation import Simulator, run_simulation
from .plotting import visualize_results, print_statistics


def run_full_simulation(
    output_dir: Optional[Path] = None,
    n_trials: Optional[int] = None,
    initial_energy: Optional[float] = None,
    gas_density: Optional[float] = None,
    b_mirror: Optional[float] = None,
    initial_conditions_file: Optional[str] = None,
    seed: Optional[int] = None,
    save_results: bool = True,
    generate_plots: bool = True,
    debug_counters: bool = False,
    max_path_length: Optional[float] = None,
) -> List[SimulationResult]:
    """Run a complete trapping simulation.

    This handles:
    1. Building the simulator from config defaults and overrides
    2. Sampling (or loading) initial electron conditions
    3. Running the Monte Carlo
    4. Exporting results
    5. Generating plots

    Parameters
    ----------
    output_dir : Path, optional
        Directory for output files (Data/, Figures/). If None, uses current working directory.
    n_trials : int, optional
        Number of electrons to simulate. If None, uses config default.
    initial_energy : float, optional
        Initial electron energy (eV). If None, uses config default.
    gas_density : float, optional
        Gas density (m⁻³). If None, uses config default.
    b_mirror : float, optional
        Field at the source ends (T). If given, a parabolic mirror field
        is used instead of the uniform one.
    initial_conditions_file : str, optional
        CSV file with ``energy_eV, theta_rad, z_m`` columns. Overrides sampling.
    seed : int, optional
        Seed of the random generator.
    save_results : bool
        Whether to save results to a CSV file.
    generate_plots : bool
        Whether to generate visualization plots.
    debug_counters : bool
        Whether to count interactions and reflections.
    max_path_length : float, optional
        Path length (m) at which a trial is stopped as STUCK. If None, uses
        the core default.

    Returns
    -------
    List[SimulationResult]
    """
    output_dir = Path.cwd() if output_dir is None else Path(output_dir)
    n_trials = config.DEFAULT_N_TRIALS if n_trials is None else n_trials
    initial_energy = config.DEFAULT_INITIAL_ENERGY_EV if initial_energy is None else initial_energy
    gas_density = config.DEFAULT_GAS_DENSITY_M3 if gas_density is None else gas_density

    rng = np.random.default_rng(seed)

    if b_mirror is None:
        field = UniformField(config.DEFAULT_B_SOURCE_T)
    else:
        field = mirror_field(config.DEFAULT_B_SOURCE_T, b_mirror)
    overrides = {}
    if max_path_length is not None:
        overrides["max_path_length"] = max_path_length
    simulator = Simulator.from_defaults(rng=rng, gas_density=gas_density, field=field, **overrides)
    if debug_counters:
        simulator.reset_debug_counters()

    if initial_conditions_file is not None:
        initial_conditions = load_initial_conditions(initial_conditions_file)
        print(f"[info] Loaded {len(initial_conditions)} initial conditions from {initial_conditions_file}")
    else:
        initial_conditions = sample_initial_conditions(
            n_trials, initial_energy, rng, theta_max=math.radians(config.DEFAULT_THETA_MAX_DEG)
        )

    print("\n" + "=" * 70)
    print("SOURCE CONFIGURATION")
    print("=" * 70)
    print(f"Minimum energy: {simulator.config.e_low:.1f} eV")
    print(f"Pinch angle: {math.degrees(simulator.config.theta_pinch):.3f}°")
    print(f"Transport angle: {math.degrees(simulator.config.theta_transport):.3f}°")
    print(f"Gas density: {gas_density:.3e} m^-3")
    if b_mirror is None:
        print(f"Field: uniform {config.DEFAULT_B_SOURCE_T:.3f} T")
    else:
        print(f"Field: mirror {config.DEFAULT_B_SOURCE_T:.3f} T -> {b_mirror:.3f} T")
    print("=" * 70 + "\n")

    print(f"[info] Starting simulation with {len(initial_conditions)} electrons...")
    results = run_simulation(simulator, initial_conditions)

    print_statistics(results)
    if debug_counters:
        simulator.print_debug_counters()

    if save_results and results:
        csv_filename = str(output_dir / config.DATA_OUTPUT_DIR / config.RESULTS_CSV)
        export_results_to_csv(results, filename=csv_filename)

    if generate_plots and results:
        print("[info] Generating visualizations...")
        save_base = str(output_dir / config.FIGURES_OUTPUT_DIR / config.RESULTS_FIGURE_BASE)
        visualize_results(results, save_path=save_base)
        print("[info] Visualization complete!")

    return results


def main():
    """Command-line entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Run electron trapping simulation")
    parser.add_argument("-n", "--trials", type=int, default=None,
                        help="Number of electrons to simulate")
    parser.add_argument("--energy", type=float, default=None,
                        help="Initial electron energy in eV")
    parser.add_argument("--density", type=float, default=None,
                        help="Gas density in m^-3")
    parser.add_argument("--mirror", type=float, default=None, metavar="BMAX",
                        help="Use a parabolic mirror field reaching BMAX tesla at the source ends")
    parser.add_argument("--initial-conditions", type=str, default=None,
                        help="CSV file with energy_eV, theta_rad, z_m columns")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed")
    parser.add_argument("--max-path-length", type=float, default=None,
                        help="Path length in m at which a trial is stopped as STUCK")
    parser.add_argument("--debug-counters", action="store_true",
                        help="Print interaction and reflection counters")
    parser.add_argument("--no-save", action="store_true",
                        help="Don't save results to CSV")
    parser.add_argument("--no-plot", action="store_true",
                        help="Don't generate visualization plots")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Output directory for results and figures")

    args = parser.parse_args()

    run_full_simulation(
        output_dir=args.output_dir,
        n_trials=args.trials,
        initial_energy=args.energy,
        gas_density=args.density,
        b_mirror=args.mirror,
        initial_conditions_file=args.initial_conditions,
        seed=args.seed,
        save_results=not args.no_save,
        generate_plots=not args.no_plot,
        debug_counters=args.debug_counters,
        max_path_length=args.max_path_length,
    )


if __name__ == "__main__":
    main()
