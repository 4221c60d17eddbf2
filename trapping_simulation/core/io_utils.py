"""
Data import/export utilities for simulation results.
"""

from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import List

import numpy as np

from .data_classes import EndState, SimulationResult

RESULT_HEADERS = [
    'trial_id',
    'end_state',
    'final_energy_eV',
    'final_theta_rad',
    'initial_theta_rad',
    'collision_number',
    'path_length_m',
]


def export_results_to_csv(results: List[SimulationResult], filename: str = "trapping_results.csv"):
    """Export simulation results to a CSV file.

    Parameters
    ----------
    results : List[SimulationResult]
        Results of the simulated trials.
    filename : str
        Output CSV filename.
    """
    if not results:
        print("[warning] No simulation results to export.")
        return

    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(RESULT_HEADERS)
        for idx, result in enumerate(results, start=1):
            writer.writerow([
                idx,
                result.state.name,
                repr(result.energy),
                repr(result.theta),
                repr(result.init_theta),
                result.collision_number,
                repr(result.path_length),
            ])

    print(f"[info] Exported {len(results)} results to {output_path}")


def load_results_from_csv(filename: str) -> List[SimulationResult]:
    """Load simulation results written by ``export_results_to_csv``."""
    if not os.path.isfile(filename):
        raise FileNotFoundError(f"Results file '{filename}' does not exist.")

    results = []
    with open(filename, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            try:
                results.append(SimulationResult(
                    state=EndState[row['end_state']],
                    energy=float(row['final_energy_eV']),
                    theta=float(row['final_theta_rad']),
                    init_theta=float(row['initial_theta_rad']),
                    collision_number=int(row['collision_number']),
                    path_length=float(row['path_length_m']),
                ))
            except (KeyError, ValueError) as e:
                raise ValueError(f"Malformed result row {row}: {e}")
    return results


def load_initial_conditions(filename: str) -> np.ndarray:
    """Load initial conditions from a CSV file.

    The file must contain the columns ``energy_eV``, ``theta_rad`` and
    ``z_m``.

    Returns
    -------
    np.ndarray, shape (N, 3)
        Rows of ``[energy (eV), theta (rad), z (m)]``.
    """
    if not os.path.isfile(filename):
        raise FileNotFoundError(f"Initial conditions file '{filename}' does not exist.")

    rows = []
    with open(filename, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        missing = {'energy_eV', 'theta_rad', 'z_m'} - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Initial conditions file is missing columns: {sorted(missing)}")
        for row in reader:
            rows.append((float(row['energy_eV']), float(row['theta_rad']), float(row['z_m'])))
    return np.array(rows, dtype=float).reshape(-1, 3)
