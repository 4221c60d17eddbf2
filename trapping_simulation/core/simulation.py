"""
High-level simulation driver.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from .. import config
from . import constants
from .constants import SOURCE_LENGTH
from .cross_section import HydrogenCrossSections
from .data_classes import EndState, SimulationResult, SimulatorConfig, UniformField
from .kinematics import scatter
from .particle import ParticleState
from .transport import free_path, propagate


class Simulator:
    """Monte Carlo of single electron tracks in the source.

    Parameters
    ----------
    config : SimulatorConfig
        Immutable simulation parameters.
    rng : np.random.Generator, optional
        Random source. Not thread safe: use one simulator per worker.
    """

    def __init__(self, config: SimulatorConfig, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.debug = False
        self.counters: Counter = Counter()

    @classmethod
    def from_defaults(cls, rng: Optional[np.random.Generator] = None, **overrides) -> "Simulator":
        """Build a simulator from the values in ``trapping_simulation.config``.

        Keyword arguments override the corresponding ``SimulatorConfig``
        fields, e.g. ``gas_density=0.0`` or ``field=mirror_field(0.6, 3.6)``.
        """
        params = dict(
            e_low=config.DEFAULT_E_LOW_EV,
            theta_transport=math.radians(config.DEFAULT_THETA_TRANSPORT_DEG),
            theta_pinch=math.radians(config.DEFAULT_THETA_PINCH_DEG),
            gas_density=config.DEFAULT_GAS_DENSITY_M3,
            field=UniformField(config.DEFAULT_B_SOURCE_T),
            cross_sections=HydrogenCrossSections(molecular_mass_amu=config.DEFAULT_MOLECULAR_MASS_AMU),
        )
        params.update(overrides)
        return cls(SimulatorConfig(**params), rng=rng)

    def simulate(self, init_energy: float, init_theta: float, init_z: float) -> SimulationResult:
        """Simulate one electron from its birth until it leaves the source
        or its energy drops below ``e_low``.

        Parameters
        ----------
        init_energy : float
            Initial kinetic energy (eV), positive.
        init_theta : float
            Initial pitch angle (rad), strictly between 0 and pi.
        init_z : float
            Initial position (m), inside the source.

        Returns
        -------
        SimulationResult
        """
        if not (0.0 < init_energy < math.inf):
            raise ValueError(f"Initial energy must be positive and finite, got {init_energy}")
        if not (0.0 < init_theta < math.pi):
            raise ValueError(f"Initial pitch angle must lie in (0, pi), got {init_theta}")
        if not (abs(init_z) <= SOURCE_LENGTH / 2.0):
            raise ValueError(f"Initial position {init_z} outside the source")

        pos = ParticleState(
            init_energy, init_theta, init_z, self.config,
            counters=self.counters if self.debug else None,
        )

        while not pos.is_finished:
            # path to the next scattering
            dl = free_path(pos.e, self.config, self.rng)
            propagate(pos, dl)

            if not pos.is_finished:
                scatter(pos, self.rng)
                pos.col_num += 1
                if pos.e < self.config.e_low or pos.e <= 0.0:
                    pos.set_end_state(EndState.LOWENERGY)
                elif pos.col_num >= self.config.max_collisions:
                    pos.set_end_state(EndState.STUCK)

        if constants.DEBUG:
            print(f"[debug] {pos.end_state.name}: E={pos.e:.1f} eV, collisions={pos.col_num}, l={pos.l:.3f} m")
        if self.debug:
            self.counters[pos.end_state.name] += 1

        return SimulationResult(
            state=pos.end_state,
            energy=pos.e,
            theta=pos.theta,
            init_theta=init_theta,
            collision_number=pos.col_num,
            path_length=pos.l,
        )

    def reset_debug_counters(self):
        """Enable debug counting and clear previous counts."""
        self.debug = True
        self.counters.clear()

    def print_debug_counters(self):
        if not self.debug:
            raise RuntimeError("Debug not initiated")
        print("\n" + "=" * 40)
        print("DEBUG COUNTERS")
        print("=" * 40)
        for key, value in sorted(self.counters.items()):
            print(f"{key:<24} {value:>12,}")
        print("=" * 40)


def run_simulation(
    simulator: Simulator,
    initial_conditions: Iterable[Sequence[float]],
    show_progress: bool = True,
) -> List[SimulationResult]:
    """Simulate one electron per ``(energy, theta, z)`` row.

    Parameters
    ----------
    simulator : Simulator
        Simulator used for all trials.
    initial_conditions : iterable of (energy, theta, z)
        Initial conditions, e.g. from ``sample_initial_conditions``.
    show_progress : bool
        Whether to display a progress bar.

    Returns
    -------
    list of SimulationResult
    """
    rows = list(initial_conditions)
    results: List[SimulationResult] = []
    for energy, theta, z in tqdm(rows, desc="Simulating electrons", disable=not show_progress):
        results.append(simulator.simulate(float(energy), float(theta), float(z)))
    return results


def summarize_results(results: Sequence[SimulationResult]) -> Dict[str, Dict[str, float]]:
    """Count trials per end state.

    Returns
    -------
    dict
        ``{state_name: {"count": int, "fraction": float}}`` for every
        terminal state, including those that never occurred.
    """
    n_total = len(results)
    counts = Counter(r.state for r in results)
    summary = {}
    for state in EndState:
        if state == EndState.NONE:
            continue
        count = counts.get(state, 0)
        summary[state.name] = {
            "count": count,
            "fraction": count / n_total if n_total > 0 else 0.0,
        }
    return summary
