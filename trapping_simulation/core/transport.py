"""
Electron transport along the source between scatterings.

This module contains the free path sampler and the propagation of an
electron by a given path length, either in a uniform field or by fixed
step integration in a non-uniform (mirror) field.
"""

from __future__ import annotations

import math

import numpy as np

from .constants import DELTA_L, PATH_TOLERANCE, SOURCE_LENGTH
from .data_classes import EndState, SimulatorConfig
from .particle import ParticleState


def free_path(energy_ev: float, config: SimulatorConfig, rng: np.random.Generator) -> float:
    """Sample the distance to the next scattering (m).

    The free path is exponentially distributed with rate
    ``sigma_total(E) * n_gas``. A vanishing rate gives an infinite path.
    """
    rate = config.cross_sections.total_cross_section(energy_ev) * config.gas_density
    if rate <= 0.0:
        return math.inf
    return float(rng.exponential(1.0 / rate))


def propagate(state: ParticleState, delta_l: float) -> ParticleState:
    """Propagate the electron by ``delta_l`` (m) or until its trial finishes.

    Only the distance actually traveled is added to ``state.l``.
    """
    if delta_l < 0.0:
        raise ValueError(f"Path length must be non-negative, got {delta_l}")
    if state.config.is_uniform:
        return _propagate_uniform(state, delta_l)
    return _propagate_sampled(state, delta_l)


def _traveled(step: float, delta_z: float, overshoot: float) -> float:
    """Part of ``step`` traveled before the wall stopped the electron."""
    if overshoot <= 0.0 or delta_z == 0.0:
        return step
    return step * max(1.0 - overshoot / abs(delta_z), 0.0)


def _check_path_guard(state: ParticleState):
    if not state.is_finished and state.l >= state.config.max_path_length:
        state.set_end_state(EndState.STUCK)


def _propagate_uniform(state: ParticleState, delta_l: float) -> ParticleState:
    # direction already included in cos(theta); one chunk never crosses more than one source length
    remaining = delta_l
    while remaining > 0.0:
        _check_path_guard(state)
        if state.is_finished:
            break

        cos_theta = math.cos(state.theta)
        step = min(remaining, state.config.max_path_length - state.l)
        if cos_theta != 0.0:
            step = min(step, SOURCE_LENGTH / abs(cos_theta))

        delta_z = step * cos_theta
        overshoot = state.add_z(delta_z)
        state.l += _traveled(step, delta_z, overshoot)
        remaining -= step
    return state


def _propagate_sampled(state: ParticleState, delta_l: float) -> ParticleState:
    b_reference = state.config.b_reference
    sin2 = math.sin(state.theta) ** 2
    cur_l = 0.0

    while cur_l <= delta_l - PATH_TOLERANCE:
        _check_path_guard(state)
        if state.is_finished:
            break

        step = min(delta_l - cur_l, DELTA_L, state.config.max_path_length - state.l)
        root = 1.0 - sin2 * state.field() / b_reference
        # mirror reflection before the step
        if root < 0.0:
            state.flip()
            state.count("mirror_reflections")

        delta_z = state.direction() * step * math.sqrt(abs(root))
        overshoot = state.add_z(delta_z)

        cur_l += step
        state.l += _traveled(step, delta_z, overshoot)
    return state
