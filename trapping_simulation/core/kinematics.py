"""
Kinematics utilities for electron energy loss and pitch angle changes.

The simulation tracks a "virtual" pitch angle, recalculated to the reference
field through the adiabatic invariant ``sin²(θ) / B = const``. Scattering
is applied to the real local angle and converted back afterwards.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from .constants import CROSS_SECTION_TOLERANCE

if TYPE_CHECKING:
    from .particle import ParticleState

ELASTIC = "elastic"
EXCITATION = "excitation"
IONIZATION = "ionization"


def virtual_to_real(theta: float, b_local: float, b_reference: float) -> float:
    """Convert a virtual pitch angle to the local one, keeping the hemisphere."""
    sin_real = min(abs(math.sin(theta)) * math.sqrt(b_local / b_reference), 1.0)
    real = math.asin(sin_real)
    if theta > math.pi / 2.0:
        real = math.pi - real
    assert not math.isnan(real)
    return real


def real_to_virtual(theta: float, b_local: float, b_reference: float) -> float:
    """Convert a local pitch angle to the reference field, keeping the hemisphere."""
    sin_virtual = min(abs(math.sin(theta)) * math.sqrt(b_reference / b_local), 1.0)
    virtual = math.asin(sin_virtual)
    if theta > math.pi / 2.0:
        virtual = math.pi - virtual
    assert not math.isnan(virtual)
    return virtual


def polar_unit_vector(theta: float) -> np.ndarray:
    """Unit vector with polar angle ``theta`` in the x-z plane."""
    return np.array([math.sin(theta), 0.0, math.cos(theta)], dtype=float)


def rotate_about_axis(vector: np.ndarray, axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotate ``vector`` by ``angle`` around the unit ``axis`` (Rodrigues formula)."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (
        vector * cos_a
        + np.cross(axis, vector) * sin_a
        + axis * np.dot(axis, vector) * (1.0 - cos_a)
    )


def add_theta(state: ParticleState, d_theta: float, rng: np.random.Generator) -> float:
    """Deflect the electron by ``d_theta`` with a random azimuth.

    The vector deflected by ``d_theta`` in the reference azimuth is rotated
    by a uniform ``phi`` around the current direction, which spreads it
    over a cone around the initial direction.

    Parameters
    ----------
    state : ParticleState
        Electron state, its ``theta`` is updated in place.
    d_theta : float
        Deflection angle (rad).
    rng : np.random.Generator
        Random source.

    Returns
    -------
    float
        New virtual pitch angle (rad).
    """
    phi = rng.random() * 2.0 * math.pi

    real_theta = state.real_theta()
    deflected = polar_unit_vector(real_theta + d_theta)
    axis = polar_unit_vector(real_theta)
    result = rotate_about_axis(deflected, axis, phi)

    new_theta = math.acos(min(max(result[2], -1.0), 1.0))

    if state.config.is_uniform:
        state.theta = new_theta
    else:
        state.theta = real_to_virtual(new_theta, state.field(), state.config.b_reference)

    assert not math.isnan(state.theta)
    return state.theta


def choose_interaction(sigma_el: float, sigma_exc: float, alpha: float) -> str:
    """Pick the interaction type for normalized cross sections and ``alpha`` in [0, 1)."""
    if alpha < sigma_el:
        return ELASTIC
    if alpha < sigma_el + sigma_exc:
        return EXCITATION
    return IONIZATION


def scatter(state: ParticleState, rng: np.random.Generator) -> str:
    """Perform one scattering at the current position.

    Energy and angle are updated regardless of the outcome; the energy may
    become lower than the tracking threshold, which the caller checks.

    Returns
    -------
    str
        The interaction type that was sampled.
    """
    cross_sections = state.config.cross_sections
    e = state.e

    sigma_el = cross_sections.elastic_cross_section(e)
    sigma_exc = cross_sections.excitation_cross_section(e)
    sigma_ion = cross_sections.ionization_cross_section(e)
    sigma_sum = sigma_el + sigma_exc + sigma_ion
    if sigma_sum <= 0.0:
        raise ValueError(f"No scattering channel open at E = {e} eV")

    assert math.isclose(sigma_sum, cross_sections.total_cross_section(e), rel_tol=CROSS_SECTION_TOLERANCE)

    kind = choose_interaction(sigma_el / sigma_sum, sigma_exc / sigma_sum, rng.random())
    if kind == ELASTIC:
        loss, angle_deg = cross_sections.sample_elastic(e, rng)
    elif kind == EXCITATION:
        loss, angle_deg = cross_sections.sample_excitation(e, rng)
    else:
        loss, angle_deg = cross_sections.sample_ionization(e, rng)

    state.subtract_energy(loss)
    add_theta(state, math.radians(angle_deg), rng)
    state.count(kind)
    return kind
