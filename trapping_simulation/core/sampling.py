"""
Random sampling utilities for initial electron conditions.
"""

from __future__ import annotations

import math

import numpy as np

from .constants import SOURCE_LENGTH


def sample_isotropic_theta(rng: np.random.Generator, theta_max: float = math.pi) -> float:
    """Sample a pitch angle isotropically within ``(0, theta_max]``.

    ``cos(theta)`` is uniform; the degenerate angles 0 and pi are rejected
    and resampled.
    """
    if not (0.0 < theta_max <= math.pi):
        raise ValueError(f"theta_max must lie in (0, pi], got {theta_max}")
    cos_min = math.cos(theta_max)
    while True:
        cos_theta = 1.0 - (1.0 - cos_min) * rng.random()
        theta = math.acos(min(max(cos_theta, -1.0), 1.0))
        if 0.0 < theta < math.pi:
            return theta


def sample_position(rng: np.random.Generator) -> float:
    """Sample a uniform longitudinal position inside the source."""
    return float(rng.uniform(-SOURCE_LENGTH / 2.0, SOURCE_LENGTH / 2.0))


def sample_initial_conditions(
    n: int,
    energy_ev: float,
    rng: np.random.Generator,
    theta_max: float = math.pi,
) -> np.ndarray:
    """Sample ``n`` initial electron conditions.

    Parameters
    ----------
    n : int
        Number of electrons.
    energy_ev : float
        Initial kinetic energy shared by all electrons (eV).
    rng : np.random.Generator
        Random source.
    theta_max : float, optional
        Largest pitch angle sampled (rad).

    Returns
    -------
    np.ndarray, shape (n, 3)
        Rows of ``[energy (eV), theta (rad), z (m)]``.
    """
    if n < 0:
        raise ValueError(f"Number of electrons must be non-negative, got {n}")
    if energy_ev <= 0.0:
        raise ValueError(f"Initial energy must be positive, got {energy_ev}")
    conditions = np.empty((n, 3), dtype=float)
    for i in range(n):
        conditions[i] = (energy_ev, sample_isotropic_theta(rng, theta_max), sample_position(rng))
    return conditions
