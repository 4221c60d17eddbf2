"""
Electron scattering cross sections on molecular hydrogen isotopes.

Cross sections are returned in m² for a kinetic energy given in eV. The
samplers return ``(energy_loss_eV, angle_change_deg)`` pairs drawn for a
single interaction of the given type.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .constants import ATOMIC_MASS_UNIT_EV, ELECTRON_MASS_EV, PI_A0_SQUARED, RYDBERG_EV

# Bethe total inelastic parameters for H2
INELASTIC_DIPOLE_SQUARED = 1.5487
INELASTIC_LOG_CONSTANT = 1.18

# Binary-encounter-Bethe ionization parameters for H2
H2_BINDING_ENERGY_EV = 15.43
H2_ORBITAL_KINETIC_ENERGY_EV = 15.98
H2_OCCUPATION_NUMBER = 2

# Elastic strength fitted to ~2.9e-23 m² at 18.6 keV
ELASTIC_STRENGTH = 1.13

# Electronic excitation
EXCITATION_MEAN_LOSS_EV = 12.6
EXCITATION_WIDTH_EV = 1.5
EXCITATION_THRESHOLD_EV = 11.2

# T2 molecule
TRITIUM_MOLECULE_MASS_AMU = 6.032


class HydrogenCrossSections:
    """Cross sections and interaction samplers for e⁻ + H2/D2/T2.

    Parameters
    ----------
    molecular_mass_amu : float, optional
        Mass of the target molecule (u). Only the elastic recoil loss
        depends on it. Defaults to T2.
    atomic_number : int, optional
        Nuclear charge entering the elastic screening parameter.
    """

    def __init__(
        self,
        molecular_mass_amu: float = TRITIUM_MOLECULE_MASS_AMU,
        atomic_number: int = 1,
        binding_energy_ev: float = H2_BINDING_ENERGY_EV,
        orbital_kinetic_energy_ev: float = H2_ORBITAL_KINETIC_ENERGY_EV,
        occupation_number: int = H2_OCCUPATION_NUMBER,
        excitation_mean_loss_ev: float = EXCITATION_MEAN_LOSS_EV,
        excitation_width_ev: float = EXCITATION_WIDTH_EV,
        excitation_threshold_ev: float = EXCITATION_THRESHOLD_EV,
    ):
        if molecular_mass_amu <= 0.0:
            raise ValueError(f"Molecular mass must be positive, got {molecular_mass_amu}")
        if excitation_threshold_ev >= binding_energy_ev:
            raise ValueError("Excitation threshold must lie below the ionization energy")
        self.molecular_mass_amu = molecular_mass_amu
        self.atomic_number = atomic_number
        self.binding_energy_ev = binding_energy_ev
        self.orbital_kinetic_energy_ev = orbital_kinetic_energy_ev
        self.occupation_number = occupation_number
        self.excitation_mean_loss_ev = excitation_mean_loss_ev
        self.excitation_width_ev = excitation_width_ev
        self.excitation_threshold_ev = excitation_threshold_ev
        self.mass_ratio = ELECTRON_MASS_EV / (molecular_mass_amu * ATOMIC_MASS_UNIT_EV)

    # ------------------------------------------------------------------
    # Cross sections
    # ------------------------------------------------------------------

    def total_cross_section(self, energy_ev: float) -> float:
        """Total scattering cross section (m²)."""
        return (
            self.elastic_cross_section(energy_ev)
            + self.excitation_cross_section(energy_ev)
            + self.ionization_cross_section(energy_ev)
        )

    def elastic_cross_section(self, energy_ev: float) -> float:
        if energy_ev <= 0.0:
            return 0.0
        return 4.0 * PI_A0_SQUARED * (RYDBERG_EV / energy_ev) * ELASTIC_STRENGTH

    def inelastic_cross_section(self, energy_ev: float) -> float:
        """Bethe total inelastic cross section (m²).

        ``4 pi a0² (R/T) M² ln(4 c T / R)``, zero below the excitation
        threshold.
        """
        if energy_ev <= self.excitation_threshold_ev:
            return 0.0
        log_term = math.log(4.0 * INELASTIC_LOG_CONSTANT * energy_ev / RYDBERG_EV)
        return 4.0 * PI_A0_SQUARED * (RYDBERG_EV / energy_ev) * INELASTIC_DIPOLE_SQUARED * log_term

    def ionization_cross_section(self, energy_ev: float) -> float:
        """Binary-encounter-Bethe ionization cross section (m²) with Q = 1."""
        b = self.binding_energy_ev
        if energy_ev <= b:
            return 0.0
        t = energy_ev / b
        u = self.orbital_kinetic_energy_ev / b
        s = 4.0 * PI_A0_SQUARED * self.occupation_number * (RYDBERG_EV / b) ** 2
        ln_t = math.log(t)
        bracket = 0.5 * (1.0 - 1.0 / t ** 2) * ln_t + (1.0 - 1.0 / t - ln_t / (t + 1.0))
        return max(s / (t + u + 1.0) * bracket, 0.0)

    def excitation_cross_section(self, energy_ev: float) -> float:
        """Electronic excitation: inelastic minus ionization, floored at zero."""
        return max(self.inelastic_cross_section(energy_ev) - self.ionization_cross_section(energy_ev), 0.0)

    # ------------------------------------------------------------------
    # Samplers
    # ------------------------------------------------------------------

    def sample_elastic(self, energy_ev: float, rng: np.random.Generator) -> Tuple[float, float]:
        """Sample a screened-Rutherford elastic deflection.

        The polar angle follows ``dσ/dΩ ∝ 1 / (1 - cos θ + 2η)²`` with the
        Molière screening parameter ``η = 1.7e-5 Z^(2/3) / (τ(τ+2))``. The
        energy loss is the recoil transferred to the molecule.

        Returns
        -------
        tuple : (energy_loss_ev, angle_deg)
        """
        tau = energy_ev / ELECTRON_MASS_EV
        eta = 1.7e-5 * self.atomic_number ** (2.0 / 3.0) / (tau * (tau + 2.0))
        u = rng.random()
        one_minus_cos = 2.0 * eta * u / (1.0 - u + eta)
        one_minus_cos = min(max(one_minus_cos, 0.0), 2.0)
        angle = math.acos(1.0 - one_minus_cos)

        loss = 2.0 * self.mass_ratio * energy_ev * one_minus_cos
        return min(loss, energy_ev), math.degrees(angle)

    def sample_excitation(self, energy_ev: float, rng: np.random.Generator) -> Tuple[float, float]:
        """Sample an electronic excitation.

        The loss is Gaussian around the mean excitation energy, the
        deflection follows the dipole distribution ``θ / (θ² + θ_E²)`` with
        ``θ_E = ΔE / 2T`` up to ``sqrt(R / T)``.
        """
        loss = rng.normal(self.excitation_mean_loss_ev, self.excitation_width_ev)
        loss = min(max(loss, self.excitation_threshold_ev), energy_ev)

        theta_e = loss / (2.0 * energy_ev)
        theta_max = min(math.sqrt(RYDBERG_EV / energy_ev), math.pi)
        u = rng.random()
        angle = theta_e * math.sqrt((1.0 + (theta_max / theta_e) ** 2) ** u - 1.0)
        return loss, math.degrees(min(angle, math.pi))

    def sample_ionization(self, energy_ev: float, rng: np.random.Generator) -> Tuple[float, float]:
        """Sample an ionizing collision.

        The secondary electron energy ``W`` is drawn from ``1 / (W + B)²`` on
        ``[0, (T - B) / 2]``; the primary loses ``B + W`` and is deflected
        as in a binary collision with a free electron.
        """
        b = self.binding_energy_ev
        if energy_ev <= b:
            return energy_ev, 0.0
        w_max = 0.5 * (energy_ev - b)
        inv_low = 1.0 / b
        inv_high = 1.0 / (w_max + b)
        u = rng.random()
        secondary = 1.0 / (inv_low - u * (inv_low - inv_high)) - b
        loss = min(b + max(secondary, 0.0), energy_ev)

        cos_theta = math.sqrt(max(energy_ev - loss, 0.0) / energy_ev)
        return loss, math.degrees(math.acos(min(cos_theta, 1.0)))
