"""
Shared fixtures for the trapping simulation tests.
"""

import math

import numpy as np
import pytest

from trapping_simulation.core.data_classes import SimulatorConfig, UniformField


class ConstantCrossSections:
    """Energy independent cross sections with fixed energy loss and deflection."""

    def __init__(self, elastic=1e-20, excitation=0.0, ionization=0.0, loss_ev=0.0, angle_deg=0.0):
        self.elastic = elastic
        self.excitation = excitation
        self.ionization = ionization
        self.loss_ev = loss_ev
        self.angle_deg = angle_deg

    def total_cross_section(self, energy_ev):
        return self.elastic + self.excitation + self.ionization

    def elastic_cross_section(self, energy_ev):
        return self.elastic

    def excitation_cross_section(self, energy_ev):
        return self.excitation

    def ionization_cross_section(self, energy_ev):
        return self.ionization

    def sample_elastic(self, energy_ev, rng):
        return self.loss_ev, self.angle_deg

    def sample_excitation(self, energy_ev, rng):
        return self.loss_ev, self.angle_deg

    def sample_ionization(self, energy_ev, rng):
        return self.loss_ev, self.angle_deg


def make_config(**overrides):
    params = dict(
        e_low=1000.0,
        theta_transport=0.5,
        theta_pinch=0.3,
        gas_density=0.0,
        field=UniformField(1.0),
    )
    params.update(overrides)
    return SimulatorConfig(**params)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def vacuum_config():
    """Uniform field, no gas: pinch 0.3 rad, transport 0.5 rad."""
    return make_config()
