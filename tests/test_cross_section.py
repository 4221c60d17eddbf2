"""
Unit tests for the hydrogen cross-section model.
"""

import math

import numpy as np
import pytest

from trapping_simulation.core.cross_section import (
    EXCITATION_THRESHOLD_EV,
    H2_BINDING_ENERGY_EV,
    HydrogenCrossSections,
)

ENERGIES = [12.0, 16.0, 25.0, 100.0, 1000.0, 14000.0, 18600.0, 1.0e5]


@pytest.fixture
def model():
    return HydrogenCrossSections()


class TestCrossSections:
    """Cross-section values"""

    @pytest.mark.parametrize("energy", ENERGIES)
    def test_sum_rule(self, model, energy):
        """Partial cross sections add up to the total"""
        partial = (
            model.elastic_cross_section(energy)
            + model.excitation_cross_section(energy)
            + model.ionization_cross_section(energy)
        )
        assert partial == pytest.approx(model.total_cross_section(energy), rel=1e-2)

    @pytest.mark.parametrize("energy", ENERGIES)
    def test_non_negative(self, model, energy):
        assert model.elastic_cross_section(energy) >= 0.0
        assert model.excitation_cross_section(energy) >= 0.0
        assert model.ionization_cross_section(energy) >= 0.0

    def test_thresholds(self, model):
        """Inelastic channels close below their thresholds"""
        assert model.ionization_cross_section(H2_BINDING_ENERGY_EV) == 0.0
        assert model.excitation_cross_section(EXCITATION_THRESHOLD_EV) == 0.0
        assert model.ionization_cross_section(H2_BINDING_ENERGY_EV + 10.0) > 0.0

    def test_tritium_endpoint_magnitude(self, model):
        """Total inelastic cross section near 18.6 keV is a few 1e-22 m²"""
        inelastic = model.inelastic_cross_section(18600.0)
        assert 2.5e-22 < inelastic < 4.5e-22
        assert model.elastic_cross_section(18600.0) < 0.2 * inelastic

    def test_decreasing_at_high_energy(self, model):
        assert model.total_cross_section(1.0e5) < model.total_cross_section(1.0e4)

    def test_invalid_mass(self):
        with pytest.raises(ValueError):
            HydrogenCrossSections(molecular_mass_amu=0.0)


class TestSamplers:
    """Energy loss and angle sampling"""

    @pytest.mark.parametrize("energy", [20.0, 1000.0, 18600.0])
    @pytest.mark.parametrize("sampler", ["sample_elastic", "sample_excitation", "sample_ionization"])
    def test_ranges(self, model, energy, sampler):
        """Losses stay within [0, E] and angles within [0, 180] degrees"""
        rng = np.random.default_rng(7)
        for _ in range(500):
            loss, angle = getattr(model, sampler)(energy, rng)
            assert 0.0 <= loss <= energy
            assert 0.0 <= angle <= 180.0
            assert not math.isnan(angle)

    def test_elastic_recoil_is_small(self, model):
        rng = np.random.default_rng(1)
        for _ in range(200):
            loss, _ = model.sample_elastic(18600.0, rng)
            assert loss <= 4.0 * model.mass_ratio * 18600.0 + 1e-12

    def test_elastic_forward_peaked(self, model):
        """Screened Rutherford scattering is mostly forward at keV energies"""
        rng = np.random.default_rng(2)
        angles = np.array([model.sample_elastic(18600.0, rng)[1] for _ in range(2000)])
        assert np.median(angles) < 10.0

    def test_ionization_loss_bounds(self, model):
        """Loss covers the binding energy and at most half the available energy"""
        rng = np.random.default_rng(3)
        energy = 1000.0
        for _ in range(500):
            loss, _ = model.sample_ionization(energy, rng)
            assert H2_BINDING_ENERGY_EV <= loss <= 0.5 * (energy + H2_BINDING_ENERGY_EV) + 1e-9

    def test_excitation_loss_above_threshold(self, model):
        rng = np.random.default_rng(4)
        losses = np.array([model.sample_excitation(18600.0, rng)[0] for _ in range(2000)])
        assert losses.min() >= EXCITATION_THRESHOLD_EV
        assert np.mean(losses) == pytest.approx(12.6, abs=0.3)
