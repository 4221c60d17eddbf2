"""
Tests of field profiles, simulator configuration and initial condition sampling.
"""

import math

import numpy as np
import pytest

from trapping_simulation import core
from trapping_simulation.core.constants import SOURCE_LENGTH
from trapping_simulation.core.cross_section import HydrogenCrossSections
from trapping_simulation.core.data_classes import SampledField, UniformField
from trapping_simulation.core.field import field_at, field_from_table, load_field_map, mirror_field
from trapping_simulation.core.sampling import sample_initial_conditions, sample_isotropic_theta

from conftest import make_config


class TestFieldProfiles:
    """Field helpers"""

    def test_uniform(self):
        assert field_at(UniformField(0.6), 1.2) == 0.6

    def test_mirror(self):
        field = mirror_field(0.6, 3.6)
        assert field.b_reference == 0.6
        assert field_at(field, 0.0) == pytest.approx(0.6)
        assert field_at(field, SOURCE_LENGTH / 2.0) == pytest.approx(3.6)
        assert field_at(field, -SOURCE_LENGTH / 2.0) == pytest.approx(3.6)
        assert field_at(field, 0.5) < field_at(field, 1.0)

    def test_mirror_invalid(self):
        with pytest.raises(ValueError):
            mirror_field(0.0, 3.6)

    def test_table_interpolation(self):
        field = field_from_table([1.0, -1.0, 0.0], [2.0, 2.0, 1.0], b_reference=1.0)
        assert field_at(field, 0.5) == pytest.approx(1.5)
        assert field_at(field, -0.25) == pytest.approx(1.25)
        assert field_at(field, 5.0) == pytest.approx(2.0)

    def test_table_invalid(self):
        with pytest.raises(ValueError):
            field_from_table([0.0, 1.0], [1.0, -1.0], b_reference=1.0)
        with pytest.raises(ValueError):
            field_from_table([0.0], [1.0], b_reference=1.0)

    def test_load_field_map(self, tmp_path):
        path = tmp_path / "field.csv"
        path.write_text("z;B\n-1.5;3.6\n0;0.6\n1.5;3.6\n", encoding="utf-8")
        field = load_field_map(str(path), b_reference=0.6)
        assert field_at(field, 0.75) == pytest.approx(2.1)

    def test_load_missing_field_map(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_field_map(str(tmp_path / "missing.csv"), b_reference=0.6)


class TestSimulatorConfig:
    """Configuration validation"""

    @pytest.mark.parametrize("overrides", [
        dict(e_low=-1.0),
        dict(theta_pinch=-0.1),
        dict(theta_transport=4.0),
        dict(gas_density=-1.0),
        dict(gas_density=math.inf),
        dict(field=UniformField(0.0)),
        dict(field=0.6),
        dict(max_collisions=0),
        dict(max_path_length=0.0),
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ValueError):
            make_config(**overrides)

    def test_default_cross_sections(self):
        """Each configuration gets its own hydrogen model next to its field"""
        first = make_config()
        second = make_config()
        assert isinstance(first.cross_sections, HydrogenCrossSections)
        assert first.cross_sections is not second.cross_sections
        assert first.field == UniformField(1.0)

    def test_public_names_resolve(self):
        for name in core.__all__:
            assert getattr(core, name) is not None

    def test_properties(self):
        config = make_config(field=SampledField(lambda z: 1.0, b_reference=0.8))
        assert config.b_reference == 0.8
        assert not config.is_uniform
        assert make_config().is_uniform


class TestSampling:
    """Initial condition sampling"""

    def test_shape_and_ranges(self, rng):
        conditions = sample_initial_conditions(500, 18600.0, rng)
        assert conditions.shape == (500, 3)
        assert np.all(conditions[:, 0] == 18600.0)
        assert np.all((conditions[:, 1] > 0.0) & (conditions[:, 1] < math.pi))
        assert np.all(np.abs(conditions[:, 2]) <= SOURCE_LENGTH / 2.0)

    def test_isotropic(self, rng):
        """cos(theta) is uniform, so half of the electrons go forward"""
        thetas = np.array([sample_isotropic_theta(rng) for _ in range(4000)])
        assert np.mean(thetas < math.pi / 2) == pytest.approx(0.5, abs=0.03)

    def test_theta_max(self, rng):
        thetas = np.array([sample_isotropic_theta(rng, theta_max=0.5) for _ in range(200)])
        assert thetas.max() <= 0.5

    def test_invalid(self, rng):
        with pytest.raises(ValueError):
            sample_initial_conditions(-1, 18600.0, rng)
        with pytest.raises(ValueError):
            sample_isotropic_theta(rng, theta_max=0.0)
