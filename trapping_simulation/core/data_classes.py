"""
Data classes for the trapping simulation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Callable, Union

from .constants import DEFAULT_MAX_COLLISIONS, DEFAULT_MAX_PATH_LENGTH
from .cross_section import HydrogenCrossSections


class EndState(Enum):
    """Fate of a single electron track."""

    ACCEPTED = "accepted"  # trapped electron escaped through the front pinch
    REJECTED = "rejected"  # trapped electron escaped through the rear transport magnet
    LOWENERGY = "lowenergy"  # energy fell below the tracking threshold
    PASS = "pass"  # passed straight through without scattering, used for normalization
    STUCK = "stuck"  # collision or path length guard reached
    NONE = "none"


@dataclass(frozen=True)
class UniformField:
    """Spatially uniform field equal to the reference value."""

    b_reference: float  # T


@dataclass(frozen=True)
class SampledField:
    """Longitudinal field profile ``function(z) -> B`` normalized to ``b_reference``."""

    function: Callable[[float], float]
    b_reference: float  # T


MagneticField = Union[UniformField, SampledField]


@dataclass(frozen=True)
class SimulatorConfig:
    """Immutable simulation parameters.

    Attributes
    ----------
    e_low : float
        Minimum trackable energy (eV).
    theta_transport : float
        Rear rejection angle threshold (rad).
    theta_pinch : float
        Front acceptance angle threshold (rad).
    gas_density : float
        Gas number density (m⁻³).
    field : UniformField or SampledField
        Magnetic field configuration.
    cross_sections : object
        Cross-section collaborator, see ``HydrogenCrossSections`` for the
        required methods.
    max_collisions : int
        Collision count at which a trial is stopped as ``STUCK``.
    max_path_length : float
        Path length (m) at which a trial is stopped as ``STUCK``.
    """

    e_low: float
    theta_transport: float
    theta_pinch: float
    gas_density: float
    field: MagneticField
    cross_sections: Any = dataclass_field(default_factory=HydrogenCrossSections)
    max_collisions: int = DEFAULT_MAX_COLLISIONS
    max_path_length: float = DEFAULT_MAX_PATH_LENGTH

    def __post_init__(self):
        if not (self.e_low >= 0.0):
            raise ValueError(f"Minimum energy must be non-negative, got {self.e_low}")
        for name in ("theta_transport", "theta_pinch"):
            value = getattr(self, name)
            if not (0.0 <= value <= math.pi):
                raise ValueError(f"{name} must lie in [0, pi], got {value}")
        if not (0.0 <= self.gas_density < math.inf):
            raise ValueError(f"Gas density must be finite and non-negative, got {self.gas_density}")
        if not isinstance(self.field, (UniformField, SampledField)):
            raise ValueError(f"Unsupported field configuration: {self.field!r}")
        if not (self.field.b_reference > 0.0):
            raise ValueError(f"Reference field must be positive, got {self.field.b_reference}")
        if isinstance(self.field, SampledField) and not callable(self.field.function):
            raise ValueError("Sampled field requires a callable field function")
        if self.max_collisions <= 0:
            raise ValueError(f"max_collisions must be positive, got {self.max_collisions}")
        if not (self.max_path_length > 0.0):
            raise ValueError(f"max_path_length must be positive, got {self.max_path_length}")

    @property
    def b_reference(self) -> float:
        return self.field.b_reference

    @property
    def is_uniform(self) -> bool:
        return isinstance(self.field, UniformField)


@dataclass(frozen=True)
class SimulationResult:
    """Summary of one finished trial."""

    state: EndState
    energy: float  # eV, final energy
    theta: float  # rad, final virtual pitch angle
    init_theta: float  # rad
    collision_number: int
    path_length: float  # m
