"""
Electron state of a single trial and the source boundary logic.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from . import constants
from .constants import SOURCE_LENGTH
from .data_classes import EndState, SimulatorConfig
from .field import field_at
from .kinematics import virtual_to_real


@dataclass
class ParticleState:
    """Current electron position in the simulation. Not thread safe.

    Attributes
    ----------
    e : float
        Current kinetic energy (eV).
    theta : float
        Current pitch angle recalculated to the reference field (rad).
    z : float
        Current longitudinal position (m), zero is the source center.
    config : SimulatorConfig
        Parameters of the simulator running this trial.
    l : float
        Total path length traveled (m).
    col_num : int
        Number of scatterings.
    end_state : EndState
        Terminal state, ``NONE`` while the trial is running.
    counters : Counter, optional
        Debug counters shared with the owning simulator.
    """

    e: float
    theta: float
    z: float
    config: SimulatorConfig
    l: float = 0.0
    col_num: int = 0
    end_state: EndState = EndState.NONE
    counters: Optional[Counter] = None

    @property
    def is_forward(self) -> bool:
        return self.theta <= math.pi / 2.0

    @property
    def is_finished(self) -> bool:
        return self.end_state != EndState.NONE

    def direction(self) -> float:
        return 1.0 if self.is_forward else -1.0

    def set_end_state(self, state: EndState):
        """Latch the terminal state. A finished trial never changes its state."""
        if self.is_finished:
            raise RuntimeError(f"End state already set to {self.end_state.name}, cannot set {state.name}")
        self.end_state = state

    def subtract_energy(self, delta_e: float) -> float:
        self.e -= delta_e
        return self.e

    def flip(self):
        """Reverse electron direction."""
        if not (0.0 <= self.theta <= math.pi):
            raise RuntimeError(f"Pitch angle {self.theta} outside [0, pi] at direction flip")
        self.theta = math.pi - self.theta

    def field(self) -> float:
        """Magnetic field in the current point."""
        return field_at(self.config.field, self.z)

    def real_theta(self) -> float:
        """Local pitch angle in the current point."""
        if self.config.is_uniform:
            return self.theta
        return virtual_to_real(self.theta, self.field(), self.config.b_reference)

    def count(self, key: str):
        if self.counters is not None:
            self.counters[key] += 1

    def add_z(self, delta_z: float) -> float:
        """Shift the position and resolve source wall crossings.

        Crossing the rear wall steeply enough rejects the electron, crossing
        the front wall shallowly enough accepts it (``PASS`` if it has never
        scattered). Otherwise the electron is reflected back into the source
        and its direction is flipped, as many times as the shift requires.

        Returns
        -------
        float
            Distance along z beyond the wall that was not traveled because
            the trial finished at the wall, zero otherwise.
        """
        half_length = SOURCE_LENGTH / 2.0
        overshoot = 0.0
        self.z += delta_z

        while abs(self.z) > half_length and not self.is_finished:
            if self.z < 0:
                # rear transport magnet
                if self.theta >= math.pi - self.config.theta_transport:
                    self.set_end_state(EndState.REJECTED)
                if self.is_finished:
                    overshoot = -half_length - self.z
                    self.z = -half_length
                else:
                    self.z = -SOURCE_LENGTH - self.z
            else:
                # front pinch
                if self.theta < self.config.theta_pinch:
                    self.set_end_state(EndState.PASS if self.col_num == 0 else EndState.ACCEPTED)
                if self.is_finished:
                    overshoot = self.z - half_length
                    self.z = half_length
                else:
                    self.z = SOURCE_LENGTH - self.z

            if not self.is_finished:
                self.flip()
                self.count("wall_reflections")

        if constants.DEBUG and self.is_finished and overshoot > 0.0:
            print(f"[debug] Track finished as {self.end_state.name} at z={self.z:.3f} m, overshoot={overshoot:.3e} m")
        return overshoot
