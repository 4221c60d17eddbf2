"""
Physical constants and fixed source geometry.
"""

import math

from scipy.constants import physical_constants

# Physical constants (CODATA)
BOHR_RADIUS_M = physical_constants["Bohr radius"][0]  # m
RYDBERG_EV = physical_constants["Rydberg constant times hc in eV"][0]  # eV
ELECTRON_MASS_EV = physical_constants["electron mass energy equivalent in MeV"][0] * 1e6  # eV
ATOMIC_MASS_UNIT_EV = physical_constants["atomic mass constant energy equivalent in MeV"][0] * 1e6  # eV
PI_A0_SQUARED = math.pi * BOHR_RADIUS_M ** 2  # m²

# Source geometry
SOURCE_LENGTH = 3.0  # m, full length of the source region
DELTA_L = 0.1  # m, integration step in a non-uniform field
PATH_TOLERANCE = 0.01  # m, unpropagated remainder accepted by the integrator

# Guards against trials that never reach a terminal state
DEFAULT_MAX_COLLISIONS = 100000
DEFAULT_MAX_PATH_LENGTH = 1.0e5  # m, far beyond the path of a trial at the default density

# Relative tolerance for the cross-section sum rule
CROSS_SECTION_TOLERANCE = 1.0e-2

# Debug flag
DEBUG = False
