"""
Core simulation modules.

- constants: physical constants, source geometry and debug flag
- data_classes: EndState, field variants, SimulatorConfig, SimulationResult
- cross_section: electron scattering cross sections on hydrogen isotopes
- field: magnetic field profiles
- particle: electron state and source boundary logic
- kinematics: angle conversion, angle randomizer and scatter engine
- transport: free path sampling and propagation
- sampling: initial condition sampling
- simulation: simulation driver
- io_utils: input/output utilities
"""

# Constants
from .constants import (
    SOURCE_LENGTH,
    DELTA_L,
)

# Data classes
from .data_classes import (
    EndState,
    UniformField,
    SampledField,
    SimulatorConfig,
    SimulationResult,
)

# Cross sections
from .cross_section import HydrogenCrossSections

# Magnetic field
from .field import (
    field_at,
    mirror_field,
    field_from_table,
    load_field_map,
)

# Electron state
from .particle import ParticleState

# Kinematics
from .kinematics import (
    virtual_to_real,
    real_to_virtual,
    add_theta,
    scatter,
)

# Transport
from .transport import (
    free_path,
    propagate,
)

# Sampling
from .sampling import (
    sample_isotropic_theta,
    sample_position,
    sample_initial_conditions,
)

# Simulation
from .simulation import (
    Simulator,
    run_simulation,
    summarize_results,
)

# IO
from .io_utils import (
    export_results_to_csv,
    load_results_from_csv,
    load_initial_conditions,
)

__all__ = [
    'SOURCE_LENGTH',
    'DELTA_L',
    'EndState',
    'UniformField',
    'SampledField',
    'SimulatorConfig',
    'SimulationResult',
    'HydrogenCrossSections',
    'field_at',
    'mirror_field',
    'field_from_table',
    'load_field_map',
    'ParticleState',
    'virtual_to_real',
    'real_to_virtual',
    'add_theta',
    'scatter',
    'free_path',
    'propagate',
    'sample_isotropic_theta',
    'sample_position',
    'sample_initial_conditions',
    'Simulator',
    'run_simulation',
    'summarize_results',
    'export_results_to_csv',
    'load_results_from_csv',
    'load_initial_conditions',
]
