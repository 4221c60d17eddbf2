"""
Trapping Simulation Package
===========================

Monte Carlo of single electrons in a gaseous magnetic-mirror source. Each
trial follows one electron through elastic, excitation and ionization
collisions until it leaves the source through the front pinch (ACCEPTED
or PASS), through the rear transport magnet (REJECTED), or loses too much
energy (LOWENERGY).

Modules:
--------
- config: Configurable simulation parameters
- core: Simulation core (state, transport, scattering, driver)
- plotting: Result visualization
- testing: Analytic self-checks
- runner: Full run and command-line entry point
"""

from . import config
from .core import *
from .core import __all__ as _core_all
from .plotting import visualize_results, print_statistics

__version__ = "1.0.0"
__all__ = ["config", "visualize_results", "print_statistics"] + list(_core_all)
