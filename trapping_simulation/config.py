"""
Configuration settings for the trapping simulation.

Users can modify these values to customize a run without changing the core
code. The values describe a gaseous tritium source with a magnetic pinch
in front and a transport magnet at the rear.
"""

from __future__ import annotations

# =============================================================================
# Source Parameters
# =============================================================================

# Tracking stops below this energy (eV)
DEFAULT_E_LOW_EV = 14000.0

# Rear transport magnet rejection threshold (degrees)
DEFAULT_THETA_TRANSPORT_DEG = 24.107064

# Front pinch acceptance threshold (degrees)
DEFAULT_THETA_PINCH_DEG = 19.481097

# Gas number density (m⁻³)
DEFAULT_GAS_DENSITY_M3 = 5.0e20

# Field in the source center (T)
DEFAULT_B_SOURCE_T = 0.6

# Target molecule mass for the elastic recoil loss (u), T2
DEFAULT_MOLECULAR_MASS_AMU = 6.032

# =============================================================================
# Simulation Parameters
# =============================================================================

# Number of electron trials
DEFAULT_N_TRIALS = 1000

# Initial electron energy (eV)
DEFAULT_INITIAL_ENERGY_EV = 18000.0

# Largest initial pitch angle (degrees)
DEFAULT_THETA_MAX_DEG = 180.0

# =============================================================================
# Output
# =============================================================================

DATA_OUTPUT_DIR = "Data"
FIGURES_OUTPUT_DIR = "Figures"

RESULTS_CSV = "trapping_results.csv"
RESULTS_FIGURE_BASE = "trapping_analysis"

# =============================================================================
# Visualization Settings
# =============================================================================

PLOT_DPI = 300
HISTOGRAM_BINS = 50
RESULTS_FIGSIZE = (12, 10)
