"""
Plotting subpackage for trapping simulation results.

Example usage:
    from trapping_simulation.plotting import visualize_results, print_statistics
    visualize_results(results, save_path='Figures/trapping_analysis')
"""

from .results import (
    visualize_results,
    print_statistics,
)

__all__ = [
    "visualize_results",
    "print_statistics",
]
