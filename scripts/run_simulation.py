#!/usr/bin/env python
"""
Trapping Simulation - Main Runner Script

This script runs the complete electron trapping simulation.

Usage:
    python run_simulation.py
    python run_simulation.py -n 1000
    python run_simulation.py --mirror 3.6 --no-plot

Output files (Data/, Figures/) will be saved in the current working directory
or in the specified output directory.
"""

from pathlib import Path
import sys

from trapping_simulation.runner import run_full_simulation, main as runner_main

project_dir = Path(__file__).resolve().parent.parent


def main():
    """Script entry point."""
    if len(sys.argv) > 1:
        runner_main()
    else:
        run_full_simulation(output_dir=project_dir)


if __name__ == "__main__":
    main()
