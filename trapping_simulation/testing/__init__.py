"""
Testing subpackage for the trapping simulation.

Analytic self-checks of the cross sections and the transport, useful before
starting a long run:

    from trapping_simulation.testing import run_quick_test
    run_quick_test()
"""

from .validation import (
    validate_cross_sections,
    validate_pass_through,
    validate_flip_involution,
    run_validation,
    run_quick_test,
)

__all__ = [
    "validate_cross_sections",
    "validate_pass_through",
    "validate_flip_involution",
    "run_validation",
    "run_quick_test",
]
