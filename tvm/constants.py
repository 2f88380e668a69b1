"""
Global constants for TVM.

Purpose
-------
Centralizes default values and magic numbers used by the solver, the
command parser and the output formatter, so every module agrees on them.

Usage
-----
>>> from tvm.constants import MAX_ITERATIONS, VARIABLES
>>> "PMT" in VARIABLES
True

Categories
----------
- Variables: the five calculator variable names
- Solver: iteration cap, tolerance, initial guesses
- Input: legacy line buffer size
- Output: per-variable result formats
"""

from typing import Dict, Tuple

__all__ = [
    # Variables
    "VARIABLES",
    # Solver
    "MAX_ITERATIONS",
    "TOLERANCE",
    "N_INITIAL_GUESS",
    "I_INITIAL_GUESS",
    # Input
    "LINE_BUFFER_SIZE",
    "DEFAULT_MAX_LINE_LENGTH",
    "TOKEN_SEPARATORS",
    # Output
    "OUTPUT_FORMATS",
]


# =============================================================================
# Variables
# =============================================================================

VARIABLES: Tuple[str, ...] = ("n", "i", "PV", "PMT", "FV")
"""Calculator variable names, case-sensitive."""


# =============================================================================
# Solver Defaults
# =============================================================================

MAX_ITERATIONS: int = 100_000
"""Newton-Raphson iteration cap."""

TOLERANCE: float = 1e-8
"""Step size below which the root finder reports convergence."""

N_INITIAL_GUESS: float = 360.0
"""Starting point when solving for the number of periods (30 years monthly)."""

I_INITIAL_GUESS: float = 0.0025
"""Starting point when solving for the periodic interest rate (3% annual / 12)."""


# =============================================================================
# Input
# =============================================================================

LINE_BUFFER_SIZE: int = 40
"""Size of the command buffer in bytes, including the terminator."""

DEFAULT_MAX_LINE_LENGTH: int = LINE_BUFFER_SIZE - 1
"""Most bytes read as one line; longer lines continue as the next line."""

TOKEN_SEPARATORS: str = " \t"
"""Characters that separate tokens. Other whitespace belongs to tokens."""


# =============================================================================
# Output
# =============================================================================

OUTPUT_FORMATS: Dict[str, str] = {
    "n": "%.0f",
    "i": "%.6f",
    "PV": "%.2f",
    "PMT": "%.2f",
    "FV": "%.2f",
}
"""printf-style format for each variable's computed value."""
