"""
Configuration management module for TVM.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management and validation. Every default gives the standard command-line
behaviour: stop at the first error, 39-byte lines, 100000 iterations.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Environment-aware: ``AppSettings`` reads ``TVM_*`` variables and ``.env``

Example
-------
>>> from tvm.config import SolverConfig, SessionConfig
>>> solver = SolverConfig(max_iterations=500)
>>> session = SessionConfig(strict=False, max_line_length=None)
>>>
>>> # Serialize to dict/JSON
>>> solver.model_dump()["tolerance"]
1e-08
"""

from __future__ import annotations
from typing import Optional, Literal

from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    MAX_ITERATIONS,
    TOLERANCE,
    N_INITIAL_GUESS,
    I_INITIAL_GUESS,
    DEFAULT_MAX_LINE_LENGTH,
)

__all__ = [
    "SolverConfig",
    "SessionConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Solver Configuration
# ---------------------------------------------------------------------------

class SolverConfig(BaseModel):
    """
    Configuration for the Newton-Raphson root finder.

    Attributes
    ----------
    max_iterations : int
        Iteration cap before giving up with ConvergenceError.
    tolerance : float
        Convergence threshold on the absolute Newton step.
    n_initial_guess : float
        Starting point when solving for the number of periods.
    i_initial_guess : float
        Starting point when solving for the interest rate (must be > 0).

    Examples
    --------
    >>> config = SolverConfig(tolerance=1e-10)
    >>> config.max_iterations
    100000
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_iterations: int = Field(
        default=MAX_ITERATIONS,
        ge=1,
        description="Maximum Newton-Raphson iterations"
    )
    tolerance: float = Field(
        default=TOLERANCE,
        gt=0,
        description="Convergence threshold on |step|"
    )
    n_initial_guess: float = Field(
        default=N_INITIAL_GUESS,
        description="Initial guess for n"
    )
    i_initial_guess: float = Field(
        default=I_INITIAL_GUESS,
        gt=0,
        description="Initial guess for i"
    )


# ---------------------------------------------------------------------------
# Session Configuration
# ---------------------------------------------------------------------------

class SessionConfig(BaseModel):
    """
    Configuration for a command session.

    Attributes
    ----------
    strict : bool
        Stop at the first failing line (the default). When False,
        every line is processed and failures are reported per line.
    max_line_length : int, optional
        Bytes kept from each line before tokenizing. None lifts the limit.

    Examples
    --------
    >>> SessionConfig().max_line_length
    39
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = Field(
        default=True,
        description="Stop processing at the first error"
    )
    max_line_length: Optional[int] = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        ge=1,
        description="Per-line byte limit (None for unlimited)"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with TVM_ (e.g., TVM_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    strict : bool
        Default session strictness
    max_line_length : int, optional
        Default per-line byte limit

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'

    # With .env file:
    # TVM_STRICT=false
    >>> settings = AppSettings(_env_file=".env")
    >>> settings.strict
    False
    """

    model_config = SettingsConfigDict(
        env_prefix="TVM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    strict: bool = Field(
        default=True,
        description="Stop processing at the first error"
    )
    max_line_length: Optional[int] = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        ge=1,
        description="Per-line byte limit (None for unlimited)"
    )

    def session_config(self) -> SessionConfig:
        """Build the SessionConfig these settings describe."""
        return SessionConfig(strict=self.strict, max_line_length=self.max_line_length)
