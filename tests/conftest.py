"""
Pytest configuration and fixtures for the TVM test suite.

This module provides reusable fixtures for testing all TVM components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

import pytest
from click.testing import CliRunner

from tvm.calculator import Calculator
from tvm.config import SolverConfig
from tvm.session import Session
from tvm.state import FinancialState


# ---------------------------------------------------------------------------
# State Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def state() -> FinancialState:
    """Freshly cleared state."""
    return FinancialState()


@pytest.fixture
def mortgage_state() -> FinancialState:
    """
    30-year monthly deposit, no payments.

    n: 360 periods
    i: 0.5% per period
    PV: 100,000 received
    """
    return FinancialState(n=360.0, i=0.005, PV=100_000.0, PMT=0.0, FV=0.0)


@pytest.fixture
def growth_state() -> FinancialState:
    """
    Two periods at 5%: 100 today grows to 110.25.

    FV is negative so that the balance is exactly zero at n=2, i=0.05.
    """
    return FinancialState(n=2.0, i=0.05, PV=100.0, PMT=0.0, FV=-110.25)


# ---------------------------------------------------------------------------
# Component Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def solver_config() -> SolverConfig:
    return SolverConfig()


@pytest.fixture
def calculator() -> Calculator:
    return Calculator()


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()
