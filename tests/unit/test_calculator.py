"""
Unit tests for calculator.py module.

Tests command dispatch, set validation, compute routing, result formatting
and the consistency of the closed forms through the dispatcher.
"""

import math

import numpy as np
import pytest

from tvm.calculator import Calculator, ComputeResult
from tvm.commands import (
    ClearCommand,
    ComputeCommand,
    EmptyCommand,
    SetCommand,
    parse_command,
)
from tvm.exceptions import (
    ConvergenceError,
    DomainError,
    RangeError,
    UnknownVariableError,
)
from tvm.state import FinancialState


def run(calculator, *lines):
    """Execute *lines* in order and return the last result."""
    result = None
    for line in lines:
        result = calculator.execute(parse_command(line))
    return result


# ============================================================================
# SET
# ============================================================================

class TestSet:
    """Test set validation."""

    def test_set_n_whole_number(self, calculator):
        calculator.execute(SetCommand("n", 5.0))
        assert calculator.state.n == 5.0

    @pytest.mark.parametrize("value", [5.5, -3.0, 0.0, math.inf, math.nan])
    def test_set_n_rejects(self, calculator, value):
        with pytest.raises(RangeError, match="n must be a positive integer"):
            calculator.set("n", value)
        assert calculator.state.n == 0.0

    def test_set_i_positive(self, calculator):
        calculator.set("i", 0.01)
        assert calculator.state.i == 0.01

    @pytest.mark.parametrize("value", [0.0, -0.01, math.nan])
    def test_set_i_rejects(self, calculator, value):
        with pytest.raises(DomainError, match="i must be positive"):
            calculator.set("i", value)

    @pytest.mark.parametrize("name", ["PV", "PMT", "FV"])
    @pytest.mark.parametrize("value", [-1e9, 0.0, 1.5, math.inf])
    def test_money_accepts_anything(self, calculator, name, value):
        calculator.set(name, value)
        assert calculator.state.get(name) == value

    def test_money_accepts_nan(self, calculator):
        calculator.set("FV", math.nan)
        assert math.isnan(calculator.state.FV)

    @pytest.mark.parametrize("name", ["x", "pv", "N", ""])
    def test_unknown_variable(self, calculator, name):
        with pytest.raises(UnknownVariableError, match="invalid variable name"):
            calculator.set(name, 1.0)

    def test_failed_set_keeps_previous_value(self, calculator):
        run(calculator, "set n 12")
        with pytest.raises(RangeError):
            run(calculator, "set n 12.5")
        assert calculator.state.n == 12.0

    def test_set_produces_no_result(self, calculator):
        assert calculator.execute(SetCommand("PV", 1.0)) is None


# ============================================================================
# COMPUTE
# ============================================================================

class TestCompute:
    """Test compute routing and storage."""

    def test_future_value(self, calculator):
        result = run(
            calculator,
            "set n 360",
            "set i 0.005",
            "set PV 100000",
            "set PMT 0",
            "compute FV",
        )
        assert result.variable == "FV"
        assert result.format() == "FV = -602257.52"
        assert calculator.state.FV == result.value

    def test_payment(self, calculator):
        result = run(calculator, "set n 360", "set i 0.005", "set PV 100000", "compute PMT")
        assert result.format() == "PMT = -599.55"

    def test_periods(self, calculator):
        result = run(calculator, "set i 0.005", "set PV 100000", "set PMT -600", "compute n")
        assert result.format() == "n = 360"
        assert calculator.state.n == 360.0

    def test_rate(self, calculator):
        result = run(calculator, "set n 360", "set PV 100000", "set PMT -599.55", "compute i")
        assert result.format() == "i = 0.005000"
        assert calculator.state.i == result.value

    def test_present_value(self, calculator):
        result = run(calculator, "set n 2", "set i 0.05", "set FV -110.25", "compute PV")
        assert result.format() == "PV = 100.00"

    @pytest.mark.parametrize("name", ["n", "PV", "PMT", "FV"])
    def test_requires_positive_rate(self, calculator, name):
        with pytest.raises(DomainError, match="i must be positive"):
            calculator.compute(name)

    def test_rate_after_clear_does_not_converge(self, calculator):
        with pytest.raises(ConvergenceError, match="solver did not converge"):
            calculator.compute("i")

    def test_unknown_variable(self, calculator):
        with pytest.raises(UnknownVariableError, match="invalid variable name"):
            calculator.execute(ComputeCommand("XYZ"))

    def test_failed_compute_keeps_state(self, calculator):
        run(calculator, "set n 10", "set PV 100", "set FV -50")
        before = calculator.state.as_dict()
        with pytest.raises(ConvergenceError):
            calculator.compute("i")
        assert calculator.state.as_dict() == before

    def test_non_finite_money_propagates(self, calculator):
        result = run(calculator, "set n 10", "set i 0.01", "set PV inf", "compute FV")
        assert result.format() == "FV = -inf"


# ============================================================================
# CLEAR / EMPTY
# ============================================================================

class TestClear:
    """Test clear and empty lines."""

    def test_clear_zeroes_everything(self, calculator):
        run(calculator, "set n 12", "set i 0.01", "set PV 1", "set PMT 2", "set FV 3")
        assert calculator.execute(ClearCommand()) is None
        assert calculator.state.as_dict() == {"n": 0.0, "i": 0.0, "PV": 0.0, "PMT": 0.0, "FV": 0.0}

    @pytest.mark.parametrize("name", ["n", "PV", "PMT", "FV"])
    def test_compute_after_clear_needs_rate(self, calculator, name):
        run(calculator, "set i 0.01", "clear")
        with pytest.raises(DomainError):
            calculator.compute(name)

    def test_empty_is_a_no_op(self, calculator):
        run(calculator, "set PV 5")
        assert calculator.execute(EmptyCommand()) is None
        assert calculator.state.PV == 5.0


class TestSharedState:
    """Test that a provided state is used in place."""

    def test_uses_given_state(self):
        state = FinancialState()
        calculator = Calculator(state=state)
        calculator.set("PV", 42.0)
        assert state.PV == 42.0


# ============================================================================
# FORMATTING
# ============================================================================

class TestComputeResult:
    """Test output formatting per variable."""

    @pytest.mark.parametrize(
        "variable, value, expected",
        [
            ("n", 360.0, "n = 360"),
            ("i", 0.0049999933, "i = 0.005000"),
            ("PV", 99_999.912, "PV = 99999.91"),
            ("PMT", -599.5505, "PMT = -599.55"),
            ("FV", 0.0, "FV = 0.00"),
            ("FV", math.nan, "FV = nan"),
        ],
    )
    def test_format(self, variable, value, expected):
        assert ComputeResult(variable, value).format() == expected


# ============================================================================
# ROUND TRIP
# ============================================================================

class TestRoundTrip:
    """PMT -> FV -> PV reproduces PV for random ordinary annuities."""

    def test_random_round_trips(self):
        rng = np.random.default_rng(42)
        for _ in range(200):
            n = float(rng.integers(1, 481))
            i = float(rng.uniform(0.0005, 0.05))
            pv = float(rng.uniform(1_000.0, 1_000_000.0))

            calculator = Calculator()
            calculator.set("n", n)
            calculator.set("i", i)
            calculator.set("PV", pv)
            calculator.compute("PMT")
            calculator.compute("FV")
            recovered = calculator.compute("PV").value

            assert recovered == pytest.approx(pv, rel=1e-4)
