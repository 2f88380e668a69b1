"""Time-value-of-money equations

Pure evaluators over a :class:`~tvm.state.FinancialState`:

- ``f_n`` / ``f_n_prime``: the annuity balance as a function of the number
  of periods, used by the n solver.
- ``f_i`` / ``f_i_prime``: the same balance as a function of the rate, used
  by the i solver.
- ``solve_pv`` / ``solve_pmt`` / ``solve_fv``: closed forms.

All arithmetic runs on ``numpy.float64`` scalars with floating point errors
silenced, so overflow produces ``inf`` and 0/0 produces ``nan`` instead of
raising. The solver turns non-finite values into ConvergenceError; the
closed forms let them through to the caller.

Sign convention: money received is positive, money paid out is negative,
so the balance ``PV*(1+i)^n + PMT*((1+i)^n - 1)/i + FV`` is zero at a
solution.
"""
from __future__ import annotations

import numpy as np

from .exceptions import ConvergenceError, DomainError
from .state import FinancialState

__all__ = [
    "f_n",
    "f_n_prime",
    "f_i",
    "f_i_prime",
    "solve_pv",
    "solve_pmt",
    "solve_fv",
    "require_positive_rate",
]


def require_positive_rate(state: FinancialState) -> np.float64:
    """Return i as float64, raising DomainError unless it is strictly positive."""
    i = np.float64(state.i)
    if not i > 0.0:
        raise DomainError()
    return i


# ---------------------------------------------------------------------------
# Root-finding functions
# ---------------------------------------------------------------------------

def f_n(state: FinancialState, x: float) -> float:
    """Balance as a function of periods.

    Rearranged as ``(PV + PMT/i) * (1+i)^x - PMT/i + FV`` so that only
    positive powers of ``1+i`` appear.
    """
    with np.errstate(all="ignore"):
        i = np.float64(state.i)
        a = 1.0 + i
        term = state.PV + state.PMT / i
        return float(term * np.power(a, x) - state.PMT / i + state.FV)


def f_n_prime(state: FinancialState, x: float) -> float:
    """d f_n / dx = ln(1+i) * (PV + PMT/i) * (1+i)^x."""
    with np.errstate(all="ignore"):
        i = np.float64(state.i)
        a = 1.0 + i
        return float(np.log(a) * (state.PV + state.PMT / i) * np.power(a, x))


def f_i(state: FinancialState, x: float) -> float:
    """Balance as a function of the periodic rate *x*, with n held fixed."""
    with np.errstate(all="ignore"):
        x = np.float64(x)
        a = 1.0 + x
        term = state.PV + state.PMT / x
        return float(term * np.power(a, state.n) - state.PMT / x + state.FV)


def f_i_prime(state: FinancialState, x: float) -> float:
    """d f_i / dx = n*(PV + PMT/x)*(1+x)^(n-1) - PMT*((1+x)^n + 1)/x^2."""
    with np.errstate(all="ignore"):
        x = np.float64(x)
        a = 1.0 + x
        a_to_n = np.power(a, state.n)
        first = state.n * (state.PV + state.PMT / x) * np.power(a, state.n - 1.0)
        second = state.PMT * (a_to_n + 1.0) / (x * x)
        return float(first - second)


# ---------------------------------------------------------------------------
# Closed forms
# ---------------------------------------------------------------------------

def solve_pv(state: FinancialState) -> float:
    """PV = -PMT*(1 - (1+i)^-n)/i - FV*(1+i)^-n."""
    i = require_positive_rate(state)
    with np.errstate(all="ignore"):
        disc = np.power(1.0 + i, -state.n)
        return float(-state.PMT * (1.0 - disc) / i - state.FV * disc)


def solve_pmt(state: FinancialState) -> float:
    """PMT = i*(PV*(1+i)^n + FV) / (1 - (1+i)^n).

    The denominator is zero when n is zero or i is too small to move
    ``(1+i)^n`` away from one; that case raises ConvergenceError.
    """
    i = require_positive_rate(state)
    with np.errstate(all="ignore"):
        a_to_n = np.power(1.0 + i, state.n)
        denom = 1.0 - a_to_n
        if denom == 0.0:
            raise ConvergenceError()
        return float(i * (state.PV * a_to_n + state.FV) / denom)


def solve_fv(state: FinancialState) -> float:
    """FV = -PV*(1+i)^n - PMT*((1+i)^n - 1)/i."""
    i = require_positive_rate(state)
    with np.errstate(all="ignore"):
        a_to_n = np.power(1.0 + i, state.n)
        return float(-state.PV * a_to_n - state.PMT * (a_to_n - 1.0) / i)
