"""
Newton-Raphson root finding for TVM.

Purpose
-------
Solves for the two calculator variables that have no closed form: the
number of periods ``n`` (it sits in an exponent) and the periodic rate
``i`` (it appears both as a base and as a divisor).

Algorithm
---------
Starting from ``x0`` the iteration is::

    delta = f(x) / f'(x)
    x     = x - delta

and stops when ``|delta| < tolerance``. Any non-finite evaluation, a zero
derivative, a step that leaves the domain, or running past
``max_iterations`` raises ConvergenceError. There is no damping or
bracketing: a failure is reported, not retried.

Example
-------
>>> from tvm.state import FinancialState
>>> state = FinancialState(n=360, PV=100_000, PMT=-599.55, FV=0)
>>> round(solve_i(state), 6)
0.005
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from .config import SolverConfig
from .equations import f_i, f_i_prime, f_n, f_n_prime, require_positive_rate
from .exceptions import ConvergenceError
from .state import FinancialState

__all__ = [
    "RootResult",
    "newton_raphson",
    "solve_n",
    "solve_i",
]

logger = logging.getLogger(__name__)

Function = Callable[[float], float]


@dataclass(frozen=True)
class RootResult:
    root: float
    iterations: int


def newton_raphson(
    f: Function,
    f_prime: Function,
    x0: float,
    *,
    domain: Optional[Callable[[float], bool]] = None,
    config: Optional[SolverConfig] = None,
) -> RootResult:
    """
    Find a root of *f* by Newton-Raphson iteration.

    Parameters
    ----------
    f, f_prime : callable
        The function and its derivative.
    x0 : float
        Initial guess.
    domain : callable, optional
        Predicate checked on the current point at the start of every
        iteration, including the first. A False result raises
        ConvergenceError.
    config : SolverConfig, optional
        Iteration cap and tolerance. Defaults to ``SolverConfig()``.

    Returns
    -------
    RootResult
        The converged point and the number of iterations used.

    Raises
    ------
    ConvergenceError
        On a non-finite value, a zero derivative, a domain violation, or
        when the iteration cap is reached.
    """
    config = config or SolverConfig()
    x = float(x0)

    for iteration in range(1, config.max_iterations + 1):
        if domain is not None and not domain(x):
            raise ConvergenceError()

        fx = f(x)
        fpx = f_prime(x)
        if not math.isfinite(fx) or not math.isfinite(fpx) or fpx == 0.0:
            raise ConvergenceError()

        delta = fx / fpx
        x -= delta
        if not math.isfinite(x):
            raise ConvergenceError()

        if abs(delta) < config.tolerance:
            return RootResult(root=x, iterations=iteration)

    raise ConvergenceError()


def solve_n(state: FinancialState, config: Optional[SolverConfig] = None) -> float:
    """
    Number of periods that zeroes the balance, rounded up.

    Partial periods are reported as a whole extra period, so the result is
    always ``ceil`` of the converged root.

    Raises
    ------
    DomainError
        If i is not strictly positive (checked before iterating).
    ConvergenceError
        If the iteration fails or the root is not positive.
    """
    config = config or SolverConfig()
    require_positive_rate(state)

    result = newton_raphson(
        lambda x: f_n(state, x),
        lambda x: f_n_prime(state, x),
        config.n_initial_guess,
        config=config,
    )
    if result.root <= 0.0:
        raise ConvergenceError()

    logger.debug("n converged to %r after %d iterations", result.root, result.iterations)
    return float(math.ceil(result.root))


def solve_i(state: FinancialState, config: Optional[SolverConfig] = None) -> float:
    """
    Periodic interest rate that zeroes the balance.

    The rate must stay strictly positive throughout; a step to zero or
    below stops the search with ConvergenceError.
    """
    config = config or SolverConfig()

    result = newton_raphson(
        lambda x: f_i(state, x),
        lambda x: f_i_prime(state, x),
        config.i_initial_guess,
        domain=lambda x: x > 0.0,
        config=config,
    )
    if not result.root > 0.0:
        raise ConvergenceError()

    logger.debug("i converged to %r after %d iterations", result.root, result.iterations)
    return result.root
