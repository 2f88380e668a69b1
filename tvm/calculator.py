"""
Command dispatcher for TVM.

Purpose
-------
Executes parsed commands against a :class:`~tvm.state.FinancialState`:
validates ``set`` values, routes ``compute`` to the root finder or to a
closed form, stores the result, and hands back what should be printed.

Errors are raised as :mod:`tvm.exceptions` types and leave the state
untouched; deciding whether an error ends the session is the caller's job.

Example
-------
>>> from tvm.commands import parse_command
>>> calc = Calculator()
>>> for line in ["set n 360", "set i 0.005", "set PV 100000", "compute FV"]:
...     result = calc.execute(parse_command(line))
>>> result.format()
'FV = -602257.52'
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .commands import ClearCommand, Command, ComputeCommand, EmptyCommand, SetCommand
from .config import SolverConfig
from .constants import OUTPUT_FORMATS, VARIABLES
from .equations import solve_fv, solve_pmt, solve_pv
from .exceptions import DomainError, InvalidCommandError, RangeError, UnknownVariableError
from .solver import solve_i, solve_n
from .state import FinancialState

__all__ = [
    "ComputeResult",
    "Calculator",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComputeResult:
    variable: str
    value: float

    def format(self) -> str:
        """Render as ``NAME = value`` using the variable's output format."""
        return f"{self.variable} = {OUTPUT_FORMATS[self.variable] % self.value}"


class Calculator:
    """
    Stateful TVM calculator.

    Parameters
    ----------
    state : FinancialState, optional
        Variables to operate on. A fresh, zeroed state by default.
    solver_config : SolverConfig, optional
        Root finder settings for ``compute n`` and ``compute i``.
    """

    def __init__(
        self,
        state: Optional[FinancialState] = None,
        solver_config: Optional[SolverConfig] = None,
    ):
        self.state = state if state is not None else FinancialState()
        self.solver_config = solver_config or SolverConfig()
        self._solvers: Dict[str, Callable[[], float]] = {
            "n": lambda: solve_n(self.state, self.solver_config),
            "i": lambda: solve_i(self.state, self.solver_config),
            "PV": lambda: solve_pv(self.state),
            "PMT": lambda: solve_pmt(self.state),
            "FV": lambda: solve_fv(self.state),
        }

    # -------------------- Dispatch --------------------
    def execute(self, command: Command) -> Optional[ComputeResult]:
        """Run one command; return the result of a ``compute``, else None."""
        logger.debug("executing %r", command)
        if isinstance(command, EmptyCommand):
            return None
        if isinstance(command, ClearCommand):
            self.clear()
            return None
        if isinstance(command, SetCommand):
            self.set(command.variable, command.value)
            return None
        if isinstance(command, ComputeCommand):
            return self.compute(command.variable)
        raise InvalidCommandError()

    # -------------------- Commands --------------------
    def clear(self) -> None:
        self.state.clear()

    def set(self, variable: str, value: float) -> None:
        """
        Assign *value* to *variable* after range checks.

        Raises
        ------
        RangeError
            ``n`` that is not a finite, positive whole number.
        DomainError
            ``i`` that is not strictly positive (NaN included).
        UnknownVariableError
            *variable* is not one of n, i, PV, PMT, FV.
        """
        if variable == "n":
            if not (value > 0.0 and math.isfinite(value) and math.floor(value) == value):
                raise RangeError()
        elif variable == "i":
            if not value > 0.0:
                raise DomainError()
        elif variable not in VARIABLES:
            raise UnknownVariableError()
        self.state.assign(variable, value)

    def compute(self, variable: str) -> ComputeResult:
        """
        Solve for *variable* from the other four and store it.

        Raises
        ------
        UnknownVariableError
            *variable* is not one of n, i, PV, PMT, FV.
        DomainError
            i is not positive for n, PV, PMT or FV.
        ConvergenceError
            The root finder failed, or the PMT denominator is zero.
        """
        solver = self._solvers.get(variable)
        if solver is None:
            raise UnknownVariableError()
        value = solver()
        self.state.assign(variable, value)
        return ComputeResult(variable=variable, value=value)
