"""
TVM - Time Value of Money calculator

A line-oriented interpreter for compound-interest problems over five
variables: number of periods (n), rate per period (i), present value (PV),
payment (PMT) and future value (FV).

Modules
-------
- state       : The five calculator variables
- equations   : Balance functions, derivatives and closed forms
- solver      : Newton-Raphson root finding for n and i
- commands    : Command tokenizing and parsing
- calculator  : Command dispatch against a state
- session     : Line-by-line driver producing typed results
- cli         : ``tvm`` command-line entry point

"""

from .state import FinancialState
from .calculator import Calculator, ComputeResult
from .session import Session, LineResult
from . import exceptions
