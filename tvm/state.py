"""Financial state for TVM

Holds the five calculator variables. A single instance is created per
session and passed to the dispatcher explicitly; nothing in the package
keeps module-level state.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

from .constants import VARIABLES
from .exceptions import UnknownVariableError

__all__ = ["FinancialState"]


@dataclass
class FinancialState:
    n: float = 0.0
    i: float = 0.0
    PV: float = 0.0
    PMT: float = 0.0
    FV: float = 0.0

    def clear(self) -> None:
        """Reset every variable to zero."""
        for f in fields(self):
            setattr(self, f.name, 0.0)

    def get(self, name: str) -> float:
        if name not in VARIABLES:
            raise UnknownVariableError()
        return getattr(self, name)

    def assign(self, name: str, value: float) -> None:
        """Store *value* under *name* without any range validation."""
        if name not in VARIABLES:
            raise UnknownVariableError()
        setattr(self, name, float(value))

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in VARIABLES}
