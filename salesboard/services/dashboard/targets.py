"""Target resolution result.

Resolution order for a department/month is explicit monthly target, then the
department's default target, then nothing. Each outcome is its own type so a
missing target can never be mistaken for a target of zero.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Union


@dataclass(frozen=True)
class ExplicitTarget:
    amount: Decimal
    source: Literal["monthly"] = "monthly"


@dataclass(frozen=True)
class DepartmentDefaultTarget:
    amount: Decimal
    source: Literal["department"] = "department"


@dataclass(frozen=True)
class NoTarget:
    source: Literal["none"] = "none"

    @property
    def amount(self) -> None:
        return None


TargetResolution = Union[ExplicitTarget, DepartmentDefaultTarget, NoTarget]
