"""Shift records: one per instrument inside a stress test."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional

import numpy as np
import pandas as pd

from stress_scenarios.domain.period import Period


class ShiftType(str, Enum):
    """How a bump is applied: additive offset or multiplicative factor."""
    absolute = "Absolute"
    relative = "Relative"

    @classmethod
    def parse(cls, text: str) -> "ShiftType":
        """Case-insensitive lookup. Raises ValueError for unknown tags."""
        value = (text or "").strip().lower()
        for member in cls:
            if member.value.lower() == value:
                return member
        raise ValueError(
            f"invalid shift type '{text}', expected one of {[m.value for m in cls]}"
        )


def _series(axis: tuple[Period, ...], shifts: tuple[float, ...]) -> pd.Series:
    return pd.Series(list(shifts), index=[str(p) for p in axis], dtype=float)


@dataclass(frozen=True)
class CurveShift:
    """Discount, index or yield curve shift: one value per tenor."""
    shift_type: ShiftType
    tenors: tuple[Period, ...]
    shifts: tuple[float, ...]

    def as_series(self) -> pd.Series:
        return _series(self.tenors, self.shifts)


@dataclass(frozen=True)
class ScalarShift:
    """FX spot shift."""
    shift_type: ShiftType
    size: float


@dataclass(frozen=True)
class VolShift1D:
    """FX or cap/floor volatility shift: one value per expiry.

    ``shift_type`` may be ``None`` for FX volatilities, whose shift type tag
    is optional unless ``REQUIRE_FX_VOL_SHIFT_TYPE`` is set.
    """
    shift_type: Optional[ShiftType]
    expiries: tuple[Period, ...]
    shifts: tuple[float, ...]

    def as_series(self) -> pd.Series:
        return _series(self.expiries, self.shifts)


@dataclass(frozen=True)
class SwaptionVolShift:
    """Sparse swaption volatility grid with a parallel fallback.

    ``cells`` holds only the (expiry, term) points given explicitly; every
    other point of the grid takes ``parallel_shift``.
    """
    shift_type: ShiftType
    terms: tuple[Period, ...]
    expiries: tuple[Period, ...]
    parallel_shift: float = 0.0
    cells: Mapping[tuple[Period, Period], float] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def shift_at(self, expiry: Period, term: Period) -> float:
        """Shift for one grid point: the explicit cell, else the parallel shift."""
        return self.cells.get((expiry, term), self.parallel_shift)

    def resolved_grid(self) -> pd.DataFrame:
        """Dense expiry x term grid over the declared axes.

        Cells off the declared axes do not appear in the grid.
        """
        grid = np.full((len(self.expiries), len(self.terms)), self.parallel_shift)
        for (expiry, term), value in self.cells.items():
            rows = [i for i, e in enumerate(self.expiries) if e == expiry]
            cols = [j for j, t in enumerate(self.terms) if t == term]
            if rows and cols:
                grid[np.ix_(rows, cols)] = value
        return pd.DataFrame(
            grid,
            index=[str(e) for e in self.expiries],
            columns=[str(t) for t in self.terms],
        )
