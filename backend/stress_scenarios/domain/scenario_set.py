"""Stress test aggregate and the ordered collection handed to the scenario engine."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from stress_scenarios.domain.shifts import (
    CurveShift,
    ScalarShift,
    SwaptionVolShift,
    VolShift1D,
)


def _empty() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class StressTest:
    """One named scenario: shifts keyed by currency, index, curve or pair."""
    label: str
    discount_curve_shifts: Mapping[str, CurveShift] = field(default_factory=_empty)
    index_curve_shifts: Mapping[str, CurveShift] = field(default_factory=_empty)
    yield_curve_shifts: Mapping[str, CurveShift] = field(default_factory=_empty)
    fx_shifts: Mapping[str, ScalarShift] = field(default_factory=_empty)
    fx_vol_shifts: Mapping[str, VolShift1D] = field(default_factory=_empty)
    swaption_vol_shifts: Mapping[str, SwaptionVolShift] = field(default_factory=_empty)
    cap_floor_vol_shifts: Mapping[str, VolShift1D] = field(default_factory=_empty)


@dataclass(frozen=True)
class ScenarioSet:
    """Stress tests in document order."""
    stress_tests: tuple[StressTest, ...] = ()

    def __len__(self) -> int:
        return len(self.stress_tests)

    def __iter__(self) -> Iterator[StressTest]:
        return iter(self.stress_tests)

    def __getitem__(self, index: int) -> StressTest:
        return self.stress_tests[index]

    @property
    def labels(self) -> list[str]:
        return [t.label for t in self.stress_tests]

    def get(self, label: str) -> Optional[StressTest]:
        """First stress test with the given label, or None."""
        for test in self.stress_tests:
            if test.label == label:
                return test
        return None
