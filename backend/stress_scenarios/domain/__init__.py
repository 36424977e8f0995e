"""Domain records: periods, shift records, stress tests and scenario sets."""
from stress_scenarios.domain.period import Period, TimeUnit, parse_period
from stress_scenarios.domain.shifts import (
    CurveShift,
    ScalarShift,
    ShiftType,
    SwaptionVolShift,
    VolShift1D,
)
from stress_scenarios.domain.scenario_set import ScenarioSet, StressTest

__all__ = [
    "Period",
    "TimeUnit",
    "parse_period",
    "ShiftType",
    "CurveShift",
    "ScalarShift",
    "VolShift1D",
    "SwaptionVolShift",
    "StressTest",
    "ScenarioSet",
]
