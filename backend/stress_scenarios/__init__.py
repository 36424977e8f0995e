"""Stress test scenario definitions loaded from StressTesting XML."""
from stress_scenarios.domain import (
    CurveShift,
    Period,
    ScalarShift,
    ScenarioSet,
    ShiftType,
    StressTest,
    SwaptionVolShift,
    VolShift1D,
    parse_period,
)
from stress_scenarios.errors import (
    ShiftValidationError,
    StressDataError,
    StructuralError,
    UnsupportedOperationError,
)
from stress_scenarios.services.scenario_store import StressScenarioData
from stress_scenarios.services.stress_export import export_stress_tests
from stress_scenarios.services.stress_loader import (
    load_stress_tests,
    load_stress_tests_from_file,
    load_stress_tests_from_string,
)

__version__ = "0.1.0"

__all__ = [
    "Period",
    "parse_period",
    "ShiftType",
    "CurveShift",
    "ScalarShift",
    "VolShift1D",
    "SwaptionVolShift",
    "StressTest",
    "ScenarioSet",
    "StressDataError",
    "StructuralError",
    "ShiftValidationError",
    "UnsupportedOperationError",
    "StressScenarioData",
    "load_stress_tests",
    "load_stress_tests_from_string",
    "load_stress_tests_from_file",
    "export_stress_tests",
]
