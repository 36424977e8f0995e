"""Holder for the currently loaded ScenarioSet."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from stress_scenarios.domain.scenario_set import ScenarioSet
from stress_scenarios.services.stress_export import export_stress_tests
from stress_scenarios.services.stress_loader import (
    load_stress_tests,
    load_stress_tests_from_file,
    load_stress_tests_from_string,
)

logger = logging.getLogger(__name__)


class StressScenarioData:
    """Keeps the last successfully loaded ScenarioSet.

    Every load builds a fresh ScenarioSet and swaps it in only when the load
    succeeds, so nothing from an earlier document survives a reload and a
    failed reload leaves the previous data untouched.
    """

    _instance: "StressScenarioData | None" = None

    def __init__(self) -> None:
        self._data = ScenarioSet()
        self._loaded = False
        self._source: str | None = None

    @classmethod
    def get(cls) -> "StressScenarioData":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton, mainly for testing."""
        cls._instance = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def from_xml(self, root: ET.Element, **options: Any) -> ScenarioSet:
        return self._replace(load_stress_tests(root, **options), "<xml>")

    def from_string(self, text: str | bytes, **options: Any) -> ScenarioSet:
        return self._replace(load_stress_tests_from_string(text, **options), "<string>")

    def from_file(self, path: str | Path, **options: Any) -> ScenarioSet:
        return self._replace(load_stress_tests_from_file(path, **options), str(path))

    def to_xml(self) -> ET.Element:
        return export_stress_tests(self._data)

    def _replace(self, data: ScenarioSet, source: str) -> ScenarioSet:
        self._data = data
        self._loaded = True
        self._source = source
        logger.info("Stress scenario data replaced from %s: %d tests", source, len(data))
        return data

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def data(self) -> ScenarioSet:
        return self._data

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_status(self) -> dict[str, Any]:
        if not self._loaded:
            return {"status": "not_loaded"}
        return {
            "status": "loaded",
            "source": self._source,
            "stress_test_count": len(self._data),
            "labels": self._data.labels,
        }
