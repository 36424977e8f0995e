"""Load stress test definitions from a StressTesting XML document.

Every ``StressTest`` must contain all seven sections (an empty section is
fine).  The first problem found aborts the whole load; there is no partial
result.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

from stress_scenarios.config import settings
from stress_scenarios.domain.scenario_set import ScenarioSet, StressTest
from stress_scenarios.errors import ShiftValidationError, StressDataError, StructuralError
from stress_scenarios.parsers.shift_parsers import (
    CAP_FLOOR_VOLATILITIES,
    DISCOUNT_CURVES,
    FX_VOLATILITIES,
    INDEX_CURVES,
    YIELD_CURVES,
    GridSectionSpec,
    parse_scalar_shift,
    parse_shift_grid,
    parse_swaption_vol_shift,
)
from stress_scenarios.parsers.xml_nodes import locate_node, require_attribute, require_child

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def load_stress_tests(
    root: ET.Element,
    *,
    require_fx_vol_shift_type: Optional[bool] = None,
    allow_duplicate_labels: Optional[bool] = None,
) -> ScenarioSet:
    """Build a ScenarioSet from a document root.

    ``root`` is either the ``StressTesting`` element or its parent.  Options
    left as None fall back to the application settings.

    Raises StructuralError or ShiftValidationError on the first problem.
    """
    if require_fx_vol_shift_type is None:
        require_fx_vol_shift_type = settings.REQUIRE_FX_VOL_SHIFT_TYPE
    if allow_duplicate_labels is None:
        allow_duplicate_labels = settings.ALLOW_DUPLICATE_LABELS

    node = locate_node(root, "StressTesting")
    if node is None:
        raise StructuralError(f"StressTesting node not found under <{root.tag}>")

    fx_vol_spec = replace(FX_VOLATILITIES, shift_type_required=require_fx_vol_shift_type)

    tests: list[StressTest] = []
    seen: set[str] = set()
    for test_node in node.findall("StressTest"):
        label = require_attribute(test_node, "id", "StressTesting")
        if label in seen:
            if not allow_duplicate_labels:
                raise ShiftValidationError(f"duplicate stress test label '{label}'")
            logger.warning("Duplicate stress test label %s", label)
        seen.add(label)

        logger.info("Load stress test label %s", label)
        try:
            tests.append(_parse_stress_test(test_node, label, fx_vol_spec))
        except StressDataError as e:
            raise type(e)(f"stress test '{label}': {e}") from e
        logger.info("Loading stress test label %s done", label)

    logger.info("Loading stress tests done: %d loaded", len(tests))
    return ScenarioSet(stress_tests=tuple(tests))


def load_stress_tests_from_string(text: str | bytes, **options: Any) -> ScenarioSet:
    """Parse XML text and load it. Malformed XML raises StructuralError."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise StructuralError(f"invalid stress test XML: {e}") from e
    return load_stress_tests(root, **options)


def load_stress_tests_from_file(path: str | Path, **options: Any) -> ScenarioSet:
    """Read an XML file and load it. Malformed XML raises StructuralError."""
    path = Path(path)
    logger.info("Loading stress tests from %s", path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise StructuralError(f"invalid stress test XML in {path}: {e}") from e
    return load_stress_tests(root, **options)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _parse_stress_test(
    test_node: ET.Element, label: str, fx_vol_spec: GridSectionSpec
) -> StressTest:
    def grid(spec: GridSectionSpec) -> Mapping:
        return _parse_section(
            test_node,
            spec.section,
            spec.child,
            spec.key_attribute,
            lambda node, key: parse_shift_grid(node, spec, key),
        )

    logger.debug("Get discount curve shift parameters for %s", label)
    discount = grid(DISCOUNT_CURVES)
    logger.debug("Get index curve shift parameters for %s", label)
    index = grid(INDEX_CURVES)
    logger.debug("Get yield curve shift parameters for %s", label)
    yield_curves = grid(YIELD_CURVES)
    logger.debug("Get FX spot shift parameters for %s", label)
    fx_spots = _parse_section(test_node, "FxSpots", "FxSpot", "ccypair", parse_scalar_shift)
    logger.debug("Get FX vol shift parameters for %s", label)
    fx_vols = grid(fx_vol_spec)
    logger.debug("Get swaption vol shift parameters for %s", label)
    swaption_vols = _parse_section(
        test_node, "SwaptionVolatilities", "SwaptionVolatility", "ccy", parse_swaption_vol_shift
    )
    logger.debug("Get cap/floor vol shift parameters for %s", label)
    cap_floor_vols = grid(CAP_FLOOR_VOLATILITIES)

    return StressTest(
        label=label,
        discount_curve_shifts=discount,
        index_curve_shifts=index,
        yield_curve_shifts=yield_curves,
        fx_shifts=fx_spots,
        fx_vol_shifts=fx_vols,
        swaption_vol_shifts=swaption_vols,
        cap_floor_vol_shifts=cap_floor_vols,
    )


def _parse_section(
    test_node: ET.Element,
    section: str,
    child: str,
    key_attribute: str,
    parse_entry: Callable[[ET.Element, str], Any],
) -> Mapping:
    """Parse every ``child`` entry of a mandatory ``section`` node, keyed by attribute."""
    section_node = require_child(test_node, section, "StressTest")
    entries: dict[str, Any] = {}
    for entry_node in section_node.findall(child):
        key = require_attribute(entry_node, key_attribute, section)
        if key in entries:
            logger.warning("Duplicate %s %s in %s, last entry wins", child, key, section)
        logger.debug("Loading stress parameters for %s %s", child, key)
        entries[key] = parse_entry(entry_node, key)
    return MappingProxyType(entries)
