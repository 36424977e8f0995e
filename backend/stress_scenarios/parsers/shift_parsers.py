"""Parsers for the per-instrument shift entries of a stress test.

Five sections share one shape (shift type, a list of shifts and an aligned
list of periods) and go through ``parse_shift_grid`` driven by a
``GridSectionSpec``.  FX spots carry a single size, and swaption volatilities
carry a sparse expiry x term grid with a parallel fallback.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from stress_scenarios.domain.period import Period, parse_period
from stress_scenarios.domain.shifts import (
    CurveShift,
    ScalarShift,
    ShiftType,
    SwaptionVolShift,
    VolShift1D,
)
from stress_scenarios.errors import ShiftValidationError
from stress_scenarios.parsers.xml_nodes import (
    get_attribute,
    get_child_value,
    get_child_values_as_floats,
    get_child_values_as_periods,
    parse_real,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridSectionSpec:
    """Tags and options for one section parsed by ``parse_shift_grid``."""
    section: str
    child: str
    key_attribute: str
    axis_field: str
    description: str
    factory: Callable[..., Any]
    values_field: str = "Shifts"
    shift_type_required: bool = True


DISCOUNT_CURVES = GridSectionSpec(
    section="DiscountCurves",
    child="DiscountCurve",
    key_attribute="ccy",
    axis_field="ShiftTenors",
    description="discount curve",
    factory=CurveShift,
)

INDEX_CURVES = GridSectionSpec(
    section="IndexCurves",
    child="IndexCurve",
    key_attribute="index",
    axis_field="ShiftTenors",
    description="index curve",
    factory=CurveShift,
)

YIELD_CURVES = GridSectionSpec(
    section="YieldCurves",
    child="YieldCurve",
    key_attribute="name",
    axis_field="ShiftTenors",
    description="yield curve",
    factory=CurveShift,
)

FX_VOLATILITIES = GridSectionSpec(
    section="FxVolatilities",
    child="FxVolatility",
    key_attribute="ccypair",
    axis_field="ShiftExpiries",
    description="FX volatility",
    factory=VolShift1D,
    shift_type_required=False,
)

CAP_FLOOR_VOLATILITIES = GridSectionSpec(
    section="CapFloorVolatilities",
    child="CapFloorVolatility",
    key_attribute="ccy",
    axis_field="ShiftExpiries",
    description="cap/floor volatility",
    factory=VolShift1D,
)


def parse_shift_type(
    node: ET.Element, context: str, required: bool = True
) -> Optional[ShiftType]:
    text = get_child_value(node, "ShiftType", context, required=required)
    if not text:
        return None
    try:
        return ShiftType.parse(text)
    except ValueError as e:
        raise ShiftValidationError(f"{e} in {context}")


def parse_shift_grid(node: ET.Element, spec: GridSectionSpec, instrument: str):
    """Parse one entry of a 1-D section into the record built by ``spec.factory``.

    The shifts and the axis periods must be non-empty and of equal length.
    """
    context = f"{spec.description} '{instrument}' ({spec.section})"
    shift_type = parse_shift_type(node, context, required=spec.shift_type_required)
    if shift_type is None:
        logger.warning("No ShiftType given for %s", context)

    shifts = get_child_values_as_floats(node, spec.values_field, context)
    axis = get_child_values_as_periods(node, spec.axis_field, context)

    if len(shifts) != len(axis):
        raise ShiftValidationError(
            f"number of {spec.axis_field} ({len(axis)}) and {spec.values_field} "
            f"({len(shifts)}) does not match in {context}"
        )
    if not shifts:
        raise ShiftValidationError(f"no shifts provided in {context}")

    return spec.factory(shift_type, axis, shifts)


def parse_scalar_shift(node: ET.Element, instrument: str) -> ScalarShift:
    """Parse an FX spot entry: shift type and a single size, both required."""
    context = f"FX spot '{instrument}' (FxSpots)"
    shift_type = parse_shift_type(node, context)
    size = parse_real(get_child_value(node, "ShiftSize", context, required=True), context)
    return ScalarShift(shift_type=shift_type, size=size)


def parse_swaption_vol_shift(node: ET.Element, instrument: str) -> SwaptionVolShift:
    """Parse a swaption volatility entry.

    Each ``Shifts/Shift`` cell either has both ``expiry`` and ``term``
    attributes (an explicit grid point) or neither (the parallel shift; the
    last such cell wins).  A cell with only one of the two is rejected.
    """
    context = f"swaption volatility '{instrument}' (SwaptionVolatilities)"
    shift_type = parse_shift_type(node, context)
    terms = get_child_values_as_periods(node, "ShiftTerms", context)
    expiries = get_child_values_as_periods(node, "ShiftExpiries", context)

    parallel_shift = 0.0
    cells: dict[tuple[Period, Period], float] = {}

    shifts_node = node.find("Shifts")
    if shifts_node is None:
        logger.debug("No Shifts node for %s, parallel shift is 0", context)
        shift_cells = []
    else:
        shift_cells = shifts_node.findall("Shift")

    for cell in shift_cells:
        expiry = get_attribute(cell, "expiry")
        term = get_attribute(cell, "term")
        value_text = (cell.text or "").strip()

        if not expiry and not term:
            parallel_shift = parse_real(value_text, f"parallel Shift of {context}")
            continue
        if not (expiry and term):
            raise ShiftValidationError(
                f"expiry and term attributes required together on Shift nodes "
                f"in {context} (got expiry='{expiry}', term='{term}')"
            )

        cell_context = f"Shift({expiry}, {term}) of {context}"
        key = (_cell_period(expiry, cell_context), _cell_period(term, cell_context))
        if key[0] not in expiries or key[1] not in terms:
            logger.warning("%s lies outside the declared expiry/term axes", cell_context)
        cells[key] = parse_real(value_text, cell_context)

    return SwaptionVolShift(
        shift_type=shift_type,
        terms=terms,
        expiries=expiries,
        parallel_shift=parallel_shift,
        cells=MappingProxyType(cells),
    )


def _cell_period(text: str, context: str) -> Period:
    try:
        return parse_period(text)
    except ValueError as e:
        raise ShiftValidationError(f"{e} in {context}")
