"""XML parsing: tree navigation helpers and per-instrument shift parsers."""
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

__all__ = [
    "GridSectionSpec",
    "DISCOUNT_CURVES",
    "INDEX_CURVES",
    "YIELD_CURVES",
    "FX_VOLATILITIES",
    "CAP_FLOOR_VOLATILITIES",
    "parse_shift_grid",
    "parse_scalar_shift",
    "parse_swaption_vol_shift",
]
