"""Writing stress test data back to XML.

Not supported: callers get UnsupportedOperationError and no output is
produced.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional

from stress_scenarios.domain.scenario_set import ScenarioSet
from stress_scenarios.errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


def export_stress_tests(
    scenarios: ScenarioSet, destination: Optional[str | Path | BinaryIO] = None
):
    """Serialize ``scenarios`` to StressTesting XML.

    Always raises UnsupportedOperationError; ``destination`` is never opened
    or written.
    """
    logger.warning("Export of %d stress tests requested but not supported", len(scenarios))
    raise UnsupportedOperationError("export of stress testing data to XML is not supported")
