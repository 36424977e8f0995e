"""Failures raised while loading or exporting stress test data.

Every error carries the offending section and instrument in its message.
A single error aborts the whole load; nothing is aggregated.
"""


class StressDataError(Exception):
    """Base class for stress test data failures."""


class StructuralError(StressDataError, ValueError):
    """A required section, node or attribute is missing, or the XML is unreadable."""


class ShiftValidationError(StressDataError, ValueError):
    """Shift data is present but inconsistent or malformed."""


class UnsupportedOperationError(StressDataError, NotImplementedError):
    """The requested operation is deliberately not implemented."""
