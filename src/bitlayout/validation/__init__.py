"""
bitlayout Validation

Entry point, outcomes and the two interchangeable byte-alignment backends.
"""

from .outcome import Layout, ValidationOutcome
from .backends import BACKENDS, GateBackend, IndexBackend, ValidationBackend, get_backend
from .entry import bitfield, check_widths, layout_of, multiple_of_eight, records_in, validate_layout

__all__ = [
    "Layout",
    "ValidationOutcome",
    "BACKENDS",
    "GateBackend",
    "IndexBackend",
    "ValidationBackend",
    "get_backend",
    "bitfield",
    "check_widths",
    "layout_of",
    "multiple_of_eight",
    "records_in",
    "validate_layout",
]
