"""
bitlayout – definition-time layout validation for bit-packed records.

    from bitlayout import bitfield, B1, B3, B4

    @bitfield
    class Header:
        flag: B1
        kind: B3
        version: B4

A record whose field widths do not add up to a whole number of bytes fails
when its class statement runs, with ``MisalignedTotal``; a field typed with
anything other than ``B0``..``B64`` fails with ``UnknownFieldWidth``.
"""

from .catalog import *  # noqa: F401,F403  (B0..B64)
from .catalog import CATALOG, MARKER_NAMES, WidthMarker, lookup_width, marker_for
from .config import Settings, get_settings, use_settings
from .errors import LayoutError, MisalignedTotal, UnknownFieldWidth
from .layout import FieldDeclaration, Residue, classify, declared_fields, total_width
from .validation import (
    Layout,
    ValidationOutcome,
    bitfield,
    check_widths,
    layout_of,
    multiple_of_eight,
    validate_layout,
)

__version__ = "0.1.0"

__all__ = [
    "CATALOG",
    "MARKER_NAMES",
    "WidthMarker",
    "lookup_width",
    "marker_for",
    "Settings",
    "get_settings",
    "use_settings",
    "LayoutError",
    "MisalignedTotal",
    "UnknownFieldWidth",
    "FieldDeclaration",
    "Residue",
    "classify",
    "declared_fields",
    "total_width",
    "Layout",
    "ValidationOutcome",
    "bitfield",
    "check_widths",
    "layout_of",
    "multiple_of_eight",
    "validate_layout",
    *MARKER_NAMES,
]
