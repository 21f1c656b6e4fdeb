"""
bitlayout Layout Pipeline

Field extraction, width accumulation, residue classification and the
ByteAligned gate that together decide whether a record is byte-sized.
"""

from .fields import FieldDeclaration, declared_fields, extract_widths
from .accumulator import total_width
from .remainder import Residue, classify
from .gate import CAPABILITY_HOLDERS, CapabilityNotImplemented, implements_byte_aligned, require_byte_aligned

__all__ = [
    "FieldDeclaration",
    "declared_fields",
    "extract_widths",
    "total_width",
    "Residue",
    "classify",
    "CAPABILITY_HOLDERS",
    "CapabilityNotImplemented",
    "implements_byte_aligned",
    "require_byte_aligned",
]
