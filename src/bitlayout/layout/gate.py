"""
The ByteAligned capability.

A residue either holds the capability or it does not; the only holder is
``Residue.ZERO_MOD_8``. Requiring the capability on any other residue is
the gate-based rejection signal.
"""

from typing import FrozenSet

from .remainder import Residue

CAPABILITY_NAME = "ByteAligned"

CAPABILITY_HOLDERS: FrozenSet[Residue] = frozenset({Residue.ZERO_MOD_8})


class CapabilityNotImplemented(Exception):
    """Raised when a residue is required to hold a capability it lacks."""

    def __init__(self, residue: Residue, capability: str = CAPABILITY_NAME) -> None:
        self.residue = residue
        self.capability = capability
        super().__init__(f"capability {capability} is not implemented for {residue.marker_name}")


def implements_byte_aligned(residue: Residue) -> bool:
    return residue in CAPABILITY_HOLDERS


def require_byte_aligned(residue: Residue) -> None:
    if not implements_byte_aligned(residue):
        raise CapabilityNotImplemented(residue)
