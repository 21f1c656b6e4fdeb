"""
Interchangeable strategies for deciding whether a total width is byte-aligned.

Both strategies accept exactly the multiples of 8. They differ only in how
they reach the verdict and in the wording of their (generic) diagnostic:

* ``index`` asserts ``total % 8 == 0`` directly on the arithmetic.
* ``gate`` classifies the total into a residue and requires the
  ByteAligned capability on it.
"""

from typing import Dict, Optional

from ..layout.gate import CapabilityNotImplemented, require_byte_aligned
from ..layout.remainder import BYTE_BITS, classify


class ValidationBackend:
    """Base class. ``check`` returns None on success or a diagnostic string."""

    name = "base"

    def check(self, total_bits: int) -> Optional[str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IndexBackend(ValidationBackend):
    """Static assertion on the raw remainder."""

    name = "index"

    def check(self, total_bits: int) -> Optional[str]:
        remainder = total_bits % BYTE_BITS
        if remainder == 0:
            return None
        return (
            f"constant assertion failed: total bit-width % {BYTE_BITS} == 0 "
            f"(total={total_bits}, remainder={remainder})"
        )


class GateBackend(ValidationBackend):
    """Requires the ByteAligned capability on the classified residue."""

    name = "gate"

    def check(self, total_bits: int) -> Optional[str]:
        residue = classify(total_bits)
        try:
            require_byte_aligned(residue)
        except CapabilityNotImplemented as exc:
            return str(exc)
        return None


BACKENDS: Dict[str, ValidationBackend] = {
    backend.name: backend for backend in (GateBackend(), IndexBackend())
}


def get_backend(name: str) -> ValidationBackend:
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown validation backend: {name!r} (expected one of {', '.join(sorted(BACKENDS))})"
        ) from None
