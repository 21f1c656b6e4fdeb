"""
Validation results for bitfield records.

A ValidationOutcome is the verdict of one backend on one record. An accepted
record additionally gets a Layout attached to its class.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..layout.fields import FieldDeclaration
from ..layout.remainder import BYTE_BITS, Residue


@dataclass(frozen=True)
class ValidationOutcome:
    """Accepted, or rejected with the backend's diagnostic."""
    accepted: bool
    total_bits: int
    residue: Residue
    backend: str                        # Name of the backend that decided
    record: Optional[str] = None        # Qualified record name, when validating a class
    diagnostic: Optional[str] = None    # Generic backend diagnostic (rejections only)
    message: Optional[str] = None       # Optional human-readable note layered on the diagnostic

    @classmethod
    def accept(cls, total_bits: int, residue: Residue, backend: str,
               record: Optional[str] = None) -> "ValidationOutcome":
        return cls(accepted=True, total_bits=total_bits, residue=residue, backend=backend, record=record)

    @classmethod
    def reject(cls, total_bits: int, residue: Residue, backend: str, diagnostic: str,
               record: Optional[str] = None, message: Optional[str] = None) -> "ValidationOutcome":
        return cls(
            accepted=False,
            total_bits=total_bits,
            residue=residue,
            backend=backend,
            record=record,
            diagnostic=diagnostic,
            message=message,
        )

    @property
    def rejected(self) -> bool:
        return not self.accepted

    @property
    def byte_size(self) -> int:
        """Whole bytes covered by the total width."""
        return self.total_bits // BYTE_BITS

    def describe(self) -> str:
        """One-line human-readable summary."""
        subject = self.record or "layout"
        if self.accepted:
            return f"{subject}: {self.total_bits} bits ({self.byte_size} bytes), accepted by {self.backend} backend"
        if self.message:
            return f"{self.message} [{self.backend}: {self.diagnostic}]"
        return f"{subject}: [{self.backend}] {self.diagnostic}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": self.record,
            "accepted": self.accepted,
            "total_bits": self.total_bits,
            "residue": self.residue.value,
            "residue_marker": self.residue.marker_name,
            "backend": self.backend,
            "diagnostic": self.diagnostic,
            "message": self.message,
        }


@dataclass(frozen=True)
class Layout:
    """Validated layout attached to a record class as ``__bitfield_layout__``."""
    record: str
    fields: Tuple[FieldDeclaration, ...]
    total_bits: int
    backend: str

    @property
    def byte_size(self) -> int:
        return self.total_bits // BYTE_BITS

    def widths(self) -> Tuple[int, ...]:
        return tuple(field.bits for field in self.fields)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": self.record,
            "fields": [{"name": field.name, "marker": field.marker.__name__, "bits": field.bits}
                       for field in self.fields],
            "total_bits": self.total_bits,
            "byte_size": self.byte_size,
            "backend": self.backend,
        }
