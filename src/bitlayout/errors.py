from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .validation.outcome import ValidationOutcome


class LayoutError(Exception):
    """Base class for every record layout failure."""


class UnknownFieldWidth(LayoutError):
    """Raised when a field's type is not one of the catalog width markers."""

    def __init__(self, annotation: Any, field: Optional[str] = None, record: Optional[str] = None,
                 detail: Optional[str] = None) -> None:
        self.annotation = annotation
        self.field = field
        self.record = record
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        location = ""
        if record_and_field := ".".join(part for part in (self.record, self.field) if part):
            location = f"{record_and_field}: "
        shown = self.annotation if isinstance(self.annotation, str) else getattr(
            self.annotation, "__qualname__", repr(self.annotation)
        )
        message = f"{location}field type `{shown}` does not declare a bit-width"
        if self.detail:
            message += f" ({self.detail})"
        return message


class MisalignedTotal(LayoutError):
    """Raised when a record's total bit-width is not a multiple of 8."""

    def __init__(self, outcome: ValidationOutcome) -> None:
        self.outcome = outcome
        super().__init__(outcome.describe())

    @property
    def total_bits(self) -> int:
        return self.outcome.total_bits

    @property
    def remainder(self) -> int:
        return self.outcome.residue.value
