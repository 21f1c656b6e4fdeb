"""
Validation entry point for bitfield records.

``@bitfield`` runs the whole pipeline when the class statement executes:
field extraction, width accumulation, residue classification and the
backend's byte-alignment check. A misaligned record never finishes
defining; the class statement raises instead.
"""

from types import ModuleType
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from ..catalog.widths import marker_for
from ..config import get_settings
from ..errors import MisalignedTotal
from ..layout.accumulator import total_width
from ..layout.fields import FieldDeclaration, declared_fields, extract_widths
from ..layout.gate import implements_byte_aligned
from ..layout.remainder import BYTE_BITS, Residue, classify
from ..logging import get_logger
from .backends import get_backend
from .outcome import Layout, ValidationOutcome

logger = get_logger(__name__)

LAYOUT_ATTRIBUTE = "__bitfield_layout__"


def _misalignment_message(record: Optional[str], total: int, residue: Residue) -> str:
    subject = record or "layout"
    return (
        f"{subject} occupies {total} bits, which is not a whole number of bytes "
        f"({total} % {BYTE_BITS} == {residue.value})"
    )


def validate_layout(
    fields: Sequence[FieldDeclaration],
    backend: Optional[str] = None,
    record: Optional[str] = None,
) -> ValidationOutcome:
    """
    Decide whether an ordered field list occupies a whole number of bytes.

    Args:
        fields: Field declarations in declaration order
        backend: Backend name ("gate" or "index"); defaults to the configured backend
        record: Record name used in diagnostics

    Returns:
        ValidationOutcome (accepted or rejected)

    Raises:
        UnknownFieldWidth: if a field type is not a catalog marker
    """
    settings = get_settings()
    chosen = get_backend(backend or settings.backend)

    widths = extract_widths(fields)
    total = total_width(widths)
    residue = classify(total)
    logger.debug(f"{record or 'layout'}: widths={widths} total={total} residue={residue.marker_name}")

    diagnostic = chosen.check(total)
    if diagnostic is None:
        return ValidationOutcome.accept(total, residue, chosen.name, record=record)

    message = _misalignment_message(record, total, residue) if settings.custom_message else None
    outcome = ValidationOutcome.reject(total, residue, chosen.name, diagnostic, record=record, message=message)
    logger.warning(f"Rejected {outcome.describe()}")
    return outcome


def check_widths(widths: Iterable[int], backend: Optional[str] = None,
                 record: Optional[str] = None) -> ValidationOutcome:
    """Validate a raw list of integer widths, each mapped through the catalog first."""
    fields = [FieldDeclaration(name=f"field_{index}", marker=marker_for(width))
              for index, width in enumerate(widths)]
    return validate_layout(fields, backend=backend, record=record)


def multiple_of_eight(total: int) -> Residue:
    """Return the residue of ``total`` if it holds ByteAligned, else raise MisalignedTotal."""
    residue = classify(total)
    if not implements_byte_aligned(residue):
        diagnostic = get_backend("gate").check(total)
        raise MisalignedTotal(ValidationOutcome.reject(total, residue, "gate", diagnostic))
    return residue


def bitfield(cls: Optional[type] = None, *, backend: Optional[str] = None) -> Union[type, Callable[[type], type]]:
    """
    Class decorator that rejects records whose total width is not a multiple of 8.

    Usable bare (``@bitfield``) or with a backend (``@bitfield(backend="index")``).
    On success the class gets a ``__bitfield_layout__`` attribute and is
    otherwise returned unchanged.

    Raises:
        TypeError: if applied to something other than a class
        UnknownFieldWidth: if a field type is not a catalog marker
        MisalignedTotal: if the total width is not a multiple of 8
    """
    if backend is not None:
        get_backend(backend)

    def wrap(record: Any) -> type:
        if not isinstance(record, type):
            raise TypeError(f"@bitfield can only be applied to a class, got {type(record).__name__}")

        name = record.__qualname__
        fields = declared_fields(record)
        outcome = validate_layout(fields, backend=backend, record=name)
        if outcome.rejected:
            raise MisalignedTotal(outcome)

        setattr(record, LAYOUT_ATTRIBUTE, Layout(
            record=name,
            fields=tuple(fields),
            total_bits=outcome.total_bits,
            backend=outcome.backend,
        ))
        logger.debug(outcome.describe())
        return record

    if cls is None:
        return wrap
    return wrap(cls)


def layout_of(record: type) -> Layout:
    """Return the validated layout of a ``@bitfield`` record."""
    layout = record.__dict__.get(LAYOUT_ATTRIBUTE)
    if layout is None:
        raise TypeError(f"{record.__qualname__} is not a @bitfield record")
    return layout


def records_in(module: ModuleType) -> List[type]:
    """Classes defined in ``module`` that passed ``@bitfield`` validation, in definition order."""
    return [
        value for value in vars(module).values()
        if isinstance(value, type)
        and value.__module__ == module.__name__
        and LAYOUT_ATTRIBUTE in value.__dict__
    ]
