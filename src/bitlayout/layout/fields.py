"""
Field extraction for bitfield records.

Reads a record class's declared fields, in declaration order, and resolves
each field's width marker against the catalog.
"""

import inspect
import sys
import typing
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Dict, List, Sequence

from ..catalog.widths import lookup_width
from ..errors import UnknownFieldWidth
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDeclaration:
    """A single (name, width marker) pair from a record definition."""
    name: str
    marker: Any

    @property
    def bits(self) -> int:
        return lookup_width(self.marker)


def _own_annotations(record: type) -> Dict[str, Any]:
    try:
        return dict(inspect.get_annotations(record))
    except Exception as exc:
        # Lazily evaluated annotations fail as a whole when any one of them does
        raise UnknownFieldWidth(getattr(exc, "name", None) or str(exc),
                                record=record.__qualname__, detail=f"{type(exc).__name__}: {exc}") from exc


def _resolve(record: type, name: str, annotation: Any) -> Any:
    if not isinstance(annotation, str):
        return annotation

    module = sys.modules.get(record.__module__)
    module_globals = dict(vars(module)) if module is not None else {}
    # One field per lookup so a failure names the field that caused it
    holder = SimpleNamespace(__annotations__={name: annotation})
    try:
        return typing.get_type_hints(holder, globalns=module_globals, localns=dict(vars(record)))[name]
    except Exception as exc:
        raise UnknownFieldWidth(annotation, field=name, record=record.__qualname__,
                                detail=f"{type(exc).__name__}: {exc}") from exc


def declared_fields(record: type) -> List[FieldDeclaration]:
    """
    Collect the fields a record class declares, preserving declaration order.

    String annotations are evaluated in the namespace of the defining module.
    Every resolved type must be a catalog width marker.

    Args:
        record: The record class

    Returns:
        Ordered list of FieldDeclaration objects

    Raises:
        UnknownFieldWidth: if any field type is not a catalog marker
    """
    fields = []
    for name, annotation in _own_annotations(record).items():
        marker = _resolve(record, name, annotation)
        try:
            lookup_width(marker)
        except UnknownFieldWidth as exc:
            raise UnknownFieldWidth(marker, field=name, record=record.__qualname__) from exc
        fields.append(FieldDeclaration(name=name, marker=marker))

    logger.debug(f"{record.__qualname__}: extracted {len(fields)} fields")
    return fields


def extract_widths(fields: Sequence[FieldDeclaration]) -> List[int]:
    """Resolve each field's BITS constant; same length and order as the input."""
    return [field.bits for field in fields]
