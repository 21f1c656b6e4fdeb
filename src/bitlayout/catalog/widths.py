"""
Closed catalog of bit-width marker types.

Every legal field width is one of the generated marker classes ``B0``..``B64``.
Each marker is a class (so it reads naturally as an annotation) carrying its
width as the class constant ``BITS``. The markers are generated from a single
width-keyed table, ``CATALOG``, which is also the only lookup path: a type
counts as a width marker only if it is the exact object stored in that table.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..errors import UnknownFieldWidth

MIN_WIDTH = 0
MAX_WIDTH = 64

_sealed = False


class WidthMarkerMeta(type):
    """Metaclass for width markers: uninhabited, printable by name."""

    def __call__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a width marker and cannot be instantiated")

    def __repr__(cls) -> str:
        return cls.__name__


class WidthMarker(metaclass=WidthMarkerMeta):
    """Base of every catalog marker. ``BITS`` is the declared field width."""

    BITS: int

    def __init_subclass__(cls, **kwargs) -> None:
        if _sealed:
            raise TypeError(
                f"cannot define width marker {cls.__name__}: the width catalog is closed "
                f"(B{MIN_WIDTH}..B{MAX_WIDTH})"
            )
        super().__init_subclass__(**kwargs)


def _generate_specifiers() -> Dict[int, WidthMarkerMeta]:
    markers = {}
    for width in range(MIN_WIDTH, MAX_WIDTH + 1):
        name = f"B{width}"
        markers[width] = WidthMarkerMeta(
            name,
            (WidthMarker,),
            {"BITS": width, "__module__": __name__, "__qualname__": name, "__slots__": ()},
        )
    return markers


CATALOG: Mapping[int, WidthMarkerMeta] = MappingProxyType(_generate_specifiers())
_sealed = True

globals().update({marker.__name__: marker for marker in CATALOG.values()})

MARKER_NAMES = tuple(marker.__name__ for marker in CATALOG.values())


def is_width_marker(obj: Any) -> bool:
    """Return True only for the exact marker objects held in the catalog."""
    bits = getattr(obj, "BITS", None)
    if type(bits) is not int:
        return False
    return CATALOG.get(bits) is obj


def lookup_width(annotation: Any) -> int:
    """
    Resolve a field annotation to its bit-width.

    Raises:
        UnknownFieldWidth: if the annotation is not a catalog marker
    """
    if not is_width_marker(annotation):
        raise UnknownFieldWidth(annotation)
    return annotation.BITS


def marker_for(width: Any) -> WidthMarkerMeta:
    """
    Return the catalog marker for an integer width.

    Raises:
        UnknownFieldWidth: for non-integers and widths outside 0..64
    """
    if type(width) is not int:
        raise UnknownFieldWidth(repr(width), detail="width must be an integer")
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise UnknownFieldWidth(f"B{width}", detail=f"catalog covers {MIN_WIDTH}..{MAX_WIDTH} bits")
    return CATALOG[width]


__all__ = [
    "CATALOG",
    "MARKER_NAMES",
    "MAX_WIDTH",
    "MIN_WIDTH",
    "WidthMarker",
    "WidthMarkerMeta",
    "is_width_marker",
    "lookup_width",
    "marker_for",
    *MARKER_NAMES,
]
