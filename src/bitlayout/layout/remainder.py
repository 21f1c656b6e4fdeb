"""
Classification of a total bit-width into its residue class modulo 8.

Each residue is a distinct enum member, so later stages can attach
properties to exactly one class instead of comparing integers.
"""

from enum import Enum

BYTE_BITS = 8


class Residue(Enum):
    """Residue class of a total bit-width modulo 8."""
    ZERO_MOD_8 = 0
    ONE_MOD_8 = 1
    TWO_MOD_8 = 2
    THREE_MOD_8 = 3
    FOUR_MOD_8 = 4
    FIVE_MOD_8 = 5
    SIX_MOD_8 = 6
    SEVEN_MOD_8 = 7

    @property
    def marker_name(self) -> str:
        """CamelCase marker name, e.g. ``ThreeMod8``."""
        head, _, _ = self.name.partition("_MOD_")
        return f"{head.capitalize()}Mod8"


def classify(total: int) -> Residue:
    """Map a non-negative total bit-width to its residue class."""
    if total < 0:
        raise ValueError(f"Total bit-width cannot be negative: {total}")
    return Residue(total % BYTE_BITS)
