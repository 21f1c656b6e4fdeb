"""
bitlayout Width Catalog

The 65 width markers ``B0``..``B64`` that are the only legal field-width
declarations for a bitfield record.
"""

from .widths import *  # noqa: F401,F403  (re-exports B0..B64)
from .widths import __all__
