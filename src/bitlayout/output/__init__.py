"""Layout report output."""

from .report import LayoutReport, RecordEntry, build_report, load_report_json, write_report_json

__all__ = [
    "LayoutReport",
    "RecordEntry",
    "build_report",
    "load_report_json",
    "write_report_json",
]
