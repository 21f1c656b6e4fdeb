"""
JSON layout reports for the ``check`` command.

A report lists every record a check run accepted, with its fields, total
width and byte size, plus the rejection (if any) that stopped a target.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..validation.outcome import Layout, ValidationOutcome
from ..logging import get_logger

logger = get_logger(__name__)

REPORT_VERSION = "1.0"
REPORT_FILE_NAME = "layout_report.json"


@dataclass(frozen=True)
class RecordEntry:
    """Single accepted record in the report."""
    target: str                     # Module or file the record came from
    record: str                     # Qualified class name
    total_bits: int
    byte_size: int
    backend: str
    fields: List[Dict[str, Any]]    # name / marker / bits, in declaration order

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LayoutReport:
    """Complete report of one check run."""
    version: str
    generated_at: str
    total_records: int
    records: List[RecordEntry]
    failures: List[Dict[str, Any]]  # One entry per target that failed to validate

    @property
    def passed(self) -> bool:
        return not self.failures

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "generated_at": self.generated_at,
            "total_records": self.total_records,
            "passed": self.passed,
            "records": [record.to_dict() for record in self.records],
            "failures": self.failures,
        }


def failure_entry(target: str, error: Exception, outcome: Optional[ValidationOutcome] = None) -> Dict[str, Any]:
    entry = {"target": target, "error": type(error).__name__, "message": str(error)}
    if outcome is not None:
        entry["outcome"] = outcome.to_dict()
    return entry


def build_report(layouts: Sequence[Tuple[str, Layout]], failures: Optional[List[Dict[str, Any]]] = None) -> LayoutReport:
    """
    Build a report from accepted layouts.

    Args:
        layouts: (target, Layout) pairs in check order
        failures: Failure entries from failure_entry()

    Returns:
        LayoutReport
    """
    records = []
    for target, layout in layouts:
        layout_dict = layout.to_dict()
        records.append(RecordEntry(
            target=target,
            record=layout.record,
            total_bits=layout.total_bits,
            byte_size=layout.byte_size,
            backend=layout.backend,
            fields=layout_dict["fields"],
        ))

    return LayoutReport(
        version=REPORT_VERSION,
        generated_at=datetime.now(timezone.utc).isoformat(),
        total_records=len(records),
        records=records,
        failures=list(failures or []),
    )


def write_report_json(report: LayoutReport, output_dir: Path) -> Path:
    """Write the report to ``output_dir/layout_report.json`` and return the path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    report_path = output_dir / REPORT_FILE_NAME

    with open(report_path, 'w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Wrote layout report with {report.total_records} records to {report_path}")
    return report_path


def load_report_json(report_path: Path) -> LayoutReport:
    with open(report_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    records = [RecordEntry(**entry) for entry in data["records"]]
    return LayoutReport(
        version=data["version"],
        generated_at=data["generated_at"],
        total_records=data["total_records"],
        records=records,
        failures=data.get("failures", []),
    )
