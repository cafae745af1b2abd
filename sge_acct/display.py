"""Display and output formatting for decoded job records.

This module handles presentation of a JobRecord as a Rich table or JSON.
Every value is rendered without loss so the report can be trusted as a
faithful copy of the accounting line.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import JobRecord
from .schema import FieldKind, FieldSpec

# Shared console instance for report output
console = Console()

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def format_value(spec: FieldSpec, value: Any) -> str:
    """Format one decoded value for display.

    Timestamps keep whole-second precision and floats use repr() so the
    shortest round-trippable text is shown.
    """
    if spec.kind is FieldKind.TIMESTAMP:
        return value.strftime(TIMESTAMP_FORMAT)
    if spec.kind is FieldKind.FLOAT:
        return repr(value)
    return str(value)


def report_rows(record: JobRecord) -> list[tuple[str, str]]:
    """Return (label, formatted value) pairs in column order."""
    return [(spec.label, format_value(spec, value)) for spec, value in record.field_values()]


def print_job_report(record: JobRecord, out: Console | None = None) -> None:
    """Print every field of a job record in a two-column table."""
    out = out or console

    table = Table(title=f"Job {record.job_number}", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    for label, value in report_rows(record):
        table.add_row(label, escape(value))

    out.print(table)


def _json_default(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def record_to_json(record: JobRecord, indent: int | None = 2) -> str:
    """Serialize a job record to JSON with ISO-8601 timestamps."""
    return json.dumps(record.to_dict(), default=_json_default, indent=indent)


def print_not_found(job_id: int, path: str | Path, out: Console | None = None) -> None:
    """Report that no accounting line carries the requested job number."""
    out = out or console
    out.print(f"[yellow]No job with ID {job_id} found in {escape(str(path))}.[/yellow]")
