"""Decoded accounting record."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Iterator

from .schema import ACCOUNTING_FIELDS, FieldSpec


@dataclass(frozen=True)
class JobRecord:
    """One fully decoded accounting entry.

    Attributes are declared in file column order and their names match
    ``schema.ACCOUNTING_FIELDS``.  Instances are only built by the decoder
    from a complete 45-field line.
    """

    # Identity
    qname: str
    hostname: str
    group: str
    owner: str
    job_name: str
    job_number: int
    """Job identifier, the lookup key."""
    account: str
    priority: int

    # Timing (UTC)
    submission_time: datetime
    start_time: datetime
    end_time: datetime

    # Outcome, kept as the raw codes written by the scheduler
    failed: str
    exit_status: str

    # Resource usage
    ru_wallclock: float
    ru_utime: float
    ru_stime: float
    ru_maxrss: float
    ru_ixrss: float
    ru_ismrss: float
    ru_idrss: float
    ru_isrss: float
    ru_minflt: float
    ru_majflt: float
    ru_nswap: float
    ru_inblock: float
    ru_oublock: float
    ru_msgsnd: float
    ru_msgrcv: float
    ru_nsignals: float
    ru_nvcsw: float
    ru_nivcsw: float

    project: str
    department: str
    granted_pe: str
    slots: int
    task_number: int

    cpu: float
    mem: float
    io: float
    category: str
    iow: float
    pe_taskid: str
    maxvmem: float

    arid: int
    ar_submission_time: int
    """Raw epoch seconds; 0 when the job used no advance reservation."""

    def field_values(self) -> Iterator[tuple[FieldSpec, Any]]:
        """Yield (FieldSpec, value) pairs in column order."""
        for spec in ACCOUNTING_FIELDS:
            yield spec, getattr(self, spec.name)

    def to_dict(self) -> dict[str, Any]:
        """Return attribute values keyed by name, in column order."""
        return {spec.name: value for spec, value in self.field_values()}


# Keep the dataclass and the schema from drifting apart
if tuple(f.name for f in fields(JobRecord)) != tuple(s.name for s in ACCOUNTING_FIELDS):
    raise RuntimeError("JobRecord attributes do not match the accounting schema")
