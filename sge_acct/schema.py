"""Column layout of a Grid Engine accounting file record.

Each data line holds exactly 45 colon-separated fields in the order below
(see accounting(5)).  The schema is the single source of truth for column
positions, attribute names on JobRecord, conversion kinds and report labels.
"""

from dataclasses import dataclass
from enum import Enum


FIELD_SEPARATOR = ":"
COMMENT_MARKER = "#"


class FieldKind(Enum):
    """Conversion applied to a raw column."""

    TEXT = "text"
    INT = "int"
    FLOAT = "float"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class FieldSpec:
    """One column of the accounting record."""

    name: str
    """Attribute name on JobRecord."""

    kind: FieldKind
    """How the raw text is converted."""

    label: str
    """Human-readable label used in reports."""


_T = FieldKind.TEXT
_I = FieldKind.INT
_F = FieldKind.FLOAT
_TS = FieldKind.TIMESTAMP

ACCOUNTING_FIELDS: tuple[FieldSpec, ...] = (
    # Identity, fields 0-7
    FieldSpec("qname", _T, "Queue"),
    FieldSpec("hostname", _T, "Host"),
    FieldSpec("group", _T, "Group"),
    FieldSpec("owner", _T, "Owner"),
    FieldSpec("job_name", _T, "Job name"),
    FieldSpec("job_number", _I, "Job number"),
    FieldSpec("account", _T, "Account"),
    FieldSpec("priority", _I, "Priority"),
    # Timing, fields 8-10
    FieldSpec("submission_time", _TS, "Submitted"),
    FieldSpec("start_time", _TS, "Started"),
    FieldSpec("end_time", _TS, "Ended"),
    # Outcome, fields 11-12 (raw codes)
    FieldSpec("failed", _T, "Failed"),
    FieldSpec("exit_status", _T, "Exit status"),
    # getrusage(2) counters, fields 13-30
    FieldSpec("ru_wallclock", _F, "Wall clock (s)"),
    FieldSpec("ru_utime", _F, "User CPU time (s)"),
    FieldSpec("ru_stime", _F, "System CPU time (s)"),
    FieldSpec("ru_maxrss", _F, "Max resident set size"),
    FieldSpec("ru_ixrss", _F, "Shared memory size"),
    FieldSpec("ru_ismrss", _F, "Shared stack size"),
    FieldSpec("ru_idrss", _F, "Unshared data size"),
    FieldSpec("ru_isrss", _F, "Unshared stack size"),
    FieldSpec("ru_minflt", _F, "Page reclaims"),
    FieldSpec("ru_majflt", _F, "Page faults"),
    FieldSpec("ru_nswap", _F, "Swaps"),
    FieldSpec("ru_inblock", _F, "Block input operations"),
    FieldSpec("ru_oublock", _F, "Block output operations"),
    FieldSpec("ru_msgsnd", _F, "IPC messages sent"),
    FieldSpec("ru_msgrcv", _F, "IPC messages received"),
    FieldSpec("ru_nsignals", _F, "Signals received"),
    FieldSpec("ru_nvcsw", _F, "Voluntary context switches"),
    FieldSpec("ru_nivcsw", _F, "Involuntary context switches"),
    # Scheduling, fields 31-35
    FieldSpec("project", _T, "Project"),
    FieldSpec("department", _T, "Department"),
    FieldSpec("granted_pe", _T, "Parallel environment"),
    FieldSpec("slots", _I, "Slots"),
    FieldSpec("task_number", _I, "Task number"),
    # Grid Engine usage, fields 36-42
    FieldSpec("cpu", _F, "CPU time (s)"),
    FieldSpec("mem", _F, "Memory integral (GB s)"),
    FieldSpec("io", _F, "I/O operations"),
    FieldSpec("category", _T, "Category"),
    FieldSpec("iow", _F, "I/O wait (s)"),
    FieldSpec("pe_taskid", _T, "PE task ID"),
    FieldSpec("maxvmem", _F, "Max virtual memory (bytes)"),
    # Advance reservation, fields 43-44
    FieldSpec("arid", _I, "Advance reservation ID"),
    FieldSpec("ar_submission_time", _I, "AR submission time (epoch s)"),
)

FIELD_COUNT = 45
FIELD_NAMES = tuple(spec.name for spec in ACCOUNTING_FIELDS)

# Job number column, zero-indexed
JOB_ID_COLUMN = FIELD_NAMES.index("job_number")

if len(ACCOUNTING_FIELDS) != FIELD_COUNT:
    raise RuntimeError(f"accounting schema defines {len(ACCOUNTING_FIELDS)} fields, expected {FIELD_COUNT}")
if JOB_ID_COLUMN != 5:
    raise RuntimeError(f"job_number must be column 5, found at {JOB_ID_COLUMN}")
