"""SGE accounting - locate and decode job records in Grid Engine accounting files."""

from .config import SgeAcctConfig
from .decoder import DecodeError, decode_fields, decode_line
from .locator import ScanDirection, extract_job_id, locate_job_line, lookup_job
from .models import JobRecord
from .reader import AccountingFileError, iter_lines
from .schema import ACCOUNTING_FIELDS, FIELD_COUNT, JOB_ID_COLUMN, FieldKind, FieldSpec

__all__ = [
    "SgeAcctConfig",
    "DecodeError",
    "decode_fields",
    "decode_line",
    "ScanDirection",
    "extract_job_id",
    "locate_job_line",
    "lookup_job",
    "JobRecord",
    "AccountingFileError",
    "iter_lines",
    "ACCOUNTING_FIELDS",
    "FIELD_COUNT",
    "JOB_ID_COLUMN",
    "FieldKind",
    "FieldSpec",
]
