"""Find a job's line in an accounting file and decode it.

A lookup is a single pass over the file in the requested direction that
stops at the first line whose job number matches.  Scanning backward is
faster for recent jobs because the file is append-only; when a job number
is unique both directions return the same line.
"""

import logging
from enum import Enum
from pathlib import Path

from .decoder import decode_line
from .models import JobRecord
from .reader import iter_lines
from .schema import COMMENT_MARKER, FIELD_SEPARATOR, JOB_ID_COLUMN
from .utils import safe_int

logger = logging.getLogger(__name__)


class ScanDirection(str, Enum):
    """Order in which the accounting file is read."""

    FORWARD = "forward"
    BACKWARD = "backward"


def extract_job_id(line: str) -> int | None:
    """Return the job number of a data line, or None if it has none.

    Comment lines, lines with fewer than ``JOB_ID_COLUMN + 1`` fields and
    lines whose job number is not an integer all yield None.

    Examples:
        >>> extract_job_id("all.q:node01:staff:alice:job:42:sge:0")
        42
        >>> extract_job_id("# Version: 8.1.9") is None
        True
    """
    if line.startswith(COMMENT_MARKER):
        return None
    # Only the leading columns are needed to reach the job number
    fields = line.split(FIELD_SEPARATOR, JOB_ID_COLUMN + 1)
    if len(fields) <= JOB_ID_COLUMN:
        return None
    return safe_int(fields[JOB_ID_COLUMN])


def locate_job_line(
    path: str | Path,
    job_id: int,
    direction: ScanDirection = ScanDirection.FORWARD,
    header_lines: int | None = None,
    block_size: int | None = None,
) -> str | None:
    """Return the first line in scan order whose job number is ``job_id``.

    Malformed rows are skipped rather than failing the lookup.

    Args:
        path: Accounting file path
        job_id: Job number to find
        direction: Scan from the start (FORWARD) or the end (BACKWARD)
        header_lines: Preamble size override
        block_size: Backward read size override

    Returns:
        The matching line without its newline, or None if no line matches

    Raises:
        AccountingFileError: If the file cannot be opened or read
    """
    direction = ScanDirection(direction)
    lines = iter_lines(
        path,
        reverse=direction is ScanDirection.BACKWARD,
        header_lines=header_lines,
        block_size=block_size,
    )

    scanned = 0
    skipped = 0
    for line in lines:
        scanned += 1
        if line.startswith(COMMENT_MARKER):
            continue
        line_id = extract_job_id(line)
        if line_id is None:
            skipped += 1
            continue
        if line_id == job_id:
            # Stop reading; closing the generator closes the file
            lines.close()
            logger.debug(f"Found job {job_id} after {scanned} lines ({direction.value})")
            return line

    if skipped:
        logger.debug(f"Skipped {skipped} malformed lines while scanning {path}")
    logger.info(f"No job {job_id} in {path} ({scanned} lines scanned {direction.value})")
    return None


def lookup_job(
    path: str | Path,
    job_id: int,
    direction: ScanDirection = ScanDirection.FORWARD,
    header_lines: int | None = None,
    block_size: int | None = None,
) -> JobRecord | None:
    """Locate a job's accounting line and decode it.

    Returns:
        The decoded JobRecord, or None if the job is not in the file

    Raises:
        AccountingFileError: If the file cannot be opened or read
        DecodeError: If the matched line does not fit the accounting schema
    """
    line = locate_job_line(path, job_id, direction, header_lines, block_size)
    if line is None:
        return None
    return decode_line(line)
