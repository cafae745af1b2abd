"""Schema-driven decoding of accounting lines into JobRecord objects.

The decoder walks ``schema.ACCOUNTING_FIELDS`` against the split line and
converts each column by its declared kind.  The first column that cannot be
converted aborts the decode with a DecodeError naming its position; a
partially populated record is never returned.
"""

import logging
from typing import Any, Callable, Sequence

from .models import JobRecord
from .schema import ACCOUNTING_FIELDS, FIELD_COUNT, FIELD_SEPARATOR, FieldKind
from .utils import parse_epoch, parse_float, parse_int

logger = logging.getLogger(__name__)


_CONVERTERS: dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.TEXT: str,
    FieldKind.INT: parse_int,
    FieldKind.FLOAT: parse_float,
    FieldKind.TIMESTAMP: parse_epoch,
}


class DecodeError(ValueError):
    """Raised when an accounting line does not fit the 45-field schema.

    Attributes:
        position: Zero-based column index of the first offending field
        field: Schema name for that column, or None past the schema end
        value: Raw text of the column, or None if the column is missing
        reason: Short description of the failure
    """

    def __init__(self, position: int, field: str | None, value: str | None, reason: str):
        self.position = position
        self.field = field
        self.value = value
        self.reason = reason
        where = f"field {position}" + (f" ({field})" if field else "")
        super().__init__(f"{where}: {reason}")


def decode_fields(fields: Sequence[str]) -> JobRecord:
    """Convert an ordered sequence of 45 raw fields into a JobRecord.

    Args:
        fields: Colon-split columns of one accounting line, in file order

    Returns:
        Fully populated JobRecord

    Raises:
        DecodeError: On a field count mismatch or the first failed conversion
    """
    if len(fields) != FIELD_COUNT:
        position = min(len(fields), FIELD_COUNT)
        field = ACCOUNTING_FIELDS[position].name if position < FIELD_COUNT else None
        value = fields[position] if position < len(fields) else None
        raise DecodeError(
            position, field, value,
            f"expected {FIELD_COUNT} fields, got {len(fields)}",
        )

    values = {}
    for position, (spec, raw) in enumerate(zip(ACCOUNTING_FIELDS, fields)):
        try:
            values[spec.name] = _CONVERTERS[spec.kind](raw)
        except ValueError as e:
            raise DecodeError(position, spec.name, raw, f"invalid {spec.kind.value}: {e}") from e

    record = JobRecord(**values)
    logger.debug(f"Decoded job {record.job_number} ({record.job_name}) from {record.hostname}")
    return record


def decode_line(line: str) -> JobRecord:
    """Split one accounting line on the separator and decode it.

    A trailing newline (``\\n`` or ``\\r\\n``) is ignored.
    """
    return decode_fields(line.rstrip("\r\n").split(FIELD_SEPARATOR))
