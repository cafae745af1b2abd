"""Incremental line readers for accounting files.

Accounting files grow without bound, so nothing here reads the whole file:
forward scans iterate the open handle line by line and backward scans read
fixed-size blocks from the end toward the start.  Both directions begin at
the first data line, after the optional preamble.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Iterator

from .config import SgeAcctConfig
from .schema import COMMENT_MARKER

_COMMENT = COMMENT_MARKER.encode()

logger = logging.getLogger(__name__)


class AccountingFileError(RuntimeError):
    """Raised when an accounting file cannot be opened or read.

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot read accounting file {path}: {reason}")


def _decode(raw: bytes) -> str:
    return raw.rstrip(b"\r\n").decode("utf-8", errors="replace")


def data_offset(fh: BinaryIO, header_lines: int) -> int:
    """Return the byte offset of the first data line.

    A preamble is only present when the file's first line is a comment.  In
    that case the first ``header_lines`` lines are skipped whatever they
    contain, and a skipped data-looking line is logged at DEBUG; otherwise
    data starts at offset 0.

    Args:
        fh: Accounting file opened in binary mode
        header_lines: Number of preamble lines

    Returns:
        Offset of the first line after the preamble
    """
    fh.seek(0)
    if header_lines <= 0 or not fh.readline().startswith(_COMMENT):
        return 0
    for number in range(2, header_lines + 1):
        raw = fh.readline()
        if not raw:
            break
        if not raw.startswith(_COMMENT):
            logger.debug(f"Preamble line {number} is not a comment and is skipped: {_decode(raw)[:80]!r}")
    return fh.tell()


def iter_lines_forward(fh: BinaryIO, start: int) -> Iterator[str]:
    """Yield lines from ``start`` to end of file, newline stripped."""
    fh.seek(start)
    for raw in fh:
        yield _decode(raw)


def iter_lines_backward(fh: BinaryIO, stop: int, block_size: int) -> Iterator[str]:
    """Yield lines from end of file back to ``stop``, last line first.

    Reads ``block_size`` bytes at a time, so memory use is bounded by the
    block size plus the longest line.  ``stop`` must be a line start.

    Args:
        fh: Accounting file opened in binary mode
        stop: Offset of the first data line; nothing before it is read
        block_size: Bytes per read

    Yields:
        Lines with the newline stripped, in reverse file order
    """
    position = fh.seek(0, os.SEEK_END)
    # Pieces of the line being assembled, in reverse file order
    pending = []
    # The segment after the final newline is not a line when it is empty
    at_eof = True

    while position > stop:
        size = min(block_size, position - stop)
        position -= size
        fh.seek(position)
        block = fh.read(size)
        if b"\n" not in block:
            pending.append(block)
            continue

        chunks = block.split(b"\n")
        chunks[-1] += b"".join(reversed(pending))
        # First chunk may be the back half of a line that starts earlier
        pending = [chunks.pop(0)]
        for raw in reversed(chunks):
            if at_eof:
                at_eof = False
                if not raw:
                    continue
            yield _decode(raw)

    tail = b"".join(reversed(pending))
    if at_eof and not tail:
        return
    yield _decode(tail)


def iter_lines(
    path: str | Path,
    reverse: bool = False,
    header_lines: int | None = None,
    block_size: int | None = None,
) -> Iterator[str]:
    """Stream the data lines of an accounting file in either direction.

    The file stays open only while the generator runs and is closed when it
    is exhausted, closed, or garbage collected.

    Args:
        path: Accounting file path
        reverse: Read from the end of the file toward the start
        header_lines: Preamble size (default: SgeAcctConfig.HEADER_LINES)
        block_size: Backward read size (default: SgeAcctConfig.BLOCK_SIZE)

    Yields:
        Data lines with the newline stripped

    Raises:
        AccountingFileError: If the file cannot be opened or read
    """
    path = Path(path)
    if header_lines is None:
        header_lines = SgeAcctConfig.HEADER_LINES
    if block_size is None:
        block_size = SgeAcctConfig.BLOCK_SIZE

    try:
        fh = open(path, "rb")
    except OSError as e:
        raise AccountingFileError(path, e) from e

    with fh:
        try:
            start = data_offset(fh, header_lines)
            if reverse:
                yield from iter_lines_backward(fh, start, block_size)
            else:
                yield from iter_lines_forward(fh, start)
        except OSError as e:
            raise AccountingFileError(path, e) from e
