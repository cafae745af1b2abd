"""Shared fixtures for sge_acct tests."""

from pathlib import Path

import pytest

from tests.helpers import make_line


@pytest.fixture
def write_accounting(tmp_path):
    """Factory writing lines to an accounting file under tmp_path."""

    def _write(lines: list[str], name: str = "accounting", newline: str = "\n",
               trailing_newline: bool = True) -> Path:
        path = tmp_path / name
        text = newline.join(lines)
        if trailing_newline and lines:
            text += newline
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def three_job_file(write_accounting):
    """Accounting file with jobs 1, 2 and 3 and no preamble."""
    return write_accounting([
        make_line(job_number="1", job_name="first"),
        make_line(job_number="2", job_name="second"),
        make_line(job_number="3", job_name="third"),
    ])
