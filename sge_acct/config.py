"""Configuration for sge_acct lookups.

All env-var reading is centralised here.  Call load_dotenv() at import time
so the class attrs below pick up values from a .env file if present.

Supported variables:
  SGE_ACCT_HEADER_LINES    size of the accounting file preamble (default 4)
  SGE_ACCT_DEFAULT_JOB_ID  job looked up when none is given (default 1)
  SGE_ACCT_BLOCK_SIZE      bytes read per step when scanning backwards
  SGE_ACCT_LOG_LEVEL       log level used when --verbose is not given
"""

import os

from dotenv import find_dotenv, load_dotenv

# Load .env on import.  Calling this multiple times is harmless.
load_dotenv(find_dotenv())


class SgeAcctConfig:
    # ------------------------------------------------------------ File layout
    # Grid Engine writes "# Version", "#", "# DO NOT MODIFY...", "#"
    HEADER_LINES = int(os.getenv("SGE_ACCT_HEADER_LINES", "4"))

    # ------------------------------------------------------------ Lookup
    DEFAULT_JOB_ID = int(os.getenv("SGE_ACCT_DEFAULT_JOB_ID", "1"))
    BLOCK_SIZE = int(os.getenv("SGE_ACCT_BLOCK_SIZE", str(64 * 1024)))

    # ------------------------------------------------------------ Logging
    LOG_LEVEL = os.getenv("SGE_ACCT_LOG_LEVEL", "WARNING").upper()

    # ------------------------------------------------------------ Validate
    @classmethod
    def validate(cls):
        """Fail fast at startup if the configured values cannot be used."""
        problems = []
        if cls.HEADER_LINES < 0:
            problems.append(f"SGE_ACCT_HEADER_LINES must be >= 0 (got {cls.HEADER_LINES})")
        if cls.BLOCK_SIZE <= 0:
            problems.append(f"SGE_ACCT_BLOCK_SIZE must be > 0 (got {cls.BLOCK_SIZE})")
        if problems:
            raise EnvironmentError(
                "Invalid sge_acct configuration:\n"
                + "".join(f"  {p}\n" for p in problems)
            )
