"""Command-line interface for sge-acct."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .config import SgeAcctConfig
from .decoder import DecodeError
from .display import console, print_job_report, print_not_found, record_to_json
from .locator import ScanDirection, lookup_job
from .log_config import configure_logging, get_logger
from .reader import AccountingFileError

logger = get_logger(__name__)

# Errors go to stderr so the report on stdout stays clean
err_console = Console(stderr=True)

EXIT_NOT_FOUND = 1
EXIT_IO_ERROR = 2
EXIT_DECODE_ERROR = 3
EXIT_CONFIG_ERROR = 4


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="sge-acct")
@click.argument("accounting_file", type=click.Path(path_type=Path))
@click.option(
    "-j",
    "--job-id",
    type=int,
    default=SgeAcctConfig.DEFAULT_JOB_ID,
    show_default=True,
    help="Job number to look up",
)
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    help="Scan from the end of the file (faster for recent jobs)",
)
@click.option(
    "--header-lines",
    type=click.IntRange(min=0),
    default=None,
    help=f"Preamble lines to skip when the file starts with a comment [default: {SgeAcctConfig.HEADER_LINES}]",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the record as JSON instead of a table",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def lookup(ctx, accounting_file, job_id, reverse, header_lines, as_json, verbose):
    """Show the accounting record of one job.

    Scans ACCOUNTING_FILE for the line whose job number equals --job-id and
    prints every field of it.

    \b
    Exit status:
      0  job found
      1  no job with this ID
      2  accounting file could not be read
      3  matched line does not fit the accounting format
      4  SGE_ACCT_* configuration is unusable

    \b
    Examples:
      sge-acct /opt/sge/default/common/accounting -j 4242
      sge-acct accounting -j 4242 --reverse --json
    """
    configure_logging(verbose)
    try:
        SgeAcctConfig.validate()
    except EnvironmentError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e).rstrip())}")
        ctx.exit(EXIT_CONFIG_ERROR)

    direction = ScanDirection.BACKWARD if reverse else ScanDirection.FORWARD
    logger.debug(f"Looking up job {job_id} in {accounting_file} ({direction.value})")

    try:
        record = lookup_job(accounting_file, job_id, direction, header_lines=header_lines)
    except AccountingFileError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(EXIT_IO_ERROR)
    except DecodeError as e:
        err_console.print(
            f"[red]Error:[/red] job {job_id} in {escape(str(accounting_file))} "
            f"is not a valid accounting record: {escape(str(e))}"
        )
        ctx.exit(EXIT_DECODE_ERROR)

    if record is None:
        print_not_found(job_id, accounting_file, out=console)
        ctx.exit(EXIT_NOT_FOUND)

    if as_json:
        click.echo(record_to_json(record))
    else:
        print_job_report(record, out=console)


if __name__ == "__main__":
    lookup()
