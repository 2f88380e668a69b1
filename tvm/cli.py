"""
Command-Line Interface for TVM.

Purpose
-------
Reads calculator commands from standard input (or a file), prints the
result of every ``compute`` on standard output and reports errors on
standard error as ``line N: message``.

Commands
--------
- set VAR VALUE : store a value (VAR is n, i, PV, PMT or FV)
- compute VAR   : solve for VAR from the other four
- clear         : reset every variable to zero

Example Usage
-------------
    # Future value of a 30-year deposit at 0.5% per month
    $ printf 'set n 360\\nset i 0.005\\nset PV 100000\\ncompute FV\\n' | tvm
    FV = -602257.52

    # Report every error instead of stopping at the first one
    $ tvm --keep-going commands.txt

    # Show version
    $ tvm --version
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Optional

import click

from .calculator import Calculator
from .config import AppSettings, SessionConfig, SolverConfig
from .exceptions import InputReadError
from .session import Session

# Version
__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(version=__version__, prog_name="tvm")
@click.argument(
    "input_file",
    type=click.File("rb"),
    default="-",
)
@click.option(
    "--keep-going/--strict",
    "keep_going",
    default=None,
    help="Continue after a failing line instead of stopping (default: strict)"
)
@click.option(
    "--max-line-length",
    type=click.IntRange(min=1),
    default=None,
    help="Read input in pieces of at most N bytes (default: 39)"
)
@click.option(
    "--no-line-limit",
    is_flag=True,
    help="Read each input line whole, however long"
)
@click.option(
    "--max-iterations",
    type=click.IntRange(min=1),
    default=None,
    help="Root finder iteration cap (default: 100000)"
)
@click.option(
    "--tolerance",
    type=click.FloatRange(min=0.0, min_open=True),
    default=None,
    help="Root finder convergence threshold (default: 1e-8)"
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default=None,
    help="Logging level for diagnostics on stderr (default: WARNING)"
)
def main(
    input_file: BinaryIO,
    keep_going: Optional[bool],
    max_line_length: Optional[int],
    no_line_limit: bool,
    max_iterations: Optional[int],
    tolerance: Optional[float],
    log_level: Optional[str],
) -> None:
    """
    TVM - Time Value of Money calculator.

    Reads one command per line from INPUT_FILE (standard input by default)
    and exits with status 1 on the first error, or on any error when
    --keep-going is given.
    """
    settings = AppSettings()
    _configure_logging(log_level or settings.log_level)

    session_config = settings.session_config()
    overrides = {}
    if keep_going is not None:
        overrides["strict"] = not keep_going
    if no_line_limit:
        overrides["max_line_length"] = None
    elif max_line_length is not None:
        overrides["max_line_length"] = max_line_length
    if overrides:
        session_config = SessionConfig(**{**session_config.model_dump(), **overrides})

    solver_overrides = {}
    if max_iterations is not None:
        solver_overrides["max_iterations"] = max_iterations
    if tolerance is not None:
        solver_overrides["tolerance"] = tolerance
    solver_config = SolverConfig(**solver_overrides)

    logger.debug("session %s, solver %s", session_config, solver_config)
    session = Session(Calculator(solver_config=solver_config), session_config)

    failed = False
    try:
        for result in session.run(input_file):
            if result.output is not None:
                click.echo(result.output)
            if not result.ok:
                failed = True
                click.echo(result.error_message(), err=True)
    except InputReadError as e:
        click.echo(f"tvm:  {e}", err=True)
        sys.exit(1)

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
