"""
Line-oriented command session for TVM.

Purpose
-------
Drives a :class:`~tvm.calculator.Calculator` from a byte stream, one
command per line, and reports a typed :class:`LineResult` for every line.
Nothing here prints or exits: the CLI turns results into output and exit
codes.

Input handling
--------------
- Lines are split on ``\\n`` only; ``\\r`` stays part of the line.
- Every line counts toward the 1-based line number, blank ones included.
- With ``max_line_length`` set, a longer line (newline included) is read
  in pieces of that many bytes, and every piece is numbered and run as a
  line of its own. ``None`` reads whole lines.
- Lines are decoded as UTF-8, undecodable bytes replaced.
- In strict mode iteration ends after the first failing line.

Example
-------
>>> import io
>>> session = Session()
>>> stream = io.BytesIO(b"set n 360\\nset i 0.005\\nset PV 100000\\ncompute FV\\n")
>>> [r.output for r in session.run(stream) if r.output]
['FV = -602257.52']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List, Optional, Union

from .calculator import Calculator
from .commands import Command, parse_command
from .config import SessionConfig
from .exceptions import InputReadError, TVMError

__all__ = [
    "LineResult",
    "Session",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """
    Outcome of one input line.

    Attributes
    ----------
    line_number : int
        1-based position in the input.
    command : Command, optional
        Parsed command; None when the line did not parse.
    output : str, optional
        Text to print for a successful ``compute``.
    error : TVMError, optional
        Failure raised while parsing or executing the line.
    """

    line_number: int
    command: Optional[Command] = None
    output: Optional[str] = None
    error: Optional[TVMError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def error_message(self) -> str:
        """Format the error as ``line N: message``."""
        return f"line {self.line_number}: {self.error}"


class Session:
    """
    Feeds input lines to a calculator.

    Parameters
    ----------
    calculator : Calculator, optional
        Calculator (and therefore state) to drive. A fresh one by default.
    config : SessionConfig, optional
        Strictness and line length limit.
    """

    def __init__(
        self,
        calculator: Optional[Calculator] = None,
        config: Optional[SessionConfig] = None,
    ):
        self.calculator = calculator or Calculator()
        self.config = config or SessionConfig()

    def prepare_line(self, raw: Union[bytes, str]) -> str:
        """Cut *raw* at its first newline and at the byte limit, then decode."""
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        raw = raw.split(b"\n", 1)[0]
        limit = self.config.max_line_length
        if limit is not None:
            raw = raw[:limit]
        return raw.decode("utf-8", errors="replace")

    def split_line(self, raw: bytes) -> List[bytes]:
        """
        Break *raw* into the pieces a fixed-size line buffer reads it in.

        Each piece holds at most ``max_line_length`` bytes, counting the
        trailing newline, so a 39-character command followed by ``\\n``
        becomes the command and then a blank line.

        Examples
        --------
        >>> Session().split_line(b"clear\\n")
        [b'clear\\n']
        >>> [len(p) for p in Session().split_line(b"x" * 80 + b"\\n")]
        [39, 39, 3]
        """
        limit = self.config.max_line_length
        if limit is None or len(raw) <= limit:
            return [raw]
        return [raw[k:k + limit] for k in range(0, len(raw), limit)]

    def process_line(self, raw: Union[bytes, str], line_number: int) -> LineResult:
        """Parse and execute one line; command errors are returned, not raised."""
        line = self.prepare_line(raw)
        command = None
        try:
            command = parse_command(line)
            result = self.calculator.execute(command)
        except TVMError as e:
            logger.debug("line %d failed: %s", line_number, e)
            return LineResult(line_number=line_number, command=command, error=e)
        output = result.format() if result is not None else None
        return LineResult(line_number=line_number, command=command, output=output)

    def run(self, stream: BinaryIO) -> Iterator[LineResult]:
        """
        Process *stream* line by line.

        Yields
        ------
        LineResult
            One per line read, in order. In strict mode the failing line is
            the last one yielded.

        Raises
        ------
        InputReadError
            If reading from *stream* raises OSError.
        """
        line_number = 0
        lines = iter(stream)
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except OSError as e:
                raise InputReadError() from e

            for piece in self.split_line(raw):
                line_number += 1
                result = self.process_line(piece, line_number)
                yield result
                if not result.ok and self.config.strict:
                    return
