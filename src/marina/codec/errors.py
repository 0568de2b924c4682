"""Parse error type for the boat line codec.

Parse errors carry the offending text and, when known, its line number so
that bulk loading and the CLI can report precisely which record was
rejected.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class ParseError(ValueError):
    """A single line that could not be turned into a ``Boat``.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    text:
        The raw line that was rejected.
    line_number:
        1-based line number within the source file, if available.
    """

    message: str
    text: str = field(default="")
    line_number: int | None = field(default=None)

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"ParseError at line {self.line_number}: {self.message}"
        return f"ParseError: {self.message}"

    # not frozen: contextlib assigns __traceback__ when an error leaves a with block
    def __post_init__(self) -> None:
        self.args = (str(self),)
