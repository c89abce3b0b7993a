"""Per-invocation context passed to command handlers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, TextIO

from appcli.config import Settings


def _stdout() -> TextIO:
    # Resolved at construction time so pytest's capsys replacement is honoured
    return sys.stdout


@dataclass(frozen=True)
class InvocationContext:
    """Everything a handler may touch besides its parsed arguments.

    Attributes:
        settings: Settings loaded once by the dispatcher
        out: Output sink for command results
        clock: Returns the current local time
    """

    settings: Settings = field(default_factory=Settings)
    out: TextIO = field(default_factory=_stdout)
    clock: Callable[[], datetime] = datetime.now

    def writeln(self, text: str = "") -> None:
        """Write a line to the output sink."""
        self.out.write(f"{text}\n")
