"""Error sinks for lexical diagnostics.

The scanner only ever calls ``report(message, line)``; where the text ends
up is up to the sink.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO


@dataclass(frozen=True)
class Diagnostic:
    message: str
    line: Optional[int] = None

    def __str__(self) -> str:
        # line 0 is treated as "no line", same as None
        if self.line:
            return f"[Line {self.line}]: {self.message}"
        return self.message


class ErrorReporter:
    def report(self, message: str, line: Optional[int] = None) -> None:
        raise NotImplementedError


class ConsoleReporter(ErrorReporter):
    """Writes each diagnostic to a text stream, stderr unless told otherwise."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.error_count = 0

    def report(self, message: str, line: Optional[int] = None) -> None:
        self.error_count += 1
        print(Diagnostic(message, line), file=self.stream or sys.stderr)


class CollectingReporter(ErrorReporter):
    """Keeps diagnostics in memory, optionally forwarding them to another sink."""

    def __init__(self, forward: Optional[ErrorReporter] = None):
        self.forward = forward
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def report(self, message: str, line: Optional[int] = None) -> None:
        self.diagnostics.append(Diagnostic(message, line))
        if self.forward is not None:
            self.forward.report(message, line)


__all__ = ["Diagnostic", "ErrorReporter", "ConsoleReporter", "CollectingReporter"]
