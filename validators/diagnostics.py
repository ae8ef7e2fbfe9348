"""
Diagnostics
===========

Output records of a validation run.

A run never raises for bad input: every problem it finds, from an unsafe
path to a schema violation, becomes a ``Diagnostic`` appended to a
``ValidationRun`` in the order it was discovered.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List


class Severity(str, Enum):
    """Severity reported for a diagnostic."""

    WARNING = "Warning"
    ERROR = "Error"


class ErrorKind(str, Enum):
    """Where a diagnostic came from."""

    PATH_UNSAFE = "PathUnsafe"
    FILE_MISSING = "FileMissing"
    SCHEMA_COMPILE_ERROR = "SchemaCompileError"
    XML_MALFORMED = "XmlMalformed"
    SCHEMA_VIOLATION = "SchemaViolation"
    UNEXPECTED_FAILURE = "UnexpectedFailure"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single located problem.

    Attributes:
        severity: Warning or Error
        message: Human-readable description
        row: 1-based line, 0 when unknown
        column: 1-based column, 0 when unknown
        kind: Origin of the diagnostic
    """

    severity: Severity
    message: str
    row: int = 0
    column: int = 0
    kind: ErrorKind = ErrorKind.SCHEMA_VIOLATION

    @classmethod
    def error(
        cls,
        message: str,
        kind: ErrorKind,
        row: int = 0,
        column: int = 0,
    ) -> "Diagnostic":
        return cls(Severity.ERROR, message, row or 0, column or 0, kind)

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message} ({self.row}:{self.column})"


class ValidationRun:
    """
    Append-only accumulator for one validation call.

    A fresh run is created by every public validation operation and threaded
    through its steps; the list it owns is what the caller gets back.
    """

    def __init__(self):
        self._diagnostics: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        # Consumed one at a time so events seen before a failure are kept
        for diagnostic in diagnostics:
            self.add(diagnostic)

    def error(
        self,
        message: str,
        kind: ErrorKind,
        row: int = 0,
        column: int = 0,
    ) -> None:
        self.add(Diagnostic.error(message, kind, row, column))

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Snapshot of the diagnostics collected so far."""
        return list(self._diagnostics)

    def has_errors(self) -> bool:
        return any(d.is_error for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))
