"""
Recoverable validation failures.

Engines translate library exceptions into these so the validator only has
to know one shape per failure kind. Anything in ``CRITICAL_ERRORS`` is never
turned into a diagnostic.
"""

from typing import Any, List, Optional

from .diagnostics import Diagnostic

CRITICAL_ERRORS = (MemoryError, RecursionError)


class RecoverableValidationError(Exception):
    """Base class for failures that map to diagnostics."""

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        message = self.diagnostics[0].message if self.diagnostics else ""
        super().__init__(message)


class SchemaCompileFailed(RecoverableValidationError):
    """
    The XSD could not be compiled cleanly.

    ``schema`` holds whatever the engine managed to build (a partial schema in
    lax mode) or None when nothing usable exists.
    """

    def __init__(self, diagnostics: List[Diagnostic], schema: Optional[Any] = None):
        super().__init__(diagnostics)
        self.schema = schema


class XmlMalformedError(RecoverableValidationError):
    """The document is not well-formed XML."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__([diagnostic])

    @property
    def diagnostic(self) -> Diagnostic:
        return self.diagnostics[0]
