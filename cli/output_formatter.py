"""
Output Formatter
================

Handles console output formatting.
Follows SRP: Only handles output formatting.
"""

import sys
from typing import Iterable

from validators.diagnostics import Diagnostic


class OutputFormatter:
    """
    Formatter for console output.

    Follows SRP: Only handles output formatting.
    """

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        """
        Render one diagnostic as ``severity: message (row:column)``.

        Args:
            diagnostic: Diagnostic to render

        Returns:
            Single-line text
        """
        message = " ".join(diagnostic.message.split())
        return f"{diagnostic.severity.value}: {message} ({diagnostic.row}:{diagnostic.column})"

    def print_diagnostics(self, diagnostics: Iterable[Diagnostic]) -> None:
        """
        Print one line per diagnostic to stdout.

        Args:
            diagnostics: Diagnostics in discovery order
        """
        for diagnostic in diagnostics:
            print(self.format_diagnostic(diagnostic))

    def print_summary(self, summary: str) -> None:
        print(summary, file=sys.stderr)

    def print_error(self, message: str) -> None:
        """
        Print error message.

        Args:
            message: Error message
        """
        print(f"ERROR: {message}", file=sys.stderr)

    def print_warning(self, message: str) -> None:
        """
        Print warning message.

        Args:
            message: Warning message
        """
        print(f"WARNING: {message}", file=sys.stderr)
