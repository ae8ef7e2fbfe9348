"""
Command Parser
==============

Handles CLI argument parsing.
Follows SRP: Only handles command-line argument parsing.
"""

import argparse
import sys
from typing import Any

from core.settings import DEFAULT_ENCODING, DEFAULT_ENGINE, LOG_LEVEL, LOG_LEVELS
from validators.engines import ENGINES


class CommandParser:
    """
    Parser for command-line arguments.

    Follows SRP: Only handles argument parsing.
    """

    def __init__(self):
        """Initialize command parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all options.

        Returns:
            Configured ArgumentParser
        """
        parser = argparse.ArgumentParser(
            prog="xsd-validate",
            description="Validate an XML document against an XSD schema",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Validate a document against a schema
  xsd-validate invoice.xml invoice.xsd

  # Use the pure-Python engine
  xsd-validate invoice.xml invoice.xsd --engine xmlschema

  # Only check that the document is well-formed
  xsd-validate invoice.xml --well-formed-only

  # Refuse any path outside /srv/data
  xsd-validate /srv/data/a.xml /srv/data/a.xsd --base-dir /srv/data

Exit status is 0 when nothing is reported and 1 otherwise.
            """
        )

        parser.add_argument(
            "xml",
            help="XML document to validate"
        )

        parser.add_argument(
            "schema",
            nargs="?",
            help="XSD schema to validate against"
        )

        parser.add_argument(
            "--engine",
            choices=sorted(ENGINES),
            default=DEFAULT_ENGINE,
            help=f"Validation engine (default: {DEFAULT_ENGINE})"
        )

        parser.add_argument(
            "--base-dir",
            help="Reject any file path that does not resolve inside this directory"
        )

        parser.add_argument(
            "--encoding",
            default=DEFAULT_ENCODING,
            help=f"Encoding used to read both files (default: {DEFAULT_ENCODING})"
        )

        parser.add_argument(
            "--well-formed-only",
            action="store_true",
            help="Only check that the XML document is well-formed"
        )

        parser.add_argument(
            "--summary",
            action="store_true",
            help="Print an error/warning count to stderr"
        )

        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=LOG_LEVELS,
            default=LOG_LEVEL,
            help=f"Logging level (default: {LOG_LEVEL})"
        )

        return parser

    def parse_args(self, args=None) -> Any:
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (default: sys.argv)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def validate_args(self, args: Any) -> bool:
        """
        Validate parsed arguments.

        Args:
            args: Parsed arguments namespace

        Returns:
            True if arguments are valid
        """
        if not args.well_formed_only and not args.schema:
            print("Error: a schema is required unless --well-formed-only is given", file=sys.stderr)
            return False

        return True
