#!/usr/bin/env python3
"""
XSD Validator - CLI Entry Point
===============================

Command-line interface for validating an XML document against an XSD schema.
This file is intentionally minimal, delegating all logic to specialized services.

Architecture:
- Services: Validation workflow
- Managers: File system access
- CLI: User interface (parsing, formatting)
- Core: Settings
- Validators: Path gate and validation engine

Usage:
    python Validator_CLI.py document.xml schema.xsd
    python Validator_CLI.py document.xml schema.xsd --engine xmlschema
    python Validator_CLI.py document.xml --well-formed-only
"""

import logging
import sys
from typing import List, Optional

# Service layer
from services import ValidationService

# CLI layer
from cli import CommandParser, OutputFormatter

from core.settings import (
    EXIT_INTERRUPTED,
    EXIT_INVALID,
    EXIT_USAGE,
    EXIT_VALID,
    LOG_FORMAT,
)
from validators import SchemaValidator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """
    Configure root logging for a CLI run.

    Args:
        level: Logging level name
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def run_validation(args) -> int:
    """
    Run the validation requested on the command line.

    Args:
        args: Parsed arguments namespace

    Returns:
        Process exit code
    """
    validator = SchemaValidator(
        engine=args.engine,
        base_dir=args.base_dir,
        encoding=args.encoding,
    )
    service = ValidationService(validator)
    formatter = OutputFormatter()

    if args.well_formed_only:
        diagnostics = service.check_well_formed(args.xml)
    else:
        diagnostics = service.validate_files(args.xml, args.schema)

    formatter.print_diagnostics(diagnostics)
    if args.summary:
        formatter.print_summary(service.get_error_summary(diagnostics))

    return EXIT_VALID if service.is_valid(diagnostics) else EXIT_INVALID


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    parser = CommandParser()
    args = parser.parse_args(argv)
    formatter = OutputFormatter()

    if not parser.validate_args(args):
        sys.exit(EXIT_USAGE)

    configure_logging(args.log_level)

    try:
        code = run_validation(args)
    except KeyboardInterrupt:
        formatter.print_warning("Operation cancelled by user")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.exception("Unexpected error")
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(EXIT_INVALID)

    sys.exit(code)


if __name__ == "__main__":
    main()
