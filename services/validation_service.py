"""
Validation Service
==================

Orchestrates validation workflow following Single Responsibility Principle.
Only handles validation orchestration; the checks live in validators/.
"""

from typing import Dict, List, Optional

from validators.diagnostics import Diagnostic, Severity
from validators.schema_validator import SchemaValidator


class ValidationService:
    """
    Service responsible for orchestrating validation process.

    Follows SRP: Only handles validation logic.
    """

    def __init__(self, validator: Optional[SchemaValidator] = None):
        """
        Initialize validation service.

        Args:
            validator: Schema validator (dependency injection)
        """
        self.validator = validator or SchemaValidator()

    def validate_files(self, xml_path: str, schema_path: str) -> List[Diagnostic]:
        """
        Validate an XML file against an XSD file.

        Args:
            xml_path: Path to the XML document
            schema_path: Path to the XSD schema

        Returns:
            Diagnostics in discovery order
        """
        return self.validator.validate_file_against_schema(xml_path, schema_path)

    def validate_text(self, xml: str, schema: str) -> List[Diagnostic]:
        """
        Validate in-memory XML text against in-memory XSD text.

        Args:
            xml: XML document text
            schema: XSD schema text

        Returns:
            Diagnostics in discovery order
        """
        return self.validator.validate_text_against_schema(xml, schema)

    def check_well_formed(self, xml_path: str) -> List[Diagnostic]:
        """
        Check well-formedness only, reported in the same shape as validation.

        Args:
            xml_path: Path to the XML document

        Returns:
            Empty list, or a single error diagnostic
        """
        return self.validator.well_formed_diagnostics(xml_path)

    def is_valid(self, diagnostics: List[Diagnostic]) -> bool:
        """
        Check if a diagnostic list means the document is valid.

        Args:
            diagnostics: Result from one of the validate methods

        Returns:
            True if there is nothing to report
        """
        return not diagnostics

    def count_by_severity(self, diagnostics: List[Diagnostic]) -> Dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for diagnostic in diagnostics:
            counts[diagnostic.severity] += 1
        return counts

    def get_error_summary(self, diagnostics: List[Diagnostic]) -> str:
        """
        Get human-readable error summary.

        Args:
            diagnostics: Result from one of the validate methods

        Returns:
            Error summary string
        """
        if self.is_valid(diagnostics):
            return "No errors"

        counts = self.count_by_severity(diagnostics)
        parts = [f"{counts[Severity.ERROR]} error(s)", f"{counts[Severity.WARNING]} warning(s)"]
        return ", ".join(parts)
