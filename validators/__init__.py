"""
Validators Package
==================

This package contains all XML validation logic:
- Path safety gate for caller-supplied file paths
- XSD schema validation with located diagnostics

Modules:
- schema_validator.py: Main validation orchestrator
- path_safety.py: Traversal and containment checks
- engines.py: lxml and xmlschema back ends
- diagnostics.py: Diagnostic records and the per-run accumulator
- errors.py: Recoverable failure kinds
"""

from .diagnostics import Diagnostic, ErrorKind, Severity, ValidationRun
from .engines import ENGINES, LxmlEngine, XmlSchemaEngine, get_engine
from .path_safety import is_path_safe, is_path_within
from .schema_validator import (
    SchemaValidator,
    check_well_formed,
    validate_file_against_schema,
    validate_text_against_schema,
)

__all__ = [
    'Diagnostic',
    'ErrorKind',
    'Severity',
    'ValidationRun',
    'ENGINES',
    'LxmlEngine',
    'XmlSchemaEngine',
    'get_engine',
    'is_path_safe',
    'is_path_within',
    'SchemaValidator',
    'check_well_formed',
    'validate_file_against_schema',
    'validate_text_against_schema',
]
