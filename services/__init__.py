"""
Services Package
================

Business logic layer for the XSD validator.

Services:
- ValidationService: Validation workflow
"""

from .validation_service import ValidationService

__all__ = [
    'ValidationService',
]
