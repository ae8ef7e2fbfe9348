"""
Managers Package
================

Coordination layer for the XSD validator.

Managers:
- FileManager: File system operations
"""

from .file_manager import FileManager

__all__ = [
    'FileManager',
]
