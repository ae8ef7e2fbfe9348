"""
File Manager
============

Manages file system access for validation runs.
Follows SRP: Only handles existence checks and reading.
"""

import os


class FileManager:
    """
    Manager responsible for file system operations.

    Callers are expected to have passed every path through the path-safety
    gate before handing it to this class.
    """

    def file_exists(self, filepath: str) -> bool:
        """
        Check if file exists.

        Args:
            filepath: Path to file

        Returns:
            True if the path exists and is a regular file
        """
        return os.path.exists(filepath) and os.path.isfile(filepath)

    def read_text(self, filepath: str, encoding: str) -> str:
        """
        Read a whole file as text.

        Args:
            filepath: Path to file
            encoding: Text encoding

        Returns:
            File contents

        Raises:
            OSError: If the file cannot be opened or read
            UnicodeDecodeError: If the bytes do not match the encoding
        """
        with open(filepath, "r", encoding=encoding) as f:
            return f.read()
