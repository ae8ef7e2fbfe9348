"""Path checks applied before any file named by a caller is opened."""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote

logger = logging.getLogger(__name__)

PathInput = Union[str, "os.PathLike[str]", None]

# Primary and alternate separators of the host ("/" on POSIX, "\\" and "/" on Windows)
PLATFORM_SEPARATORS = "".join(sep for sep in (os.sep, os.altsep) if sep)
_TRAVERSAL_SEGMENT = ".."


def _decode(path: PathInput) -> Optional[str]:
    """Return the percent-decoded path, or None when it is not a usable string."""
    if path is None:
        return None
    try:
        raw = os.fspath(path)
    except TypeError:
        return None
    if not isinstance(raw, str) or not raw.strip():
        return None
    # errors="strict" turns undecodable escapes such as %ff into a rejection
    return unquote(raw, errors="strict")


def _normalize(path: str) -> str:
    if "\x00" in path:
        raise ValueError("embedded null character in path")
    return os.path.abspath(path)


def has_traversal_segment(path: str, separators: str = PLATFORM_SEPARATORS) -> bool:
    """Return True if any non-empty segment of path, split on separators, is exactly ".."."""
    pattern = "[" + re.escape(separators) + "]"
    segments = [part for part in re.split(pattern, path) if part]
    return _TRAVERSAL_SEGMENT in segments


def is_path_safe(path: PathInput) -> bool:
    """
    Decide whether a caller-supplied path may be opened.

    This is a syntactic gate: the path is percent-decoded, split on the
    host's separators and rejected if any segment is exactly "..", or if it cannot be
    normalized to an absolute path. It does not check the result against a
    root directory; see is_path_within for that.

    Args:
        path: Path string (or os.PathLike) to check

    Returns:
        True if the path is safe to open
    """
    try:
        decoded = _decode(path)
    except UnicodeDecodeError:
        logger.debug("Rejected path with undecodable escapes: %r", path)
        return False
    if decoded is None:
        return False

    if has_traversal_segment(decoded):
        logger.debug("Rejected path with traversal segment: %r", path)
        return False

    try:
        _normalize(decoded)
    except (TypeError, ValueError) as exc:
        logger.debug("Rejected path that failed normalization: %r (%s)", path, exc)
        return False
    return True


def is_path_within(path: PathInput, base_dir: PathInput) -> bool:
    """
    Stricter containment check: the resolved path must be base_dir or below it.

    Not part of the default gate. Callers opt in by configuring a base
    directory; it is applied after is_path_safe, never instead of it.
    """
    try:
        decoded = _decode(path)
        root_decoded = _decode(base_dir)
        if decoded is None or root_decoded is None:
            return False
        resolved = Path(_normalize(decoded)).resolve()
        root = Path(_normalize(root_decoded)).resolve()
    except (UnicodeDecodeError, TypeError, ValueError, OSError):
        return False
    return resolved == root or resolved.is_relative_to(root)
