# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout pathgc.

Each exception carries an associated exit code used by pathgc commands
to report failures consistently.
"""

from .config import CFG


class PathGCError(Exception):
    """Common exception type for all recoverable pathgc errors."""

    exit_code = CFG.exit_codes.default


class FileSystemError(PathGCError):
    """
    Raised when an operation on the filesystem fails.

    Covers existence checks, deletions, and directory listings failing for any
    infrastructure reason. A missing path is never reported using this error.
    """

    pass


class ParameterError(PathGCError):
    """Raised when the parameters of a cleanup step are invalid or cannot be read."""

    pass
