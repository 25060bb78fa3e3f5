# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Helpers for manipulating slash-separated filesystem paths and URIs.
"""

import posixpath
import re

# matches `scheme://authority` at the start of a path
_URI_PREFIX = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*://[^/]*)(.*)$")


def split_uri(path: str) -> tuple[str, str]:
    """
    Split a path into its `scheme://authority` prefix and the path part.

    Args:
        path (str): Path, optionally qualified with a scheme and an authority.

    Returns:
        tuple[str, str]: The prefix (empty if the path is not qualified)
        and the remaining path.
    """
    if match := _URI_PREFIX.match(path):
        return match.group(1), match.group(2)

    return "", path


def parent_of(path: str) -> str | None:
    """
    Get the parent of a path, keeping its `scheme://authority` prefix.

    Trailing slashes are ignored. The parent of a relative path
    with a single component is the current directory (`.`).

    Args:
        path (str): Path to get the parent of.

    Returns:
        str | None: The parent path or None if `path` is a root.
    """
    prefix, rest = split_uri(path)

    stripped = rest.rstrip("/")
    if not stripped:
        return None

    parent = posixpath.dirname(stripped)
    if not parent:
        return f"{prefix}/" if prefix else "."

    return f"{prefix}{parent}"
