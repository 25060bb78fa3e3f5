# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for the filesystems cleaned up by pathgc.

- `FileSystemInterface`: the abstract handle every filesystem backend implements.
  It defines existence checks, recursive deletion, and directory listing.

- `FileSystemMeta`: a metaclass that registers available backends by URI scheme
  and creates a handle from a URI or from the configuration. The `@filesystem`
  decorator registers implementations automatically.

- `LocalFileSystem` and `HDFSFileSystem`: backends for the local filesystem
  and for HDFS (through the `hdfs dfs` client).
"""

from .common import parent_of, split_uri
from .hdfs import HDFSFileSystem
from .interface import FileSystemInterface
from .local import LocalFileSystem
from .meta import FileSystemMeta, filesystem

__all__ = [
    "FileSystemInterface",
    "FileSystemMeta",
    "HDFSFileSystem",
    "LocalFileSystem",
    "filesystem",
    "parent_of",
    "split_uri",
]
