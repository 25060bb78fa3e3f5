# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import shutil
from pathlib import Path

from pathgc_lib.core.error import FileSystemError
from pathgc_lib.core.logger import get_logger

from .common import split_uri
from .interface import FileSystemInterface
from .meta import FileSystemMeta, filesystem

logger = get_logger(__name__)


@filesystem
class LocalFileSystem(FileSystemInterface, metaclass=FileSystemMeta):
    """
    Implementation of FileSystemInterface for the local (or locally mounted) filesystem.
    """

    @staticmethod
    def schemes() -> list[str]:
        return ["file"]

    def exists(self, path: str) -> bool:
        local = LocalFileSystem._toLocal(path)
        try:
            # broken symlinks exist too
            return local.exists() or local.is_symlink()
        except OSError as e:
            raise FileSystemError(
                f"Could not check the existence of '{path}': {e}."
            ) from e

    def delete(self, path: str, recursive: bool = True) -> None:
        local = LocalFileSystem._toLocal(path)
        logger.debug(f"Deleting '{local}' (recursive: {recursive}).")
        try:
            if local.is_dir() and not local.is_symlink():
                if recursive:
                    shutil.rmtree(local)
                else:
                    local.rmdir()
            else:
                local.unlink()
        except FileNotFoundError:
            # deleting a missing path is a no-op
            logger.debug(f"Path '{local}' does not exist. Nothing to delete.")
        except OSError as e:
            raise FileSystemError(f"Could not delete '{path}': {e}.") from e

    def listDir(self, directory: str) -> list[str]:
        local = LocalFileSystem._toLocal(directory)
        try:
            return sorted(str(entry) for entry in local.iterdir())
        except OSError as e:
            raise FileSystemError(f"Could not list directory '{directory}': {e}.") from e

    @staticmethod
    def _toLocal(path: str) -> Path:
        """Strip the `file://` prefix from the path, if present."""
        prefix, rest = split_uri(path)
        if prefix and not prefix.lower().startswith("file://"):
            raise FileSystemError(
                f"Path '{path}' does not belong to the local filesystem."
            )

        if not rest:
            raise FileSystemError(f"Cannot use an empty path ('{path}').")

        return Path(rest)
