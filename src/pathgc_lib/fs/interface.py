# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC

from pathgc_lib.core.config import Config


class FileSystemInterface(ABC):
    """
    Abstract base class for filesystem integrations.

    Concrete filesystem classes must implement these methods to allow
    the cleanup step to inspect and delete paths uniformly.

    Paths are plain slash-separated strings and may carry a `scheme://authority` prefix.

    All methods should raise FileSystemError when encountering an error.
    A path that does not exist is never an error for `exists`.
    """

    def __init__(self, uri: str, config: Config):
        """
        Initialize a filesystem handle.

        Args:
            uri (str): URI of the filesystem.
            config (Config): Configuration of pathgc.
        """
        self._uri = uri
        self._config = config

    @staticmethod
    def schemes() -> list[str]:
        """
        Return the URI schemes served by the filesystem implementation.

        Returns:
            list[str]: Supported URI schemes (without `://`).
        """
        raise NotImplementedError(
            "schemes method is not implemented for this filesystem implementation"
        )

    def uri(self) -> str:
        """
        Return the URI of the filesystem.

        Returns:
            str: The URI this handle was created for.
        """
        return self._uri

    def exists(self, path: str) -> bool:
        """
        Check whether the specified path exists.

        Args:
            path (str): The path to check.

        Returns:
            bool: True if the path exists, False otherwise.

        Raises:
            FileSystemError: If the existence of the path cannot be determined.
        """
        raise NotImplementedError(
            "exists method is not implemented for this filesystem implementation"
        )

    def delete(self, path: str, recursive: bool = True) -> None:
        """
        Delete the specified path.

        Args:
            path (str): The path to delete.
            recursive (bool): Whether to delete a directory together with all its content.

        Raises:
            FileSystemError: If the path cannot be deleted.
        """
        raise NotImplementedError(
            "delete method is not implemented for this filesystem implementation"
        )

    def listDir(self, directory: str) -> list[str]:
        """
        List all entries of the specified directory.

        Args:
            directory (str): The directory to list.

        Returns:
            list[str]: Paths of all files and directories inside `directory`.

        Raises:
            FileSystemError: If the directory cannot be listed.
        """
        raise NotImplementedError(
            "listDir method is not implemented for this filesystem implementation"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(uri={self._uri!r})"
