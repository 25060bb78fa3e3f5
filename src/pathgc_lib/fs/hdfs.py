# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import subprocess

from pathgc_lib.core.error import FileSystemError
from pathgc_lib.core.logger import get_logger

from .common import split_uri
from .interface import FileSystemInterface
from .meta import FileSystemMeta, filesystem

logger = get_logger(__name__)


@filesystem
class HDFSFileSystem(FileSystemInterface, metaclass=FileSystemMeta):
    """
    Implementation of FileSystemInterface for the Hadoop distributed filesystem.

    All operations are performed using the `hdfs dfs` command-line client.
    Unqualified absolute paths are resolved against the URI of the filesystem.
    """

    @staticmethod
    def schemes() -> list[str]:
        return ["hdfs", "viewfs"]

    def exists(self, path: str) -> bool:
        result = self._runDfs(["-test", "-e", self._qualify(path)], path)

        if result.returncode == 0:
            return True

        # `-test` exits with 1 if the path does not exist; stderr may still carry client warnings
        if result.returncode == 1:
            return False

        raise FileSystemError(
            f"Could not check the existence of '{path}': {result.stderr.strip()}."
        )

    def delete(self, path: str, recursive: bool = True) -> None:
        command = ["-rm", "-r", "-skipTrash"] if recursive else ["-rm", "-skipTrash"]
        result = self._runDfs([*command, self._qualify(path)], path)

        if result.returncode != 0:
            raise FileSystemError(
                f"Could not delete '{path}': {result.stderr.strip()}."
            )

    def listDir(self, directory: str) -> list[str]:
        result = self._runDfs(["-ls", "-C", self._qualify(directory)], directory)

        if result.returncode != 0:
            raise FileSystemError(
                f"Could not list directory '{directory}': {result.stderr.strip()}."
            )

        # split by newline and filter out empty lines
        return [line for line in result.stdout.splitlines() if line.strip()]

    def _qualify(self, path: str) -> str:
        """
        Resolve an unqualified absolute path against the URI of the filesystem.
        """
        if not path:
            raise FileSystemError("Cannot use an empty path.")

        prefix, _ = split_uri(path)
        if prefix or not path.startswith("/"):
            return path

        return self._uri.rstrip("/") + path

    def _runDfs(self, args: list[str], path: str) -> subprocess.CompletedProcess[str]:
        """
        Run `hdfs dfs` with the specified arguments.

        Args:
            args (list[str]): Arguments of the `dfs` subcommand.
            path (str): The path the command operates on. Used in error messages.

        Returns:
            subprocess.CompletedProcess[str]: The finished process.

        Raises:
            FileSystemError: If the client cannot be executed or times out.
        """
        command = [self._config.filesystem.hdfs_binary, "dfs", *args]
        logger.debug(f"Running '{' '.join(command)}'.")

        try:
            return subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._config.filesystem.hdfs_timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise FileSystemError(
                f"Operation on '{path}' timed out after {self._config.filesystem.hdfs_timeout} seconds."
            ) from e
        except OSError as e:
            raise FileSystemError(
                f"Could not run the HDFS client '{self._config.filesystem.hdfs_binary}': {e}."
            ) from e
