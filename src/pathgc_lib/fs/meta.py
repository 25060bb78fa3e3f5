# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABCMeta

from pathgc_lib.core.config import Config
from pathgc_lib.core.error import FileSystemError
from pathgc_lib.core.logger import get_logger

from .common import split_uri
from .interface import FileSystemInterface

logger = get_logger(__name__)


class FileSystemMeta(ABCMeta):
    """
    Metaclass for filesystem classes.
    """

    # registry of supported filesystems, keyed by URI scheme
    _registry: dict[str, type[FileSystemInterface]] = {}

    def __str__(cls: type[FileSystemInterface]):
        """
        Get the string representation of the filesystem class.
        """
        return cls.__name__

    @classmethod
    def register(mcs, fs_cls: type[FileSystemInterface]):
        """
        Register a filesystem class in the metaclass registry under all its schemes.

        Args:
            fs_cls: Subclass of FileSystemInterface to register.
        """
        for scheme in fs_cls.schemes():
            mcs._registry[scheme] = fs_cls

    @classmethod
    def fromScheme(mcs, scheme: str) -> type[FileSystemInterface]:
        """
        Return the filesystem class registered for the given URI scheme.

        Raises:
            FileSystemError: If no class is registered for the scheme.
        """
        try:
            return mcs._registry[scheme.lower()]
        except KeyError as e:
            raise FileSystemError(
                f"No filesystem registered for scheme '{scheme}'."
            ) from e

    @classmethod
    def fromUri(mcs, uri: str, config: Config) -> FileSystemInterface:
        """
        Create a handle of the filesystem identified by the given URI.

        URIs without a scheme refer to the local filesystem.

        Args:
            uri (str): URI of the filesystem, e.g. `hdfs://namenode:8020`.
            config (Config): Configuration passed to the filesystem handle.

        Returns:
            FileSystemInterface: Handle of the filesystem.

        Raises:
            FileSystemError: If no filesystem is registered for the scheme of the URI.
        """
        prefix, _ = split_uri(uri)
        scheme = prefix.split("://")[0] if prefix else "file"

        FileSystem = FileSystemMeta.fromScheme(scheme)
        logger.debug(f"Using filesystem {str(FileSystem)} for '{uri}'.")
        return FileSystem(uri, config)

    @classmethod
    def fromConfig(mcs, config: Config) -> FileSystemInterface:
        """
        Create a handle of the filesystem specified in the configuration.

        Args:
            config (Config): Configuration of pathgc.

        Returns:
            FileSystemInterface: Handle of the configured filesystem.

        Raises:
            FileSystemError: If the configured filesystem is not supported.
        """
        return FileSystemMeta.fromUri(config.filesystem.uri, config)


def filesystem(cls: type[FileSystemInterface]) -> type[FileSystemInterface]:
    """
    Class decorator registering a filesystem implementation in `FileSystemMeta`.
    """
    FileSystemMeta.register(cls)
    return cls
