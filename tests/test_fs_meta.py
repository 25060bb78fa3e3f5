# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from pathgc_lib.core.config import Config, FileSystemSettings
from pathgc_lib.core.error import FileSystemError
from pathgc_lib.fs import (
    FileSystemInterface,
    FileSystemMeta,
    HDFSFileSystem,
    LocalFileSystem,
    filesystem,
)


@pytest.mark.parametrize(
    "scheme, expected",
    [
        ("file", LocalFileSystem),
        ("hdfs", HDFSFileSystem),
        ("viewfs", HDFSFileSystem),
        ("HDFS", HDFSFileSystem),
    ],
)
def test_from_scheme(scheme, expected):
    assert FileSystemMeta.fromScheme(scheme) is expected


def test_from_scheme_unknown_raises():
    with pytest.raises(
        FileSystemError, match="No filesystem registered for scheme 's3'"
    ):
        FileSystemMeta.fromScheme("s3")


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("file:///", LocalFileSystem),
        ("/", LocalFileSystem),
        ("hdfs://nn:8020", HDFSFileSystem),
        ("viewfs://cluster/", HDFSFileSystem),
    ],
)
def test_from_uri(uri, expected):
    fs = FileSystemMeta.fromUri(uri, Config())

    assert isinstance(fs, expected)
    assert fs.uri() == uri


def test_from_config():
    config = Config(filesystem=FileSystemSettings(uri="hdfs://nn:8020"))
    fs = FileSystemMeta.fromConfig(config)

    assert isinstance(fs, HDFSFileSystem)
    assert fs.uri() == "hdfs://nn:8020"


def test_str_of_filesystem_class():
    assert str(LocalFileSystem) == "LocalFileSystem"


def test_filesystem_decorator_registers_class(monkeypatch):
    monkeypatch.setattr(FileSystemMeta, "_registry", dict(FileSystemMeta._registry))

    @filesystem
    class MemoryFileSystem(FileSystemInterface, metaclass=FileSystemMeta):
        @staticmethod
        def schemes() -> list[str]:
            return ["mem"]

    fs = FileSystemMeta.fromUri("mem://bucket", Config())

    assert isinstance(fs, MemoryFileSystem)


def test_interface_methods_not_implemented():
    fs = FileSystemInterface("mem://", Config())

    with pytest.raises(NotImplementedError):
        fs.exists("/x")
    with pytest.raises(NotImplementedError):
        fs.delete("/x")
    with pytest.raises(NotImplementedError):
        fs.listDir("/x")
