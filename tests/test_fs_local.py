# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from pathgc_lib.core.config import Config
from pathgc_lib.core.error import FileSystemError
from pathgc_lib.fs.local import LocalFileSystem


@pytest.fixture
def fs():
    return LocalFileSystem("file:///", Config())


def test_local_schemes():
    assert LocalFileSystem.schemes() == ["file"]


def test_local_uri(fs):
    assert fs.uri() == "file:///"


def test_local_exists(tmp_path, fs):
    (tmp_path / "dir").mkdir()
    (tmp_path / "file.txt").write_text("x")

    assert fs.exists(str(tmp_path / "dir"))
    assert fs.exists(str(tmp_path / "file.txt"))
    assert not fs.exists(str(tmp_path / "missing"))


def test_local_exists_with_file_prefix(tmp_path, fs):
    (tmp_path / "dir").mkdir()

    assert fs.exists(f"file://{tmp_path / 'dir'}")


def test_local_exists_broken_symlink(tmp_path, fs):
    link = tmp_path / "link"
    link.symlink_to(tmp_path / "missing")

    assert fs.exists(str(link))


def test_local_delete_directory_recursively(tmp_path, fs):
    directory = tmp_path / "dir"
    (directory / "sub").mkdir(parents=True)
    (directory / "sub" / "file.txt").write_text("content")

    fs.delete(str(directory))

    assert not directory.exists()
    assert tmp_path.exists()


def test_local_delete_file(tmp_path, fs):
    file = tmp_path / "file.txt"
    file.write_text("x")

    fs.delete(str(file))

    assert not file.exists()


def test_local_delete_symlink_keeps_target(tmp_path, fs):
    target = tmp_path / "target"
    target.mkdir()
    (target / "file.txt").write_text("x")
    link = tmp_path / "link"
    link.symlink_to(target)

    fs.delete(str(link))

    assert not link.exists()
    assert (target / "file.txt").exists()


def test_local_delete_missing_path_is_noop(tmp_path, fs):
    fs.delete(str(tmp_path / "missing"))


def test_local_delete_non_recursive_non_empty_raises(tmp_path, fs):
    directory = tmp_path / "dir"
    directory.mkdir()
    (directory / "file.txt").write_text("x")

    with pytest.raises(FileSystemError, match="Could not delete"):
        fs.delete(str(directory), recursive=False)

    assert directory.exists()


def test_local_delete_non_recursive_empty(tmp_path, fs):
    directory = tmp_path / "dir"
    directory.mkdir()

    fs.delete(str(directory), recursive=False)

    assert not directory.exists()


def test_local_list_dir(tmp_path, fs):
    (tmp_path / "b").mkdir()
    (tmp_path / "a.txt").write_text("x")

    assert fs.listDir(str(tmp_path)) == [
        str(tmp_path / "a.txt"),
        str(tmp_path / "b"),
    ]


def test_local_list_empty_dir(tmp_path, fs):
    assert fs.listDir(str(tmp_path)) == []


def test_local_list_missing_dir_raises(tmp_path, fs):
    with pytest.raises(FileSystemError, match="Could not list directory"):
        fs.listDir(str(tmp_path / "missing"))


def test_local_rejects_foreign_scheme(fs):
    with pytest.raises(FileSystemError, match="does not belong to the local filesystem"):
        fs.exists("hdfs://nn:8020/wd")


def test_local_rejects_empty_path(fs):
    with pytest.raises(FileSystemError, match="empty path"):
        fs.delete("")
