import os

import pytest

from deploykit.artifacts import walk_dir


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x")


def test_lists_files_relative(tmp_path):
    touch(tmp_path / "index.html")
    touch(tmp_path / "css" / "site.css")
    result = walk_dir(str(tmp_path))
    assert sorted(result) == sorted(["index.html", os.path.join("css", "site.css")])


def test_directories_are_skipped(tmp_path):
    (tmp_path / "empty").mkdir()
    touch(tmp_path / "a.txt")
    assert walk_dir(str(tmp_path)) == ["a.txt"]


def test_lexical_walk_order(tmp_path):
    touch(tmp_path / "b.txt")
    touch(tmp_path / "a" / "z.txt")
    touch(tmp_path / "c" / "y.txt")
    assert walk_dir(str(tmp_path)) == [
        os.path.join("a", "z.txt"),
        "b.txt",
        os.path.join("c", "y.txt"),
    ]


def test_empty_directory(tmp_path):
    assert walk_dir(str(tmp_path)) == []


def test_missing_directory(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(FileNotFoundError, match="does not exist"):
        walk_dir(str(missing))