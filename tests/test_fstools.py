import os
from pathlib import Path

from sysprogkit.fstools import find_images, main, split_path, which


def test_split_path_example():
    parts = split_path("/folder1/folder2/example.txt")
    assert parts.directory == "/folder1/folder2"
    assert parts.name == "example.txt"
    assert parts.extension == "txt"
    assert parts.components == ["/", "folder1", "folder2", "example.txt"]


def test_split_path_without_parent_or_extension():
    parts = split_path("README")
    assert parts.directory == ""
    assert parts.name == "README"
    assert parts.extension == ""


def test_split_path_root_has_no_directory():
    parts = split_path("/")
    assert parts.directory == ""
    assert parts.name == ""


def test_which_finds_first_match(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (second / "tool").write_text("x")
    (first / "tool").write_text("x")
    search = os.pathsep.join([str(first), str(second)])
    assert which("tool", search) == first / "tool"


def test_which_skips_directories_without_file(tmp_path):
    empty = tmp_path / "empty"
    full = tmp_path / "full"
    empty.mkdir()
    full.mkdir()
    (full / "tool").write_text("x")
    assert which("tool", os.pathsep.join([str(empty), str(full)])) == full / "tool"


def test_which_missing_returns_none(tmp_path):
    assert which("absent-tool", str(tmp_path)) is None


def test_find_images(tmp_path):
    (tmp_path / "a.PNG").write_bytes(b"")
    (tmp_path / "b.txt").write_bytes(b"")
    (tmp_path / "noext").write_bytes(b"")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.jpeg").write_bytes(b"")
    (tmp_path / "dir.png").mkdir()
    found = set(find_images(tmp_path))
    assert found == {tmp_path / "a.PNG", sub / "c.jpeg"}


def test_find_images_single_file(tmp_path):
    image = tmp_path / "photo.gif"
    image.write_bytes(b"")
    assert list(find_images(image)) == [image]


def test_find_images_missing_root(tmp_path):
    assert list(find_images(tmp_path / "nowhere")) == []


def test_main_which_found(tmp_path, monkeypatch, capsys):
    (tmp_path / "tool").write_text("x")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert main(["which", "tool"]) == 0
    assert Path(capsys.readouterr().out.strip()) == tmp_path / "tool"


def test_main_which_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert main(["which", "absent-tool"]) == 1


def test_main_images(tmp_path, capsys):
    (tmp_path / "x.webp").write_bytes(b"")
    assert main(["images", str(tmp_path)]) == 0
    assert capsys.readouterr().out.splitlines() == [str(tmp_path / "x.webp")]