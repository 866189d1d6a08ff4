import os

import pytest

from amarillo import paths


def test_exists_checks(tmp_path):
    f = tmp_path / "a.txt"
    f.write_bytes(b"x")
    assert paths.file_exists(f) is True
    assert paths.folder_exists(f) is False
    assert paths.folder_exists(tmp_path) is True
    assert paths.file_exists(tmp_path) is False
    assert paths.file_exists(tmp_path / "missing") is False


def test_create_folder_nested_and_idempotent(tmp_path):
    created = paths.create_folder(tmp_path, "one/two")
    assert created.is_dir()
    again = paths.create_folder(tmp_path, "one/two")
    assert again == created


def test_delete_path_removes_tree(tmp_path):
    folder = paths.create_folder(tmp_path, "tree/inner")
    (folder / "f.bin").write_bytes(b"1")
    paths.delete_path(tmp_path / "tree")
    assert not (tmp_path / "tree").exists()


def test_delete_path_file_and_missing(tmp_path):
    f = tmp_path / "f.bin"
    f.write_bytes(b"1")
    paths.delete_path(f)
    assert not f.exists()
    paths.delete_path(tmp_path / "never")
    assert not (tmp_path / "never").exists()


def test_copy_file_copies_content(tmp_path):
    src = tmp_path / "src.bin"
    payload = bytes(range(256)) * 40
    src.write_bytes(payload)
    dst = tmp_path / "dst.bin"
    paths.copy_file(src, dst)
    assert dst.read_bytes() == payload


def test_copy_file_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        paths.copy_file(tmp_path / "nope", tmp_path / "dst")


def test_save_and_load_round_trip(tmp_path):
    f = tmp_path / "data.bin"
    assert paths.save_file(f, b"hello") == 5
    assert paths.load_file(f) == b"hello"
    assert paths.save_file(f, b" world", append=True) == 6
    assert paths.load_file(f) == b"hello world"
    paths.save_file(f, b"new")
    assert paths.load_file(f) == b"new"


def test_load_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        paths.load_file(tmp_path / "missing.bin")
    with pytest.raises(IsADirectoryError):
        paths.load_file(tmp_path)


def test_is_directory(tmp_path):
    f = tmp_path / "f"
    f.write_bytes(b"")
    assert paths.is_directory(tmp_path) is True
    assert paths.is_directory(f) is False


def test_discover_files_splits_files_and_dirs(tmp_path):
    (tmp_path / "b.png").write_bytes(b"")
    (tmp_path / "a.fbx").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    files, dirs = paths.discover_files(tmp_path)
    assert files == ["a.fbx", "b.png"]
    assert dirs == ["sub"]


def test_unique_name_free_and_taken(tmp_path):
    assert paths.unique_name(tmp_path, "tex") == "tex"
    (tmp_path / "tex.png").write_bytes(b"")
    (tmp_path / "tex_01.png").write_bytes(b"")
    assert paths.unique_name(tmp_path, "tex") == "tex_02"


def test_unique_name_ignores_directories(tmp_path):
    (tmp_path / "model").mkdir()
    assert paths.unique_name(tmp_path, "model") == "model"


def test_split_file_path_regular():
    assert paths.split_file_path("assets/models/house.fbx") == ("assets/models/", "house", "fbx")
    assert paths.split_file_path("C:\\dir\\img.png") == ("C:\\dir\\", "img", "png")


def test_split_file_path_no_separator_or_extension():
    assert paths.split_file_path("archive.tar.gz") == ("", "archive.tar", "gz")
    assert paths.split_file_path("README") == ("", "README", "")
    assert paths.split_file_path("dir/README") == ("dir/", "README", "")


def test_split_file_path_dot_in_directory():
    directory, stem, ext = paths.split_file_path("dir.v2/readme")
    assert directory == "dir.v2/"
    assert stem == "readme"
    assert ext == "v2/readme"


def test_has_extension():
    assert paths.has_extension("a/b.png") is True
    assert paths.has_extension("a/b") is False
    assert paths.has_extension("a/b.png", "png") is True
    assert paths.has_extension("a/b.png", "jpg") is False


def test_has_any_extension():
    assert paths.has_any_extension("x.dds", ["png", "dds"]) is True
    assert paths.has_any_extension("x.tga", ["png", "dds"]) is False
    assert paths.has_any_extension("noext", ["png"]) is True


def test_duplicate_file_overwrites(tmp_path):
    src = tmp_path / "s.txt"
    dst = tmp_path / "d.txt"
    src.write_bytes(b"source")
    dst.write_bytes(b"old")
    result = paths.duplicate_file(src, dst)
    assert result == os.fspath(dst)
    assert dst.read_bytes() == b"source"


def test_duplicate_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        paths.duplicate_file(tmp_path / "none", tmp_path / "d")


def test_duplicate_into_folder_picks_unique_name(tmp_path):
    src = tmp_path / "img.png"
    src.write_bytes(b"pixels")
    folder = paths.create_folder(tmp_path, "out")
    first = paths.duplicate_into_folder(src, folder)
    second = paths.duplicate_into_folder(src, folder)
    assert first == f"{os.fspath(folder)}/img.png"
    assert second != first
    assert paths.load_file(second) == b"pixels"
    files, _ = paths.discover_files(folder)
    assert len(files) == 2


def test_rename_file(tmp_path):
    old = tmp_path / "old.txt"
    new = tmp_path / "new.txt"
    old.write_bytes(b"content")
    paths.rename_file(old, new)
    assert not old.exists()
    assert new.read_bytes() == b"content"


def test_rename_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        paths.rename_file(tmp_path / "missing", tmp_path / "other")


def test_normalize_round_trip():
    raw = "a\\b/c\\d"
    assert paths.normalize_path(raw) == "a/b/c/d"
    assert paths.unnormalize_path(raw) == "a\\b\\c\\d"
    assert paths.unnormalize_path(paths.normalize_path(raw)) == paths.unnormalize_path(raw)


def test_resolve_texture_path():
    resolved = paths.resolve_texture_path("models/house.fbx", "textures/wall.png")
    assert resolved == os.path.join("models", "textures/wall.png")
    assert paths.resolve_texture_path("house.fbx", "wall.png") == "wall.png"