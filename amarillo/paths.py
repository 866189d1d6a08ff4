"""File-system helpers: existence checks, copying, buffered load/save and path splitting."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, Union

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_COPY_CHUNK = 4096
_UNIQUE_ATTEMPTS = 50


def folder_exists(route: PathLike) -> bool:
    """True if route exists and is a directory."""
    return Path(route).is_dir()


def file_exists(route: PathLike) -> bool:
    """True if route exists and is a regular file."""
    return Path(route).is_file()


def create_folder(route: PathLike, folder_name: PathLike) -> Path:
    """Create folder_name (and any missing parents) under route; existing folders are fine."""
    folder = Path(route) / folder_name
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def delete_path(route: PathLike) -> None:
    """Delete a file, or a folder with everything in it; a missing path is ignored."""
    target = Path(route)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()


def copy_file(source: PathLike, destination: PathLike) -> None:
    """Copy source to destination in fixed-size chunks, replacing the destination."""
    with open(source, "rb") as src, open(destination, "wb") as dst:
        shutil.copyfileobj(src, dst, _COPY_CHUNK)


def save_file(file: PathLike, data: bytes, append: bool = False) -> int:
    """Write data to file, appending or overwriting, and return the number of bytes written."""
    existed = Path(file).exists()
    with open(file, "ab" if append else "wb") as handle:
        written = handle.write(data)
    if append:
        log.debug("Added %d bytes to [%s]", written, file)
    elif existed:
        log.debug("File [%s] overwritten with %d bytes", file, written)
    else:
        log.debug("New file created [%s] of %d bytes", file, written)
    return written


def load_file(file: PathLike) -> bytes:
    """Read a whole file; a missing file or a directory raises an OSError."""
    target = Path(file)
    if target.is_dir():
        raise IsADirectoryError(f"is a directory: {os.fspath(file)}")
    if not target.exists():
        raise FileNotFoundError(f"file does not exist: {os.fspath(file)}")
    return target.read_bytes()


def is_directory(path: PathLike) -> bool:
    """True if path is a directory."""
    return Path(path).is_dir()


def discover_files(directory: PathLike) -> tuple[list[str], list[str]]:
    """Names of the files and of the sub-directories directly inside directory, sorted."""
    files: list[str] = []
    dirs: list[str] = []
    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        (dirs if entry.is_dir() else files).append(entry.name)
    return files, dirs


def unique_name(path: PathLike, name: str) -> str:
    """A name, based on name, that no file in path already uses (ignoring extensions).

    Candidates are name, name_01, name_02, ... up to name_49; the last candidate
    is returned if all of them are taken.
    """
    files, _ = discover_files(path)
    taken = {split_file_path(f)[1] for f in files}
    candidate = name
    for i in range(_UNIQUE_ATTEMPTS):
        candidate = name if i == 0 else f"{name}_{i:02d}"
        if candidate not in taken:
            break
    return candidate


def split_file_path(full_path: PathLike) -> tuple[str, str, str]:
    """Split a path into (directory with trailing separator, file stem, extension)."""
    full = os.fspath(full_path)
    sep = max(full.rfind("/"), full.rfind("\\"))
    dot = full.rfind(".")

    directory = full[: sep + 1] if sep >= 0 else ""
    if sep >= 0:
        stem = full[sep + 1 : dot] if dot > sep else full[sep + 1 :]
    else:
        stem = full[:dot] if dot >= 0 else full
    extension = full[dot + 1 :] if dot >= 0 else ""
    return directory, stem, extension


def has_extension(path: PathLike, extension: str | None = None) -> bool:
    """With no extension given, whether path has one; otherwise whether it is that one."""
    ext = split_file_path(path)[2]
    if extension is None:
        return ext != ""
    return ext == extension


def has_any_extension(path: PathLike, extensions: Iterable[str]) -> bool:
    """True if path has no extension or has one of the given extensions."""
    ext = split_file_path(path)[2]
    if ext == "":
        return True
    return ext in extensions


def duplicate_file(src_file: PathLike, dst_file: PathLike) -> str:
    """Copy src_file to dst_file, overwriting it, and return the destination."""
    shutil.copyfile(src_file, dst_file)
    log.debug("File %s duplicated correctly.", src_file)
    return os.fspath(dst_file)


def duplicate_into_folder(file: PathLike, dst_folder: PathLike) -> str:
    """Copy file into dst_folder under a name not used there yet; return the new path."""
    _, stem, extension = split_file_path(file)
    folder = os.fspath(dst_folder)
    target = f"{folder}/{unique_name(folder, stem)}.{extension}"
    return duplicate_file(file, target)


def rename_file(old_file: PathLike, new_file: PathLike) -> None:
    """Rename old_file to new_file; a missing old_file raises FileNotFoundError."""
    if not os.path.exists(old_file):
        raise FileNotFoundError(f"file does not exist: {os.fspath(old_file)}")
    os.replace(old_file, new_file)


def normalize_path(full_path: PathLike) -> str:
    """Replace every backslash with a forward slash."""
    return os.fspath(full_path).replace("\\", "/")


def unnormalize_path(full_path: PathLike) -> str:
    """Replace every forward slash with a backslash."""
    return os.fspath(full_path).replace("/", "\\")


def resolve_texture_path(model_file_path: PathLike, texture_relative_path: PathLike) -> str:
    """Path of a texture given relative to the directory holding the model file."""
    return os.path.join(os.path.dirname(os.fspath(model_file_path)), os.fspath(texture_relative_path))