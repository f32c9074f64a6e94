"""File helpers: timestamps, existence, reading, writing and copying."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .containers import BumpAllocator

PathLike = Union[str, os.PathLike]


def get_timestamp(path: PathLike) -> int:
    """Return the file's modification time in seconds, or 0 if it cannot be read."""
    try:
        return int(os.stat(path).st_mtime)
    except OSError:
        return 0


def file_exists(path: PathLike) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def get_file_size(path: PathLike) -> int:
    """Return the size of the file in bytes."""
    with open(path, "rb") as fh:
        fh.seek(0, os.SEEK_END)
        return fh.tell()


def read_file(path: PathLike, allocator: Optional[BumpAllocator] = None) -> bytes:
    """Read the whole file; when an allocator is given the bytes are staged in it."""
    data = Path(path).read_bytes()
    if allocator is not None and data:
        size = len(data)
        buffer = allocator.alloc(size + 1)
        buffer[:size] = data
        buffer[size] = 0
        return bytes(buffer[:size])
    return data


def write_file(path: PathLike, data: bytes) -> None:
    Path(path).write_bytes(bytes(data))


def copy_file(
    source: PathLike,
    destination: PathLike,
    allocator: Optional[BumpAllocator] = None,
) -> bool:
    """Copy ``source`` to ``destination``; returns False if the source is empty."""
    data = read_file(source, allocator)
    if not data:
        return False
    write_file(destination, data)
    return True