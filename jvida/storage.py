"""Saving and restoring an initial generation."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Union

from jvida.model import World

_HEADER = struct.Struct("<i")
_CELL = struct.Struct("<ii")

PathLike = Union[str, "os.PathLike[str]"]


class StorageError(Exception):
    """A saved generation is damaged or does not describe a valid world."""


def save_world(world: World, path: PathLike) -> None:
    """Write the world's size and its live cells, in row-major order, to path.

    Failing to open or write the file raises OSError.
    """
    parts = [_HEADER.pack(world.dim)]
    parts.extend(_CELL.pack(cell.row, cell.col) for cell in sorted(world.live_cells()))
    Path(path).write_bytes(b"".join(parts))


def load_world(path: PathLike) -> World:
    """Read a world written by save_world.

    A file that cannot be opened raises OSError; a damaged one raises StorageError.
    """
    data = Path(path).read_bytes()
    if len(data) < _HEADER.size:
        raise StorageError("file too short to hold a world size")
    (dim,) = _HEADER.unpack_from(data)
    try:
        world = World(dim)
    except ValueError as exc:
        raise StorageError(str(exc)) from exc
    body = data[_HEADER.size:]
    if len(body) % _CELL.size:
        raise StorageError("file ends in the middle of a cell")
    for row, col in _CELL.iter_unpack(body):
        try:
            world.add(row, col)
        except ValueError as exc:
            raise StorageError(str(exc)) from exc
    return world