import pytest

from jvida.model import Cell, World
from jvida.storage import StorageError, load_world, save_world


def test_round_trip_keeps_cells_and_size(tmp_path):
    world = World(25)
    for row, col in [(0, 0), (24, 24), (7, 3), (7, 4)]:
        world.add(row, col)
    path = tmp_path / "config"
    save_world(world, path)
    loaded = load_world(path)
    assert loaded.dim == 25
    assert set(loaded.live_cells()) == set(world.live_cells())


def test_loaded_cells_come_back_in_row_major_order(tmp_path):
    world = World(10)
    world.add(5, 5)
    world.add(1, 2)
    path = tmp_path / "config"
    save_world(world, path)
    # live_cells lists the most recently added first
    assert load_world(path).live_cells() == [Cell(5, 5), Cell(1, 2)]


def test_empty_world_is_only_a_size_header(tmp_path):
    path = tmp_path / "config"
    save_world(World(10), path)
    assert path.read_bytes() == b"\x0a\x00\x00\x00"
    assert len(load_world(path)) == 0


def test_each_cell_adds_two_integers(tmp_path):
    world = World(12)
    world.add(3, 4)
    world.add(6, 7)
    path = tmp_path / "config"
    save_world(world, path)
    assert len(path.read_bytes()) == 4 + 2 * 8


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_world(tmp_path / "absent")


def test_short_file_is_rejected(tmp_path):
    path = tmp_path / "config"
    path.write_bytes(b"\x0a\x00")
    with pytest.raises(StorageError):
        load_world(path)


def test_truncated_cell_is_rejected(tmp_path):
    path = tmp_path / "config"
    save_world(World(10), path)
    path.write_bytes(path.read_bytes() + b"\x01\x00\x00\x00")
    with pytest.raises(StorageError):
        load_world(path)


def test_invalid_size_is_rejected(tmp_path):
    path = tmp_path / "config"
    path.write_bytes((5).to_bytes(4, "little"))
    with pytest.raises(StorageError):
        load_world(path)


def test_cell_outside_world_is_rejected(tmp_path):
    path = tmp_path / "config"
    data = (10).to_bytes(4, "little") + (10).to_bytes(4, "little") + (0).to_bytes(4, "little")
    path.write_bytes(data)
    with pytest.raises(StorageError):
        load_world(path)