"""Integration tests for saving and loading map files."""

import json

import pytest

from tilemap.core.compact_map import CompactMap
from tilemap.core.sparse_map import SparseMap
from tilemap.formats.map_data import MapData, map_from_dict, map_to_dict


def fill(tile_map, squares):
    for x, y, size in squares:
        tile_map.set(x, y, size)
    return tile_map


def test_sparse_map_roundtrip(tmp_path, rng, create_test_map):
    """Save a random sparse map and load it back."""
    original = fill(SparseMap(), create_test_map(rng, 400, 300, 40))
    path = tmp_path / "patch.json"

    MapData(original).save(str(path))
    loaded = MapData()
    loaded.load(str(path))

    assert isinstance(loaded.tile_map, SparseMap)
    assert loaded.tile_map.is_equal(original)
    assert loaded.filepath == str(path)


def test_compact_map_roundtrip(tmp_path, rng, create_test_map):
    """Compact maps keep their canvas size."""
    original = fill(CompactMap(128, 64), create_test_map(rng, 128, 64, 25))
    path = tmp_path / "canvas.json"

    MapData(original).save(str(path))
    loaded = MapData()
    loaded.load(str(path))

    assert isinstance(loaded.tile_map, CompactMap)
    assert loaded.tile_map.get_size() == (128, 64)
    assert loaded.tile_map.is_equal(original)


def test_file_layout(tmp_path):
    """One line per tile, sorted by row then column."""
    tile_map = SparseMap()
    tile_map.set(40, 0)
    tile_map.set(0, 20)
    tile_map.set(0, 0)
    path = tmp_path / "layout.json"
    MapData(tile_map).save(str(path))

    text = path.read_text()
    data = json.loads(text)
    assert data["kind"] == "sparse"
    assert [(t["x"], t["y"]) for t in data["tiles"]] == [(0, 0), (2, 0), (0, 1)]
    assert data["tiles"][0]["data"] == "0" * 63 + "1"
    assert len(text.splitlines()) == 8


def test_save_back_to_loaded_path(tmp_path):
    """save() with no path writes to the file that was loaded."""
    path = tmp_path / "patch.json"
    MapData(fill(SparseMap(), [(0, 0, 2)])).save(str(path))

    map_data = MapData()
    map_data.load(str(path))
    map_data.tile_map.set(32, 32)
    map_data.save()

    reloaded = MapData()
    reloaded.load(str(path))
    assert reloaded.tile_map.contain(32, 32)


def test_save_without_path():
    with pytest.raises(ValueError):
        MapData().save()


def test_empty_map_roundtrip():
    data = map_to_dict(SparseMap())
    assert data == {"kind": "sparse", "tiles": []}
    assert map_from_dict(data).is_empty()


@pytest.mark.parametrize(
    "data",
    [
        {"kind": "hexagonal", "tiles": []},
        {"kind": "compact", "height": 16, "tiles": []},
        {"kind": "sparse", "tiles": [{"x": 0, "data": "1"}]},
        {"kind": "sparse", "tiles": [{"x": -1, "y": 0, "data": "1"}]},
        {"kind": "sparse", "tiles": [{"x": 0, "y": 0, "data": "not hex"}]},
    ],
)
def test_malformed_map_rejected(data):
    with pytest.raises(ValueError):
        map_from_dict(data)
