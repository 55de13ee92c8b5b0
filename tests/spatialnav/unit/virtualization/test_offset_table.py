from __future__ import annotations

import threading

import pytest

from spatialnav.virtualization.behavior import ScrollBehavior
from spatialnav.virtualization.errors import UnsupportedConfiguration
from spatialnav.virtualization.geometry import create_list_geometry
from spatialnav.virtualization.offset_table import OffsetTable, OffsetTableCache
from spatialnav.virtualization.scroll_offset import compute_scroll_offset
from spatialnav.virtualization.size_model import SizeModel


def test_table_matches_direct_policy_for_fixed_extent() -> None:
    geometry = create_list_geometry(list(range(1000)), SizeModel(50), 500)
    for behavior in ScrollBehavior:
        table = OffsetTable.from_geometry(geometry, behavior)
        assert len(table) == 1000
        for i in range(1000):
            assert table.lookup(i) == compute_scroll_offset(behavior, i, geometry)


def test_table_matches_direct_policy_for_dynamic_extent(make_tiles, tile_size) -> None:
    geometry = create_list_geometry(make_tiles(200), SizeModel(tile_size), 480)
    for behavior in ("stick-to-start", "stick-to-end", "center"):
        table = OffsetTable.from_geometry(geometry, behavior)
        for i in range(200):
            assert table.lookup(i) == pytest.approx(compute_scroll_offset(behavior, i, geometry))


def test_table_respects_center_threshold() -> None:
    geometry = create_list_geometry(list(range(100)), SizeModel(50), 500)
    table = OffsetTable.from_geometry(geometry, "center", center_threshold=8)
    assert table.lookup(6) == 0
    assert table.lookup(6) == compute_scroll_offset("center", 6, geometry, center_threshold=8)


def test_build_rejects_jump_on_scroll_with_dynamic_extent() -> None:
    with pytest.raises(UnsupportedConfiguration):
        OffsetTable.build([1, 2, 3], "jump-on-scroll", SizeModel(lambda item: 10.0), 100)


def test_lookup_clamps_out_of_range_indices() -> None:
    table = OffsetTable.build(list(range(1000)), "stick-to-start", SizeModel(50), 500)
    assert table.lookup(-5) == table.lookup(0) == 0
    assert table.lookup(5000) == table.lookup(999) == -49_500


def test_empty_table_lookups() -> None:
    table = OffsetTable.build([], "center", SizeModel(50), 500)
    assert len(table) == 0
    assert table.lookup(3) == 0
    assert table.total_extent == 0
    assert table.item_position(2) == 0
    assert table.index_at(10) == 0


def test_positions_total_extent_and_index_at() -> None:
    table = OffsetTable.build(list(range(1000)), "stick-to-start", SizeModel(50), 500)
    assert table.item_position(3) == 150
    assert table.total_extent == 50_000
    assert table.index_at(149.9) == 2
    assert table.index_at(150) == 3
    assert table.index_at(-10) == 0
    assert table.index_at(1e9) == 999


def test_table_arrays_are_read_only() -> None:
    table = OffsetTable.build(list(range(10)), "center", SizeModel(50), 200)
    assert not table.offsets.flags.writeable
    assert not table.positions.flags.writeable
    with pytest.raises(ValueError):
        table.offsets[0] = 1.0


def test_dynamic_build_evaluates_each_extent_once() -> None:
    calls = 0

    def extent(item: int) -> float:
        nonlocal calls
        calls += 1
        return 20.0 + item % 5

    data = list(range(10_000))
    geometry = create_list_geometry(data, SizeModel(extent), 1080)
    calls = 0
    table = OffsetTable.from_geometry(geometry, "center")
    assert calls == 10_000
    assert len(table) == 10_000
    assert table.total_extent == sum(20.0 + i % 5 for i in data)


def test_cache_reuses_table_until_inputs_change() -> None:
    data = list(range(100))
    cache = OffsetTableCache()
    geometry = create_list_geometry(data, SizeModel(50), 500)
    first = cache.ensure(geometry, "stick-to-start")
    assert cache.ensure(create_list_geometry(data, SizeModel(50), 500), "stick-to-start") is first
    assert cache.rebuild_count == 1

    resized = cache.ensure(create_list_geometry(data, SizeModel(50), 600), "stick-to-start")
    assert resized is not first
    assert cache.current is resized
    assert cache.rebuild_count == 2

    assert cache.ensure(create_list_geometry(data, SizeModel(50), 600), "center") is not resized
    assert cache.rebuild_count == 3

    cache.invalidate()
    assert cache.current is None


def test_cache_rebuilds_when_data_grows() -> None:
    data = list(range(100))
    cache = OffsetTableCache()
    cache.ensure(create_list_geometry(data, SizeModel(50), 500), "center")
    data.extend(range(100, 150))
    table = cache.ensure(create_list_geometry(data, SizeModel(50), 500), "center")
    assert len(table) == 150
    assert cache.rebuild_count == 2


def test_readers_never_observe_partial_tables() -> None:
    data = list(range(5_000))
    cache = OffsetTableCache()
    stop = threading.Event()
    failures: list[str] = []

    def writer() -> None:
        for viewport in range(400, 460):
            cache.ensure(create_list_geometry(data, SizeModel(25), viewport), "center")
        stop.set()

    def reader() -> None:
        while not stop.is_set():
            table = cache.current
            if table is None:
                continue
            if len(table) != len(data) or table.positions.shape[0] != len(data) + 1:
                failures.append("size")
            if table.offsets.flags.writeable:
                failures.append("writeable")

    readers = [threading.Thread(target=reader) for _ in range(2)]
    for thread in readers:
        thread.start()
    writer()
    for thread in readers:
        thread.join()
    assert failures == []
    assert cache.rebuild_count == 60
