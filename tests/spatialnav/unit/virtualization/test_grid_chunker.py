from __future__ import annotations

import pytest

from spatialnav.virtualization.errors import InvalidConfiguration
from spatialnav.virtualization.grid import GridHeader, GridRow, chunk


def test_chunk_partitions_row_major_without_padding() -> None:
    grid = chunk(list(range(24)), columns=5)
    assert len(grid) == 5
    assert [row.row_index for row in grid.rows()] == [0, 1, 2, 3, 4]
    assert grid[0] == GridRow(items=(0, 1, 2, 3, 4), row_index=0)
    assert grid[4] == GridRow(items=(20, 21, 22, 23), row_index=4)


def test_exact_multiple_fills_last_row() -> None:
    grid = chunk(list(range(25)), columns=5)
    assert len(grid) == 5
    assert len(grid.rows()[-1].items) == 5


def test_header_occupies_row_zero_and_shifts_rows() -> None:
    grid = chunk(list(range(24)), columns=5, header="title", header_extent=120)
    assert len(grid) == 6
    assert grid[0] == GridHeader(content="title", extent=120.0)
    assert [row.row_index for row in grid.rows()] == [1, 2, 3, 4, 5]
    assert grid.rows()[-1].items == (20, 21, 22, 23)


def test_row_size_model_uses_header_extent_for_row_zero() -> None:
    with_header = chunk(list(range(24)), columns=5, header="title", header_extent=120)
    model = with_header.size_model(80)
    assert not model.is_fixed
    assert model.item_extent(with_header[0]) == 120
    assert model.item_extent(with_header[1]) == 80
    assert model.cumulative_extent(with_header.entries, 0, 3) == 280

    plain = chunk(list(range(24)), columns=5).size_model(80)
    assert plain.is_fixed
    assert plain.fixed_extent == 80


def test_index_conversions() -> None:
    plain = chunk(list(range(24)), columns=5)
    assert plain.locate(7) == (1, 2)
    assert plain.row_of(7) == 1
    assert plain.flat_index(1, 2) == 7

    with_header = chunk(list(range(24)), columns=5, header="title", header_extent=50)
    assert with_header.locate(7) == (2, 2)
    assert with_header.flat_index(2, 2) == 7
    with pytest.raises(IndexError):
        with_header.flat_index(0, 0)


def test_row_count_for_expected_items() -> None:
    assert chunk([], columns=5).row_count_for(24) == 5
    assert chunk([], columns=5, header="h", header_extent=10).row_count_for(24) == 6
    assert chunk([], columns=5).row_count_for(0) == 0


def test_invalid_grid_configuration() -> None:
    with pytest.raises(InvalidConfiguration):
        chunk([1, 2], columns=None)
    with pytest.raises(InvalidConfiguration):
        chunk([1, 2], columns=0)
    with pytest.raises(InvalidConfiguration):
        chunk([1, 2], columns=2, header="title")
    with pytest.raises(InvalidConfiguration):
        chunk([1, 2], columns=2, header_extent=40)
    with pytest.raises(InvalidConfiguration):
        chunk([1, 2], columns=2, header="title", header_extent=0)
