"""Row chunking that lets grids reuse list virtualization."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from spatialnav.virtualization.errors import InvalidConfiguration
from spatialnav.virtualization.size_model import SizeModel


@dataclass(frozen=True, slots=True)
class GridRow[T]:
    """One row of a grid; the last row may hold fewer than ``columns`` items."""

    items: tuple[T, ...]
    row_index: int


@dataclass(frozen=True, slots=True)
class GridHeader:
    """Header occupying logical row 0 with its own extent."""

    content: object
    extent: float


type GridEntry[T] = GridRow[T] | GridHeader


def validate_header(header: object | None, header_extent: float | None) -> GridHeader | None:
    """Require a header and its extent together, or neither."""
    if header is not None and header_extent is None:
        raise InvalidConfiguration("a header_extent must be provided when using a header")
    if header_extent is not None and header is None:
        raise InvalidConfiguration("a header must be provided when using a header_extent")
    if header is None or header_extent is None:
        return None
    if header_extent <= 0:
        raise InvalidConfiguration(f"header_extent must be positive: {header_extent!r}")
    return GridHeader(content=header, extent=float(header_extent))


def validate_columns(columns: int | None) -> int:
    if columns is None:
        raise InvalidConfiguration("grid columns are required")
    if isinstance(columns, bool) or int(columns) != columns or columns < 1:
        raise InvalidConfiguration(f"grid columns must be a positive integer: {columns!r}")
    return int(columns)


@dataclass(frozen=True, slots=True)
class GridRows[T]:
    """Row-major partition of a flat sequence, optionally preceded by a header."""

    entries: tuple[GridEntry[T], ...]
    columns: int
    header: GridHeader | None = None

    @property
    def header_offset(self) -> int:
        return 1 if self.header is not None else 0

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> GridEntry[T]:
        return self.entries[index]

    def rows(self) -> tuple[GridRow[T], ...]:
        """Return the item rows without the header."""
        return tuple(entry for entry in self.entries if isinstance(entry, GridRow))

    def row_of(self, flat_index: int) -> int:
        """Return the logical row holding a flat item index."""
        return max(0, int(flat_index)) // self.columns + self.header_offset

    def locate(self, flat_index: int) -> tuple[int, int]:
        """Return ``(logical row, column)`` for a flat item index."""
        flat = max(0, int(flat_index))
        return flat // self.columns + self.header_offset, flat % self.columns

    def flat_index(self, row_index: int, column: int) -> int:
        """Return the flat item index at a logical row and column."""
        item_row = int(row_index) - self.header_offset
        if item_row < 0:
            raise IndexError("the header row holds no items")
        return item_row * self.columns + int(column)

    def row_count_for(self, item_count: int) -> int:
        """Return the logical row count for ``item_count`` items."""
        return math.ceil(max(0, int(item_count)) / self.columns) + self.header_offset

    def size_model(self, row_extent: float) -> SizeModel[GridEntry[T]]:
        """Return a size model over the entries.

        Without a header every row shares ``row_extent``, which keeps the
        grid eligible for fixed-extent-only behaviors.
        """
        rows_model: SizeModel[GridEntry[T]] = SizeModel(row_extent)
        if self.header is None:
            return rows_model
        header = self.header

        def entry_extent(entry: GridEntry[T]) -> float:
            if isinstance(entry, GridHeader):
                return header.extent
            return rows_model.fixed_extent

        return SizeModel(entry_extent)


def chunk[T](
    data: Sequence[T],
    columns: int | None,
    header: object | None = None,
    header_extent: float | None = None,
) -> GridRows[T]:
    """Partition ``data`` into rows of ``columns`` items, header first."""
    width = validate_columns(columns)
    grid_header = validate_header(header, header_extent)
    offset = 1 if grid_header is not None else 0
    entries: list[GridEntry[T]] = [grid_header] if grid_header is not None else []
    for row, start in enumerate(range(0, len(data), width)):
        entries.append(GridRow(items=tuple(data[start : start + width]), row_index=row + offset))
    return GridRows(entries=tuple(entries), columns=width, header=grid_header)
