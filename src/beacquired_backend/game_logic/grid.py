"""Fixed-size board grid and the cells it addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from beacquired_backend.game_logic.configuration import BOARD_COLUMNS, BOARD_ROWS
from beacquired_backend.shared.value_objects import CellCoordinate

if TYPE_CHECKING:
    from collections.abc import Iterator

# Up, down, left, right.
_NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Cell(BaseModel):
    """One addressable board position.

    ``owner`` holds the placing player's id and ``company`` the registry index
    of the company the cell currently belongs to. Both stay ``None`` until the
    cell is placed or affiliated.
    """

    index: int = Field(..., ge=0)
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    owner: int | None = None
    company: int | None = None

    @property
    def coordinate(self) -> CellCoordinate:
        return CellCoordinate(row=self.row, column=self.column)

    @property
    def label(self) -> str:
        return self.coordinate.label

    def is_owned(self) -> bool:
        return self.owner is not None

    def is_part_of_company(self) -> bool:
        return self.company is not None


class Grid:
    """Row-major table of every cell on the board."""

    def __init__(self, rows: int = BOARD_ROWS, columns: int = BOARD_COLUMNS) -> None:
        if rows < 1 or columns < 1:
            msg = f"Grid dimensions must be positive, got {rows}x{columns}."
            raise ValueError(msg)
        self._rows = rows
        self._columns = columns
        self._cells: list[Cell] = [
            Cell(index=row * columns + column, row=row, column=column)
            for row in range(rows)
            for column in range(columns)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def __len__(self) -> int:
        return len(self._cells)

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        yield from self._cells

    def cell(self, index: int) -> Cell:
        """Return the cell stored at table position *index*."""
        return self._cells[index]

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self._rows and 0 <= column < self._columns

    def cell_at(self, row: int, column: int) -> Cell | None:
        """Return the cell at (*row*, *column*), or ``None`` when out of bounds."""
        if not self.contains(row, column):
            return None
        return self._cells[row * self._columns + column]

    def cell_for(self, coordinate: CellCoordinate) -> Cell | None:
        return self.cell_at(coordinate.row, coordinate.column)

    def cell_for_label(self, label: str) -> Cell | None:
        """Return the cell a card label such as ``B4`` names, if it is on the board."""
        try:
            coordinate = CellCoordinate.from_label(label)
        except ValueError:
            return None
        return self.cell_for(coordinate)

    def neighbors_of(self, cell: Cell) -> list[Cell]:
        """Return in-bounds orthogonal neighbors in up, down, left, right order."""
        neighbors: list[Cell] = []
        for row_offset, column_offset in _NEIGHBOR_OFFSETS:
            neighbor = self.cell_at(cell.row + row_offset, cell.column + column_offset)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def labels(self) -> tuple[str, ...]:
        """Return the card label of every cell in row-major order."""
        return tuple(cell.label for cell in self._cells)


__all__ = ["Cell", "Grid"]
