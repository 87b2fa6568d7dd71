from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .state import Direction, Position, Symbol

BOARD_SIZE = 5
LAST = BOARD_SIZE - 1

BoardArray = NDArray[np.int8]


def _edge_positions() -> Tuple[Position, ...]:
    top = [(0, col) for col in range(BOARD_SIZE)]
    bottom = [(LAST, col) for col in range(BOARD_SIZE)]
    sides: List[Position] = []
    for row in range(1, LAST):
        sides.append((row, 0))
        sides.append((row, LAST))
    return tuple(top + bottom + sides)


# Order matters: rules return the first qualifying move in this order.
EDGE_POSITIONS: Tuple[Position, ...] = _edge_positions()


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_edge(row: int, col: int) -> bool:
    return in_bounds(row, col) and (row in (0, LAST) or col in (0, LAST))


def edge_directions(row: int, col: int) -> Tuple[Direction, ...]:
    """Directions a cube taken from ``(row, col)`` may be pushed in.

    A corner touches two boundaries and therefore yields two directions.
    Interior cells yield none.
    """
    if not in_bounds(row, col):
        return ()
    directions: List[Direction] = []
    if row == 0:
        directions.append(Direction.DOWN)
    if row == LAST:
        directions.append(Direction.UP)
    if col == 0:
        directions.append(Direction.RIGHT)
    if col == LAST:
        directions.append(Direction.LEFT)
    return tuple(directions)


def is_inward(row: int, col: int, direction: Direction) -> bool:
    """True if ``direction`` pushes from the edge ``(row, col)`` sits on toward the centre."""
    return (
        (row == 0 and direction == Direction.DOWN)
        or (row == LAST and direction == Direction.UP)
        or (col == 0 and direction == Direction.RIGHT)
        or (col == LAST and direction == Direction.LEFT)
    )


class Board:
    """The 5x5 grid of cubes. Cells hold :class:`Symbol` values."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[BoardArray] = None) -> None:
        if cells is None:
            cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            cells = np.array(cells, dtype=np.int8)
            if cells.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {cells.shape}.")
            if not np.isin(cells, [int(symbol) for symbol in Symbol]).all():
                raise ValueError("Board contains an unknown cell value.")
        self._cells = cells

    @staticmethod
    def from_rows(rows: Sequence[str]) -> "Board":
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} characters.")
        cells = [[int(Symbol.parse(char)) for char in row] for row in rows]
        return Board(np.array(cells, dtype=np.int8))

    @property
    def cells(self) -> BoardArray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, position: Position) -> Symbol:
        row, col = position
        return Symbol(int(self._cells[row, col]))

    def to_rows(self) -> List[str]:
        return ["".join(Symbol(int(cell)).char for cell in row) for row in self._cells]

    def copy(self) -> "Board":
        return Board(self._cells.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return "Board(\n  " + "\n  ".join(self.to_rows()) + "\n)"

    def push(self, row: int, col: int, direction: Direction, symbol: Symbol) -> None:
        """Take the cube at ``(row, col)``, slide the line toward it and re-insert at the far end.

        The caller is responsible for checking that ``direction`` is one of
        :func:`edge_directions` for the position.
        """
        if symbol == Symbol.EMPTY:
            raise ValueError("A pushed cube must carry a player symbol.")
        cells = self._cells
        if direction == Direction.UP:
            cells[1 : row + 1, col] = cells[0:row, col].copy()
            cells[0, col] = int(symbol)
        elif direction == Direction.DOWN:
            cells[row:LAST, col] = cells[row + 1 : BOARD_SIZE, col].copy()
            cells[LAST, col] = int(symbol)
        elif direction == Direction.LEFT:
            cells[row, 1 : col + 1] = cells[row, 0:col].copy()
            cells[row, 0] = int(symbol)
        elif direction == Direction.RIGHT:
            cells[row, col:LAST] = cells[row, col + 1 : BOARD_SIZE].copy()
            cells[row, LAST] = int(symbol)
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

    def lines(self, include_diagonals: bool = True) -> Iterator[np.ndarray]:
        for index in range(BOARD_SIZE):
            yield self._cells[index, :]
        for index in range(BOARD_SIZE):
            yield self._cells[:, index]
        if include_diagonals:
            yield np.diagonal(self._cells)
            yield np.diagonal(np.fliplr(self._cells))

    def has_line(self, symbol: Symbol, *, diagonals: bool = False) -> bool:
        if symbol == Symbol.EMPTY:
            return False
        return any(bool(np.all(line == int(symbol))) for line in self.lines(diagonals))

    def count_potential_lines(self, symbol: Symbol, *, min_count: int = 3) -> int:
        """Lines (rows, columns and both diagonals) still completable for ``symbol``.

        A line counts when it holds at least ``min_count`` of ``symbol`` and
        nothing but empty cells otherwise.
        """
        count = 0
        for line in self.lines(include_diagonals=True):
            owned = int(np.count_nonzero(line == int(symbol)))
            empty = int(np.count_nonzero(line == int(Symbol.EMPTY)))
            if owned + empty == BOARD_SIZE and owned >= min_count:
                count += 1
        return count

    def count(self, symbol: Symbol) -> int:
        return int(np.count_nonzero(self._cells == int(symbol)))
