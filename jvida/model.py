"""The world of the game of life: a square grid and its list of live cells."""

from __future__ import annotations

from dataclasses import dataclass

MIN_DIMENSION = 10
MAX_DIMENSION = 60

ALIVE = "O"
DEAD = "."
NEIGHBOUR = "+"

_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@dataclass(frozen=True, order=True)
class Cell:
    """A position in the world."""

    row: int
    col: int


def validate_dimension(dim: int) -> int:
    """Return dim if it is an allowed world size, else raise ValueError."""
    if not MIN_DIMENSION <= dim <= MAX_DIMENSION:
        raise ValueError(
            f"dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {dim}"
        )
    return dim


class World:
    """A square world holding live cells, newest first in its listings."""

    def __init__(self, dim: int) -> None:
        self._dim = validate_dimension(dim)
        self._live: dict[Cell, None] = {}

    @property
    def dim(self) -> int:
        return self._dim

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, cell: object) -> bool:
        return cell in self._live

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._dim and 0 <= col < self._dim

    def _check(self, row: int, col: int) -> Cell:
        if not self._in_bounds(row, col):
            raise ValueError(f"coordinate ({row}, {col}) is outside the world")
        return Cell(row, col)

    def clear(self) -> None:
        """Kill every cell."""
        self._live.clear()

    def add(self, row: int, col: int) -> bool:
        """Bring a cell to life; return False if it was already alive."""
        cell = self._check(row, col)
        if cell in self._live:
            return False
        self._live[cell] = None
        return True

    def remove(self, row: int, col: int) -> None:
        """Kill a live cell; raise KeyError if it is not alive."""
        cell = self._check(row, col)
        if cell not in self._live:
            raise KeyError(cell)
        del self._live[cell]

    def is_alive(self, row: int, col: int) -> bool:
        """Whether the cell is alive; positions outside the world are dead."""
        return Cell(row, col) in self._live

    def live_cells(self) -> list[Cell]:
        """Live cells, most recently added first."""
        return list(reversed(self._live))

    def _neighbours(self, row: int, col: int):
        for dr, dc in _OFFSETS:
            r, c = row + dr, col + dc
            if self._in_bounds(r, c):
                yield Cell(r, c)

    def count_live_neighbours(self, row: int, col: int) -> int:
        """Number of live cells among the eight around (row, col)."""
        return sum(1 for cell in self._neighbours(row, col) if cell in self._live)

    def dead_neighbours(self) -> list[Cell]:
        """Dead cells next to a live one, most recently found first."""
        found: dict[Cell, None] = {}
        for live in self.live_cells():
            for cell in self._neighbours(live.row, live.col):
                if cell not in self._live:
                    found.setdefault(cell, None)
        return list(reversed(found))

    def next_generation_cells(self) -> list[Cell]:
        """The cells alive in the next generation, most recently found first."""
        born: list[Cell] = []
        for cell in self.live_cells():
            if self.count_live_neighbours(cell.row, cell.col) in (2, 3):
                born.append(cell)
        for cell in self.dead_neighbours():
            if self.count_live_neighbours(cell.row, cell.col) == 3:
                born.append(cell)
        born.reverse()
        return born

    def step(self) -> list[Cell]:
        """Advance one generation and return the new live cells."""
        cells = self.next_generation_cells()
        self._live = dict.fromkeys(reversed(cells))
        return self.live_cells()

    def render(self, show_neighbours: bool) -> str:
        """Draw the world as a grid with row and column numbers."""
        marked = set(self.dead_neighbours()) if show_neighbours else set()
        lines = ["  " + "".join(f" {j:2d} " for j in range(self._dim))]
        for i in range(self._dim):
            symbols = []
            for j in range(self._dim):
                cell = Cell(i, j)
                if cell in self._live:
                    symbols.append(ALIVE)
                elif cell in marked:
                    symbols.append(NEIGHBOUR)
                else:
                    symbols.append(DEAD)
            lines.append(f"{i:2d}" + "".join(f"  {s} " for s in symbols))
        return "\n".join(lines) + "\n"