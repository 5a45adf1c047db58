"""
Rat and Warehouse Keepers - Board Topology

The warehouse is a square grid of storage cells joined by roads:

- Even rows alternate Storage (even column) and Road (odd column)
- Odd rows are entirely Road
- A Road cell is an intersection when all four diagonal neighbours
  are Storage cells on the board

Keepers live on intersections; the Mouse lives in storage cells.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterator

from src.engine.base import BOARD_SIZE, CellKind, Position
from src.engine.validators import validate_board_size


@dataclass(frozen=True)
class Board:
    """
    Immutable warehouse grid.

    Attributes:
        cells: Rows of cell kinds, indexed as cells[y][x]
    """
    cells: tuple[tuple[CellKind, ...], ...]

    DIAGONALS: ClassVar[tuple[tuple[int, int], ...]] = ((-1, -1), (1, -1), (-1, 1), (1, 1))

    def __post_init__(self) -> None:
        """Validate grid structure."""
        size = len(self.cells)
        for y, row in enumerate(self.cells):
            if len(row) != size:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {size}")

    @classmethod
    def generate(cls, size: int = BOARD_SIZE) -> "Board":
        """Build the checkerboard warehouse layout."""
        validate_board_size(size)
        rows = []
        for row in range(size):
            if row % 2 == 0:
                rows.append(tuple(
                    CellKind.STORAGE if col % 2 == 0 else CellKind.ROAD
                    for col in range(size)
                ))
            else:
                rows.append((CellKind.ROAD,) * size)
        return cls(cells=tuple(rows))

    @property
    def size(self) -> int:
        return len(self.cells)

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def cell_at(self, pos: Position) -> CellKind:
        if not self.contains(pos):
            raise ValueError(f"Position {pos} is off the {self.size}x{self.size} board")
        return self.cells[pos.y][pos.x]

    def is_storage(self, pos: Position) -> bool:
        return self.contains(pos) and self.cells[pos.y][pos.x] is CellKind.STORAGE

    def is_road(self, pos: Position) -> bool:
        return self.contains(pos) and self.cells[pos.y][pos.x] is CellKind.ROAD

    def is_intersection(self, pos: Position) -> bool:
        """
        Check whether a position is a road intersection.

        Edge and corner road cells are never intersections because at least
        one of their diagonals falls off the board.
        """
        if not self.is_road(pos):
            return False
        return all(self.is_storage(pos.offset(dx, dy)) for dx, dy in self.DIAGONALS)

    def positions(self) -> Iterator[Position]:
        """Iterate every position in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield Position(x, y)

    def storage_cells(self) -> list[Position]:
        return [pos for pos in self.positions() if self.is_storage(pos)]

    def intersections(self) -> list[Position]:
        return [pos for pos in self.positions() if self.is_intersection(pos)]


def generate(size: int = BOARD_SIZE) -> Board:
    """Generate a board of the given size."""
    return Board.generate(size)


def is_intersection(board: Board, pos: Position) -> bool:
    return board.is_intersection(pos)


def is_orthogonal_hop(origin: Position, dest: Position) -> bool:
    """
    True if dest is exactly two cells away along a single axis.

    This is the movement pattern for both roles: the Mouse hops between
    storage cells over a road, Keepers hop between intersections.
    """
    dx, dy = abs(origin.x - dest.x), abs(origin.y - dest.y)
    return (dx == 2 and dy == 0) or (dx == 0 and dy == 2)


def is_diagonal_neighbor(origin: Position, dest: Position) -> bool:
    """True if dest touches origin at a corner (a keeper's check range)."""
    return abs(origin.x - dest.x) == 1 and abs(origin.y - dest.y) == 1
