"""
Board entity - a square grid of cells.
"""

from typing import Iterable, List, Tuple

Cell = Tuple[int, int]


class Board:
    """
    A square grid of `size` x `size` cells.

    Cells are enumerated row-major (y outer, x inner) so free-cell lists
    come back in a stable order.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size

    @property
    def capacity(self) -> int:
        return self.size * self.size

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def wrap(self, cell: Cell) -> Cell:
        """Fold a cell back onto the board along both axes."""
        x, y = cell
        return (x % self.size, y % self.size)

    def cells(self) -> List[Cell]:
        return [(x, y) for y in range(self.size) for x in range(self.size)]

    def free_cells(self, occupied: Iterable[Cell]) -> List[Cell]:
        """Return every cell not in `occupied`, row-major."""
        taken = set(occupied)
        return [cell for cell in self.cells() if cell not in taken]

    def __repr__(self):
        return f"<Board size={self.size}>"
