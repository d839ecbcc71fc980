from array import array
from typing import Iterator, List, Optional, Tuple

from maze_stepper.config import COLUMNS, ROWS

class Grid:
    """
    Orthogonal maze board.
    Each cell is a bitmask of OPEN passages (0 = fully walled).
    """
    # Bitmask Constants
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # Iteration order matters for seeded reproducibility.
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)
    ALL = NORTH | EAST | SOUTH | WEST

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    NAMES = {NORTH: "North", EAST: "East", SOUTH: "South", WEST: "West"}

    __slots__ = ('width', 'height', 'size', 'cells')

    def __init__(self, width: int = COLUMNS, height: int = ROWS):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # Cells that belong to the board
        self.size = width * height
        # 'B' (unsigned char) -> 1 byte per cell, all walls present
        self.cells = array('B', [0] * (width * height))

    # -- direction helpers -------------------------------------------------

    @classmethod
    def directions(cls, mask: int) -> List[int]:
        """Splits a mask into its single-direction bits, in DIRECTIONS order."""
        return [d for d in cls.DIRECTIONS if mask & d]

    @classmethod
    def complement(cls, mask: int) -> int:
        return cls.ALL & ~mask

    # -- geometry ----------------------------------------------------------

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.contains(x, y):
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def neighbor(self, x: int, y: int, dir_bit: int) -> Optional[Tuple[int, int]]:
        nx = x + self.DX[dir_bit]
        ny = y + self.DY[dir_bit]
        if self.contains(nx, ny):
            return (nx, ny)
        return None

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check passages.
        """
        for dir_bit in self.DIRECTIONS:
            nx = x + self.DX[dir_bit]
            ny = y + self.DY[dir_bit]
            if self.contains(nx, ny):
                yield (nx, ny, dir_bit)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        val = self.cells[y * self.width + x]
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if val & dir_bit:
                yield (nx, ny)

    def direction_between(self, a: Tuple[int, int], b: Tuple[int, int]) -> Optional[int]:
        """Direction leading from cell a to the adjacent cell b, or None."""
        for nx, ny, dir_bit in self.get_neighbors(*a):
            if (nx, ny) == b:
                return dir_bit
        return None

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Row-major walk over every cell on the board."""
        for y in range(self.height):
            for x in range(self.width):
                if self.contains(x, y):
                    yield (x, y)

    # -- cell state --------------------------------------------------------

    def get(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)]

    def has(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.width + x] & dir_bit) != 0

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[y * self.width + x] == 0

    def carve(self, x1: int, y1: int, dir_bit: int):
        """
        Opens the passage between (x1, y1) and the neighbor in 'dir_bit'.
        Also opens the OPPOSITE side on the neighbor.
        """
        target = self.neighbor(x1, y1, dir_bit)
        if target is None:
            raise IndexError(f"Cannot carve {self.NAMES[dir_bit]} out of ({x1}, {y1})")
        x2, y2 = target
        self.cells[y1 * self.width + x1] |= dir_bit
        self.cells[y2 * self.width + x2] |= self.OPPOSITE[dir_bit]

    def wall(self, x1: int, y1: int, dir_bit: int):
        """Closes the passage in 'dir_bit' on both sides. Walls facing the void are ignored."""
        target = self.neighbor(x1, y1, dir_bit)
        self.cells[y1 * self.width + x1] &= ~dir_bit
        if target is not None:
            x2, y2 = target
            self.cells[y2 * self.width + x2] &= ~self.OPPOSITE[dir_bit]

    def open_all(self):
        """Opens every passage between two cells of the board (division generators start here)."""
        for x, y in self.coordinates():
            mask = 0
            for _, _, dir_bit in self.get_neighbors(x, y):
                mask |= dir_bit
            self.cells[y * self.width + x] = mask

    def clear(self):
        for i in range(len(self.cells)):
            self.cells[i] = 0

    def copy(self) -> "Grid":
        other = type(self).__new__(type(self))
        other.width = self.width
        other.height = self.height
        other.size = self.size
        other.cells = array('B', self.cells)
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (type(self) is type(other) and self.width == other.width
                and self.height == other.height and self.cells == other.cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}x{self.height})"
