from array import array

from maze_stepper.config import HEX_COLUMNS, HEX_ROWS
from maze_stepper.core.grid import Grid

class HexGrid(Grid):
    """
    Pointy-top hex board in axial coordinates, trimmed to a rhombus.
    Cells outside the rhombus are not part of the board: they are never
    neighbors and never carved.
    """
    NORTH_EAST = 0b000001
    NORTH_WEST = 0b000010
    EAST       = 0b000100
    WEST       = 0b001000
    SOUTH_EAST = 0b010000
    SOUTH_WEST = 0b100000

    DIRECTIONS = (NORTH_EAST, NORTH_WEST, EAST, WEST, SOUTH_EAST, SOUTH_WEST)
    ALL = NORTH_EAST | NORTH_WEST | EAST | WEST | SOUTH_EAST | SOUTH_WEST

    DX = {NORTH_EAST: 1, NORTH_WEST: 0, EAST: 1, WEST: -1, SOUTH_EAST: 0, SOUTH_WEST: -1}
    DY = {NORTH_EAST: -1, NORTH_WEST: -1, EAST: 0, WEST: 0, SOUTH_EAST: 1, SOUTH_WEST: 1}
    OPPOSITE = {
        NORTH_EAST: SOUTH_WEST, SOUTH_WEST: NORTH_EAST,
        NORTH_WEST: SOUTH_EAST, SOUTH_EAST: NORTH_WEST,
        EAST: WEST, WEST: EAST,
    }
    NAMES = {
        NORTH_EAST: "NorthEast", NORTH_WEST: "NorthWest", EAST: "East",
        WEST: "West", SOUTH_EAST: "SouthEast", SOUTH_WEST: "SouthWest",
    }

    __slots__ = ('valid',)

    def __init__(self, width: int = HEX_COLUMNS, height: int = HEX_ROWS):
        super().__init__(width, height)
        self.valid = array('B', [0] * (width * height))
        for y in range(height):
            for x in range(width):
                if not (x < (height - 1 - y) / 2.0 or x > width - (height + y) / 2.0):
                    self.valid[y * width + x] = 1
        self.size = sum(self.valid)
        if not self.size:
            raise ValueError(f"Hex grid {width}x{height} has no cells inside the rhombus")

    def contains(self, x: int, y: int) -> bool:
        return (0 <= x < self.width and 0 <= y < self.height
                and self.valid[y * self.width + x] == 1)

    def copy(self) -> "HexGrid":
        other = super().copy()
        other.valid = array('B', self.valid)
        return other
