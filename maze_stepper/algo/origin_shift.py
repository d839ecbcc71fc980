from enum import Enum
from typing import List, Optional, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, LINE_WIDTH

SHIFTS_PER_CELL = 10

class OriginShift(Generator):
    """
    Keeps a perfect maze as a tree of pointers towards a single origin cell.
    Each update points the origin at a random neighbour and makes that
    neighbour the new origin, so the maze is valid after every step.

    The variant multiplies the number of shifts: columns * rows * 10 * N.
    """
    NAME = "Origin Shift"
    DEFAULT_VARIANT = "1"

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.multiplier = self.parse_int(variant or self.DEFAULT_VARIANT, 1)

        grid = self.grid
        self.shifts = grid.width * grid.height * SHIFTS_PER_CELL * self.multiplier
        self.remaining = self.shifts

        # Every row runs east, the last column runs south, into the bottom-right origin.
        self.pointers: List[Optional[int]] = [grid.EAST] * (grid.width * grid.height)
        for y in range(grid.height):
            self.pointers[grid.get_index(grid.width - 1, y)] = grid.SOUTH
        self.origin: Tuple[int, int] = (grid.width - 1, grid.height - 1)
        self.pointers[grid.get_index(*self.origin)] = None

        for x, y in grid.coordinates():
            dir_bit = self.pointers[grid.get_index(x, y)]
            if dir_bit is not None:
                grid.carve(x, y, dir_bit)

    @property
    def variant(self) -> str:
        return str(self.multiplier)

    def step(self):
        if self.state is self.State.SETUP:
            self.state = self.State.RUNNING
            return

        if self.remaining == 0:
            self.finish()
            return
        self.remaining -= 1

        grid = self.grid
        x, y = self.origin
        neighbors = list(grid.get_neighbors(x, y))
        if not neighbors:
            return
        nx, ny, dir_bit = self.rng.choice(neighbors)

        # Drop the new origin's own pointer before adding ours; they may be the same edge.
        new_index = grid.get_index(nx, ny)
        old_bit = self.pointers[new_index]
        if old_bit is not None:
            grid.wall(nx, ny, old_bit)
        self.pointers[new_index] = None

        self.pointers[grid.get_index(x, y)] = dir_bit
        grid.carve(x, y, dir_bit)
        self.origin = (nx, ny)

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            painter.cell(*self.origin, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
