from enum import Enum
from typing import Optional, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR, LINE_WIDTH

class HuntAndKill(Generator):
    """
    Random walk until stuck, then hunt row by row (one row per update) for
    an empty cell next to the maze, join it, and walk again from there.
    """
    NAME = "Hunt and Kill"

    class State(Enum):
        SETUP = 0
        WALKING = 1
        FINDING = 2
        DONE = 3

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        self.curr: Optional[Tuple[int, int]] = None
        self.scan_line: Optional[int] = None
        # Every row above this one is known to be fully carved.
        self.first_empty_line = 0

    def step(self):
        if self.state is self.State.SETUP:
            self.curr = self.random_cell()
            self.state = self.State.WALKING
        elif self.state is self.State.WALKING:
            self.walk()
        elif self.state is self.State.FINDING:
            self.hunt()

    def walk(self):
        grid = self.grid
        x, y = self.curr
        for nx, ny, dir_bit in self.shuffled(grid.get_neighbors(x, y)):
            if grid.is_empty(nx, ny):
                grid.carve(x, y, dir_bit)
                self.curr = (nx, ny)
                return

        # Stuck, start hunting.
        self.curr = None
        self.scan_line = self.first_empty_line
        self.state = self.State.FINDING

    def hunt(self):
        grid = self.grid
        y = self.scan_line
        found_empty_cell = False
        potentials = []
        for x in range(grid.width):
            if not grid.is_empty(x, y):
                continue
            found_empty_cell = True
            carved = [dir_bit for nx, ny, dir_bit in grid.get_neighbors(x, y) if not grid.is_empty(nx, ny)]
            if carved:
                potentials.append((x, self.rng.choice(carved)))

        if not potentials:
            if not found_empty_cell and y == self.first_empty_line:
                self.first_empty_line = y + 1
            if y < grid.height - 1:
                self.scan_line = y + 1
            else:
                self.scan_line = None
                self.finish()
            return

        x, dir_bit = self.rng.choice(potentials)
        grid.carve(x, y, dir_bit)
        self.curr = (x, y)
        self.scan_line = None
        self.state = self.State.WALKING

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is not self.State.DONE:
            for x, y in self.grid.coordinates():
                if self.grid.is_empty(x, y):
                    painter.cell(x, y, FIELD_COLOR)
            if self.curr is not None:
                painter.cell(*self.curr, COLORS[1], inset=LINE_WIDTH)
            if self.scan_line is not None:
                painter.band(0, self.scan_line, self.grid.width, 1, (*COLORS[1], 77))
        painter.path(self.path)
