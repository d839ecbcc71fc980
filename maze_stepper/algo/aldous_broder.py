from enum import Enum

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR, LINE_WIDTH
from maze_stepper.core.grid import Grid

class AldousBroder(Generator):
    """
    Plain random walk that carves only when it steps onto a cell for the
    first time. The "fast" variant refuses to step straight back to the
    previous cell, which cuts the run time considerably.
    """
    DEFAULT_VARIANT = "fast"
    VARIANTS = ("fast", "slow")

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.speedup = self.parse_choice(variant or self.DEFAULT_VARIANT, self.VARIANTS) == "fast"
        self.curr = (0, 0)
        self.prev = (0, 0)
        self.remaining = 0

    @property
    def name(self) -> str:
        return "Faster Aldous-Broderish" if self.speedup else "Aldous-Broder"

    @property
    def variant(self) -> str:
        return "fast" if self.speedup else "slow"

    def filled(self) -> float:
        return 1.0 - self.remaining / self.grid.size

    def get_grid(self) -> Grid:
        """Snapshot of the board, safe to hand over to another algorithm."""
        return self.grid.copy()

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            self.curr = self.random_cell()
            self.prev = self.curr
            self.remaining = grid.size - 1
            self.state = self.State.RUNNING
            return

        if self.remaining == 0:
            self.finish()
            return

        x, y = self.curr
        for nx, ny, dir_bit in self.shuffled(grid.get_neighbors(x, y)):
            if self.speedup and (nx, ny) == self.prev:
                continue
            if grid.is_empty(nx, ny):
                grid.carve(x, y, dir_bit)
                self.remaining -= 1
            self.prev = self.curr
            self.curr = (nx, ny)
            return

        # Dead end with back-stepping forbidden (only on 1-wide boards).
        self.prev, self.curr = self.curr, self.prev

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            for x, y in self.grid.coordinates():
                if self.grid.is_empty(x, y):
                    painter.cell(x, y, FIELD_COLOR)
            painter.cell(*self.curr, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
