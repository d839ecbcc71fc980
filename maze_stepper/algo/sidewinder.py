from enum import Enum

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR, LINE_WIDTH

class Sidewinder(Generator):
    """
    Row by row: extend the current run east at random, and when the run
    closes carve north out of one of its cells. The top row is one long run.
    The "hard" variant makes runs longer towards the east side, which hides
    the usual easy path along the top.
    """
    DEFAULT_VARIANT = "easy"
    VARIANTS = ("easy", "hard")

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        CARVING = 2
        DONE = 3

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.harder = self.parse_choice(variant or self.DEFAULT_VARIANT, self.VARIANTS) == "hard"
        self.curr = (0, 0)
        self.run_start = 0

    @property
    def name(self) -> str:
        return "Harder Sidewinder" if self.harder else "Sidewinder"

    @property
    def variant(self) -> str:
        return "hard" if self.harder else "easy"

    def east_probability(self, x: int) -> float:
        if self.harder:
            return 0.4 + (x / self.grid.width) * 0.4
        return 0.5

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            self.curr = (0, 0)
            self.run_start = 0
            self.state = self.State.RUNNING
        elif self.state is self.State.RUNNING:
            x, y = self.curr
            if (self.rng.random() < self.east_probability(x) or y == 0) and x < grid.width - 1:
                grid.carve(x, y, grid.EAST)
                self.curr = (x + 1, y)
            else:
                self.state = self.State.CARVING
        elif self.state is self.State.CARVING:
            x, y = self.curr
            x += 1
            if y > 0:
                north = self.rng.randrange(self.run_start, x)
                grid.carve(north, y, grid.NORTH)
                self.run_start = x

            if x == grid.width:
                x, y = 0, y + 1
                self.run_start = 0
            self.curr = (x, y)
            if y == grid.height:
                self.finish()
                return
            self.state = self.State.RUNNING

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is not self.State.DONE:
            grid = self.grid
            x, y = self.curr
            # Untouched rows below, rest of the current row, then the open run.
            painter.band(0, y + 1, grid.width, grid.height - y - 1, FIELD_COLOR)
            painter.band(x + 1, y, grid.width - x - 1, 1, FIELD_COLOR)
            painter.band(self.run_start, y, x + 1 - self.run_start, 1, (*COLORS[1], 128))
            painter.cell(x, y, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
