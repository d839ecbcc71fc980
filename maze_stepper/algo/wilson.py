from enum import Enum
from typing import List, Optional, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR, LINE_WIDTH
from maze_stepper.core.grid import Grid

# Markers for cells that are not carrying a walk direction.
OUT = 0
IN = -1

class WilsonsAlgorithm(Generator):
    """
    Wilson's algorithm: loop-erased random walks.

    Finding walks one step per update from a random cell outside the maze,
    recording the direction it left each cell by. Revisiting a cell simply
    overwrites that direction, which erases the loop. Once the walk touches
    the maze, Following replays the recorded directions from the start and
    carves one cell per update.
    """
    DEFAULT_VARIANT = "fast"
    VARIANTS = ("fast", "slow")

    class State(Enum):
        SETUP = 0
        FINDING = 1
        FOLLOWING = 2
        DONE = 3

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.slowdown = self.parse_choice(variant or self.DEFAULT_VARIANT, self.VARIANTS) == "slow"
        # Per cell: OUT, IN, or the direction bit the current walk left by.
        self.processing: List[int] = [OUT] * len(self.grid.cells)
        self.remaining = 0
        self.start: Optional[Tuple[int, int]] = None
        self.current: Optional[Tuple[int, int]] = None
        self.previous: Optional[Tuple[int, int]] = None

    @property
    def name(self) -> str:
        return "Slower Wilsonish" if self.slowdown else "Wilson"

    @property
    def variant(self) -> str:
        return "slow" if self.slowdown else "fast"

    def init_from_grid(self, incoming: Grid):
        """
        Continues from a partially carved board: every carved cell is already
        part of the maze. Takes a copy, the caller keeps its own grid.
        """
        if (incoming.width, incoming.height) != (self.grid.width, self.grid.height):
            raise ValueError(f"Cannot continue from a {incoming.width}x{incoming.height} grid "
                             f"on a {self.grid.width}x{self.grid.height} board")
        self.grid = incoming.copy()
        self.remaining = 0
        for x, y in self.grid.coordinates():
            idx = y * self.grid.width + x
            if self.grid.is_empty(x, y):
                self.processing[idx] = OUT
                self.remaining += 1
            else:
                self.processing[idx] = IN
        self.start = self.current = self.previous = None
        if self.remaining == self.grid.size:
            # Nothing carved yet, so there is no maze to walk into: seed one as usual.
            self.state = self.State.SETUP
            return
        self.state = self.State.FINDING
        self.log.debug(f"Continuing from a grid with {self.remaining} cells left")

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            x, y = self.random_cell()
            self.processing[y * grid.width + x] = IN
            self.remaining = grid.size - 1
            self.state = self.State.FINDING
            return

        if self.remaining == 0:
            self.start = None
            self.current = None
            self.finish()
            return

        if self.state is self.State.FINDING:
            self.find()
        elif self.state is self.State.FOLLOWING:
            self.follow()
        else:
            raise RuntimeError(f"Should be unable to hit state {self.state} here")

    def find(self):
        grid = self.grid
        if self.start is None:
            potentials = [(x, y) for x, y in grid.coordinates()
                          if self.processing[y * grid.width + x] == OUT]
            if not potentials:
                raise RuntimeError(f"{self.remaining} cells remaining but none are outside the maze")
            self.start = self.rng.choice(potentials)
            self.current = self.start
            self.previous = None

        x, y = self.current
        for nx, ny, dir_bit in self.shuffled(grid.get_neighbors(x, y)):
            if self.slowdown and (nx, ny) == self.previous:
                continue
            self.processing[y * grid.width + x] = dir_bit
            self.previous = self.current
            self.current = (nx, ny)
            if self.processing[ny * grid.width + nx] == IN:
                # Hit the maze: replay the erased walk from its start.
                self.current = self.start
                self.start = None
                self.state = self.State.FOLLOWING
            return

        # Only reachable on a 1-wide board with the slow rule: step back.
        self.previous, self.current = self.current, self.previous

    def follow(self):
        grid = self.grid
        x, y = self.current
        idx = y * grid.width + x
        marker = self.processing[idx]

        if marker == IN:
            # Walk absorbed. Cells it visited but erased go back outside.
            for i, value in enumerate(self.processing):
                if value > 0:
                    self.processing[i] = OUT
            self.current = None
            self.state = self.State.FINDING
        elif marker == OUT:
            raise RuntimeError(f"Following ran into ({x}, {y}) which is outside the maze")
        else:
            self.processing[idx] = IN
            self.remaining -= 1
            grid.carve(x, y, marker)
            self.current = grid.neighbor(x, y, marker)

    def draw(self, painter):
        grid = self.grid
        painter.board(grid)
        walk_color = (*COLORS[1], 128)

        if self.start is not None:
            painter.cell(*self.start, walk_color)
        for x, y in grid.coordinates():
            if (x, y) == self.current:
                continue
            marker = self.processing[y * grid.width + x]
            if marker == OUT and (x, y) != self.start:
                painter.cell(x, y, FIELD_COLOR)
            elif marker > 0:
                painter.cell(x, y, walk_color)
                painter.arrow(x, y, marker, COLORS[1])
        if self.current is not None:
            painter.cell(*self.current, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
