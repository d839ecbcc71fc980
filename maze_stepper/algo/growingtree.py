from collections import deque
from enum import Enum
from typing import Deque, Optional, Set, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR, LINE_WIDTH

class GrowingTree(Generator):
    """
    Growing tree over a newest-first list of active cells.
    The selection policy is the variant: newest behaves like the backtracker,
    random like Prim's, oldest and middle give long straight corridors.
    """
    DEFAULT_VARIANT = "newest"
    VARIANTS = ("newest", "middle", "oldest", "random")

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.policy = self.parse_choice(variant or self.DEFAULT_VARIANT, self.VARIANTS)
        # Index 0 is the most recently added cell.
        self.active: Deque[Tuple[int, int]] = deque()
        self.active_set: Set[Tuple[int, int]] = set()
        self.curr: Optional[Tuple[int, int]] = None

    @property
    def name(self) -> str:
        return f"{self.policy.capitalize()} Growing Tree"

    @property
    def variant(self) -> str:
        return self.policy

    def select(self) -> int:
        if self.policy == "newest":
            return 0
        if self.policy == "middle":
            return (len(self.active) - 1) // 2
        if self.policy == "oldest":
            return len(self.active) - 1
        return self.rng.randrange(len(self.active))

    def push(self, cell: Tuple[int, int]):
        self.active.appendleft(cell)
        self.active_set.add(cell)

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            self.push(self.random_cell())
            self.state = self.State.RUNNING
            return

        if not self.active:
            self.curr = None
            self.finish()
            return

        index = self.select()
        x, y = self.active[index]
        self.curr = (x, y)

        potentials = [
            (nx, ny, dir_bit)
            for nx, ny, dir_bit in grid.get_neighbors(x, y)
            if grid.is_empty(nx, ny) and (nx, ny) not in self.active_set
        ]
        if not potentials:
            del self.active[index]
            self.active_set.discard((x, y))
            return

        nx, ny, dir_bit = self.rng.choice(potentials)
        grid.carve(x, y, dir_bit)
        self.push((nx, ny))
        self.curr = (nx, ny)

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            for x, y in self.grid.coordinates():
                if self.grid.is_empty(x, y) and (x, y) not in self.active_set:
                    painter.cell(x, y, FIELD_COLOR)
            for cell in self.active:
                if cell != self.curr:
                    painter.cell(*cell, (*COLORS[1], 128))
            if self.curr is not None:
                painter.cell(*self.curr, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
