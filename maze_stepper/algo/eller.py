from enum import Enum
from typing import List, Optional

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR, LINE_WIDTH

class EllersAlgorithm(Generator):
    """
    Eller's algorithm, one row at a time with only that row's set labels in memory.

    Merging looks at one column per update and joins it to its east neighbour
    half of the time (always on the last row). Dropping handles one set per
    update, carving between one and all of its cells down into the next row.
    NextLine moves on and labels the cells nobody dropped into.
    """
    NAME = "Eller"

    class State(Enum):
        SETUP = 0
        MERGING = 1
        DROPPING = 2
        NEXT_LINE = 3
        DONE = 4

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        width = self.grid.width
        self.row = 0
        self.col = 0
        self.labels: List[Optional[int]] = [None] * width
        self.next_labels: List[Optional[int]] = [None] * width
        # A row never holds more sets than cells, so width labels are enough.
        self.free: List[int] = list(reversed(range(width)))
        self.pending: List[int] = []

    def label_row(self):
        for x, label in enumerate(self.labels):
            if label is None:
                self.labels[x] = self.free.pop()

    def step(self):
        if self.state is self.State.SETUP:
            self.label_row()
            self.state = self.State.MERGING
        elif self.state is self.State.MERGING:
            self.merge()
        elif self.state is self.State.DROPPING:
            self.drop()
        elif self.state is self.State.NEXT_LINE:
            self.row += 1
            self.labels = self.next_labels
            self.next_labels = [None] * self.grid.width
            self.label_row()
            self.col = 0
            self.state = self.State.MERGING

    def merge(self):
        grid = self.grid
        last_row = self.row == grid.height - 1

        if self.col >= grid.width - 1:
            if last_row:
                self.finish()
                return
            # Sets in order of their leftmost cell.
            self.pending = list(dict.fromkeys(self.labels))
            self.state = self.State.DROPPING
            return

        x = self.col
        left, right = self.labels[x], self.labels[x + 1]
        if left != right and (last_row or self.rng.random() < 0.5):
            grid.carve(x, self.row, grid.EAST)
            self.labels = [left if label == right else label for label in self.labels]
            self.free.append(right)
        self.col += 1

    def drop(self):
        grid = self.grid
        if not self.pending:
            self.state = self.State.NEXT_LINE
            return

        label = self.pending.pop(0)
        members = [x for x, other in enumerate(self.labels) if other == label]
        if not members:
            raise RuntimeError(f"Set {label} has no cells on row {self.row}")
        self.rng.shuffle(members)
        # At least one vertical passage per set keeps every set reachable.
        count = self.rng.randint(1, len(members))
        for x in members[:count]:
            grid.carve(x, self.row, grid.SOUTH)
            self.next_labels[x] = label

    def draw(self, painter):
        grid = self.grid
        painter.board(grid)
        if self.state is not self.State.DONE:
            for y in range(self.row + 1, grid.height):
                for x in range(grid.width):
                    if grid.is_empty(x, y):
                        painter.cell(x, y, FIELD_COLOR)
            for x, label in enumerate(self.labels):
                if label is not None:
                    painter.cell(x, self.row, (*COLORS[label % len(COLORS)], 128))
            if self.state is self.State.MERGING:
                painter.cell(min(self.col, grid.width - 1), self.row, COLORS[1], inset=LINE_WIDTH)
        painter.path(self.path)
