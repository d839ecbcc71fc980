from enum import Enum
from typing import List, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS

HORIZONTAL = 1
VERTICAL = 2

class RecursiveDivision(Generator):
    """
    Starts from an open board and splits one rectangular region per update
    with a wall that has a single gap in it.
    """
    NAME = "Recursive Division"

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        self.grid.open_all()
        # Regions: (x, y, width, height). Kept sorted largest first, so pop() takes the smallest.
        self.stack: List[Tuple[int, int, int, int]] = []

    def choose_orientation(self, width: int, height: int) -> int:
        if width < height:
            return HORIZONTAL
        if height < width:
            return VERTICAL
        return HORIZONTAL if self.rng.randrange(2) == 0 else VERTICAL

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            if grid.width >= 2 and grid.height >= 2:
                self.stack.append((0, 0, grid.width, grid.height))
            self.state = self.State.RUNNING
            return

        if not self.stack:
            self.finish()
            return

        x, y, width, height = self.stack.pop()

        if self.choose_orientation(width, height) == HORIZONTAL:
            wall_y = self.rng.randrange(y, y + height - 1)
            passage_x = self.rng.randrange(x, x + width)
            for i in range(x, x + width):
                if i != passage_x:
                    grid.wall(i, wall_y, grid.SOUTH)

            new_height = wall_y - y + 1
            if width >= 2 and new_height >= 2:
                self.stack.append((x, y, width, new_height))
            new_height = height - new_height
            if width >= 2 and new_height >= 2:
                self.stack.append((x, wall_y + 1, width, new_height))
        else:
            wall_x = self.rng.randrange(x, x + width - 1)
            passage_y = self.rng.randrange(y, y + height)
            for j in range(y, y + height):
                if j != passage_y:
                    grid.wall(wall_x, j, grid.EAST)

            new_width = wall_x - x + 1
            if new_width >= 2 and height >= 2:
                self.stack.append((x, y, new_width, height))
            new_width = width - new_width
            if new_width >= 2 and height >= 2:
                self.stack.append((wall_x + 1, y, new_width, height))

        self.stack.sort(key=lambda region: region[2] * region[3], reverse=True)

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            last = len(self.stack) - 1
            for i, (x, y, width, height) in enumerate(self.stack):
                color = COLORS[i % len(COLORS)]
                painter.band(x, y, width, height, color if i == last else (*color, 77))
        painter.path(self.path)
