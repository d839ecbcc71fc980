from enum import Enum
from typing import List, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, FIELD_COLOR

BIASES = ("NorthEast", "SouthEast", "SouthWest", "NorthWest")
ORDERS = ("random", "ordered")

class BinaryTree(Generator):
    """
    Every cell carves towards one of the two directions of the bias corner.
    Variant grammar: ``<random|ordered>[:<NorthEast|SouthEast|SouthWest|NorthWest>]``.
    """
    NAME = "Binary Tree"
    DEFAULT_VARIANT = "random:NorthWest"

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        order, _, bias = (variant or self.DEFAULT_VARIANT).partition(":")
        self.random = self.parse_choice(order, ORDERS) == "random"
        self.bias = self.parse_choice(bias or "NorthWest", BIASES)

        grid = self.grid
        vertical = grid.NORTH if self.bias.startswith("North") else grid.SOUTH
        horizontal = grid.EAST if self.bias.endswith("East") else grid.WEST
        self.biased = (vertical, horizontal)

        self.remaining: List[Tuple[int, int]] = [(x, y) for y in range(grid.height) for x in range(grid.width)]
        if self.random:
            self.rng.shuffle(self.remaining)
        else:
            # Popped from the end, so the top-left cell goes first.
            self.remaining.reverse()

    @property
    def variant(self) -> str:
        return f"{'random' if self.random else 'ordered'}:{self.bias}"

    def step(self):
        if self.state is self.State.SETUP:
            self.state = self.State.RUNNING
            return

        if not self.remaining:
            self.finish()
            return

        grid = self.grid
        x, y = self.remaining.pop()
        vertical, horizontal = self.biased
        can_vertical = grid.neighbor(x, y, vertical) is not None
        can_horizontal = grid.neighbor(x, y, horizontal) is not None

        if can_vertical and can_horizontal:
            direction = vertical if self.rng.randrange(2) == 0 else horizontal
        elif can_vertical:
            direction = vertical
        elif can_horizontal:
            direction = horizontal
        else:
            # The bias corner itself is the root of the tree.
            return
        grid.carve(x, y, direction)

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.RUNNING:
            pending = set(self.remaining)
            for x, y in self.grid.coordinates():
                if self.grid.is_empty(x, y):
                    painter.cell(x, y, FIELD_COLOR)
                elif (x, y) in pending:
                    painter.cell(x, y, (*COLORS[1], 77))
        painter.path(self.path)
