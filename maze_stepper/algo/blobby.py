from enum import Enum
from typing import List, Tuple

import numpy as np

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, EMPTY_COLOR
from maze_stepper.core.hex_grid import HexGrid

# Blob board labels
NONE = 0
FIRST = 1
SECOND = 2
OUTSIDE = 3

class BlobbyDivision(Generator):
    """
    Recursive division with organic walls.

    Each region is split by planting two seeds and letting them grow into
    blobs at random, then walling the blobs off from each other with a
    single doorway. Blobs bigger than MIN_BLOB cells are split again.
    """
    NAME = "Blobby Recursive Division"
    MIN_BLOB = 3

    class State(Enum):
        SETUP = 0
        CHOOSING = 1
        EXPANDING = 2
        WALLING = 3
        DONE = 4

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        self.grid.open_all()
        shape = (self.grid.height, self.grid.width)
        # Cells that belong to a blob too small to split any further
        self.finished = np.zeros(shape, dtype=bool)
        self.stack: List[np.ndarray] = []

    def new_board(self) -> np.ndarray:
        board = np.full((self.grid.height, self.grid.width), OUTSIDE, dtype=np.int8)
        for x, y in self.grid.coordinates():
            board[y, x] = NONE
        return board

    def choose_starts(self, board: np.ndarray) -> List[Tuple[int, int]]:
        potentials = [(int(x), int(y)) for y, x in np.argwhere(board == NONE)]
        return self.rng.sample(potentials, 2)

    def expand_blobs(self, board: np.ndarray) -> Tuple[np.ndarray, int]:
        """One synchronous growth round: empty cells may join a neighbouring blob."""
        new_board = board.copy()
        for y, x in np.argwhere(board == NONE):
            x, y = int(x), int(y)
            for nx, ny, _ in self.shuffled(self.grid.get_neighbors(x, y)):
                # Only expand half the time.
                if board[ny, nx] in (FIRST, SECOND) and self.rng.randrange(2) == 0:
                    new_board[y, x] = board[ny, nx]
                    break
        return new_board, int(np.count_nonzero(new_board == NONE))

    def step(self):
        if self.state is self.State.SETUP:
            if self.grid.size >= 2:
                self.stack.append(self.new_board())
            self.state = self.State.CHOOSING
            return

        if not self.stack:
            self.finish()
            return

        if self.state is self.State.CHOOSING:
            board = self.stack[-1]
            (ax, ay), (bx, by) = self.choose_starts(board)
            board[ay, ax] = FIRST
            board[by, bx] = SECOND
            self.state = self.State.EXPANDING
        elif self.state is self.State.EXPANDING:
            board, remaining = self.expand_blobs(self.stack[-1])
            self.stack[-1] = board
            if remaining == 0:
                self.state = self.State.WALLING
        elif self.state is self.State.WALLING:
            self.build_wall(self.stack.pop())
            self.state = self.State.CHOOSING
        else:
            raise RuntimeError(f"Should be unable to hit state {self.state} here")

        self.stack.sort(key=lambda b: int(np.count_nonzero(b == NONE)), reverse=True)

    def build_wall(self, board: np.ndarray):
        grid = self.grid
        walls = []
        for y, x in np.argwhere(board == FIRST):
            x, y = int(x), int(y)
            for nx, ny, dir_bit in grid.get_neighbors(x, y):
                if board[ny, nx] == SECOND:
                    walls.append((x, y, dir_bit))
                    grid.wall(x, y, dir_bit)
        if not walls:
            raise RuntimeError("Blobs grew apart without touching")

        # Carve a door in the wall.
        x, y, dir_bit = self.rng.choice(walls)
        grid.carve(x, y, dir_bit)

        for label in (FIRST, SECOND):
            members = board == label
            if np.count_nonzero(members) > self.MIN_BLOB:
                self.stack.append(np.where(members, NONE, OUTSIDE).astype(np.int8))
            else:
                self.finished |= members

    def draw(self, painter):
        painter.board(self.grid)
        if self.state is self.State.DONE or not self.stack:
            painter.path(self.path)
            return
        colors = {
            NONE: (*COLORS[1], 77),
            FIRST: (*COLORS[2], 77),
            SECOND: (*COLORS[3], 77),
            OUTSIDE: EMPTY_COLOR,
        }
        board = self.stack[-1]
        for x, y in self.grid.coordinates():
            if not self.finished[y, x]:
                painter.cell(x, y, colors[int(board[y, x])])
        painter.path(self.path)

class HexBlobbyDivision(BlobbyDivision):
    NAME = "Hex Blobby Recursive Division"
    GRID = HexGrid
    PLAYABLE = False
    MIN_BLOB = 2
