from enum import Enum
from typing import List, Optional, Tuple

from maze_stepper.algo.base import Generator
from maze_stepper.config import COLORS, LINE_WIDTH, MAX_SEEDS
from maze_stepper.core.disjoint_set import DisjointSet
from maze_stepper.core.hex_grid import HexGrid

class ParallelBacktracker(Generator):
    """
    Recursive backtracker grown from one or more seeds at once.

    Every update advances each seed's stack by one carve (round robin). When a
    seed runs into territory claimed by another seed group, the two groups are
    merged and exactly one passage is opened between them, so the result stays
    a spanning tree.
    """
    NAME = "Backtrack"
    PARALLEL_NAME = "Parallel Backtrack"
    DEFAULT_VARIANT = "1"

    class State(Enum):
        SETUP = 0
        RUNNING = 1
        DONE = 2

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        if variant is None:
            variant = self.DEFAULT_VARIANT
        self.seeds = self.parse_int(variant, 1, MAX_SEEDS)
        if self.grid.size < self.seeds:
            raise ValueError(f"{self.seeds} seeds do not fit on a {self.grid.size}-cell board")
        # Which seed claimed each cell (flat index), None = unclaimed
        self.owners: List[Optional[int]] = [None] * len(self.grid.cells)
        self.groups = DisjointSet()
        # Stack entries: (x, y, directions not tried yet). Top of stack = end of list.
        self.stacks: List[List[Tuple[int, int, int]]] = [[] for _ in range(self.seeds)]

    @property
    def name(self) -> str:
        return self.NAME if self.seeds == 1 else self.PARALLEL_NAME

    @property
    def variant(self) -> str:
        return str(self.seeds)

    def step(self):
        grid = self.grid

        if self.state is self.State.SETUP:
            for i, (x, y) in enumerate(self.rng.sample(list(grid.coordinates()), self.seeds)):
                self.stacks[i].append((x, y, grid.ALL))
                self.owners[y * grid.width + x] = i
                self.groups.add(i)
            self.state = self.State.RUNNING
            return

        if not any(self.stacks):
            self.finish()
            return

        for i, stack in enumerate(self.stacks):
            while stack:
                x, y, remaining = stack.pop()
                if not remaining:
                    # Exhausted cell: backtracking is this seed's unit of work.
                    break
                direction = self.rng.choice(grid.directions(remaining))
                stack.append((x, y, remaining & ~direction))

                target = grid.neighbor(x, y, direction)
                if target is None:
                    continue
                nx, ny = target
                owner = self.owners[ny * grid.width + nx]
                if owner is None:
                    grid.carve(x, y, direction)
                    self.owners[ny * grid.width + nx] = i
                    stack.append((nx, ny, grid.ALL & ~grid.OPPOSITE[direction]))
                    break
                if self.groups.union(i, owner):
                    # Two fronts met: one passage joins their trees.
                    grid.carve(x, y, direction)
                    self.log.debug(f"Seed {i} met seed {owner} at ({nx}, {ny})")

    def draw(self, painter):
        painter.board(self.grid)
        for i, stack in enumerate(self.stacks):
            color = COLORS[(i + 1) % len(COLORS)]
            for depth, (x, y, _) in enumerate(reversed(stack)):
                if depth == 0:
                    painter.cell(x, y, color, inset=LINE_WIDTH)
                else:
                    painter.cell(x, y, (*color, 128))
        painter.path(self.path)

class HexParallelBacktracker(ParallelBacktracker):
    NAME = "Hex Backtrack"
    PARALLEL_NAME = "Parallel Hex Backtrack"
    GRID = HexGrid
    PLAYABLE = False
