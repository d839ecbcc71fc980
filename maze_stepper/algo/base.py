import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from maze_stepper.core.grid import Grid

class Phase(Enum):
    """Lifecycle every algorithm-specific state machine reduces to."""
    SETUP = "setup"
    RUNNING = "running"
    DONE = "done"

class Generator(ABC):
    """
    Incremental maze generator.

    Subclasses declare a local ``State`` enum that has at least SETUP and DONE
    members, and implement ``step()``. The harness calls ``update()`` once per
    tick; each call does one bounded unit of work on ``self.grid``.
    """
    NAME = "Generator"
    DEFAULT_VARIANT = "unused"
    GRID = Grid
    # Rectangular boards start the interactive path at the top-left cell.
    PLAYABLE = True

    class State(Enum):
        SETUP = 0
        DONE = 1

    def __init__(self, seed: int = None, columns: int = None, rows: int = None):
        self.seed = seed
        self.columns = columns
        self.rows = rows
        self.rng = random.Random(seed)
        self.step_count = 0
        self.path: List[Tuple[int, int]] = []
        self.state = self.State.SETUP
        self.grid = self.new_grid()
        self.log = logging.getLogger(type(self).__module__)

    def new_grid(self) -> Grid:
        kwargs = {}
        if self.columns is not None:
            kwargs["width"] = self.columns
        if self.rows is not None:
            kwargs["height"] = self.rows
        return self.GRID(**kwargs)

    # -- contract ----------------------------------------------------------

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def variant(self) -> str:
        return self.DEFAULT_VARIANT

    @property
    def phase(self) -> Phase:
        if self.state.name == "SETUP":
            return Phase.SETUP
        if self.state.name == "DONE":
            return Phase.DONE
        return Phase.RUNNING

    @property
    def is_done(self) -> bool:
        return self.state is self.State.DONE

    def reinit(self, variant: str = None, seed: int = None):
        """
        Throws the whole instance state away and rebuilds it from the constructor.
        Keeps the current variant and seed unless new ones are given.
        """
        fresh = type(self)(
            variant=self.variant if variant is None else variant,
            seed=self.seed if seed is None else seed,
            columns=self.columns,
            rows=self.rows,
        )
        self.__dict__.clear()
        self.__dict__.update(fresh.__dict__)

    def update(self):
        if self.is_done:
            return
        self.step_count += 1
        self.step()

    @abstractmethod
    def step(self):
        """One unit of work. Must eventually call finish()."""
        pass

    def draw(self, painter):
        """Pure: paints the current state, never touches it."""
        painter.board(self.grid)
        painter.path(self.path)

    def finish(self):
        self.state = self.State.DONE
        if self.PLAYABLE:
            self.path = [(0, 0)]
        self.log.info(f"{self.name} done after {self.step_count} updates")

    # -- driving helpers ---------------------------------------------------

    def run(self) -> Iterator[str]:
        """Yields the state name after every update until the algorithm is done."""
        while not self.is_done:
            self.update()
            yield self.state.name

    def run_all(self, max_updates: int = None) -> int:
        """Helper to run the generator to completion. Returns the number of updates."""
        count = 0
        for _ in self.run():
            count += 1
            if max_updates is not None and count >= max_updates and not self.is_done:
                raise RuntimeError(f"{self.name} not done after {max_updates} updates")
        return count

    # -- interactive path --------------------------------------------------

    def move_to(self, cell: Optional[Tuple[int, int]]) -> bool:
        """
        Extends the path to an adjacent cell through an open passage, or
        steps back along it when that cell is already on the path.
        """
        if not self.is_done or not self.path or cell is None:
            return False
        grid = self.grid
        if not grid.contains(*cell):
            return False
        last = self.path[-1]
        dir_bit = grid.direction_between(last, cell)
        if dir_bit is None or not grid.has(last[0], last[1], dir_bit):
            return False
        if cell in self.path:
            del self.path[self.path.index(cell) + 1:]
        else:
            self.path.append(cell)
        return True

    # -- shared randomness -------------------------------------------------

    def random_cell(self) -> Tuple[int, int]:
        grid = self.grid
        while True:
            x = self.rng.randrange(grid.width)
            y = self.rng.randrange(grid.height)
            if grid.contains(x, y):
                return (x, y)

    def shuffled(self, items: Iterable) -> list:
        items = list(items)
        self.rng.shuffle(items)
        return items

    # -- variant parsing ---------------------------------------------------

    @staticmethod
    def parse_choice(variant: str, choices) -> str:
        if variant not in choices:
            raise ValueError(f"Unknown variant {variant!r}, expected one of {', '.join(choices)}")
        return variant

    @staticmethod
    def parse_int(variant: str, low: int, high: int = None) -> int:
        try:
            value = int(variant)
        except (TypeError, ValueError):
            raise ValueError(f"Variant {variant!r} is not an integer") from None
        if value < low or (high is not None and value > high):
            bound = f"between {low} and {high}" if high is not None else f"at least {low}"
            raise ValueError(f"Variant {value} must be {bound}")
        return value
