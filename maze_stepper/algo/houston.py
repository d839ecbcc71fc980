from enum import Enum

from maze_stepper.algo.aldous_broder import AldousBroder
from maze_stepper.algo.base import Generator
from maze_stepper.algo.wilson import WilsonsAlgorithm

# Aldous-Broder is quick while most of the board is empty, Wilson once it is not.
HANDOVER_FILL = 0.3

class Houston(Generator):
    """Aldous-Broder until the board is ~30% filled, then Wilson from a copy of that board."""
    NAME = "Houston"

    class State(Enum):
        SETUP = 0
        RUNNING_ALDOUS_BRODER = 1
        RUNNING_WILSON = 2
        DONE = 3

    def __init__(self, variant: str = None, seed: int = None, columns: int = None, rows: int = None):
        super().__init__(seed, columns, rows)
        self.parse_choice(variant or self.DEFAULT_VARIANT, (self.DEFAULT_VARIANT,))
        # Children get their own streams derived from ours, so a seeded run is reproducible.
        self.aldous_broder = AldousBroder("fast", seed=self.rng.getrandbits(32), columns=columns, rows=rows)
        self.wilson = WilsonsAlgorithm("fast", seed=self.rng.getrandbits(32), columns=columns, rows=rows)
        self.grid = self.aldous_broder.grid

    def new_grid(self):
        # The children own the boards
        return None

    @property
    def active(self) -> Generator:
        if self.state in (self.State.SETUP, self.State.RUNNING_ALDOUS_BRODER):
            return self.aldous_broder
        return self.wilson

    def step(self):
        if self.state is self.State.SETUP:
            self.state = self.State.RUNNING_ALDOUS_BRODER
            self.log.debug("Starting with Aldous-Broder!")
        elif self.state is self.State.RUNNING_ALDOUS_BRODER:
            self.aldous_broder.update()
            if self.aldous_broder.filled() > HANDOVER_FILL or self.aldous_broder.is_done:
                self.log.debug("Switching to Wilson!")
                self.wilson.init_from_grid(self.aldous_broder.get_grid())
                self.grid = self.wilson.grid
                self.state = self.State.RUNNING_WILSON
        elif self.state is self.State.RUNNING_WILSON:
            self.wilson.update()
            if self.wilson.is_done:
                self.finish()

    def draw(self, painter):
        if self.state is self.State.DONE:
            painter.board(self.grid)
            painter.path(self.path)
        else:
            self.active.draw(painter)
