from typing import Dict, Tuple, Type

from maze_stepper.algo.aldous_broder import AldousBroder
from maze_stepper.algo.base import Generator
from maze_stepper.algo.binarytree import BinaryTree
from maze_stepper.algo.blobby import BlobbyDivision, HexBlobbyDivision
from maze_stepper.algo.dfs import HexParallelBacktracker, ParallelBacktracker
from maze_stepper.algo.eller import EllersAlgorithm
from maze_stepper.algo.growingtree import GrowingTree
from maze_stepper.algo.houston import Houston
from maze_stepper.algo.huntandkill import HuntAndKill
from maze_stepper.algo.kruskal import KruskalsAlgorithm
from maze_stepper.algo.origin_shift import OriginShift
from maze_stepper.algo.penrose import PenroseTiling
from maze_stepper.algo.prim import PrimsAlgorithm
from maze_stepper.algo.recdiv import RecursiveDivision
from maze_stepper.algo.sidewinder import Sidewinder
from maze_stepper.algo.wilson import WilsonsAlgorithm

# CLI key -> (class, default variant)
ALGORITHMS: Dict[str, Tuple[Type[Generator], str]] = {
    "backtrack": (ParallelBacktracker, "1"),
    "parallel": (ParallelBacktracker, "3"),
    "hexparallel": (HexParallelBacktracker, "3"),
    "prim": (PrimsAlgorithm, "unused"),
    "kruskal": (KruskalsAlgorithm, "unused"),
    "wilson": (WilsonsAlgorithm, "fast"),
    "aldousbroder": (AldousBroder, "fast"),
    "houston": (Houston, "unused"),
    "eller": (EllersAlgorithm, "unused"),
    "recdiv": (RecursiveDivision, "unused"),
    "blobby": (BlobbyDivision, "unused"),
    "hexblobby": (HexBlobbyDivision, "unused"),
    "growingtree": (GrowingTree, "newest"),
    "bintree": (BinaryTree, "random:NorthWest"),
    "sidewinder": (Sidewinder, "easy"),
    "huntandkill": (HuntAndKill, "unused"),
    "originshift": (OriginShift, "1"),
    "penrose": (PenroseTiling, "kite:5"),
}

def create(name: str, variant: str = None, seed: int = None, columns: int = None, rows: int = None) -> Generator:
    """Builds a fresh generator by CLI key. Unknown keys and bad variants raise ValueError."""
    try:
        cls, default = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm {name!r}, expected one of {', '.join(ALGORITHMS)}") from None
    return cls(variant=default if variant is None else variant, seed=seed, columns=columns, rows=rows)
