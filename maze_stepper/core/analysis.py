from collections import deque
from typing import List, Tuple

from maze_stepper.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def popcount(val: int) -> int:
        c = 0
        while val:
            val &= val - 1
            c += 1
        return c

    @staticmethod
    def asymmetries(grid: Grid) -> List[Tuple[int, int, int]]:
        """
        Returns every (x, y, dir_bit) whose passage is open on one side only.
        A passage leading off the board counts as an asymmetry too.
        """
        broken = []
        for x, y in grid.coordinates():
            for dir_bit in grid.directions(grid.cells[y * grid.width + x]):
                target = grid.neighbor(x, y, dir_bit)
                if target is None or not grid.has(target[0], target[1], grid.OPPOSITE[dir_bit]):
                    broken.append((x, y, dir_bit))
        return broken

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        return not MazeAnalyzer.asymmetries(grid)

    @staticmethod
    def passage_count(grid: Grid) -> int:
        # Every passage is stored on both of its cells.
        total = sum(MazeAnalyzer.popcount(grid.cells[y * grid.width + x])
                    for x, y in grid.coordinates())
        return total // 2

    @staticmethod
    def components(grid: Grid) -> int:
        seen = set()
        count = 0
        for start in grid.coordinates():
            if start in seen:
                continue
            count += 1
            seen.add(start)
            queue = deque([start])
            while queue:
                cx, cy = queue.popleft()
                for nxt in grid.get_open_neighbors(cx, cy):
                    if nxt not in seen:
                        seen.add(nxt)
                        queue.append(nxt)
        return count

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        return MazeAnalyzer.components(grid) == 1

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected and cycle free: a spanning tree of the board."""
        return (MazeAnalyzer.is_connected(grid)
                and MazeAnalyzer.passage_count(grid) == grid.size - 1)

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0
        junctions = 0
        isolated = 0

        for x, y in grid.coordinates():
            exits = MazeAnalyzer.popcount(grid.cells[y * grid.width + x])
            if exits == 0: isolated += 1
            elif exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            else: junctions += 1

        total = grid.size
        return {
            "cells": total,
            "passages": MazeAnalyzer.passage_count(grid),
            "components": MazeAnalyzer.components(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
