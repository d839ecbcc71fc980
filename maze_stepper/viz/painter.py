import math
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

import pygame

from maze_stepper.config import CELL_WIDTH, LINE_WIDTH, OFFSET, PATH_COLOR, WALL_COLOR
from maze_stepper.core.grid import Grid
from maze_stepper.core.hex_grid import HexGrid

Color = Tuple[int, ...]

SQRT3 = math.sqrt(3)

class Painter(ABC):
    """
    Drawing surface the generators paint on. Coordinates are cells, colours
    are RGB or RGBA tuples. Implementations own the pixel geometry.
    """

    @abstractmethod
    def board(self, grid: Grid):
        """Walls of every cell. Also fixes the geometry for the calls that follow."""
        pass

    @abstractmethod
    def cell(self, x: int, y: int, color: Color, inset: float = 0.0):
        pass

    @abstractmethod
    def band(self, x: int, y: int, width: int, height: int, color: Color):
        """Rectangle of cells on a square board."""
        pass

    @abstractmethod
    def arrow(self, x: int, y: int, dir_bit: int, color: Color):
        pass

    @abstractmethod
    def path(self, cells: Sequence[Tuple[int, int]]):
        pass

    @abstractmethod
    def triangle(self, points: Sequence[complex], color: Color):
        """Triangle in unit disc coordinates, for drawings that have no grid."""
        pass

class PygamePainter(Painter):
    """Paints onto a pygame surface, scaling the board to fit it."""

    def __init__(self, surface: pygame.Surface, hud_height: int = 0):
        self.surface = surface
        self.hud_height = hud_height
        self.grid: Optional[Grid] = None
        self.scale = 1.0
        self.origin = (0.0, 0.0)

    # -- geometry ----------------------------------------------------------

    def fit(self, grid: Grid):
        """Picks scale and origin so the whole board fits below the HUD."""
        self.grid = grid
        width, height = self.surface.get_size()
        height -= self.hud_height
        if isinstance(grid, HexGrid):
            centers = [self.hex_offset(x, y) for x, y in grid.coordinates()]
            min_x = min(cx for cx, _ in centers) - SQRT3 / 2
            max_x = max(cx for cx, _ in centers) + SQRT3 / 2
            min_y = min(cy for _, cy in centers) - 1.0
            max_y = max(cy for _, cy in centers) + 1.0
        else:
            min_x, max_x, min_y, max_y = 0.0, float(grid.width), 0.0, float(grid.height)

        span_x = max_x - min_x
        span_y = max_y - min_y
        self.scale = min((width - 2 * OFFSET) / span_x, (height - 2 * OFFSET) / span_y)
        self.origin = (
            (width - span_x * self.scale) / 2 - min_x * self.scale,
            self.hud_height + (height - span_y * self.scale) / 2 - min_y * self.scale,
        )

    @staticmethod
    def hex_offset(x: int, y: int) -> Tuple[float, float]:
        """Centre of an axial hex cell for a circumradius of 1 (pointy top)."""
        return SQRT3 * x + SQRT3 / 2 * y, 1.5 * y

    def line_width(self) -> int:
        return max(1, round(LINE_WIDTH * self.scale / CELL_WIDTH))

    def center(self, x: int, y: int) -> Tuple[float, float]:
        ox, oy = self.origin
        if isinstance(self.grid, HexGrid):
            hx, hy = self.hex_offset(x, y)
            return ox + hx * self.scale, oy + hy * self.scale
        return ox + (x + 0.5) * self.scale, oy + (y + 0.5) * self.scale

    def hex_corner(self, x: int, y: int, i: int, inset: float = 0.0) -> Tuple[float, float]:
        cx, cy = self.center(x, y)
        angle = math.radians(60 * i - 30)
        radius = self.scale - inset
        return cx + radius * math.cos(angle), cy + radius * math.sin(angle)

    def cell_at(self, px: float, py: float) -> Optional[Tuple[int, int]]:
        """Square board cell under a pixel, or None."""
        if self.grid is None or isinstance(self.grid, HexGrid):
            return None
        ox, oy = self.origin
        x = math.floor((px - ox) / self.scale)
        y = math.floor((py - oy) / self.scale)
        if not self.grid.contains(x, y):
            return None
        return (x, y)

    # -- primitives --------------------------------------------------------

    def fill_polygon(self, points: Sequence[Tuple[float, float]], color: Color):
        if len(color) == 3:
            pygame.draw.polygon(self.surface, color, points)
            return
        # pygame.draw writes alpha as-is, so blend through a scratch surface.
        min_x = math.floor(min(px for px, _ in points))
        min_y = math.floor(min(py for _, py in points))
        max_x = math.ceil(max(px for px, _ in points))
        max_y = math.ceil(max(py for _, py in points))
        scratch = pygame.Surface((max_x - min_x + 1, max_y - min_y + 1), pygame.SRCALPHA)
        pygame.draw.polygon(scratch, color, [(px - min_x, py - min_y) for px, py in points])
        self.surface.blit(scratch, (min_x, min_y))

    def rect_points(self, x: float, y: float, width: float, height: float, inset: float = 0.0):
        ox, oy = self.origin
        left = ox + x * self.scale + inset
        top = oy + y * self.scale + inset
        right = ox + (x + width) * self.scale - inset
        bottom = oy + (y + height) * self.scale - inset
        return [(left, top), (right, top), (right, bottom), (left, bottom)]

    # -- Painter -----------------------------------------------------------

    def board(self, grid: Grid):
        if grid is not self.grid:
            self.fit(grid)
        if isinstance(grid, HexGrid):
            self.hex_board(grid)
        else:
            self.square_board(grid)

    def square_board(self, grid: Grid):
        width = self.line_width()
        last = (grid.width - 1, grid.height - 1)
        for x, y in grid.coordinates():
            (left, top), (right, _), (_, bottom), _ = self.rect_points(x, y, 1, 1)
            # The top-left and bottom-right cells keep their outer wall open as entrance and exit.
            if not grid.has(x, y, grid.NORTH):
                pygame.draw.line(self.surface, WALL_COLOR, (left, top), (right, top), width)
            if not grid.has(x, y, grid.EAST) and (x, y) != last:
                pygame.draw.line(self.surface, WALL_COLOR, (right, top), (right, bottom), width)
            if not grid.has(x, y, grid.SOUTH):
                pygame.draw.line(self.surface, WALL_COLOR, (left, bottom), (right, bottom), width)
            if not grid.has(x, y, grid.WEST) and (x, y) != (0, 0):
                pygame.draw.line(self.surface, WALL_COLOR, (left, top), (left, bottom), width)

    # Wall edge for each hex direction, as a pair of corner indices
    HEX_EDGES = {
        HexGrid.NORTH_EAST: (5, 0),
        HexGrid.EAST: (0, 1),
        HexGrid.SOUTH_EAST: (1, 2),
        HexGrid.SOUTH_WEST: (2, 3),
        HexGrid.WEST: (3, 4),
        HexGrid.NORTH_WEST: (4, 5),
    }

    def hex_board(self, grid: HexGrid):
        width = self.line_width()
        for x, y in grid.coordinates():
            for dir_bit, (a, b) in self.HEX_EDGES.items():
                if not grid.has(x, y, dir_bit):
                    pygame.draw.line(self.surface, WALL_COLOR, self.hex_corner(x, y, a), self.hex_corner(x, y, b), width)

    def cell(self, x: int, y: int, color: Color, inset: float = 0.0):
        inset *= self.scale / CELL_WIDTH
        if isinstance(self.grid, HexGrid):
            self.fill_polygon([self.hex_corner(x, y, i, inset) for i in range(6)], color)
        else:
            self.fill_polygon(self.rect_points(x, y, 1, 1, inset), color)

    def band(self, x: int, y: int, width: int, height: int, color: Color):
        if width <= 0 or height <= 0:
            return
        self.fill_polygon(self.rect_points(x, y, width, height), color)

    def arrow(self, x: int, y: int, dir_bit: int, color: Color):
        grid = self.grid
        cx, cy = self.center(x, y)
        tx, ty = self.center(x + grid.DX[dir_bit], y + grid.DY[dir_bit])
        # Shaft runs from the cell centre to the shared wall.
        hx, hy = (cx + tx) / 2, (cy + ty) / 2
        pygame.draw.line(self.surface, color[:3], (cx, cy), (hx, hy), self.line_width())
        angle = math.atan2(hy - cy, hx - cx)
        size = self.scale * 0.25
        left = (hx - size * math.cos(angle - math.pi / 6), hy - size * math.sin(angle - math.pi / 6))
        right = (hx - size * math.cos(angle + math.pi / 6), hy - size * math.sin(angle + math.pi / 6))
        self.fill_polygon([(hx, hy), left, right], color)

    def path(self, cells: Sequence[Tuple[int, int]]):
        if not cells:
            return
        points = [self.center(x, y) for x, y in cells]
        width = self.line_width() * 2
        if len(points) > 1:
            pygame.draw.lines(self.surface, PATH_COLOR, False, points, width)
        pygame.draw.circle(self.surface, PATH_COLOR, points[-1], width)

    def triangle(self, points: Sequence[complex], color: Color):
        width, height = self.surface.get_size()
        height -= self.hud_height
        radius = min(width, height) / 2 - OFFSET
        cx, cy = width / 2, self.hud_height + height / 2
        pixels = [(cx + p.real * radius, cy + p.imag * radius) for p in points]
        self.fill_polygon(pixels, color)
        a, b, c = pixels
        pygame.draw.lines(self.surface, WALL_COLOR, False, [c, a, b], 1)

    def resize(self, surface: pygame.Surface):
        self.surface = surface
        if self.grid is not None:
            self.fit(self.grid)

